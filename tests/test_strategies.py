"""Strategy generation tests."""

from __future__ import annotations

from footylab.analytics.strategies import generate_strategies
from footylab.analytics.types import Market, MarketStat, RiskLevel, Trend


def _stat(market: Market, success_rate: float, roi: float) -> MarketStat:
    return MarketStat(
        market=market,
        total_matches=50,
        successful_bets=int(success_rate / 2),
        success_rate=success_rate,
        average_odds=2.0,
        profit_loss=roi / 2,
        roi=roi,
        confidence=60,
        trend=Trend.STABLE,
    )


def test_no_qualifying_markets_gives_no_strategies() -> None:
    stats = [_stat(Market.HOME_WIN, 40, -5), _stat(Market.DRAW, 70, 0)]
    assert generate_strategies(stats) == []
    assert generate_strategies([]) == []


def test_all_strategies_in_fixed_order() -> None:
    strategies = generate_strategies([_stat(Market.BTTS, 70, 20)])
    assert [s.name for s in strategies] == [
        "Conservative Value",
        "High Value Hunter",
        "Balanced Approach",
    ]
    assert [s.risk_level for s in strategies] == [RiskLevel.LOW, RiskLevel.HIGH, RiskLevel.MEDIUM]
    assert [s.expected_roi for s in strategies] == [8, 25, 12]

    conservative = strategies[0].criteria
    assert conservative.min_confidence == 75
    assert conservative.min_value == 10
    assert conservative.max_odds == 2.5
    assert conservative.team_form_required and conservative.h2h_required


def test_markets_filtered_per_strategy() -> None:
    stats = [
        _stat(Market.HOME_WIN, 65, 10),
        _stat(Market.DRAW, 30, 20),
        _stat(Market.OVER_25, 56, 1),
    ]
    by_name = {s.name: s.markets for s in generate_strategies(stats)}
    assert by_name == {
        "Conservative Value": [Market.HOME_WIN],
        "High Value Hunter": [Market.DRAW],
        "Balanced Approach": [Market.HOME_WIN, Market.OVER_25],
    }


def test_criteria_are_not_shared_between_calls() -> None:
    first = generate_strategies([_stat(Market.HOME_WIN, 65, 10)])
    first[0].criteria.max_odds = 99
    second = generate_strategies([_stat(Market.HOME_WIN, 65, 10)])
    assert second[0].criteria.max_odds == 2.5
