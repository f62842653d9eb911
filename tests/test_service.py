"""Betting analysis service tests."""

from __future__ import annotations

from datetime import date

from footylab.analytics import service
from footylab.analytics.types import (
    ActualResult,
    BookmakerOdds,
    Market,
    MarketStat,
    MatchRecord,
    Prediction,
    RiskLevel,
    Strategy,
    StrategyCriteria,
    Team,
    Trend,
)


def _stat(market: Market, roi: float, trend: Trend = Trend.STABLE, total: int = 10) -> MarketStat:
    return MarketStat(
        market=market,
        total_matches=total,
        successful_bets=5,
        success_rate=50,
        average_odds=2.0,
        profit_loss=roi / 10,
        roi=roi,
        confidence=60,
        trend=trend,
    )


def _dataset() -> service.BettingDataset:
    matches = [
        MatchRecord(id=idx, home_team_id=idx % 3, away_team_id=idx % 3 + 3, date=date(2024, 1 + idx % 2, 5))
        for idx in range(1, 9)
    ]
    predictions = [
        Prediction(home_win=60, draw=25, away_win=15, btts=55, over25=65, odds=2.1, confidence=75)
        for _ in matches
    ]
    results = [ActualResult(idx % 3, idx % 2) for idx in range(len(matches))]
    odds = [BookmakerOdds(home_win=2.2, draw=3.4, away_win=5.0, btts=1.9, over25=1.8) for _ in matches]
    teams = [Team(idx, f"Club {idx}") for idx in range(6)]
    return service.BettingDataset(
        matches=matches,
        predictions=predictions,
        results=results,
        bookmaker_odds=odds,
        teams=teams,
    )


def test_summary_of_empty_stats() -> None:
    summary = service.summarize_markets([])
    assert summary.total_matches == 0
    assert summary.best_market == "N/A"
    assert summary.worst_market == "N/A"
    assert summary.overall_roi == 0
    assert summary.recommended_strategy == "Conservative Value"


def test_summary_picks_best_and_worst() -> None:
    stats = [_stat(Market.HOME_WIN, 4), _stat(Market.DRAW, -8), _stat(Market.BTTS, 13, total=5)]
    strategy = Strategy(
        name="High Value Hunter",
        description="",
        markets=[Market.BTTS],
        criteria=StrategyCriteria(60, 20, 10, False, False),
        expected_roi=25,
        risk_level=RiskLevel.HIGH,
    )
    summary = service.summarize_markets(stats, [strategy])
    assert summary.total_matches == 25
    assert summary.best_market == "btts"
    assert summary.worst_market == "draw"
    assert summary.overall_roi == 3.0
    assert summary.recommended_strategy == "High Value Hunter"


def test_performance_trends() -> None:
    stats = [
        _stat(Market.DRAW, 0, Trend.IMPROVING),
        _stat(Market.BTTS, 0, Trend.DECLINING),
        _stat(Market.OVER_25, 0, Trend.IMPROVING),
    ]
    trends = service.performance_trends(stats)
    assert trends.overall_trend == Trend.IMPROVING
    assert trends.best_trending_market == "draw"
    assert trends.worst_trending_market == "btts"

    flat = service.performance_trends([_stat(Market.DRAW, 0)])
    assert flat.overall_trend == Trend.STABLE
    assert flat.best_trending_market == "N/A"


def test_default_analysis_only_has_market_stats() -> None:
    analysis = service.analyze_betting_markets(_dataset())
    assert [s.market for s in analysis.market_stats] == list(Market)
    assert analysis.summary.total_matches == 8 * 5
    assert analysis.value_bets is None
    assert analysis.accuracy is None
    assert analysis.strategies is None
    assert analysis.insights is None


def test_full_analysis() -> None:
    options = service.AnalysisOptions(
        include_value_bets=True,
        include_accuracy=True,
        include_strategies=True,
        include_insights=True,
        min_value=0,
        max_results=3,
    )
    analysis = service.analyze_betting_markets(_dataset(), options)
    assert len(analysis.value_bets) == 3
    assert analysis.accuracy.total_predictions == 40
    assert analysis.strategies is not None
    assert [t.month for t in analysis.insights.seasonal_trends] == ["2024-01", "2024-02"]
    assert analysis.insights.team_specific_insights


def test_market_subset() -> None:
    dataset = _dataset()
    dataset.markets = [Market.OVER_25, Market.DRAW]
    analysis = service.analyze_betting_markets(dataset)
    assert [s.market for s in analysis.market_stats] == [Market.OVER_25, Market.DRAW]
