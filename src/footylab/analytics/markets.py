"""Per-market success, ROI and trend aggregation."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from footylab.analytics.types import (
    ALL_MARKETS,
    ActualResult,
    Market,
    MarketStat,
    MatchRecord,
    Prediction,
    Trend,
)
from footylab.analytics.utils import round2, round_half_up

RECENT_WINDOW = 10
TREND_THRESHOLD = 5.0

_OUTCOMES: dict[Market, Callable[[ActualResult], bool]] = {
    Market.HOME_WIN: lambda r: r.home_goals > r.away_goals,
    Market.DRAW: lambda r: r.home_goals == r.away_goals,
    Market.AWAY_WIN: lambda r: r.away_goals > r.home_goals,
    Market.BTTS: lambda r: r.home_goals > 0 and r.away_goals > 0,
    Market.OVER_25: lambda r: (r.home_goals + r.away_goals) > 2.5,
}


def is_prediction_correct(result: ActualResult, market: Market | str) -> bool:
    """Return whether ``market`` settled as a win for ``result``; unknown markets never win."""

    try:
        outcome = _OUTCOMES[Market(market)]
    except ValueError:
        return False
    return outcome(result)


def aligned_pairs(
    predictions: Sequence[Prediction],
    results: Sequence[ActualResult | None],
) -> Iterator[tuple[int, Prediction, ActualResult]]:
    """Yield ``(index, prediction, result)`` for every index that has both."""

    for index, prediction in enumerate(predictions[: len(results)]):
        result = results[index]
        if prediction is None or result is None:
            continue
        yield index, prediction, result


def empty_market_stats(market: Market) -> MarketStat:
    return MarketStat(
        market=Market(market),
        total_matches=0,
        successful_bets=0,
        success_rate=0.0,
        average_odds=0.0,
        profit_loss=0.0,
        roi=0.0,
        confidence=0,
        trend=Trend.STABLE,
    )


def classify_trend(overall_rate: float, recent_rate: float) -> Trend:
    difference = recent_rate - overall_rate
    if difference > TREND_THRESHOLD:
        return Trend.IMPROVING
    if difference < -TREND_THRESHOLD:
        return Trend.DECLINING
    return Trend.STABLE


def market_confidence(success_rate: float, sample_size: int) -> int:
    base = min(success_rate, 90)
    sample_bonus = min(sample_size / 10, 10)
    return int(min(100, round_half_up(base + sample_bonus)))


def compute_market_stats(
    matches: Sequence[MatchRecord],
    market: Market,
    predictions: Sequence[Prediction],
    results: Sequence[ActualResult | None],
    stake: float = 1.0,
) -> MarketStat:
    """Aggregate how betting ``market`` on every aligned prediction would have performed."""

    if not matches or not predictions:
        return empty_market_stats(market)

    outcomes: list[bool] = []
    total_odds = 0.0
    total_stake = 0.0
    total_return = 0.0
    for _, prediction, result in aligned_pairs(predictions[: len(matches)], results):
        won = is_prediction_correct(result, market)
        total_stake += stake
        if won:
            total_return += stake * prediction.odds
        total_odds += prediction.odds
        outcomes.append(won)

    if not outcomes:
        return empty_market_stats(market)

    sample = len(outcomes)
    successful = sum(outcomes)
    success_rate = successful / sample * 100
    profit_loss = total_return - total_stake
    roi = profit_loss / total_stake * 100 if total_stake > 0 else 0.0

    recent = outcomes[-RECENT_WINDOW:]
    recent_rate = sum(recent) / len(recent) * 100

    return MarketStat(
        market=Market(market),
        total_matches=sample,
        successful_bets=successful,
        success_rate=round2(success_rate),
        average_odds=round2(total_odds / sample),
        profit_loss=round2(profit_loss),
        roi=round2(roi),
        confidence=market_confidence(success_rate, sample),
        trend=classify_trend(success_rate, recent_rate),
    )


def compute_all_market_stats(
    matches: Sequence[MatchRecord],
    predictions: Sequence[Prediction],
    results: Sequence[ActualResult | None],
    markets: Sequence[Market] = ALL_MARKETS,
) -> list[MarketStat]:
    return [compute_market_stats(matches, market, predictions, results) for market in markets]
