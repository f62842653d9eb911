"""Betting market analysis combining every analytics component."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from footylab.analytics.accuracy import compute_accuracy
from footylab.analytics.insights import generate_insights
from footylab.analytics.markets import compute_all_market_stats
from footylab.analytics.strategies import generate_strategies
from footylab.analytics.types import (
    ALL_MARKETS,
    AccuracyReport,
    ActualResult,
    BookmakerOdds,
    Insights,
    Market,
    MarketStat,
    MatchRecord,
    Prediction,
    Strategy,
    Team,
    Trend,
    ValueBetOpportunity,
)
from footylab.analytics.utils import round2
from footylab.analytics.value_bets import identify_value_bets
from footylab.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

NOT_AVAILABLE = "N/A"
FALLBACK_STRATEGY = "Conservative Value"


@dataclass
class BettingDataset:
    """Aligned input slices: index ``i`` of every list belongs to ``matches[i]``."""

    matches: list[MatchRecord]
    predictions: list[Prediction]
    results: list[ActualResult | None] = field(default_factory=list)
    bookmaker_odds: list[BookmakerOdds | None] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    markets: list[Market] = field(default_factory=lambda: list(ALL_MARKETS))


@dataclass
class AnalysisOptions:
    include_value_bets: bool = False
    include_accuracy: bool = False
    include_strategies: bool = False
    include_insights: bool = False
    min_value: float = settings.min_value
    max_results: int = settings.max_value_bets


@dataclass
class BettingSummary:
    total_matches: int
    best_market: str
    worst_market: str
    overall_roi: float
    recommended_strategy: str


@dataclass
class PerformanceTrends:
    overall_trend: Trend
    best_trending_market: str
    worst_trending_market: str


@dataclass
class DetailedBettingAnalysis:
    market_stats: list[MarketStat]
    summary: BettingSummary
    trends: PerformanceTrends
    value_bets: list[ValueBetOpportunity] | None = None
    accuracy: AccuracyReport | None = None
    strategies: list[Strategy] | None = None
    insights: Insights | None = None


def summarize_markets(
    market_stats: Sequence[MarketStat],
    strategies: Sequence[Strategy] | None = None,
) -> BettingSummary:
    by_roi = sorted(market_stats, key=lambda stat: stat.roi, reverse=True)
    overall_roi = sum(stat.roi for stat in market_stats) / len(market_stats) if market_stats else 0.0
    return BettingSummary(
        total_matches=sum(stat.total_matches for stat in market_stats),
        best_market=by_roi[0].market.value if by_roi else NOT_AVAILABLE,
        worst_market=by_roi[-1].market.value if by_roi else NOT_AVAILABLE,
        overall_roi=round2(overall_roi),
        recommended_strategy=strategies[0].name if strategies else FALLBACK_STRATEGY,
    )


def performance_trends(market_stats: Sequence[MarketStat]) -> PerformanceTrends:
    improving = [stat.market.value for stat in market_stats if stat.trend == Trend.IMPROVING]
    declining = [stat.market.value for stat in market_stats if stat.trend == Trend.DECLINING]
    return PerformanceTrends(
        overall_trend=Trend.IMPROVING if len(improving) > len(declining) else Trend.STABLE,
        best_trending_market=improving[0] if improving else NOT_AVAILABLE,
        worst_trending_market=declining[0] if declining else NOT_AVAILABLE,
    )


def analyze_betting_markets(
    dataset: BettingDataset,
    options: AnalysisOptions | None = None,
) -> DetailedBettingAnalysis:
    """Run market stats plus the optional components requested in ``options``."""

    options = options or AnalysisOptions()
    logger.info(
        "Analyzing %d matches across %d markets",
        len(dataset.matches),
        len(dataset.markets),
    )
    market_stats = compute_all_market_stats(
        dataset.matches,
        dataset.predictions,
        dataset.results,
        markets=dataset.markets,
    )

    value_bets = None
    if options.include_value_bets:
        value_bets = identify_value_bets(
            dataset.matches,
            dataset.predictions,
            dataset.bookmaker_odds,
            min_value=options.min_value,
        )[: options.max_results]
        logger.info("Found %d value bets at min value %.1f%%", len(value_bets), options.min_value)

    accuracy = None
    if options.include_accuracy:
        accuracy = compute_accuracy(dataset.predictions, dataset.results)

    strategies = None
    if options.include_strategies:
        strategies = generate_strategies(market_stats)

    insights = None
    if options.include_insights:
        insights = generate_insights(
            market_stats,
            dataset.matches,
            dataset.teams,
            predictions=dataset.predictions,
            results=dataset.results,
        )

    return DetailedBettingAnalysis(
        market_stats=market_stats,
        summary=summarize_markets(market_stats, strategies),
        trends=performance_trends(market_stats),
        value_bets=value_bets,
        accuracy=accuracy,
        strategies=strategies,
        insights=insights,
    )
