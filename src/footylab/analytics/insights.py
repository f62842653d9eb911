"""Streaks, seasonal trends and team-specific betting insights."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pandas as pd

from footylab.analytics.markets import aligned_pairs, is_prediction_correct
from footylab.analytics.types import (
    ActualResult,
    ColdStreak,
    HotStreak,
    Insights,
    Market,
    MarketStat,
    MatchRecord,
    Prediction,
    SeasonalTrend,
    Team,
    TeamInsight,
    Trend,
)
from footylab.analytics.utils import percentage, round2
from footylab.config import get_settings

settings = get_settings()

PERFORMANCE_SLOTS = 3
TEAM_MARKET_SLOTS = 2
BET_COLUMNS = ["match_id", "month", "home_team_id", "away_team_id", "market", "won", "stake", "returns"]


def hot_streaks(market_stats: Sequence[MarketStat]) -> list[HotStreak]:
    return [
        HotStreak(
            market=stat.market,
            consecutive_wins=math.floor(stat.success_rate / 10),
            current_streak=math.floor(stat.success_rate / 15),
        )
        for stat in market_stats
        if stat.trend == Trend.IMPROVING and stat.success_rate > 60
    ]


def cold_streaks(market_stats: Sequence[MarketStat]) -> list[ColdStreak]:
    return [
        ColdStreak(
            market=stat.market,
            consecutive_losses=math.floor((100 - stat.success_rate) / 10),
            current_streak=math.floor((100 - stat.success_rate) / 15),
        )
        for stat in market_stats
        if stat.trend == Trend.DECLINING and stat.success_rate < 40
    ]


def settled_bets_frame(
    market_stats: Sequence[MarketStat],
    matches: Sequence[MatchRecord],
    predictions: Sequence[Prediction],
    results: Sequence[ActualResult | None],
) -> pd.DataFrame:
    """One row per (match, market) unit-stake bet settled at the prediction's odds."""

    markets = list(dict.fromkeys(stat.market for stat in market_stats))
    rows: list[dict] = []
    for index, prediction, result in aligned_pairs(predictions[: len(matches)], results):
        match = matches[index]
        for market in markets:
            won = is_prediction_correct(result, market)
            rows.append(
                {
                    "match_id": match.id,
                    "month": match.date.strftime("%Y-%m") if match.date else None,
                    "home_team_id": match.home_team_id,
                    "away_team_id": match.away_team_id,
                    "market": Market(market).value,
                    "won": int(won),
                    "stake": 1.0,
                    "returns": prediction.odds if won else 0.0,
                }
            )
    return pd.DataFrame(rows, columns=BET_COLUMNS)


def seasonal_trends(bets: pd.DataFrame) -> list[SeasonalTrend]:
    """Success rate and profit per calendar month, oldest month first."""

    dated = bets.dropna(subset=["month"])
    if dated.empty:
        return []
    monthly = dated.groupby("month").agg(
        bets=("won", "size"),
        wins=("won", "sum"),
        stake=("stake", "sum"),
        returns=("returns", "sum"),
    )
    monthly = monthly.sort_index()
    return [
        SeasonalTrend(
            month=str(month),
            success_rate=percentage(int(row.wins), int(row.bets)),
            profit_loss=round2(float(row.returns - row.stake)),
        )
        for month, row in monthly.iterrows()
    ]


def team_insights(
    bets: pd.DataFrame,
    teams: Sequence[Team],
    limit: int = settings.max_team_insights,
) -> list[TeamInsight]:
    """Rank each team's markets by ROI over the fixtures it played."""

    if bets.empty:
        return []
    per_team = pd.concat(
        [
            bets.assign(team_id=bets["home_team_id"]),
            bets.assign(team_id=bets["away_team_id"]),
        ],
        ignore_index=True,
    )
    by_market = (
        per_team.groupby(["team_id", "market"], sort=False)
        .agg(stake=("stake", "sum"), returns=("returns", "sum"))
        .reset_index()
    )
    by_market["roi"] = (by_market["returns"] - by_market["stake"]) / by_market["stake"] * 100

    insights: list[TeamInsight] = []
    for team in dict.fromkeys(teams):
        team_df = by_market[by_market["team_id"] == team.id]
        if team_df.empty:
            continue
        ranked = team_df.sort_values("roi", ascending=False, kind="mergesort")
        ranked_markets = [Market(value) for value in ranked["market"]]
        # worst is drawn only from markets not already listed as best
        remaining = ranked_markets[TEAM_MARKET_SLOTS:]
        stake = float(team_df["stake"].sum())
        profit = float(team_df["returns"].sum()) - stake
        insights.append(
            TeamInsight(
                team_id=team.id,
                team_name=team.name,
                best_markets=ranked_markets[:TEAM_MARKET_SLOTS],
                worst_markets=list(reversed(remaining[-TEAM_MARKET_SLOTS:])),
                overall_roi=percentage(profit, stake),
            )
        )
    insights.sort(key=lambda i: (-i.overall_roi, i.team_id))
    return insights[:limit]


def generate_insights(
    market_stats: Sequence[MarketStat],
    matches: Sequence[MatchRecord],
    teams: Sequence[Team],
    predictions: Sequence[Prediction] = (),
    results: Sequence[ActualResult | None] = (),
) -> Insights:
    """Summarize market performance and, given settled predictions, monthly and per-team results."""

    by_roi = sorted(market_stats, key=lambda stat: stat.roi, reverse=True)
    bets = settled_bets_frame(market_stats, matches, predictions, results)
    return Insights(
        hot_streaks=hot_streaks(market_stats),
        cold_streaks=cold_streaks(market_stats),
        best_performing_markets=by_roi[:PERFORMANCE_SLOTS],
        worst_performing_markets=list(reversed(by_roi[-PERFORMANCE_SLOTS:])),
        seasonal_trends=seasonal_trends(bets),
        team_specific_insights=team_insights(bets, teams),
    )
