"""Pydantic schemas for the FootyLab analytics API."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from footylab.analytics.service import AnalysisOptions, BettingDataset
from footylab.analytics.types import (
    ALL_MARKETS,
    ActualResult,
    BookmakerOdds,
    ConfidenceLevel,
    Market,
    MarketStat,
    MatchRecord,
    Prediction,
    Recommendation,
    RiskLevel,
    Team,
    Trend,
)
from footylab.config import get_settings

settings = get_settings()


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TeamIn(CamelModel):
    id: int
    name: str


class MatchIn(CamelModel):
    id: int
    home_team_id: int
    away_team_id: int
    date: dt.date | None = None
    home_team_name: str | None = None
    away_team_name: str | None = None


class PredictionIn(CamelModel):
    home_win: float = Field(default=0.0, ge=0, le=100)
    draw: float = Field(default=0.0, ge=0, le=100)
    away_win: float = Field(default=0.0, ge=0, le=100)
    btts: float = Field(default=0.0, ge=0, le=100)
    over25: float = Field(default=0.0, ge=0, le=100)
    odds: float = Field(default=0.0, ge=0)
    confidence: float | None = Field(default=None, ge=0, le=100)


class ResultIn(CamelModel):
    home_goals: int = Field(ge=0)
    away_goals: int = Field(ge=0)


class OddsIn(CamelModel):
    home_win: float | None = Field(default=None, gt=0)
    draw: float | None = Field(default=None, gt=0)
    away_win: float | None = Field(default=None, gt=0)
    btts: float | None = Field(default=None, gt=0)
    over25: float | None = Field(default=None, gt=0)


class DatasetRequest(CamelModel):
    matches: list[MatchIn]
    predictions: list[PredictionIn]
    results: list[ResultIn | None] = Field(default_factory=list)
    bookmaker_odds: list[OddsIn | None] = Field(default_factory=list)
    teams: list[TeamIn] = Field(default_factory=list)
    markets: list[Market] = Field(default_factory=lambda: list(ALL_MARKETS))

    def to_dataset(self) -> BettingDataset:
        return BettingDataset(
            matches=[MatchRecord(**m.model_dump()) for m in self.matches],
            predictions=[Prediction(**p.model_dump()) for p in self.predictions],
            results=[ActualResult(**r.model_dump()) if r else None for r in self.results],
            bookmaker_odds=[BookmakerOdds(**o.model_dump()) if o else None for o in self.bookmaker_odds],
            teams=[Team(**t.model_dump()) for t in self.teams],
            markets=list(dict.fromkeys(self.markets)),
        )


class AnalysisRequest(DatasetRequest):
    include_value_bets: bool = False
    include_accuracy: bool = False
    include_strategies: bool = False
    include_insights: bool = False
    min_value: float = Field(default=settings.min_value, ge=0)
    max_results: int = Field(default=settings.max_value_bets, ge=1, le=500)

    def to_options(self) -> AnalysisOptions:
        return AnalysisOptions(
            include_value_bets=self.include_value_bets,
            include_accuracy=self.include_accuracy,
            include_strategies=self.include_strategies,
            include_insights=self.include_insights,
            min_value=self.min_value,
            max_results=self.max_results,
        )


class MarketStatSchema(CamelModel):
    market: Market
    total_matches: int
    successful_bets: int
    success_rate: float = Field(ge=0, le=100)
    average_odds: float
    profit_loss: float
    roi: float
    confidence: int = Field(ge=0, le=100)
    trend: Trend

    def to_market_stat(self) -> MarketStat:
        return MarketStat(**self.model_dump())


class ValueBetSchema(CamelModel):
    match_id: int
    home_team: str
    away_team: str
    market: Market
    prediction: float
    bookmaker_odds: float
    implied_probability: float
    value: float
    confidence: int
    recommendation: Recommendation
    reasoning: list[str]


class AccuracyBucketSchema(CamelModel):
    total: int
    correct: int
    accuracy: float


class AccuracyReportSchema(CamelModel):
    total_predictions: int
    correct_predictions: int
    accuracy: float
    by_market: dict[Market, AccuracyBucketSchema]
    by_confidence_level: dict[ConfidenceLevel, AccuracyBucketSchema]


class StrategyCriteriaSchema(CamelModel):
    min_confidence: float
    min_value: float
    max_odds: float
    team_form_required: bool
    h2h_required: bool = Field(alias="h2hRequired")


class StrategySchema(CamelModel):
    name: str
    description: str
    markets: list[Market]
    criteria: StrategyCriteriaSchema
    expected_roi: float = Field(alias="expectedROI")
    risk_level: RiskLevel


class HotStreakSchema(CamelModel):
    market: Market
    consecutive_wins: int
    current_streak: int


class ColdStreakSchema(CamelModel):
    market: Market
    consecutive_losses: int
    current_streak: int


class SeasonalTrendSchema(CamelModel):
    month: str
    success_rate: float
    profit_loss: float


class TeamInsightSchema(CamelModel):
    team_id: int
    team_name: str
    best_markets: list[Market]
    worst_markets: list[Market]
    overall_roi: float = Field(alias="overallROI")


class InsightsSchema(CamelModel):
    hot_streaks: list[HotStreakSchema]
    cold_streaks: list[ColdStreakSchema]
    best_performing_markets: list[MarketStatSchema]
    worst_performing_markets: list[MarketStatSchema]
    seasonal_trends: list[SeasonalTrendSchema]
    team_specific_insights: list[TeamInsightSchema]


class BettingSummarySchema(CamelModel):
    total_matches: int
    best_market: str
    worst_market: str
    overall_roi: float = Field(alias="overallROI")
    recommended_strategy: str


class PerformanceTrendsSchema(CamelModel):
    overall_trend: Trend
    best_trending_market: str
    worst_trending_market: str


class BettingAnalysisResponse(CamelModel):
    market_stats: list[MarketStatSchema]
    summary: BettingSummarySchema
    trends: PerformanceTrendsSchema
    value_bets: list[ValueBetSchema] | None = None
    accuracy: AccuracyReportSchema | None = None
    strategies: list[StrategySchema] | None = None
    insights: InsightsSchema | None = None
