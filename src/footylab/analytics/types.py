"""Dataclasses for betting analytics inputs and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Market(str, Enum):
    HOME_WIN = "homeWin"
    DRAW = "draw"
    AWAY_WIN = "awayWin"
    BTTS = "btts"
    OVER_25 = "over25"


ALL_MARKETS: tuple[Market, ...] = tuple(Market)


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class Recommendation(str, Enum):
    STRONG_BET = "strong_bet"
    MODERATE_BET = "moderate_bet"
    AVOID = "avoid"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Team:
    id: int
    name: str


@dataclass(frozen=True)
class MatchRecord:
    id: int
    home_team_id: int
    away_team_id: int
    date: date | None = None
    home_team_name: str | None = None
    away_team_name: str | None = None


@dataclass(frozen=True)
class Prediction:
    """Model probabilities (0-100) per market for one fixture."""

    home_win: float = 0.0
    draw: float = 0.0
    away_win: float = 0.0
    btts: float = 0.0
    over25: float = 0.0
    odds: float = 0.0
    confidence: float | None = None

    def probability(self, market: Market) -> float:
        return getattr(self, _FIELD_BY_MARKET[Market(market)])


@dataclass(frozen=True)
class ActualResult:
    home_goals: int
    away_goals: int


@dataclass(frozen=True)
class BookmakerOdds:
    """Decimal odds offered per market; ``None`` when a market is not priced."""

    home_win: float | None = None
    draw: float | None = None
    away_win: float | None = None
    btts: float | None = None
    over25: float | None = None

    def price(self, market: Market) -> float | None:
        return getattr(self, _FIELD_BY_MARKET[Market(market)])


_FIELD_BY_MARKET: dict[Market, str] = {
    Market.HOME_WIN: "home_win",
    Market.DRAW: "draw",
    Market.AWAY_WIN: "away_win",
    Market.BTTS: "btts",
    Market.OVER_25: "over25",
}


@dataclass
class MarketStat:
    market: Market
    total_matches: int
    successful_bets: int
    success_rate: float
    average_odds: float
    profit_loss: float
    roi: float
    confidence: int
    trend: Trend


@dataclass
class ValueBetOpportunity:
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
    reasoning: list[str] = field(default_factory=list)


@dataclass
class AccuracyBucket:
    total: int = 0
    correct: int = 0
    accuracy: float = 0.0


@dataclass
class AccuracyReport:
    total_predictions: int
    correct_predictions: int
    accuracy: float
    by_market: dict[Market, AccuracyBucket] = field(default_factory=dict)
    by_confidence_level: dict[ConfidenceLevel, AccuracyBucket] = field(default_factory=dict)


@dataclass
class StrategyCriteria:
    min_confidence: float
    min_value: float
    max_odds: float
    team_form_required: bool
    h2h_required: bool


@dataclass
class Strategy:
    name: str
    description: str
    markets: list[Market]
    criteria: StrategyCriteria
    expected_roi: float
    risk_level: RiskLevel


@dataclass
class HotStreak:
    market: Market
    consecutive_wins: int
    current_streak: int


@dataclass
class ColdStreak:
    market: Market
    consecutive_losses: int
    current_streak: int


@dataclass
class SeasonalTrend:
    month: str
    success_rate: float
    profit_loss: float


@dataclass
class TeamInsight:
    team_id: int
    team_name: str
    best_markets: list[Market]
    worst_markets: list[Market]
    overall_roi: float


@dataclass
class Insights:
    hot_streaks: list[HotStreak] = field(default_factory=list)
    cold_streaks: list[ColdStreak] = field(default_factory=list)
    best_performing_markets: list[MarketStat] = field(default_factory=list)
    worst_performing_markets: list[MarketStat] = field(default_factory=list)
    seasonal_trends: list[SeasonalTrend] = field(default_factory=list)
    team_specific_insights: list[TeamInsight] = field(default_factory=list)
