"""Value bet detection: model probability against bookmaker pricing."""

from __future__ import annotations

from collections.abc import Sequence

from footylab.analytics.types import (
    ALL_MARKETS,
    BookmakerOdds,
    Market,
    MatchRecord,
    Prediction,
    Recommendation,
    ValueBetOpportunity,
)
from footylab.analytics.utils import round2, round_half_up
from footylab.config import get_settings

settings = get_settings()

DEFAULT_PREDICTION_CONFIDENCE = 50.0


def implied_probability(decimal_odds: float) -> float:
    """Convert decimal odds into an implied probability percentage."""

    return 100 / decimal_odds


def bet_value(probability: float, decimal_odds: float) -> float:
    return (probability / implied_probability(decimal_odds) - 1) * 100


def bet_confidence(probability: float, value: float, prediction_confidence: float | None) -> int:
    probability_score = min(probability, 90)
    value_score = min(value, 50)
    confidence_score = prediction_confidence or DEFAULT_PREDICTION_CONFIDENCE
    combined = probability_score * 0.4 + value_score * 0.3 + confidence_score * 0.3
    return int(min(100, round_half_up(combined)))


def bet_recommendation(value: float, confidence: float) -> Recommendation:
    if value >= 20 and confidence >= 75:
        return Recommendation.STRONG_BET
    if value >= 10 and confidence >= 60:
        return Recommendation.MODERATE_BET
    return Recommendation.AVOID


def bet_reasoning(market: Market, value: float, confidence: int, probability: float) -> list[str]:
    reasons = [
        f"{value:.1f}% value identified in {Market(market).value} market",
        f"{confidence}% confidence in prediction",
        f"{probability:.1f}% predicted probability",
    ]
    if value >= 20:
        reasons.append("Exceptional value opportunity")
    if confidence >= 80:
        reasons.append("High confidence prediction")
    if probability >= 70:
        reasons.append("Strong probability assessment")
    return reasons


def _team_label(name: str | None, team_id: int) -> str:
    return name or f"Team {team_id}"


def identify_value_bets(
    matches: Sequence[MatchRecord],
    predictions: Sequence[Prediction | None],
    bookmaker_odds: Sequence[BookmakerOdds | None],
    min_value: float = settings.min_value,
) -> list[ValueBetOpportunity]:
    """Return opportunities whose value clears ``min_value``, best value first."""

    opportunities: list[ValueBetOpportunity] = []
    for index, match in enumerate(matches):
        prediction = predictions[index] if index < len(predictions) else None
        odds = bookmaker_odds[index] if index < len(bookmaker_odds) else None
        if prediction is None or odds is None:
            continue

        for market in ALL_MARKETS:
            probability = prediction.probability(market)
            price = odds.price(market)
            if not probability or not price:
                continue

            value = bet_value(probability, price)
            if value < min_value:
                continue

            confidence = bet_confidence(probability, value, prediction.confidence)
            opportunities.append(
                ValueBetOpportunity(
                    match_id=match.id,
                    home_team=_team_label(match.home_team_name, match.home_team_id),
                    away_team=_team_label(match.away_team_name, match.away_team_id),
                    market=market,
                    prediction=probability,
                    bookmaker_odds=price,
                    implied_probability=implied_probability(price),
                    value=round2(value),
                    confidence=confidence,
                    recommendation=bet_recommendation(value, confidence),
                    reasoning=bet_reasoning(market, value, confidence, probability),
                )
            )

    opportunities.sort(key=lambda o: o.value, reverse=True)
    return opportunities
