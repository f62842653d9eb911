"""Prediction accuracy broken down by market and confidence bucket."""

from __future__ import annotations

from collections.abc import Sequence

from footylab.analytics.markets import aligned_pairs, is_prediction_correct
from footylab.analytics.types import (
    ALL_MARKETS,
    AccuracyBucket,
    AccuracyReport,
    ActualResult,
    ConfidenceLevel,
    Market,
    Prediction,
)
from footylab.analytics.utils import percentage

HIGH_CONFIDENCE = 80
MEDIUM_CONFIDENCE = 60
DEFAULT_CONFIDENCE = 50


def confidence_level(confidence: float | None) -> ConfidenceLevel:
    value = confidence or DEFAULT_CONFIDENCE
    if value >= HIGH_CONFIDENCE:
        return ConfidenceLevel.HIGH
    if value >= MEDIUM_CONFIDENCE:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def _empty_levels() -> dict[ConfidenceLevel, AccuracyBucket]:
    return {level: AccuracyBucket() for level in ConfidenceLevel}


def compute_accuracy(
    predictions: Sequence[Prediction],
    results: Sequence[ActualResult | None],
) -> AccuracyReport:
    """Score every prediction against its result across all five markets."""

    by_level = _empty_levels()
    if not predictions:
        return AccuracyReport(
            total_predictions=0,
            correct_predictions=0,
            accuracy=0.0,
            by_market={},
            by_confidence_level=by_level,
        )

    by_market: dict[Market, AccuracyBucket] = {}
    total_correct = 0
    for _, prediction, result in aligned_pairs(predictions, results):
        level = by_level[confidence_level(prediction.confidence)]
        for market in ALL_MARKETS:
            bucket = by_market.setdefault(market, AccuracyBucket())
            bucket.total += 1
            level.total += 1
            if is_prediction_correct(result, market):
                total_correct += 1
                bucket.correct += 1
                level.correct += 1

    for bucket in [*by_market.values(), *by_level.values()]:
        bucket.accuracy = percentage(bucket.correct, bucket.total)

    # every prediction counts for each market, even when its result is missing
    total_predictions = len(predictions) * len(ALL_MARKETS)
    return AccuracyReport(
        total_predictions=total_predictions,
        correct_predictions=total_correct,
        accuracy=percentage(total_correct, total_predictions),
        by_market=by_market,
        by_confidence_level=by_level,
    )
