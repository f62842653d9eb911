"""FastAPI backend exposing the FootyLab betting analytics engine."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Annotated, Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from footylab import __version__
from footylab.analytics.accuracy import compute_accuracy
from footylab.analytics.insights import generate_insights
from footylab.analytics.markets import compute_all_market_stats
from footylab.analytics.service import analyze_betting_markets
from footylab.analytics.strategies import generate_strategies
from footylab.analytics.value_bets import identify_value_bets
from footylab.api.schemas import (
    AccuracyReportSchema,
    AnalysisRequest,
    BettingAnalysisResponse,
    DatasetRequest,
    InsightsSchema,
    MarketStatSchema,
    StrategySchema,
    ValueBetSchema,
)
from footylab.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

app = FastAPI(
    title="FootyLab Analytics API",
    version=__version__,
    description="Betting market statistics, value bets, accuracy and strategy insights.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

MinValueQuery = Annotated[float, Query(ge=0)]
LimitQuery = Annotated[int, Query(ge=1, le=500)]


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, Any]:
    return {"name": "footylab", "version": __version__}


@app.post("/analytics/markets", response_model=list[MarketStatSchema])
def market_stats(payload: DatasetRequest) -> list[dict[str, Any]]:
    dataset = payload.to_dataset()
    stats = compute_all_market_stats(
        dataset.matches,
        dataset.predictions,
        dataset.results,
        markets=dataset.markets,
    )
    return [asdict(stat) for stat in stats]


@app.post("/analytics/value-bets", response_model=list[ValueBetSchema])
def value_bets(
    payload: DatasetRequest,
    min_value: MinValueQuery = settings.min_value,
    limit: LimitQuery = settings.max_value_bets,
) -> list[dict[str, Any]]:
    dataset = payload.to_dataset()
    bets = identify_value_bets(
        dataset.matches,
        dataset.predictions,
        dataset.bookmaker_odds,
        min_value=min_value,
    )
    logger.info("Value bet scan over %d matches found %d bets", len(dataset.matches), len(bets))
    return [asdict(bet) for bet in bets[:limit]]


@app.post("/analytics/accuracy", response_model=AccuracyReportSchema)
def accuracy(payload: DatasetRequest) -> dict[str, Any]:
    dataset = payload.to_dataset()
    return asdict(compute_accuracy(dataset.predictions, dataset.results))


@app.post("/analytics/strategies", response_model=list[StrategySchema])
def strategies(payload: list[MarketStatSchema]) -> list[dict[str, Any]]:
    stats = [stat.to_market_stat() for stat in payload]
    return [asdict(strategy) for strategy in generate_strategies(stats)]


@app.post("/analytics/insights", response_model=InsightsSchema)
def insights(payload: DatasetRequest) -> dict[str, Any]:
    dataset = payload.to_dataset()
    stats = compute_all_market_stats(
        dataset.matches,
        dataset.predictions,
        dataset.results,
        markets=dataset.markets,
    )
    result = generate_insights(
        stats,
        dataset.matches,
        dataset.teams,
        predictions=dataset.predictions,
        results=dataset.results,
    )
    return asdict(result)


@app.post("/analytics/betting", response_model=BettingAnalysisResponse)
def betting_analysis(payload: AnalysisRequest) -> dict[str, Any]:
    analysis = analyze_betting_markets(payload.to_dataset(), payload.to_options())
    return asdict(analysis)
