"""Rule-based betting strategy synthesis from market performance."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from footylab.analytics.types import MarketStat, RiskLevel, Strategy, StrategyCriteria


@dataclass(frozen=True)
class StrategyTemplate:
    name: str
    description: str
    qualifies: Callable[[MarketStat], bool]
    criteria: StrategyCriteria
    expected_roi: float
    risk_level: RiskLevel


STRATEGY_TEMPLATES: tuple[StrategyTemplate, ...] = (
    StrategyTemplate(
        name="Conservative Value",
        description="Focus on high-probability, low-risk bets with consistent returns",
        qualifies=lambda m: m.success_rate >= 60 and m.roi > 5,
        criteria=StrategyCriteria(
            min_confidence=75,
            min_value=10,
            max_odds=2.5,
            team_form_required=True,
            h2h_required=True,
        ),
        expected_roi=8,
        risk_level=RiskLevel.LOW,
    ),
    StrategyTemplate(
        name="High Value Hunter",
        description="Target high-value opportunities with higher risk tolerance",
        qualifies=lambda m: m.roi > 15,
        criteria=StrategyCriteria(
            min_confidence=60,
            min_value=20,
            max_odds=10,
            team_form_required=False,
            h2h_required=False,
        ),
        expected_roi=25,
        risk_level=RiskLevel.HIGH,
    ),
    StrategyTemplate(
        name="Balanced Approach",
        description="Mix of value and safety for steady long-term growth",
        qualifies=lambda m: m.success_rate >= 55 and m.roi > 0,
        criteria=StrategyCriteria(
            min_confidence=65,
            min_value=8,
            max_odds=5,
            team_form_required=True,
            h2h_required=False,
        ),
        expected_roi=12,
        risk_level=RiskLevel.MEDIUM,
    ),
)


def generate_strategies(market_stats: Iterable[MarketStat]) -> list[Strategy]:
    """Emit each template whose filter keeps at least one market."""

    stats = list(market_stats)
    strategies: list[Strategy] = []
    for template in STRATEGY_TEMPLATES:
        markets = [stat.market for stat in stats if template.qualifies(stat)]
        if not markets:
            continue
        strategies.append(
            Strategy(
                name=template.name,
                description=template.description,
                markets=markets,
                criteria=replace(template.criteria),
                expected_roi=template.expected_roi,
                risk_level=template.risk_level,
            )
        )
    return strategies
