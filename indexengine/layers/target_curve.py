"""
Target Curve Builder - Layer 3 in the scenario pipeline.

For each configured tenor with horizon fraction t:
- target = level * exp(drift * t)                (continuously compounded)
- confidence = clamp(1 - k1*sqrt(t) - k2*vol, min, max)
- narrative picked from a fixed template set by the relative change vs spot
  and the sign of drift

The target is the model's central expectation, not a simulated draw.
Tenors are emitted nearest to furthest.
"""

import math
from typing import List
from loguru import logger

from indexengine.config import EngineConfig
from indexengine.models import FuturesTarget, MoveEstimate, ScenarioInput


class TargetCurveBuilder:
    """Builds the futures target term structure."""

    def __init__(self, config=EngineConfig):
        self.config = config

    def build(self, scenario_input: ScenarioInput, estimate: MoveEstimate) -> List[FuturesTarget]:
        level = scenario_input.index_level
        drift = estimate.annualized_drift
        targets = []

        for tenor, days in sorted(self.config.TENORS, key=lambda item: item[1]):
            t = days / self.config.DAYS_PER_YEAR
            target = self.project_level(level, drift, t)
            targets.append(FuturesTarget(
                tenor=tenor,
                horizon_days=days,
                target=target,
                confidence=self.confidence(t, scenario_input.annual_volatility),
                narrative=self.narrative(target / level - 1, drift),
            ))

        logger.debug(
            "Target curve: " + ", ".join(f"{t.tenor}={t.target:.2f}@{t.confidence:.2f}" for t in targets)
        )
        return targets

    def project_level(self, level: float, drift: float, t: float) -> float:
        growth = max(-self.config.MAX_LOG_GROWTH, min(self.config.MAX_LOG_GROWTH, drift * t))
        return level * math.exp(growth)

    def confidence(self, t: float, volatility: float) -> float:
        raw = (
            1.0
            - self.config.CONFIDENCE_HORIZON_DECAY * math.sqrt(t)
            - self.config.CONFIDENCE_VOLATILITY_DECAY * volatility
        )
        return max(self.config.CONFIDENCE_MIN, min(self.config.CONFIDENCE_MAX, raw))

    def narrative(self, change: float, drift: float) -> str:
        """Pick the narrative for a relative change vs spot."""
        templates = self.config.NARRATIVES
        strong = self.config.NARRATIVE_STRONG_MOVE
        flat = self.config.NARRATIVE_FLAT_BAND

        if change >= strong:
            return templates["trend_extension"]
        if change >= flat:
            return templates["grinding_higher"]
        if change <= -strong:
            return templates["correction_risk"]
        if change <= -flat:
            return templates["softening"]
        # Inside the flat band: lean follows the drift sign
        if drift > 0:
            return templates["range_bound_up"]
        if drift < 0:
            return templates["range_bound_down"]
        return templates["range_bound"]
