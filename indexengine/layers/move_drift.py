"""
Move & Drift Estimator - Layer 2 in the scenario pipeline.

MODEL:
- 30-day move = level * volatility * sqrt(30/365)   (square-root-of-time rule)
- drift = momentum * risk appetite multiplier
- annual baseline = 30-day move scaled back to one year (level * volatility)
- skew = weight * tanh(drift / volatility)
- upside = baseline * (1 + skew), downside = baseline * (1 - skew)

Positive drift widens the upside and narrows the downside; negative drift does
the reverse. |skew| < 1, so both potentials stay positive.
"""

import math
from loguru import logger

from indexengine.config import EngineConfig
from indexengine.models import MoveEstimate, ScenarioInput


class MoveDriftEstimator:
    """Translates volatility and momentum into horizon-scaled moves and drift."""

    def __init__(self, config=EngineConfig):
        self.config = config

    def horizon_scale(self, days: float) -> float:
        """sqrt(t) for a horizon of `days`."""
        return math.sqrt(days / self.config.DAYS_PER_YEAR)

    def drift_multiplier(self, scenario_input: ScenarioInput) -> float:
        return self.config.DRIFT_MULTIPLIERS[scenario_input.risk_appetite.value]

    def estimate(self, scenario_input: ScenarioInput) -> MoveEstimate:
        """
        Estimate move and drift for a normalized input.

        Args:
            scenario_input: Output of InputNormalizer.normalize

        Returns:
            MoveEstimate with the 30-day move, drift and potentials
        """
        level = scenario_input.index_level
        volatility = scenario_input.annual_volatility

        thirty_day_move = level * volatility * self.horizon_scale(self.config.MOVE_HORIZON_DAYS)

        multiplier = self.drift_multiplier(scenario_input)
        drift = scenario_input.macro_momentum * multiplier
        limit = self.config.MAX_ABS_DRIFT
        if abs(drift) > limit:
            logger.debug(f"annualized drift {drift} clamped to +/-{limit}")
            drift = math.copysign(limit, drift)

        annual_move = thirty_day_move / self.horizon_scale(self.config.MOVE_HORIZON_DAYS)
        skew = self.config.ASYMMETRY_WEIGHT * math.tanh(drift / volatility)

        estimate = MoveEstimate(
            thirty_day_move=thirty_day_move,
            annualized_drift=drift,
            upside_potential=annual_move * (1 + skew),
            downside_potential=annual_move * (1 - skew),
            drift_multiplier=multiplier,
            skew=skew,
        )

        logger.debug(
            f"Move estimate: 30d={estimate.thirty_day_move:.4f}, "
            f"drift={estimate.annualized_drift:+.4f}, "
            f"up={estimate.upside_potential:.4f}, down={estimate.downside_potential:.4f}"
        )
        return estimate
