"""
Option Strike Suggester - Layer 4 in the scenario pipeline.

Headline anchors:
- call target = level + upside * f(appetite)
- put target  = level - downside * f(appetite)

Profiles (declared order, fraction of the 30-day move):
- Conservative 0.5x: close to spot
- Balanced 1.0x: one expected move out
- Aggressive 1.6x: beyond the expected move

No price is emitted below MIN_PRICE_FRACTION of the level.
"""

from typing import List, Tuple
from loguru import logger

from indexengine.config import EngineConfig
from indexengine.models import MoveEstimate, OptionSuggestion, ScenarioInput


class OptionStrikeSuggester:
    """Derives headline call/put targets and labeled strike pairs."""

    def __init__(self, config=EngineConfig):
        self.config = config

    def price_floor(self, level: float) -> float:
        return level * self.config.MIN_PRICE_FRACTION

    def convexity_multiplier(self, scenario_input: ScenarioInput) -> float:
        return self.config.CONVEXITY_MULTIPLIERS[scenario_input.risk_appetite.value]

    def headline_targets(
        self,
        scenario_input: ScenarioInput,
        estimate: MoveEstimate
    ) -> Tuple[float, float]:
        """Return (call_target, put_target)."""
        level = scenario_input.index_level
        f = self.convexity_multiplier(scenario_input)
        call_target = level + estimate.upside_potential * f
        put_target = max(level - estimate.downside_potential * f, self.price_floor(level))
        return call_target, put_target

    def suggest(
        self,
        scenario_input: ScenarioInput,
        estimate: MoveEstimate,
        call_target: float
    ) -> List[OptionSuggestion]:
        """
        Build one strike pair per configured profile.

        Args:
            scenario_input: Normalized input
            estimate: Move estimate for the input
            call_target: Headline call target; selects the rationale wording

        Returns:
            Suggestions in declared profile order
        """
        level = scenario_input.index_level
        floor = self.price_floor(level)
        upside_bias = call_target > level
        suggestions = []

        for key, label, fraction in self.config.OPTION_PROFILES:
            offset = estimate.thirty_day_move * fraction
            suggestions.append(OptionSuggestion(
                label=label,
                rationale=self.config.OPTION_RATIONALES[(key, upside_bias)],
                call_strike=level + offset,
                put_strike=max(level - offset, floor),
            ))

        return suggestions

    def build(
        self,
        scenario_input: ScenarioInput,
        estimate: MoveEstimate
    ) -> Tuple[float, float, List[OptionSuggestion]]:
        call_target, put_target = self.headline_targets(scenario_input, estimate)
        suggestions = self.suggest(scenario_input, estimate, call_target)

        logger.debug(
            f"Strikes: call={call_target:.2f}, put={put_target:.2f}, "
            + ", ".join(f"{s.label}={s.put_strike:.2f}/{s.call_strike:.2f}" for s in suggestions)
        )
        return call_target, put_target, suggestions
