"""
Input Normalizer - Layer 1 in the scenario pipeline.

Rejects malformed input and clamps everything else into a safe range:
- index level must be a finite number > 0 inside [INDEX_LEVEL_MIN, INDEX_LEVEL_MAX]
- annual volatility is clamped into [floor, overflow ceiling]
- macro momentum passes through unchanged but must be finite
- risk appetite must be one of the three defined variants
"""

import math
import numbers
from decimal import Decimal
from dataclasses import replace
from typing import Any
from loguru import logger

from indexengine.config import EngineConfig
from indexengine.models import InvalidInput, RiskAppetite, ScenarioInput


class InputNormalizer:
    """
    Boundary validation for ScenarioInput.

    This is the only place InvalidInput is raised. Every later layer can
    assume a positive level, a volatility above the floor, a finite momentum
    and a RiskAppetite member.
    """

    def __init__(self, config=EngineConfig):
        self.config = config

    def normalize(self, scenario_input: ScenarioInput) -> ScenarioInput:
        """
        Return a sanitized copy of the input.

        The index level is never altered: every output is anchored to the
        caller's price.

        Raises:
            InvalidInput: on non-numeric or non-finite scalars, a level <= 0
                or outside the representable range, or an unknown risk appetite
        """
        index_level = self._finite("index_level", scenario_input.index_level)
        volatility = self._finite("annual_volatility", scenario_input.annual_volatility)
        momentum = self._finite("macro_momentum", scenario_input.macro_momentum)
        appetite = self._risk_appetite(scenario_input.risk_appetite)

        if index_level <= 0:
            raise InvalidInput("index_level", scenario_input.index_level, "must be greater than zero")
        if not self.config.INDEX_LEVEL_MIN <= index_level <= self.config.INDEX_LEVEL_MAX:
            raise InvalidInput(
                "index_level",
                scenario_input.index_level,
                f"must be between {self.config.INDEX_LEVEL_MIN:g} and {self.config.INDEX_LEVEL_MAX:g}"
            )

        clamped_vol = min(max(volatility, self.config.VOLATILITY_FLOOR), self.config.VOLATILITY_CEILING)
        if clamped_vol != volatility:
            logger.debug(f"annual_volatility {volatility} clamped to {clamped_vol}")

        return replace(
            scenario_input,
            index_level=index_level,
            annual_volatility=clamped_vol,
            macro_momentum=momentum,
            risk_appetite=appetite,
        )

    @staticmethod
    def _finite(name: str, value: Any) -> float:
        # bool is an int subclass; a checkbox value is not a price
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
            raise InvalidInput(name, value, "must be a real number")
        try:
            value = float(value)
        except OverflowError:
            raise InvalidInput(name, value, "must be finite") from None
        if not math.isfinite(value):
            raise InvalidInput(name, value, "must be finite")
        return value

    @staticmethod
    def _risk_appetite(value: Any) -> RiskAppetite:
        if isinstance(value, RiskAppetite):
            return value
        if isinstance(value, str):
            try:
                return RiskAppetite(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(r.value for r in RiskAppetite)
        raise InvalidInput("risk_appetite", value, f"must be one of: {allowed}")
