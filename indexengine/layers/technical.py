"""
Technical Anchor Deriver - Layer 5 in the scenario pipeline.

Support and resistance levels spaced by fixed fractions of the 30-day move
around the index level. Negative fractions are supports, positive fractions
are resistances. Levels never go below MIN_PRICE_FRACTION of the index level.
"""

from typing import List

from indexengine.config import EngineConfig
from indexengine.models import LevelType, MoveEstimate, ScenarioInput, TechnicalLevel


class TechnicalAnchorDeriver:
    """Plain numeric support/resistance anchors."""

    def __init__(self, config=EngineConfig):
        self.config = config

    def derive(self, scenario_input: ScenarioInput, estimate: MoveEstimate) -> List[TechnicalLevel]:
        level = scenario_input.index_level
        floor = level * self.config.MIN_PRICE_FRACTION
        anchors = []

        for label, fraction in sorted(self.config.TECHNICAL_ANCHORS, key=lambda item: item[1]):
            if fraction == 0:
                continue
            price = level + estimate.thirty_day_move * fraction
            anchors.append(TechnicalLevel(
                label=label,
                level=max(price, floor),
                type=LevelType.SUPPORT if fraction < 0 else LevelType.RESISTANCE,
            ))

        return anchors
