"""
Pipeline Layers for IndexEngine.
Each layer implements one stage of the scenario projection.
"""

from indexengine.layers.normalizer import InputNormalizer
from indexengine.layers.move_drift import MoveDriftEstimator
from indexengine.layers.target_curve import TargetCurveBuilder
from indexengine.layers.option_strikes import OptionStrikeSuggester
from indexengine.layers.technical import TechnicalAnchorDeriver

__all__ = [
    "InputNormalizer",
    "MoveDriftEstimator",
    "TargetCurveBuilder",
    "OptionStrikeSuggester",
    "TechnicalAnchorDeriver"
]
