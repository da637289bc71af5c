"""
IndexEngine - Index Scenario Projection Engine

Turns an index level, annual volatility, macro momentum tilt and risk
appetite into price targets, a futures target curve, option strike ideas
and technical anchors using a closed-form deterministic model.
"""

__version__ = "1.0.0"

from indexengine.config import EngineConfig, Settings
from indexengine.engine import ScenarioEngine, compute_scenario
from indexengine.models import InvalidInput, RiskAppetite, ScenarioInput, ScenarioResult
from indexengine.templates import DEFAULT_TEMPLATES, TemplateCatalog

__all__ = [
    "ScenarioEngine",
    "compute_scenario",
    "Settings",
    "EngineConfig",
    "ScenarioInput",
    "ScenarioResult",
    "RiskAppetite",
    "InvalidInput",
    "TemplateCatalog",
    "DEFAULT_TEMPLATES",
    "__version__",
]
