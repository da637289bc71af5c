"""
Utility modules for IndexEngine.
"""

from indexengine.utils.logging import setup_logging
from indexengine.utils.cache import ScenarioCache

__all__ = ["setup_logging", "ScenarioCache"]
