"""
Shared pytest fixtures for the IndexEngine test suite.
"""

import pytest

from indexengine.config import Settings
from indexengine.models import RiskAppetite, ScenarioInput


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def neutral_input():
    return ScenarioInput(
        index_level=5000.0,
        annual_volatility=0.2,
        macro_momentum=0.0,
        risk_appetite=RiskAppetite.NEUTRAL,
    )


@pytest.fixture
def bullish_input():
    return ScenarioInput(
        index_level=4500.0,
        annual_volatility=0.25,
        macro_momentum=0.1,
        risk_appetite=RiskAppetite.AGGRESSIVE,
    )


@pytest.fixture
def bearish_input():
    return ScenarioInput(
        index_level=4500.0,
        annual_volatility=0.25,
        macro_momentum=-0.1,
        risk_appetite=RiskAppetite.DEFENSIVE,
    )
