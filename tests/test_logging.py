"""
Tests for logging setup.
"""

from loguru import logger

from indexengine.config import Settings
from indexengine.engine import ScenarioEngine
from indexengine.models import RiskAppetite, ScenarioInput
from indexengine.utils.logging import NO_SCENARIO, scenario_tag, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        settings = Settings(_env_file=None, log_to_file=True, log_file=str(log_file))

        setup_logging(settings)
        logger.info("scenario projected")
        logger.complete()

        assert log_file.exists()
        text = log_file.read_text()
        assert "scenario projected" in text
        assert f"| {NO_SCENARIO} | scenario projected" in text
        logger.remove()

    def test_console_only(self, tmp_path):
        log_file = tmp_path / "engine.log"
        settings = Settings(_env_file=None, log_file=str(log_file))

        setup_logging(settings)
        logger.info("console only")

        assert not log_file.exists()
        logger.remove()

    def test_engine_records_carry_scenario_tag(self, tmp_path):
        log_file = tmp_path / "engine.log"
        settings = Settings(_env_file=None, log_level="debug", log_to_file=True, log_file=str(log_file))
        scenario_input = ScenarioInput(5000.0, 0.2, 0.06, RiskAppetite.NEUTRAL)

        setup_logging(settings)
        ScenarioEngine(settings).compute(scenario_input)
        logger.complete()

        assert f"| {scenario_tag(scenario_input)} | Projected" in log_file.read_text()
        logger.remove()


class TestScenarioTag:
    """Tests for scenario_tag."""

    def test_format(self):
        tag = scenario_tag(ScenarioInput(5000.0, 0.2, 0.06, RiskAppetite.NEUTRAL))
        assert tag == "5000@0.2/+0.06/neutral"

    def test_negative_momentum(self):
        tag = scenario_tag(ScenarioInput(4500.0, 0.25, -0.1, RiskAppetite.DEFENSIVE))
        assert tag == "4500@0.25/-0.1/defensive"
