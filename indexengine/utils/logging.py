"""
Logging configuration for IndexEngine.

Every record carries a `scenario` extra: the normalized input key for records
emitted while projecting a scenario, "-" for everything else.
"""

import sys
from pathlib import Path
from loguru import logger

from indexengine.config import Settings
from indexengine.models import ScenarioInput

NO_SCENARIO = "-"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<magenta>{extra[scenario]}</magenta> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {extra[scenario]} | {message}"


def scenario_tag(scenario_input: ScenarioInput) -> str:
    """Compact label for a normalized input, e.g. `5000@0.2/+0.06/neutral`."""
    level, volatility, momentum, appetite = scenario_input.cache_key()
    return f"{level:g}@{volatility:g}/{momentum:+g}/{appetite}"


def scenario_logger(scenario_input: ScenarioInput):
    """Logger bound to one scenario's tag."""
    return logger.bind(scenario=scenario_tag(scenario_input))


def setup_logging(settings: Settings) -> None:
    """
    Route IndexEngine logs to stderr and, if enabled, a rotating file.

    Args:
        settings: Application settings with log configuration
    """
    logger.remove()
    logger.configure(extra={"scenario": NO_SCENARIO})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.log_level, colorize=True)

    if settings.log_to_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.log_file,
            format=FILE_FORMAT,
            level=settings.log_level,
            rotation="10 MB",
            retention="7 days",
            compression="gz"
        )

    logger.info(
        f"Logging configured: level={settings.log_level}, "
        f"file={settings.log_file if settings.log_to_file else 'disabled'}"
    )
