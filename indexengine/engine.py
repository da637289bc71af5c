"""
IndexEngine - Scenario Projection Pipeline and Orchestrator.

Ties the layers together into a single deterministic projection.

Pipeline Flow:
1. Input Normalizer (GATE - the only failure point)
2. Move & Drift Estimator
3. Target Curve Builder      \
4. Option Strike Suggester    > independent, fed by steps 1-2
5. Technical Anchor Deriver  /

No layer keeps state between calls. The same input always produces the
same result.
"""

from typing import Optional

from loguru import logger

from indexengine.config import EngineConfig, Settings, get_settings
from indexengine.layers.move_drift import MoveDriftEstimator
from indexengine.layers.normalizer import InputNormalizer
from indexengine.layers.option_strikes import OptionStrikeSuggester
from indexengine.layers.target_curve import TargetCurveBuilder
from indexengine.layers.technical import TechnicalAnchorDeriver
from indexengine.models import InvalidInput, ScenarioInput, ScenarioResult
from indexengine.utils.cache import ScenarioCache
from indexengine.utils.logging import scenario_logger


class ScenarioPipeline:
    """
    Stateless composition of the five layers.

    Holds only the layer objects, which hold only the constant table.
    """

    def __init__(self, config=EngineConfig):
        self.config = config
        self.normalizer = InputNormalizer(config)
        self.estimator = MoveDriftEstimator(config)
        self.target_curve = TargetCurveBuilder(config)
        self.option_strikes = OptionStrikeSuggester(config)
        self.technical = TechnicalAnchorDeriver(config)

    def run(self, scenario_input: ScenarioInput) -> ScenarioResult:
        normalized = self.normalizer.normalize(scenario_input)
        return self.run_normalized(normalized)

    def run_normalized(self, normalized: ScenarioInput) -> ScenarioResult:
        estimate = self.estimator.estimate(normalized)
        futures_targets = self.target_curve.build(normalized, estimate)
        call_target, put_target, suggestions = self.option_strikes.build(normalized, estimate)
        technical_levels = self.technical.derive(normalized, estimate)

        return ScenarioResult(
            thirty_day_move=estimate.thirty_day_move,
            annualized_drift=estimate.annualized_drift,
            downside_potential=estimate.downside_potential,
            upside_potential=estimate.upside_potential,
            call_target=call_target,
            put_target=put_target,
            futures_targets=tuple(futures_targets),
            option_suggestions=tuple(suggestions),
            technical_levels=tuple(technical_levels),
        )


_default_pipeline = ScenarioPipeline()


def compute_scenario(scenario_input: ScenarioInput, config=EngineConfig) -> ScenarioResult:
    """
    Project a scenario without memoization.

    Raises:
        InvalidInput: if the input cannot be normalized
    """
    pipeline = _default_pipeline if config is EngineConfig else ScenarioPipeline(config)
    return pipeline.run(scenario_input)


class ScenarioEngine:
    """
    Main scenario projection engine.

    Wraps the pipeline with per-instance memoization keyed on the normalized
    input tuple. Results are immutable, so a cached result can be handed to
    any number of callers.
    """

    def __init__(self, settings: Optional[Settings] = None, config=EngineConfig):
        """Initialize the engine with all layers."""
        self.settings = settings or get_settings()
        self.config = config
        self.pipeline = ScenarioPipeline(config)

        self.cache: Optional[ScenarioCache] = None
        if self.settings.scenario_cache_enabled:
            self.cache = ScenarioCache(
                default_ttl=self.settings.scenario_cache_ttl,
                max_entries=self.settings.scenario_cache_max_entries,
            )

        logger.info(
            f"ScenarioEngine initialized (cache={'on' if self.cache else 'off'})"
        )

    def compute(self, scenario_input: ScenarioInput) -> ScenarioResult:
        """
        Project a scenario.

        Args:
            scenario_input: Caller-owned input

        Returns:
            Fully populated ScenarioResult

        Raises:
            InvalidInput: if the input cannot be normalized
        """
        try:
            normalized = self.pipeline.normalizer.normalize(scenario_input)
        except InvalidInput as e:
            logger.warning(f"Rejected scenario input: {e}")
            raise

        key = normalized.cache_key()
        log = scenario_logger(normalized)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                log.debug("Cache hit")
                return cached

        result = self.pipeline.run_normalized(normalized)

        if self.cache is not None:
            self.cache.set(key, result)

        log.debug(
            f"Projected: 30d move={result.thirty_day_move:.2f}, "
            f"call={result.call_target:.2f}, put={result.put_target:.2f}"
        )
        return result

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()
