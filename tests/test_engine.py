"""
Tests for the ScenarioEngine pipeline.

Covers determinism, positivity, monotonicity and the reference scenarios.
"""

import math

import pytest

from indexengine.config import EngineConfig, Settings
from indexengine.engine import ScenarioEngine, ScenarioPipeline, compute_scenario
from indexengine.models import InvalidInput, LevelType, RiskAppetite, ScenarioInput


GRID = [
    ScenarioInput(level, vol, momentum, appetite)
    for level in (0.5, 100.0, 5000.0, 38000.0)
    for vol in (0.0, 0.01, 0.18, 0.6, 3.0, 50.0)
    for momentum in (-0.2, -0.01, 0.0, 0.05, 0.2, 1e6)
    for appetite in RiskAppetite
]


def _finite_values(result):
    yield result.thirty_day_move
    yield result.annualized_drift
    yield result.downside_potential
    yield result.upside_potential
    yield result.call_target
    yield result.put_target
    for t in result.futures_targets:
        yield t.target
        yield t.confidence
    for s in result.option_suggestions:
        yield s.call_strike
        yield s.put_strike
    for lvl in result.technical_levels:
        yield lvl.level


class TestDeterminism:
    """Same input, same output."""

    def test_repeatable(self, bullish_input):
        first = compute_scenario(bullish_input)
        second = compute_scenario(bullish_input)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_engine_matches_pure_function(self, bullish_input, settings):
        engine = ScenarioEngine(settings)
        assert engine.compute(bullish_input) == compute_scenario(bullish_input)

    def test_custom_config(self, neutral_input):
        class TwoTenors(EngineConfig):
            TENORS = (("1W", 7), ("1M", 30))

        result = compute_scenario(neutral_input, config=TwoTenors)
        assert [t.tenor for t in result.futures_targets] == ["1W", "1M"]
        # default table untouched
        assert len(compute_scenario(neutral_input).futures_targets) == len(EngineConfig.TENORS)


class TestPositivityAndBounds:
    """Well-formed output for any accepted input."""

    @pytest.mark.parametrize("scenario_input", GRID)
    def test_outputs_are_finite_and_positive(self, scenario_input):
        result = compute_scenario(scenario_input)

        assert all(math.isfinite(v) for v in _finite_values(result))
        assert result.thirty_day_move > 0
        assert result.put_target > 0
        assert result.upside_potential >= 0
        assert result.downside_potential >= 0
        assert all(lvl.level > 0 for lvl in result.technical_levels)
        assert all(s.put_strike > 0 for s in result.option_suggestions)
        assert all(0 <= t.confidence <= 1 for t in result.futures_targets)

    @pytest.mark.parametrize("scenario_input", GRID[::7])
    def test_ordering(self, scenario_input):
        result = compute_scenario(scenario_input)
        horizons = [t.horizon_days for t in result.futures_targets]
        confidences = [t.confidence for t in result.futures_targets]

        assert horizons == sorted(horizons)
        assert confidences == sorted(confidences, reverse=True)
        assert [s.label for s in result.option_suggestions] == EngineConfig.profile_labels()


class TestMonotonicity:
    """Volatility and drift sign properties."""

    @pytest.mark.parametrize("appetite", list(RiskAppetite))
    def test_move_strictly_increases_with_volatility(self, appetite):
        moves = [
            compute_scenario(ScenarioInput(4500.0, vol, 0.03, appetite)).thirty_day_move
            for vol in (0.01, 0.05, 0.12, 0.25, 0.6, 1.0)
        ]
        assert all(a < b for a, b in zip(moves, moves[1:]))

    @pytest.mark.parametrize("appetite", list(RiskAppetite))
    @pytest.mark.parametrize("momentum", [0.001, 0.05, 0.2])
    def test_positive_momentum(self, appetite, momentum):
        result = compute_scenario(ScenarioInput(4500.0, 0.2, momentum, appetite))
        assert result.annualized_drift > 0
        assert result.upside_potential >= result.downside_potential

    @pytest.mark.parametrize("appetite", list(RiskAppetite))
    @pytest.mark.parametrize("momentum", [-0.001, -0.05, -0.2])
    def test_negative_momentum(self, appetite, momentum):
        result = compute_scenario(ScenarioInput(4500.0, 0.2, momentum, appetite))
        assert result.annualized_drift < 0
        assert result.downside_potential >= result.upside_potential


class TestReferenceScenarios:
    """Named boundary and scenario cases."""

    def test_minimal_volatility(self):
        result = compute_scenario(ScenarioInput(5000.0, 0.01, 0.0, RiskAppetite.NEUTRAL))

        assert 0 < result.thirty_day_move < 50
        assert result.annualized_drift == 0.0
        assert result.call_target - 5000.0 == pytest.approx(5000.0 - result.put_target)

    def test_aggressive_bullish(self, bullish_input):
        result = compute_scenario(bullish_input)

        assert result.annualized_drift > 0
        assert result.upside_potential > result.downside_potential
        assert result.call_target > 4500.0 > result.put_target
        assert result.futures_targets[-1].target > 4500.0

    def test_defensive_bearish(self, bearish_input):
        result = compute_scenario(bearish_input)

        assert result.annualized_drift < 0
        assert result.downside_potential > result.upside_potential
        assert result.futures_targets[-1].target < 4500.0

    def test_technical_levels_straddle_spot(self, neutral_input):
        result = compute_scenario(neutral_input)
        assert result.supports and result.resistances
        assert all(lvl.level < 5000.0 for lvl in result.supports)
        assert all(lvl.level > 5000.0 for lvl in result.resistances)
        assert all(lvl.type in (LevelType.SUPPORT, LevelType.RESISTANCE) for lvl in result.technical_levels)

    @pytest.mark.parametrize("level", [1e-9, 1e13, 1e300])
    def test_anchored_to_caller_level_at_extremes(self, level):
        result = compute_scenario(ScenarioInput(level, 0.2, 0.0, RiskAppetite.NEUTRAL))

        assert result.put_target < level < result.call_target
        assert all(lvl.level < level for lvl in result.supports)
        assert all(lvl.level > level for lvl in result.resistances)
        assert all(s.put_strike < level < s.call_strike for s in result.option_suggestions)

    def test_largest_level_with_extreme_volatility_stays_finite(self):
        result = compute_scenario(
            ScenarioInput(EngineConfig.INDEX_LEVEL_MAX, 1e12, 1e6, RiskAppetite.AGGRESSIVE)
        )
        assert all(math.isfinite(v) for v in _finite_values(result))
        assert result.call_target > EngineConfig.INDEX_LEVEL_MAX

    def test_move_keeps_rising_with_high_volatility(self):
        moves = [
            compute_scenario(ScenarioInput(4500.0, vol, 0.0)).thirty_day_move
            for vol in (5.0, 6.0, 50.0)
        ]
        assert moves[0] < moves[1] < moves[2]


class TestInvalidInput:
    """Boundary failures."""

    def test_negative_level(self):
        with pytest.raises(InvalidInput) as exc:
            compute_scenario(ScenarioInput(-1, 0.2, 0.0, RiskAppetite.NEUTRAL))
        assert exc.value.field == "index_level"

    def test_unknown_appetite(self):
        with pytest.raises(InvalidInput):
            compute_scenario(ScenarioInput(5000.0, 0.2, 0.0, "yolo"))

    def test_engine_reraises(self, settings):
        engine = ScenarioEngine(settings)
        with pytest.raises(InvalidInput):
            engine.compute(ScenarioInput(5000.0, float("nan"), 0.0))
        assert engine.cache.stats()["total_entries"] == 0


class TestScenarioEngine:
    """Tests for engine memoization."""

    def test_cache_hit_returns_same_result(self, settings, neutral_input):
        engine = ScenarioEngine(settings)
        first = engine.compute(neutral_input)
        second = engine.compute(neutral_input)

        assert second is first
        assert engine.cache.stats() == {"total_entries": 1, "hits": 1, "misses": 1}

    def test_cache_key_is_normalized(self, settings):
        engine = ScenarioEngine(settings)
        a = engine.compute(ScenarioInput(5000.0, 0.0, 0.0, "neutral"))
        b = engine.compute(ScenarioInput(5000.0, 0.001, 0.0, RiskAppetite.NEUTRAL))
        assert a is b

    def test_cache_disabled(self, neutral_input):
        engine = ScenarioEngine(Settings(_env_file=None, scenario_cache_enabled=False))
        assert engine.cache is None
        assert engine.compute(neutral_input) == engine.compute(neutral_input)

    def test_clear_cache(self, settings, neutral_input):
        engine = ScenarioEngine(settings)
        engine.compute(neutral_input)
        engine.clear_cache()
        assert len(engine.cache) == 0

    def test_pipeline_layers_share_config(self):
        class Custom(EngineConfig):
            pass

        pipeline = ScenarioPipeline(Custom)
        assert pipeline.normalizer.config is Custom
        assert pipeline.technical.config is Custom


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
