"""
Presentation gauges derived from a projected scenario.

These are the secondary figures a display shows next to the raw result:
support cushion and breakout energy bars, a drift tone, a synthetic gamma
overlay and the normalized futures curve path. All functions are pure.
"""

from dataclasses import dataclass
from typing import List, Tuple

from indexengine.config import EngineConfig
from indexengine.models import DriftTone, RiskAppetite, ScenarioInput, ScenarioResult


@dataclass(frozen=True)
class CurvePoint:
    x: float  # 0 = spot, 1 = furthest tenor
    y: float


@dataclass(frozen=True)
class ScenarioGauges:
    """Display figures for one scenario."""
    support_cushion: float
    breakout_level: float
    cushion_width_pct: float
    breakout_width_pct: float
    gamma_overlay_pct: float
    drift_tone: DriftTone
    convexity_bias: str
    curve: Tuple[CurvePoint, ...]
    curve_bounds: Tuple[float, float]


def format_level(value: float) -> str:
    """Thousands separators for large levels, two decimals otherwise."""
    if value >= 1000:
        return f"{value:,.0f}"
    return f"{value:.2f}"


def classify_drift(drift: float, config=EngineConfig) -> DriftTone:
    thresholds = config.DRIFT_TONE_THRESHOLDS
    if drift > thresholds["strong_bullish"]:
        return DriftTone.STRONG_BULLISH
    if drift > thresholds["bullish"]:
        return DriftTone.BULLISH
    if drift > thresholds["soft"]:
        return DriftTone.SOFT
    return DriftTone.BEARISH


def gamma_overlay(drift: float, volatility: float, config=EngineConfig) -> float:
    """Synthetic gauge of convexity demand, in percent."""
    return drift * config.GAMMA_DRIFT_WEIGHT + volatility * config.GAMMA_VOLATILITY_WEIGHT


def band_width(potential: float, thirty_day_move: float, config=EngineConfig) -> float:
    """Percent fill of a cushion/breakout bar."""
    ratio = potential / thirty_day_move
    return min(config.BAND_WIDTH_MAX, ratio * config.BAND_WIDTH_SCALE + config.BAND_WIDTH_OFFSET)


def convexity_bias(risk_appetite: RiskAppetite, call_target: float, index_level: float) -> str:
    direction = "upside" if call_target > index_level else "mean reversion"
    return f"{risk_appetite.label} bias pushes convexity toward {direction}."


def curve_points(index_level: float, result: ScenarioResult) -> List[CurvePoint]:
    """Spot followed by each tenor target, evenly spaced on x."""
    targets = result.futures_targets
    span = (len(targets) - 1) or 1
    points = [CurvePoint(x=0.0, y=index_level)]
    for idx, target in enumerate(targets):
        points.append(CurvePoint(x=idx / span, y=target.target))
    return points


def curve_bounds(points: List[CurvePoint], config=EngineConfig) -> Tuple[float, float]:
    """Padded (min, max) of the curve values."""
    values = [p.y for p in points]
    pad = config.CURVE_BOUND_PADDING
    return min(values) * (1 - pad), max(values) * (1 + pad)


def build_gauges(
    scenario_input: ScenarioInput,
    result: ScenarioResult,
    config=EngineConfig
) -> ScenarioGauges:
    """
    Derive display gauges for a projected scenario.

    Args:
        scenario_input: Normalized input the result was computed from
        result: Engine output

    Returns:
        ScenarioGauges
    """
    level = scenario_input.index_level
    appetite = scenario_input.risk_appetite
    if not isinstance(appetite, RiskAppetite):
        appetite = RiskAppetite(str(appetite).strip().lower())

    points = curve_points(level, result)
    return ScenarioGauges(
        support_cushion=max(level - result.downside_potential, level * config.MIN_PRICE_FRACTION),
        breakout_level=level + result.upside_potential,
        cushion_width_pct=band_width(result.downside_potential, result.thirty_day_move, config),
        breakout_width_pct=band_width(result.upside_potential, result.thirty_day_move, config),
        gamma_overlay_pct=gamma_overlay(result.annualized_drift, scenario_input.annual_volatility, config),
        drift_tone=classify_drift(result.annualized_drift, config),
        convexity_bias=convexity_bias(appetite, result.call_target, level),
        curve=tuple(points),
        curve_bounds=curve_bounds(points, config),
    )
