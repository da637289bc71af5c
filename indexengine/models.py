"""
Data models for IndexEngine.
Defines the input, intermediate and result structures of the scenario pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


class InvalidInput(ValueError):
    """Raised when a scenario input cannot be normalized."""

    def __init__(self, field_name: str, value: Any, reason: str):
        self.field = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")


class RiskAppetite(Enum):
    """Discrete modifier on drift magnitude and convexity weighting."""
    DEFENSIVE = "defensive"
    NEUTRAL = "neutral"
    AGGRESSIVE = "aggressive"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LevelType(Enum):
    """Technical anchor side."""
    SUPPORT = "support"
    RESISTANCE = "resistance"


class DriftTone(Enum):
    """Display classification of annualized drift."""
    STRONG_BULLISH = "strong_bullish"
    BULLISH = "bullish"
    SOFT = "soft"
    BEARISH = "bearish"


@dataclass(frozen=True)
class ScenarioInput:
    """Caller-constructed input for one projection."""
    index_level: float
    annual_volatility: float
    macro_momentum: float
    risk_appetite: Union[RiskAppetite, str] = RiskAppetite.NEUTRAL

    def cache_key(self) -> Tuple[float, float, float, str]:
        """Exact input tuple, used for memoization."""
        appetite = self.risk_appetite
        if isinstance(appetite, RiskAppetite):
            appetite = appetite.value
        return (self.index_level, self.annual_volatility, self.macro_momentum, appetite)


@dataclass(frozen=True)
class MoveEstimate:
    """Output of the move & drift estimator."""
    thirty_day_move: float
    annualized_drift: float
    upside_potential: float
    downside_potential: float
    drift_multiplier: float
    skew: float  # signed asymmetry applied to the annual baseline

    @property
    def annual_move(self) -> float:
        """Symmetric annual baseline excursion."""
        return (self.upside_potential + self.downside_potential) / 2


@dataclass(frozen=True)
class FuturesTarget:
    """Projected level for one tenor."""
    tenor: str
    horizon_days: int
    target: float
    confidence: float  # 0-1
    narrative: str


@dataclass(frozen=True)
class OptionSuggestion:
    """Labeled call/put strike pair."""
    label: str
    rationale: str
    call_strike: float
    put_strike: float

    @property
    def width(self) -> float:
        """Distance between the two strikes."""
        return self.call_strike - self.put_strike


@dataclass(frozen=True)
class TechnicalLevel:
    """Support or resistance anchor."""
    label: str
    level: float
    type: LevelType


@dataclass(frozen=True)
class ScenarioResult:
    """Complete projection for one ScenarioInput."""
    thirty_day_move: float
    annualized_drift: float
    downside_potential: float
    upside_potential: float
    call_target: float
    put_target: float
    futures_targets: Tuple[FuturesTarget, ...] = field(default_factory=tuple)
    option_suggestions: Tuple[OptionSuggestion, ...] = field(default_factory=tuple)
    technical_levels: Tuple[TechnicalLevel, ...] = field(default_factory=tuple)

    @property
    def supports(self) -> Tuple[TechnicalLevel, ...]:
        return tuple(lvl for lvl in self.technical_levels if lvl.type == LevelType.SUPPORT)

    @property
    def resistances(self) -> Tuple[TechnicalLevel, ...]:
        return tuple(lvl for lvl in self.technical_levels if lvl.type == LevelType.RESISTANCE)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the stable camelCase field names consumed by displays."""
        return {
            "thirtyDayMove": self.thirty_day_move,
            "annualizedDrift": self.annualized_drift,
            "downsidePotential": self.downside_potential,
            "upsidePotential": self.upside_potential,
            "callTarget": self.call_target,
            "putTarget": self.put_target,
            "futuresTargets": [
                {
                    "tenor": t.tenor,
                    "target": t.target,
                    "confidence": t.confidence,
                    "narrative": t.narrative,
                }
                for t in self.futures_targets
            ],
            "optionSuggestions": [
                {
                    "label": s.label,
                    "rationale": s.rationale,
                    "callStrike": s.call_strike,
                    "putStrike": s.put_strike,
                }
                for s in self.option_suggestions
            ],
            "technicalLevels": [
                {"label": lvl.label, "level": lvl.level, "type": lvl.type.value}
                for lvl in self.technical_levels
            ],
        }


@dataclass(frozen=True)
class IndexTemplate:
    """Reference data used to seed a ScenarioInput."""
    symbol: str
    name: str
    region: str
    baseline_level: float
    annual_volatility: float
    macro_momentum: float
    notes: str = ""
