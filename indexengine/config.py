"""
Configuration management for IndexEngine.
Loads runtime settings from environment variables and .env file, and holds
the static model constant table used by every pipeline layer.
"""

from typing import Dict, Tuple
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_file: str = Field(default="logs/indexengine.log")
    log_to_file: bool = Field(default=False, description="Also write logs to log_file")

    # Result memoization (per engine instance)
    scenario_cache_enabled: bool = Field(default=True)
    scenario_cache_ttl: int = Field(default=300, ge=1, description="Seconds a cached scenario stays valid")
    scenario_cache_max_entries: int = Field(default=512, ge=1)

    # Seeding defaults for the CLI and dashboard
    default_template: str = Field(default="SPX")
    default_risk_appetite: str = Field(default="neutral")

    @field_validator("default_risk_appetite")
    @classmethod
    def _check_risk_appetite(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in EngineConfig.DRIFT_MULTIPLIERS:
            raise ValueError(
                f"default_risk_appetite must be one of {sorted(EngineConfig.DRIFT_MULTIPLIERS)}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


class EngineConfig:
    """Static configuration for the scenario projection layers."""

    # ------------------------------------------------------------------
    # Input normalization
    # ------------------------------------------------------------------
    VOLATILITY_FLOOR = 0.01
    # Overflow guard only: level * volatility must stay far from float max
    VOLATILITY_CEILING = 1e6
    # Accepted index levels; anything outside is rejected, never replaced
    INDEX_LEVEL_MIN = 1e-300
    INDEX_LEVEL_MAX = 1e300

    # ------------------------------------------------------------------
    # Move & drift
    # ------------------------------------------------------------------
    DAYS_PER_YEAR = 365.0
    MOVE_HORIZON_DAYS = 30.0

    # Risk appetite -> multiplier on macro momentum
    DRIFT_MULTIPLIERS: Dict[str, float] = {
        "defensive": 0.6,
        "neutral": 1.0,
        "aggressive": 1.5,
    }

    # Annualized drift is clamped to +/- this so targets stay finite
    MAX_ABS_DRIFT = 10.0

    # skew = ASYMMETRY_WEIGHT * tanh(drift / volatility), so |skew| < 0.5
    # and both potentials stay strictly positive.
    ASYMMETRY_WEIGHT = 0.5

    # ------------------------------------------------------------------
    # Futures target curve
    # ------------------------------------------------------------------
    # (label, horizon in days), nearest first
    TENORS: Tuple[Tuple[str, int], ...] = (
        ("1M", 30),
        ("3M", 91),
        ("6M", 182),
        ("12M", 365),
    )

    CONFIDENCE_HORIZON_DECAY = 0.35   # k1 on sqrt(t)
    CONFIDENCE_VOLATILITY_DECAY = 0.6  # k2 on annual volatility
    CONFIDENCE_MIN = 0.05
    CONFIDENCE_MAX = 0.95

    # Bound on drift * t before exponentiation
    MAX_LOG_GROWTH = 5.0

    # Relative change thresholds for the narrative
    NARRATIVE_STRONG_MOVE = 0.05
    NARRATIVE_FLAT_BAND = 0.01

    NARRATIVES: Dict[str, str] = {
        "trend_extension": "Trend extension: carry keeps the curve climbing.",
        "grinding_higher": "Grinding higher on constructive momentum.",
        "range_bound_up": "Range-bound with a mild upward lean.",
        "range_bound": "Range-bound around spot; no directional carry.",
        "range_bound_down": "Range-bound with a mild downward lean.",
        "softening": "Softening bias as momentum fades below spot.",
        "correction_risk": "Correction risk: negative carry dominates the tenor.",
    }

    # ------------------------------------------------------------------
    # Option strikes
    # ------------------------------------------------------------------
    # Risk appetite -> convexity multiplier f() on headline targets
    CONVEXITY_MULTIPLIERS: Dict[str, float] = {
        "defensive": 0.35,
        "neutral": 0.5,
        "aggressive": 0.7,
    }

    # (profile key, label, fraction of the 30-day move), declared order is output order
    OPTION_PROFILES: Tuple[Tuple[str, str, float], ...] = (
        ("conservative", "Conservative", 0.5),
        ("balanced", "Balanced", 1.0),
        ("aggressive", "Aggressive", 1.6),
    )

    # (profile key, upside bias?) -> rationale
    OPTION_RATIONALES: Dict[Tuple[str, bool], str] = {
        ("conservative", True): "Tight collar inside half the 30-day move; harvest carry while the tape drifts up.",
        ("conservative", False): "Tight collar inside half the 30-day move; fade stretches back toward spot.",
        ("balanced", True): "Strikes one 30-day move out; participate in the upside while hedging a full swing.",
        ("balanced", False): "Strikes one 30-day move out; sell the edges of a mean-reverting range.",
        ("aggressive", True): "Wide strangle beyond the expected move; pay for convexity into a breakout.",
        ("aggressive", False): "Wide strangle beyond the expected move; own tail protection while rallies fade.",
    }

    # Floor for any emitted price, as a fraction of the index level
    MIN_PRICE_FRACTION = 0.01

    # ------------------------------------------------------------------
    # Technical anchors
    # ------------------------------------------------------------------
    # (label, signed fraction of the 30-day move), ascending price order
    TECHNICAL_ANCHORS: Tuple[Tuple[str, float], ...] = (
        ("Deep Support", -1.2),
        ("Support", -0.6),
        ("Resistance", 0.6),
        ("Breakout Resistance", 1.2),
    )

    # ------------------------------------------------------------------
    # Presentation gauges
    # ------------------------------------------------------------------
    DRIFT_TONE_THRESHOLDS = {
        "strong_bullish": 0.06,
        "bullish": 0.0,
        "soft": -0.04,
    }
    BAND_WIDTH_SCALE = 42.0
    BAND_WIDTH_OFFSET = 30.0
    BAND_WIDTH_MAX = 95.0
    GAMMA_DRIFT_WEIGHT = 100.0
    GAMMA_VOLATILITY_WEIGHT = 50.0
    CURVE_BOUND_PADDING = 0.02

    @classmethod
    def tenor_labels(cls) -> list:
        """Get the tenor labels in curve order."""
        return [label for label, _ in cls.TENORS]

    @classmethod
    def profile_labels(cls) -> list:
        """Get the option profile labels in declared order."""
        return [label for _, label, _ in cls.OPTION_PROFILES]


def get_settings() -> Settings:
    """Get application settings, loading from .env file."""
    return Settings()
