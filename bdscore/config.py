"""Application configuration with validation."""
from typing import Dict, Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Weighting engine settings, overridable through the environment or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "BD Weighting Engine"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Weight validation
    MIN_WEIGHT: float = Field(default=0.0, ge=0.0, le=1.0)
    MAX_WEIGHT: float = Field(default=1.0, ge=0.0, le=1.0)
    WEIGHT_SUM_TOLERANCE: float = Field(default=0.01, gt=0.0, le=0.1)

    # Impact analysis (contribution points on the 0-5 scale)
    IMPACT_MATERIALITY_THRESHOLD: float = Field(default=0.1, ge=0.0, le=5.0)

    # Composite score tiers
    STRONG_CANDIDATE_THRESHOLD: float = Field(default=4.0, ge=0.0, le=5.0)
    MODERATE_OPPORTUNITY_THRESHOLD: float = Field(default=3.0, ge=0.0, le=5.0)

    # Default pillar weights
    W_ASSET_QUALITY: float = Field(default=0.25, ge=0.0, le=1.0)
    W_MARKET_OUTLOOK: float = Field(default=0.20, ge=0.0, le=1.0)
    W_CAPITAL_INTENSITY: float = Field(default=0.15, ge=0.0, le=1.0)
    W_STRATEGIC_FIT: float = Field(default=0.20, ge=0.0, le=1.0)
    W_FINANCIAL_READINESS: float = Field(default=0.10, ge=0.0, le=1.0)
    W_REGULATORY_RISK: float = Field(default=0.10, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_pillar_weights(self):
        """Validate default pillar weights sum to 1.0."""
        total = sum(self.default_weights.values())
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Pillar weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_tier_thresholds(self):
        """Strong-candidate cut-off must sit above the moderate one."""
        if self.STRONG_CANDIDATE_THRESHOLD < self.MODERATE_OPPORTUNITY_THRESHOLD:
            raise ValueError("STRONG_CANDIDATE_THRESHOLD must be >= MODERATE_OPPORTUNITY_THRESHOLD")
        return self

    @property
    def default_weights(self) -> Dict[str, float]:
        """Get default pillar weights keyed by pillar value."""
        return {
            "asset_quality": self.W_ASSET_QUALITY,
            "market_outlook": self.W_MARKET_OUTLOOK,
            "capital_intensity": self.W_CAPITAL_INTENSITY,
            "strategic_fit": self.W_STRATEGIC_FIT,
            "financial_readiness": self.W_FINANCIAL_READINESS,
            "regulatory_risk": self.W_REGULATORY_RISK,
        }

@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
