"""
Weight configuration model - BD Weighting Engine
bdscore/models/weights.py

WeightConfig holds one weight per pillar. Construction never fails on
range or sum: out-of-range or non-summing configurations are legal to
build and are caught by WeightValidator before being trusted.
"""

from typing import Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bdscore.config import settings
from bdscore.core.exceptions import InvalidDataError, MissingRequiredFieldError
from bdscore.models.enumerations import Pillar


class WeightConfig(BaseModel):
    """Six pillar weights, each a share of total importance."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    asset_quality: float = Field(default_factory=lambda: settings.W_ASSET_QUALITY)
    market_outlook: float = Field(default_factory=lambda: settings.W_MARKET_OUTLOOK)
    capital_intensity: float = Field(default_factory=lambda: settings.W_CAPITAL_INTENSITY)
    strategic_fit: float = Field(default_factory=lambda: settings.W_STRATEGIC_FIT)
    financial_readiness: float = Field(default_factory=lambda: settings.W_FINANCIAL_READINESS)
    regulatory_risk: float = Field(default_factory=lambda: settings.W_REGULATORY_RISK)

    def get(self, pillar: Pillar) -> float:
        return getattr(self, Pillar(pillar).value)

    def as_list(self) -> List[float]:
        """Weights in canonical pillar order."""
        return [self.get(p) for p in Pillar]

    @property
    def total(self) -> float:
        return sum(self.as_list())

    def to_dict(self, by_alias: bool = False) -> Dict[str, float]:
        """
        Flat pillar -> weight mapping.

        Args:
            by_alias: Use camelCase keys ('assetQuality') instead of the
                      snake_case pillar values.
        """
        return {
            (p.wire_name if by_alias else p.value): self.get(p)
            for p in Pillar
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "WeightConfig":
        """
        Build a config from a mapping keyed by pillar.

        Keys may be snake_case ('asset_quality') or camelCase
        ('assetQuality'). Unknown keys are ignored.

        Raises:
            MissingRequiredFieldError: if any of the six pillars is absent.
            InvalidDataError: if a weight is null or not numeric.
        """
        weights: Dict[str, float] = {}
        missing: List[str] = []
        for pillar in Pillar:
            if pillar.value in data:
                raw = data[pillar.value]
            elif pillar.wire_name in data:
                raw = data[pillar.wire_name]
            else:
                missing.append(pillar.value)
                continue
            try:
                weights[pillar.value] = float(raw)
            except (TypeError, ValueError):
                raise InvalidDataError(f"{pillar.value}: weight must be numeric")
        if missing:
            raise MissingRequiredFieldError(missing)
        return cls(**weights)

    @classmethod
    def equal(cls) -> "WeightConfig":
        """Every pillar weighted 1/6."""
        share = 1.0 / len(Pillar)
        return cls(**{p.value: share for p in Pillar})


# Built-in profiles
CONSERVATIVE_WEIGHTS = {
    "asset_quality": 0.20,
    "market_outlook": 0.15,
    "capital_intensity": 0.15,
    "strategic_fit": 0.15,
    "financial_readiness": 0.20,
    "regulatory_risk": 0.15,
}

AGGRESSIVE_WEIGHTS = {
    "asset_quality": 0.35,
    "market_outlook": 0.30,
    "capital_intensity": 0.10,
    "strategic_fit": 0.15,
    "financial_readiness": 0.05,
    "regulatory_risk": 0.05,
}

STRATEGIC_WEIGHTS = {
    "asset_quality": 0.30,
    "market_outlook": 0.20,
    "capital_intensity": 0.10,
    "strategic_fit": 0.30,
    "financial_readiness": 0.05,
    "regulatory_risk": 0.05,
}


def builtin_profiles() -> Dict[str, WeightConfig]:
    """Fresh copies of the built-in profiles, keyed by display name."""
    return {
        "Conservative": WeightConfig(**CONSERVATIVE_WEIGHTS),
        "Aggressive": WeightConfig(**AGGRESSIVE_WEIGHTS),
        "Balanced": WeightConfig.equal(),
        "Strategic": WeightConfig(**STRATEGIC_WEIGHTS),
    }
