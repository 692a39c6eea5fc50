"""
scoring/normalizer.py

Rescales a WeightConfig so its six weights sum to 1.0.

Formula:
    w_i' = w_i / Σ w          (Σ w != 0)
    w_i' = 1 / 6              (Σ w == 0, equal weighting)

Pure numeric transform: never raises, never validates, never mutates
its input.
"""

from bdscore.models.enumerations import Pillar
from bdscore.models.weights import WeightConfig


def normalize_weights(weights: WeightConfig) -> WeightConfig:
    """
    Return a new WeightConfig with the same relative proportions, summing to 1.0.

    Examples:
        >>> normalize_weights(WeightConfig(asset_quality=2, market_outlook=2,
        ...     capital_intensity=0, strategic_fit=0, financial_readiness=0,
        ...     regulatory_risk=0)).asset_quality
        0.5
    """
    total = weights.total

    if total == 0:
        return WeightConfig.equal()

    return WeightConfig(**{p.value: weights.get(p) / total for p in Pillar})
