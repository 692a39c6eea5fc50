"""
scoring/aggregator.py

Applies a weight configuration to six pillar scores.

Formula:
    contribution_p = raw_score_p × normalized_weight_p
    total          = Σ contribution_p

Weights are always normalized first, so callers may pass a non-summing
configuration and still get a consistent result: when every raw score
equals s, total == s. Aggregation is fail-soft; validation runs alongside
it and never blocks it.
"""

import structlog
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from bdscore.config import settings
from bdscore.models.enumerations import InvestmentTier, Pillar
from bdscore.models.pillar import PillarScores
from bdscore.models.validation import ValidationResult
from bdscore.models.weights import WeightConfig
from bdscore.scoring.normalizer import normalize_weights
from bdscore.scoring.weight_validator import WeightValidator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WeightedScores:
    """Per-pillar weighted contributions. Derived; recomputed on every aggregation."""
    asset_quality: float
    market_outlook: float
    capital_intensity: float
    strategic_fit: float
    financial_readiness: float
    regulatory_risk: float

    @property
    def total(self) -> float:
        return (
            self.asset_quality + self.market_outlook + self.capital_intensity
            + self.strategic_fit + self.financial_readiness + self.regulatory_risk
        )

    def get(self, pillar: Pillar) -> float:
        return getattr(self, Pillar(pillar).value)

    def as_dict(self) -> Dict[str, float]:
        return {p.value: self.get(p) for p in Pillar}


@dataclass(frozen=True)
class CompositeScore:
    """Output of WeightAggregator.composite()."""
    score: float                  # WeightedScores.total, 0-5 scale for valid inputs
    breakdown: Dict[str, float]   # pillar -> contribution
    confidence: float             # mean pillar confidence in [0, 1]
    tier: InvestmentTier
    normalized_weights: Dict[str, float] = field(default_factory=dict)


class WeightAggregator:
    """Turn pillar scores plus weights into weighted scores."""

    def __init__(self, validator: Optional[WeightValidator] = None):
        self.validator = validator or WeightValidator()

    def apply(self, pillar_scores: PillarScores, weights: WeightConfig) -> WeightedScores:
        """
        Args:
            pillar_scores: All six pillar scores (raw scores in [0, 5]).
            weights: Any weight configuration; normalized internally.

        Returns:
            WeightedScores whose total is Σ raw × normalized weight.

        Examples:
            Raw scores 4.0/3.5/2.5/4.5/3.0/3.8 with weights
            0.3/0.2/0.1/0.2/0.1/0.1 give a total of 3.73.
        """
        normalized = normalize_weights(weights)

        weighted = WeightedScores(**{
            p.value: pillar_scores.get(p).raw_score * normalized.get(p)
            for p in Pillar
        })

        logger.info(
            "weights_applied",
            weight_total_in=weights.total,
            weighted_total=weighted.total,
        )
        return weighted

    def apply_with_recalculation(
        self,
        pillar_scores: PillarScores,
        weights: WeightConfig,
    ) -> Tuple[WeightedScores, ValidationResult]:
        """Validate and aggregate together. Always returns usable scores."""
        validation = self.validator.validate(weights)
        weighted = self.apply(pillar_scores, weights)

        if not validation.is_valid:
            logger.warning(
                "weights_applied_despite_critical_issues",
                errors=[f"{e.field}: {e.message}" for e in validation.errors],
                weighted_total=weighted.total,
            )
        return weighted, validation

    def composite(self, pillar_scores: PillarScores, weights: WeightConfig) -> CompositeScore:
        """
        Single comparable score with its breakdown, confidence and tier.

        Tier cut-offs come from Settings:
            score >= STRONG_CANDIDATE_THRESHOLD      → strong_candidate
            score >= MODERATE_OPPORTUNITY_THRESHOLD  → moderate_opportunity
            otherwise                                → high_risk
        """
        weighted = self.apply(pillar_scores, weights)
        score = weighted.total

        if score >= settings.STRONG_CANDIDATE_THRESHOLD:
            tier = InvestmentTier.STRONG_CANDIDATE
        elif score >= settings.MODERATE_OPPORTUNITY_THRESHOLD:
            tier = InvestmentTier.MODERATE_OPPORTUNITY
        else:
            tier = InvestmentTier.HIGH_RISK

        return CompositeScore(
            score=score,
            breakdown=weighted.as_dict(),
            confidence=pillar_scores.average_confidence(),
            tier=tier,
            normalized_weights=normalize_weights(weights).to_dict(),
        )
