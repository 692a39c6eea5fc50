from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from bdscore.models.enumerations import Pillar


class ScoringFactor(BaseModel):
    """
    A single factor contributing to a pillar score.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Factor name (e.g. 'Phase III readout')"
    )

    weight: float = Field(
        default=0.0,
        description="Weight of the factor within its pillar"
    )

    score: float = Field(
        default=0.0,
        description="Factor score on the pillar scale"
    )

    rationale: str = Field(
        default="",
        description="Why the factor scored as it did"
    )


class PillarScore(BaseModel):
    """
    Score produced by a pillar scorer. Immutable once produced.
    """

    model_config = ConfigDict(frozen=True)

    raw_score: float = Field(
        ...,
        ge=0,
        le=5,
        description="Raw pillar score on the 0-5 scale"
    )

    confidence: float = Field(
        default=1.0,
        ge=0,
        le=1,
        description="Confidence in the score (0-1)"
    )

    factors: List[ScoringFactor] = Field(
        default_factory=list,
        description="Contributing factors, in scorer order"
    )

    warnings: List[str] = Field(
        default_factory=list,
        description="Data-quality warnings raised by the scorer"
    )

    explanation: Optional[str] = Field(
        default=None,
        description="Free-text explanation of the score"
    )


class PillarScores(BaseModel):
    """
    All six pillar scores for one company. Every pillar is required.
    """

    model_config = ConfigDict(frozen=True)

    asset_quality: PillarScore
    market_outlook: PillarScore
    capital_intensity: PillarScore
    strategic_fit: PillarScore
    financial_readiness: PillarScore
    regulatory_risk: PillarScore

    def get(self, pillar: Pillar) -> PillarScore:
        return getattr(self, Pillar(pillar).value)

    def raw_scores(self) -> Dict[Pillar, float]:
        """Raw score per pillar, in canonical pillar order."""
        return {p: self.get(p).raw_score for p in Pillar}

    def average_confidence(self) -> float:
        """Unweighted mean of the six pillar confidences."""
        return sum(self.get(p).confidence for p in Pillar) / len(Pillar)
