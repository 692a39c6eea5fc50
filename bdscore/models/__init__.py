"""
Models Package - BD Weighting Engine
bdscore/models/__init__.py
"""

from bdscore.models.enumerations import InvestmentTier, IssueSeverity, Pillar
from bdscore.models.pillar import PillarScore, PillarScores, ScoringFactor
from bdscore.models.validation import ValidationIssue, ValidationResult
from bdscore.models.weights import WeightConfig, builtin_profiles

__all__ = [
    # Enumerations
    "InvestmentTier",
    "IssueSeverity",
    "Pillar",
    # Pillar scores
    "PillarScore",
    "PillarScores",
    "ScoringFactor",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    # Weights
    "WeightConfig",
    "builtin_profiles",
]
