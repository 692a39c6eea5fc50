"""
scoring/weighting_engine.py

Facade over the weighting components, exposing the operations consumed by
the evaluation and configuration-management layers.

Components:
    WeightValidator          → validate_weights
    normalize_weights        → normalize_weights
    WeightAggregator         → apply_weights, apply_weights_with_recalculation,
                               calculate_weighted_score
    WeightProfileRepository  → save/load/delete_weight_profile, get_available_profiles
    WeightImpactAnalyzer     → calculate_weight_impact
"""

from typing import List, Optional, Tuple

from bdscore.models.pillar import PillarScores
from bdscore.models.validation import ValidationResult
from bdscore.models.weights import WeightConfig
from bdscore.repositories.profile_repository import WeightProfileRepository
from bdscore.scoring.aggregator import CompositeScore, WeightAggregator, WeightedScores
from bdscore.scoring.impact_analyzer import WeightImpact, WeightImpactAnalyzer
from bdscore.scoring.normalizer import normalize_weights
from bdscore.scoring.weight_validator import WeightValidator


class WeightingEngine:
    """Apply, validate, persist and compare pillar weight configurations."""

    def __init__(
        self,
        profile_repository: Optional[WeightProfileRepository] = None,
        validator: Optional[WeightValidator] = None,
    ):
        self.validator = validator or WeightValidator()
        self.aggregator = WeightAggregator(self.validator)
        self.impact_analyzer = WeightImpactAnalyzer(self.aggregator)
        if profile_repository is None:
            from bdscore.core.dependencies import get_profile_repository
            profile_repository = get_profile_repository()
        self.profiles = profile_repository

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def apply_weights(self, pillar_scores: PillarScores, weights: WeightConfig) -> WeightedScores:
        return self.aggregator.apply(pillar_scores, weights)

    def apply_weights_with_recalculation(
        self,
        pillar_scores: PillarScores,
        weights: WeightConfig,
    ) -> Tuple[WeightedScores, ValidationResult]:
        return self.aggregator.apply_with_recalculation(pillar_scores, weights)

    def calculate_weighted_score(self, pillar_scores: PillarScores, weights: WeightConfig) -> CompositeScore:
        return self.aggregator.composite(pillar_scores, weights)

    # ------------------------------------------------------------------
    # Validation / normalization
    # ------------------------------------------------------------------

    def validate_weights(self, weights: WeightConfig) -> ValidationResult:
        return self.validator.validate(weights)

    def normalize_weights(self, weights: WeightConfig) -> WeightConfig:
        return normalize_weights(weights)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def save_weight_profile(self, name: str, weights: WeightConfig) -> None:
        """Raises ConfigurationError if the weights carry a critical issue."""
        self.profiles.save(name, weights)

    def load_weight_profile(self, name: str) -> Optional[WeightConfig]:
        return self.profiles.get_by_name(name)

    def load_or_default(self, name: Optional[str]) -> WeightConfig:
        """Profile by name, falling back to the default configuration."""
        if name:
            weights = self.profiles.get_by_name(name)
            if weights is not None:
                return weights
        return WeightConfig()

    def get_available_profiles(self) -> List[str]:
        return self.profiles.get_all_names()

    def delete_weight_profile(self, name: str) -> bool:
        return self.profiles.delete(name)

    # ------------------------------------------------------------------
    # Impact
    # ------------------------------------------------------------------

    def calculate_weight_impact(
        self,
        pillar_scores: PillarScores,
        original_weights: WeightConfig,
        new_weights: WeightConfig,
    ) -> WeightImpact:
        return self.impact_analyzer.calculate(pillar_scores, original_weights, new_weights)
