# tests/test_weighting_engine.py

"""
Weighting Engine Tests - aggregation, validation, normalization and
real-time recalculation through the WeightingEngine facade.
"""

import pytest

from bdscore.core.exceptions import ConfigurationError, ScoringError
from bdscore.models.enumerations import InvestmentTier, IssueSeverity, Pillar
from bdscore.models.weights import WeightConfig
from bdscore.scoring.weight_validator import WeightValidator


# =============================================================================
# WEIGHT APPLICATION
# =============================================================================

class TestApplyWeights:
    """Tests for apply_weights."""

    def test_valid_weights_return_expected_contributions(
        self, engine, sample_pillar_scores, scenario_weights
    ):
        """Raw 4.0/3.5/2.5/4.5/3.0/3.8 × 0.3/0.2/0.1/0.2/0.1/0.1."""
        weighted = engine.apply_weights(sample_pillar_scores, scenario_weights)

        assert weighted.asset_quality == pytest.approx(1.2, abs=1e-3)
        assert weighted.market_outlook == pytest.approx(0.7, abs=1e-3)
        assert weighted.capital_intensity == pytest.approx(0.25, abs=1e-3)
        assert weighted.strategic_fit == pytest.approx(0.9, abs=1e-3)
        assert weighted.financial_readiness == pytest.approx(0.3, abs=1e-3)
        assert weighted.regulatory_risk == pytest.approx(0.38, abs=1e-3)
        assert weighted.total == pytest.approx(3.73, abs=1e-3)

    def test_total_is_sum_of_contributions(self, engine, sample_pillar_scores, scenario_weights):
        weighted = engine.apply_weights(sample_pillar_scores, scenario_weights)
        assert weighted.total == pytest.approx(sum(weighted.as_dict().values()))

    def test_unnormalized_weights_are_normalized_and_applied(
        self, engine, sample_pillar_scores, unnormalized_weights
    ):
        weighted = engine.apply_weights(sample_pillar_scores, unnormalized_weights)

        expected = sum(
            sample_pillar_scores.get(p).raw_score * unnormalized_weights.get(p) / 1.6
            for p in Pillar
        )
        assert weighted.total == pytest.approx(expected, abs=1e-3)
        assert 0 < weighted.total <= 5

    def test_input_weights_are_not_mutated(self, engine, sample_pillar_scores, unnormalized_weights):
        before = unnormalized_weights.to_dict()
        engine.apply_weights(sample_pillar_scores, unnormalized_weights)
        assert unnormalized_weights.to_dict() == before

    def test_zero_pillar_scores_total_zero(self, engine, zero_pillar_scores):
        weighted = engine.apply_weights(zero_pillar_scores, WeightConfig())
        assert weighted.total == pytest.approx(0.0, abs=1e-3)

    def test_maximum_pillar_scores_total_five(self, engine, max_pillar_scores):
        weighted = engine.apply_weights(max_pillar_scores, WeightConfig())
        assert weighted.total == pytest.approx(5.0, abs=1e-3)

    def test_all_zero_weights_fall_back_to_equal_weighting(
        self, engine, sample_pillar_scores, all_zero_weights
    ):
        weighted = engine.apply_weights(sample_pillar_scores, all_zero_weights)
        mean_raw = sum(sample_pillar_scores.raw_scores().values()) / 6
        assert weighted.total == pytest.approx(mean_raw, abs=1e-3)


# =============================================================================
# VALIDATION
# =============================================================================

class TestValidateWeights:
    """Tests for validate_weights."""

    def test_default_weights_are_valid(self, engine):
        result = engine.validate_weights(WeightConfig())
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert result.completeness == 1.0

    def test_negative_weight_is_critical(self, engine):
        weights = WeightConfig(
            asset_quality=-0.1, market_outlook=0.3, capital_intensity=0.2,
            strategic_fit=0.2, financial_readiness=0.2, regulatory_risk=0.2,
        )
        result = engine.validate_weights(weights)

        assert not result.is_valid
        assert any(
            e.field == "asset_quality" and "negative" in e.message
            and e.severity == IssueSeverity.CRITICAL
            for e in result.errors
        )

    def test_weight_above_one_is_critical(self, engine):
        weights = WeightConfig(
            asset_quality=1.5, market_outlook=0.1, capital_intensity=0.1,
            strategic_fit=0.1, financial_readiness=0.1, regulatory_risk=0.1,
        )
        result = engine.validate_weights(weights)

        assert not result.is_valid
        assert any(e.field == "asset_quality" and "exceed" in e.message for e in result.errors)

    def test_sum_deviation_is_warning_only(self, engine):
        weights = WeightConfig(
            asset_quality=0.2, market_outlook=0.2, capital_intensity=0.2,
            strategic_fit=0.2, financial_readiness=0.1, regulatory_risk=0.05,
        )
        result = engine.validate_weights(weights)

        assert result.is_valid
        assert result.errors == []
        total_warnings = result.issues_for("total")
        assert len(total_warnings) == 1
        assert total_warnings[0].severity == IssueSeverity.WARNING
        assert "0.950" in total_warnings[0].message

    def test_sum_within_tolerance_has_no_total_warning(self, engine):
        weights = WeightConfig(
            asset_quality=0.25, market_outlook=0.2, capital_intensity=0.15,
            strategic_fit=0.2, financial_readiness=0.1, regulatory_risk=0.105,
        )
        result = engine.validate_weights(weights)
        assert result.issues_for("total") == []

    def test_zero_weight_is_warning(self, engine):
        weights = WeightConfig(
            asset_quality=0.0, market_outlook=0.25, capital_intensity=0.25,
            strategic_fit=0.25, financial_readiness=0.125, regulatory_risk=0.125,
        )
        result = engine.validate_weights(weights)

        assert result.is_valid
        assert any(
            w.field == "asset_quality" and "Zero weight" in w.message
            for w in result.warnings
        )
        assert result.completeness == pytest.approx(5 / 6)

    def test_all_zero_weights_are_critical(self, engine, all_zero_weights):
        result = engine.validate_weights(all_zero_weights)

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].field == "total"
        assert result.errors[0].severity == IssueSeverity.CRITICAL
        zero_warnings = [w for w in result.warnings if w.field != "total"]
        assert len(zero_warnings) == 6
        assert result.completeness == 0.0

    def test_negative_and_above_one_both_reported(self, engine):
        weights = WeightConfig(
            asset_quality=-0.5, market_outlook=1.2, capital_intensity=0.1,
            strategic_fit=0.1, financial_readiness=0.05, regulatory_risk=0.05,
        )
        result = engine.validate_weights(weights)
        assert {e.field for e in result.errors} == {"asset_quality", "market_outlook"}

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_is_critical(self, engine, value):
        result = engine.validate_weights(WeightConfig(asset_quality=value))

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].field == "asset_quality"
        assert result.errors[0].severity == IssueSeverity.CRITICAL
        assert "finite number" in result.errors[0].message
        assert result.issues_for("total") == []

    def test_below_configured_minimum_is_not_called_negative(self):
        validator = WeightValidator(min_weight=0.05)
        weights = WeightConfig(
            asset_quality=0.03, market_outlook=0.27, capital_intensity=0.15,
            strategic_fit=0.25, financial_readiness=0.15, regulatory_risk=0.15,
        )
        result = validator.validate(weights)

        assert not result.is_valid
        assert result.errors[0].field == "asset_quality"
        assert "below minimum of 0.05" in result.errors[0].message
        assert "negative" not in result.errors[0].message


# =============================================================================
# NORMALIZATION
# =============================================================================

class TestNormalizeWeights:
    """Tests for normalize_weights."""

    def test_normalizes_to_one(self, engine, unnormalized_weights):
        normalized = engine.normalize_weights(unnormalized_weights)
        assert normalized.total == pytest.approx(1.0, abs=1e-3)

    def test_preserves_proportions(self, engine, unnormalized_weights):
        normalized = engine.normalize_weights(unnormalized_weights)
        assert normalized.asset_quality / normalized.market_outlook == pytest.approx(0.5 / 0.4)
        assert normalized.asset_quality == pytest.approx(0.5 / 1.6)

    def test_all_zero_weights_become_equal(self, engine, all_zero_weights):
        normalized = engine.normalize_weights(all_zero_weights)
        for pillar in Pillar:
            assert normalized.get(pillar) == pytest.approx(1.0 / 6.0, abs=1e-3)

    def test_returns_new_object(self, engine, unnormalized_weights):
        normalized = engine.normalize_weights(unnormalized_weights)
        assert normalized is not unnormalized_weights
        assert unnormalized_weights.asset_quality == 0.5


# =============================================================================
# REAL-TIME RECALCULATION
# =============================================================================

class TestApplyWeightsWithRecalculation:
    """Tests for apply_weights_with_recalculation."""

    def test_valid_weights_return_scores_and_validation(self, engine, sample_pillar_scores):
        weighted, validation = engine.apply_weights_with_recalculation(
            sample_pillar_scores, WeightConfig()
        )
        assert weighted.total > 0
        assert validation.is_valid

    def test_invalid_weights_still_return_scores(self, engine, sample_pillar_scores):
        weights = WeightConfig(
            asset_quality=-0.1, market_outlook=0.3, capital_intensity=0.3,
            strategic_fit=0.3, financial_readiness=0.1, regulatory_risk=0.1,
        )
        weighted, validation = engine.apply_weights_with_recalculation(sample_pillar_scores, weights)

        assert weighted.total > 0
        assert not validation.is_valid
        assert validation.errors

    def test_scores_match_apply_weights(self, engine, sample_pillar_scores, unnormalized_weights):
        weighted, _ = engine.apply_weights_with_recalculation(sample_pillar_scores, unnormalized_weights)
        assert weighted == engine.apply_weights(sample_pillar_scores, unnormalized_weights)

    def test_critical_issues_logged(self, engine, sample_pillar_scores, all_zero_weights, log_output):
        engine.apply_weights_with_recalculation(sample_pillar_scores, all_zero_weights)

        events = [e["event"] for e in log_output.entries]
        assert "weights_applied_despite_critical_issues" in events


# =============================================================================
# COMPOSITE SCORE
# =============================================================================

class TestCalculateWeightedScore:
    """Tests for the composite score with tier and confidence."""

    def test_composite_matches_total(self, engine, sample_pillar_scores, scenario_weights):
        composite = engine.calculate_weighted_score(sample_pillar_scores, scenario_weights)

        assert composite.score == pytest.approx(3.73, abs=1e-3)
        assert composite.breakdown["asset_quality"] == pytest.approx(1.2, abs=1e-3)
        assert composite.tier == InvestmentTier.MODERATE_OPPORTUNITY
        assert sum(composite.normalized_weights.values()) == pytest.approx(1.0)

    def test_confidence_is_mean_of_pillars(self, engine, sample_pillar_scores):
        composite = engine.calculate_weighted_score(sample_pillar_scores, WeightConfig())
        expected = (0.8 + 0.7 + 0.9 + 0.85 + 0.6 + 0.75) / 6
        assert composite.confidence == pytest.approx(expected)

    def test_tiers(self, engine, pillar_scores_factory):
        strong = engine.calculate_weighted_score(pillar_scores_factory([4.5] * 6), WeightConfig())
        risky = engine.calculate_weighted_score(pillar_scores_factory([2.0] * 6), WeightConfig())

        assert strong.tier == InvestmentTier.STRONG_CANDIDATE
        assert risky.tier == InvestmentTier.HIGH_RISK
        assert "careful evaluation" in risky.tier.summary


# =============================================================================
# PROFILES THROUGH THE ENGINE
# =============================================================================

class TestEngineProfiles:
    """Profile operations exposed by the engine."""

    def test_save_and_load(self, engine):
        weights = WeightConfig()
        engine.save_weight_profile("TestProfile", weights)

        loaded = engine.load_weight_profile("TestProfile")
        assert loaded is not None
        assert loaded.asset_quality == pytest.approx(weights.asset_quality, abs=1e-3)

    def test_save_invalid_raises_scoring_error(self, engine):
        weights = WeightConfig(
            asset_quality=-1.0, market_outlook=0.2, capital_intensity=0.2,
            strategic_fit=0.2, financial_readiness=0.2, regulatory_risk=0.2,
        )
        with pytest.raises(ScoringError) as exc_info:
            engine.save_weight_profile("InvalidProfile", weights)

        assert isinstance(exc_info.value, ConfigurationError)
        assert engine.load_weight_profile("InvalidProfile") is None

    def test_load_missing_returns_none(self, engine):
        assert engine.load_weight_profile("NonExistentProfile") is None

    def test_available_profiles_include_builtins(self, engine):
        profiles = engine.get_available_profiles()
        for name in ("Conservative", "Aggressive", "Balanced", "Strategic"):
            assert name in profiles

    def test_delete(self, engine):
        engine.save_weight_profile("TestProfile", WeightConfig())
        assert engine.delete_weight_profile("TestProfile") is True
        assert engine.load_weight_profile("TestProfile") is None
        assert engine.delete_weight_profile("TestProfile") is False

    def test_load_or_default(self, engine):
        assert engine.load_or_default(None) == WeightConfig()
        assert engine.load_or_default("Missing") == WeightConfig()
        assert engine.load_or_default("Aggressive").asset_quality == pytest.approx(0.35)
