# bdscore/scoring/weight_validator.py
"""
Weight Validator
----------------
Checks a WeightConfig for structural correctness.

Rules (each pillar independently, then in aggregate):
    weight not finite          → critical  (sum check skipped)
    weight < 0                 → critical  ("negative weight not allowed")
    weight < MIN_WEIGHT        → critical  ("below minimum")
    weight > MAX_WEIGHT        → critical  ("exceeds maximum of 1")
    weight == 0                → warning   (pillar is ignored)
    all six weights == 0       → critical on "total"
    |Σ weights − 1| > tolerance → warning on "total" (auto-normalized downstream)

Only critical issues make a configuration invalid. Issues are returned as
data and never raised.
"""
import math

import structlog
from typing import List, Optional

from bdscore.config import settings
from bdscore.models.enumerations import IssueSeverity, Pillar
from bdscore.models.validation import ValidationIssue, ValidationResult
from bdscore.models.weights import WeightConfig

logger = structlog.get_logger(__name__)

TOTAL_FIELD = "total"


class WeightValidator:
    """Validate pillar weight configurations."""

    def __init__(
        self,
        min_weight: Optional[float] = None,
        max_weight: Optional[float] = None,
        sum_tolerance: Optional[float] = None,
    ):
        self.min_weight = settings.MIN_WEIGHT if min_weight is None else min_weight
        self.max_weight = settings.MAX_WEIGHT if max_weight is None else max_weight
        self.sum_tolerance = (
            settings.WEIGHT_SUM_TOLERANCE if sum_tolerance is None else sum_tolerance
        )

    def validate(self, weights: WeightConfig) -> ValidationResult:
        """
        Args:
            weights: Configuration to check. Never mutated.

        Returns:
            ValidationResult whose `is_valid` is False iff a critical issue
            was raised. Critical issues are in `errors`, the rest in `warnings`.
        """
        errors: List[ValidationIssue] = []
        warnings: List[ValidationIssue] = []

        non_finite = False
        for pillar in Pillar:
            value = weights.get(pillar)

            if not math.isfinite(value):
                non_finite = True
                errors.append(ValidationIssue(
                    field=pillar.value,
                    message=f"Weight {value} is not allowed; weight must be a finite number",
                    severity=IssueSeverity.CRITICAL,
                    suggestion="Use a weight between 0 and 1",
                ))
                continue

            if value < 0.0:
                errors.append(ValidationIssue(
                    field=pillar.value,
                    message=f"Weight {value:.3f} is negative; negative weight not allowed",
                    severity=IssueSeverity.CRITICAL,
                    suggestion="Use a weight between 0 and 1",
                ))
            elif value < self.min_weight:
                errors.append(ValidationIssue(
                    field=pillar.value,
                    message=f"Weight {value:.3f} is below minimum of {self.min_weight:g}",
                    severity=IssueSeverity.CRITICAL,
                    suggestion=f"Use a weight of at least {self.min_weight:g}",
                ))

            if value > self.max_weight:
                errors.append(ValidationIssue(
                    field=pillar.value,
                    message=f"Weight {value:.3f} exceeds maximum of {self.max_weight:g}",
                    severity=IssueSeverity.CRITICAL,
                    suggestion="Use a weight between 0 and 1",
                ))

            if value == 0.0:
                warnings.append(ValidationIssue(
                    field=pillar.value,
                    message="Zero weight means pillar is ignored in scoring",
                    severity=IssueSeverity.WARNING,
                    suggestion="Consider using a small positive weight instead",
                ))

        values = weights.as_list()
        total = sum(values)

        # a non-finite weight already makes the sum meaningless
        if non_finite:
            logger.debug("weight_sum_check_skipped", reason="non_finite_weight")
        elif all(v == 0.0 for v in values):
            errors.append(ValidationIssue(
                field=TOTAL_FIELD,
                message="All weights are zero; at least one pillar must carry weight",
                severity=IssueSeverity.CRITICAL,
            ))
        elif abs(total - 1.0) > self.sum_tolerance:
            warnings.append(ValidationIssue(
                field=TOTAL_FIELD,
                message=f"Weights sum to {total:.3f} instead of 1.0",
                severity=IssueSeverity.WARNING,
                suggestion="Weights will be automatically normalized",
            ))

        completeness = sum(1 for v in values if v > 0.0) / len(values)

        result = ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            completeness=completeness,
        )

        logger.debug(
            "weights_validated",
            is_valid=result.is_valid,
            error_count=len(errors),
            warning_count=len(warnings),
            weight_total=total,
        )
        return result
