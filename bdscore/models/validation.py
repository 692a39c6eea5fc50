from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from bdscore.models.enumerations import IssueSeverity


class ValidationIssue(BaseModel):
    """
    A single problem found in a weight configuration.
    """

    field: str = Field(
        ...,
        description="Pillar value (e.g. 'asset_quality') or 'total'"
    )

    message: str = Field(
        ...,
        description="Human-readable description of the problem"
    )

    severity: IssueSeverity = Field(
        ...,
        description="warning (advisory) or critical (blocks use)"
    )

    suggestion: Optional[str] = Field(
        default=None,
        description="Suggested remedy"
    )


class ValidationResult(BaseModel):
    """
    Outcome of validating a weight configuration.

    Critical issues are listed in `errors`, advisory ones in `warnings`.
    """

    is_valid: bool = True

    errors: List[ValidationIssue] = Field(default_factory=list)

    warnings: List[ValidationIssue] = Field(default_factory=list)

    completeness: float = Field(
        default=1.0,
        ge=0,
        le=1,
        description="Fraction of pillars carrying a non-zero weight"
    )

    @model_validator(mode="after")
    def validate_is_valid(self):
        """is_valid must be False exactly when a critical issue exists."""
        has_critical = any(
            issue.severity == IssueSeverity.CRITICAL
            for issue in self.errors + self.warnings
        )
        if self.is_valid == has_critical:
            raise ValueError("is_valid must be False iff a critical issue is present")
        return self

    @property
    def issues(self) -> List[ValidationIssue]:
        return self.errors + self.warnings

    def issues_for(self, field: str) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.field == field]
