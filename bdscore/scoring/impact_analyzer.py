"""
scoring/impact_analyzer.py

Quantifies the effect of switching from one weight configuration to
another while holding pillar scores fixed.

Formula:
    difference      = new_total − original_total
    percent_change  = difference / original_total      (0.0 when original_total == 0)
    impact_p        = new_contribution_p − original_contribution_p
    significant     = { p : |impact_p| > IMPACT_MATERIALITY_THRESHOLD }

Both configurations are normalized independently, so the impact reflects
the effective weighting. Identical configurations always give zero
difference, zero percent change and no significant changes.
"""

import structlog
from dataclasses import dataclass, field
from typing import Dict, Optional

from bdscore.config import settings
from bdscore.models.enumerations import Pillar
from bdscore.models.pillar import PillarScores
from bdscore.models.weights import WeightConfig
from bdscore.scoring.aggregator import WeightAggregator
from bdscore.scoring.utils import safe_ratio

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SignificantChange:
    """A pillar whose contribution moved by more than the materiality threshold."""
    delta: float
    original_contribution: float
    new_contribution: float

    @property
    def direction(self) -> str:
        return "increase" if self.delta > 0 else "decrease"


@dataclass(frozen=True)
class WeightImpact:
    """Output of WeightImpactAnalyzer.calculate()."""
    total_score_difference: float
    percentage_change: float                 # ratio of the original total
    pillar_impacts: Dict[str, float]         # pillar -> signed contribution delta
    significant_changes: Dict[str, SignificantChange] = field(default_factory=dict)
    original_total: float = 0.0
    new_total: float = 0.0


class WeightImpactAnalyzer:
    """Compare two weight configurations against the same pillar scores."""

    def __init__(
        self,
        aggregator: Optional[WeightAggregator] = None,
        materiality_threshold: Optional[float] = None,
    ):
        self.aggregator = aggregator or WeightAggregator()
        self.materiality_threshold = (
            settings.IMPACT_MATERIALITY_THRESHOLD
            if materiality_threshold is None
            else materiality_threshold
        )

    def calculate(
        self,
        pillar_scores: PillarScores,
        original_weights: WeightConfig,
        new_weights: WeightConfig,
    ) -> WeightImpact:
        """
        Args:
            pillar_scores: Pillar scores held fixed across both configurations.
            original_weights: Baseline configuration.
            new_weights: Candidate configuration.

        Returns:
            WeightImpact with aggregate and per-pillar deltas.
        """
        original = self.aggregator.apply(pillar_scores, original_weights)
        updated = self.aggregator.apply(pillar_scores, new_weights)

        difference = updated.total - original.total
        percentage_change = safe_ratio(difference, original.total)

        pillar_impacts: Dict[str, float] = {}
        significant: Dict[str, SignificantChange] = {}
        for pillar in Pillar:
            before = original.get(pillar)
            after = updated.get(pillar)
            delta = after - before
            pillar_impacts[pillar.value] = delta
            if abs(delta) > self.materiality_threshold:
                significant[pillar.value] = SignificantChange(
                    delta=delta,
                    original_contribution=before,
                    new_contribution=after,
                )

        logger.info(
            "weight_impact_calculated",
            original_total=original.total,
            new_total=updated.total,
            total_score_difference=difference,
            percentage_change=percentage_change,
            significant_pillars=sorted(significant),
        )

        return WeightImpact(
            total_score_difference=difference,
            percentage_change=percentage_change,
            pillar_impacts=pillar_impacts,
            significant_changes=significant,
            original_total=original.total,
            new_total=updated.total,
        )
