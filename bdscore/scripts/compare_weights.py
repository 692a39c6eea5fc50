"""
Preview the effect of reweighting a company's pillar scores.

Usage:
    python -m bdscore.scripts.compare_weights scores.json --from Balanced --to Aggressive
    python -m bdscore.scripts.compare_weights scores.json --to-weights custom.json
    python -m bdscore.scripts.compare_weights scores.json --to-weights custom.json --validate-only
    python -m bdscore.scripts.compare_weights --list-profiles

scores.json maps each pillar (snake_case or camelCase) to either a raw
score or an object with rawScore/raw_score and optional confidence.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError
load_dotenv()

from bdscore.core.dependencies import get_weighting_engine
from bdscore.core.exceptions import ScoringError, InvalidDataError, MissingRequiredFieldError
from bdscore.core.logging import configure_logging
from bdscore.models.enumerations import Pillar
from bdscore.models.pillar import PillarScore, PillarScores
from bdscore.models.weights import WeightConfig
from bdscore.scoring.utils import round_half_up
from bdscore.scoring.weighting_engine import WeightingEngine

logger = structlog.get_logger(__name__)

DEFAULT_PROFILE = "default"


def load_pillar_scores(path: Path) -> PillarScores:
    """Parse a pillar scores JSON file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidDataError(f"Cannot read pillar scores from {path}: {e}")

    if not isinstance(raw, dict):
        raise InvalidDataError("Pillar scores file must contain a JSON object")

    scores: Dict[str, PillarScore] = {}
    missing: List[str] = []
    for pillar in Pillar:
        entry = raw.get(pillar.value, raw.get(pillar.wire_name))
        if entry is None:
            missing.append(pillar.value)
            continue
        if isinstance(entry, (int, float)):
            entry = {"raw_score": entry}
        try:
            scores[pillar.value] = PillarScore(
                raw_score=entry.get("raw_score", entry.get("rawScore")),
                confidence=entry.get("confidence", 1.0),
                warnings=entry.get("warnings", []),
                explanation=entry.get("explanation"),
            )
        except (AttributeError, ValidationError) as e:
            raise InvalidDataError(f"{pillar.value}: {e}")

    if missing:
        raise MissingRequiredFieldError(missing)
    return PillarScores(**scores)


def load_weights_file(path: Path) -> WeightConfig:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidDataError(f"Cannot read weights from {path}: {e}")
    if not isinstance(raw, dict):
        raise InvalidDataError("Weights file must contain a JSON object")
    return WeightConfig.from_dict(raw)


def resolve_profile(engine: WeightingEngine, name: str) -> WeightConfig:
    if name == DEFAULT_PROFILE:
        return WeightConfig()
    weights = engine.load_weight_profile(name)
    if weights is None:
        available = ", ".join(engine.get_available_profiles())
        raise InvalidDataError(f"Unknown profile '{name}' (available: {available})")
    return weights


def build_report(engine: WeightingEngine, scores: PillarScores,
                 original: WeightConfig, new: WeightConfig) -> Dict[str, Any]:
    impact = engine.calculate_weight_impact(scores, original, new)
    validation = engine.validate_weights(new)
    composite = engine.calculate_weighted_score(scores, new)
    return {
        "original_total": round_half_up(impact.original_total),
        "new_total": round_half_up(impact.new_total),
        "total_score_difference": round_half_up(impact.total_score_difference),
        "percentage_change": round_half_up(impact.percentage_change),
        "pillar_impacts": {k: round_half_up(v) for k, v in impact.pillar_impacts.items()},
        "significant_changes": {
            k: {"delta": round_half_up(c.delta), "direction": c.direction}
            for k, c in impact.significant_changes.items()
        },
        "tier": composite.tier.value,
        "tier_summary": composite.tier.summary,
        "confidence": round_half_up(composite.confidence),
        "validation": validation.model_dump(mode="json"),
    }


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare two pillar weightings for one company")
    parser.add_argument("scores", nargs="?", type=Path, help="Pillar scores JSON file")
    parser.add_argument("--from", dest="from_profile", default=DEFAULT_PROFILE,
                        help="Baseline profile name (default: built-in default weights)")
    parser.add_argument("--to", dest="to_profile", default="Balanced",
                        help="Candidate profile name")
    parser.add_argument("--to-weights", type=Path, default=None,
                        help="JSON file with candidate weights (overrides --to)")
    parser.add_argument("--validate-only", action="store_true",
                        help="Only validate the candidate weights")
    parser.add_argument("--list-profiles", action="store_true",
                        help="List available profiles and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, engine: Optional[WeightingEngine] = None) -> int:
    args = parse_args(argv)
    engine = engine or get_weighting_engine()

    if args.list_profiles:
        print(json.dumps(engine.get_available_profiles(), indent=2))
        return 0

    try:
        if args.to_weights is not None:
            new = load_weights_file(args.to_weights)
        else:
            new = resolve_profile(engine, args.to_profile)

        if args.validate_only:
            validation = engine.validate_weights(new)
            print(json.dumps(validation.model_dump(mode="json"), indent=2))
            return 0 if validation.is_valid else 1

        if args.scores is None:
            raise InvalidDataError("A pillar scores file is required")

        scores = load_pillar_scores(args.scores)
        original = resolve_profile(engine, args.from_profile)
    except ScoringError as e:
        logger.error("compare_weights_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(build_report(engine, scores, original, new), indent=2))
    return 0


def run() -> None:
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
