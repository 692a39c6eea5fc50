"""
Weight Profile Repository - BD Weighting Engine
bdscore/repositories/profile_repository.py

In-memory store of named weight profiles, safe for concurrent use.

Lifetime: one instance per process (see bdscore.core.dependencies),
seeded with the built-in profiles before any user operation. Stored
profiles are always normalized. Built-in profiles are read-only so they
remain enumerable regardless of user saves and deletes.
"""

import threading
from typing import Dict, List, Optional

import structlog

from bdscore.core.exceptions import ConfigurationError
from bdscore.models.weights import WeightConfig, builtin_profiles
from bdscore.scoring.normalizer import normalize_weights
from bdscore.scoring.weight_validator import WeightValidator

logger = structlog.get_logger(__name__)


class WeightProfileRepository:
    """Repository for named weight profiles."""

    def __init__(self, validator: Optional[WeightValidator] = None):
        self.validator = validator or WeightValidator()
        self._lock = threading.RLock()
        self._builtin_names = frozenset(builtin_profiles())
        self._profiles: Dict[str, WeightConfig] = {}
        self._seed_builtins()

    def _seed_builtins(self) -> None:
        for name, weights in builtin_profiles().items():
            self._profiles[name] = normalize_weights(weights)

    def save(self, name: str, weights: WeightConfig) -> WeightConfig:
        """
        Validate, normalize and store a profile, replacing any profile of the same name.

        Args:
            name: Profile name (non-empty, not a built-in name)
            weights: Configuration to store

        Returns:
            Copy of the normalized configuration that was stored

        Raises:
            ConfigurationError: invalid name, built-in name, or weights with
                a critical validation issue. Nothing is written in that case.
        """
        if not name or not name.strip():
            raise ConfigurationError("Profile name is required")

        if name in self._builtin_names:
            raise ConfigurationError(f"Built-in profile '{name}' cannot be overwritten")

        validation = self.validator.validate(weights)
        if not validation.is_valid:
            first = validation.errors[0]
            logger.warning(
                "weight_profile_rejected",
                profile=name,
                errors=[f"{e.field}: {e.message}" for e in validation.errors],
            )
            raise ConfigurationError(
                f"Cannot save invalid weight profile '{name}': {first.field}: {first.message}",
                issues=validation.errors,
            )

        normalized = normalize_weights(weights)
        with self._lock:
            replaced = name in self._profiles
            self._profiles[name] = normalized

        logger.info("weight_profile_saved", profile=name, replaced=replaced)
        return normalized.model_copy()

    def get_by_name(self, name: str) -> Optional[WeightConfig]:
        """
        Retrieve a profile by name.

        Returns:
            Copy of the stored configuration, or None if not found
        """
        with self._lock:
            weights = self._profiles.get(name)
        return weights.model_copy() if weights is not None else None

    def get_all_names(self) -> List[str]:
        """All profile names (built-in and user), sorted."""
        with self._lock:
            return sorted(self._profiles)

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._profiles

    def is_builtin(self, name: str) -> bool:
        return name in self._builtin_names

    def delete(self, name: str) -> bool:
        """
        Remove a user profile.

        Returns:
            True if a profile was removed. False if no such profile exists
            or the name belongs to a built-in profile.
        """
        if name in self._builtin_names:
            logger.info("weight_profile_delete_skipped_builtin", profile=name)
            return False

        with self._lock:
            removed = self._profiles.pop(name, None) is not None

        if removed:
            logger.info("weight_profile_deleted", profile=name)
        return removed

    def reset(self) -> None:
        """Drop all user profiles, keeping the built-ins."""
        with self._lock:
            self._profiles.clear()
            self._seed_builtins()
