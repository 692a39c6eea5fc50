"""
Dependencies - BD Weighting Engine
bdscore/core/dependencies.py

Process-wide providers for the profile store and the weighting engine.
"""

from functools import lru_cache

from bdscore.repositories.profile_repository import WeightProfileRepository


@lru_cache()
def get_profile_repository() -> WeightProfileRepository:
    """Get the process-wide WeightProfileRepository instance."""
    return WeightProfileRepository()


@lru_cache()
def get_weighting_engine():
    """Get a cached WeightingEngine bound to the process-wide profile store."""
    from bdscore.scoring.weighting_engine import WeightingEngine

    return WeightingEngine(profile_repository=get_profile_repository())
