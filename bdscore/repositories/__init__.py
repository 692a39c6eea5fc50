"""
Repositories Package - BD Weighting Engine
bdscore/repositories/__init__.py
"""

from bdscore.repositories.profile_repository import WeightProfileRepository

__all__ = ["WeightProfileRepository"]
