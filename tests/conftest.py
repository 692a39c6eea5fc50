# tests/conftest.py

"""
Pytest Fixtures - Shared pillar scores, weights and engine instances
"""

import pytest
import structlog
from structlog.testing import LogCapture

from bdscore.models.enumerations import Pillar
from bdscore.models.pillar import PillarScore, PillarScores
from bdscore.models.weights import WeightConfig
from bdscore.repositories.profile_repository import WeightProfileRepository
from bdscore.scoring.weighting_engine import WeightingEngine


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def _structlog_capture():
    """Route structured logs into one LogCapture for the whole session."""
    capture = LogCapture()
    structlog.configure(processors=[capture])
    yield capture
    structlog.reset_defaults()


@pytest.fixture
def log_output(_structlog_capture):
    """Log entries emitted during the current test."""
    _structlog_capture.entries.clear()
    return _structlog_capture


# =============================================================================
# PILLAR SCORE FIXTURES
# =============================================================================

def make_pillar_scores(raw_scores, confidences=None):
    """Build PillarScores from six raw scores in canonical pillar order."""
    confidences = confidences or [1.0] * len(Pillar)
    return PillarScores(**{
        pillar.value: PillarScore(raw_score=raw, confidence=conf)
        for pillar, raw, conf in zip(Pillar, raw_scores, confidences)
    })


@pytest.fixture
def pillar_scores_factory():
    return make_pillar_scores


@pytest.fixture
def sample_pillar_scores():
    """Mid-range biotech profile used throughout the weighting tests."""
    return make_pillar_scores(
        [4.0, 3.5, 2.5, 4.5, 3.0, 3.8],
        [0.8, 0.7, 0.9, 0.85, 0.6, 0.75],
    )


@pytest.fixture
def zero_pillar_scores():
    return make_pillar_scores([0.0] * 6, [0.0] * 6)


@pytest.fixture
def max_pillar_scores():
    return make_pillar_scores([5.0] * 6)


# =============================================================================
# WEIGHT FIXTURES
# =============================================================================

@pytest.fixture
def scenario_weights():
    """Weights summing to 1.0 with a tilt toward asset quality."""
    return WeightConfig(
        asset_quality=0.3,
        market_outlook=0.2,
        capital_intensity=0.1,
        strategic_fit=0.2,
        financial_readiness=0.1,
        regulatory_risk=0.1,
    )


@pytest.fixture
def unnormalized_weights():
    """Weights summing to 1.6."""
    return WeightConfig(
        asset_quality=0.5,
        market_outlook=0.4,
        capital_intensity=0.3,
        strategic_fit=0.2,
        financial_readiness=0.1,
        regulatory_risk=0.1,
    )


@pytest.fixture
def all_zero_weights():
    return WeightConfig(**{p.value: 0.0 for p in Pillar})


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def profile_repository():
    """Fresh repository per test so saved profiles never leak between tests."""
    return WeightProfileRepository()


@pytest.fixture
def engine(profile_repository):
    return WeightingEngine(profile_repository=profile_repository)
