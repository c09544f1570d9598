"""Shared fixtures for readiness scoring tests."""

import pytest

from clean_energy_readiness import RegionScorer, get_regions
from clean_energy_readiness.core.models import Region, RegionDetails

GOLDEN = {
    'Absheron': 86.6,
    'Shirvan-Salyan': 78.5,
    'Ganja-Gazakh': 76.6,
    'Guba-Khachmaz': 74.0,
    'Lankaran': 67.7,
    'Nakhchivan': 67.3,
    'Sheki-Zagatala': 64.0,
}

@pytest.fixture
def scorer():
    return RegionScorer()

@pytest.fixture
def regions():
    return get_regions()

@pytest.fixture
def ranked(scorer, regions):
    return scorer.rank(regions)

@pytest.fixture
def make_region():
    """Factory for ad hoc regions."""
    def _make(name, p, g, r, h, **details):
        return Region(
            name=name,
            renewable_potential=p,
            grid_access=g,
            regulatory=r,
            implementation=h,
            details=RegionDetails(**details)
        )
    return _make

@pytest.fixture
def golden_scores():
    """Hand-computed CERS for the packaged regions, in rank order."""
    return dict(GOLDEN)
