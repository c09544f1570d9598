"""Immutable records for regions, indicators and readiness tiers."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

INDICATOR_CODES: Tuple[str, ...] = ('P', 'G', 'R', 'H')

INDICATOR_ATTRIBUTES: Dict[str, str] = {
    'P': 'renewable_potential',
    'G': 'grid_access',
    'R': 'regulatory',
    'H': 'implementation',
}


@dataclass(frozen=True)
class RegionDetails:
    """Display-only descriptive fields. Never used in scoring."""
    solar: str = ''
    wind: str = ''
    grid: str = ''
    projects: str = ''

    def as_dict(self) -> Dict[str, str]:
        return {
            'solar': self.solar,
            'wind': self.wind,
            'grid': self.grid,
            'projects': self.projects,
        }


@dataclass(frozen=True)
class Region:
    """A region with its four readiness indicators (expected range 0-100)."""
    name: str
    renewable_potential: float
    grid_access: float
    regulatory: float
    implementation: float
    details: RegionDetails = field(default_factory=RegionDetails)

    def indicator(self, code: str) -> float:
        """Return the indicator value for a code (P, G, R or H)."""
        try:
            return getattr(self, INDICATOR_ATTRIBUTES[code])
        except KeyError:
            raise ValueError(f"Unknown indicator code: {code}")

    def indicators(self) -> Dict[str, float]:
        return {code: self.indicator(code) for code in INDICATOR_CODES}


@dataclass(frozen=True)
class Indicator:
    """Weighted indicator definition used by the scorer and the methodology text."""
    code: str
    attribute: str
    label: str
    long_label: str
    weight: float
    description: str = ''

    @property
    def weight_percent(self) -> int:
        return int(round(self.weight * 100))


@dataclass(frozen=True)
class Readiness:
    """A readiness tier. `min_score` is the inclusive lower bound, None for the bottom tier."""
    level: str
    recommendation: str
    color: str = ''
    background: str = ''
    min_score: Optional[float] = None

    def matches(self, score: float) -> bool:
        return self.min_score is None or score >= self.min_score


@dataclass(frozen=True)
class ScoredRegion:
    """A region together with its CERS and readiness tier."""
    region: Region
    cers: float
    readiness: Readiness

    @property
    def name(self) -> str:
        return self.region.name

    @property
    def details(self) -> RegionDetails:
        return self.region.details

    def indicator(self, code: str) -> float:
        return self.region.indicator(code)
