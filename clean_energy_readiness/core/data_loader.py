"""Loading of the static region table and scoring definitions."""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .models import (INDICATOR_ATTRIBUTES, INDICATOR_CODES, Indicator, Readiness,
                     Region, RegionDetails)

logger = logging.getLogger(__name__)

class RegionLoader:
    """Build immutable regions, indicators and tiers from configuration."""

    def __init__(self, config: Dict[str, Any] = None):
        """Initialize loader.

        Args:
            config: Configuration dict as returned by ``get_default_config``.
                Missing keys are taken from the default configuration.
        """
        from ..config.settings import get_default_config

        defaults = get_default_config()
        config = config or {}
        self.config = {key: config[key] if key in config else value for key, value in defaults.items()}

    def load_regions(self) -> Tuple[Region, ...]:
        """Load the region table.

        Returns:
            Regions in configuration order

        Raises:
            ValueError: If a region lacks a name or an indicator, or names repeat
        """
        records = self.config['regions']
        logger.info(f"Loading {len(records)} regions")

        regions = []
        seen = set()
        for record in records:
            region = self._build_region(record)
            if region.name in seen:
                raise ValueError(f"Duplicate region name: {region.name}")
            seen.add(region.name)
            regions.append(region)

        return tuple(regions)

    def load_indicators(self) -> Tuple[Indicator, ...]:
        """Load weighted indicator definitions in P, G, R, H order.

        Raises:
            ValueError: If weights do not cover exactly P, G, R, H or do not sum to 1.0
        """
        weights = self.config['weights']
        unknown = sorted(set(weights) - set(INDICATOR_CODES))
        missing = [code for code in INDICATOR_CODES if code not in weights]
        if unknown or missing:
            raise ValueError(f"Weights must cover {list(INDICATOR_CODES)}; "
                             f"missing {missing}, unknown {unknown}")

        total = sum(float(weights[code]) for code in INDICATOR_CODES)
        if not np.isclose(total, 1.0):
            raise ValueError(f"Weights sum to {total}, not 1.0")

        meta = self.config['indicators']
        indicators = []
        for code in INDICATOR_CODES:
            info = meta.get(code, {})
            indicators.append(Indicator(
                code=code,
                attribute=info.get('attribute', INDICATOR_ATTRIBUTES[code]),
                label=info.get('label', code),
                long_label=info.get('long_label', info.get('label', code)),
                weight=float(weights[code]),
                description=info.get('description', '')
            ))
            logger.debug(f"Indicator {code} weight {weights[code]}")

        return tuple(indicators)

    def load_tiers(self) -> Tuple[Readiness, ...]:
        """Load readiness tiers ordered from highest threshold to lowest."""
        tiers = [
            Readiness(
                level=tier['level'],
                recommendation=tier['recommendation'],
                color=tier.get('color', ''),
                background=tier.get('background', ''),
                min_score=tier.get('min_score')
            )
            for tier in self.config['tiers']
        ]
        if not tiers or tiers[-1].min_score is not None:
            raise ValueError("The last readiness tier must have no lower bound")

        # Bottom tier (no bound) stays last
        bounded = sorted(tiers[:-1], key=lambda t: t.min_score, reverse=True)
        return tuple(bounded + tiers[-1:])

    def _build_region(self, record: Dict[str, Any]) -> Region:
        name = record.get('name')
        if not name:
            raise ValueError(f"Region record without a name: {record}")

        values = {}
        for code in INDICATOR_CODES:
            if record.get(code) is None:
                raise ValueError(f"Region {name} is missing indicator {code}")
            values[INDICATOR_ATTRIBUTES[code]] = record[code]

        details = record.get('details') or {}
        return Region(
            name=name,
            details=RegionDetails(
                solar=details.get('solar', ''),
                wind=details.get('wind', ''),
                grid=details.get('grid', ''),
                projects=details.get('projects', '')
            ),
            **values
        )

@lru_cache(maxsize=1)
def get_regions() -> Tuple[Region, ...]:
    """Return the packaged region table, loaded once per process."""
    return RegionLoader().load_regions()

def regions_from_records(records: List[Dict[str, Any]]) -> Tuple[Region, ...]:
    """Build regions from plain dict records (name, P, G, R, H, details)."""
    return RegionLoader({'regions': records}).load_regions()

def find_region(name: str, regions: Optional[Tuple[Region, ...]] = None) -> Region:
    """Look up a region by name."""
    for region in regions if regions is not None else get_regions():
        if region.name == name:
            return region
    raise KeyError(name)
