"""Clean Energy Readiness Score (CERS) calculation, classification and ranking."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from typing import Dict, Iterable, Optional, Sequence, Tuple

import pandas as pd

from .data_loader import RegionLoader, get_regions
from .models import Readiness, Region, ScoredRegion

logger = logging.getLogger(__name__)

_ONE_DECIMAL = Decimal('0.1')

# Distinct region tables remembered per scorer
RANK_CACHE_SIZE = 8

class RegionScorer:
    """Score, classify and rank regions by clean energy readiness."""

    def __init__(self, config: Dict = None):
        """Initialize scorer with configuration."""
        loader = RegionLoader(config)
        self.indicators = loader.load_indicators()
        self.tiers = loader.load_tiers()
        self.weights = {indicator.code: indicator.weight for indicator in self.indicators}

        self._ranked = lru_cache(maxsize=RANK_CACHE_SIZE)(self._rank_uncached)

    def score(self, region: Region) -> float:
        """Weighted sum of the four indicators rounded to one decimal place.

        Values are summed in decimal arithmetic and rounded half away from
        zero, so 86.55 becomes 86.6. Indicators outside 0-100 are used as given.
        """
        total = Decimal(0)
        for code, weight in self.weights.items():
            total += Decimal(str(region.indicator(code))) * Decimal(str(weight))
        return float(total.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))

    def classify(self, score: float) -> Readiness:
        """Return the first tier whose inclusive lower bound the score reaches."""
        for tier in self.tiers:
            if tier.matches(score):
                return tier
        # Unreachable with a well-formed tier list; bottom tier has no bound
        return self.tiers[-1]

    def score_region(self, region: Region) -> ScoredRegion:
        cers = self.score(region)
        return ScoredRegion(region=region, cers=cers, readiness=self.classify(cers))

    def rank(self, regions: Optional[Iterable[Region]] = None) -> Tuple[ScoredRegion, ...]:
        """Score every region and order by CERS, highest first.

        Ties keep their input order. The most recent RANK_CACHE_SIZE region
        tuples are cached since regions are immutable.

        Args:
            regions: Regions to rank, defaults to the packaged region table

        Returns:
            Scored regions; rank is the 1-based position
        """
        regions = tuple(regions) if regions is not None else get_regions()
        return self._ranked(regions)

    def _rank_uncached(self, regions: Tuple[Region, ...]) -> Tuple[ScoredRegion, ...]:
        logger.info(f"Ranking {len(regions)} regions")
        scored = [self.score_region(region) for region in regions]
        ranked = tuple(sorted(scored, key=lambda s: s.cers, reverse=True))

        if ranked:
            logger.info(f"Ranking complete. Top region: {ranked[0].name} ({ranked[0].cers})")

        return ranked

    def summarize(self, ranked: Sequence[ScoredRegion]) -> Dict[str, int]:
        """Count regions per readiness tier, in tier order."""
        counts = {tier.level: 0 for tier in self.tiers}
        for scored in ranked:
            counts[scored.readiness.level] = counts.get(scored.readiness.level, 0) + 1
        return counts

    def to_frame(self, ranked: Sequence[ScoredRegion]) -> pd.DataFrame:
        """Tabular view of a ranking, one row per region in rank order."""
        columns = ['rank', 'region', 'CERS'] + [i.code for i in self.indicators] + \
            ['readiness_level', 'recommendation']

        rows = []
        for position, scored in enumerate(ranked, start=1):
            row = {'rank': position, 'region': scored.name, 'CERS': scored.cers}
            row.update(scored.region.indicators())
            row['readiness_level'] = scored.readiness.level
            row['recommendation'] = scored.readiness.recommendation
            rows.append(row)

        return pd.DataFrame(rows, columns=columns)
