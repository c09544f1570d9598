"""Clean Energy Readiness Scoring.

Scores regions on a weighted Clean Energy Readiness Score (CERS), classifies
them into readiness tiers and exports the ranking as CSV, JSON or a text
report.
"""

from .core.scorer import RegionScorer
from .core.data_loader import RegionLoader, get_regions
from .core.comparison import build_comparison_matrix
from .utils.validator import DataValidator

__version__ = "1.0.0"
__all__ = ["RegionScorer", "RegionLoader", "DataValidator", "get_regions",
           "build_comparison_matrix", "score_regions"]

def score_regions(regions=None, weights_config=None):
    """Convenience function to rank regions.

    Args:
        regions: Optional regions to rank, defaults to the packaged table
        weights_config: Optional custom weights keyed by P, G, R, H

    Returns:
        Tuple of ScoredRegion ordered by CERS, highest first
    """
    from .config.settings import get_default_config

    config = get_default_config()
    if weights_config:
        config['weights'].update(weights_config)

    scorer = RegionScorer(config)
    return scorer.rank(regions)
