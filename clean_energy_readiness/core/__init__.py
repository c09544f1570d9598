"""Core components for clean energy readiness scoring."""

from .scorer import RegionScorer
from .data_loader import RegionLoader, get_regions
from .comparison import build_comparison_matrix

__all__ = ["RegionScorer", "RegionLoader", "get_regions", "build_comparison_matrix"]
