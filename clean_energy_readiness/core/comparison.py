"""Side-by-side comparison of selected regions."""

import logging
from typing import List, Sequence, Union

import pandas as pd

from .models import INDICATOR_CODES, Region, ScoredRegion

logger = logging.getLogger(__name__)

MAX_COMPARED_REGIONS = 3

# Chart labels for the comparison radar
COMPARISON_LABELS = {
    'P': 'Renewable\nPotential',
    'G': 'Grid\nAccess',
    'R': 'Regulatory\nReadiness',
    'H': 'Implementation\nHistory',
}

def _region_of(item: Union[Region, ScoredRegion]) -> Region:
    return item.region if isinstance(item, ScoredRegion) else item

def build_comparison_matrix(selected: Sequence[Union[Region, ScoredRegion]]) -> pd.DataFrame:
    """Reshape selected regions into an indicator x region grid.

    The selection size limit and name uniqueness are the caller's concern.

    Args:
        selected: Regions in selection order

    Returns:
        DataFrame indexed by indicator code (P, G, R, H) with one column per
        region holding its raw indicator values
    """
    regions = [_region_of(item) for item in selected]
    logger.debug(f"Building comparison matrix for {[r.name for r in regions]}")

    matrix = pd.DataFrame(
        {region.name: [region.indicator(code) for code in INDICATOR_CODES] for region in regions},
        index=pd.Index(INDICATOR_CODES, name='indicator'),
        columns=[region.name for region in regions]
    )
    return matrix

def comparison_series(selected: Sequence[Union[Region, ScoredRegion]]) -> List[dict]:
    """Comparison matrix as chart records, one per indicator."""
    if not selected:
        return []

    matrix = build_comparison_matrix(selected)
    series = []
    for code, values in matrix.iterrows():
        record = {'indicator': COMPARISON_LABELS[code]}
        record.update(values.to_dict())
        series.append(record)
    return series

def comparison_table(selected: Sequence[ScoredRegion]) -> pd.DataFrame:
    """Tabular diff view: indicators plus CERS and readiness, with a spread column."""
    if not selected:
        return pd.DataFrame(index=pd.Index(list(INDICATOR_CODES) + ['CERS', 'readiness'], name='indicator'))

    matrix =build_comparison_matrix(selected).astype(float)
    matrix.loc['CERS'] = [scored.cers for scored in selected]
    matrix['spread'] = matrix.max(axis=1) - matrix.min(axis=1)

    table = matrix.astype(object)
    table.loc['readiness'] = [scored.readiness.level for scored in selected] + ['']
    return table
