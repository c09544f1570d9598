"""Chart-ready projections of scored regions."""

from typing import Any, Dict, List, Optional, Sequence

from ..core.models import Indicator, ScoredRegion

FULL_MARK = 100

def chart_data(ranked: Sequence[ScoredRegion], indicators: Sequence[Indicator]) -> List[Dict[str, Any]]:
    """One record per region with CERS and labelled indicator values, for bar charts."""
    records = []
    for scored in ranked:
        record = {'name': scored.name, 'CERS': scored.cers}
        for indicator in indicators:
            record[indicator.label] = scored.indicator(indicator.code)
        records.append(record)
    return records

def radar_data(region: Optional[ScoredRegion], indicators: Sequence[Indicator]) -> List[Dict[str, Any]]:
    """Single-region radar points labelled with their weight, e.g. 'Grid Access (25%)'."""
    if region is None:
        return []
    return [
        {
            'indicator': f"{indicator.label} ({indicator.weight_percent}%)",
            'value': region.indicator(indicator.code),
            'full_mark': FULL_MARK,
        }
        for indicator in indicators
    ]

def summary_cards(ranked: Sequence[ScoredRegion], counts: Dict[str, int]) -> Dict[str, Any]:
    """Headline numbers: region count, top region and count per tier."""
    top = ranked[0] if ranked else None
    return {
        'total_regions': len(ranked),
        'top_region': top.name if top else None,
        'top_cers': top.cers if top else None,
        'tiers': dict(counts),
    }
