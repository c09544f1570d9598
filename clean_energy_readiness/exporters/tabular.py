"""CSV and JSON exports of a ranking."""

import json
import logging
from typing import Any, Dict, List, Sequence

from ..core.models import ScoredRegion
from .base import ExportFile, format_number, number_value

logger = logging.getLogger(__name__)

CSV_FILENAME = 'clean_energy_readiness_scores.csv'
JSON_FILENAME = 'clean_energy_readiness_scores.json'

CSV_HEADERS = [
    'Rank',
    'Region',
    'CERS',
    'Renewable Potential (P)',
    'Grid Access (G)',
    'Regulatory (R)',
    'Implementation (H)',
    'Readiness Level',
    'Recommendation',
]

def csv_rows(ranked: Sequence[ScoredRegion]) -> List[List[str]]:
    """Header plus one row of string fields per ranked region."""
    rows = [list(CSV_HEADERS)]
    for position, scored in enumerate(ranked, start=1):
        rows.append([
            str(position),
            scored.name,
            format_number(scored.cers),
            format_number(scored.indicator('P')),
            format_number(scored.indicator('G')),
            format_number(scored.indicator('R')),
            format_number(scored.indicator('H')),
            scored.readiness.level,
            scored.readiness.recommendation,
        ])
    return rows

def export_csv(ranked: Sequence[ScoredRegion]) -> ExportFile:
    """Comma-joined rows, no quoting.

    Fields containing a comma are written unchanged and will shift columns for
    a CSV reader. This is logged, not corrected.
    """
    rows = csv_rows(ranked)

    for row in rows[1:]:
        unsafe = [field for field in row if ',' in field]
        if unsafe:
            logger.warning(f"CSV row for {row[1]} has fields containing the delimiter: {unsafe}")

    content = '\n'.join(','.join(row) for row in rows)
    logger.info(f"Exported {len(rows) - 1} regions to CSV")
    return ExportFile(CSV_FILENAME, 'text/csv', content.encode('utf-8'))

def json_records(ranked: Sequence[ScoredRegion]) -> List[Dict[str, Any]]:
    """JSON-ready records, one per ranked region."""
    return [
        {
            'rank': position,
            'region': scored.name,
            'CERS': number_value(scored.cers),
            'indicators': {
                'renewablePotential': number_value(scored.indicator('P')),
                'gridAccess': number_value(scored.indicator('G')),
                'regulatory': number_value(scored.indicator('R')),
                'implementation': number_value(scored.indicator('H')),
            },
            'readiness': {
                'level': scored.readiness.level,
                'recommendation': scored.readiness.recommendation,
            },
            'details': scored.details.as_dict(),
        }
        for position, scored in enumerate(ranked, start=1)
    ]

def export_json(ranked: Sequence[ScoredRegion]) -> ExportFile:
    """Pretty-printed JSON array with 2-space indentation."""
    content = json.dumps(json_records(ranked), indent=2, ensure_ascii=False)
    logger.info(f"Exported {len(ranked)} regions to JSON")
    return ExportFile(JSON_FILENAME, 'application/json', content.encode('utf-8'))
