"""Export payloads for ranked regions."""

from datetime import date
from typing import Optional, Sequence

from ..core.models import ScoredRegion
from .base import ExportFile, format_number
from .tabular import export_csv, export_json
from .report import build_report, export_report

EXPORT_FORMATS = ('csv', 'json', 'report')

__all__ = ["ExportFile", "EXPORT_FORMATS", "export", "export_csv", "export_json",
           "export_report", "build_report", "format_number"]

def export(kind: str, ranked: Sequence[ScoredRegion], scorer=None,
           generated_on: Optional[date] = None) -> ExportFile:
    """Build the export of the given kind (csv, json or report)."""
    if kind == 'csv':
        return export_csv(ranked)
    if kind == 'json':
        return export_json(ranked)
    if kind == 'report':
        return export_report(ranked, scorer=scorer, generated_on=generated_on)
    raise ValueError(f"Unknown export format: {kind}. Expected one of {EXPORT_FORMATS}")
