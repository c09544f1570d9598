"""Data validation utilities."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..core.models import INDICATOR_CODES, Region

logger = logging.getLogger(__name__)

INDICATOR_RANGE = (0, 100)

@dataclass
class ValidationResult:
    """Results of data validation."""
    is_valid: bool
    total_rows: int
    valid_rows: int
    issues: List[Dict[str, Any]]
    quality_score: float

class DataValidator:
    """Quality checks for the region table and indicator weights.

    Out-of-range indicator values are reported as warnings only; scoring
    uses them as given.
    """

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.indicator_range = tuple(self.config.get('indicator_range', INDICATOR_RANGE))

    def validate_regions(self, regions: Sequence[Region],
                         weights: Optional[Dict[str, float]] = None) -> ValidationResult:
        """Validate regions and, optionally, the weights they are scored with."""
        logger.info(f"Validating {len(regions)} regions")

        issues = []

        if len(regions) == 0:
            issues.append({
                'type': 'empty_table',
                'severity': 'critical',
                'message': 'Region table is empty'
            })

        duplicates = [name for name, count in Counter(r.name for r in regions).items() if count > 1]
        if duplicates:
            issues.append({
                'type': 'duplicate_names',
                'severity': 'critical',
                'message': f'Duplicate region names: {duplicates}'
            })

        low, high = self.indicator_range
        invalid_rows = set()
        for region in regions:
            for code in INDICATOR_CODES:
                value = region.indicator(code)
                if not low <= value <= high:
                    invalid_rows.add(region.name)
                    issues.append({
                        'type': 'out_of_range',
                        'severity': 'warning',
                        'message': f'{region.name} indicator {code}={value} outside [{low}, {high}]'
                    })

            delimited = [key for key, text in region.details.as_dict().items() if ',' in text]
            if ',' in region.name or delimited:
                issues.append({
                    'type': 'csv_delimiter',
                    'severity': 'warning',
                    'message': f'{region.name} has text containing commas: {delimited or ["name"]}'
                })

        if weights is not None:
            total = sum(weights.values())
            if not np.isclose(total, 1.0):
                issues.append({
                    'type': 'weights_not_normalized',
                    'severity': 'critical',
                    'message': f'Weights sum to {total}, not 1.0'
                })

        critical_issues = [i for i in issues if i.get('severity') == 'critical']
        warnings = [i for i in issues if i.get('severity') == 'warning']
        quality_score = 100.0 - (len(critical_issues) * 25) - (len(warnings) * 5)

        result = ValidationResult(
            is_valid=len(critical_issues) == 0,
            total_rows=len(regions),
            valid_rows=len(regions) - len(invalid_rows) if not critical_issues else 0,
            issues=issues,
            quality_score=max(0.0, quality_score)
        )

        logger.info(f"Validation complete: Quality Score {result.quality_score}/100")
        for issue in issues:
            logger.warning(f"{issue['severity']}: {issue['message']}")
        return result
