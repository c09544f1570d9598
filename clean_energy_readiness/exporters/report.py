"""Plain-text regional analysis report."""

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from ..core.models import Readiness, ScoredRegion
from ..core.scorer import RegionScorer
from .base import ExportFile, format_number

logger = logging.getLogger(__name__)

REPORT_FILENAME = 'clean_energy_readiness_report.txt'
REPORT_TITLE = 'CLEAN ENERGY FUNDING PRIORITIZATION TOOL - REGIONAL ANALYSIS REPORT'
RULE = '=' * 76
FOOTER = (
    'CECECO Clean Energy Hackathon 2026',
    "Supporting Azerbaijan's 2030 Clean Energy Goals",
)

# Indicator names as they appear in each region block
REGION_BLOCK_LABELS = {
    'P': 'Renewable Potential',
    'G': 'Grid & Infrastructure',
    'R': 'Regulatory Readiness',
    'H': 'Implementation History',
}

DETAIL_LABELS = (
    ('solar', 'Solar Potential'),
    ('wind', 'Wind Potential'),
    ('grid', 'Grid Status'),
    ('projects', 'Project Track Record'),
)

# Blank lines inside a region block keep the block indentation
BLOCK_BLANK = '   '

def format_report_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"

def _band(low: float, upper: float) -> str:
    """Inclusive integer band like 55-74, or '55.5 to below 75' for fractional bounds."""
    if float(low).is_integer() and float(upper).is_integer():
        return f"{format_number(low)}-{format_number(upper - 1)}"
    return f"{format_number(low)} to below {format_number(upper)}"

def tier_ranges(tiers: Sequence[Readiness]) -> List[Tuple[Readiness, str, str]]:
    """Describe each tier's score band.

    Returns:
        (tier, summary range, interpretation range) per tier, e.g.
        ``(high, '≥ 75', '75-100')`` and ``(low, '< 55', 'Below 55')``
    """
    ranges = []
    upper = None
    for tier in tiers:
        if tier.min_score is None:
            bound = format_number(upper) if upper is not None else '0'
            ranges.append((tier, f"< {bound}", f"Below {bound}"))
        elif upper is None:
            low = format_number(tier.min_score)
            ranges.append((tier, f"≥ {low}", f"{low}-100"))
        else:
            band = _band(tier.min_score, upper)
            ranges.append((tier, band, band))
        upper = tier.min_score
    return ranges

def formula_text(scorer: RegionScorer) -> str:
    terms = ' + '.join(f"({i.code} × {format_number(i.weight)})" for i in scorer.indicators)
    return f"CERS = {terms}"

def _region_block(position: int, scored: ScoredRegion, scorer: RegionScorer) -> str:
    lines = ['', f"{position}. {scored.name}", f"   Overall CERS: {format_number(scored.cers)}"]
    for indicator in scorer.indicators:
        label = REGION_BLOCK_LABELS.get(indicator.code, indicator.label)
        lines.append(f"   - {label} ({indicator.weight_percent}%): "
                     f"{format_number(scored.indicator(indicator.code))}")
    lines += [
        BLOCK_BLANK,
        f"   Readiness Level: {scored.readiness.level}",
        f"   Recommendation: {scored.readiness.recommendation}",
        BLOCK_BLANK,
        '   Regional Details:',
    ]
    details = scored.details.as_dict()
    for key, label in DETAIL_LABELS:
        lines.append(f"   - {label}: {details[key]}")
    lines.append('')
    return '\n'.join(lines)

def build_report(ranked: Sequence[ScoredRegion], scorer: Optional[RegionScorer] = None,
                 generated_on: Optional[date] = None) -> str:
    """Render the full report text.

    Args:
        ranked: Regions in rank order
        scorer: Scorer whose indicators and tiers describe the methodology
        generated_on: Report date, defaults to today
    """
    scorer = scorer or RegionScorer()
    generated_on = generated_on or date.today()
    counts = scorer.summarize(ranked)

    header = [
        REPORT_TITLE,
        f"Generated: {format_report_date(generated_on)}",
        RULE,
        '',
        'SUMMARY STATISTICS',
        f"- Total Regions Analyzed: {len(ranked)}",
    ]
    for tier, summary_range, _ in tier_ranges(scorer.tiers):
        header.append(f"- {tier.level} Regions (CERS {summary_range}): {counts.get(tier.level, 0)}")
    header += ['', 'REGIONAL RANKINGS', RULE]

    blocks = '\n'.join(_region_block(position, scored, scorer)
                       for position, scored in enumerate(ranked, start=1))

    methodology = ['METHODOLOGY', RULE, formula_text(scorer), '', 'Where:']
    for indicator in scorer.indicators:
        methodology.append(f"{indicator.code} = {indicator.long_label} ({indicator.weight_percent}% weight)")
    methodology += ['', 'SCORE INTERPRETATION']
    for tier, _, interpretation in tier_ranges(scorer.tiers):
        methodology.append(f"- {interpretation}: {tier.level} → {tier.recommendation}")
    methodology += ['', RULE] + list(FOOTER)

    report = '\n'.join(header) + '\n' + blocks + '\n\n' + '\n'.join(methodology)
    return report.strip()

def export_report(ranked: Sequence[ScoredRegion], scorer: Optional[RegionScorer] = None,
                  generated_on: Optional[date] = None) -> ExportFile:
    content = build_report(ranked, scorer=scorer, generated_on=generated_on)
    logger.info(f"Exported report for {len(ranked)} regions")
    return ExportFile(REPORT_FILENAME, 'text/plain', content.encode('utf-8'))
