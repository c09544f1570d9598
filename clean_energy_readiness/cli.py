"""Command line entry point for writing readiness exports."""

import argparse
import logging
import sys
from pathlib import Path

from .core.scorer import RegionScorer
from .core.data_loader import get_regions
from .exporters import EXPORT_FORMATS, export
from .utils.logging_config import setup_logging
from .utils.validator import DataValidator

logger = logging.getLogger(__name__)

def print_ranking(scorer, ranked):
    frame = scorer.to_frame(ranked)
    print(frame[['rank', 'region', 'CERS', 'readiness_level']].to_string(index=False))

def run(args) -> int:
    """Score the region table and write the requested exports."""
    regions = get_regions()
    scorer = RegionScorer()

    validation = DataValidator().validate_regions(regions, scorer.weights)
    if not validation.is_valid:
        logger.error(f"Region table failed validation: {validation.issues}")
        return 1

    ranked = scorer.rank(regions)
    print_ranking(scorer, ranked)

    formats = EXPORT_FORMATS if args.format == 'all' else (args.format,)
    output_dir = Path(args.output_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for kind in formats:
            path = export(kind, ranked, scorer=scorer).write(output_dir)
            logger.info(f"Wrote {path}")
    except OSError as e:
        logger.error(f"Could not write exports to {output_dir}: {e}")
        return 1

    return 0

def main(argv=None):
    parser = argparse.ArgumentParser(description='Export clean energy readiness rankings')
    parser.add_argument(
        '--output-dir', '-o',
        default='.',
        help='Directory for export files'
    )
    parser.add_argument(
        '--format', '-f',
        choices=list(EXPORT_FORMATS) + ['all'],
        default='all',
        help='Export format to write'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Logging level (defaults to LOG_LEVEL or INFO)'
    )
    parser.add_argument(
        '--log-format',
        choices=['json', 'text'],
        default='json',
        help='Log record format'
    )

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, format_type=args.log_format)

    return run(args)

if __name__ == "__main__":
    sys.exit(main())
