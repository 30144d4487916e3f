# record_export/adapters/cli/main.py

"""
Record Export Tool - CLI Main Module

Command-line interface that generates sample products and exports them
as standalone spreadsheet/PDF files or as one ZIP archive.

This CLI uses the public API provided by record_export.
"""

# Standard library imports
from argparse import ArgumentParser
from logging import getLogger
from time import time

# Local imports
from record_export.adapters.api import export_records
from record_export.adapters.cli.parser import create_argument_parser
from record_export.core.domain.product import PRODUCT_SCHEMA
from record_export.core.domain.product import generate_sample_products
from record_export.infrastructure.config import get_config
from record_export.infrastructure.logging import log_run_summary
from record_export.infrastructure.logging import setup_logging

logger = getLogger(__name__)


def _find_config_path() -> str | None:
    """Read --config ahead of full parsing so it can supply the defaults"""
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument("--config")
    known, _ = pre_parser.parse_known_args()
    return known.config


def main() -> None:
    """Main CLI entry point using the public API"""
    config_path = _find_config_path()
    parser = create_argument_parser(config_path)
    args = parser.parse_args()

    if args.count < 0:
        parser.error(f"--count must not be negative, got {args.count}")

    log_file_path = setup_logging(
        log_file=args.log_file,
        log_level=args.log_level,
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    start_time = time()

    try:
        logger.info("=== STARTING RECORD EXPORT ===")
        products = list(generate_sample_products(args.count))
        logger.info(f"Generated {len(products)} sample products")

        written = export_records(
            products,
            PRODUCT_SCHEMA,
            formats=args.formats,
            archive=args.archive,
            output_dir=args.output_dir,
            archive_name=args.archive_name,
            config=get_config(config_path),
        )

        log_run_summary(
            log_file=log_file_path,
            start_time=start_time,
            end_time=time(),
            record_count=len(products),
            written_files=written,
            archived=args.archive,
        )

    except Exception as e:
        logger.error(f"Error during export: {e}")
        raise


if __name__ == "__main__":
    main()
