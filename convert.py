#!/usr/bin/env python3
"""
Contentful Export to Markdown Converter - Main CLI Entry Point

Reads a Contentful export JSON file and writes one Markdown (MDX) file with
front matter for every page entry it contains.
"""

import argparse
import logging
import os
import sys

import yaml

from config_loader import ConfigLoader, get_nested
from loaders import ExportLoadError
from logger import LOGGER_NAME, log_config, setup_logging
from orchestrator import ConversionOrchestrator, ConversionReport

__version__ = "1.0.0"

DEFAULT_CONFIG_PATH = 'config.yaml'


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Convert a Contentful export into Markdown pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert contentful-export*.json in the current directory
  python convert.py

  # Convert a specific export into another directory
  python convert.py --export-file exports/contentful-export-2024.json --output-dir docs/

  # Use a different locale and write a JSON report
  python convert.py --locale de-DE --report report.json

  # Debug logging
  python convert.py -v
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=str,
        help=f'Path to configuration YAML file (default: {DEFAULT_CONFIG_PATH} if present)'
    )

    parser.add_argument(
        '--export-file',
        type=str,
        help='Export JSON file to convert (default: first contentful-export* file in the input directory)'
    )

    parser.add_argument(
        '--input-dir',
        type=str,
        help='Directory searched for the export file (default: .)'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        help='Directory for the generated files (default: ./markdown-output)'
    )

    parser.add_argument(
        '--locale',
        type=str,
        help='Locale of the fields to read (default: en-US)'
    )

    parser.add_argument(
        '--report',
        type=str,
        help='Write a JSON report of all page results to this path'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write logs to this file'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (-v for DEBUG)'
    )

    return parser


def load_configuration(args: argparse.Namespace, logger: logging.Logger) -> dict:
    """Load the config file (if any), apply CLI overrides and validate."""
    config_loader = ConfigLoader()

    if args.config:
        config = config_loader.load(args.config)
    elif os.path.exists(DEFAULT_CONFIG_PATH):
        logger.debug(f"Loading configuration from {DEFAULT_CONFIG_PATH}")
        config = config_loader.load(DEFAULT_CONFIG_PATH)
    else:
        config = config_loader.defaults()

    config = config_loader.merge_with_args(config, args)
    config_loader.validate(config)
    return config


def run_conversion(config: dict, args: argparse.Namespace, logger: logging.Logger) -> int:
    """Execute the conversion pipeline and print the summary."""
    orchestrator = ConversionOrchestrator(config, logger)
    report = orchestrator.run(export_file=args.export_file)

    report_generator = ConversionReport(logger)
    print("\n" + report_generator.format_console_report(report))

    report_path = get_nested(config, 'export.report_path')
    if report_path:
        try:
            report_generator.export_json_report(report, report_path)
            logger.info(f"Conversion report saved to {report_path}")
        except OSError as e:
            logger.warning(f"Failed to export JSON report: {str(e)}")

    # Page failures are reported, not turned into an exit code
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args()

    logger = setup_logging(verbosity=args.verbose, log_file=args.log_file)

    try:
        config = load_configuration(args, logger)

        # Reconfigure logging with config file settings
        logger = setup_logging(
            verbosity=args.verbose,
            log_file=get_nested(config, 'logging.file'),
            level=None if args.verbose else get_nested(config, 'logging.level')
        )
        log_config(config)

        return run_conversion(config, args, logger)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 2
    except ExportLoadError as e:
        logger.error(f"Could not load export: {e}")
        return 2
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        logging.getLogger(LOGGER_NAME).error("Conversion interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
