"""Command line entry point for the export converter."""

import argparse
import logging
from collections.abc import Sequence

from fitness_export.app_logging import configure_logging
from fitness_export.config import Settings
from fitness_export.containers import AppContainer, build_container
from fitness_export.services.nutrition import NumericParseError

_logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="fitness-export",
        description=(
            "Convert a fitness tracker CSV export into spreadsheet-ready text."
        ),
        epilog="Example: fitness-export --path Nutrition.csv --data-type nutrition",
    )
    parser.add_argument(
        "-p",
        "--path",
        required=True,
        help="Path of the CSV file to process",
    )
    parser.add_argument(
        "-d",
        "--data-type",
        required=True,
        help="Type of data to process: nutrition, weight, workout or steps",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log parse statistics to stderr",
    )
    return parser


def run(args: argparse.Namespace, container: AppContainer) -> int:
    """Convert one export and write it to the container's sink."""
    service = container.conversion_service
    kind = service.resolve_kind(args.data_type)
    if kind is None:
        return 0
    try:
        data = container.open_source(args.path).read_bytes()
        output = service.convert(data, kind)
    except OSError as exc:
        _logger.error("Could not read %s: %s", args.path, exc)
        return 1
    except UnicodeDecodeError as exc:
        _logger.error("Could not decode %s: %s", args.path, exc)
        return 1
    except NumericParseError as exc:
        _logger.error("Could not convert %s: %s", args.path, exc)
        return 1
    container.output_sink.write(output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the application."""
    args = create_parser().parse_args(argv)
    settings = Settings()
    if args.debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(logging.DEBUG if settings.debug else logging.INFO)
    return run(args, build_container(settings))


if __name__ == "__main__":
    raise SystemExit(main())
