"""
Main entry point for factorio-calcdata.
Usage: python -m factorio_calcdata [INPUT] [-o OUTPUT]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .icons.sheet import SpriteSheetRenderer
from .prototypes import ContentLoadError, DataProcessingService, DatasetWriter
from .settings import AppSettings
from .utils.diagnostics import DiagnosticsSink
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="factorio-calcdata",
        description="Convert a Factorio prototype dump into calculator data.",
    )
    parser.add_argument(
        "input", nargs="?", type=Path, help="prototype dump (defaults to settings)"
    )
    parser.add_argument("-o", "--output", type=Path, help="output directory")
    parser.add_argument("--language", help="locale language to use (default: en)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print processing diagnostics"
    )
    parser.add_argument(
        "--no-sprite-sheet",
        action="store_true",
        help="skip rendering the icon sprite sheet",
    )
    parser.add_argument("--profile", default="default", help="settings profile")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    settings = AppSettings(profile=args.profile)
    setup_logging(settings, verbose=args.verbose or settings.verbose)
    logger = logging.getLogger(f"{__name__}.main")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.debug(f"Configuration warning: {warning}")
    if not validation.is_valid and args.input is None:
        for error in validation.errors:
            logger.error(f"Configuration error: {error}")
        return 1

    input_path = args.input or settings.input_path
    output_dir = args.output or settings.output_dir

    try:
        service = DataProcessingService(
            settings=settings,
            diagnostics=DiagnosticsSink(),
            language=args.language or settings.language,
        )
        dataset = service.process_file(input_path)

        renderer = None
        if settings.render_sprite_sheet and not args.no_sprite_sheet:
            renderer = SpriteSheetRenderer(icon_size=settings.icon_size)
        written = DatasetWriter(pretty=settings.pretty_output).write(
            dataset, output_dir, renderer
        )
    except ContentLoadError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1

    for path in written:
        logger.info(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
