"""Command-line entry point for ``kml2places``.

All conversion logic lives in the kml2places package. This module is
purely the wiring layer between arguments/environment and
``convert_directory``.

Exit codes:
    0: every file converted
    1: at least one file failed
    2: configuration or directory error
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import TYPE_CHECKING

from kml2places import __version__
from kml2places.core.config import ConverterConfig, validate_config
from kml2places.core.exceptions import ValidationError
from kml2places.orchestrators.batch import convert_directory

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("kml2places.cli")

EXIT_OK = 0
EXIT_FAILED_FILES = 1
EXIT_USAGE = 2

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kml2places",
        description="Convert every .kml file in a directory into a JSON array of places.",
    )
    parser.add_argument("--input-dir", help="directory with .kml files (env KML_INPUT_DIR)")
    parser.add_argument("--output-dir", help="directory for .json files (env JSON_OUTPUT_DIR)")
    parser.add_argument("--namespace", help="KML namespace URI (env KML_NAMESPACE)")
    parser.add_argument("--log-level", help="logging level (env LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> ConverterConfig:
    """Environment configuration with command-line overrides applied."""
    config = ConverterConfig.from_env()
    overrides = {
        "input_dir": args.input_dir,
        "output_dir": args.output_dir,
        "kml_namespace": args.namespace,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})
    validate_config(config)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (ValidationError, ValueError) as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", exc)
        return EXIT_USAGE

    logging.basicConfig(level=config.logging_level, format=LOG_FORMAT)
    logger.info(
        "Will work on files in %s and produce output to %s",
        config.input_dir,
        config.output_dir,
    )

    try:
        summary = convert_directory(config.input_dir, config.output_dir, config)
    except ValidationError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    return EXIT_FAILED_FILES if summary.failures else EXIT_OK
