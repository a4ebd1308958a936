"""Directory batch conversion.

Converts every ``.kml`` file of an input directory into a ``.json`` file
of the same base name in the output directory:

1. Validate both directories exist
2. Convert each file independently (stale output replaced)
3. Log and record per-file failures, then continue with the next file
4. Report the number of processed files
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml2places.activities.convert_kml import convert_kml_file
from kml2places.core.exceptions import ConverterError
from kml2places.models.result import BatchSummary, ConversionResult
from kml2places.utils.paths import list_kml_files, output_path_for, require_directory

if TYPE_CHECKING:
    from pathlib import Path

    from kml2places.core.config import ConverterConfig

logger = logging.getLogger("kml2places.orchestrators.batch")


def convert_directory(
    input_dir: Path | str,
    output_dir: Path | str,
    config: ConverterConfig,
) -> BatchSummary:
    """Convert all KML files in ``input_dir`` into ``output_dir``.

    Args:
        input_dir: Directory holding ``.kml`` files (not searched recursively).
        output_dir: Existing directory receiving the ``.json`` files.
        config: Namespace and read settings.

    Returns:
        A ``BatchSummary`` with one result per input file.

    Raises:
        DirectoryValidationError: If either directory does not exist.
    """
    source_dir = require_directory(input_dir, "input")
    target_dir = require_directory(output_dir, "output")

    files = list_kml_files(source_dir)
    logger.info(
        "Batch started | input_dir=%s | output_dir=%s | files=%d",
        source_dir,
        target_dir,
        len(files),
    )

    results: list[ConversionResult] = []
    for kml_path in files:
        json_path = output_path_for(kml_path, target_dir)
        try:
            result = convert_kml_file(
                kml_path,
                json_path,
                namespace=config.kml_namespace,
                chunk_size=config.read_chunk_size,
            )
        except ConverterError as exc:
            logger.error(
                "Conversion failed | source=%s | error=%s",
                kml_path.name,
                exc.to_error_dict(),
            )
            result = ConversionResult(
                source=str(kml_path),
                target=str(json_path),
                error=exc.to_error_dict(),
            )
        results.append(result)

    summary = BatchSummary(
        input_dir=str(source_dir),
        output_dir=str(target_dir),
        results=results,
    )
    logger.info(
        "Completed processing of #%d files | placemarks=%d | failed=%d",
        summary.processed,
        summary.placemark_count,
        len(summary.failures),
    )
    return summary
