"""Converter configuration loaded from environment variables.

Every value has a default matching the historical directory layout
(``../data/IN-kml`` → ``../data/OUT-json``). Command-line flags override
individual values after loading.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is empty
    or out of its valid range, so bad settings surface before any file
    is touched.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from kml2places.core.constants import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_READ_CHUNK_SIZE,
    KML_NAMESPACE,
)
from kml2places.core.exceptions import ValidationError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        input_dir: Directory scanned (non-recursively) for ``.kml`` files.
        output_dir: Directory receiving one ``.json`` file per input.
        kml_namespace: Namespace URI whose elements are interpreted.
        read_chunk_size: Bytes fed to the XML parser per call.
        log_level: Root logging level used by the CLI.
    """

    input_dir: str = DEFAULT_INPUT_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    kml_namespace: str = KML_NAMESPACE
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is empty or out of range.
            ValueError: If ``KML_READ_CHUNK_SIZE`` is not an integer.
        """
        config = cls(
            input_dir=os.getenv("KML_INPUT_DIR", DEFAULT_INPUT_DIR),
            output_dir=os.getenv("JSON_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
            kml_namespace=os.getenv("KML_NAMESPACE", KML_NAMESPACE),
            read_chunk_size=int(os.getenv("KML_READ_CHUNK_SIZE", str(DEFAULT_READ_CHUNK_SIZE))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
        validate_config(config)
        return config

    @property
    def logging_level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def validate_config(config: ConverterConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.input_dir:
        raise ConfigValidationError("KML_INPUT_DIR", config.input_dir, "must not be empty")

    if not config.output_dir:
        raise ConfigValidationError("JSON_OUTPUT_DIR", config.output_dir, "must not be empty")

    if not config.kml_namespace:
        raise ConfigValidationError("KML_NAMESPACE", config.kml_namespace, "must not be empty")

    if config.read_chunk_size <= 0:
        raise ConfigValidationError(
            "KML_READ_CHUNK_SIZE",
            config.read_chunk_size,
            "must be > 0 (bytes)",
        )

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            "LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(sorted(_LOG_LEVELS))}",
        )
