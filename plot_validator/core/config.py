"""Validator configuration.

All options have defaults matching the published plot rulebook. They can
be overridden per call (pass a ``ValidatorConfig`` to the entry points) or
loaded once from environment variables with ``ValidatorConfig.from_env()``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is
    unparseable or out of its valid range, so bad deployment settings
    surface at startup instead of as silently wrong verdicts.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from plot_validator.core.constants import (
    DEFAULT_MAX_COORDINATE_DECIMALS,
    DEFAULT_MIN_SPIKE_ANGLE_DEG,
    DEFAULT_REQUIRED_PROPERTIES,
)
from plot_validator.core.exceptions import PlotValidatorError

logger = logging.getLogger("plot_validator.core.config")

ENV_PREFIX = "PLOT_VALIDATOR_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(PlotValidatorError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable validator options.

    Attributes:
        report_all_self_intersections: Record one failing step per crossing
            edge pair instead of stopping at the first crossing found.
        enforce_coordinate_precision: Reject longitudes/latitudes with more
            than ``max_coordinate_decimals`` fractional digits.
        report_zero_length_edges: Also emit the legacy "Zero-length edge"
            message next to each duplicate consecutive point violation.
        max_coordinate_decimals: Fractional digit limit for the precision rule.
        min_spike_angle_deg: Interior angles below this are spike vertices.
        required_properties: Property names every feature must carry.
        compute_area: Attach the geodesic area (ha) to valid per-plot results.
    """

    report_all_self_intersections: bool = False
    enforce_coordinate_precision: bool = True
    report_zero_length_edges: bool = False
    max_coordinate_decimals: int = DEFAULT_MAX_COORDINATE_DECIMALS
    min_spike_angle_deg: float = DEFAULT_MIN_SPIKE_ANGLE_DEG
    required_properties: tuple[str, ...] = DEFAULT_REQUIRED_PROPERTIES
    compute_area: bool = True

    @classmethod
    def from_env(cls) -> ValidatorConfig:
        """Load and validate configuration from environment variables.

        Every variable is optional and prefixed with ``PLOT_VALIDATOR_``.

        Raises:
            ConfigValidationError: If a value cannot be parsed or is out
                of range.
        """
        config = cls(
            report_all_self_intersections=_env_bool("REPORT_ALL_SELF_INTERSECTIONS", default=False),
            enforce_coordinate_precision=_env_bool("ENFORCE_COORDINATE_PRECISION", default=True),
            report_zero_length_edges=_env_bool("REPORT_ZERO_LENGTH_EDGES", default=False),
            max_coordinate_decimals=_env_number(
                "MAX_COORDINATE_DECIMALS", int, DEFAULT_MAX_COORDINATE_DECIMALS
            ),
            min_spike_angle_deg=_env_number(
                "MIN_SPIKE_ANGLE_DEG", float, DEFAULT_MIN_SPIKE_ANGLE_DEG
            ),
            required_properties=_env_names("REQUIRED_PROPERTIES", DEFAULT_REQUIRED_PROPERTIES),
            compute_area=_env_bool("COMPUTE_AREA", default=True),
        )
        _validate(config)
        logger.debug(
            "Validator config loaded | all_intersections=%s | precision=%s | "
            "zero_length_edges=%s | decimals=%d | spike_angle=%.1f | required=%s | area=%s",
            config.report_all_self_intersections,
            config.enforce_coordinate_precision,
            config.report_zero_length_edges,
            config.max_coordinate_decimals,
            config.min_spike_angle_deg,
            ",".join(config.required_properties),
            config.compute_area,
        )
        return config


def _env_bool(name: str, *, default: bool) -> bool:
    key = ENV_PREFIX + name
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/true/yes/on or 0/false/no/off")


def _env_number(name: str, kind: type, default: float) -> float:
    key = ENV_PREFIX + name
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return kind(raw.strip())
    except ValueError as exc:
        raise ConfigValidationError(key, raw, f"must be a valid {kind.__name__}") from exc


def _env_names(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return tuple(part.strip() for part in raw.split(","))


def _validate(config: ValidatorConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.max_coordinate_decimals < 0:
        raise ConfigValidationError(
            ENV_PREFIX + "MAX_COORDINATE_DECIMALS",
            config.max_coordinate_decimals,
            "must be >= 0 (decimal places)",
        )

    if not 0.0 <= config.min_spike_angle_deg < 180.0:
        raise ConfigValidationError(
            ENV_PREFIX + "MIN_SPIKE_ANGLE_DEG",
            config.min_spike_angle_deg,
            "must be between 0 (inclusive) and 180 (exclusive) degrees",
        )

    if any(not prop for prop in config.required_properties):
        raise ConfigValidationError(
            ENV_PREFIX + "REQUIRED_PROPERTIES",
            ",".join(config.required_properties),
            "must be a comma-separated list of non-empty property names",
        )
