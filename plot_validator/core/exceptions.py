"""Validator exception taxonomy.

Validation of a document never raises: every defect in the input is
reported as a failing step. Exceptions are reserved for faults in the
validator's own setup (for example an out-of-range configuration value).

Every exception inherits from ``PlotValidatorError`` and carries
structured context fields, exposed through ``to_error_dict()`` for
logging and API error payloads.
"""

from __future__ import annotations


class PlotValidatorError(Exception):
    """Base exception for all validator errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred (e.g. ``"config"``).
        code: Machine-readable error code (e.g. ``"CONFIG_VALIDATION_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }
