"""Diagnostics recorder.

An explicit accumulator threaded through the rule chain for the duration
of one validation. Each rule records a named pass/fail step; a failing
step also appends its message to the error list and flips the verdict to
invalid. The verdict never flips back.
"""

from __future__ import annotations

from plot_validator.models.results import ValidationResult, ValidationStep


class Diagnostics:
    """Mutable step/error trace for one document or one feature."""

    __slots__ = ("_errors", "_is_valid", "_steps")

    def __init__(self) -> None:
        self._is_valid = True
        self._errors: list[str] = []
        self._steps: list[ValidationStep] = []

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def steps(self) -> tuple[ValidationStep, ...]:
        return tuple(self._steps)

    def record(self, rule: str, passed: bool, message: str) -> None:
        """Append a step; a failing step is also recorded as an error."""
        self._steps.append(ValidationStep(rule=rule, passed=passed, message=message))
        if not passed:
            self._is_valid = False
            self._errors.append(message)

    def passed(self, rule: str, message: str) -> None:
        self.record(rule, True, message)

    def failed(self, rule: str, message: str) -> None:
        self.record(rule, False, message)

    def to_result(self) -> ValidationResult:
        """Freeze the trace into an immutable ``ValidationResult``."""
        return ValidationResult(is_valid=self._is_valid, errors=self.errors, steps=self.steps)
