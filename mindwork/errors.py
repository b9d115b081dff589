"""
Error Taxonomy — Contract Violations vs Configuration Defects

Two kinds of failure leave the core:
- InputContractError: the caller handed over data outside the agreed bounds
  (ordinal outside 1..5, negative count, month outside 1..12).
- ConfigurationError: rule/template wiring is broken (deployment defect).

Neither is retried. Both propagate to the caller untouched.
"""

from typing import Any, Optional


class MindWorkError(Exception):
    """Base class for every error raised by the insights core."""


class InputContractError(MindWorkError, ValueError):
    """Input outside the agreed contract. Never clamped or coerced."""

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for '{field}': {value!r}")


class OrdinalRangeError(InputContractError):
    """Ordinal level (mood/stress/workload) outside 1..5."""

    def __init__(self, field: str, value: Any, record_id: Optional[str] = None):
        self.record_id = record_id
        location = f" in record '{record_id}'" if record_id else ""
        super().__init__(
            field,
            value,
            f"'{field}' must be an ordinal level in 1..5, got {value!r}{location}",
        )


class ConfigurationError(MindWorkError):
    """Rule or template tables are inconsistent."""


class MissingTemplateError(ConfigurationError, KeyError):
    """A matched category has no registered text."""

    def __init__(self, category: str, table: str = "templates"):
        self.category = category
        self.table = table
        super().__init__(f"No entry for category '{category}' in {table}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
