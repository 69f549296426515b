"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Range errors (empty classes, inverted ranges, bad probabilities)
        2000-2999: Generation errors (retry loops that did not converge)
        3000-3999: Configuration errors (GenerationConfig validation)
        4000-4999: Harness findings (validator disagreements)
        5000-5999: Lookup errors (unknown productions, character classes)
    """

    # Range errors (1000-1999)
    RANGE_INVERTED = 1001
    EMPTY_CHARACTER_CLASS = 1002
    PROBABILITY_OUT_OF_RANGE = 1003
    EMPTY_SELECTION = 1004
    REPLACEMENT_LIMIT_INVALID = 1005

    # Generation errors (2000-2999)
    CORRUPTION_NO_CANDIDATE = 2001
    CORRUPTION_EXHAUSTED = 2002
    SELECTION_EXHAUSTED = 2003
    SELECTION_IMPOSSIBLE = 2004
    REDRAW_EXHAUSTED = 2005

    # Configuration errors (3000-3999)
    CONFIG_BOUNDS_INVERTED = 3001
    CONFIG_PROBABILITY_OUT_OF_RANGE = 3002
    CONFIG_RANGES_OVERLAP = 3003
    CONFIG_UNKNOWN_KEY = 3004
    CONFIG_BOUND_TOO_SMALL = 3005
    CONFIG_OUTSIDE_GRAMMAR_LIMIT = 3006
    CONFIG_MALFORMED_OVERRIDE = 3007

    # Harness findings (4000-4999)
    VALIDATOR_MISMATCH = 4001
    VALIDATOR_CRASHED = 4002

    # Lookup errors (5000-5999)
    UNKNOWN_PRODUCTION = 5001
    UNKNOWN_CHARACTER_CLASS = 5002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error (RFC 3986 section)
        production: ABNF rule being produced when the error occurred
        candidate: Generated candidate string (harness findings)
        index: Candidate index within a harness run (harness findings)
        validator: Name of the validator that disagreed (harness findings)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    production: str | None = None
    candidate: str | None = None
    index: int | None = None
    validator: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[CORRUPTION_NO_CANDIDATE]: No replaceable position in '::'
              = help: Supply a string with at least one character outside both the
                preserve class and the invalid class

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
