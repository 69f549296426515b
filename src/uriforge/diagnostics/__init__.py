"""Diagnostic system for uriforge errors.

Provides structured error diagnostics with codes, hints, and RFC 3986
section links. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    GenerationError,
    RangeError,
    UnknownCharacterClassError,
    UnknownProductionError,
    URIForgeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GenerationError",
    "OutputFormat",
    "RangeError",
    "URIForgeError",
    "UnknownCharacterClassError",
    "UnknownProductionError",
]
