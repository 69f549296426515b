"""uriforge - randomized RFC 3986 URI generator for differential testing.

Generates grammar-valid URIs and URIs that are deliberately malformed in
controlled sub-parts, by recursively composing the ABNF productions of
RFC 3986. Feed both kinds to URL validators and compare their verdicts.

Public API:
    URIGenerator - Seeded generator for any RFC 3986 production
    generate_uri - One-shot convenience wrapper
    GenerationConfig - Size bounds, probabilities and numeric ranges
    DifferentialHarness - Run candidates through validators and collect findings
    Production - ABNF rule names

Exceptions:
    URIForgeError - Base exception class
    RangeError - Empty character class, inverted range, bad probability
    GenerationError - A bounded retry loop did not converge
    ConfigurationError - Inconsistent GenerationConfig values

Submodules:
    uriforge.charsets - Character classes and their complements
    uriforge.sampling - Primitive random samplers
    uriforge.corruption - Controlled corruption engine
    uriforge.grammar - Producer dispatch table
    uriforge.diagnostics - Error codes, templates and formatting
"""

from .config import GenerationConfig
from .context import GenerationContext
from .diagnostics import (
    ConfigurationError,
    GenerationError,
    RangeError,
    UnknownProductionError,
    URIForgeError,
)
from .enums import Production, SubPart
from .generator import URIGenerator, generate_uri
from .harness import DifferentialHarness, HarnessReport, Mismatch, Validator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("uriforge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Grammar conformance
__rfc__ = "RFC 3986"
__rfc_url__ = "https://www.rfc-editor.org/rfc/rfc3986#appendix-A"

__all__ = [
    "ConfigurationError",
    "DifferentialHarness",
    "GenerationConfig",
    "GenerationContext",
    "GenerationError",
    "HarnessReport",
    "Mismatch",
    "Production",
    "RangeError",
    "SubPart",
    "URIForgeError",
    "URIGenerator",
    "UnknownProductionError",
    "Validator",
    "__rfc__",
    "__rfc_url__",
    "__version__",
    "generate_uri",
]
