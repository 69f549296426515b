"""uriforge exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class URIForgeError(Exception):
    """Base exception for all uriforge errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize URIForgeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RangeError(URIForgeError, ValueError):
    """Empty character class, inverted range or out-of-range probability.

    Always a configuration bug. Fatal to the generation call; never
    recovered from.
    """


class GenerationError(URIForgeError):
    """A bounded retry loop did not converge.

    Raised by the corruption engine, by invalid-carrier selection and by
    producers that redraw rejected values.
    Never retried silently: masking it would produce negative test cases
    that look invalid but are not.
    """


class ConfigurationError(URIForgeError, ValueError):
    """GenerationConfig field values are inconsistent.

    Examples:
    - min length greater than max length
    - probability outside [0, 1]
    - invalid octet range overlapping the valid range
    - valid port maximum above 65535
    - unknown or malformed override
    """


class UnknownProductionError(URIForgeError, KeyError):
    """Production name with no registered producer."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the formatted diagnostic
        return Exception.__str__(self)


class UnknownCharacterClassError(URIForgeError, KeyError):
    """Character class name not present in the registry."""

    def __str__(self) -> str:
        return Exception.__str__(self)
