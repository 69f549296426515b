"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _RFC_BASE = "https://www.rfc-editor.org/rfc/rfc3986"

    # ------------------------------------------------------------------
    # Range errors
    # ------------------------------------------------------------------

    @staticmethod
    def range_inverted(low: int, high: int) -> Diagnostic:
        """Integer range with low > high.

        Args:
            low: Requested lower bound
            high: Requested upper bound

        Returns:
            Diagnostic for RANGE_INVERTED
        """
        msg = f"Inverted range: low ({low}) is greater than high ({high})"
        return Diagnostic(
            code=DiagnosticCode.RANGE_INVERTED,
            message=msg,
            hint="Check the size bounds and numeric ranges in GenerationConfig",
        )

    @staticmethod
    def empty_character_class(name: str) -> Diagnostic:
        """Sampling or corruption requested from an empty character class.

        Args:
            name: Name of the empty class

        Returns:
            Diagnostic for EMPTY_CHARACTER_CLASS
        """
        msg = f"Character class '{name}' is empty"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHARACTER_CLASS,
            message=msg,
            hint="Complement classes must keep at least one character of the universal alphabet",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2",
        )

    @staticmethod
    def probability_out_of_range(probability: float) -> Diagnostic:
        """Probability outside [0, 1]."""
        msg = f"Probability {probability!r} is outside [0, 1]"
        return Diagnostic(
            code=DiagnosticCode.PROBABILITY_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def empty_selection(what: str) -> Diagnostic:
        """Selection requested over zero alternatives or zero positions."""
        msg = f"Cannot select from an empty {what}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SELECTION,
            message=msg,
        )

    @staticmethod
    def replacement_limit_invalid(limit: int) -> Diagnostic:
        """Corruption requested with fewer than one replacement."""
        msg = f"Maximum replacements must be at least 1, got {limit}"
        return Diagnostic(
            code=DiagnosticCode.REPLACEMENT_LIMIT_INVALID,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Generation errors
    # ------------------------------------------------------------------

    @staticmethod
    def corruption_no_candidate(value: str) -> Diagnostic:
        """No position of the string can be corrupted.

        Args:
            value: The string handed to the corruption engine

        Returns:
            Diagnostic for CORRUPTION_NO_CANDIDATE
        """
        msg = f"No replaceable position in {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CORRUPTION_NO_CANDIDATE,
            message=msg,
            hint=(
                "Supply a string with at least one character outside both the "
                "preserve class and the invalid class"
            ),
        )

    @staticmethod
    def corruption_exhausted(value: str, attempts: int) -> Diagnostic:
        """Corruption loop did not place all replacements."""
        msg = f"Corruption of {value!r} did not converge within {attempts} attempts"
        return Diagnostic(
            code=DiagnosticCode.CORRUPTION_EXHAUSTED,
            message=msg,
            hint="Raise GenerationConfig.max_attempts or lower the replacement limit",
        )

    @staticmethod
    def selection_exhausted(size: int, attempts: int) -> Diagnostic:
        """Carrier selection never drew a true value."""
        msg = (
            f"Selection over {size} sub-part(s) drew no invalid carrier "
            f"within {attempts} attempts"
        )
        return Diagnostic(
            code=DiagnosticCode.SELECTION_EXHAUSTED,
            message=msg,
            hint="Raise the invalidity probabilities in GenerationConfig",
        )

    @staticmethod
    def selection_impossible(size: int) -> Diagnostic:
        """Carrier selection where every probability is zero."""
        msg = f"Selection over {size} sub-part(s) cannot succeed: every probability is 0"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_IMPOSSIBLE,
            message=msg,
            hint="At least one invalidity probability must be greater than 0",
        )

    @staticmethod
    def redraw_exhausted(production: str, attempts: int) -> Diagnostic:
        """Producer kept drawing a value it must reject."""
        msg = f"{production} drew only rejected values within {attempts} attempts"
        return Diagnostic(
            code=DiagnosticCode.REDRAW_EXHAUSTED,
            message=msg,
            hint="Raise GenerationConfig.max_attempts or widen the rule's size bounds",
            production=production,
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def config_bounds_inverted(
        low_name: str, low: int, high_name: str, high: int
    ) -> Diagnostic:
        """Configuration pair where the minimum exceeds the maximum."""
        msg = f"{low_name} ({low}) must not exceed {high_name} ({high})"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_BOUNDS_INVERTED,
            message=msg,
        )

    @staticmethod
    def config_probability_out_of_range(name: str, value: float) -> Diagnostic:
        """Configuration probability outside [0, 1]."""
        msg = f"{name} must be within [0, 1], got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PROBABILITY_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def config_ranges_overlap(
        valid_name: str, valid_max: int, invalid_name: str, invalid_min: int
    ) -> Diagnostic:
        """Valid and invalid numeric ranges share values."""
        msg = (
            f"{invalid_name} ({invalid_min}) must be greater than "
            f"{valid_name} ({valid_max})"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_RANGES_OVERLAP,
            message=msg,
            hint="Invalid values must never fall inside the valid range",
        )

    @staticmethod
    def config_unknown_key(key: str) -> Diagnostic:
        """Override for a field GenerationConfig does not have."""
        msg = f"Unknown configuration key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_UNKNOWN_KEY,
            message=msg,
            hint="Run 'python -m uriforge config' to list the available keys",
        )

    @staticmethod
    def config_bound_too_small(name: str, value: int, minimum: int) -> Diagnostic:
        """Configuration bound below the smallest usable value."""
        msg = f"{name} must be at least {minimum}, got {value}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_BOUND_TOO_SMALL,
            message=msg,
        )

    @staticmethod
    def config_outside_grammar_limit(
        name: str, value: int, limit: int, *, valid: bool
    ) -> Diagnostic:
        """Numeric range on the wrong side of the grammar's limit.

        Args:
            name: Field name
            value: Configured value
            limit: Largest value the grammar accepts
            valid: True for a valid-range maximum, False for an invalid-band minimum

        Returns:
            Diagnostic for CONFIG_OUTSIDE_GRAMMAR_LIMIT
        """
        if valid:
            msg = f"{name} ({value}) must not exceed {limit}"
            hint = "Values above the limit are rejected by the grammar and cannot be valid"
        else:
            msg = f"{name} ({value}) must be greater than {limit}"
            hint = "Values up to the limit are accepted by the grammar and cannot be invalid"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_OUTSIDE_GRAMMAR_LIMIT,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._RFC_BASE}#section-3.2.2",
        )

    @staticmethod
    def config_malformed_override(item: str, expected: str) -> Diagnostic:
        """Command-line override that cannot be parsed."""
        msg = f"Expected {expected}, got {item!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_MALFORMED_OVERRIDE,
            message=msg,
            hint="Overrides take the form KEY=VALUE, e.g. --set query_p=0.5",
        )

    # ------------------------------------------------------------------
    # Harness findings
    # ------------------------------------------------------------------

    @staticmethod
    def validator_mismatch(
        validator: str, index: int, candidate: str, *, expected: bool, actual: bool
    ) -> Diagnostic:
        """Validator verdict differs from the expected verdict.

        Args:
            validator: Validator name
            index: Candidate index within the run
            candidate: Generated candidate string
            expected: Intended (or oracle) validity
            actual: Validator verdict

        Returns:
            Diagnostic for VALIDATOR_MISMATCH
        """
        verdict = "VALID" if expected else "INVALID"
        msg = f"{index}: Expected '{candidate}' to be {verdict}, validator returned {actual}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATOR_MISMATCH,
            message=msg,
            hint="Replay the run with the logged seed to reproduce this candidate",
            help_url=f"{ErrorTemplate._RFC_BASE}#appendix-A",
            candidate=candidate,
            index=index,
            validator=validator,
        )

    @staticmethod
    def validator_crashed(
        validator: str, index: int, candidate: str, error: BaseException
    ) -> Diagnostic:
        """Validator raised instead of returning a verdict."""
        msg = f"{index}: Validator raised {type(error).__name__}: {error}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATOR_CRASHED,
            message=msg,
            hint="A validator must return a bool for every input string",
            candidate=candidate,
            index=index,
            validator=validator,
        )

    # ------------------------------------------------------------------
    # Lookup errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_production(name: str) -> Diagnostic:
        """Production name with no registered producer."""
        msg = f"Unknown production '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PRODUCTION,
            message=msg,
            hint="Use an RFC 3986 rule name such as 'URI', 'authority' or 'reg-name'",
            help_url=f"{ErrorTemplate._RFC_BASE}#appendix-A",
            production=name,
        )

    @staticmethod
    def unknown_character_class(name: str) -> Diagnostic:
        """Character class name not present in the registry."""
        msg = f"Unknown character class '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CHARACTER_CLASS,
            message=msg,
        )
