"""Generation configuration.

Provides a single frozen dataclass that encapsulates every size bound,
presence probability, invalidity probability and numeric range the grammar
producers read. Producers never hard-code these values, so the generator
can be retuned without touching producer logic.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from . import constants as c
from .diagnostics import ConfigurationError, ErrorTemplate

__all__ = ["GenerationConfig"]

# (min field, max field) pairs that must satisfy min <= max
_BOUND_PAIRS: tuple[tuple[str, str], ...] = (
    ("scheme_min_length", "scheme_max_length"),
    ("userinfo_min_length", "userinfo_max_length"),
    ("reg_name_min_length", "reg_name_max_length"),
    ("query_min_length", "query_max_length"),
    ("fragment_min_length", "fragment_max_length"),
    ("path_min_levels", "path_max_levels"),
    ("segment_min_length", "segment_max_length"),
    ("segment_nz_min_length", "segment_nz_max_length"),
    ("ipvfuture_hex_min_length", "ipvfuture_hex_max_length"),
    ("ipvfuture_min_length", "ipvfuture_max_length"),
    ("octet_min", "octet_max"),
    ("invalid_octet_min", "invalid_octet_max"),
    ("port_min", "port_max"),
    ("invalid_port_min", "invalid_port_max"),
)

# (valid max field, invalid min field): invalid values must lie above the valid range
_DISJOINT_RANGES: tuple[tuple[str, str], ...] = (
    ("octet_max", "invalid_octet_min"),
    ("port_max", "invalid_port_min"),
)

# (valid max field, invalid min field, grammar limit)
_GRAMMAR_LIMITS: tuple[tuple[str, str, int], ...] = (
    ("octet_max", "invalid_octet_min", c.DEC_OCTET_LIMIT),
    ("port_max", "invalid_port_min", c.PORT_LIMIT),
)

# Smallest usable value per field. Corruptible runs need a maximum of at
# least 1 so an invalid request always has a character to corrupt.
_MINIMUMS: Mapping[str, int] = {
    "scheme_min_length": 1,
    "userinfo_max_length": 1,
    "reg_name_max_length": 1,
    "query_max_length": 1,
    "fragment_max_length": 1,
    "segment_nz_min_length": 1,
    "ipvfuture_hex_min_length": 1,
    "ipvfuture_min_length": 1,
    "userinfo_min_length": 0,
    "reg_name_min_length": 0,
    "query_min_length": 0,
    "fragment_min_length": 0,
    "path_min_levels": 0,
    "segment_min_length": 0,
    "octet_min": 0,
    "port_min": 0,
    "max_attempts": 1,
}


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Immutable configuration for URI generation.

    All fields have defaults taken from ``uriforge.constants``; constructing
    ``GenerationConfig()`` with no arguments reproduces the tuning of the
    reference harness. Override individual fields with keyword arguments or
    ``dataclasses.replace``.

    Attributes:
        scheme_min_length / scheme_max_length: Total scheme length, leading ALPHA included.
        userinfo_min_length / userinfo_max_length: userinfo run length.
        reg_name_min_length / reg_name_max_length: reg-name run length.
        query_min_length / query_max_length: query run length.
        fragment_min_length / fragment_max_length: fragment run length.
        path_min_levels / path_max_levels: "/" segment repetitions in path-abempty.
        segment_min_length / segment_max_length: segment run length.
        segment_nz_min_length / segment_nz_max_length: segment-nz(-nc) run length.
        ipvfuture_hex_min_length / ipvfuture_hex_max_length: IPvFuture version digits.
        ipvfuture_min_length / ipvfuture_max_length: IPvFuture tail length.
        octet_min / octet_max: Valid dec-octet range.
        invalid_octet_min / invalid_octet_max: Out-of-range band for invalid octets.
        port_min / port_max: Valid port range.
        invalid_port_min / invalid_port_max: Out-of-range band for invalid ports.
        userinfo_p, port_p, query_p, fragment_p: Presence probabilities of optional parts.
        path_absolute_segment_p: Probability that path-absolute has segments after "/".
        invalid_*_p: Carrier weights for invalidity selection in composite productions.
        max_invalid_chars: Optional cap on corrupted positions per fragment
            (None corrupts up to the whole fragment).
        max_attempts: Bound for every retry loop; exhaustion raises GenerationError.
        invalid_ip_literal_allows_future: Let an invalid IP-literal request take the
            IPvFuture branch, which has no invalidity path (default: False).

    Example:
        >>> config = GenerationConfig(query_p=1.0, fragment_p=0.0)
        >>> config.query_max_length
        15
    """

    scheme_min_length: int = c.SCHEME_MIN_LENGTH
    scheme_max_length: int = c.SCHEME_MAX_LENGTH
    userinfo_min_length: int = c.USERINFO_MIN_LENGTH
    userinfo_max_length: int = c.USERINFO_MAX_LENGTH
    reg_name_min_length: int = c.REG_NAME_MIN_LENGTH
    reg_name_max_length: int = c.REG_NAME_MAX_LENGTH
    query_min_length: int = c.QUERY_MIN_LENGTH
    query_max_length: int = c.QUERY_MAX_LENGTH
    fragment_min_length: int = c.FRAGMENT_MIN_LENGTH
    fragment_max_length: int = c.FRAGMENT_MAX_LENGTH

    path_min_levels: int = c.PATH_MIN_LEVELS
    path_max_levels: int = c.PATH_MAX_LEVELS
    segment_min_length: int = c.SEGMENT_MIN_LENGTH
    segment_max_length: int = c.SEGMENT_MAX_LENGTH
    segment_nz_min_length: int = c.SEGMENT_NZ_MIN_LENGTH
    segment_nz_max_length: int = c.SEGMENT_NZ_MAX_LENGTH

    ipvfuture_hex_min_length: int = c.IPVFUTURE_HEX_MIN_LENGTH
    ipvfuture_hex_max_length: int = c.IPVFUTURE_HEX_MAX_LENGTH
    ipvfuture_min_length: int = c.IPVFUTURE_MIN_LENGTH
    ipvfuture_max_length: int = c.IPVFUTURE_MAX_LENGTH

    octet_min: int = c.OCTET_MIN
    octet_max: int = c.OCTET_MAX
    invalid_octet_min: int = c.INVALID_OCTET_MIN
    invalid_octet_max: int = c.INVALID_OCTET_MAX
    port_min: int = c.PORT_MIN
    port_max: int = c.PORT_MAX
    invalid_port_min: int = c.INVALID_PORT_MIN
    invalid_port_max: int = c.INVALID_PORT_MAX

    userinfo_p: float = c.USERINFO_P
    port_p: float = c.PORT_P
    query_p: float = c.QUERY_P
    fragment_p: float = c.FRAGMENT_P
    path_absolute_segment_p: float = c.PATH_ABSOLUTE_SEGMENT_P

    invalid_scheme_p: float = c.INVALID_SCHEME_P
    invalid_hier_p: float = c.INVALID_HIER_P
    invalid_query_p: float = c.INVALID_QUERY_P
    invalid_fragment_p: float = c.INVALID_FRAGMENT_P
    invalid_userinfo_p: float = c.INVALID_USERINFO_P
    invalid_host_p: float = c.INVALID_HOST_P
    invalid_port_p: float = c.INVALID_PORT_P
    invalid_octet_p: float = c.INVALID_OCTET_P

    max_invalid_chars: int | None = None
    max_attempts: int = c.MAX_ATTEMPTS
    invalid_ip_literal_allows_future: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If a bound is below its minimum, a min/max
                pair is inverted, a probability is outside [0, 1], an
                invalid numeric range overlaps its valid range, or a numeric
                range sits on the wrong side of the grammar's limit.
        """
        for name, minimum in _MINIMUMS.items():
            value = getattr(self, name)
            if value < minimum:
                raise ConfigurationError(
                    ErrorTemplate.config_bound_too_small(name, value, minimum)
                )

        if self.max_invalid_chars is not None and self.max_invalid_chars < 1:
            raise ConfigurationError(
                ErrorTemplate.config_bound_too_small("max_invalid_chars", self.max_invalid_chars, 1)
            )

        for low_name, high_name in _BOUND_PAIRS:
            low = getattr(self, low_name)
            high = getattr(self, high_name)
            if low > high:
                raise ConfigurationError(
                    ErrorTemplate.config_bounds_inverted(low_name, low, high_name, high)
                )

        for valid_name, invalid_name in _DISJOINT_RANGES:
            valid_max = getattr(self, valid_name)
            invalid_min = getattr(self, invalid_name)
            if invalid_min <= valid_max:
                raise ConfigurationError(
                    ErrorTemplate.config_ranges_overlap(
                        valid_name, valid_max, invalid_name, invalid_min
                    )
                )

        for valid_name, invalid_name, limit in _GRAMMAR_LIMITS:
            valid_max = getattr(self, valid_name)
            if valid_max > limit:
                raise ConfigurationError(
                    ErrorTemplate.config_outside_grammar_limit(
                        valid_name, valid_max, limit, valid=True
                    )
                )
            invalid_min = getattr(self, invalid_name)
            if invalid_min <= limit:
                raise ConfigurationError(
                    ErrorTemplate.config_outside_grammar_limit(
                        invalid_name, invalid_min, limit, valid=False
                    )
                )

        for name in self.probability_fields():
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(
                    ErrorTemplate.config_probability_out_of_range(name, value)
                )

    @classmethod
    def probability_fields(cls) -> tuple[str, ...]:
        """Names of every probability field."""
        return tuple(f.name for f in fields(cls) if f.name.endswith("_p"))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of every configurable field, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> GenerationConfig:
        """Build a configuration from a mapping of field overrides.

        Args:
            values: Field name to value; missing fields keep their defaults

        Returns:
            Validated GenerationConfig

        Raises:
            ConfigurationError: If a key is not a field, or values are inconsistent
        """
        known = set(cls.field_names())
        for key in values:
            if key not in known:
                raise ConfigurationError(ErrorTemplate.config_unknown_key(key))
        return cls(**values)  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, object]:
        """Return every field and its value (used for logging a run's tuning)."""
        return {name: getattr(self, name) for name in self.field_names()}
