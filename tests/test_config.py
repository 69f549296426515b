"""Tests for uriforge.config.GenerationConfig.

Tests:
- Defaults mirror uriforge.constants
- Construction-time validation for every ConfigurationError code
- from_mapping / as_dict / field introspection
- Immutability
"""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given

from tests.strategies import generation_configs
from uriforge import constants
from uriforge.config import GenerationConfig
from uriforge.diagnostics import ConfigurationError, DiagnosticCode


def _code(exc: ConfigurationError) -> DiagnosticCode:
    assert exc.diagnostic is not None
    return exc.diagnostic.code


class TestDefaults:
    """Default values."""

    def test_defaults_match_constants(self) -> None:
        """Defaults come from the constants module."""
        config = GenerationConfig()
        assert config.scheme_max_length == constants.SCHEME_MAX_LENGTH
        assert config.query_max_length == constants.QUERY_MAX_LENGTH
        assert config.port_min == constants.PORT_MIN
        assert config.invalid_port_max == constants.INVALID_PORT_MAX
        assert config.fragment_p == constants.FRAGMENT_P
        assert config.max_attempts == constants.MAX_ATTEMPTS

    def test_optional_knobs_off_by_default(self) -> None:
        """No corruption cap and no IPvFuture branch for invalid IP-literals."""
        config = GenerationConfig()
        assert config.max_invalid_chars is None
        assert config.invalid_ip_literal_allows_future is False

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        config = GenerationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.query_p = 1.0  # type: ignore[misc]

    @given(config=generation_configs())
    def test_strategy_configs_are_valid(self, config: GenerationConfig) -> None:
        """Generated configurations pass validation and keep ordered bounds."""
        assert config.scheme_min_length <= config.scheme_max_length
        assert config.path_min_levels <= config.path_max_levels


class TestValidation:
    """ConfigurationError on inconsistent values."""

    def test_inverted_bounds(self) -> None:
        """min above max is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(query_min_length=5, query_max_length=4)
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_BOUNDS_INVERTED
        assert "query_min_length" in str(exc_info.value)

    @pytest.mark.parametrize("field", GenerationConfig.probability_fields())
    def test_probability_out_of_range(self, field: str) -> None:
        """Every probability field is checked."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(**{field: 1.5})
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_PROBABILITY_OUT_OF_RANGE

    def test_invalid_octet_range_overlaps(self) -> None:
        """Invalid octets must lie above the valid octet range."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(invalid_octet_min=255)
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_RANGES_OVERLAP

    def test_invalid_port_range_overlaps(self) -> None:
        """Invalid ports must lie above the valid port range."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(port_max=70000)
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_RANGES_OVERLAP

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"octet_max": 300, "invalid_octet_min": 301}, "octet_max"),
            ({"octet_max": 100, "invalid_octet_min": 101}, "invalid_octet_min"),
            ({"port_max": 70000, "invalid_port_min": 70001}, "port_max"),
            ({"port_max": 2000, "invalid_port_min": 2001}, "invalid_port_min"),
        ],
    )
    def test_ranges_respect_grammar_limits(self, overrides: dict[str, int], field: str) -> None:
        """Valid ranges stay within the grammar; invalid bands start beyond it."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(**overrides)
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_OUTSIDE_GRAMMAR_LIMIT
        assert field in str(exc_info.value)

    def test_ranges_at_grammar_limits_accepted(self) -> None:
        """The limits themselves are usable on both sides."""
        config = GenerationConfig(
            octet_max=constants.DEC_OCTET_LIMIT,
            invalid_octet_min=constants.DEC_OCTET_LIMIT + 1,
            port_max=constants.PORT_LIMIT,
            invalid_port_min=constants.PORT_LIMIT + 1,
        )
        assert config.octet_max == 255
        assert config.invalid_port_min == 65536

    def test_narrow_valid_range_below_limit_accepted(self) -> None:
        """A valid range below the limit is fine while the invalid band stays above it."""
        config = GenerationConfig(octet_min=1, octet_max=100, port_max=2000)
        assert config.invalid_octet_min == constants.INVALID_OCTET_MIN

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("scheme_min_length", 0),
            ("segment_nz_min_length", 0),
            ("query_max_length", 0),
            ("max_attempts", 0),
            ("max_invalid_chars", 0),
        ],
    )
    def test_bound_too_small(self, field: str, value: int) -> None:
        """Fields with a floor reject values below it."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(**{field: value})
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_BOUND_TOO_SMALL

    def test_is_value_error(self) -> None:
        """ConfigurationError is catchable as ValueError."""
        with pytest.raises(ValueError, match="CONFIG_BOUNDS_INVERTED"):
            GenerationConfig(octet_min=10, octet_max=9)


class TestMappingInterface:
    """from_mapping, as_dict and field introspection."""

    def test_from_mapping_overrides(self) -> None:
        """Known keys override defaults."""
        config = GenerationConfig.from_mapping({"query_p": 1.0, "max_invalid_chars": 2})
        assert config.query_p == 1.0
        assert config.max_invalid_chars == 2
        assert config.fragment_p == constants.FRAGMENT_P

    def test_from_mapping_unknown_key(self) -> None:
        """Unknown keys are rejected before construction."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig.from_mapping({"colour": 1})
        assert _code(exc_info.value) is DiagnosticCode.CONFIG_UNKNOWN_KEY
        assert "colour" in str(exc_info.value)

    def test_as_dict_round_trip(self) -> None:
        """as_dict feeds back into from_mapping unchanged."""
        config = GenerationConfig(userinfo_p=1.0, max_invalid_chars=3)
        assert GenerationConfig.from_mapping(config.as_dict()) == config

    def test_probability_fields(self) -> None:
        """Probability fields are exactly the *_p fields."""
        names = GenerationConfig.probability_fields()
        assert "query_p" in names
        assert "invalid_octet_p" in names
        assert all(name.endswith("_p") for name in names)
        assert "max_attempts" not in names

    def test_field_names_in_declaration_order(self) -> None:
        """field_names starts with the scheme bounds."""
        names = GenerationConfig.field_names()
        assert names[:2] == ("scheme_min_length", "scheme_max_length")
        assert names[-1] == "invalid_ip_literal_allows_future"
