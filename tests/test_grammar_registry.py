"""Tests for the producer dispatch table in uriforge.grammar.registry.

Tests:
- Every Production has a registered producer
- Lookup by Production or ABNF rule name, unknown names
- Read-only view and registration order
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from tests.strategies import productions, seeds
from uriforge.context import GenerationContext
from uriforge.diagnostics import DiagnosticCode, UnknownProductionError
from uriforge.enums import Production
from uriforge.grammar import PRODUCERS, iter_productions, produce, resolve_production


class TestRegistration:
    """Dispatch table contents."""

    def test_every_production_registered(self) -> None:
        """Importing uriforge.grammar registers the whole grammar."""
        assert set(PRODUCERS) == set(Production)

    def test_iteration_in_declaration_order(self) -> None:
        """iter_productions follows the Production declaration order."""
        assert list(iter_productions()) == list(Production)

    def test_view_is_read_only(self) -> None:
        """PRODUCERS cannot be mutated directly."""
        with pytest.raises(TypeError):
            PRODUCERS[Production.URI] = lambda ctx, valid: ""  # type: ignore[index]


class TestResolution:
    """resolve_production / produce lookups."""

    @given(production=productions())
    def test_rule_name_resolves(self, production: Production) -> None:
        """ABNF rule names resolve to their Production."""
        event(f"production={production}")
        assert resolve_production(str(production)) is production
        assert resolve_production(production) is production

    def test_rule_names_are_case_sensitive(self) -> None:
        """Rule names are matched exactly as written in RFC 3986."""
        with pytest.raises(UnknownProductionError):
            resolve_production("uri")

    def test_unknown_name(self) -> None:
        """Unknown rule names raise UnknownProductionError with a diagnostic."""
        with pytest.raises(UnknownProductionError) as exc_info:
            produce(GenerationContext(seed=0), "url", True)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNKNOWN_PRODUCTION
        assert isinstance(exc_info.value, KeyError)

    @given(seed=seeds(), production=productions())
    def test_produce_by_name_equals_by_member(self, seed: int, production: Production) -> None:
        """Producing by name and by member draws the same text."""
        by_name = produce(GenerationContext(seed=seed), str(production), True)
        by_member = produce(GenerationContext(seed=seed), production, True)
        assert by_name == by_member
