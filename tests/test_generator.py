"""Tests for the public URIGenerator API.

Tests:
- generate_uri / generate_relative_ref / generate_uri_reference verdicts
- generate() by Production or rule name, unknown rule names
- samples() indexing
- Seed handling: replay, drawn seeds, repr
- Module-level generate_uri convenience
"""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.helpers.rfc3986 import is_relative_ref, is_uri, is_uri_reference, matches
from tests.strategies import generation_configs, productions, seeds
from uriforge import GenerationConfig, URIGenerator, generate_uri
from uriforge.diagnostics import UnknownProductionError
from uriforge.enums import Production


class TestEntryPoints:
    """Top-level generation methods."""

    @given(seed=seeds(), config=generation_configs())
    def test_generate_uri(self, seed: int, config: GenerationConfig) -> None:
        """Valid URIs accepted, invalid ones rejected."""
        gen = URIGenerator(config=config, seed=seed)
        assert is_uri(gen.generate_uri(True))
        assert not is_uri(gen.generate_uri(False))

    @given(seed=seeds())
    def test_generate_relative_ref(self, seed: int) -> None:
        """Valid relative-refs accepted, invalid ones rejected."""
        gen = URIGenerator(seed=seed)
        assert is_relative_ref(gen.generate_relative_ref(True))
        assert not is_relative_ref(gen.generate_relative_ref(False))

    @given(seed=seeds())
    def test_generate_uri_reference(self, seed: int) -> None:
        """Invalid references are rejected under both alternatives."""
        gen = URIGenerator(seed=seed)
        assert is_uri_reference(gen.generate_uri_reference(True))
        assert not is_uri_reference(gen.generate_uri_reference(False))

    @given(seed=seeds(), production=productions(corruptible_only=True))
    def test_generate_any_production(self, seed: int, production: Production) -> None:
        """generate() covers every corruptible rule."""
        gen = URIGenerator(seed=seed)
        assert matches(production, gen.generate(production, True))
        assert not matches(production, gen.generate(production, False))

    def test_generate_by_rule_name(self, generator: URIGenerator) -> None:
        """Rule names are accepted in place of Production members."""
        assert matches("authority", generator.generate("authority", True))

    def test_unknown_rule_name(self, generator: URIGenerator) -> None:
        """Unknown rule names raise UnknownProductionError."""
        with pytest.raises(UnknownProductionError):
            generator.generate("url", True)

    def test_eager_config_fixture(self, eager_config: GenerationConfig) -> None:
        """Every optional part is present under the eager configuration."""
        text = URIGenerator(config=eager_config, seed=1).generate_uri(True)
        assert "?" in text
        assert "#" in text


class TestSamples:
    """samples() iteration."""

    def test_indices_start_at_zero(self, generator: URIGenerator) -> None:
        """Indices are 0..count-1 in order."""
        indices = [index for index, _ in generator.samples(5, True)]
        assert indices == [0, 1, 2, 3, 4]

    def test_zero_count(self, generator: URIGenerator) -> None:
        """count=0 yields nothing."""
        assert list(generator.samples(0, True)) == []

    def test_samples_match_sequential_calls(self) -> None:
        """samples() draws exactly what repeated generate() calls would."""
        sampled = [text for _, text in URIGenerator(seed=9).samples(4, False)]
        gen = URIGenerator(seed=9)
        assert sampled == [gen.generate_uri(False) for _ in range(4)]

    def test_samples_other_production(self, generator: URIGenerator) -> None:
        """The production argument selects the rule."""
        for _, text in generator.samples(5, True, Production.IPV4_ADDRESS):
            assert matches("IPv4address", text)


class TestSeeds:
    """Seed handling."""

    @given(seed=seeds())
    def test_replay(self, seed: int) -> None:
        """Same seed, same sequence."""
        first = URIGenerator(seed=seed)
        second = URIGenerator(seed=seed)
        assert [first.generate_uri(True) for _ in range(3)] == [
            second.generate_uri(True) for _ in range(3)
        ]

    def test_drawn_seed_is_exposed(self) -> None:
        """A generator without a seed draws one and reports it for replay."""
        gen = URIGenerator()
        assert gen.seed >= 0
        replay = URIGenerator(seed=gen.seed)
        assert replay.generate_uri(True) == gen.generate_uri(True)

    def test_config_default(self, generator: URIGenerator) -> None:
        """No configuration means the defaults."""
        assert generator.config == GenerationConfig()
        assert generator.context.config is generator.config

    def test_repr(self) -> None:
        """repr shows the seed."""
        assert repr(URIGenerator(seed=42)) == "URIGenerator(seed=42)"


class TestModuleFunction:
    """uriforge.generate_uri."""

    def test_seeded_matches_generator(self) -> None:
        """The convenience function equals a fresh generator's first URI."""
        assert generate_uri(True, seed=5) == URIGenerator(seed=5).generate_uri(True)

    def test_invalid(self) -> None:
        """Invalid requests are rejected by the reference grammar."""
        assert not is_uri(generate_uri(False, seed=6))
