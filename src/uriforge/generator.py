"""URIGenerator: the public entry point for candidate generation.

A URIGenerator owns one GenerationContext. Every call advances the same
random source, so two generators created with the same seed and
configuration return identical sequences for identical call sequences.

Example:
    >>> gen = URIGenerator(seed=2024)
    >>> candidate = gen.generate_uri(True)
    >>> negative = gen.generate_uri(False)
    >>> URIGenerator(seed=2024).generate_uri(True) == candidate
    True

Thread Safety:
    Not thread-safe. Create one generator per thread.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .context import GenerationContext
from .enums import Production
from .grammar import produce

if TYPE_CHECKING:
    from .config import GenerationConfig

__all__ = ["URIGenerator", "generate_uri"]


class URIGenerator:
    """Seeded generator of valid and deliberately invalid RFC 3986 strings.

    Args:
        config: Generation configuration (None uses the defaults)
        seed: Replay seed (None draws one; read it back from ``seed``)
    """

    __slots__ = ("_ctx",)

    def __init__(self, config: GenerationConfig | None = None, seed: int | None = None) -> None:
        self._ctx = GenerationContext.create(seed=seed, config=config)

    @property
    def seed(self) -> int:
        """Seed of the underlying random source."""
        return self._ctx.seed

    @property
    def config(self) -> GenerationConfig:
        """Configuration in effect."""
        return self._ctx.config

    @property
    def context(self) -> GenerationContext:
        """Generation context passed to producers."""
        return self._ctx

    def generate_uri(self, valid: bool) -> str:
        """Generate one ``URI`` candidate.

        Args:
            valid: True for a grammar-valid URI, False for one that is
                invalid in at least one sub-part

        Returns:
            Candidate URI string

        Raises:
            GenerationError: If an invalidity loop does not converge
        """
        return produce(self._ctx, Production.URI, valid)

    def generate_relative_ref(self, valid: bool) -> str:
        """Generate one ``relative-ref`` candidate."""
        return produce(self._ctx, Production.RELATIVE_REF, valid)

    def generate_uri_reference(self, valid: bool) -> str:
        """Generate one ``URI-reference`` candidate."""
        return produce(self._ctx, Production.URI_REFERENCE, valid)

    def generate(self, production: Production | str, valid: bool) -> str:
        """Generate one instance of any production, by Production or ABNF rule name.

        Productions without an invalidity path (paths, segments, h16, ls32,
        IPvFuture) return valid text regardless of ``valid``.

        Raises:
            UnknownProductionError: If ``production`` is not a known rule name
        """
        return produce(self._ctx, production, valid)

    def samples(
        self,
        count: int,
        valid: bool,
        production: Production | str = Production.URI,
    ) -> Iterator[tuple[int, str]]:
        """Yield ``(index, candidate)`` pairs, index starting at 0."""
        for index in range(count):
            yield index, produce(self._ctx, production, valid)

    def __repr__(self) -> str:
        return f"URIGenerator(seed={self._ctx.seed})"


def generate_uri(
    valid: bool, *, seed: int | None = None, config: GenerationConfig | None = None
) -> str:
    """Generate a single URI with a fresh generator.

    Convenience wrapper around ``URIGenerator(config, seed).generate_uri``.
    """
    return URIGenerator(config=config, seed=seed).generate_uri(valid)
