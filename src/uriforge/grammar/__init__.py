"""RFC 3986 grammar producers.

Importing this package registers one producer per Production in the
dispatch table. Evaluate any rule by name with ``produce``:

    >>> from uriforge.context import GenerationContext
    >>> from uriforge.grammar import produce
    >>> ctx = GenerationContext.create(seed=7)
    >>> text = produce(ctx, "authority", True)

Python 3.13+. Zero external dependencies.
"""

from . import addresses, paths, primitives, rules
from .registry import PRODUCERS, Producer, iter_productions, produce, producer, resolve_production
from .rules import HIER_PART_FORMS, RELATIVE_PART_FORMS, select_carriers

__all__ = [
    "HIER_PART_FORMS",
    "PRODUCERS",
    "RELATIVE_PART_FORMS",
    "Producer",
    "addresses",
    "iter_productions",
    "paths",
    "primitives",
    "produce",
    "producer",
    "resolve_production",
    "rules",
    "select_carriers",
]
