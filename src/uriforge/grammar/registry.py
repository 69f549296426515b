"""Dispatch table mapping RFC 3986 productions to producer functions.

Each producer is a plain function ``(ctx, valid) -> str`` registered with
the ``@producer`` decorator under its Production. Composite producers call
their children through ``produce`` rather than by direct reference, so the
recursive grammar is evaluated by name and every rule can be exercised on
its own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from uriforge.diagnostics import ErrorTemplate, UnknownProductionError
from uriforge.enums import Production

if TYPE_CHECKING:
    from uriforge.context import GenerationContext

__all__ = [
    "PRODUCERS",
    "Producer",
    "iter_productions",
    "produce",
    "producer",
    "resolve_production",
]

type Producer = Callable[[GenerationContext, bool], str]

_producers: dict[Production, Producer] = {}

# Read-only view; populated as the grammar modules are imported
PRODUCERS: Mapping[Production, Producer] = MappingProxyType(_producers)


def producer(production: Production) -> Callable[[Producer], Producer]:
    """Register the decorated function as the producer for ``production``.

    Example:
        >>> @producer(Production.PATH_EMPTY)
        ... def path_empty(ctx, valid):
        ...     return ""
    """

    def decorator(func: Producer) -> Producer:
        _producers[production] = func
        return func

    return decorator


def resolve_production(name: Production | str) -> Production:
    """Map an ABNF rule name to its Production.

    Raises:
        UnknownProductionError: If the name is not a known rule
    """
    if isinstance(name, Production):
        return name
    try:
        return Production(name)
    except ValueError:
        raise UnknownProductionError(ErrorTemplate.unknown_production(name)) from None


def produce(ctx: GenerationContext, production: Production | str, valid: bool) -> str:
    """Evaluate ``production`` with the requested validity.

    Raises:
        UnknownProductionError: If no producer is registered for the rule
    """
    rule = resolve_production(production)
    try:
        func = _producers[rule]
    except KeyError:
        raise UnknownProductionError(ErrorTemplate.unknown_production(rule)) from None
    return func(ctx, valid)


def iter_productions() -> Iterator[Production]:
    """Registered productions in RFC declaration order."""
    return (p for p in Production if p in _producers)
