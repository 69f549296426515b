"""Path producers.

Paths have no invalidity path: every producer here ignores the validity
flag, so an invalid URI is never attributable to its path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uriforge.enums import Production
from uriforge.sampling import random_int, weighted_bool

from .registry import produce, producer

if TYPE_CHECKING:
    from uriforge.context import GenerationContext

__all__ = [
    "path_abempty",
    "path_absolute",
    "path_empty",
    "path_noscheme",
    "path_rootless",
]


@producer(Production.PATH_ABEMPTY)
def path_abempty(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """path-abempty = *( "/" segment )"""
    cfg = ctx.config
    levels = random_int(ctx.rng, cfg.path_min_levels, cfg.path_max_levels)
    return "".join("/" + produce(ctx, Production.SEGMENT, True) for _ in range(levels))


@producer(Production.PATH_ABSOLUTE)
def path_absolute(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """path-absolute = "/" [ segment-nz *( "/" segment ) ]"""
    if not weighted_bool(ctx.rng, ctx.config.path_absolute_segment_p):
        return "/"
    return "/" + produce(ctx, Production.PATH_ROOTLESS, True)


@producer(Production.PATH_NOSCHEME)
def path_noscheme(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """path-noscheme = segment-nz-nc *( "/" segment )"""
    return produce(ctx, Production.SEGMENT_NZ_NC, True) + produce(
        ctx, Production.PATH_ABEMPTY, True
    )


@producer(Production.PATH_ROOTLESS)
def path_rootless(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """path-rootless = segment-nz *( "/" segment )"""
    return produce(ctx, Production.SEGMENT_NZ, True) + produce(ctx, Production.PATH_ABEMPTY, True)


@producer(Production.PATH_EMPTY)
def path_empty(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """path-empty = 0<pchar>"""
    return ""
