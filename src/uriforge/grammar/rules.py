"""Composite producers: authority, hier-part, URI and the relative forms.

Composite productions decide which optional parts appear, then, when
invalidity is requested, which of the present sub-parts carry it. Carrier
selection draws one weighted boolean per present sub-part and redraws
until at least one is set, so an invalid composite is never vacuously
valid. Only sub-parts with an invalidity path are offered as carriers:
the hier-part (or relative-part) qualifies only in its authority form.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from uriforge.enums import Production, SubPart
from uriforge.sampling import choose, weighted_bool, weighted_bools_at_least_one_true

from .registry import produce, producer

if TYPE_CHECKING:
    from uriforge.context import GenerationContext

__all__ = [
    "HIER_PART_FORMS",
    "RELATIVE_PART_FORMS",
    "authority",
    "hier_part",
    "relative_part",
    "relative_ref",
    "select_carriers",
    "uri",
    "uri_reference",
]

logger = logging.getLogger(__name__)

# Production.AUTHORITY stands for the form "//" authority path-abempty
HIER_PART_FORMS: tuple[Production, ...] = (
    Production.AUTHORITY,
    Production.PATH_ABSOLUTE,
    Production.PATH_ROOTLESS,
    Production.PATH_EMPTY,
)
RELATIVE_PART_FORMS: tuple[Production, ...] = (
    Production.AUTHORITY,
    Production.PATH_ABSOLUTE,
    Production.PATH_NOSCHEME,
    Production.PATH_EMPTY,
)

_REFERENCE_ALTERNATIVES = (Production.URI, Production.RELATIVE_REF)


def select_carriers(
    ctx: GenerationContext,
    candidates: Sequence[tuple[SubPart, float]],
    valid: bool,
) -> frozenset[SubPart]:
    """Choose which present sub-parts carry the requested invalidity.

    Args:
        ctx: Generation context
        candidates: Present sub-parts with an invalidity path, and their weights
        valid: Requested validity (True selects nothing)

    Returns:
        The selected sub-parts; non-empty whenever ``valid`` is False

    Raises:
        GenerationError: If selection does not converge
    """
    if valid:
        return frozenset()
    draw = weighted_bools_at_least_one_true(
        ctx.rng, [p for _, p in candidates], ctx.config.max_attempts
    )
    chosen = frozenset(part for (part, _), hit in zip(candidates, draw, strict=True) if hit)
    logger.debug("Invalid carriers: %s", ", ".join(sorted(chosen)))
    return chosen


def _render_part(ctx: GenerationContext, form: Production, valid: bool) -> str:
    if form is Production.AUTHORITY:
        return "//" + produce(ctx, Production.AUTHORITY, valid) + produce(
            ctx, Production.PATH_ABEMPTY, True
        )
    return produce(ctx, form, True)


def _pick_form(ctx: GenerationContext, forms: Sequence[Production], valid: bool) -> Production:
    # Only the authority form can carry invalidity
    if not valid:
        return Production.AUTHORITY
    return choose(ctx.rng, forms)


@producer(Production.AUTHORITY)
def authority(ctx: GenerationContext, valid: bool) -> str:
    """authority = [ userinfo "@" ] host [ ":" port ]"""
    cfg = ctx.config
    show_userinfo = weighted_bool(ctx.rng, cfg.userinfo_p)
    show_port = weighted_bool(ctx.rng, cfg.port_p)

    candidates: list[tuple[SubPart, float]] = []
    if show_userinfo:
        candidates.append((SubPart.USERINFO, cfg.invalid_userinfo_p))
    candidates.append((SubPart.HOST, cfg.invalid_host_p))
    if show_port:
        candidates.append((SubPart.PORT, cfg.invalid_port_p))
    invalid = select_carriers(ctx, candidates, valid)

    parts: list[str] = []
    if show_userinfo:
        parts.append(produce(ctx, Production.USERINFO, SubPart.USERINFO not in invalid) + "@")
    parts.append(produce(ctx, Production.HOST, SubPart.HOST not in invalid))
    if show_port:
        parts.append(":" + produce(ctx, Production.PORT, SubPart.PORT not in invalid))
    return "".join(parts)


@producer(Production.HIER_PART)
def hier_part(ctx: GenerationContext, valid: bool) -> str:
    """hier-part = "//" authority path-abempty / path-absolute / path-rootless / path-empty"""
    return _render_part(ctx, _pick_form(ctx, HIER_PART_FORMS, valid), valid)


@producer(Production.RELATIVE_PART)
def relative_part(ctx: GenerationContext, valid: bool) -> str:
    """relative-part = "//" authority path-abempty / path-absolute / path-noscheme / path-empty"""
    return _render_part(ctx, _pick_form(ctx, RELATIVE_PART_FORMS, valid), valid)


@producer(Production.URI)
def uri(ctx: GenerationContext, valid: bool) -> str:
    """URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]

    Invalidity is spread over the scheme, the hier-part (authority form
    only), and the query and fragment when present.
    """
    cfg = ctx.config
    form = choose(ctx.rng, HIER_PART_FORMS)
    show_query = weighted_bool(ctx.rng, cfg.query_p)
    show_fragment = weighted_bool(ctx.rng, cfg.fragment_p)

    candidates: list[tuple[SubPart, float]] = [(SubPart.SCHEME, cfg.invalid_scheme_p)]
    if form is Production.AUTHORITY:
        candidates.append((SubPart.HIER_PART, cfg.invalid_hier_p))
    if show_query:
        candidates.append((SubPart.QUERY, cfg.invalid_query_p))
    if show_fragment:
        candidates.append((SubPart.FRAGMENT, cfg.invalid_fragment_p))
    invalid = select_carriers(ctx, candidates, valid)

    parts = [
        produce(ctx, Production.SCHEME, SubPart.SCHEME not in invalid),
        ":",
        _render_part(ctx, form, SubPart.HIER_PART not in invalid),
    ]
    if show_query:
        parts.append("?" + produce(ctx, Production.QUERY, SubPart.QUERY not in invalid))
    if show_fragment:
        parts.append("#" + produce(ctx, Production.FRAGMENT, SubPart.FRAGMENT not in invalid))
    return "".join(parts)


@producer(Production.RELATIVE_REF)
def relative_ref(ctx: GenerationContext, valid: bool) -> str:
    """relative-ref = relative-part [ "?" query ] [ "#" fragment ]

    Same carrier protocol as URI without the scheme. When invalidity is
    requested and no sub-part can carry it, the query is forced present.
    """
    cfg = ctx.config
    form = choose(ctx.rng, RELATIVE_PART_FORMS)
    show_query = weighted_bool(ctx.rng, cfg.query_p)
    show_fragment = weighted_bool(ctx.rng, cfg.fragment_p)
    if not valid and form is not Production.AUTHORITY and not (show_query or show_fragment):
        show_query = True

    candidates: list[tuple[SubPart, float]] = []
    if form is Production.AUTHORITY:
        candidates.append((SubPart.HIER_PART, cfg.invalid_hier_p))
    if show_query:
        candidates.append((SubPart.QUERY, cfg.invalid_query_p))
    if show_fragment:
        candidates.append((SubPart.FRAGMENT, cfg.invalid_fragment_p))
    invalid = select_carriers(ctx, candidates, valid)

    parts = [_render_part(ctx, form, SubPart.HIER_PART not in invalid)]
    if show_query:
        parts.append("?" + produce(ctx, Production.QUERY, SubPart.QUERY not in invalid))
    if show_fragment:
        parts.append("#" + produce(ctx, Production.FRAGMENT, SubPart.FRAGMENT not in invalid))
    return "".join(parts)


@producer(Production.URI_REFERENCE)
def uri_reference(ctx: GenerationContext, valid: bool) -> str:
    """URI-reference = URI / relative-ref"""
    return produce(ctx, choose(ctx.rng, _REFERENCE_ALTERNATIVES), valid)
