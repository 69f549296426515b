"""Host producers: IP literals, IPv4 addresses and the host alternative.

IPv6 addresses are drawn uniformly from the nine compression forms of
RFC 3986 Section 3.2.2; an address that degenerates to the bare ``::`` is
regenerated. Invalid IPv6 addresses are corrupted with non-hex
alphanumerics while every ``:`` separator is preserved.

IPvFuture has no invalidity path. An invalid IP-literal therefore takes
the IPv6 alternative unless ``invalid_ip_literal_allows_future`` is set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from uriforge import charsets
from uriforge.constants import IPV4_OCTET_COUNT
from uriforge.diagnostics import ErrorTemplate, GenerationError
from uriforge.enums import Production
from uriforge.sampling import bool_array_at_least_one_true, choose, random_int, random_string

from .primitives import corrupt_value
from .registry import produce, producer

if TYPE_CHECKING:
    from uriforge.context import GenerationContext

__all__ = [
    "host",
    "ip_literal",
    "ipv4_address",
    "ipv6_address",
    "ipvfuture",
    "ls32",
]

logger = logging.getLogger(__name__)

_HOST_ALTERNATIVES = (Production.IP_LITERAL, Production.IPV4_ADDRESS, Production.REG_NAME)
_IP_LITERAL_ALTERNATIVES = (Production.IPV6_ADDRESS, Production.IPVFUTURE)

# Per form: h16 count range before "::" (None when uncompressed), h16 count
# after it, and the closing production.
#   IPv6address =                            6( h16 ":" ) ls32
#               /                       "::" 5( h16 ":" ) ls32
#               / [               h16 ] "::" 4( h16 ":" ) ls32
#               / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#               / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#               / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#               / [ *4( h16 ":" ) h16 ] "::"              ls32
#               / [ *5( h16 ":" ) h16 ] "::"              h16
#               / [ *6( h16 ":" ) h16 ] "::"
_IPV6_FORMS: tuple[tuple[tuple[int, int] | None, int, Production | None], ...] = (
    (None, 6, Production.LS32),
    ((0, 0), 5, Production.LS32),
    ((0, 1), 4, Production.LS32),
    ((0, 2), 3, Production.LS32),
    ((0, 3), 2, Production.LS32),
    ((0, 4), 1, Production.LS32),
    ((0, 5), 0, Production.LS32),
    ((0, 6), 0, Production.H16),
    ((0, 7), 0, None),
)


def _h16_groups(ctx: GenerationContext, count: int) -> list[str]:
    return [produce(ctx, Production.H16, True) for _ in range(count)]


def _ipv6_form(ctx: GenerationContext) -> str:
    prefix_range, suffix_groups, tail = choose(ctx.rng, _IPV6_FORMS)
    parts: list[str] = []
    if prefix_range is not None:
        low, high = prefix_range
        parts.append(":".join(_h16_groups(ctx, random_int(ctx.rng, low, high))))
        parts.append("::")
    suffix = _h16_groups(ctx, suffix_groups)
    if tail is not None:
        suffix.append(produce(ctx, tail, True))
    parts.append(":".join(suffix))
    return "".join(parts)


@producer(Production.IPV6_ADDRESS)
def ipv6_address(ctx: GenerationContext, valid: bool) -> str:
    """One of the nine IPv6address forms, corrupted around its separators.

    Raises:
        GenerationError: If every form drawn within max_attempts was "::"
    """
    value = _non_degenerate_ipv6(ctx)
    if valid:
        return value
    return corrupt_value(ctx, value, charsets.INVALID_IPV6, preserve=":")


def _non_degenerate_ipv6(ctx: GenerationContext) -> str:
    for _ in range(ctx.config.max_attempts):
        value = _ipv6_form(ctx)
        if value != "::":
            return value
        logger.debug("Regenerating degenerate IPv6 address '::'")
    raise GenerationError(
        ErrorTemplate.redraw_exhausted(Production.IPV6_ADDRESS, ctx.config.max_attempts)
    )


@producer(Production.LS32)
def ls32(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """ls32 = ( h16 ":" h16 ) / IPv4address"""
    if choose(ctx.rng, (True, False)):
        return f"{produce(ctx, Production.H16, True)}:{produce(ctx, Production.H16, True)}"
    return produce(ctx, Production.IPV4_ADDRESS, True)


@producer(Production.IPV4_ADDRESS)
def ipv4_address(ctx: GenerationContext, valid: bool) -> str:
    """IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet

    When invalid, at least one octet is drawn from the out-of-range band.
    """
    if valid:
        invalid = [False] * IPV4_OCTET_COUNT
    else:
        invalid = bool_array_at_least_one_true(
            ctx.rng,
            ctx.config.invalid_octet_p,
            IPV4_OCTET_COUNT,
            ctx.config.max_attempts,
        )
    return ".".join(produce(ctx, Production.DEC_OCTET, not bad) for bad in invalid)


@producer(Production.IPVFUTURE)
def ipvfuture(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )"""
    cfg = ctx.config
    version = random_string(
        ctx.rng, cfg.ipvfuture_hex_min_length, cfg.ipvfuture_hex_max_length, charsets.HEXDIG
    )
    tail = random_string(
        ctx.rng, cfg.ipvfuture_min_length, cfg.ipvfuture_max_length, charsets.IPVFUTURE
    )
    return f"v{version}.{tail}"


@producer(Production.IP_LITERAL)
def ip_literal(ctx: GenerationContext, valid: bool) -> str:
    """IP-literal = "[" ( IPv6address / IPvFuture ) "]" """
    if valid or ctx.config.invalid_ip_literal_allows_future:
        inner = choose(ctx.rng, _IP_LITERAL_ALTERNATIVES)
    else:
        inner = Production.IPV6_ADDRESS
    if not valid and inner is Production.IPVFUTURE:
        logger.warning("Invalid IP-literal took the IPvFuture branch; the result may be valid")
    return f"[{produce(ctx, inner, valid)}]"


@producer(Production.HOST)
def host(ctx: GenerationContext, valid: bool) -> str:
    """host = IP-literal / IPv4address / reg-name"""
    return produce(ctx, choose(ctx.rng, _HOST_ALTERNATIVES), valid)
