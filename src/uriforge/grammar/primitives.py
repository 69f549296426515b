"""Leaf producers: character runs and bounded numbers.

Run productions (scheme, userinfo, reg-name, query, fragment) sample a
bounded run from their character class. When invalidity is requested the
run length is raised to at least one character and the run is corrupted
with the rule's complement class; an empty run is never corrupted.

Numeric productions (dec-octet, port) sample from the valid range, or from
the configured out-of-range band when invalidity is requested.

Segments and h16 have no invalidity path and ignore the flag.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from uriforge import charsets
from uriforge.constants import H16_MAX_DIGITS, H16_MIN_DIGITS
from uriforge.corruption import corrupt
from uriforge.diagnostics import ErrorTemplate, GenerationError
from uriforge.enums import Production
from uriforge.sampling import random_char, random_int, random_string

from .registry import producer

if TYPE_CHECKING:
    from uriforge.charsets import CharacterClass
    from uriforge.context import GenerationContext

__all__ = [
    "corrupt_value",
    "corruptible_run",
    "dec_octet",
    "fragment",
    "h16",
    "port",
    "query",
    "reg_name",
    "scheme",
    "segment",
    "segment_nz",
    "segment_nz_nc",
    "userinfo",
]

# Digits-and-dots host that URL validators read as an IPv4 address
_DOTTED_NUMERIC = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")
_DEC_OCTET = re.compile(r"25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9]")


def corrupt_value(
    ctx: GenerationContext, value: str, invalid_class: CharacterClass, preserve: str = ""
) -> str:
    """Corrupt ``value`` with the replacement cap taken from the configuration."""
    cap = ctx.config.max_invalid_chars
    limit = len(value) if cap is None else min(cap, len(value))
    return corrupt(
        ctx.rng,
        value,
        invalid_class,
        limit,
        preserve,
        max_attempts=ctx.config.max_attempts,
    )


def corruptible_run(
    ctx: GenerationContext,
    valid: bool,
    min_len: int,
    max_len: int,
    valid_class: CharacterClass,
    invalid_class: CharacterClass,
) -> str:
    """Bounded run over ``valid_class``, corrupted when ``valid`` is False."""
    if valid:
        return random_string(ctx.rng, min_len, max_len, valid_class)
    value = random_string(ctx.rng, max(min_len, 1), max_len, valid_class)
    return corrupt_value(ctx, value, invalid_class)


# ============================================================================
# CHARACTER RUNS
# ============================================================================


@producer(Production.SCHEME)
def scheme(ctx: GenerationContext, valid: bool) -> str:
    """scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )"""
    cfg = ctx.config
    length = random_int(ctx.rng, cfg.scheme_min_length, cfg.scheme_max_length)
    value = random_char(ctx.rng, charsets.ALPHA) + random_string(
        ctx.rng, length - 1, length - 1, charsets.SCHEME
    )
    if valid:
        return value
    return corrupt_value(ctx, value, charsets.INVALID_SCHEME)


@producer(Production.USERINFO)
def userinfo(ctx: GenerationContext, valid: bool) -> str:
    """userinfo = *( unreserved / pct-encoded / sub-delims / ":" )"""
    cfg = ctx.config
    return corruptible_run(
        ctx,
        valid,
        cfg.userinfo_min_length,
        cfg.userinfo_max_length,
        charsets.USERINFO,
        charsets.INVALID_USERINFO,
    )


@producer(Production.REG_NAME)
def reg_name(ctx: GenerationContext, valid: bool) -> str:
    """reg-name = *( unreserved / pct-encoded / sub-delims )

    A valid reg-name that happens to be four dotted numbers outside the
    IPv4 grammar (for example ``1.2.3.400``) is redrawn, because URL
    validators parse such hosts as IPv4 addresses and reject them.

    Raises:
        GenerationError: If every draw within max_attempts was such a name
    """
    cfg = ctx.config
    if not valid:
        # The complement holds no digit or dot, so a corrupted name never
        # reads as an address.
        return corruptible_run(
            ctx,
            valid,
            cfg.reg_name_min_length,
            cfg.reg_name_max_length,
            charsets.REG_NAME,
            charsets.INVALID_REG_NAME,
        )
    for _ in range(cfg.max_attempts):
        value = random_string(
            ctx.rng, cfg.reg_name_min_length, cfg.reg_name_max_length, charsets.REG_NAME
        )
        if not _is_malformed_dotted_quad(value):
            return value
    raise GenerationError(ErrorTemplate.redraw_exhausted(Production.REG_NAME, cfg.max_attempts))


def _is_malformed_dotted_quad(value: str) -> bool:
    if not _DOTTED_NUMERIC.fullmatch(value):
        return False
    return not all(_DEC_OCTET.fullmatch(part) for part in value.split("."))


@producer(Production.QUERY)
def query(ctx: GenerationContext, valid: bool) -> str:
    """query = *( pchar / "/" / "?" )"""
    cfg = ctx.config
    return corruptible_run(
        ctx,
        valid,
        cfg.query_min_length,
        cfg.query_max_length,
        charsets.QUERY,
        charsets.INVALID_QUERY,
    )


@producer(Production.FRAGMENT)
def fragment(ctx: GenerationContext, valid: bool) -> str:
    """fragment = *( pchar / "/" / "?" )"""
    cfg = ctx.config
    return corruptible_run(
        ctx,
        valid,
        cfg.fragment_min_length,
        cfg.fragment_max_length,
        charsets.FRAGMENT,
        charsets.INVALID_FRAGMENT,
    )


@producer(Production.SEGMENT)
def segment(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """segment = *pchar"""
    cfg = ctx.config
    return random_string(ctx.rng, cfg.segment_min_length, cfg.segment_max_length, charsets.PCHAR)


@producer(Production.SEGMENT_NZ)
def segment_nz(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """segment-nz = 1*pchar"""
    cfg = ctx.config
    return random_string(
        ctx.rng, cfg.segment_nz_min_length, cfg.segment_nz_max_length, charsets.PCHAR
    )


@producer(Production.SEGMENT_NZ_NC)
def segment_nz_nc(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )"""
    cfg = ctx.config
    return random_string(
        ctx.rng, cfg.segment_nz_min_length, cfg.segment_nz_max_length, charsets.SEGMENT_NZ_NC
    )


@producer(Production.H16)
def h16(ctx: GenerationContext, valid: bool) -> str:  # noqa: ARG001
    """h16 = 1*4HEXDIG"""
    return random_string(ctx.rng, H16_MIN_DIGITS, H16_MAX_DIGITS, charsets.HEXDIG)


# ============================================================================
# NUMBERS
# ============================================================================


@producer(Production.DEC_OCTET)
def dec_octet(ctx: GenerationContext, valid: bool) -> str:
    """dec-octet in [octet_min, octet_max], or the invalid band when not valid."""
    cfg = ctx.config
    if valid:
        return str(random_int(ctx.rng, cfg.octet_min, cfg.octet_max))
    return str(random_int(ctx.rng, cfg.invalid_octet_min, cfg.invalid_octet_max))


@producer(Production.PORT)
def port(ctx: GenerationContext, valid: bool) -> str:
    """port in [port_min, port_max], or above 16 bits when not valid."""
    cfg = ctx.config
    if valid:
        return str(random_int(ctx.rng, cfg.port_min, cfg.port_max))
    return str(random_int(ctx.rng, cfg.invalid_port_min, cfg.invalid_port_max))
