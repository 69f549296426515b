"""Character classes of RFC 3986 and their complements.

Every class is an immutable, ordered, deduplicated set of characters.
Base classes are spelled out from RFC 3986 Section 2 and Appendix A;
derived classes are built with set algebra (``|`` and ``-``) once at import
time and shared for the lifetime of the process.

Complement ("invalid") classes are computed by subtraction from a declared
universal alphabet: the visible ASCII range ``!``..``~`` without ``%``.
The percent sign is held back because pct-encoding is not generated, and a
stray ``%`` followed by two hex digits would form a valid pct-encoded
triplet.

A complement never contains a structural delimiter that would re-tokenize
the surrounding URI into a different but valid URI. For example ``/`` in a
reg-name would end the authority and start a perfectly valid path, so it is
removed from the reg-name complement. Each such exclusion is listed next to
the complement it applies to.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .diagnostics import ErrorTemplate, RangeError, UnknownCharacterClassError

__all__ = [
    "ALPHA",
    "CHARACTER_CLASSES",
    "DIGIT",
    "FRAGMENT",
    "GEN_DELIMS",
    "HEXDIG",
    "INVALID_FRAGMENT",
    "INVALID_IPV6",
    "INVALID_QUERY",
    "INVALID_REG_NAME",
    "INVALID_SCHEME",
    "INVALID_USERINFO",
    "IPVFUTURE",
    "LOWER_ALPHA",
    "PCHAR",
    "QUERY",
    "REG_NAME",
    "RESERVED",
    "SCHEME",
    "SEGMENT_NZ_NC",
    "SUB_DELIMS",
    "UNIVERSAL",
    "UNRESERVED",
    "UPPER_ALPHA",
    "USERINFO",
    "CharacterClass",
    "character_class",
    "complement",
]


@dataclass(frozen=True, slots=True)
class CharacterClass:
    """Immutable ordered set of characters.

    Duplicates are dropped on construction, keeping the first occurrence,
    so iteration order (and therefore sampling order for a given seed) is
    stable.

    Attributes:
        name: Registry name, used in diagnostics
        chars: The characters, deduplicated, in declaration order
    """

    name: str
    chars: str

    def __post_init__(self) -> None:
        """Deduplicate chars while preserving order."""
        object.__setattr__(self, "chars", "".join(dict.fromkeys(self.chars)))

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.chars

    def __len__(self) -> int:
        return len(self.chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __bool__(self) -> bool:
        return bool(self.chars)

    def __or__(self, other: CharacterClass | str) -> CharacterClass:
        other_chars = other.chars if isinstance(other, CharacterClass) else other
        return CharacterClass(f"{self.name}|{_label(other)}", self.chars + other_chars)

    def __sub__(self, other: CharacterClass | str) -> CharacterClass:
        other_chars = other.chars if isinstance(other, CharacterClass) else other
        kept = "".join(c for c in self.chars if c not in other_chars)
        return CharacterClass(f"{self.name}-{_label(other)}", kept)

    def named(self, name: str) -> CharacterClass:
        """Return the same characters under a registry name."""
        return CharacterClass(name, self.chars)

    def require_non_empty(self) -> CharacterClass:
        """Return self, raising RangeError when the class has no characters."""
        if not self.chars:
            raise RangeError(ErrorTemplate.empty_character_class(self.name))
        return self


def _label(other: CharacterClass | str) -> str:
    return other.name if isinstance(other, CharacterClass) else repr(other)


def complement(name: str, valid: CharacterClass, structural: str = "") -> CharacterClass:
    """Characters of the universal alphabet outside ``valid`` and ``structural``.

    Args:
        name: Registry name of the complement
        valid: Characters the rule accepts at every position
        structural: Delimiters that would re-tokenize the URI if injected

    Returns:
        Non-empty complement class

    Raises:
        RangeError: If the complement is empty
    """
    return ((UNIVERSAL - valid) - structural).named(name).require_non_empty()


# ============================================================================
# BASE CLASSES (RFC 3986 Section 2, Appendix A)
# ============================================================================

LOWER_ALPHA = CharacterClass("lower-alpha", "abcdefghijklmnopqrstuvwxyz")
UPPER_ALPHA = CharacterClass("upper-alpha", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ALPHA = (LOWER_ALPHA | UPPER_ALPHA).named("alpha")
DIGIT = CharacterClass("digit", "0123456789")
HEXDIG = CharacterClass("hex-digit", "0123456789abcdefABCDEF")

GEN_DELIMS = CharacterClass("gen-delims", ":/?#[]@")
SUB_DELIMS = CharacterClass("sub-delims", "!$&'()*+,;=")
RESERVED = (GEN_DELIMS | SUB_DELIMS).named("reserved")
UNRESERVED = (ALPHA | DIGIT | "-._~").named("unreserved")

# Visible ASCII without "%" (pct-encoding is a deferred extension point).
UNIVERSAL = CharacterClass(
    "universal", "".join(chr(c) for c in range(0x21, 0x7F) if chr(c) != "%")
)

# ============================================================================
# PRODUCTION CLASSES
# ============================================================================

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME = (ALPHA | DIGIT | "+-.").named("scheme")

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO = (UNRESERVED | SUB_DELIMS | ":").named("userinfo")

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME = (UNRESERVED | SUB_DELIMS).named("reg-name")

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
PCHAR = (UNRESERVED | SUB_DELIMS | ":@").named("pchar")

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
SEGMENT_NZ_NC = (UNRESERVED | SUB_DELIMS | "@").named("segment-nz-nc")

# query = *( pchar / "/" / "?" ), fragment has the same repertoire
QUERY = (PCHAR | "/?").named("query")
FRAGMENT = (PCHAR | "/?").named("fragment")

# IPvFuture tail: 1*( unreserved / sub-delims / ":" )
IPVFUTURE = (UNRESERVED | SUB_DELIMS | ":").named("ipvfuture")

# ============================================================================
# COMPLEMENT CLASSES (corruption sources)
# ============================================================================

# ":" would end the scheme early and leave a valid rootless path behind.
# "/", "?" and "#" would let a URI-reference read the text as a relative-ref.
INVALID_SCHEME = complement("invalid-scheme", SCHEME, structural=":/?#")

# "/", "?" and "#" would end the authority and start a valid path/query/fragment.
INVALID_USERINFO = complement("invalid-userinfo", USERINFO, structural="/?#")

# As userinfo, plus ":" (starts a port), "@" (splits off a userinfo) and
# "[" (could open an IP-literal together with a later "]").
INVALID_REG_NAME = complement("invalid-reg-name", REG_NAME, structural=":/?#@[")

# "#" would start a valid fragment.
INVALID_QUERY = complement("invalid-query", QUERY, structural="#")

INVALID_FRAGMENT = complement("invalid-fragment", FRAGMENT)

# Alphanumerics that are not hex digits; separators are preserved by the caller.
INVALID_IPV6 = ((ALPHA | DIGIT) - HEXDIG).named("invalid-ipv6").require_non_empty()

# ============================================================================
# REGISTRY
# ============================================================================

CHARACTER_CLASSES: Mapping[str, CharacterClass] = MappingProxyType({
    cls.name: cls
    for cls in (
        LOWER_ALPHA,
        UPPER_ALPHA,
        ALPHA,
        DIGIT,
        HEXDIG,
        GEN_DELIMS,
        SUB_DELIMS,
        RESERVED,
        UNRESERVED,
        UNIVERSAL,
        SCHEME,
        USERINFO,
        REG_NAME,
        PCHAR,
        SEGMENT_NZ_NC,
        QUERY,
        FRAGMENT,
        IPVFUTURE,
        INVALID_SCHEME,
        INVALID_USERINFO,
        INVALID_REG_NAME,
        INVALID_QUERY,
        INVALID_FRAGMENT,
        INVALID_IPV6,
    )
})


def character_class(name: str) -> CharacterClass:
    """Look up a registered class by name.

    Raises:
        UnknownCharacterClassError: If no class has that name
    """
    try:
        return CHARACTER_CLASSES[name]
    except KeyError:
        raise UnknownCharacterClassError(ErrorTemplate.unknown_character_class(name)) from None
