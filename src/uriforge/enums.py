"""Enumerations for uriforge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a Production can be logged,
compared against an ABNF rule name, or parsed from a command line without
boilerplate.

Python 3.13+.
"""

from enum import StrEnum


class Production(StrEnum):
    """RFC 3986 ABNF production rules known to the generator.

    Member values are the rule names exactly as written in RFC 3986
    Appendix A: str(Production.REG_NAME) == "reg-name"
    """

    URI = "URI"
    URI_REFERENCE = "URI-reference"
    RELATIVE_REF = "relative-ref"
    RELATIVE_PART = "relative-part"
    HIER_PART = "hier-part"
    SCHEME = "scheme"

    AUTHORITY = "authority"
    USERINFO = "userinfo"
    HOST = "host"
    PORT = "port"

    IP_LITERAL = "IP-literal"
    IPVFUTURE = "IPvFuture"
    IPV6_ADDRESS = "IPv6address"
    H16 = "h16"
    LS32 = "ls32"
    IPV4_ADDRESS = "IPv4address"
    DEC_OCTET = "dec-octet"
    REG_NAME = "reg-name"

    PATH_ABEMPTY = "path-abempty"
    PATH_ABSOLUTE = "path-absolute"
    PATH_NOSCHEME = "path-noscheme"
    PATH_ROOTLESS = "path-rootless"
    PATH_EMPTY = "path-empty"
    SEGMENT = "segment"
    SEGMENT_NZ = "segment-nz"
    SEGMENT_NZ_NC = "segment-nz-nc"

    QUERY = "query"
    FRAGMENT = "fragment"

    @property
    def can_be_invalid(self) -> bool:
        """Whether the producer for this rule has an invalidity path.

        Paths, segments, h16, ls32 and IPvFuture always produce valid text;
        their producers ignore the validity flag.
        """
        return self not in _ALWAYS_VALID


_ALWAYS_VALID = frozenset({
    Production.IPVFUTURE,
    Production.H16,
    Production.LS32,
    Production.PATH_ABEMPTY,
    Production.PATH_ABSOLUTE,
    Production.PATH_NOSCHEME,
    Production.PATH_ROOTLESS,
    Production.PATH_EMPTY,
    Production.SEGMENT,
    Production.SEGMENT_NZ,
    Production.SEGMENT_NZ_NC,
})


class SubPart(StrEnum):
    """Sub-parts of a composite production that may carry invalidity.

    StrEnum provides automatic string conversion: str(SubPart.HOST) == "host"
    """

    SCHEME = "scheme"
    """URI scheme: the text before the first ":"."""

    HIER_PART = "hier-part"
    """Authority-bearing hier-part (or relative-part) of a URI."""

    QUERY = "query"
    """Optional query after "?"."""

    FRAGMENT = "fragment"
    """Optional fragment after "#"."""

    USERINFO = "userinfo"
    """Optional userinfo before "@" in an authority."""

    HOST = "host"
    """Required host of an authority."""

    PORT = "port"
    """Optional port after ":" in an authority."""


__all__ = [
    "Production",
    "SubPart",
]
