"""Reference RFC 3986 grammar checker for tests.

Regular expressions transcribed from RFC 3986 Appendix A, one per rule,
composed bottom-up. Two URL-validator restrictions apply on top of the
bare grammar, matching how validators under test read a URI:

- a port must fit in 16 bits (``port = *DIGIT`` alone would accept 70000)
- a host made of four dot-separated digit runs must be a valid IPv4address
  (``1.2.3.300`` is a legal reg-name but no validator accepts it)

Percent-encoding is accepted here even though the generator never emits it.
"""

from __future__ import annotations

import re

__all__ = [
    "RULES",
    "is_relative_ref",
    "is_uri",
    "is_uri_reference",
    "matches",
]

UNRESERVED = r"[A-Za-z0-9\-._~]"
PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
SUB_DELIMS = r"[!$&'()*+,;=]"
PCHAR = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS}|[:@])"

SCHEME = r"[A-Za-z][A-Za-z0-9+\-.]*"
USERINFO = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS}|:)*"
REG_NAME = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS})*"
QUERY = rf"(?:{PCHAR}|[/?])*"
FRAGMENT = QUERY

DEC_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"
IPV4 = rf"{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}"
H16 = r"[0-9A-Fa-f]{1,4}"
LS32 = rf"(?:{H16}:{H16}|{IPV4})"
IPV6 = "(?:" + "|".join((
    rf"(?:{H16}:){{6}}{LS32}",
    rf"::(?:{H16}:){{5}}{LS32}",
    rf"(?:{H16})?::(?:{H16}:){{4}}{LS32}",
    rf"(?:(?:{H16}:){{0,1}}{H16})?::(?:{H16}:){{3}}{LS32}",
    rf"(?:(?:{H16}:){{0,2}}{H16})?::(?:{H16}:){{2}}{LS32}",
    rf"(?:(?:{H16}:){{0,3}}{H16})?::{H16}:{LS32}",
    rf"(?:(?:{H16}:){{0,4}}{H16})?::{LS32}",
    rf"(?:(?:{H16}:){{0,5}}{H16})?::{H16}",
    rf"(?:(?:{H16}:){{0,6}}{H16})?::",
)) + ")"
IPVFUTURE = rf"v[0-9A-Fa-f]+\.(?:{UNRESERVED}|{SUB_DELIMS}|:)+"
IP_LITERAL = rf"\[(?:{IPV6}|{IPVFUTURE})\]"
HOST = rf"(?:{IP_LITERAL}|{IPV4}|{REG_NAME})"
PORT = r"[0-9]*"

SEGMENT = rf"{PCHAR}*"
SEGMENT_NZ = rf"{PCHAR}+"
SEGMENT_NZ_NC = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS}|@)+"
PATH_ABEMPTY = rf"(?:/{SEGMENT})*"
PATH_ABSOLUTE = rf"/(?:{SEGMENT_NZ}(?:/{SEGMENT})*)?"
PATH_NOSCHEME = rf"{SEGMENT_NZ_NC}(?:/{SEGMENT})*"
PATH_ROOTLESS = rf"{SEGMENT_NZ}(?:/{SEGMENT})*"
PATH_EMPTY = ""

# Host and port are captured so the validator restrictions can be applied
AUTHORITY = rf"(?:{USERINFO}@)?(?P<host>{HOST})(?::(?P<port>{PORT}))?"
HIER_PART = rf"(?://{AUTHORITY}{PATH_ABEMPTY}|{PATH_ABSOLUTE}|{PATH_ROOTLESS}|{PATH_EMPTY})"
RELATIVE_PART = (
    rf"(?://{AUTHORITY}{PATH_ABEMPTY}|{PATH_ABSOLUTE}|{PATH_NOSCHEME}|{PATH_EMPTY})"
)
URI = rf"{SCHEME}:{HIER_PART}(?:\?{QUERY})?(?:#{FRAGMENT})?"
RELATIVE_REF = rf"{RELATIVE_PART}(?:\?{QUERY})?(?:#{FRAGMENT})?"

RULES: dict[str, re.Pattern[str]] = {
    name: re.compile(pattern)
    for name, pattern in {
        "scheme": SCHEME,
        "userinfo": USERINFO,
        "reg-name": REG_NAME,
        "query": QUERY,
        "fragment": FRAGMENT,
        "dec-octet": DEC_OCTET,
        "IPv4address": IPV4,
        "h16": H16,
        "ls32": LS32,
        "IPv6address": IPV6,
        "IPvFuture": IPVFUTURE,
        "IP-literal": IP_LITERAL,
        "host": rf"(?P<host>{HOST})",
        "port": rf"(?P<port>{PORT})",
        "segment": SEGMENT,
        "segment-nz": SEGMENT_NZ,
        "segment-nz-nc": SEGMENT_NZ_NC,
        "path-abempty": PATH_ABEMPTY,
        "path-absolute": PATH_ABSOLUTE,
        "path-noscheme": PATH_NOSCHEME,
        "path-rootless": PATH_ROOTLESS,
        "path-empty": PATH_EMPTY,
        "authority": AUTHORITY,
        "hier-part": HIER_PART,
        "relative-part": RELATIVE_PART,
        "URI": URI,
        "relative-ref": RELATIVE_REF,
    }.items()
}

_DOTTED_NUMERIC = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")
_IPV4_RE = re.compile(IPV4)


def _validator_restrictions_hold(match: re.Match[str]) -> bool:
    groups = match.groupdict()
    host = groups.get("host")
    if host is not None and _DOTTED_NUMERIC.fullmatch(host) and not _IPV4_RE.fullmatch(host):
        return False
    port = groups.get("port")
    return not port or int(port) <= 65535


def matches(rule: str, text: str) -> bool:
    """True when ``text`` is a complete instance of ``rule``.

    Raises:
        KeyError: If the rule has no reference pattern
    """
    if rule == "URI-reference":
        return is_uri_reference(text)
    match = RULES[rule].fullmatch(text)
    return match is not None and _validator_restrictions_hold(match)


def is_uri(text: str) -> bool:
    """Reference verdict for ``URI``."""
    return matches("URI", text)


def is_relative_ref(text: str) -> bool:
    """Reference verdict for ``relative-ref``."""
    return matches("relative-ref", text)


def is_uri_reference(text: str) -> bool:
    """Reference verdict for ``URI-reference`` (URI / relative-ref)."""
    return is_uri(text) or is_relative_ref(text)
