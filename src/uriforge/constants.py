"""Shared constants for uriforge.

This module provides the default size bounds, presence probabilities,
invalidity probabilities and numeric ranges used by the grammar producers.
Placing them here avoids circular imports and gives GenerationConfig a
single source of truth for its defaults.

Constants are grouped by production:
- Scheme, userinfo, reg-name, query, fragment: run lengths
- Paths: segment lengths and path depth
- Numbers: dec-octet and port ranges
- IP literals: IPvFuture and h16 lengths
- Probabilities: optional-part presence and per-sub-part invalidity
- Limits: bounded retry loops

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Run lengths
    "SCHEME_MIN_LENGTH",
    "SCHEME_MAX_LENGTH",
    "USERINFO_MIN_LENGTH",
    "USERINFO_MAX_LENGTH",
    "REG_NAME_MIN_LENGTH",
    "REG_NAME_MAX_LENGTH",
    "QUERY_MIN_LENGTH",
    "QUERY_MAX_LENGTH",
    "FRAGMENT_MIN_LENGTH",
    "FRAGMENT_MAX_LENGTH",
    # Paths
    "PATH_MIN_LEVELS",
    "PATH_MAX_LEVELS",
    "SEGMENT_MIN_LENGTH",
    "SEGMENT_MAX_LENGTH",
    "SEGMENT_NZ_MIN_LENGTH",
    "SEGMENT_NZ_MAX_LENGTH",
    # Numbers
    "OCTET_MIN",
    "OCTET_MAX",
    "INVALID_OCTET_MIN",
    "INVALID_OCTET_MAX",
    "PORT_MIN",
    "PORT_MAX",
    "INVALID_PORT_MIN",
    "INVALID_PORT_MAX",
    "DEC_OCTET_LIMIT",
    "PORT_LIMIT",
    # IP literals
    "H16_MIN_DIGITS",
    "H16_MAX_DIGITS",
    "IPV4_OCTET_COUNT",
    "IPVFUTURE_HEX_MIN_LENGTH",
    "IPVFUTURE_HEX_MAX_LENGTH",
    "IPVFUTURE_MIN_LENGTH",
    "IPVFUTURE_MAX_LENGTH",
    # Presence probabilities
    "USERINFO_P",
    "PORT_P",
    "QUERY_P",
    "FRAGMENT_P",
    "PATH_ABSOLUTE_SEGMENT_P",
    # Invalidity probabilities
    "INVALID_SCHEME_P",
    "INVALID_HIER_P",
    "INVALID_QUERY_P",
    "INVALID_FRAGMENT_P",
    "INVALID_USERINFO_P",
    "INVALID_HOST_P",
    "INVALID_PORT_P",
    "INVALID_OCTET_P",
    # Limits
    "MAX_ATTEMPTS",
    "MAX_SEED",
]

# ============================================================================
# RUN LENGTHS
# ============================================================================

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
# Includes the leading ALPHA, so the minimum is 1.
SCHEME_MIN_LENGTH: int = 1
SCHEME_MAX_LENGTH: int = 10

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO_MIN_LENGTH: int = 0
USERINFO_MAX_LENGTH: int = 10

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME_MIN_LENGTH: int = 0
REG_NAME_MAX_LENGTH: int = 10

# query = *( pchar / "/" / "?" )
QUERY_MIN_LENGTH: int = 0
QUERY_MAX_LENGTH: int = 15

# fragment = *( pchar / "/" / "?" )
FRAGMENT_MIN_LENGTH: int = 0
FRAGMENT_MAX_LENGTH: int = 10

# ============================================================================
# PATHS
# ============================================================================

# path-abempty = *( "/" segment ): number of "/" segment repetitions
PATH_MIN_LEVELS: int = 0
PATH_MAX_LEVELS: int = 10

# segment = *pchar
SEGMENT_MIN_LENGTH: int = 0
SEGMENT_MAX_LENGTH: int = 10

# segment-nz = 1*pchar, segment-nz-nc = 1*( ... ) without ":"
SEGMENT_NZ_MIN_LENGTH: int = 1
SEGMENT_NZ_MAX_LENGTH: int = 10

# ============================================================================
# NUMBERS
# ============================================================================

# dec-octet: valid range and the out-of-range band used for invalid octets.
OCTET_MIN: int = 0
OCTET_MAX: int = 255
INVALID_OCTET_MIN: int = 256
INVALID_OCTET_MAX: int = 2047

# port = *DIGIT, restricted to unprivileged 16-bit TCP ports.
# Invalid ports overflow 16 bits but stay within a signed 32-bit integer.
PORT_MIN: int = 1024
PORT_MAX: int = 65535
INVALID_PORT_MIN: int = 65536
INVALID_PORT_MAX: int = 2**31 - 1

# Largest dec-octet the grammar allows and largest 16-bit port. Valid ranges
# must stay at or below these and invalid bands must start above them.
DEC_OCTET_LIMIT: int = 255
PORT_LIMIT: int = 65535

# ============================================================================
# IP LITERALS
# ============================================================================

# h16 = 1*4HEXDIG (fixed by the grammar, not tunable)
H16_MIN_DIGITS: int = 1
H16_MAX_DIGITS: int = 4

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4_OCTET_COUNT: int = 4

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPVFUTURE_HEX_MIN_LENGTH: int = 1
IPVFUTURE_HEX_MAX_LENGTH: int = 10
IPVFUTURE_MIN_LENGTH: int = 1
IPVFUTURE_MAX_LENGTH: int = 10

# ============================================================================
# PRESENCE PROBABILITIES
# ============================================================================

USERINFO_P: float = 0.5
PORT_P: float = 0.5
QUERY_P: float = 0.5
FRAGMENT_P: float = 0.2

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
# Probability that the optional bracketed part is present.
PATH_ABSOLUTE_SEGMENT_P: float = 0.9

# ============================================================================
# INVALIDITY PROBABILITIES
# ============================================================================
#
# Weights used when a composite production must be invalid and has to pick
# which present sub-parts carry the invalidity. Selection is retried until at
# least one carrier is chosen, so these are relative weights, not guarantees.

INVALID_SCHEME_P: float = 0.2
INVALID_HIER_P: float = 0.2
INVALID_QUERY_P: float = 0.1
INVALID_FRAGMENT_P: float = 0.1
INVALID_USERINFO_P: float = 0.2
INVALID_HOST_P: float = 0.4
INVALID_PORT_P: float = 0.2
INVALID_OCTET_P: float = 0.2

# ============================================================================
# LIMITS
# ============================================================================

# Upper bound on draws for every retry loop (corruption position selection
# and carrier selection). Exhaustion raises GenerationError.
MAX_ATTEMPTS: int = 1000

# Seeds drawn when none is supplied fit in 63 bits so they survive JSON and
# signed 64-bit round trips when a failing run is replayed.
MAX_SEED: int = 2**63 - 1
