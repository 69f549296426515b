"""Controlled corruption of valid strings.

The corruption engine turns a valid production into an invalid one by
replacing a random, non-empty subset of its characters with characters
from a disjoint "invalid" class. Positions whose character belongs to a
preserve class (for example the ``:`` separators of an IPv6 address) are
never touched, so the corruption breaks character content rather than the
sub-part boundaries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import MAX_ATTEMPTS
from .diagnostics import ErrorTemplate, GenerationError, RangeError
from .sampling import random_char, random_int

if TYPE_CHECKING:
    import random

    from .charsets import CharacterClass

__all__ = ["corrupt"]

logger = logging.getLogger(__name__)


def corrupt(
    rng: random.Random,
    value: str,
    invalid_class: CharacterClass,
    max_replacements: int,
    preserve: str = "",
    *,
    max_attempts: int = MAX_ATTEMPTS,
) -> str:
    """Replace between 1 and ``max_replacements`` characters of ``value``.

    The number of replacements is uniform in ``1..limit``. With a preserve
    class, ``limit`` is the number of characters outside it; otherwise it is
    ``max_replacements``. It is further capped by the number of positions
    that can actually be replaced (not preserved and not already invalid).

    Positions are then drawn uniformly; a drawn position holding a
    preserved or already-invalid character is skipped and redrawn.

    Args:
        rng: Random source
        value: Valid string to corrupt (an empty string is returned as is)
        invalid_class: Replacement characters, all invalid for the rule
        max_replacements: Upper bound on replaced positions
        preserve: Characters that must never be replaced
        max_attempts: Maximum number of position draws

    Returns:
        String of the same length differing in 1..max_replacements positions

    Raises:
        RangeError: If invalid_class is empty or max_replacements < 1
        GenerationError: If no position is replaceable, or the replacements
            were not placed within max_attempts draws
    """
    if not value:
        return value
    invalid_class.require_non_empty()
    if max_replacements < 1:
        raise RangeError(ErrorTemplate.replacement_limit_invalid(max_replacements))

    replaceable = sum(1 for ch in value if ch not in preserve and ch not in invalid_class)
    if replaceable == 0:
        raise GenerationError(ErrorTemplate.corruption_no_candidate(value))

    if preserve:
        limit = sum(1 for ch in value if ch not in preserve)
    else:
        limit = max_replacements
    remaining = random_int(rng, 1, min(limit, max_replacements, replaceable))

    chars = list(value)
    last = len(chars) - 1
    for _ in range(max_attempts):
        index = random_int(rng, 0, last)
        current = chars[index]
        if current in invalid_class or current in preserve:
            continue
        chars[index] = random_char(rng, invalid_class)
        remaining -= 1
        if remaining == 0:
            return "".join(chars)

    logger.debug("Corruption gave up on %r with %d replacements left", value, remaining)
    raise GenerationError(ErrorTemplate.corruption_exhausted(value, max_attempts))
