"""Primitive random samplers.

Every sampler draws from an explicitly passed ``random.Random`` so that the
output of a generation run is a deterministic function of the seed and the
call sequence. Samplers validate their arguments and raise RangeError for
configuration bugs (inverted ranges, empty classes, probabilities outside
[0, 1]); bounded retry samplers raise GenerationError when they do not
converge.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .constants import MAX_ATTEMPTS
from .diagnostics import ErrorTemplate, GenerationError, RangeError

if TYPE_CHECKING:
    import random

    from .charsets import CharacterClass

__all__ = [
    "bool_array_at_least_one_true",
    "choose",
    "random_char",
    "random_int",
    "random_string",
    "weighted_bool",
    "weighted_bools_at_least_one_true",
]

logger = logging.getLogger(__name__)


def random_int(rng: random.Random, low: int, high: int) -> int:
    """Uniform integer on the closed interval [low, high].

    Raises:
        RangeError: If low > high
    """
    if low > high:
        raise RangeError(ErrorTemplate.range_inverted(low, high))
    return rng.randint(low, high)


def random_char(rng: random.Random, char_class: CharacterClass) -> str:
    """Uniform pick of one character from the class.

    Raises:
        RangeError: If the class is empty
    """
    char_class.require_non_empty()
    return rng.choice(char_class.chars)


def random_string(
    rng: random.Random, min_len: int, max_len: int, char_class: CharacterClass
) -> str:
    """String of uniform length in [min_len, max_len] over the class.

    Each character is sampled independently, so repeats are allowed.

    Raises:
        RangeError: If min_len > max_len, or the class is empty
    """
    count = random_int(rng, min_len, max_len)
    if count == 0:
        return ""
    return "".join(random_char(rng, char_class) for _ in range(count))


def weighted_bool(rng: random.Random, probability: float) -> bool:
    """True with the given probability, using one uniform [0, 1) draw.

    Raises:
        RangeError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise RangeError(ErrorTemplate.probability_out_of_range(probability))
    return rng.random() < probability


def weighted_bools_at_least_one_true(
    rng: random.Random,
    probabilities: Sequence[float],
    max_attempts: int = MAX_ATTEMPTS,
) -> list[bool]:
    """Draw one weighted boolean per probability until at least one is true.

    A single-element request returns ``[True]`` without drawing: the only
    candidate must be the one selected.

    Args:
        rng: Random source
        probabilities: Weight of each position
        max_attempts: Maximum number of full redraws

    Returns:
        List of booleans, same length as ``probabilities``, with at least one True

    Raises:
        RangeError: If ``probabilities`` is empty or a probability is outside [0, 1]
        GenerationError: If every probability is 0, or no draw within
            ``max_attempts`` produced a True
    """
    size = len(probabilities)
    if size == 0:
        raise RangeError(ErrorTemplate.empty_selection("probability sequence"))
    for probability in probabilities:
        if not 0.0 <= probability <= 1.0:
            raise RangeError(ErrorTemplate.probability_out_of_range(probability))
    if size == 1:
        return [True]
    if not any(probabilities):
        raise GenerationError(ErrorTemplate.selection_impossible(size))

    for attempt in range(1, max_attempts + 1):
        draw = [rng.random() < p for p in probabilities]
        if any(draw):
            if attempt > 1:
                logger.debug("Carrier selection over %d parts took %d draws", size, attempt)
            return draw
    raise GenerationError(ErrorTemplate.selection_exhausted(size, max_attempts))


def bool_array_at_least_one_true(
    rng: random.Random,
    probability: float,
    size: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> list[bool]:
    """Draw ``size`` weighted booleans sharing one probability, at least one True.

    See weighted_bools_at_least_one_true for the retry and error contract.
    """
    return weighted_bools_at_least_one_true(rng, [probability] * size, max_attempts)


def choose[T](rng: random.Random, alternatives: Sequence[T]) -> T:
    """Uniform choice among grammar alternatives.

    Raises:
        RangeError: If there are no alternatives
    """
    if not alternatives:
        raise RangeError(ErrorTemplate.empty_selection("alternative list"))
    return alternatives[random_int(rng, 0, len(alternatives) - 1)]
