"""Generation context threaded through every producer call.

A GenerationContext bundles the seeded random source with the read-only
configuration. Producers receive it explicitly instead of reaching for a
process-wide random module, so a generator's output is a deterministic
function of its seed and the sequence of calls made on it.

Thread Safety:
    Not thread-safe. A context owns one ``random.Random`` whose state
    advances with every sampling call; give each thread its own context.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .config import GenerationConfig
from .constants import MAX_SEED

__all__ = ["GenerationContext", "new_seed"]

logger = logging.getLogger(__name__)


def new_seed() -> int:
    """Draw a fresh run seed from the operating system's entropy source."""
    return random.SystemRandom().randrange(MAX_SEED)


@dataclass(frozen=True, slots=True)
class GenerationContext:
    """Seeded random source plus configuration.

    Attributes:
        seed: Seed the random source was created with (print it to replay a run)
        config: Size bounds, probabilities and numeric ranges
        rng: Random source, advanced by every sampling operation
    """

    seed: int
    config: GenerationConfig = field(default_factory=GenerationConfig)
    rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rng", random.Random(self.seed))

    @classmethod
    def create(
        cls, seed: int | None = None, config: GenerationConfig | None = None
    ) -> GenerationContext:
        """Create a context, drawing a seed when none is given.

        Args:
            seed: Replay seed (None draws a new one)
            config: Generation configuration (None uses the defaults)

        Returns:
            Fresh GenerationContext
        """
        if seed is None:
            seed = new_seed()
            logger.debug("Drew generation seed %d", seed)
        return cls(seed=seed, config=config if config is not None else GenerationConfig())
