"""Hypothesis strategies for uriforge property-based testing.

Strategies are organized by domain:

- uri: seeds, productions, generation configurations, character classes
  and corruption inputs

Usage:
    from tests.strategies import seeds, generation_configs
    from tests.strategies.uri import corruption_inputs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - generation_configs, corruption_inputs, probability_vectors
"""

from .uri import (
    ALWAYS_VALID_PRODUCTIONS,
    CORRUPTIBLE_PRODUCTIONS,
    character_classes,
    corruption_inputs,
    generation_configs,
    invalid_complements,
    probability_vectors,
    productions,
    seeds,
)

__all__ = [
    "ALWAYS_VALID_PRODUCTIONS",
    "CORRUPTIBLE_PRODUCTIONS",
    "character_classes",
    "corruption_inputs",
    "generation_configs",
    "invalid_complements",
    "probability_vectors",
    "productions",
    "seeds",
]
