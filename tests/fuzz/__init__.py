"""Fuzz testing infrastructure for uriforge.

This package contains:
- test_generator_property: High-volume grammar conformance of every production
- test_replay_oracle: State machine checking seed replay against a shadow generator

Python 3.13+.
"""
