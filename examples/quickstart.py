"""Quickstart example for uriforge.

This example generates valid and invalid URIs, replays a run from its
seed, and tunes generation through GenerationConfig.

Run this example:
    python examples/quickstart.py

Python 3.13+.
"""

from uriforge import GenerationConfig, Production, URIGenerator

# Example 1: Valid and invalid URIs
print("=" * 50)
print("Example 1: Valid and Invalid URIs")
print("=" * 50)

gen = URIGenerator(seed=2024)
print(f"seed={gen.seed}")
for _ in range(3):
    print("  valid:  ", gen.generate_uri(True))
for _ in range(3):
    print("  invalid:", gen.generate_uri(False))

# Example 2: Replay
print("\n" + "=" * 50)
print("Example 2: Replay From a Seed")
print("=" * 50)

first = URIGenerator(seed=7).generate_uri(False)
again = URIGenerator(seed=7).generate_uri(False)
print(first)
print(f"identical on replay: {first == again}")
# Output: identical on replay: True

# Example 3: Any production by rule name
print("\n" + "=" * 50)
print("Example 3: Individual Productions")
print("=" * 50)

for rule in (Production.AUTHORITY, "IPv6address", "IPv4address", "relative-ref"):
    print(f"  {rule!s:<14} valid={gen.generate(rule, True)!r}")
    print(f"  {rule!s:<14} invalid={gen.generate(rule, False)!r}")

# Example 4: Tuning
print("\n" + "=" * 50)
print("Example 4: Every Optional Part, One Corrupted Character")
print("=" * 50)

config = GenerationConfig(
    userinfo_p=1.0,
    port_p=1.0,
    query_p=1.0,
    fragment_p=1.0,
    max_invalid_chars=1,
)
tuned = URIGenerator(config=config, seed=11)
for index, candidate in tuned.samples(3, valid=False):
    print(f"  {index}: {candidate}")
