"""Differential testing example for uriforge.

Runs two URL validators against the same generated candidates and prints
every disagreement with its candidate index. The first validator is a
deliberately naive check built on urllib.parse, so it is expected to
produce findings; the second is the regex from RFC 3986 Appendix B, which
splits any string and therefore accepts every invalid candidate.

Run this example:
    python examples/differential_testing.py

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

from uriforge import DifferentialHarness
from uriforge.diagnostics import DiagnosticFormatter, OutputFormat

# RFC 3986 Appendix B: splits every string, so it validates nothing
_APPENDIX_B = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?")


def urlsplit_validator(text: str) -> bool:
    """Accept anything urllib can split with a scheme and a port it can read."""
    try:
        parts = urlsplit(text)
        _ = parts.port
    except ValueError:
        return False
    return bool(parts.scheme)


def appendix_b_validator(text: str) -> bool:
    """Accept anything the Appendix B regex matches (always True)."""
    return _APPENDIX_B.match(text) is not None


def main() -> None:
    """Run both validators and print the findings."""
    # Mismatches are also logged one per line at WARNING
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    harness = DifferentialHarness(
        {"urlsplit": urlsplit_validator, "appendix-b": appendix_b_validator},
        seed=20240229,
    )
    report = harness.run_both(50)

    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    for name, findings in report.by_validator().items():
        print(f"\n{name}: {len(findings)} finding(s)")
        for mismatch in findings[:5]:
            print("  " + formatter.format(mismatch.to_diagnostic()))
    print(f"\n{report.summary()}")


if __name__ == "__main__":
    main()
