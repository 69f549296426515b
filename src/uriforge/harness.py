"""Differential harness: run generated candidates through URL validators.

For every candidate with intended validity ``v`` each validator under test
must return ``v``. With a reference validator (an oracle) the expected
verdict is the oracle's instead, which turns the run into a pure
differential comparison.

Mismatches are findings, not errors: each one is logged as a warning and
collected, and the run always continues to the last candidate. A
validator that raises is recorded as a crash finding for that candidate.
A reference oracle that raises is recorded the same way, and that
candidate is skipped.

The run seed is logged once per run at INFO so a failing run can be
replayed with ``URIGenerator(seed=...)``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .diagnostics import Diagnostic, ErrorTemplate
from .enums import Production
from .generator import URIGenerator

if TYPE_CHECKING:
    from .config import GenerationConfig

__all__ = ["DifferentialHarness", "HarnessReport", "Mismatch", "Validator"]

logger = logging.getLogger(__name__)

type Validator = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Mismatch:
    """One validator verdict that differs from the expected verdict.

    Attributes:
        validator: Name of the validator
        index: Candidate index within its run
        candidate: The generated string
        expected: Intended (or oracle) validity
        actual: Validator verdict, None when the validator raised
        error: Exception raised by the validator, if any
    """

    validator: str
    index: int
    candidate: str
    expected: bool
    actual: bool | None = None
    error: BaseException | None = field(default=None, compare=False)

    @property
    def crashed(self) -> bool:
        """True when the validator raised instead of returning a verdict."""
        return self.error is not None

    def to_diagnostic(self) -> Diagnostic:
        """Structured form for DiagnosticFormatter."""
        if self.error is not None:
            return ErrorTemplate.validator_crashed(
                self.validator, self.index, self.candidate, self.error
            )
        return ErrorTemplate.validator_mismatch(
            self.validator,
            self.index,
            self.candidate,
            expected=self.expected,
            actual=bool(self.actual),
        )


@dataclass(frozen=True, slots=True)
class HarnessReport:
    """Outcome of a harness run.

    Attributes:
        seed: Seed of the run (replay with URIGenerator(seed=seed))
        checked: Number of candidates generated
        mismatches: Every finding, in generation order
    """

    seed: int
    checked: int
    mismatches: tuple[Mismatch, ...] = ()

    @property
    def passed(self) -> bool:
        """True when no validator disagreed on any candidate."""
        return not self.mismatches

    def by_validator(self) -> dict[str, list[Mismatch]]:
        """Group findings by validator name."""
        grouped: dict[str, list[Mismatch]] = {}
        for mismatch in self.mismatches:
            grouped.setdefault(mismatch.validator, []).append(mismatch)
        return grouped

    def merge(self, other: HarnessReport) -> HarnessReport:
        """Combine two runs that share a seed."""
        return HarnessReport(
            seed=self.seed,
            checked=self.checked + other.checked,
            mismatches=self.mismatches + other.mismatches,
        )

    def summary(self) -> str:
        """One-line human-readable summary."""
        crashes = sum(1 for m in self.mismatches if m.crashed)
        return (
            f"seed={self.seed} checked={self.checked} "
            f"mismatches={len(self.mismatches) - crashes} crashes={crashes}"
        )


class DifferentialHarness:
    """Check validators against generated candidates.

    Args:
        validators: Validators under test, as a name-to-callable mapping or
            a sequence of callables (named after ``__qualname__``)
        reference: Optional oracle whose verdict replaces the intended validity.
            If it raises, the crash is recorded under ``reference_name`` and
            that candidate is not checked.
        reference_name: Name for oracle crash findings (default: module:qualname)
        seed: Replay seed (None draws one)
        config: Generation configuration
        production: Rule to generate (default: URI)

    Example:
        >>> harness = DifferentialHarness({"always": lambda s: True}, seed=1)
        >>> report = harness.run(10, valid=True)
        >>> report.passed
        True
    """

    __slots__ = ("_generator", "_production", "_reference", "_reference_name", "_validators")

    def __init__(
        self,
        validators: Mapping[str, Validator] | Sequence[Validator],
        *,
        reference: Validator | None = None,
        reference_name: str | None = None,
        seed: int | None = None,
        config: GenerationConfig | None = None,
        production: Production | str = Production.URI,
    ) -> None:
        if isinstance(validators, Mapping):
            self._validators: dict[str, Validator] = dict(validators)
        else:
            self._validators = {_validator_name(v): v for v in validators}
        self._reference = reference
        if reference_name is None and reference is not None:
            reference_name = _validator_name(reference)
        self._reference_name = reference_name or "reference"
        self._generator = URIGenerator(config=config, seed=seed)
        self._production = production

    @property
    def seed(self) -> int:
        """Seed shared by every run of this harness."""
        return self._generator.seed

    @property
    def generator(self) -> URIGenerator:
        """Underlying generator."""
        return self._generator

    def run(self, count: int, *, valid: bool) -> HarnessReport:
        """Generate ``count`` candidates of one intended validity and check them.

        Returns:
            HarnessReport with every finding of the run

        Raises:
            GenerationError: If generation itself fails (never a finding)
        """
        logger.info(
            "Checking %d %s candidate(s) with seed %d",
            count,
            "valid" if valid else "invalid",
            self.seed,
        )
        findings: list[Mismatch] = []
        for index, candidate in self._generator.samples(count, valid, self._production):
            if self._reference is None:
                expected = valid
            else:
                try:
                    expected = bool(self._reference(candidate))
                except Exception as exc:  # pylint: disable=broad-exception-caught
                    logger.warning(
                        "Reference %s raised on candidate %d %r: %s",
                        self._reference_name,
                        index,
                        candidate,
                        exc,
                    )
                    # No expected verdict, so the candidate is skipped
                    findings.append(
                        Mismatch(self._reference_name, index, candidate, valid, None, exc)
                    )
                    continue
            for name, validator in self._validators.items():
                finding = _check(name, validator, index, candidate, expected)
                if finding is not None:
                    findings.append(finding)
        report = HarnessReport(seed=self.seed, checked=count, mismatches=tuple(findings))
        logger.info("Harness run finished: %s", report.summary())
        return report

    def run_both(self, count: int) -> HarnessReport:
        """Run ``count`` valid candidates, then ``count`` invalid ones."""
        return self.run(count, valid=True).merge(self.run(count, valid=False))


def _validator_name(validator: Validator) -> str:
    module = getattr(validator, "__module__", None)
    name = getattr(validator, "__qualname__", None) or repr(validator)
    return f"{module}:{name}" if module else name


def _check(
    name: str, validator: Validator, index: int, candidate: str, expected: bool
) -> Mismatch | None:
    try:
        actual = bool(validator(candidate))
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("%s raised on candidate %d %r: %s", name, index, candidate, exc)
        return Mismatch(name, index, candidate, expected, None, exc)
    if actual == expected:
        return None
    logger.warning(
        "%d: Expected '%s' to be %s, %s returned %s",
        index,
        candidate,
        "VALID" if expected else "INVALID",
        name,
        actual,
    )
    return Mismatch(name, index, candidate, expected, actual)
