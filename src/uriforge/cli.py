"""Command line interface.

Usage:
    python -m uriforge generate --count 5 --seed 42
    python -m uriforge generate --invalid --production authority
    python -m uriforge check mypkg.validators:is_valid --count 500
    python -m uriforge check rfc3986:is_valid_uri --reference mypkg.oracle:accepts
    python -m uriforge config

Exit Codes:
    0   Success (check: no validator disagreed)
    1   check: at least one mismatch or validator crash
    2   Usage, import or configuration error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Sequence
from dataclasses import fields

from .config import GenerationConfig
from .diagnostics import (
    ConfigurationError,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    URIForgeError,
)
from .enums import Production
from .generator import URIGenerator
from .harness import DifferentialHarness, Validator

__all__ = ["build_parser", "load_validator", "main", "parse_overrides"]

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for ``python -m uriforge``."""
    parser = argparse.ArgumentParser(
        prog="uriforge",
        description="Generate valid and invalid RFC 3986 URIs for differential testing.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ten valid URIs, reproducible:
  python -m uriforge generate --count 10 --seed 42

  # Invalid authorities with long reg-names:
  python -m uriforge generate --invalid --production authority --set reg_name_max_length=30

  # Check a validator against 1000 valid and 1000 invalid URIs:
  python -m uriforge check mypkg.urls:is_valid --count 1000
""",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="count", default=0, help="Log more (repeat for debug)"
    )
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Log errors only")

    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print generated candidates, one per line")
    gen.add_argument("--count", "-n", type=int, default=1, help="Number of candidates")
    gen.add_argument("--invalid", action="store_true", help="Generate invalid candidates")
    _add_generation_options(gen)

    check = sub.add_parser("check", help="Run validators against generated candidates")
    check.add_argument(
        "validators", nargs="+", metavar="MODULE:FUNCTION", help="Validators under test"
    )
    check.add_argument(
        "--reference",
        metavar="MODULE:FUNCTION",
        help="Oracle whose verdict replaces the intended validity",
    )
    check.add_argument(
        "--count", "-n", type=int, default=100, help="Candidates per validity (default: 100)"
    )
    check.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Finding output format (default: rust)",
    )
    _add_generation_options(check)

    sub.add_parser("config", help="List configuration keys and their defaults")
    return parser


def _add_generation_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", "-s", type=int, default=None, help="Replay seed")
    parser.add_argument(
        "--production",
        "-p",
        default=Production.URI.value,
        choices=[p.value for p in Production],
        metavar="RULE",
        help="ABNF rule to generate (default: URI)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a GenerationConfig field (repeatable)",
    )


def parse_overrides(items: Sequence[str]) -> GenerationConfig:
    """Build a GenerationConfig from ``key=value`` strings.

    Values are coerced to the type of the field's default.

    Raises:
        ConfigurationError: On malformed items, unknown keys, values that
            cannot be coerced, or inconsistent values
    """
    defaults = GenerationConfig().as_dict()
    values: dict[str, object] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep:
            raise ConfigurationError(ErrorTemplate.config_malformed_override(item, "KEY=VALUE"))
        if key not in defaults:
            raise ConfigurationError(ErrorTemplate.config_unknown_key(key))
        values[key] = _coerce(key, defaults[key], raw.strip())
    return GenerationConfig.from_mapping(values)


def _coerce(key: str, default: object, raw: str) -> object:
    match default:
        case bool():
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            expected = f"a boolean for {key}"
        case int() | None:
            # None marks optional integer fields (max_invalid_chars)
            if default is None and raw.lower() == "none":
                return None
            try:
                return int(raw)
            except ValueError:
                expected = f"an integer for {key}"
        case float():
            try:
                return float(raw)
            except ValueError:
                expected = f"a number for {key}"
        case _:
            return raw
    raise ConfigurationError(ErrorTemplate.config_malformed_override(raw, expected))


def load_validator(spec: str) -> Validator:
    """Import ``module:function`` (dotted attribute paths allowed after the colon).

    Raises:
        ValueError: If the spec has no colon
        ImportError / AttributeError: If the target does not exist
        TypeError: If the target is not callable
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Expected MODULE:FUNCTION, got {spec!r}"
        raise ValueError(msg)
    target: object = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        target = getattr(target, attr)
    if not callable(target):
        msg = f"{spec} is not callable"
        raise TypeError(msg)
    return target  # type: ignore[return-value]


def _configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.ERROR
    elif args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


def _cmd_generate(args: argparse.Namespace, config: GenerationConfig) -> int:
    generator = URIGenerator(config=config, seed=args.seed)
    print(f"[INFO] seed={generator.seed}", file=sys.stderr)
    for _, candidate in generator.samples(args.count, not args.invalid, args.production):
        print(candidate)
    return 0


def _cmd_check(args: argparse.Namespace, config: GenerationConfig) -> int:
    try:
        validators = {spec: load_validator(spec) for spec in args.validators}
        reference = load_validator(args.reference) if args.reference else None
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        print(f"[ERROR] Cannot load validator: {e}", file=sys.stderr)
        return 2

    harness = DifferentialHarness(
        validators,
        reference=reference,
        reference_name=args.reference,
        seed=args.seed,
        config=config,
        production=args.production,
    )
    print(f"[INFO] seed={harness.seed}", file=sys.stderr)
    report = harness.run_both(args.count)

    if report.mismatches:
        formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))
        print(formatter.format_all(m.to_diagnostic() for m in report.mismatches))
    status = "[OK]" if report.passed else "[FINDING]"
    print(f"{status} {report.summary()}", file=sys.stderr)
    return 0 if report.passed else 1


def _cmd_config() -> int:
    for f in fields(GenerationConfig):
        print(f"{f.name} = {f.default!r}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if args.command == "config":
        return _cmd_config()

    try:
        config = parse_overrides(args.overrides)
    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    try:
        if args.command == "generate":
            return _cmd_generate(args, config)
        return _cmd_check(args, config)
    except URIForgeError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
