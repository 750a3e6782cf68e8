"""Command-line interface."""

from __future__ import annotations

import argparse
import sys
from decimal import localcontext
from typing import Any, Sequence

from pydantic import ValidationError

from tempconv.config import LOG_LEVELS, Settings
from tempconv.errors import TempconvError
from tempconv.temperature import Temperature
from tempconv.units import TemperatureUnit
from tempconv.util.logging import get_logger

EXIT_OK = 0
EXIT_USER_ERROR = 1


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tempconv",
        description="A script to convert between Celsius, Fahrenheit, and Kelvin.",
        epilog="Negative values must follow '--', e.g. tempconv -- -18C F",
    )
    parser.add_argument(
        "original",
        type=str,
        help="The original value, provided as a number-letter combo (ex. 32F, 0C, 273K)",
    )
    parser.add_argument("unit", type=_single_char, help="The unit to convert into")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, dest="log_level")
    parser.add_argument("--precision", type=int, dest="precision")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    data: dict[str, Any] = settings.model_dump()
    if args.log_level is not None:
        data["log_level"] = args.log_level
    if args.precision is not None:
        data["decimal_precision"] = args.precision
    return Settings(**data)


def _describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_overrides(Settings(), args)
    except ValidationError as exc:
        parser.error(f"invalid configuration: {_describe_validation_error(exc)}")
    logger = get_logger("tempconv", settings.log_level)
    logger.debug("Converting %r to %r (precision=%d).", args.original, args.unit, settings.decimal_precision)

    errors: list[TempconvError] = []
    original: Temperature | None = None
    target: TemperatureUnit | None = None
    try:
        original = Temperature.parse(args.original)
    except TempconvError as exc:
        errors.append(exc)
    try:
        target = TemperatureUnit.from_char(args.unit)
    except TempconvError as exc:
        errors.append(exc)

    if original is None or target is None:
        for error in errors:
            logger.info("Rejected input (kind=%s).", error.kind.value)
            print(f"Failed: {error}", file=sys.stderr)
        return EXIT_USER_ERROR

    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        try:
            converted = original.convert_to(target)
            line = f"{original} is equal to {converted}"
        except ArithmeticError as exc:
            logger.info("Conversion out of range (%s).", type(exc).__name__)
            print(f"Failed: converting {args.original} to {target} is out of range", file=sys.stderr)
            return EXIT_USER_ERROR
        logger.debug("Converted %r to %r.", original, converted)
    print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
