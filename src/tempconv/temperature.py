"""Temperature value type: parsing, exact conversion and display."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, getcontext
from typing import Callable

from tempconv.errors import EmptyTemperatureError, InvalidUnitError, TemperatureParseError
from tempconv.units import Scale, TemperatureUnit

_ABSOLUTE_ZERO_C = Decimal("273.15")
_ABSOLUTE_ZERO_F = Decimal("459.67")
_FREEZING_F = Decimal("32")
_FACTOR = Decimal("1.8")

# Multiply before dividing by 9 so that F -> C undoes C -> F exactly.
_FORMULAS: dict[tuple[Scale, Scale], Callable[[Decimal], Decimal]] = {
    (Scale.FAHRENHEIT, Scale.CELSIUS): lambda s: (s - _FREEZING_F) * 5 / 9,
    (Scale.KELVIN, Scale.CELSIUS): lambda s: s - _ABSOLUTE_ZERO_C,
    (Scale.CELSIUS, Scale.FAHRENHEIT): lambda s: s * _FACTOR + _FREEZING_F,
    (Scale.KELVIN, Scale.FAHRENHEIT): lambda s: s * _FACTOR - _ABSOLUTE_ZERO_F,
    (Scale.CELSIUS, Scale.KELVIN): lambda s: s + _ABSOLUTE_ZERO_C,
    (Scale.FAHRENHEIT, Scale.KELVIN): lambda s: (s + _ABSOLUTE_ZERO_F) * 5 / 9,
}


@dataclass(frozen=True)
class Temperature:
    """A decimal scalar expressed in Celsius, Fahrenheit or Kelvin."""

    scalar: Decimal
    unit: TemperatureUnit

    def __post_init__(self) -> None:
        if not isinstance(self.scalar, Decimal):
            raise TypeError(f"scalar must be a Decimal, got {type(self.scalar).__name__}")
        if not isinstance(self.unit, TemperatureUnit):
            raise TypeError(f"unit must be a TemperatureUnit, got {type(self.unit).__name__}")

    @classmethod
    def parse(cls, text: str) -> Temperature:
        """Parse tokens such as ``32F``, ``0c`` or ``273.15K``.

        Both halves of the token are always checked so that a token with a
        bad number and a bad unit reports both problems.
        """
        if not text:
            raise EmptyTemperatureError()
        scalar_text, unit_text = text[:-1].strip(), text[-1]

        scalar: Decimal | None = None
        scalar_error: str | None = None
        try:
            scalar = _parse_scalar(scalar_text)
        except ValueError as exc:
            scalar_error = str(exc)

        unit: TemperatureUnit | None = None
        unit_error: InvalidUnitError | None = None
        try:
            unit = TemperatureUnit.from_char(unit_text)
        except InvalidUnitError as exc:
            unit_error = exc

        if scalar is None or unit is None:
            raise TemperatureParseError(text, scalar_error=scalar_error, unit_error=unit_error)
        return cls(scalar, unit)

    def convert_to(self, target: Scale | TemperatureUnit) -> Temperature:
        if isinstance(target, TemperatureUnit):
            target = target.scale
        source = self.unit.scale
        if source is target:
            return self
        formula = _FORMULAS[(source, target)]
        return Temperature(formula(self.scalar), TemperatureUnit.from_scale(target))

    def to_celsius(self) -> Temperature:
        return self.convert_to(Scale.CELSIUS)

    def to_fahrenheit(self) -> Temperature:
        return self.convert_to(Scale.FAHRENHEIT)

    def to_kelvin(self) -> Temperature:
        return self.convert_to(Scale.KELVIN)

    def display(self) -> str:
        return f"{format_scalar(self.scalar)} {self.unit}"

    def __str__(self) -> str:
        return self.display()


def format_scalar(value: Decimal) -> str:
    """Render a decimal without trailing zeros or exponent notation."""
    if value.is_zero():
        return "0"
    # Strip zeros from the digit tuple; normalize() would round to the context.
    sign, digits, exponent = value.as_tuple()
    digits = list(digits)
    while exponent < 0 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return format(Decimal((sign, tuple(digits), exponent)), "f")


def _parse_scalar(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"{text!r} is not a valid decimal number") from exc
    if not value.is_finite():
        raise ValueError(f"{text!r} is not a finite number")
    context = getcontext()
    if not value.is_zero() and not context.Emin <= value.adjusted() <= context.Emax:
        raise ValueError(f"{text!r} is out of the supported range")
    return value
