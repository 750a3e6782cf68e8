"""Temperature scales and the validated unit tag."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tempconv.errors import InvalidUnitError


class Scale(str, Enum):
    """Supported temperature scales, valued by their display letter."""

    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"


@dataclass(frozen=True, eq=False)
class TemperatureUnit:
    """A single-character unit tag.

    The character keeps the case it was typed in, so ``32f`` echoes back as
    ``32 f``, but two units compare equal whenever they name the same scale.
    Instances can only be built from a valid letter, which is why
    :attr:`scale` never fails.
    """

    symbol: str

    def __post_init__(self) -> None:
        if len(self.symbol) != 1 or self.symbol.upper() not in _SCALES:
            raise InvalidUnitError(self.symbol)

    @classmethod
    def from_char(cls, char: str) -> TemperatureUnit:
        return cls(char)

    @classmethod
    def from_scale(cls, scale: Scale) -> TemperatureUnit:
        return cls(scale.value)

    @property
    def scale(self) -> Scale:
        return _SCALES[self.symbol.upper()]

    def to_char(self) -> str:
        return self.symbol

    def display(self) -> str:
        return self.symbol

    def __str__(self) -> str:
        return self.symbol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemperatureUnit):
            return NotImplemented
        return self.scale is other.scale

    def __hash__(self) -> int:
        return hash(self.scale)


_SCALES = {scale.value: scale for scale in Scale}

CELSIUS = TemperatureUnit.from_scale(Scale.CELSIUS)
FAHRENHEIT = TemperatureUnit.from_scale(Scale.FAHRENHEIT)
KELVIN = TemperatureUnit.from_scale(Scale.KELVIN)
