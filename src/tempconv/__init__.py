"""Convert temperatures between Celsius, Fahrenheit and Kelvin."""

from tempconv.errors import (
    EmptyTemperatureError,
    ErrorKind,
    InvalidUnitError,
    TempconvError,
    TemperatureParseError,
)
from tempconv.temperature import Temperature
from tempconv.units import CELSIUS, FAHRENHEIT, KELVIN, Scale, TemperatureUnit

__all__ = [
    "CELSIUS",
    "FAHRENHEIT",
    "KELVIN",
    "EmptyTemperatureError",
    "ErrorKind",
    "InvalidUnitError",
    "Scale",
    "TempconvError",
    "Temperature",
    "TemperatureParseError",
    "TemperatureUnit",
]
