"""Error taxonomy for temperature parsing and unit validation."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of user-facing conversion failures."""

    INVALID_UNIT = "INVALID_UNIT"
    PARSE_FAILURE = "PARSE_FAILURE"
    EMPTY = "EMPTY"


class TempconvError(ValueError):
    """Base class for errors caused by user input."""

    kind: ErrorKind = ErrorKind.PARSE_FAILURE


class InvalidUnitError(TempconvError):
    """Raised when a unit character is not one of C, F or K."""

    kind = ErrorKind.INVALID_UNIT

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"{unit} is not a valid temperature unit")


class TemperatureParseError(TempconvError):
    """Raised when a token cannot be read as ``<number><unit>``."""

    kind = ErrorKind.PARSE_FAILURE

    def __init__(
        self,
        text: str,
        scalar_error: str | None = None,
        unit_error: InvalidUnitError | None = None,
    ) -> None:
        self.text = text
        self.scalar_error = scalar_error
        self.unit_error = unit_error
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Unable to convert {self.text} into temperature:"]
        if self.scalar_error:
            lines.append(self.scalar_error)
        if self.unit_error is not None:
            lines.append(str(self.unit_error))
        return "\n".join(lines)


class EmptyTemperatureError(TemperatureParseError):
    """Raised when the token has no characters at all."""

    kind = ErrorKind.EMPTY

    def __init__(self) -> None:
        super().__init__("")

    def _build_message(self) -> str:
        return "Invalid temperature value: empty input"
