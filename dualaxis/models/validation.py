"""
Validation Models
Validierungs-Ergebnisse als Werte statt Exceptions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class ValidationReason(Enum):
    """Gründe, warum ein abgeleiteter Wert (noch) nicht verfügbar ist"""

    NOT_TABULAR = "not_tabular"
    NO_TIME_COLUMNS = "no_time_columns"
    NO_NUMERIC_COLUMNS = "no_numeric_columns"
    TIME_MISSING = "time_missing"
    NO_Y_SERIES = "no_y_series"


DEFAULT_MESSAGES = {
    ValidationReason.NOT_TABULAR: "Data must be a table (pandas DataFrame).",
    ValidationReason.NO_TIME_COLUMNS: "The table has no date-time columns.",
    ValidationReason.NO_NUMERIC_COLUMNS: "The table has no numeric columns.",
    ValidationReason.TIME_MISSING: "Select a time column.",
    ValidationReason.NO_Y_SERIES: "Select at least one series for the y-axes.",
}


class ValidationError(Exception):
    """Raised by ValidationResult.unwrap() on a failed result"""

    def __init__(self, failure: 'ValidationFailure'):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def reason(self) -> ValidationReason:
        return self.failure.reason


@dataclass(frozen=True)
class ValidationFailure:
    """
    Typisierter Fehlergrund mit User-Meldung

    Attributes:
        reason: Fehlerkategorie
        message: Kurze, für den User bestimmte Meldung
    """
    reason: ValidationReason
    message: str

    @classmethod
    def of(cls, reason: ValidationReason, message: Optional[str] = None) -> 'ValidationFailure':
        return cls(reason=reason, message=message or DEFAULT_MESSAGES[reason])


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Ergebnis einer Ableitung: entweder ein Wert oder ein Fehlergrund

    Ein fehlgeschlagenes Ergebnis blockiert nur den betroffenen Wert.
    Sobald sich die Ursache (Tabelle, Auswahl) ändert, wird neu berechnet.
    """
    value: Optional[T] = None
    failure: Optional[ValidationFailure] = None

    @classmethod
    def success(cls, value: T) -> 'ValidationResult[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, reason: ValidationReason, message: Optional[str] = None) -> 'ValidationResult[Any]':
        return cls(failure=ValidationFailure.of(reason, message))

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> Optional[ValidationReason]:
        return self.failure.reason if self.failure else None

    @property
    def message(self) -> Optional[str]:
        return self.failure.message if self.failure else None

    def unwrap(self) -> T:
        """
        Gibt den Wert zurück

        Raises:
            ValidationError: wenn das Ergebnis ein Fehler ist
        """
        if self.failure is not None:
            raise ValidationError(self.failure)
        return self.value
