"""
Data Normalizer
Single Source of Truth für "die aktuelle Tabelle"
Löst statische Tabellen und Live-Provider in kanonische Snapshots auf
"""

import logging
from typing import Any, Callable, Optional, Union

import pandas as pd

from ..models.table import TableSnapshot
from ..models.validation import ValidationReason, ValidationResult
from .column_classifier import describe_column

logger = logging.getLogger(__name__)

DataSource = Union[pd.DataFrame, Callable[[], Any]]


class DataNormalizer:
    """
    Erzeugt genau einen Snapshot pro externer Datenänderung

    Verantwortlichkeiten:
    - Feste Tabelle einmalig auflösen
    - Provider genau einmal pro refresh() aufrufen
    - Unveränderte Daten behalten ihre Generation
    - Nicht-tabellarische Werte als NOT_TABULAR melden (kein Crash)
    """

    def __init__(self, source: DataSource):
        """
        Initialisiert Normalizer

        Args:
            source: DataFrame oder Callable ohne Argumente, das einen DataFrame liefert
        """
        self.source = source
        self.generation: int = 0
        self._last_frame: Optional[pd.DataFrame] = None
        self._current: Optional[ValidationResult[TableSnapshot]] = None
        self._resolved_source: Any = None
        self.stats = {'refreshes': 0, 'provider_calls': 0, 'new_generations': 0}

    @property
    def is_live(self) -> bool:
        return callable(self.source) and not isinstance(self.source, pd.DataFrame)

    @property
    def current(self) -> Optional[ValidationResult[TableSnapshot]]:
        """Zuletzt erzeugtes Ergebnis (None vor dem ersten refresh)"""
        return self._current

    def refresh(self) -> ValidationResult[TableSnapshot]:
        """
        Löst die Datenquelle auf

        Returns:
            ValidationResult mit TableSnapshot oder NOT_TABULAR
        """
        self.stats['refreshes'] += 1

        if not self.is_live and self._current is not None and self._resolved_source is self.source:
            return self._current
        self._resolved_source = self.source

        try:
            value = self._resolve()
        except Exception as e:
            logger.exception(f"[NORMALIZER] Provider failed: {e}")
            self._last_frame = None
            self._current = ValidationResult.fail(
                ValidationReason.NOT_TABULAR,
                f"Data could not be loaded: {e}"
            )
            return self._current

        self._current = self._normalize(value)
        return self._current

    def _resolve(self) -> Any:
        if self.is_live:
            self.stats['provider_calls'] += 1
            return self.source()
        return self.source

    def _normalize(self, value: Any) -> ValidationResult[TableSnapshot]:
        if not isinstance(value, pd.DataFrame):
            logger.warning(f"[NORMALIZER] Not tabular: {type(value).__name__}")
            self._last_frame = None
            return ValidationResult.fail(
                ValidationReason.NOT_TABULAR,
                f"Data must be a table (pandas DataFrame), got {type(value).__name__}."
            )

        if self._is_unchanged(value) and self._current is not None and self._current.ok:
            logger.debug(f"[NORMALIZER] Data unchanged, keeping generation {self.generation}")
            return self._current

        names = [str(name) for name in value.columns]
        if len(set(names)) != len(names):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            logger.warning(f"[NORMALIZER] Duplicate column names: {duplicates}")
            self._last_frame = None
            return ValidationResult.fail(
                ValidationReason.NOT_TABULAR,
                f"Column names must be unique, found duplicates: {', '.join(duplicates)}."
            )

        frame = value.copy()
        frame.columns = names
        columns = tuple(describe_column(name, frame[name]) for name in names)

        self.generation += 1
        self.stats['new_generations'] += 1
        self._last_frame = value.copy()
        logger.info(f"[NORMALIZER] New snapshot generation {self.generation}: "
                    f"{len(frame)} rows, columns={names}")

        return ValidationResult.success(TableSnapshot(
            generation=self.generation,
            frame=frame,
            columns=columns
        ))

    def _is_unchanged(self, frame: pd.DataFrame) -> bool:
        previous = self._last_frame
        if previous is None:
            return False
        if list(frame.columns) != list(previous.columns):
            return False
        if not frame.dtypes.equals(previous.dtypes):
            return False
        return frame.equals(previous)
