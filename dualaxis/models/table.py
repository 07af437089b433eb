"""
Table Models
Tabellen-Snapshot und explizite Spalten-Klassifizierung
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import pandas as pd


class ColumnKind(Enum):
    """Deklarierte Wert-Art einer Spalte (einmal pro Snapshot aufgelöst)"""

    TIME = "time"
    NUMERIC = "numeric"
    OTHER = "other"


@dataclass(frozen=True)
class Column:
    """
    Eine benannte Spalte mit ihrer Wert-Art

    Attributes:
        name: Spaltenname (eindeutig im Snapshot)
        kind: TIME, NUMERIC oder OTHER
        dtype: pandas dtype als String (z.B. "datetime64[ns]")
        timezone: Zeitzone bei TIME-Spalten, None wenn naiv
    """
    name: str
    kind: ColumnKind
    dtype: str
    timezone: Optional[str] = None

    @property
    def is_time(self) -> bool:
        return self.kind is ColumnKind.TIME

    @property
    def is_numeric(self) -> bool:
        return self.kind is ColumnKind.NUMERIC


@dataclass(frozen=True)
class TableSnapshot:
    """
    Unveränderlicher Tabellen-Stand zu einem Zeitpunkt

    Attributes:
        generation: Fortlaufende Nummer, steigt bei jeder Datenänderung
        frame: Private Kopie des DataFrames (wird nie verändert)
        columns: Spalten in Tabellen-Reihenfolge
    """
    generation: int
    frame: pd.DataFrame = field(repr=False, compare=False)
    columns: Tuple[Column, ...]

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def row_count(self) -> int:
        return len(self.frame)

    def has_column(self, name: Optional[str]) -> bool:
        return name is not None and any(column.name == name for column in self.columns)

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass(frozen=True)
class ColumnClassification:
    """
    Abgeleitete Spalten-Mengen eines Snapshots

    Leere Mengen sind gültige Zustände, keine Fehler.
    """
    generation: int
    time_columns: Tuple[str, ...] = ()
    numeric_columns: Tuple[str, ...] = ()

    @property
    def has_time_columns(self) -> bool:
        return len(self.time_columns) > 0

    @property
    def has_numeric_columns(self) -> bool:
        return len(self.numeric_columns) > 0
