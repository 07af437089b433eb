"""
Chart Config Models
Ausgabe des Chart Builders: Achsen-Bindungen plus Plotly Figure
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import plotly.graph_objects as go


@dataclass(frozen=True)
class AxisBinding:
    """
    Bindung einer y-Achse an Spalten

    Attributes:
        label: Achsen-Beschriftung (Spaltennamen verbunden)
        columns: Gebundene Spalten in Auswahl-Reihenfolge
    """
    label: str
    columns: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.columns) == 0


@dataclass(frozen=True)
class ChartConfig:
    """
    Renderbare Chart-Konfiguration mit zwei y-Achsen

    Die Figure ist nicht final gerendert: der Host kann sie
    vor der Anzeige weiter dekorieren (update_layout, add_shape, ...).

    Attributes:
        time_column: Spalte der x-Achse
        timezone: Zeitzone der x-Werte
        primary: Primäre y-Achse (y1)
        secondary: Sekundäre y-Achse (y2)
        generation: Snapshot-Generation, aus der gebaut wurde
        title: Optionaler Chart-Titel
        figure: Plotly Figure
    """
    time_column: str
    timezone: str
    primary: AxisBinding
    secondary: AxisBinding
    generation: int = 0
    title: Optional[str] = None
    figure: go.Figure = field(default=None, repr=False, compare=False)

    @property
    def series_count(self) -> int:
        return len(self.primary.columns) + len(self.secondary.columns)

    def axis_for(self, column: str) -> Optional[str]:
        """Gibt 'y1' oder 'y2' für eine gebundene Spalte zurück"""
        if column in self.primary.columns:
            return 'y1'
        if column in self.secondary.columns:
            return 'y2'
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Konvertiert die Bindungen (ohne Figure) zu Dictionary für JSON-Serialisierung"""
        return {
            'time_column': self.time_column,
            'timezone': self.timezone,
            'primary': {'label': self.primary.label, 'columns': list(self.primary.columns)},
            'secondary': {'label': self.secondary.label, 'columns': list(self.secondary.columns)},
            'generation': self.generation,
            'title': self.title,
        }
