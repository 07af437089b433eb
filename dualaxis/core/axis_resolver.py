"""
Axis Candidate Resolver
Kandidaten pro y-Achse: numerische Spalten minus Auswahl der anderen Achse
"""

from typing import Any, Callable, Iterable, Optional, Tuple

from ..models.selection import Y1_CONTROL, Y2_CONTROL

AXES = (Y1_CONTROL, Y2_CONTROL)


def other_axis(axis: str) -> str:
    """Gibt die jeweils andere y-Achse zurück"""
    if axis == Y1_CONTROL:
        return Y2_CONTROL
    if axis == Y2_CONTROL:
        return Y1_CONTROL
    raise ValueError(f"Unknown axis {axis!r}, expected one of {AXES}")


def candidates_for(axis: str, numeric_columns: Iterable[str],
                   other_axis_selection: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """
    Berechnet die Kandidaten einer Achse

    Args:
        axis: "y1" oder "y2"
        numeric_columns: Alle numerischen Spalten (Tabellen-Reihenfolge)
        other_axis_selection: Aktuelle Auswahl der anderen Achse

    Returns:
        numeric_columns ohne die Auswahl der anderen Achse

    Example:
        >>> candidates_for("y1", ["temp", "hum", "wind"], ["hum"])
        ('temp', 'wind')
    """
    other_axis(axis)
    if isinstance(other_axis_selection, str):
        other_axis_selection = [other_axis_selection]
    claimed = set(other_axis_selection or ())
    return tuple(column for column in numeric_columns if column not in claimed)


class AxisCandidateResolver:
    """
    Lazy Projektion der Kandidaten einer Achse

    Liest die Live-Auswahl der anderen Achse erst im Moment der Abfrage.
    Hält keine Referenz auf den Resolver der anderen Achse.
    """

    def __init__(self, axis: str, selection_reader: Callable[[str], Any]):
        """
        Args:
            axis: "y1" oder "y2"
            selection_reader: Callable, das die aktuelle Auswahl einer Achse liefert
        """
        self.axis = axis
        self.other = other_axis(axis)
        self._read_selection = selection_reader

    def candidates(self, numeric_columns: Iterable[str]) -> Tuple[str, ...]:
        return candidates_for(self.axis, numeric_columns, self._read_selection(self.other))
