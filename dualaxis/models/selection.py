"""
Selection Models
Achsen-Auswahl und Control-Updates für die externen Steuerelemente
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

TIME_CONTROL = "time"
Y1_CONTROL = "y1"
Y2_CONTROL = "y2"

CONTROL_NAMES = (TIME_CONTROL, Y1_CONTROL, Y2_CONTROL)


@dataclass(frozen=True)
class AxisSelection:
    """
    Aktuelle Auswahl der drei Steuerelemente

    Attributes:
        time: Zeitspalte (höchstens eine)
        y1: Spalten der primären y-Achse
        y2: Spalten der sekundären y-Achse
    """
    time: Optional[str] = None
    y1: Tuple[str, ...] = ()
    y2: Tuple[str, ...] = ()

    @classmethod
    def from_values(cls, time: Any = None, y1: Any = None, y2: Any = None) -> 'AxisSelection':
        """
        Erstellt Auswahl aus rohen Widget-Werten (None, String oder Liste)

        Example:
            >>> AxisSelection.from_values("date", ["temp"], "hum")
            AxisSelection(time='date', y1=('temp',), y2=('hum',))
        """
        if isinstance(time, (list, tuple)):
            time = time[0] if time else None
        return cls(time=time or None, y1=_as_tuple(y1), y2=_as_tuple(y2))

    @property
    def y_columns(self) -> Tuple[str, ...]:
        return self.y1 + self.y2

    @property
    def has_y_series(self) -> bool:
        return bool(self.y1) or bool(self.y2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            TIME_CONTROL: self.time,
            Y1_CONTROL: list(self.y1),
            Y2_CONTROL: list(self.y2),
        }


@dataclass(frozen=True)
class ControlUpdate:
    """
    Update für ein einzelnes Steuerelement

    Attributes:
        control: Logischer Name ("time", "y1", "y2")
        choices: Angebotene Auswahlmöglichkeiten
        selected: Neue Auswahl (Teilmenge von choices)
        visible: Ob das Steuerelement angezeigt wird
        dropped: Vorher gewählte Werte, die nicht mehr gültig sind
    """
    control: str
    choices: Tuple[str, ...]
    selected: Tuple[str, ...]
    visible: bool = True
    dropped: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'control': self.control,
            'choices': list(self.choices),
            'selected': list(self.selected),
            'visible': self.visible,
            'dropped': list(self.dropped),
        }


@dataclass(frozen=True)
class SyncResult:
    """Ergebnis eines Synchronisations-Durchlaufs für eine Generation"""

    generation: int
    selection: AxisSelection
    updates: Tuple[ControlUpdate, ...] = field(default_factory=tuple)

    def update_for(self, control: str) -> Optional[ControlUpdate]:
        for update in self.updates:
            if update.control == control:
                return update
        return None

    @property
    def dropped(self) -> Dict[str, List[str]]:
        return {u.control: list(u.dropped) for u in self.updates if u.dropped}


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(value)
