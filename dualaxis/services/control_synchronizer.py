"""
Control Synchronizer
Schiebt Sichtbarkeit, Auswahlmöglichkeiten und Auswahl an die externen Steuerelemente
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ..config.settings import ChartSettings
from ..core.axis_resolver import candidates_for
from ..core.reconciler import dropped_values, reconcile, reconcile_single
from ..models.selection import (
    AxisSelection,
    ControlUpdate,
    SyncResult,
    TIME_CONTROL,
    Y1_CONTROL,
    Y2_CONTROL,
)
from ..models.table import ColumnClassification

logger = logging.getLogger(__name__)


class ControlChannel(ABC):
    """Update-Kanal zum Host (Session), adressiert über logische Control-Namen"""

    @abstractmethod
    def push(self, updates: Sequence[ControlUpdate]) -> None:
        """Übernimmt einen Batch von Control-Updates"""

    @abstractmethod
    def read_selection(self) -> AxisSelection:
        """Liest die aktuelle Auswahl der drei Steuerelemente"""


class InMemoryControlChannel(ControlChannel):
    """
    Kanal ohne UI-Framework

    Hält den Control-Zustand im Speicher. Nützlich für andere Hosts und Tests.
    """

    def __init__(self, selection: Optional[AxisSelection] = None):
        self.selection = selection or AxisSelection()
        self.controls: Dict[str, ControlUpdate] = {}
        self.history: List[Sequence[ControlUpdate]] = []

    def push(self, updates: Sequence[ControlUpdate]) -> None:
        self.history.append(tuple(updates))
        values = self.selection.to_dict()
        for update in updates:
            self.controls[update.control] = update
            if update.control == TIME_CONTROL:
                values[TIME_CONTROL] = update.selected[0] if update.selected else None
            else:
                values[update.control] = list(update.selected)
        self.selection = AxisSelection.from_values(**values)

    def read_selection(self) -> AxisSelection:
        return self.selection

    def select(self, time=None, y1=None, y2=None) -> None:
        """Simuliert eine User-Auswahl"""
        self.selection = AxisSelection.from_values(time, y1, y2)


class ControlSynchronizer:
    """
    Reaktiver Beobachter der Klassifizierung

    Verantwortlichkeiten:
    - Sichtbarkeit der drei Steuerelemente setzen
    - Auswahlmöglichkeiten aus Klassifizierung und Kandidaten berechnen
    - Auswahl über den Reconciler neu berechnen
    - Alle Updates als ein Batch pushen (einmal pro Upstream-Änderung)
    """

    def __init__(self, channel: ControlChannel, settings: Optional[ChartSettings] = None):
        self.channel = channel
        self.settings = settings or ChartSettings()
        self._last_fingerprint = None
        self._last_result: Optional[SyncResult] = None
        self.stats = {'runs': 0, 'skipped': 0}

    @property
    def last_result(self) -> Optional[SyncResult]:
        return self._last_result

    def synchronize(self, classification: ColumnClassification,
                    current: AxisSelection) -> SyncResult:
        """
        Berechnet und pusht die Control-Updates

        y1 wird gegen die alte y2-Auswahl reconciled, y2 danach gegen die
        neue y1-Auswahl. Dadurch sind y1 und y2 danach immer disjunkt.

        Args:
            classification: Klassifizierung der aktuellen Generation
            current: Aktuelle Auswahl der Steuerelemente

        Returns:
            SyncResult mit neuer Auswahl und Updates
        """
        fingerprint = (classification, current)
        if fingerprint == self._last_fingerprint and self._last_result is not None:
            self.stats['skipped'] += 1
            return self._last_result

        self.stats['runs'] += 1
        settings = self.settings
        time_columns = classification.time_columns
        numeric = classification.numeric_columns

        time = reconcile_single(current.time, time_columns, settings.time_fallback)
        y1 = tuple(reconcile(current.y1,
                             candidates_for(Y1_CONTROL, numeric, current.y2),
                             settings.y1_fallback))
        y2 = tuple(reconcile(current.y2,
                             candidates_for(Y2_CONTROL, numeric, y1),
                             settings.y2_fallback))

        updates = (
            ControlUpdate(
                control=TIME_CONTROL,
                choices=tuple(time_columns),
                selected=(time,) if time else (),
                visible=classification.has_time_columns,
                dropped=tuple(dropped_values(current.time, (time,) if time else ()))
            ),
            ControlUpdate(
                control=Y1_CONTROL,
                choices=candidates_for(Y1_CONTROL, numeric, y2),
                selected=y1,
                visible=classification.has_numeric_columns,
                dropped=tuple(dropped_values(current.y1, y1))
            ),
            ControlUpdate(
                control=Y2_CONTROL,
                choices=candidates_for(Y2_CONTROL, numeric, y1),
                selected=y2,
                visible=classification.has_numeric_columns,
                dropped=tuple(dropped_values(current.y2, y2))
            ),
        )

        result = SyncResult(
            generation=classification.generation,
            selection=AxisSelection(time=time, y1=y1, y2=y2),
            updates=updates
        )

        if result.dropped:
            logger.info(f"[SYNC] Generation {classification.generation}: "
                        f"dropped invalid selections {result.dropped}")
        logger.debug(f"[SYNC] Generation {classification.generation}: {result.selection}")

        self.channel.push(updates)

        self._last_fingerprint = (classification, result.selection)
        self._last_result = result
        return result
