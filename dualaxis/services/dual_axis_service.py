"""
Dual-Axis Chart Service
Business Logic Layer - koordiniert Normalizer, Classifier, Synchronizer, Gate und Builder
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

import plotly.graph_objects as go

from ..config.settings import ChartSettings
from ..core.column_classifier import classify, validate_classification
from ..core.data_normalizer import DataNormalizer, DataSource
from ..core.generation_cache import GenerationCache
from ..core.render_gate import render_gate
from ..models.chart_config import ChartConfig
from ..models.selection import AxisSelection, SyncResult
from ..models.table import ColumnClassification, TableSnapshot
from ..models.validation import ValidationResult
from .chart_builder import build_chart
from .control_synchronizer import ControlChannel, ControlSynchronizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DualAxisState:
    """
    Zustand nach einem Update-Durchlauf

    Attributes:
        snapshot: Ergebnis des Data Normalizers
        classification: Klassifizierung (None wenn keine Tabelle)
        columns_check: NO_TIME_COLUMNS / NO_NUMERIC_COLUMNS für die Steuerelemente
        sync: Ergebnis der Control-Synchronisation (None wenn keine Tabelle)
        chart: Chart-Konfiguration oder Validierungsfehler
    """
    snapshot: ValidationResult[TableSnapshot]
    classification: Optional[ColumnClassification]
    columns_check: Optional[ValidationResult[ColumnClassification]]
    sync: Optional[SyncResult]
    chart: ValidationResult[ChartConfig]

    @property
    def generation(self) -> Optional[int]:
        return self.snapshot.value.generation if self.snapshot.ok else None

    @property
    def selection(self) -> Optional[AxisSelection]:
        return self.sync.selection if self.sync else None


class DualAxisChartService:
    """
    Service für den kompletten Ableitungs-Durchlauf einer Generation

    Reihenfolge pro Durchlauf:
    normalize -> classify -> synchronize -> render gate -> build

    Klassifizierung und Chart sind pro Generation gecacht. Das Gate
    prüft immer die Auswahl, die der Synchronizer für dieselbe
    Generation berechnet hat.
    """

    def __init__(self, source: DataSource, channel: ControlChannel,
                 settings: Optional[ChartSettings] = None):
        """
        Initialisiert Service

        Args:
            source: DataFrame oder Provider-Callable
            channel: Update-Kanal zu den Steuerelementen
            settings: Chart-Einstellungen
        """
        self.settings = settings or ChartSettings()
        self.normalizer = DataNormalizer(source)
        self.channel = channel
        self.synchronizer = ControlSynchronizer(channel, self.settings)
        self.cache = GenerationCache()
        self._state: Optional[DualAxisState] = None

    @property
    def state(self) -> Optional[DualAxisState]:
        return self._state

    def set_source(self, source: DataSource) -> None:
        """Tauscht die Datenquelle aus (gleiche Daten behalten ihre Generation)"""
        self.normalizer.source = source

    def update(self, selection: Optional[AxisSelection] = None) -> DualAxisState:
        """
        Führt einen Durchlauf aus

        Args:
            selection: Aktuelle Auswahl; None liest sie aus dem Channel

        Returns:
            DualAxisState
        """
        if selection is None:
            selection = self.channel.read_selection()

        snapshot_result = self.normalizer.refresh()
        if not snapshot_result.ok:
            self._state = DualAxisState(
                snapshot=snapshot_result,
                classification=None,
                columns_check=None,
                sync=None,
                chart=ValidationResult(failure=snapshot_result.failure)
            )
            return self._state

        snapshot = snapshot_result.value
        classification = self.cache.get_or_compute(
            'classification', snapshot.generation, lambda: classify(snapshot)
        )

        sync = self.synchronizer.synchronize(classification, selection)
        chart = self._chart_for(snapshot, sync.selection)

        if not chart.ok:
            logger.warning(f"[SERVICE] Generation {snapshot.generation}: "
                           f"chart blocked ({chart.reason.value}): {chart.message}")

        self._state = DualAxisState(
            snapshot=snapshot_result,
            classification=classification,
            columns_check=validate_classification(classification),
            sync=sync,
            chart=chart
        )
        return self._state

    def _chart_for(self, snapshot: TableSnapshot,
                   selection: AxisSelection) -> ValidationResult[ChartConfig]:
        gate = render_gate(snapshot, selection)
        if not gate.ok:
            return ValidationResult(failure=gate.failure)

        cached = self.cache.get_or_compute(
            'chart',
            snapshot.generation,
            lambda: build_chart(snapshot, selection.time, selection.y1, selection.y2, self.settings),
            key=selection
        )
        # Jeder Aufrufer bekommt eine eigene Figure zum Dekorieren
        return ValidationResult.success(replace(cached, figure=go.Figure(cached.figure)))
