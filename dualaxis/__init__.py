"""
Dual-Axis Time-Series Chart
Wiederverwendbare Komponente für Tabellen mit erst zur Laufzeit bekannter Struktur
"""

from .config.settings import ChartSettings, load_settings
from .core import DataNormalizer, classify, candidates_for, reconcile, reconcile_single, render_gate
from .models import (
    AxisSelection,
    ChartConfig,
    ValidationReason,
    ValidationResult,
)
from .services import (
    DualAxisChartService,
    DualAxisState,
    InMemoryControlChannel,
    build_chart,
)

__version__ = "0.1.0"

__all__ = [
    'ChartSettings',
    'load_settings',
    'DataNormalizer',
    'classify',
    'candidates_for',
    'reconcile',
    'reconcile_single',
    'render_gate',
    'AxisSelection',
    'ChartConfig',
    'ValidationReason',
    'ValidationResult',
    'DualAxisChartService',
    'DualAxisState',
    'InMemoryControlChannel',
    'build_chart',
]
