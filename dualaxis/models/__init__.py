"""
Models Layer für Dual-Axis Chart
Domain Models und Dataclasses
"""

from .table import Column, ColumnKind, ColumnClassification, TableSnapshot
from .selection import (
    AxisSelection,
    ControlUpdate,
    SyncResult,
    CONTROL_NAMES,
    TIME_CONTROL,
    Y1_CONTROL,
    Y2_CONTROL,
)
from .validation import ValidationError, ValidationFailure, ValidationReason, ValidationResult
from .chart_config import AxisBinding, ChartConfig

__all__ = [
    'Column',
    'ColumnKind',
    'ColumnClassification',
    'TableSnapshot',
    'AxisSelection',
    'ControlUpdate',
    'SyncResult',
    'CONTROL_NAMES',
    'TIME_CONTROL',
    'Y1_CONTROL',
    'Y2_CONTROL',
    'ValidationError',
    'ValidationFailure',
    'ValidationReason',
    'ValidationResult',
    'AxisBinding',
    'ChartConfig',
]
