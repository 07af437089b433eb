"""
Services Layer für Dual-Axis Chart
Business Logic Layer - koordiniert Core und Models
"""

from .chart_builder import build_chart, axis_label, localize_time
from .control_synchronizer import ControlChannel, ControlSynchronizer, InMemoryControlChannel
from .dual_axis_service import DualAxisChartService, DualAxisState

__all__ = [
    'build_chart',
    'axis_label',
    'localize_time',
    'ControlChannel',
    'ControlSynchronizer',
    'InMemoryControlChannel',
    'DualAxisChartService',
    'DualAxisState',
]
