"""
Components Layer für Dual-Axis Chart
Streamlit Host-Adapter
"""

from .dual_axis_chart import SessionStateChannel, get_dual_axis_service, render_dual_axis_chart

__all__ = [
    'SessionStateChannel',
    'get_dual_axis_service',
    'render_dual_axis_chart',
]
