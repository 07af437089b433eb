"""
Config Layer für Dual-Axis Chart
"""

from .settings import (
    CHART_CONFIG,
    CONTROL_HELP,
    CONTROL_LABELS,
    DEFAULT_SESSION_STATE,
    PAGE_CONFIG,
    ChartSettings,
    configure_logging,
    init_session_state,
    load_settings,
)

__all__ = [
    'CHART_CONFIG',
    'CONTROL_HELP',
    'CONTROL_LABELS',
    'DEFAULT_SESSION_STATE',
    'PAGE_CONFIG',
    'ChartSettings',
    'configure_logging',
    'init_session_state',
    'load_settings',
]
