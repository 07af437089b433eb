"""
Komponenten-weite Konfigurationsdatei
Zentrale Stelle für alle Einstellungen des Dual-Axis Charts
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

import streamlit as st
from dotenv import load_dotenv

# Page Configuration (Demo App)
PAGE_CONFIG = {
    "page_title": "Dual-Axis Time Series",
    "page_icon": "📈",
    "layout": "wide",
    "initial_sidebar_state": "expanded"
}

# Chart Configuration
CHART_CONFIG = {
    'height': 480,
    'template': 'plotly_white',
    'label_separator': ', ',
    'default_timezone': 'UTC',
    'hovermode': 'x unified',
    'line_mode': 'lines',
    'legend': {
        'orientation': 'h',
        'yanchor': 'bottom',
        'y': 1.02,
        'xanchor': 'left',
        'x': 0
    },
    'margin': {'l': 40, 'r': 40, 't': 60, 'b': 40}
}

# Labels der drei Steuerelemente
CONTROL_LABELS = {
    'time': "Time column",
    'y1': "Primary y-axis",
    'y2': "Secondary y-axis",
}

CONTROL_HELP = {
    'time': "Column used for the x-axis",
    'y1': "Series plotted against the left y-axis",
    'y2': "Series plotted against the right y-axis",
}

# Fallback-Positionen (1-basiert) wenn keine vorherige Auswahl gültig bleibt
FALLBACK_POSITIONS = {
    'time': 1,
    'y1': 1,
    'y2': None,
}

# Default Values für Session State (Demo App)
DEFAULT_SESSION_STATE = {
    'live_mode': False,
    'auto_refresh': False,
    'refresh_interval': 2,
    'drop_humidity': False,
    'notify_dropped': True,
}

ENV_PREFIX = "DUALAXIS_"


@dataclass(frozen=True)
class ChartSettings:
    """
    Einstellungen für Synchronisation und Chart-Aufbau

    Attributes:
        label_separator: Trenner für Achsen-Labels mit mehreren Spalten
        time_fallback: Fallback-Position der Zeitspalte (1-basiert, None = keine)
        y1_fallback: Fallback-Position der primären Achse
        y2_fallback: Fallback-Position der sekundären Achse
        default_timezone: Zeitzone für naive Zeitspalten
        height: Chart-Höhe in Pixeln
        template: Plotly Template
        title: Optionaler Chart-Titel
        notify_dropped: Verworfene Auswahl als Hinweis anzeigen
    """
    label_separator: str = CHART_CONFIG['label_separator']
    time_fallback: Optional[int] = FALLBACK_POSITIONS['time']
    y1_fallback: Optional[int] = FALLBACK_POSITIONS['y1']
    y2_fallback: Optional[int] = FALLBACK_POSITIONS['y2']
    default_timezone: str = CHART_CONFIG['default_timezone']
    height: int = CHART_CONFIG['height']
    template: str = CHART_CONFIG['template']
    title: Optional[str] = None
    notify_dropped: bool = False

    def __post_init__(self):
        for name in ('time_fallback', 'y1_fallback', 'y2_fallback'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, int):
                raise ValueError(f"{name} must be an int or None, got {value!r}")
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")

    def with_overrides(self, **overrides) -> 'ChartSettings':
        return replace(self, **overrides)


def load_settings(env_file: Optional[str] = None) -> ChartSettings:
    """
    Lädt Einstellungen mit Overrides aus Umgebungsvariablen (.env wird unterstützt)

    Args:
        env_file: Optionaler Pfad zu einer .env Datei

    Returns:
        ChartSettings
    """
    load_dotenv(env_file)

    overrides = {}
    separator = os.getenv(f"{ENV_PREFIX}LABEL_SEPARATOR")
    if separator is not None:
        overrides['label_separator'] = separator
    timezone = os.getenv(f"{ENV_PREFIX}DEFAULT_TIMEZONE")
    if timezone:
        overrides['default_timezone'] = timezone
    template = os.getenv(f"{ENV_PREFIX}TEMPLATE")
    if template:
        overrides['template'] = template
    height = os.getenv(f"{ENV_PREFIX}HEIGHT")
    if height:
        overrides['height'] = int(height)
    for control in ('time', 'y1', 'y2'):
        raw = os.getenv(f"{ENV_PREFIX}{control.upper()}_FALLBACK")
        if raw is not None:
            overrides[f'{control}_fallback'] = _parse_position(raw)
    notify = os.getenv(f"{ENV_PREFIX}NOTIFY_DROPPED")
    if notify is not None:
        overrides['notify_dropped'] = notify.strip().lower() in ('1', 'true', 'yes', 'on')

    return ChartSettings(**overrides)


def configure_logging(level: Optional[str] = None) -> None:
    """Setup logging (Level aus DUALAXIS_LOG_LEVEL, Standard INFO)"""
    level_name = (level or os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def init_session_state():
    """Initialisiert den Session State mit Standard-Werten"""
    for key, value in DEFAULT_SESSION_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _parse_position(raw: str) -> Optional[int]:
    raw = raw.strip().lower()
    if raw in ('', 'none', 'null'):
        return None
    return int(raw)
