"""
Chart Builder
Baut aus validierter Auswahl eine Plotly Figure mit zwei y-Achsen
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go
import pytz
from plotly.subplots import make_subplots

from ..config.settings import CHART_CONFIG, ChartSettings
from ..models.chart_config import AxisBinding, ChartConfig
from ..models.table import TableSnapshot

logger = logging.getLogger(__name__)


def axis_label(columns: Sequence[str], separator: str = CHART_CONFIG['label_separator']) -> str:
    """
    Achsen-Label aus den gebundenen Spalten

    Example:
        >>> axis_label(["temp", "dew"])
        'temp, dew'
    """
    return separator.join(columns)


def localize_time(series: pd.Series, default_timezone: str = 'UTC') -> Tuple[pd.Series, str]:
    """
    Macht eine Zeitspalte timezone-aware

    Naive Werte werden in der Default-Zeitzone lokalisiert, damit das
    Rendering deterministisch ist. Bereits lokalisierte Werte bleiben.

    Returns:
        (lokalisierte Serie, Name der Zeitzone)
    """
    tz = getattr(series.dtype, 'tz', None)
    if tz is not None:
        return series, str(tz)

    timezone = pytz.timezone(default_timezone)
    localized = series.dt.tz_localize(timezone, ambiguous='NaT', nonexistent='shift_forward')
    return localized, timezone.zone


def build_chart(snapshot: TableSnapshot, time_column: str,
                y1: Iterable[str], y2: Iterable[str],
                settings: Optional[ChartSettings] = None) -> ChartConfig:
    """
    Erstellt die Chart-Konfiguration mit primärer und sekundärer y-Achse

    Args:
        snapshot: Validierter Tabellen-Snapshot
        time_column: Zeitspalte (x-Achse)
        y1: Spalten der primären y-Achse
        y2: Spalten der sekundären y-Achse (werden einzeln secondary_y=True zugewiesen)
        settings: Chart-Einstellungen

    Returns:
        ChartConfig mit Figure, die der Host weiter anpassen kann
    """
    settings = settings or ChartSettings()
    y1 = tuple(y1)
    y2 = tuple(y2)

    overlap = set(y1) & set(y2)
    if overlap:
        raise ValueError(f"Columns assigned to both axes: {sorted(overlap)}")

    frame = snapshot.frame
    data = pd.DataFrame({column: frame[column] for column in (time_column,) + y1 + y2})
    data[time_column], timezone = localize_time(data[time_column], settings.default_timezone)
    data = data.sort_values(time_column, kind='mergesort')

    primary = AxisBinding(label=axis_label(y1, settings.label_separator), columns=y1)
    secondary = AxisBinding(label=axis_label(y2, settings.label_separator), columns=y2)

    fig = make_subplots(specs=[[{"secondary_y": True}]])

    for column in y1:
        fig.add_trace(_series_trace(data, time_column, column), secondary_y=False)

    for column in y2:
        fig.add_trace(_series_trace(data, time_column, column), secondary_y=True)

    fig.update_layout(
        title=settings.title,
        height=settings.height,
        template=settings.template,
        hovermode=CHART_CONFIG['hovermode'],
        legend=CHART_CONFIG['legend'],
        margin=CHART_CONFIG['margin']
    )
    fig.update_xaxes(title_text=time_column)
    fig.update_yaxes(title_text=primary.label, secondary_y=False)
    fig.update_yaxes(title_text=secondary.label, secondary_y=True, showgrid=False)

    logger.debug(f"[CHART-BUILDER] Generation {snapshot.generation}: x={time_column} ({timezone}) "
                 f"y1={list(y1)} y2={list(y2)} rows={len(data)}")

    return ChartConfig(
        time_column=time_column,
        timezone=timezone,
        primary=primary,
        secondary=secondary,
        generation=snapshot.generation,
        title=settings.title,
        figure=fig
    )


def _series_trace(data: pd.DataFrame, time_column: str, column: str) -> go.Scatter:
    return go.Scatter(
        x=data[time_column],
        y=data[column],
        name=column,
        mode=CHART_CONFIG['line_mode']
    )
