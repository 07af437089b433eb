"""
Dual-Axis Chart Komponente für Streamlit
Rendert die drei Steuerelemente und liefert die Chart-Konfiguration an den Host
"""

import logging
from typing import Any, Optional, Sequence

import streamlit as st

from ..config.settings import CONTROL_HELP, CONTROL_LABELS, ChartSettings
from ..core.data_normalizer import DataSource
from ..models.chart_config import ChartConfig
from ..models.selection import AxisSelection, ControlUpdate, TIME_CONTROL, Y1_CONTROL, Y2_CONTROL
from ..models.validation import ValidationReason
from ..services.control_synchronizer import ControlChannel
from ..services.dual_axis_service import DualAxisChartService, DualAxisState

logger = logging.getLogger(__name__)


class SessionStateChannel(ControlChannel):
    """
    Update-Kanal über st.session_state

    Keys pro Control (prefix "chart", control "y1"):
    - chart_y1          Widget-Wert
    - chart_y1_choices  Angebotene Auswahlmöglichkeiten
    - chart_y1_visible  Sichtbarkeit
    """

    def __init__(self, prefix: str):
        self.prefix = prefix

    def widget_key(self, control: str) -> str:
        return f"{self.prefix}_{control}"

    def choices_key(self, control: str) -> str:
        return f"{self.prefix}_{control}_choices"

    def visible_key(self, control: str) -> str:
        return f"{self.prefix}_{control}_visible"

    def push(self, updates: Sequence[ControlUpdate]) -> None:
        for update in updates:
            st.session_state[self.choices_key(update.control)] = list(update.choices)
            st.session_state[self.visible_key(update.control)] = update.visible
            if update.control == TIME_CONTROL:
                st.session_state[self.widget_key(update.control)] = (
                    update.selected[0] if update.selected else None
                )
            else:
                st.session_state[self.widget_key(update.control)] = list(update.selected)

    def read_selection(self) -> AxisSelection:
        return AxisSelection.from_values(
            time=st.session_state.get(self.widget_key(TIME_CONTROL)),
            y1=st.session_state.get(self.widget_key(Y1_CONTROL)),
            y2=st.session_state.get(self.widget_key(Y2_CONTROL))
        )

    def choices(self, control: str) -> list:
        return list(st.session_state.get(self.choices_key(control), []))

    def is_visible(self, control: str) -> bool:
        return bool(st.session_state.get(self.visible_key(control), False))


def get_dual_axis_service(data: DataSource, key: str = "dual_axis",
                          settings: Optional[ChartSettings] = None) -> DualAxisChartService:
    """
    Holt den Service aus dem Session State oder legt ihn an

    Args:
        data: DataFrame oder Provider-Callable
        key: Eindeutiger Prefix der Komponente
        settings: Chart-Einstellungen

    Returns:
        DualAxisChartService der aktuellen Session
    """
    service_key = f"{key}_service"
    service = st.session_state.get(service_key)
    if service is None:
        service = DualAxisChartService(data, SessionStateChannel(key), settings)
        st.session_state[service_key] = service
        logger.debug(f"[COMPONENT] Service '{key}' created")
    else:
        if service.normalizer.source is not data:
            service.set_source(data)
        if settings is not None and settings != service.settings:
            service = DualAxisChartService(data, SessionStateChannel(key), settings)
            st.session_state[service_key] = service
    return service


def render_dual_axis_chart(data: DataSource, key: str = "dual_axis",
                           settings: Optional[ChartSettings] = None,
                           container: Any = None) -> Optional[ChartConfig]:
    """
    Rendert die Steuerelemente und berechnet die Chart-Konfiguration

    Muss vor anderen Widgets mit denselben Keys aufgerufen werden, da die
    Synchronisation den Session State setzt, bevor die Widgets gezeichnet werden.

    Args:
        data: DataFrame oder Provider-Callable
        key: Eindeutiger Prefix der Komponente
        settings: Chart-Einstellungen
        container: Streamlit Container für die Steuerelemente (Standard: st)

    Returns:
        ChartConfig zum Anzeigen mit st.plotly_chart, oder None
    """
    container = container or st
    service = get_dual_axis_service(data, key, settings)
    channel = service.channel

    state = service.update(channel.read_selection())

    _render_messages(container, state)
    _notify_dropped(key, state, service.settings)
    _render_controls(container, channel)

    return state.chart.value if state.chart.ok else None


def _render_messages(container: Any, state: DualAxisState) -> None:
    if not state.snapshot.ok:
        container.error(state.snapshot.message)
        return

    if state.columns_check is not None and not state.columns_check.ok:
        container.warning(state.columns_check.message)
        return

    if not state.chart.ok and state.chart.reason in (ValidationReason.TIME_MISSING,
                                                     ValidationReason.NO_Y_SERIES):
        container.info(state.chart.message)


def _notify_dropped(key: str, state: DualAxisState, settings: ChartSettings) -> None:
    if not settings.notify_dropped or state.sync is None or not state.sync.dropped:
        return

    notified_key = f"{key}_notified"
    marker = (state.sync.generation, tuple(sorted(
        (control, tuple(values)) for control, values in state.sync.dropped.items()
    )))
    if st.session_state.get(notified_key) == marker:
        return
    st.session_state[notified_key] = marker

    for control, values in state.sync.dropped.items():
        st.toast(f"{CONTROL_LABELS[control]}: removed {', '.join(values)} (no longer available)")


def _render_controls(container: Any, channel: SessionStateChannel) -> None:
    if channel.is_visible(TIME_CONTROL):
        container.selectbox(
            CONTROL_LABELS[TIME_CONTROL],
            options=channel.choices(TIME_CONTROL),
            index=None,
            key=channel.widget_key(TIME_CONTROL),
            help=CONTROL_HELP[TIME_CONTROL]
        )

    for control in (Y1_CONTROL, Y2_CONTROL):
        if channel.is_visible(control):
            container.multiselect(
                CONTROL_LABELS[control],
                options=channel.choices(control),
                key=channel.widget_key(control),
                help=CONTROL_HELP[control]
            )
