"""
Dual-Axis Time Series - Streamlit Demo
Zeigt die Komponente mit statischer Tabelle oder Live-Provider
Run with: streamlit run streamlit_app.py
"""

import time

import streamlit as st

from dualaxis.components import render_dual_axis_chart
from dualaxis.config import PAGE_CONFIG, configure_logging, init_session_state, load_settings
from dualaxis.data import SensorFeed, create_sample_data

# Streamlit Konfiguration
st.set_page_config(**PAGE_CONFIG)
configure_logging()


def main() -> None:
    """Hauptfunktion der Demo App"""
    init_session_state()

    st.title("📈 Dual-Axis Time Series")
    st.caption("Pick a time column and assign numeric series to the left or right y-axis.")

    data = _render_sidebar()
    settings = load_settings().with_overrides(notify_dropped=st.session_state.notify_dropped)

    controls, chart_area = st.columns([1, 3])
    chart = render_dual_axis_chart(data, key="demo_chart", settings=settings, container=controls)

    with chart_area:
        if chart is not None:
            figure = chart.figure
            figure.update_layout(title=f"{chart.primary.label or '-'} vs {chart.secondary.label or '-'}")
            st.plotly_chart(figure)
            with st.expander("Chart config"):
                st.json(chart.to_dict())

    _handle_auto_refresh()


def _render_sidebar():
    """
    Rendert die Sidebar mit der Datenquellen-Auswahl

    Returns:
        DataFrame oder Live-Provider
    """
    st.sidebar.title("⚙️ Data source")

    st.session_state.live_mode = st.sidebar.checkbox("Live provider", value=st.session_state.live_mode)
    st.session_state.drop_humidity = st.sidebar.checkbox(
        "Drop 'hum' column", value=st.session_state.drop_humidity,
        help="Simulates a table whose shape changes at runtime"
    )
    st.session_state.notify_dropped = st.sidebar.checkbox(
        "Notify removed selections", value=st.session_state.notify_dropped
    )

    if not st.session_state.live_mode:
        if 'static_frame' not in st.session_state:
            st.session_state.static_frame = create_sample_data()
        frame = st.session_state.static_frame
        if st.session_state.drop_humidity:
            return frame.drop(columns=['hum'])
        return frame

    if 'sensor_feed' not in st.session_state:
        st.session_state.sensor_feed = SensorFeed()
    feed = st.session_state.sensor_feed
    feed.drop_columns(['hum'] if st.session_state.drop_humidity else [])

    st.session_state.auto_refresh = st.sidebar.checkbox("Auto-Refresh", value=st.session_state.auto_refresh)
    if st.sidebar.button("🔄 New measurement"):
        feed.advance()
    return feed


def _handle_auto_refresh() -> None:
    if st.session_state.live_mode and st.session_state.auto_refresh:
        time.sleep(st.session_state.refresh_interval)
        st.session_state.sensor_feed.advance()
        st.rerun()


if __name__ == "__main__":
    main()
