"""
Unit Tests für Render Gate
"""

import pandas as pd

from dualaxis.core.render_gate import render_gate
from dualaxis.models.selection import AxisSelection
from dualaxis.models.validation import ValidationReason


class TestRenderGate:
    """Tests für render_gate()"""

    def test_valid_selection(self, weather_snapshot):
        """Test: Gültige Auswahl wird unverändert durchgereicht"""
        selection = AxisSelection(time='date', y1=('temp',), y2=('hum',))
        result = render_gate(weather_snapshot, selection)

        assert result.ok
        assert result.value == selection

    def test_only_secondary_axis(self, weather_snapshot):
        """Test: Eine y-Achse reicht"""
        result = render_gate(weather_snapshot, AxisSelection(time='date', y2=('hum',)))
        assert result.ok

    def test_time_missing(self, weather_snapshot):
        """Test: Keine Zeitspalte gewählt -> TIME_MISSING"""
        result = render_gate(weather_snapshot, AxisSelection(y1=('temp',)))
        assert result.reason is ValidationReason.TIME_MISSING

    def test_time_column_not_in_table(self, weather_snapshot):
        """Test: Gewählte Zeitspalte fehlt in der Tabelle -> TIME_MISSING"""
        result = render_gate(weather_snapshot, AxisSelection(time='timestamp', y1=('temp',)))
        assert result.reason is ValidationReason.TIME_MISSING

    def test_time_column_not_time_typed(self, weather_snapshot):
        """Test: Gewählte Zeitspalte ist keine Zeitspalte -> TIME_MISSING"""
        result = render_gate(weather_snapshot, AxisSelection(time='temp', y1=('hum',)))
        assert result.reason is ValidationReason.TIME_MISSING

    def test_table_without_time_columns(self, make_snapshot):
        """Test: Ohne Zeitspalten blockiert das Gate mit TIME_MISSING"""
        snapshot = make_snapshot(pd.DataFrame({'temp': [1.0, 2.0]}))
        result = render_gate(snapshot, AxisSelection(time=None, y1=('temp',)))
        assert result.reason is ValidationReason.TIME_MISSING

    def test_no_y_series(self, weather_snapshot):
        """Test: Keine y-Spalte gewählt -> NO_Y_SERIES"""
        result = render_gate(weather_snapshot, AxisSelection(time='date'))
        assert result.reason is ValidationReason.NO_Y_SERIES

    def test_stale_selection_after_table_change(self, make_snapshot, weather_frame):
        """Test: Tabelle geändert, Controls noch nicht nachgezogen"""
        snapshot = make_snapshot(weather_frame.drop(columns=['hum']))
        result = render_gate(snapshot, AxisSelection(time='date', y1=('temp',), y2=('hum',)))

        assert result.reason is ValidationReason.NO_Y_SERIES
        assert 'hum' in result.message

    def test_does_not_modify_selection(self, weather_snapshot):
        """Test: Gate verändert die Auswahl nicht"""
        selection = AxisSelection(time='date', y1=('temp',), y2=('gone',))
        render_gate(weather_snapshot, selection)
        assert selection.y2 == ('gone',)

    def test_series_on_both_axes(self, weather_snapshot):
        """Test: Spalte auf beiden Achsen wird vom Gate abgelehnt statt vom Builder"""
        selection = AxisSelection(time='date', y1=('temp', 'hum'), y2=('hum',))
        result = render_gate(weather_snapshot, selection)

        assert result.reason is ValidationReason.NO_Y_SERIES
        assert 'hum' in result.message
        assert 'temp' not in result.message
