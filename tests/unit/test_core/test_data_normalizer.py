"""
Unit Tests für Data Normalizer
"""

from unittest.mock import MagicMock

import pandas as pd

from dualaxis.core.data_normalizer import DataNormalizer
from dualaxis.models.table import ColumnKind
from dualaxis.models.validation import ValidationReason


class TestStaticTable:
    """Tests für feste Tabellen"""

    def test_snapshot_from_frame(self, weather_frame):
        """Test: DataFrame -> Snapshot mit Generation 1"""
        result = DataNormalizer(weather_frame).refresh()

        assert result.ok
        snapshot = result.value
        assert snapshot.generation == 1
        assert snapshot.column_names == ['date', 'temp', 'hum']
        assert snapshot.row_count == 4
        assert snapshot.get_column('date').kind is ColumnKind.TIME
        assert snapshot.get_column('temp').kind is ColumnKind.NUMERIC

    def test_static_resolved_once(self, weather_frame):
        """Test: Feste Tabelle liefert immer denselben Snapshot"""
        normalizer = DataNormalizer(weather_frame)

        first = normalizer.refresh()
        second = normalizer.refresh()

        assert first is second
        assert normalizer.generation == 1

    def test_snapshot_is_private_copy(self, weather_frame):
        """Test: Spätere Änderungen am Original verändern den Snapshot nicht"""
        snapshot = DataNormalizer(weather_frame).refresh().value
        weather_frame.loc[0, 'temp'] = 999.0

        assert snapshot.frame.loc[0, 'temp'] == 10.5

    def test_non_string_column_labels(self):
        """Test: Spaltennamen werden zu Strings"""
        snapshot = DataNormalizer(pd.DataFrame({0: [1.0], 1: [2.0]})).refresh().value
        assert snapshot.column_names == ['0', '1']

    def test_timezone_recorded(self):
        """Test: Zeitzone einer Zeitspalte wird im Column gespeichert"""
        frame = pd.DataFrame({'ts': pd.date_range('2024-01-01', periods=2, tz='UTC')})
        snapshot = DataNormalizer(frame).refresh().value
        assert snapshot.get_column('ts').timezone == 'UTC'


class TestNotTabular:
    """Tests für NOT_TABULAR"""

    def test_list_is_not_tabular(self):
        """Test: Liste statt DataFrame -> NOT_TABULAR mit Typ in der Meldung"""
        result = DataNormalizer([{'a': 1}]).refresh()

        assert not result.ok
        assert result.reason is ValidationReason.NOT_TABULAR
        assert 'list' in result.message

    def test_provider_returning_none(self):
        """Test: Provider liefert None -> NOT_TABULAR"""
        result = DataNormalizer(lambda: None).refresh()
        assert result.reason is ValidationReason.NOT_TABULAR

    def test_provider_error_is_not_a_crash(self):
        """Test: Exception im Provider wird zur Validierungs-Meldung"""
        provider = MagicMock(side_effect=RuntimeError("sensor offline"))
        result = DataNormalizer(provider).refresh()

        assert result.reason is ValidationReason.NOT_TABULAR
        assert 'sensor offline' in result.message

    def test_duplicate_columns(self):
        """Test: Doppelte Spaltennamen -> NOT_TABULAR"""
        frame = pd.DataFrame([[1, 2]], columns=['a', 'a'])
        result = DataNormalizer(frame).refresh()

        assert result.reason is ValidationReason.NOT_TABULAR
        assert 'a' in result.message


class TestLiveProvider:
    """Tests für Live-Provider"""

    def test_provider_called_once_per_refresh(self, weather_frame):
        """Test: Provider wird genau einmal pro refresh() aufgerufen"""
        provider = MagicMock(return_value=weather_frame)
        normalizer = DataNormalizer(provider)

        normalizer.refresh()
        normalizer.refresh()

        assert provider.call_count == 2
        assert normalizer.stats['provider_calls'] == 2

    def test_unchanged_data_keeps_generation(self, weather_frame):
        """Test: Gleiche Daten (auch als neues Objekt) -> gleiche Generation"""
        frames = [weather_frame, weather_frame.copy()]
        normalizer = DataNormalizer(lambda: frames.pop(0))

        first = normalizer.refresh()
        second = normalizer.refresh()

        assert first.value.generation == second.value.generation == 1
        assert first.value is second.value

    def test_changed_data_new_generation(self, weather_frame):
        """Test: Geänderte Spalten -> neue Generation"""
        frames = [weather_frame, weather_frame.drop(columns=['hum'])]
        normalizer = DataNormalizer(lambda: frames.pop(0))

        first = normalizer.refresh()
        second = normalizer.refresh()

        assert first.value.generation == 1
        assert second.value.generation == 2
        assert second.value.column_names == ['date', 'temp']

    def test_recovers_after_failure(self, weather_frame):
        """Test: Validierungsfehler heilt sich mit neuen Daten selbst"""
        values = [None, weather_frame]
        normalizer = DataNormalizer(lambda: values.pop(0))

        assert not normalizer.refresh().ok
        assert normalizer.refresh().ok
        assert normalizer.current.ok

    def test_replacing_static_source_with_equal_frame(self, weather_frame):
        """Test: Neue Quelle mit gleichen Daten -> gleicher Snapshot"""
        normalizer = DataNormalizer(weather_frame)
        first = normalizer.refresh()

        normalizer.source = weather_frame.copy()
        second = normalizer.refresh()

        assert second.value is first.value
