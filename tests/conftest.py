"""
Gemeinsame Fixtures für Dual-Axis Chart Tests
"""

import pandas as pd
import pytest

from dualaxis.core.column_classifier import classify
from dualaxis.core.data_normalizer import DataNormalizer


@pytest.fixture
def weather_frame():
    """Tabelle mit date (Zeit), temp und hum (numerisch)"""
    return pd.DataFrame({
        'date': pd.date_range('2024-01-15 10:00', periods=4, freq='h'),
        'temp': [10.5, 11.0, 12.25, 11.75],
        'hum': [80, 78, 75, 77],
    })


@pytest.fixture
def mixed_frame():
    """Tabelle mit allen Spalten-Arten"""
    return pd.DataFrame({
        'date': pd.date_range('2024-01-15', periods=3, freq='D'),
        'utc_date': pd.date_range('2024-01-15', periods=3, freq='D', tz='UTC'),
        'temp': [1.5, 2.5, 3.5],
        'count': [1, 2, 3],
        'station': ['a', 'b', 'c'],
        'raining': [True, False, True],
    })


@pytest.fixture
def make_snapshot():
    """Factory: DataFrame -> TableSnapshot"""
    def _make(frame):
        return DataNormalizer(frame).refresh().unwrap()
    return _make


@pytest.fixture
def weather_snapshot(make_snapshot, weather_frame):
    return make_snapshot(weather_frame)


@pytest.fixture
def weather_classification(weather_snapshot):
    return classify(weather_snapshot)
