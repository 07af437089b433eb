"""
Sample Data für Demo und Tests
Erzeugt Wetter-Sensor Zeitreihen mit gemischten Spalten-Typen
"""

from datetime import datetime
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from pandas.tseries.frequencies import to_offset


def create_sample_data(periods: int = 288, freq: str = "5min",
                       end: Optional[datetime] = None, seed: int = 42) -> pd.DataFrame:
    """
    Erstellt Sensor-Beispieldaten

    Spalten: date (naive datetime), temp, hum, wind (numerisch),
    station (Text), raining (bool)

    Args:
        periods: Anzahl der Zeilen
        freq: Abstand der Messungen
        end: Letzter Zeitstempel (Standard: jetzt, auf Minuten gerundet)
        seed: Seed für reproduzierbare Werte

    Returns:
        DataFrame mit Sensor-Daten
    """
    rng = np.random.default_rng(seed)
    end = end or datetime.now().replace(second=0, microsecond=0)
    timestamps = pd.date_range(end=end, periods=periods, freq=freq)

    # Tagesgang plus Rauschen
    phase = np.linspace(0, 2 * np.pi * periods / 288, periods)
    temp = 12 + 6 * np.sin(phase - np.pi / 2) + rng.normal(0, 0.4, periods)
    hum = np.clip(70 - 2.5 * (temp - 12) + rng.normal(0, 2.0, periods), 5, 100)
    wind = np.abs(rng.normal(3.5, 1.5, periods))

    return pd.DataFrame({
        'date': timestamps,
        'temp': temp.round(2),
        'hum': hum.round(1),
        'wind': wind.round(2),
        'station': 'station-1',
        'raining': hum > 85,
    })


class SensorFeed:
    """
    Live-Provider für die Demo

    Jeder Aufruf liefert den aktuellen Stand. advance() hängt neue
    Messungen an, drop_columns() simuliert eine geänderte Tabellen-Struktur.
    """

    def __init__(self, periods: int = 288, freq: str = "5min", seed: int = 42):
        self.freq = freq
        self.seed = seed
        self.frame = create_sample_data(periods=periods, freq=freq, seed=seed)
        self.dropped: tuple = ()

    def __call__(self) -> pd.DataFrame:
        return self.frame.drop(columns=list(self.dropped))

    def advance(self, rows: int = 1) -> None:
        """Hängt neue Messungen an und verwirft die ältesten"""
        last = self.frame['date'].iloc[-1]
        offset = to_offset(self.freq)
        end = last + rows * offset
        self.seed += 1
        fresh = create_sample_data(periods=rows, freq=self.freq, end=end, seed=self.seed)
        self.frame = pd.concat([self.frame, fresh], ignore_index=True).iloc[rows:].reset_index(drop=True)

    def drop_columns(self, columns: Iterable[str]) -> None:
        self.dropped = tuple(columns)
