"""
Data Layer für Dual-Axis Chart
Beispieldaten und Live-Provider
"""

from .sample_data import SensorFeed, create_sample_data

__all__ = [
    'SensorFeed',
    'create_sample_data',
]
