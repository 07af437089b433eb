"""
Core Module für Dual-Axis Chart
Enthält die reinen Ableitungen und die Konsistenz-Logik
"""

from .data_normalizer import DataNormalizer
from .column_classifier import classify, validate_classification, column_kind
from .axis_resolver import AxisCandidateResolver, candidates_for, other_axis
from .reconciler import reconcile, reconcile_single, dropped_values
from .render_gate import render_gate
from .generation_cache import GenerationCache

__all__ = [
    'DataNormalizer',
    'classify',
    'validate_classification',
    'column_kind',
    'AxisCandidateResolver',
    'candidates_for',
    'other_axis',
    'reconcile',
    'reconcile_single',
    'dropped_values',
    'render_gate',
    'GenerationCache',
]
