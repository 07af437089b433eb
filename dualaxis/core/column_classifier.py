"""
Column Classifier
Leitet aus einem Snapshot die Zeit- und Zahlen-Spalten ab
"""

import logging
from typing import Optional

import pandas as pd
from pandas.api import types as ptypes

from ..models.table import Column, ColumnClassification, ColumnKind, TableSnapshot
from ..models.validation import ValidationReason, ValidationResult

logger = logging.getLogger(__name__)


def column_kind(series: pd.Series) -> ColumnKind:
    """
    Bestimmt die Wert-Art einer Spalte anhand des pandas dtype

    Boolean-Spalten zählen nicht als numerisch.
    """
    dtype = series.dtype
    if ptypes.is_datetime64_any_dtype(dtype):
        return ColumnKind.TIME
    if ptypes.is_bool_dtype(dtype):
        return ColumnKind.OTHER
    if ptypes.is_numeric_dtype(dtype):
        return ColumnKind.NUMERIC
    return ColumnKind.OTHER


def column_timezone(series: pd.Series) -> Optional[str]:
    """Zeitzone einer tz-aware Zeitspalte, sonst None"""
    tz = getattr(series.dtype, 'tz', None)
    return str(tz) if tz is not None else None


def describe_column(name: str, series: pd.Series) -> Column:
    kind = column_kind(series)
    return Column(
        name=name,
        kind=kind,
        dtype=str(series.dtype),
        timezone=column_timezone(series) if kind is ColumnKind.TIME else None
    )


def classify(snapshot: TableSnapshot) -> ColumnClassification:
    """
    Klassifiziert die Spalten eines Snapshots (pure, idempotent)

    Args:
        snapshot: Tabellen-Snapshot

    Returns:
        ColumnClassification mit time_columns und numeric_columns in Tabellen-Reihenfolge
    """
    time_columns = tuple(c.name for c in snapshot.columns if c.kind is ColumnKind.TIME)
    numeric_columns = tuple(c.name for c in snapshot.columns if c.kind is ColumnKind.NUMERIC)

    logger.debug(f"[CLASSIFIER] Generation {snapshot.generation}: "
                 f"time={list(time_columns)} numeric={list(numeric_columns)}")

    return ColumnClassification(
        generation=snapshot.generation,
        time_columns=time_columns,
        numeric_columns=numeric_columns
    )


def validate_classification(classification: ColumnClassification) -> ValidationResult[ColumnClassification]:
    """
    Prüft, ob die Klassifizierung für einen Chart ausreicht

    Returns:
        Erfolg, oder NO_TIME_COLUMNS / NO_NUMERIC_COLUMNS (Zeit wird zuerst geprüft)
    """
    if not classification.has_time_columns:
        return ValidationResult.fail(ValidationReason.NO_TIME_COLUMNS)
    if not classification.has_numeric_columns:
        return ValidationResult.fail(ValidationReason.NO_NUMERIC_COLUMNS)
    return ValidationResult.success(classification)
