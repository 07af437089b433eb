"""
Render Gate
Letzte Prüfung der Auswahl gegen den aktuellen Snapshot vor dem Chart-Aufbau
"""

import logging

from ..models.selection import AxisSelection
from ..models.table import ColumnKind, TableSnapshot
from ..models.validation import ValidationReason, ValidationResult

logger = logging.getLogger(__name__)


def render_gate(snapshot: TableSnapshot, selection: AxisSelection) -> ValidationResult[AxisSelection]:
    """
    Validiert die Auswahl gegen den aktuellen Snapshot

    Fängt das Zeitfenster ab, in dem die Tabelle sich schon geändert hat,
    die Steuerelemente aber noch nicht nachgezogen wurden. Verändert die
    Auswahl nicht.

    Args:
        snapshot: Aktueller Tabellen-Snapshot
        selection: Aktuelle Auswahl der Steuerelemente

    Returns:
        Erfolg mit der Auswahl, oder TIME_MISSING / NO_Y_SERIES
    """
    time_column = snapshot.get_column(selection.time) if selection.time else None
    if time_column is None:
        logger.debug(f"[RENDER-GATE] Generation {snapshot.generation}: "
                     f"time column {selection.time!r} missing")
        return ValidationResult.fail(ValidationReason.TIME_MISSING)
    if time_column.kind is not ColumnKind.TIME:
        return ValidationResult.fail(
            ValidationReason.TIME_MISSING,
            f"Column '{time_column.name}' is not a date-time column."
        )

    if not selection.has_y_series:
        logger.debug(f"[RENDER-GATE] Generation {snapshot.generation}: no y series selected")
        return ValidationResult.fail(ValidationReason.NO_Y_SERIES)

    shared = [name for name in selection.y1 if name in selection.y2]
    if shared:
        logger.debug(f"[RENDER-GATE] Generation {snapshot.generation}: "
                     f"series on both axes {shared}")
        return ValidationResult.fail(
            ValidationReason.NO_Y_SERIES,
            f"Series cannot be on both y-axes: {', '.join(shared)}."
        )

    missing = [name for name in selection.y_columns if not snapshot.has_column(name)]
    if missing:
        logger.debug(f"[RENDER-GATE] Generation {snapshot.generation}: "
                     f"selected series missing {missing}")
        return ValidationResult.fail(
            ValidationReason.NO_Y_SERIES,
            f"Selected series not in table: {', '.join(missing)}."
        )

    not_numeric = [name for name in selection.y_columns
                   if snapshot.get_column(name).kind is not ColumnKind.NUMERIC]
    if not_numeric:
        return ValidationResult.fail(
            ValidationReason.NO_Y_SERIES,
            f"Selected series are not numeric: {', '.join(not_numeric)}."
        )

    return ValidationResult.success(selection)
