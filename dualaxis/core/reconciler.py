"""
Selection Reconciler
Berechnet aus alter Auswahl und neuen Kandidaten die nächste gültige Auswahl
"""

from collections.abc import Iterable
from typing import Any, List, Optional


def reconcile(previous: Any, choices: Optional[Iterable[str]],
              fallback_position: Optional[int]) -> List[str]:
    """
    Berechnet die nächste gültige Auswahl

    Reihenfolge:
    1. Keine choices -> leere Auswahl (auch mit Fallback)
    2. Noch gültige Werte der alten Auswahl behalten (Reihenfolge der choices)
    3. Ohne Fallback -> leere Auswahl
    4. Fallback-Position (1-basiert) innerhalb der choices -> dieses Element,
       ausserhalb -> leere Auswahl

    Args:
        previous: Vorherige Auswahl (None, einzelner Wert oder Iterable)
        choices: Neue Kandidaten (None wird wie leer behandelt)
        fallback_position: 1-basierte Position des Defaults oder None

    Returns:
        Liste der ausgewählten Werte (leer wenn nichts gültig ist)

    Example:
        >>> reconcile("d", ["a", "b", "c"], 1)
        ['a']
        >>> reconcile(["c", "a"], ["a", "b", "c"], None)
        ['a', 'c']
    """
    choices = list(choices) if choices is not None else []
    if not choices:
        return []

    previous_values = _as_set(previous)
    kept = [choice for choice in choices if choice in previous_values]
    if kept:
        return kept

    if fallback_position is None:
        return []

    if 1 <= fallback_position <= len(choices):
        return [choices[fallback_position - 1]]
    return []


def reconcile_single(previous: Any, choices: Optional[Iterable[str]],
                     fallback_position: Optional[int]) -> Optional[str]:
    """Variante für Single-Select Controls (z.B. Zeitspalte)"""
    result = reconcile(previous, choices, fallback_position)
    return result[0] if result else None


def dropped_values(previous: Any, selected: Iterable[str]) -> List[str]:
    """Werte der alten Auswahl, die in der neuen Auswahl fehlen"""
    selected = set(selected)
    return [value for value in _as_list(previous) if value not in selected]


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, bytes) or not isinstance(value, Iterable):
        return [value]
    return [item for item in value if item is not None]


def _as_set(value: Any) -> set:
    return set(_as_list(value))
