"""
Generation Cache
Memory-Cache für abgeleitete Werte, geschlüsselt nach Snapshot-Generation
"""

import logging
from typing import Any, Callable, Dict, Hashable, Tuple

logger = logging.getLogger(__name__)


class GenerationCache:
    """
    Cache für reine Ableitungen (Klassifizierung, Charts)

    Einträge sind an eine Generation gebunden. advance() verwirft alle
    Einträge älterer Generationen, damit nie Ergebnisse aus Generation N
    mit Zustand aus Generation N+1 gemischt werden.
    """

    def __init__(self):
        self.generation: int = 0
        self._entries: Dict[Tuple[str, int, Hashable], Any] = {}
        self.stats = {'hits': 0, 'misses': 0, 'evictions': 0}

    def advance(self, generation: int) -> None:
        """Setzt die aktuelle Generation und verwirft veraltete Einträge"""
        if generation == self.generation:
            return
        stale = [key for key in self._entries if key[1] != generation]
        for key in stale:
            del self._entries[key]
        self.stats['evictions'] += len(stale)
        if stale:
            logger.debug(f"[CACHE] Generation {self.generation} -> {generation}: "
                         f"{len(stale)} stale entries dropped")
        self.generation = generation

    def get_or_compute(self, name: str, generation: int, compute: Callable[[], Any],
                       key: Hashable = None) -> Any:
        """
        Liefert gecachten Wert oder berechnet ihn

        Args:
            name: Name der Ableitung (z.B. "classification")
            generation: Generation, zu der der Wert gehört
            compute: Berechnungsfunktion ohne Argumente
            key: Zusätzlicher Schlüssel (z.B. Auswahl)

        Returns:
            Abgeleiteter Wert
        """
        if generation != self.generation:
            self.advance(generation)

        cache_key = (name, generation, key)
        if cache_key in self._entries:
            self.stats['hits'] += 1
            return self._entries[cache_key]

        self.stats['misses'] += 1
        value = compute()
        self._entries[cache_key] = value
        return value

    def __contains__(self, item: Tuple[str, int, Hashable]) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self.stats = {'hits': 0, 'misses': 0, 'evictions': 0}
