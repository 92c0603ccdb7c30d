# markov_textgen/core/char_stats.py
"""
Per-context character statistics.

A CharStatSequence holds every character seen after one context window, in the
order the characters were first observed. That order is load-bearing: cumulative
probabilities accumulate in it, so it decides which character a boundary draw
resolves to during sampling.

Two phases:
  - observe(c) during training, counting only
  - finalize() once training is done, filling in p and cp
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .protocols import CharStatRow


@dataclass
class CharStat:
    """A single character observed after some context, with its derived probabilities."""
    character: str
    count: int = 1
    p: float = 0.0   # count / total, set by finalize()
    cp: float = 0.0  # running sum of p in sequence order

    def as_row(self) -> CharStatRow:
        return {"character": self.character, "count": self.count, "p": self.p, "cp": self.cp}

    def __str__(self) -> str:
        return f"({self.character!r} {self.count} {self.p} {self.cp})"


class CharStatSequence:
    """
    Insertion-ordered collection of CharStat for one context window.
    Exactly one entry per distinct character.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which doubles as the sampling order
        self._stats: Dict[str, CharStat] = {}
        self._finalized = False

    # ------------------------------------------------------------------
    # Accumulation phase
    # ------------------------------------------------------------------
    def observe(self, character: str) -> CharStat:
        """Count one more occurrence of `character`, appending it if unseen."""
        stat = self._stats.get(character)
        if stat is None:
            stat = CharStat(character)
            self._stats[character] = stat
        else:
            stat.count += 1
        return stat

    def add(self, character: str, count: int) -> CharStat:
        """Append `character` with a known count. Used when restoring a saved model."""
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        if character in self._stats:
            raise ValueError(f"duplicate character {character!r}")
        stat = CharStat(character, count)
        self._stats[character] = stat
        return stat

    # ------------------------------------------------------------------
    # Finalization phase
    # ------------------------------------------------------------------
    def finalize(self) -> None:
        """Compute p and cp for every entry, in sequence order."""
        total = self.total_count()
        running = 0.0
        for stat in self._stats.values():
            stat.p = stat.count / total
            running += stat.p
            stat.cp = running
        self._finalized = True

    @property
    def finalized(self) -> bool:
        return self._finalized

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------
    def total_count(self) -> int:
        return sum(s.count for s in self._stats.values())

    def get(self, character: str) -> Optional[CharStat]:
        return self._stats.get(character)

    def characters(self) -> List[str]:
        return list(self._stats)

    def last(self) -> CharStat:
        return next(reversed(self._stats.values()))

    def rows(self) -> List[CharStatRow]:
        return [s.as_row() for s in self._stats.values()]

    def __iter__(self) -> Iterator[CharStat]:
        return iter(self._stats.values())

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, character: object) -> bool:
        return character in self._stats

    def __str__(self) -> str:
        return "(" + " ".join(str(s) for s in self._stats.values()) + ")"

    def __repr__(self) -> str:
        return f"CharStatSequence({self})"
