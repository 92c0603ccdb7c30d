# markov_textgen/core/context_model.py
"""
ContextModel - window string -> CharStatSequence.

Grows only while training; once `finalize_all()` has run the map is frozen and
generation reads it without further mutation.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from .char_stats import CharStatSequence
from .errors import InvalidInput, ModelFrozenError
from .protocols import ContextRows


class ContextModel:
    def __init__(self, window_length: int) -> None:
        if isinstance(window_length, bool) or not isinstance(window_length, int) or window_length < 1:
            raise InvalidInput(f"window length must be a positive integer, got {window_length!r}")
        self.window_length = window_length
        self._contexts: Dict[str, CharStatSequence] = {}
        self._finalized = False

    def sequence_for(self, window: str) -> CharStatSequence:
        """Return the sequence for `window`, inserting an empty one if the window is new."""
        seq = self._contexts.get(window)
        if seq is not None:
            return seq
        if self._finalized:
            raise ModelFrozenError(f"cannot add context {window!r} to a finalized model")
        if len(window) != self.window_length:
            raise InvalidInput(
                f"context {window!r} has length {len(window)}, expected {self.window_length}"
            )
        seq = CharStatSequence()
        self._contexts[window] = seq
        return seq

    def lookup(self, window: str) -> Optional[CharStatSequence]:
        """Read-only lookup; None for a window never seen in training."""
        return self._contexts.get(window)

    def finalize_all(self) -> None:
        for seq in self._contexts.values():
            seq.finalize()
        self._finalized = True

    @property
    def finalized(self) -> bool:
        return self._finalized

    def items(self) -> Iterator[Tuple[str, CharStatSequence]]:
        return iter(self._contexts.items())

    def rows(self) -> ContextRows:
        return {window: seq.rows() for window, seq in self._contexts.items()}

    def __contains__(self, window: object) -> bool:
        return window in self._contexts

    def __len__(self) -> int:
        return len(self._contexts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)
