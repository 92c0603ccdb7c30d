# markov_textgen/core/protocols.py
"""
Protocol interfaces and shared typed structures for the core of the text model.

The generator only depends on `RandomSource`, so tests can drive it with a stub
that returns hand-picked draws instead of a real `random.Random`.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures used across components ------------------------------------

class CharStatRow(TypedDict):
    """
    One finalized entry of a context, as exposed by `LanguageModel.rows()`.

    Example:
      {"character": "a", "count": 2, "p": 0.5, "cp": 0.5}
    """
    character: str
    count: int
    p: float
    cp: float


ContextRows = Dict[str, List[CharStatRow]]  # mapping: window -> ordered rows


# Protocols ------------------------------------------------------------------

@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0), e.g. `random.Random`."""

    def random(self) -> float:
        ...
