# markov_textgen/core/language_model.py
"""
LanguageModel - public facade over training, sampling and introspection.

    lm = LanguageModel(3, seed=20)
    lm.train_file("corpus.txt")
    print(lm.generate("The", 200))

With a seed, repeated runs over the same corpus produce the same text (handy for
debugging). Without one the random source is seeded from OS entropy.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional, Sequence

from .context_model import ContextModel
from .generator import generate as _generate
from .protocols import ContextRows
from .trainer import train as _train
from markov_textgen.utils.corpus import read_corpus

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Fixed-order character Markov model.

    Before `train` the model acts as if trained on empty input: every lookup misses,
    so `generate` hands back the seed's trailing window (or the seed itself when it
    is shorter than one window).
    """

    def __init__(self, window_length: int, seed: Optional[int] = None) -> None:
        # validates window_length
        self._contexts = ContextModel(window_length)
        self.window_length = window_length
        self.seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()
        # one generate() at a time on the shared random source
        self._lock = threading.Lock()
        self._trained = False

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, characters: Sequence[str]) -> None:
        """Build the model from one full pass over `characters`. Replaces earlier training."""
        self._contexts = _train(characters, self.window_length)
        self._trained = True

    def train_file(self, path: str, encoding: str = "utf-8") -> None:
        self.train(read_corpus(path, encoding=encoding))

    def _load_contexts(self, contexts: ContextModel) -> None:
        """Install an already finalized ContextModel (used by model_store)."""
        self._contexts = contexts
        self._trained = True

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, seed_text: str, output_length: int) -> str:
        with self._lock:
            return _generate(self._contexts, self._rng, seed_text, output_length)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def contexts(self) -> ContextModel:
        return self._contexts

    def rows(self) -> ContextRows:
        return self._contexts.rows()

    def describe(self) -> str:
        """One line per context, in the order contexts were first seen. Windows and characters are repr()'d."""
        return "".join(f"{window!r} : {seq}\n" for window, seq in self._contexts.items())

    def __len__(self) -> int:
        return len(self._contexts)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (f"LanguageModel(window_length={self.window_length}, seed={self.seed}, "
                f"contexts={len(self._contexts)})")


Model = LanguageModel
