# markov_textgen/core/trainer.py
"""Builds a ContextModel by sliding a fixed-size window over the corpus."""

from __future__ import annotations

import logging
from typing import Sequence

from .context_model import ContextModel
from .errors import InvalidInput

logger = logging.getLogger(__name__)


def train(characters: Sequence[str], window_length: int) -> ContextModel:
    """
    Count, for every window of `window_length` characters, which characters follow it,
    then finalize the probabilities of every context.

    Raises InvalidInput if the corpus is shorter than one window.
    A corpus of exactly one window trains fine and yields an empty model.
    """
    model = ContextModel(window_length)
    text = characters if isinstance(characters, str) else "".join(characters)
    if len(text) < window_length:
        raise InvalidInput(
            f"training input has {len(text)} characters, need at least {window_length}"
        )

    window = text[:window_length]
    for c in text[window_length:]:
        model.sequence_for(window).observe(c)
        window = (window + c)[1:]

    model.finalize_all()
    logger.debug("trained on %d characters: %d contexts (window=%d)",
                 len(text), len(model), window_length)
    return model
