# markov_textgen/core/generator.py
"""
Text generation by inverse-CDF sampling over a trained ContextModel.

Stateless: every call works on its own window/result pair and only reads the model.
"""

from __future__ import annotations

import logging

from .char_stats import CharStatSequence
from .context_model import ContextModel
from .errors import InvalidInput
from .protocols import RandomSource

logger = logging.getLogger(__name__)


def sample_char(sequence: CharStatSequence, random_source: RandomSource) -> str:
    """
    Draw r in [0, 1) and return the first character (in insertion order) whose cp >= r.
    If rounding left the last cp below r, the last character wins.
    """
    r = random_source.random()
    for stat in sequence:
        if stat.cp >= r:
            return stat.character
    return sequence.last().character


def generate(model: ContextModel, random_source: RandomSource,
             seed_text: str, output_length: int) -> str:
    """
    Extend the last window of `seed_text` by up to `output_length` sampled characters.

    - seed shorter than the window: returned unchanged
    - window never seen in training: stop and return what was produced so far
    The result starts with the seed's trailing window, not the whole seed.
    """
    if output_length < 0:
        raise InvalidInput(f"output length must be non-negative, got {output_length}")

    n = model.window_length
    if len(seed_text) < n:
        return seed_text

    window = seed_text[-n:]
    out = [window]
    produced = 0
    while produced < output_length:
        seq = model.lookup(window)
        if seq is None:
            logger.debug("stopped after %d/%d characters: unknown context %r",
                         produced, output_length, window)
            break
        c = sample_char(seq, random_source)
        out.append(c)
        produced += 1
        window = (window + c)[-n:]

    return "".join(out)
