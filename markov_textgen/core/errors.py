# markov_textgen/core/errors.py
"""Exceptions raised by the Markov text model."""


class MarkovError(Exception):
    """Base class for every error raised by markov_textgen."""


class InvalidInput(MarkovError, ValueError):
    """
    Raised when the caller hands the model something it cannot work with:
    a non-positive window length, a corpus shorter than one window,
    a negative output length or malformed persisted model data.
    """


class ModelFrozenError(MarkovError, RuntimeError):
    """Raised when a finalized ContextModel is asked to grow."""
