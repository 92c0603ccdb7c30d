"""
markov_textgen.core

The statistics and sampling engine of the text model.
Contains:
 - per-context character statistics (CharStat, CharStatSequence)
 - the window -> statistics map (ContextModel)
 - training and generation (train, generate, sample_char)
 - the public facade (LanguageModel / Model)
"""

from .char_stats import CharStat, CharStatSequence
from .context_model import ContextModel
from .errors import InvalidInput, MarkovError, ModelFrozenError
from .generator import generate, sample_char
from .language_model import LanguageModel, Model
from .protocols import CharStatRow, RandomSource
from .trainer import train

__all__ = [
    "CharStat",
    "CharStatSequence",
    "ContextModel",
    "InvalidInput",
    "MarkovError",
    "ModelFrozenError",
    "generate",
    "sample_char",
    "LanguageModel",
    "Model",
    "CharStatRow",
    "RandomSource",
    "train",
]

__version__ = "0.1.0"
