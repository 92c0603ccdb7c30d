"""markov_textgen - fixed-order character Markov chain text generator."""

from markov_textgen.core import InvalidInput, LanguageModel, Model, __version__

__all__ = ["InvalidInput", "LanguageModel", "Model", "__version__"]
