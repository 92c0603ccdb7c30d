# model_store.py — persistence for trained language models

# handles saving and loading trained models as JSON:
# - window length and seed
# - per context, the (character, count) pairs in insertion order
# probabilities are not stored; they are recomputed by finalize() on load,
# which keeps the saved file small and the cp values exact.

import json
from datetime import datetime

from markov_textgen.core.context_model import ContextModel
from markov_textgen.core.errors import InvalidInput
from markov_textgen.core.language_model import LanguageModel


# Helper Functions ---------------
def ts() -> str:
    """Return timestamp for the saved file header."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


# Conversion -------------------------
def dump_model(model: LanguageModel) -> dict:
    """
    Convert a model into plain JSON-able data.
    Returns:
        dict: {"window_length": int, "seed": int|None, "contexts": {window: [[char, count], ...]}}
    """
    return {
        "window_length": model.window_length,
        "seed": model.seed,
        "saved_at": ts(),
        "contexts": {
            window: [[stat.character, stat.count] for stat in seq]
            for window, seq in model.contexts.items()
        },
    }


def restore_model(data: dict) -> LanguageModel:
    """
    Rebuild a trained model from `dump_model` output.
    Characters are re-added in saved order so sampling order survives the round trip.
    Raises:
        InvalidInput: if the data is not shaped like a saved model.
    """
    try:
        window_length = data["window_length"]
        seed = data.get("seed")
        saved = data["contexts"]
        contexts = ContextModel(window_length)
        for window, entries in saved.items():
            seq = contexts.sequence_for(window)
            for character, count in entries:
                if not isinstance(character, str) or len(character) != 1:
                    raise InvalidInput(f"bad character {character!r} in context {window!r}")
                seq.add(character, int(count))
            if not len(seq):
                raise InvalidInput(f"context {window!r} has no characters")
    except InvalidInput:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise InvalidInput(f"malformed model data: {e}") from e

    contexts.finalize_all()
    model = LanguageModel(window_length, seed=seed)
    model._load_contexts(contexts)
    return model


# File Persistence -------------------
def save_model(model: LanguageModel, path: str) -> None:
    """Save a trained model to `path` as UTF-8 JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dump_model(model), f, indent=2, ensure_ascii=False)


def load_model(path: str) -> LanguageModel:
    """Load a model written by `save_model`."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInput(f"{path}: not a saved model: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInput(f"{path}: expected a JSON object")
    return restore_model(data)
