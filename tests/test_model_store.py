# tests/test_model_store.py
import json

import pytest

from markov_textgen.core.errors import InvalidInput
from markov_textgen.core.language_model import LanguageModel
from markov_textgen.utils.model_store import dump_model, load_model, restore_model, save_model


def test_dump_keeps_insertion_order_and_counts():
    lm = LanguageModel(1, seed=3)
    lm.train("abacad")
    data = dump_model(lm)
    assert data["window_length"] == 1
    assert data["seed"] == 3
    assert list(data["contexts"]) == ["a", "b", "c"]
    assert data["contexts"]["a"] == [["b", 1], ["c", 1], ["d", 1]]


def test_loaded_model_matches_the_saved_one(tmp_path):
    text = "she sells sea shells by the sea shore"
    lm = LanguageModel(2, seed=5)
    lm.train(text)
    path = tmp_path / "model.json"
    save_model(lm, str(path))

    loaded = load_model(str(path))
    assert loaded.is_trained
    assert loaded.seed == 5
    assert loaded.describe() == lm.describe()
    # both start from a fresh Random(5)
    assert loaded.generate("se", 60) == lm.generate("se", 60)


def test_saved_file_is_readable_json(tmp_path):
    lm = LanguageModel(1)
    lm.train("ñaña")
    path = tmp_path / "m.json"
    save_model(lm, str(path))
    text = path.read_text(encoding="utf-8")
    assert "ñ" in text
    assert json.loads(text)["contexts"]["ñ"] == [["a", 2]]


def test_restored_model_is_frozen():
    lm = restore_model({"window_length": 1, "contexts": {"a": [["b", 2]]}})
    assert lm.contexts.finalized
    assert lm.contexts.lookup("a").get("b").cp == pytest.approx(1.0)


@pytest.mark.parametrize("data", [
    {"window_length": 2},
    {"window_length": 0, "contexts": {}},
    {"window_length": 1, "contexts": {"ab": [["c", 1]]}},
    {"window_length": 1, "contexts": {"a": [["bc", 1]]}},
    {"window_length": 1, "contexts": {"a": []}},
    {"window_length": 1, "contexts": {"a": [["b", 0]]}},
    {"window_length": 1, "contexts": {"a": [["b", 1], ["b", 1]]}},
    {"window_length": 1, "contexts": ["a"]},
])
def test_malformed_data_is_rejected(data):
    with pytest.raises(InvalidInput):
        restore_model(data)


def test_load_rejects_broken_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidInput):
        load_model(str(path))


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidInput):
        load_model(str(path))
