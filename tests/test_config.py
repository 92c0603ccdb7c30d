# tests/test_config.py
import json

import pytest

from markov_textgen.utils.config_manager import DEFAULTS, Config


def test_defaults_when_file_missing(tmp_path):
    cfg = Config(str(tmp_path / "none.json"))
    assert cfg.as_dict() == DEFAULTS
    assert cfg.get("fixed_seed") == 20
    assert not (tmp_path / "none.json").exists()


def test_file_values_override_defaults(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"fixed_seed": 99, "encoding": "latin-1"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("fixed_seed") == 99
    assert cfg.get("encoding") == "latin-1"
    assert cfg.get("log_to_console") is False


def test_broken_file_is_ignored(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("{not json", encoding="utf8")
    assert Config(str(p)).as_dict() == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.set("fixed_seed", "7")
    cfg.set("log_to_console", "false")
    cfg.set("log_path", str(tmp_path / "x.log"))
    saved = json.loads(p.read_text(encoding="utf8"))
    assert saved["fixed_seed"] == 7
    assert saved["log_to_console"] is False
    assert saved["log_path"].endswith("x.log")


def test_unknown_key(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")


@pytest.mark.parametrize("bad", [None, "abc", [1, 2]])
def test_bad_values_fall_back_to_defaults(tmp_path, bad):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"fixed_seed": bad, "encoding": "latin-1"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("fixed_seed") == 20
    assert cfg.get("encoding") == "latin-1"


def test_numeric_strings_are_coerced_on_load(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"fixed_seed": "42", "log_to_console": "yes", "theme": "dark"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("fixed_seed") == 42
    assert cfg.get("log_to_console") is True
    assert "theme" not in cfg.as_dict()
