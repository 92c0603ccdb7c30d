# config_manager.py - JSON config manager for CLI defaults

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "markov_textgen.json"

DEFAULTS = {
    "fixed_seed": 20,  # seed used by the "fixed" generation mode
    "encoding": "utf-8",
    "log_path": None,
    "log_to_console": False,
}


def _coerce(key, val):
    """Convert `val` to the type of the default for `key`. Raises TypeError/ValueError."""
    default = DEFAULTS[key]
    if default is None:
        return val
    kind = type(default)
    if val is None:
        raise TypeError(f"{key} must be a {kind.__name__}, got null")
    if kind is bool and isinstance(val, str):
        return val.strip().lower() in ("1", "true", "yes", "on")
    return kind(val)


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for key, val in loaded.items():
            if key not in DEFAULTS:
                logger.warning("ignoring unknown config option %s", key)
                continue
            try:
                self.data[key] = _coerce(key, val)
            except (TypeError, ValueError) as e:
                # keep the default for this key
                logger.warning("ignoring bad value for %s in %s: %s", key, self.path, e)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()

    def as_dict(self):
        return dict(self.data)
