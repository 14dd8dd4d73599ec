# config_manager.py - JSON config manager

import json
import logging
import os
import sys

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_edit_distance": 2,  # spelling suggestion radius
    "max_suggestions": 10,  # 0 = print everything
    "show_terminal_marker": True,  # '*' after word-ending nodes in /tree
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _coerce(default, val):
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


def _convert(key, val):
    """Coerce `val` to the type of DEFAULTS[key]; counts must be >= 0."""
    default = DEFAULTS[key]
    out = _coerce(default, val)
    if isinstance(default, int) and not isinstance(default, bool) and out < 0:
        raise ValueError(f"{key} must be >= 0, got {out}")
    return out


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read config %s: %s (using defaults)", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object (using defaults)", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("ignoring unknown config key %r", k)
                continue
            try:
                self.data[k] = _convert(k, v)
            except (TypeError, ValueError):
                logger.warning("bad value for %r in %s: %r (keeping %r)", k, self.path, v, self.data[k])

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self, stream=None):
        out = stream or sys.stdout
        for k, v in self.data.items():
            out.write(f"{k:20} = {v}\n")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(key)
        self.data[key] = _convert(key, val)
        self.save()
