# textindent/config.py
from __future__ import annotations

import json
import logging
import os

log = logging.getLogger(__name__)

APP_DIR = os.path.expanduser("~/.textindent")
CONFIG_PATH = os.path.join(APP_DIR, "config.json")

DEFAULTS = {
    "indent_size": 2,
    "indent_char": " ",
}

_INDENT_CHARS = (" ", "\t")


def _valid(key: str, value: object) -> bool:
    if key == "indent_size":
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if key == "indent_char":
        return value in _INDENT_CHARS
    return True


def load_config() -> dict:
    """Return the CLI defaults, overlaid with ``config.json`` when present.

    The file is only read. Unreadable files and invalid values are logged and
    replaced by ``DEFAULTS``.
    """
    cfg = DEFAULTS.copy()
    if not os.path.exists(CONFIG_PATH):
        return cfg
    try:
        with open(CONFIG_PATH, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return cfg
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", CONFIG_PATH)
        return cfg
    for k, v in data.items():
        if _valid(k, v):
            cfg[k] = v
        else:
            log.warning("Ignoring invalid %s=%r in %s", k, v, CONFIG_PATH)
    log.debug("Loaded config from %s", CONFIG_PATH)
    return cfg
