from __future__ import annotations
import json
import os
from typing import Dict

import config.config as cfg
from services import logger


def load_form(path: str | None = None) -> Dict[str, str]:
    """Last-used form strings, or {} if nothing usable was stored."""
    path = cfg.FORM_STORE if path is None else path
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable form store {path}: {e}")
        return {}
    values = data.get(cfg.STORAGE_KEY, {}) if isinstance(data, dict) else {}
    return {k: str(v) for k, v in values.items()} if isinstance(values, dict) else {}


def save_form(values: Dict[str, str], path: str | None = None) -> None:
    path = cfg.FORM_STORE if path is None else path
    with open(path, "w", encoding="utf-8") as f:
        json.dump({cfg.STORAGE_KEY: dict(values)}, f, ensure_ascii=False, indent=2)
