# selection_store.py
import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Dict

from config import config

class SelectionError(Exception):
    """Raised when no usable selected record is stored."""
    pass

def _resolve(path):
    return path or config.Selection.STORE_PATH

def save_selected_record(record: Mapping, path=None) -> str:
    """Stores `record` as the single selected planet, replacing any previous selection."""
    if not isinstance(record, Mapping):
        raise SelectionError(f"Selected record must be a mapping, got {type(record).__name__}.")
    target = _resolve(path)
    tmp_path = target + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(dict(record), f, indent=2, default=str)
        os.replace(tmp_path, target)
    except (OSError, TypeError, ValueError) as e:
        logging.error(f"Could not store selected record in {target}: {e}", exc_info=True)
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise SelectionError(f"Could not store selected record in {target}.") from e
    logging.info(f"Stored selected record in {target}")
    return target

def load_selected_record(path=None) -> Dict[str, Any]:
    target = _resolve(path)
    if not os.path.exists(target):
        raise SelectionError(f"No planet selected ({target} not found). Run a search and select a result first.")
    try:
        with open(target, "r", encoding="utf-8") as f:
            record = json.load(f)
    except (OSError, ValueError) as e:
        logging.error(f"Could not read selected record from {target}: {e}", exc_info=True)
        raise SelectionError(f"Invalid stored data in {target}.") from e
    if not isinstance(record, dict):
        raise SelectionError(f"Invalid stored data in {target}: expected a JSON object.")
    return record

def clear_selected_record(path=None) -> bool:
    target = _resolve(path)
    if os.path.exists(target):
        os.remove(target)
        logging.info(f"Cleared selected record {target}")
        return True
    return False
