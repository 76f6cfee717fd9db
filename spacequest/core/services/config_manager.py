"""
config_manager.py
-----------------
Loads tunable data (joystick, menu layout) from files in spacequest/config.

Features:
- JSON, YAML and Python (DEFAULT_CONFIG) files
- Lookup by bare filename, with or without extension
- Values from the file are merged over the caller's defaults, so a file
  only needs the keys it changes
- '_notes' keys are documentation and never reach the game
"""

import os
import json
import importlib.util

import yaml

from spacequest.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    DATA_ROOT,
]

CONFIG_EXTENSIONS = (".json", ".yaml", ".yml", ".py")

NOTES_KEY = "_notes"

# filename -> absolute path, built lazily
_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Read a config file and merge it over defaults.

    Args:
        filename: Bare name ("controls.json", "main_menu") or absolute path
        default_dict: Values used for anything the file leaves out
        strict: Raise FileNotFoundError instead of falling back to defaults

    Returns:
        dict: New dict, never aliasing default_dict
    """
    defaults = default_dict or {}
    path = filename if os.path.isabs(filename) else _resolve_search_path(filename)

    # ValueError also covers JSONDecodeError and UnicodeDecodeError
    try:
        data = _read(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Could not read {filename} ({e}), using defaults", category="loading")
        data = None

    if data is not None and not isinstance(data, dict):
        DebugLogger.warn(f"{filename} is not a mapping, using defaults", category="loading")
        data = None

    return _merge_dicts(defaults, data or {})


def build_file_index():
    """Walk SEARCH_DIRS once and remember where each config file lives."""
    global _FILE_INDEX
    index = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for name in files:
                if name.endswith(CONFIG_EXTENSIONS):
                    # First directory in SEARCH_DIRS wins
                    index.setdefault(name, os.path.join(root, name))

    _FILE_INDEX = index
    DebugLogger.init(f"Indexed {len(index)} config file(s)", category="loading")


def rebuild_file_index():
    """Forget the index and scan again (files added at runtime)."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


def get_indexed_files():
    if _FILE_INDEX is None:
        build_file_index()
    return dict(_FILE_INDEX)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Indexed path for filename; the name itself if nothing matches."""
    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").lstrip("/")
    candidates = [name] + [name + ext for ext in CONFIG_EXTENSIONS]
    for candidate in candidates:
        if candidate in _FILE_INDEX:
            return _FILE_INDEX[candidate]
    return name


# ===========================================================
# File Loaders
# ===========================================================

def _read(path):
    ext = os.path.splitext(path)[1].lower()
    loader = _LOADERS.get(ext, _load_json)
    data = loader(path)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _load_py_module(path):
    """Execute a Python config file and return its DEFAULT_CONFIG."""
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    spec = importlib.util.spec_from_file_location("spacequest_config", path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:  # arbitrary user code
        DebugLogger.warn(f"Python config {path} failed: {type(e).__name__}: {e}", category="loading")
        return {}
    return getattr(module, "DEFAULT_CONFIG", {})


_LOADERS = {
    ".json": _load_json,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".py": _load_py_module,
}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Deep merge override into a copy of default. Drops '_notes' keys."""
    merged = {}
    for key, value in default.items():
        if key == NOTES_KEY:
            continue
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        elif isinstance(value, dict):
            merged[key] = _merge_dicts(value, {})
        else:
            merged[key] = value
    return merged
