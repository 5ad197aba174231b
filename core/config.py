"""
core/config.py

User preference persistence.

Saves and loads UI preferences (e.g. dark mode) to a JSON file in the user's
home directory so they persist across app restarts. Parameter values are
deliberately not stored; every session starts from the defaults.
"""

import json
from pathlib import Path

CONFIG_FILE = Path.home() / ".npf_calculator_config.json"
DEFAULT_CONFIG = {"dark_mode": True}


def load_config() -> dict:
    """Load persisted user config, returning defaults if not found or invalid."""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, "r") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
        if isinstance(stored, dict):
            return {**DEFAULT_CONFIG, **{k: v for k, v in stored.items() if k in DEFAULT_CONFIG}}
    return DEFAULT_CONFIG.copy()


def save_config(config: dict) -> None:
    """Save user config to disk."""
    try:
        with open(CONFIG_FILE, "w") as f:
            json.dump(config, f, indent=2)
    except OSError as e:
        print(f"Warning: Could not save config: {e}")
