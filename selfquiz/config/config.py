from __future__ import annotations

"""Configuration loading and validation for selfquiz.

This module loads YAML configuration, applies defaults, and validates
that values have sane types for the CLI.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = cfg.get(name)
    if not isinstance(sec, dict):
        if sec is not None:
            print(f"WARNING: Config section '{name}' must be a mapping, ignoring it.")
        sec = {}
        cfg[name] = sec
    return sec


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    bank = _section(cfg, "bank")
    session = _section(cfg, "session")
    ui = _section(cfg, "ui")
    explain = _section(cfg, "explain")

    bank.setdefault("name", "civics")
    session.setdefault("seed", None)
    ui.setdefault("number_answers", True)
    ui.setdefault("show_history_on_exit", True)
    explain.setdefault("enabled", False)

    name = bank.get("name")
    if not isinstance(name, str) or not name.strip():
        print(f"WARNING: Unsupported bank name '{name}', using 'civics'.")
        bank["name"] = "civics"

    seed = session.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        try:
            session["seed"] = int(str(seed))
        except ValueError:
            print(f"WARNING: Unsupported seed '{seed}', shuffling unseeded.")
            session["seed"] = None

    for key in ("number_answers", "show_history_on_exit"):
        if not isinstance(ui.get(key), bool):
            print(f"WARNING: ui.{key} must be true/false, using true.")
            ui[key] = True

    if not isinstance(explain.get("enabled"), bool):
        print("WARNING: explain.enabled must be true/false, using false.")
        explain["enabled"] = False

    return cfg
