"""Configuration loader utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from undo_fsm.state_machine import MachineConfig, StateMachine

from .models import Config, LoggingConfig

logger = logging.getLogger("undo_fsm.config")


def _normalize_path(path: Path | str) -> Path:
    return path if isinstance(path, Path) else Path(path)


def _load_raw_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open("r", encoding="utf-8") as stream:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(stream) or {}
        if suffix == ".json":
            return json.load(stream)
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(config_path: Path | str) -> Config:
    """Load a machine definition file and construct the Config dataclass."""

    config_path = _normalize_path(config_path)
    raw = _load_raw_config(config_path)

    machine = MachineConfig.from_mapping(raw)

    logging_raw = dict(raw.get("logging") or {})
    log_path = logging_raw.get("filepath")
    if log_path:
        # Relative log paths follow the config file, not the working directory.
        logging_raw["filepath"] = (config_path.parent / log_path).resolve()
    logging_config = LoggingConfig(**logging_raw)

    logger.debug("Loaded %d states from %s", len(machine.states), config_path)
    return Config(machine=machine, logging=logging_config)


def load_machine(config_path: Path | str) -> StateMachine:
    """Build a StateMachine straight from a definition file."""
    return StateMachine(load_config(config_path).machine)
