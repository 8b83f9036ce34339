"""Configuration package for undo_fsm."""

from .loader import load_config, load_machine
from .models import Config, LoggingConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "load_config",
    "load_machine",
]
