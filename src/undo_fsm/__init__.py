"""undo_fsm - finite state machine with linear undo/redo history."""

from __future__ import annotations

from .config import Config, LoggingConfig, load_config, load_machine
from .infra import configure_logging
from .state_machine import (
    ConfigMissingError,
    InvalidConfigError,
    MachineConfig,
    StateDefinition,
    StateMachine,
    StateMachineError,
    TransitionResult,
    UnknownStateError,
    UnknownTransitionError,
)

__all__ = [
    "Config",
    "ConfigMissingError",
    "InvalidConfigError",
    "LoggingConfig",
    "MachineConfig",
    "StateDefinition",
    "StateMachine",
    "StateMachineError",
    "TransitionResult",
    "UnknownStateError",
    "UnknownTransitionError",
    "configure_logging",
    "load_config",
    "load_machine",
]
