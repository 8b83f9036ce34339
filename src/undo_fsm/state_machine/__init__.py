"""State machine implementation."""

from .errors import (
    ConfigMissingError,
    InvalidConfigError,
    StateMachineError,
    UnknownStateError,
    UnknownTransitionError,
)
from .machine import StateMachine
from .model import MachineConfig, StateDefinition, TransitionResult

__all__ = [
    "ConfigMissingError",
    "InvalidConfigError",
    "MachineConfig",
    "StateDefinition",
    "StateMachine",
    "StateMachineError",
    "TransitionResult",
    "UnknownStateError",
    "UnknownTransitionError",
]
