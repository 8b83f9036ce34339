"""Exceptions raised by the state machine."""

from __future__ import annotations

from typing import Hashable


class StateMachineError(Exception):
    """Base class for every error raised by undo_fsm."""


class ConfigMissingError(StateMachineError):
    """Raised when a machine is constructed without configuration."""

    def __init__(self) -> None:
        super().__init__("Config does not exist")


class InvalidConfigError(StateMachineError, ValueError):
    """Raised when a machine definition is malformed."""


class UnknownStateError(StateMachineError, KeyError):
    """Raised when changing to a state that was never declared."""

    def __init__(self, state: Hashable) -> None:
        super().__init__(f"State '{state}' does not exist")
        self.state = state

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownTransitionError(StateMachineError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, state: Hashable, event: Hashable) -> None:
        super().__init__(f"Event '{event}' is not defined for state '{state}'")
        self.state = state
        self.event = event

    def __str__(self) -> str:
        return str(self.args[0])
