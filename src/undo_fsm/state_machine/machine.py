"""Core state-machine implementation."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from .errors import ConfigMissingError, InvalidConfigError, UnknownStateError, UnknownTransitionError
from .model import MachineConfig, StateDefinition, TransitionResult

logger = logging.getLogger("undo_fsm.state_machine")

ConfigSource = Union[MachineConfig, Mapping[str, Any]]


class StateMachine:
    """Finite state machine with linear undo/redo history.

    Every forward move (``change_state`` or ``trigger``) records the state it
    leaves on the undo stack and discards the redo stack. ``redo`` pops back
    onto the current state without recording a new undo entry, so an
    ``undo``/``redo``/``undo`` sequence ends one step further back than it
    started.
    """

    def __init__(self, config: Optional[ConfigSource] = None) -> None:
        if config is None:
            raise ConfigMissingError()

        if isinstance(config, MachineConfig):
            config.validate()
            self._config = config
        elif isinstance(config, Mapping):
            self._config = MachineConfig.from_mapping(config)
        else:
            raise InvalidConfigError(
                f"Expected a mapping or MachineConfig, got {type(config).__name__}."
            )

        self._initial = self._config.initial
        self._current_state = self._config.initial
        self._undo_history: List[str] = []
        self._redo_history: List[str] = []

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def initial(self) -> str:
        return self._initial

    @property
    def current_state(self) -> StateDefinition:
        """Return the current state definition."""
        return self._config.states[self._current_state]

    @property
    def current_state_name(self) -> str:
        """Return the name of the current state."""
        return self._current_state

    def get_state(self) -> str:
        """Return the active state."""
        return self._current_state

    def change_state(self, state: str) -> None:
        """Jump directly to ``state``, ignoring the transition table."""
        if state not in self._config.states:
            raise UnknownStateError(state)

        self._advance(state)
        logger.debug("Changed state %s -> %s", self._undo_history[-1], state)

    def trigger(self, event: str) -> None:
        """Change state according to the current state's transition for ``event``."""
        if not self.current_state.handles(event):
            raise UnknownTransitionError(self._current_state, event)

        next_state = self._resolve(event)
        self._advance(next_state)
        logger.debug("Event %s moved %s -> %s", event, self._undo_history[-1], next_state)

    def dispatch(self, event: str) -> TransitionResult:
        """Trigger ``event`` and report the outcome instead of raising."""
        previous_state = self._current_state

        if not self.current_state.handles(event):
            return TransitionResult(
                previous_state=previous_state,
                event=event,
                next_state=previous_state,
                accepted=False,
                message=f"Event '{event}' is not defined for state '{previous_state}'.",
            )

        next_state = self._resolve(event)
        self._advance(next_state)
        logger.debug("Event %s moved %s -> %s", event, previous_state, next_state)
        return TransitionResult(
            previous_state=previous_state,
            event=event,
            next_state=next_state,
            accepted=True,
            message=f"{previous_state} -> {next_state} on {event}.",
        )

    def reset(self) -> None:
        """Reset the machine to the initial state.

        Undo and redo history are left as they are; use :meth:`clear_history`
        to drop them.
        """
        self._current_state = self._initial
        logger.debug("Reset to initial state %s", self._initial)

    def get_states(self, event: Optional[str] = None) -> List[str]:
        """Return the states that define a transition for ``event``.

        With no event, every declared state is returned. Order follows the
        declaration order of the definition.
        """
        if event is None:
            return self._config.state_names()

        return [name for name, definition in self._config.states.items() if definition.handles(event)]

    def undo(self) -> bool:
        """Go back to the previous state. Return False if there is nothing to undo."""
        if not self._undo_history:
            return False

        self._redo_history.append(self._current_state)
        self._current_state = self._undo_history.pop()
        logger.debug("Undo to %s", self._current_state)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone state. Return False if there is nothing to redo."""
        if not self._redo_history:
            return False

        self._current_state = self._redo_history.pop()
        logger.debug("Redo to %s", self._current_state)
        return True

    def can_undo(self) -> bool:
        return bool(self._undo_history)

    def can_redo(self) -> bool:
        return bool(self._redo_history)

    def undo_history(self) -> Tuple[str, ...]:
        """Return a snapshot of the undo stack, oldest entry first."""
        return tuple(self._undo_history)

    def redo_history(self) -> Tuple[str, ...]:
        """Return a snapshot of the redo stack, oldest entry first."""
        return tuple(self._redo_history)

    def clear_history(self) -> None:
        """Drop both undo and redo history."""
        self._undo_history.clear()
        self._redo_history.clear()
        logger.debug("History cleared")

    def _resolve(self, event: str) -> str:
        return self.current_state.transitions[event]

    def _advance(self, next_state: str) -> None:
        self._redo_history.clear()
        self._undo_history.append(self._current_state)
        self._current_state = next_state

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._current_state!r}, "
            f"undo={len(self._undo_history)}, redo={len(self._redo_history)})"
        )
