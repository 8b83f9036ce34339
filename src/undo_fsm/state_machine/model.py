"""Data structures representing the state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from .errors import InvalidConfigError


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class StateDefinition:
    """Description of a state in the machine."""

    name: str
    label: str = ""
    description: str = ""
    transitions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", str(self.name))
        object.__setattr__(self, "transitions", _frozen(self.transitions))

    def next_state_for(self, event: str) -> str | None:
        """Return the destination state for the provided event."""
        return self.transitions.get(event)

    def handles(self, event: str) -> bool:
        """Return True if the event is a valid trigger from this state."""
        return event in self.transitions


@dataclass(frozen=True, slots=True)
class MachineConfig:
    """Immutable snapshot of a machine definition.

    ``states`` keeps declaration order, which is the order reported by
    :meth:`StateMachine.get_states`.
    """

    initial: str
    states: Mapping[str, StateDefinition]

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", _frozen(self.states))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "MachineConfig":
        """Build and validate a snapshot from the plain construction schema.

        Expected shape::

            {"initial": "A", "states": {"A": {"transitions": {"go": "B"}}, "B": {}}}
        """
        if not isinstance(raw, Mapping):
            raise InvalidConfigError("Machine configuration must be a mapping.")
        if "initial" not in raw:
            raise InvalidConfigError("Machine configuration must define 'initial'.")

        raw_states = raw.get("states")
        if not isinstance(raw_states, Mapping):
            raise InvalidConfigError("Machine configuration 'states' must be a mapping.")

        states: Dict[str, StateDefinition] = {}
        for name, entry in raw_states.items():
            states[name] = _load_state_definition(name, entry)

        config = cls(initial=raw["initial"], states=states)
        config.validate()
        return config

    def validate(self) -> None:
        """Validate that the initial state and every target are declared."""
        if self.initial not in self.states:
            raise InvalidConfigError(f"Initial state '{self.initial}' is not declared.")

        for state_name, definition in self.states.items():
            if not isinstance(definition, StateDefinition):
                raise InvalidConfigError(
                    f"State '{state_name}' must be a StateDefinition, got {type(definition).__name__}."
                )
            for event, target in definition.transitions.items():
                if target not in self.states:
                    raise InvalidConfigError(
                        f"State '{state_name}' event '{event}' references undefined target '{target}'."
                    )

    def state_names(self) -> List[str]:
        return list(self.states)

    def to_dict(self) -> Dict[str, Any]:
        """Render the snapshot back to the plain construction schema."""
        return {
            "initial": self.initial,
            "states": {
                name: {
                    "label": definition.label,
                    "description": definition.description,
                    "transitions": dict(definition.transitions),
                }
                for name, definition in self.states.items()
            },
        }


def _load_state_definition(name: str, entry: Any) -> StateDefinition:
    if entry is None:
        return StateDefinition(name=name)
    if not isinstance(entry, Mapping):
        raise InvalidConfigError(f"State '{name}' must be a mapping.")

    transitions = entry.get("transitions")
    if transitions is None:
        transitions = {}
    elif not isinstance(transitions, Mapping):
        raise InvalidConfigError(f"State '{name}' transitions must be a mapping of event to state.")

    return StateDefinition(
        name=name,
        label=str(entry.get("label") or name),
        description=str(entry.get("description") or ""),
        transitions=transitions,
    )


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Result of dispatching an event."""

    previous_state: str
    event: str
    next_state: str
    accepted: bool
    message: str = ""

    @property
    def changed(self) -> bool:
        """Return True if the transition changed the state."""
        return self.accepted and self.previous_state != self.next_state
