"""Tests for undo/redo history bookkeeping."""
from __future__ import annotations

import pytest

from undo_fsm import StateMachine


@pytest.fixture
def fsm() -> StateMachine:
    return StateMachine({
        "initial": "A",
        "states": {
            "A": {"transitions": {"e1": "B", "go": "B"}},
            "B": {"transitions": {"e2": "C"}},
            "C": {"transitions": {"back": "A"}},
        },
    })


class TestUndoRedo:
    """Test cases for undo and redo."""

    def test_round_trip(self, fsm):
        """undo returns to the previous state, redo re-applies it."""
        fsm.trigger("go")

        assert fsm.undo() is True
        assert fsm.get_state() == "A"
        assert fsm.redo() is True
        assert fsm.get_state() == "B"

    def test_empty_history_guards(self, fsm):
        """undo and redo on a fresh machine return False and change nothing."""
        assert fsm.undo() is False
        assert fsm.get_state() == "A"
        assert fsm.redo() is False
        assert fsm.get_state() == "A"
        assert fsm.undo_history() == ()
        assert fsm.redo_history() == ()

    def test_undo_moves_current_onto_redo(self, fsm):
        """Each undo pushes the state it leaves onto the redo stack."""
        fsm.trigger("e1")
        fsm.trigger("e2")

        fsm.undo()
        fsm.undo()

        assert fsm.get_state() == "A"
        assert fsm.undo_history() == ()
        assert fsm.redo_history() == ("C", "B")
        assert fsm.undo() is False

    def test_redo_replays_in_order(self, fsm):
        """Redo pops the most recently undone state first."""
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.undo()
        fsm.undo()

        assert fsm.redo() is True
        assert fsm.get_state() == "B"
        assert fsm.redo() is True
        assert fsm.get_state() == "C"
        assert fsm.redo() is False

    def test_change_state_invalidates_redo(self, fsm):
        """A direct jump after an undo discards the redo stack."""
        fsm.trigger("go")
        fsm.undo()

        fsm.change_state("B")

        assert fsm.redo() is False
        assert fsm.get_state() == "B"

    def test_trigger_invalidates_redo(self, fsm):
        """An event-driven move after an undo discards the redo stack."""
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.undo()

        fsm.trigger("e2")

        assert not fsm.can_redo()
        assert fsm.undo_history() == ("A", "B")

    def test_failed_move_keeps_redo(self, fsm):
        """A rejected move does not touch the redo stack."""
        fsm.trigger("go")
        fsm.undo()

        fsm.dispatch("unknown")

        assert fsm.redo_history() == ("B",)
        assert fsm.redo() is True

    def test_redo_does_not_push_undo(self, fsm):
        """redo re-applies a state without recording a fresh undo entry."""
        # Arrange
        fsm.trigger("e1")
        fsm.trigger("e2")

        # Act
        fsm.undo()
        fsm.redo()

        # Assert
        assert fsm.get_state() == "C"
        assert fsm.undo_history() == ("A",)
        assert fsm.redo_history() == ()

    def test_asymmetric_undo_depth(self, fsm):
        """undo after undo/redo skips one step further back than it started.

        A -e1-> B -e2-> C, then undo (B), redo (C), undo lands on A rather
        than B because redo left no undo entry for B.
        """
        fsm.trigger("e1")
        fsm.trigger("e2")

        fsm.undo()
        fsm.redo()
        assert fsm.undo() is True

        assert fsm.get_state() == "A"
        assert fsm.undo_history() == ()
        assert fsm.redo_history() == ("C",)
        assert fsm.undo() is False

    def test_undo_after_cycle(self, fsm):
        """History records revisits of the same state."""
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.trigger("back")

        assert fsm.undo_history() == ("A", "B", "C")
        fsm.undo()
        assert fsm.get_state() == "C"


class TestResetAndClear:
    """Test cases for reset and clear_history."""

    def test_reset_keeps_history(self, fsm):
        """reset returns to initial but keeps accumulated history."""
        # Arrange
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.undo()

        # Act
        fsm.reset()

        # Assert
        assert fsm.get_state() == "A"
        assert fsm.undo_history() == ("A",)
        assert fsm.redo_history() == ("C",)

    def test_reset_then_undo(self, fsm):
        """Undo after reset pops history recorded before the reset."""
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.reset()

        assert fsm.undo() is True
        assert fsm.get_state() == "B"
        assert fsm.redo_history() == ("A",)

    def test_reset_on_fresh_machine(self, fsm):
        fsm.reset()

        assert fsm.get_state() == "A"
        assert not fsm.can_undo()

    def test_clear_history(self, fsm):
        """clear_history empties both stacks and keeps the current state."""
        fsm.trigger("e1")
        fsm.trigger("e2")
        fsm.undo()

        fsm.clear_history()

        assert fsm.get_state() == "B"
        assert fsm.undo() is False
        assert fsm.redo() is False
        assert fsm.get_state() == "B"

    def test_history_snapshots_are_copies(self, fsm):
        """Returned history tuples do not track later changes."""
        fsm.trigger("e1")
        snapshot = fsm.undo_history()

        fsm.trigger("e2")

        assert snapshot == ("A",)
        assert fsm.undo_history() == ("A", "B")

    def test_repr(self, fsm):
        fsm.trigger("e1")
        fsm.undo()

        assert repr(fsm) == "StateMachine(state='A', undo=0, redo=1)"
