"""Tests for InputState set semantics."""

from tick_shooter.input import Action, InputState


def test_press_marks_held():
    state = InputState()
    state.press(Action.FIRE)
    assert state.is_held(Action.FIRE)
    assert not state.is_held(Action.MOVE_UP)


def test_press_is_idempotent():
    state = InputState()
    state.press("KeyW")
    state.press("KeyW")
    assert len(state) == 1
    state.release("KeyW")
    assert not state.is_held("KeyW")


def test_release_unknown_is_noop():
    state = InputState()
    state.release("never-pressed")
    assert len(state) == 0


def test_release_is_idempotent():
    state = InputState()
    state.press(Action.MOVE_LEFT)
    state.release(Action.MOVE_LEFT)
    state.release(Action.MOVE_LEFT)
    assert state.held == frozenset()


def test_simultaneous_inputs_do_not_interfere():
    """Diagonal movement while firing: every id reads back independently."""
    state = InputState()
    for action in (Action.MOVE_UP, Action.MOVE_RIGHT, Action.FIRE):
        state.press(action)
    state.release(Action.MOVE_UP)
    assert not state.is_held(Action.MOVE_UP)
    assert state.is_held(Action.MOVE_RIGHT)
    assert state.is_held(Action.FIRE)


def test_any_held():
    state = InputState()
    state.press("ArrowUp")
    assert state.any_held("KeyW", "ArrowUp")
    assert not state.any_held("KeyS", "ArrowDown")
    assert not state.any_held()


def test_clear_drops_everything():
    state = InputState()
    state.press("a")
    state.press("b")
    state.clear()
    assert len(state) == 0


def test_held_is_a_detached_view():
    state = InputState()
    state.press("a")
    view = state.held
    state.press("b")
    assert view == frozenset({"a"})
