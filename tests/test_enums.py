import pytest

from rustdrill.drills.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(has_quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_default_state_has_not_quit():
    state = State()
    assert state.has_quit is False
    assert state.position == Point(0, 0)


def test_unknown_message_is_rejected():
    with pytest.raises(TypeError):
        State().process("Quit")