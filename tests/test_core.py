import dataclasses

import pytest

from rong.core import AddPoint, GameState, PlayerWin, ResetBall
from rong.player import Player


def test_new_state_is_running():
    state = GameState()
    assert state.check_game_running() is True
    assert state.check_game_stopped() is False


def test_stopped_state():
    state = GameState(running=False)
    assert state.check_game_running() is False
    assert state.check_game_stopped() is True


def test_toggle_state():
    state = GameState()
    state.running = False
    assert state.check_game_stopped()
    state.running = True
    assert state.check_game_running()


def test_events_compare_by_kind_and_player():
    assert ResetBall(Player.PLAYER1) == ResetBall(Player.PLAYER1)
    assert ResetBall(Player.PLAYER1) != ResetBall(Player.PLAYER2)
    assert ResetBall(Player.PLAYER1) != AddPoint(Player.PLAYER1)
    assert PlayerWin(Player.PLAYER2).player is Player.PLAYER2


def test_events_are_immutable():
    event = AddPoint(Player.PLAYER1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.player = Player.PLAYER2  # type: ignore[misc]
    assert event.player is Player.PLAYER1
    assert event == AddPoint(Player.PLAYER1)


def test_events_are_hashable():
    events = {AddPoint(Player.PLAYER1), AddPoint(Player.PLAYER1), PlayerWin(Player.PLAYER1)}
    assert len(events) == 2