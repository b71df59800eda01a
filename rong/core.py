"""Shared game constants, the running state and the events passed between systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from rong.player import Player

WINDOW_WIDTH: float = 1280.0
WINDOW_HEIGHT: float = 720.0


@dataclass
class GameState:
    """Whether a match is in progress or waiting for a restart."""

    running: bool = True

    def check_game_running(self) -> bool:
        return self.running

    def check_game_stopped(self) -> bool:
        return not self.running


@dataclass(frozen=True)
class ResetBall:
    """Put the ball back in the centre, serving towards the given player's side."""

    player: Player


@dataclass(frozen=True)
class AddPoint:
    """Award a point to the given player."""

    player: Player


@dataclass(frozen=True)
class PlayerWin:
    """The given player has reached the winning score."""

    player: Player


GameEvent = Union[ResetBall, AddPoint, PlayerWin]