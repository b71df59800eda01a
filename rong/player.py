"""Players, their serve direction, and the score they keep."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from rong.core import PlayerWin

WINNING_SCORE = 11
SERVE_SPEED = 400.0


class Player(Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    def start_speed(self) -> tuple[float, float]:
        """Initial ball velocity when serving towards this player's goal side."""
        if self is Player.PLAYER1:
            return (SERVE_SPEED, 0.0)
        return (-SERVE_SPEED, 0.0)

    def label(self) -> str:
        return f"Player {self.value}"


@dataclass
class Score:
    """Points per player; a player with no points yet is absent."""

    scores: dict[Player, int] = field(default_factory=dict)

    def add_point(self, player: Player) -> int:
        """Give the player one point and return their new total."""
        self.scores[player] = self.scores.get(player, 0) + 1
        return self.scores[player]

    def get(self, player: Player) -> int:
        return self.scores.get(player, 0)

    def clear(self) -> None:
        self.scores.clear()


def check_winner(score: Score) -> list[PlayerWin]:
    """Return a win event for every player sitting on exactly the winning score."""
    return [
        PlayerWin(player)
        for player, points in score.scores.items()
        if points == WINNING_SCORE
    ]


def win_message(player: Player) -> str:
    return f"{player.label()} wins!\nPress any key to restart"


def random_player(rng: random.Random | None = None) -> Player:
    """Pick either player with equal chance."""
    source = random if rng is None else rng
    return Player.PLAYER1 if source.random() < 0.5 else Player.PLAYER2