"""The score display shown at the top of the window."""

from __future__ import annotations

from dataclasses import dataclass, field

from rong.player import Player

SEPARATOR: str = "|"
SCORE_FONT_SIZE: int = 32
SEPARATOR_FONT_SIZE: int = 42
BACKGROUND: tuple[float, float, float, float] = (0.2, 0.2, 0.2, 0.5)
PADDING: float = 20.0
WIDTH_PERCENT: float = 30.0
HEIGHT_PERCENT: float = 15.0


def _zeroes() -> dict[Player, str]:
    return {player: "0" for player in Player}


@dataclass
class Scoreboard:
    """Text shown for each player's score, separated by a bar."""

    labels: dict[Player, str] = field(default_factory=_zeroes)

    def set_score(self, player: Player, points: int) -> None:
        self.labels[player] = str(points)

    def reset(self) -> None:
        self.labels = _zeroes()

    def texts(self) -> tuple[str, str, str]:
        """Left score, separator, right score, in display order."""
        return (self.labels[Player.PLAYER1], SEPARATOR, self.labels[Player.PLAYER2])