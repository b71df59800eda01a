"""Window borders: solid walls at top and bottom, goal sensors at the sides."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rong.core import WINDOW_HEIGHT, WINDOW_WIDTH
from rong.player import Player

BORDER_HALF_THICKNESS: float = 3.0


class BorderLocation(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Border:
    """An axis-aligned box centred at (x, y).

    A border with a ``goal`` is a sensor: the ball passes through it and the
    named player scores.
    """

    x: float
    y: float
    half_width: float
    half_height: float
    goal: Player | None = None

    @property
    def is_sensor(self) -> bool:
        return self.goal is not None

    @classmethod
    def horizontal(cls, loc: BorderLocation) -> Border:
        if loc is BorderLocation.TOP:
            y = WINDOW_HEIGHT / 2.0
        elif loc is BorderLocation.BOTTOM:
            y = -(WINDOW_HEIGHT / 2.0)
        else:
            y = 0.0
        return cls(x=0.0, y=y, half_width=WINDOW_WIDTH / 2.0, half_height=BORDER_HALF_THICKNESS)

    @classmethod
    def vertical(cls, loc: BorderLocation) -> Border:
        if loc is BorderLocation.LEFT:
            x, goal = -(WINDOW_WIDTH / 2.0), Player.PLAYER2
        elif loc is BorderLocation.RIGHT:
            x, goal = WINDOW_WIDTH / 2.0, Player.PLAYER1
        else:
            x, goal = 0.0, Player.PLAYER1
        return cls(
            x=x,
            y=0.0,
            half_width=BORDER_HALF_THICKNESS,
            half_height=WINDOW_HEIGHT / 2.0,
            goal=goal,
        )

    def rect(self) -> tuple[float, float, float, float]:
        """Bounds as (left, bottom, right, top) in world units, y pointing up."""
        return (
            self.x - self.half_width,
            self.y - self.half_height,
            self.x + self.half_width,
            self.y + self.half_height,
        )


def spawn_borders() -> list[Border]:
    return [
        Border.horizontal(BorderLocation.TOP),
        Border.horizontal(BorderLocation.BOTTOM),
        Border.vertical(BorderLocation.LEFT),
        Border.vertical(BorderLocation.RIGHT),
    ]