"""Player paddles: placement and keyboard-driven vertical movement."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from rong.core import WINDOW_HEIGHT, WINDOW_WIDTH

PADDLE_WIDTH: float = 10.0
PADDLE_HEIGHT: float = 100.0
PADDLE_SPEED: float = 300.0
EDGE_OFFSET: float = 15.0


class PaddleLocation(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Paddle:
    """A paddle centred at (x, y), moved by two named keys."""

    x: float
    y: float
    move_up: str
    move_down: str

    @classmethod
    def at(cls, loc: PaddleLocation, move_up: str, move_down: str) -> Paddle:
        offset = WINDOW_WIDTH / 2.0 - EDGE_OFFSET
        x = -offset if loc is PaddleLocation.LEFT else offset
        return cls(x=x, y=0.0, move_up=move_up, move_down=move_down)

    def update(self, pressed: Collection[str], dt: float) -> None:
        """Move according to the held keys, staying inside the window."""
        limit = WINDOW_HEIGHT / 2.0 - PADDLE_HEIGHT / 2.0
        if self.move_up in pressed:
            self.y = _clamp(self.y + PADDLE_SPEED * dt, -limit, limit)
        if self.move_down in pressed:
            self.y = _clamp(self.y - PADDLE_SPEED * dt, -limit, limit)

    def rect(self) -> tuple[float, float, float, float]:
        """Bounds as (left, bottom, right, top) in world units, y pointing up."""
        half_w = PADDLE_WIDTH / 2.0
        half_h = PADDLE_HEIGHT / 2.0
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def spawn_players() -> list[Paddle]:
    """Left paddle on W/S, right paddle on the arrow keys."""
    return [
        Paddle.at(PaddleLocation.LEFT, "w", "s"),
        Paddle.at(PaddleLocation.RIGHT, "up", "down"),
    ]