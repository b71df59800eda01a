"""The ball: serving, movement, bouncing and goal detection."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rong.border import Border
from rong.core import AddPoint, GameEvent, ResetBall
from rong.paddle import Paddle
from rong.player import Player, random_player

BALL_RADIUS: float = 10.0
RESTITUTION: float = 1.02

_Rect = tuple[float, float, float, float]


@dataclass
class Ball:
    """A ball centred at (x, y) moving with velocity (vx, vy)."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    def reset(self, player: Player) -> None:
        """Return to the centre and serve towards the given player's side."""
        self.x = 0.0
        self.y = 0.0
        self.vx, self.vy = player.start_speed()

    def step(
        self,
        dt: float,
        paddles: Iterable[Paddle],
        borders: Iterable[Border],
    ) -> list[Player]:
        """Advance by ``dt`` seconds, bounce off solids, return goals touched."""
        self.x += self.vx * dt
        self.y += self.vy * dt

        borders = list(borders)
        solids: list[_Rect] = [p.rect() for p in paddles]
        solids.extend(b.rect() for b in borders if not b.is_sensor)
        for rect in solids:
            self._bounce(rect)

        return [
            b.goal
            for b in borders
            if b.goal is not None and self._contact(b.rect()) is not None
        ]

    def _contact(self, rect: _Rect) -> tuple[float, float, float] | None:
        """Outward normal and penetration depth if the ball overlaps ``rect``."""
        left, bottom, right, top = rect
        cx = min(max(self.x, left), right)
        cy = min(max(self.y, bottom), top)
        dx = self.x - cx
        dy = self.y - cy
        dist2 = dx * dx + dy * dy
        if dist2 >= BALL_RADIUS * BALL_RADIUS:
            return None
        if dist2 > 0.0:
            dist = math.sqrt(dist2)
            return (dx / dist, dy / dist, BALL_RADIUS - dist)
        sides: Sequence[tuple[float, float, float]] = (
            (-1.0, 0.0, self.x - left),
            (1.0, 0.0, right - self.x),
            (0.0, -1.0, self.y - bottom),
            (0.0, 1.0, top - self.y),
        )
        nx, ny, gap = min(sides, key=lambda side: side[2])
        return (nx, ny, gap + BALL_RADIUS)

    def _bounce(self, rect: _Rect) -> None:
        contact = self._contact(rect)
        if contact is None:
            return
        nx, ny, depth = contact
        self.x += nx * depth
        self.y += ny * depth
        normal_speed = self.vx * nx + self.vy * ny
        if normal_speed < 0.0:
            self.vx -= (1.0 + RESTITUTION) * normal_speed * nx
            self.vy -= (1.0 + RESTITUTION) * normal_speed * ny


def detect_reset(
    space_pressed: bool,
    goals_hit: Iterable[Player],
    rng: random.Random | None = None,
) -> list[GameEvent]:
    """Events for a manual re-serve and for every goal the ball touched."""
    events: list[GameEvent] = []
    if space_pressed:
        events.append(ResetBall(random_player(rng)))
    for player in goals_hit:
        events.append(ResetBall(player))
        events.append(AddPoint(player))
    return events