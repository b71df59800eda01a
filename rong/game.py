"""The whole match: paddles, ball, borders, score and the running state."""

from __future__ import annotations

import random
from collections.abc import Collection, Iterable

from rong.ball import Ball, detect_reset
from rong.border import Border, spawn_borders
from rong.core import AddPoint, GameEvent, GameState, PlayerWin, ResetBall
from rong.paddle import Paddle, spawn_players
from rong.player import Player, Score, check_winner, random_player, win_message
from rong.scoreboard import Scoreboard

SERVE_KEY = "space"


class Game:
    """A match of first-to-eleven, advanced one frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng
        self.state = GameState(running=True)
        self.score = Score()
        self.scoreboard = Scoreboard()
        self.paddles: list[Paddle] = spawn_players()
        self.borders: list[Border] = spawn_borders()
        self.ball = Ball()
        self.winner: Player | None = None

    @property
    def win_message(self) -> str | None:
        return None if self.winner is None else win_message(self.winner)

    def update(
        self,
        dt: float,
        pressed: Collection[str],
        just_pressed: Collection[str],
    ) -> list[GameEvent]:
        """Advance one frame and return the events it produced."""
        if not self.state.check_game_running():
            # The ball keeps moving behind the win screen, but scores nothing.
            self.ball.step(dt, self.paddles, self.borders)
            if just_pressed:
                self.restart()
            return []

        for paddle in self.paddles:
            paddle.update(pressed, dt)
        goals = self.ball.step(dt, self.paddles, self.borders)
        events = detect_reset(SERVE_KEY in just_pressed, goals, self.rng)
        return self.dispatch(events)

    def dispatch(self, events: Iterable[GameEvent]) -> list[GameEvent]:
        """Apply events in order, then any wins they cause; return all applied."""
        handled: list[GameEvent] = []
        for event in events:
            handled.append(event)
            if isinstance(event, ResetBall):
                self.ball.reset(event.player)
            elif isinstance(event, AddPoint):
                total = self.score.add_point(event.player)
                self.scoreboard.set_score(event.player, total)
            elif isinstance(event, PlayerWin):
                self.state.running = False
                self.winner = event.player
        if self.state.check_game_running():
            wins = check_winner(self.score)
            if wins:
                handled.extend(self.dispatch(wins))
        return handled

    def restart(self) -> None:
        """Clear the score and serve a fresh ball in a random direction."""
        self.state.running = True
        self.score.clear()
        self.scoreboard.reset()
        self.winner = None
        self.ball.reset(random_player(self.rng))