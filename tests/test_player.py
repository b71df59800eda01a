import random

from rong.core import PlayerWin
from rong.player import (
    WINNING_SCORE,
    Player,
    Score,
    check_winner,
    random_player,
    win_message,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_start_speed_directions():
    assert Player.PLAYER1.start_speed() == (400.0, 0.0)
    assert Player.PLAYER2.start_speed() == (-400.0, 0.0)


def test_start_speeds_are_mirrored():
    vx1, vy1 = Player.PLAYER1.start_speed()
    vx2, vy2 = Player.PLAYER2.start_speed()
    assert vx1 == -vx2
    assert vy1 == vy2


def test_labels_and_win_message():
    assert Player.PLAYER1.label() == "Player 1"
    assert Player.PLAYER2.label() == "Player 2"
    assert win_message(Player.PLAYER1) == "Player 1 wins!\nPress any key to restart"
    assert win_message(Player.PLAYER2).startswith("Player 2 wins!")


def test_score_defaults_to_zero():
    score = Score()
    assert score.get(Player.PLAYER1) == 0
    assert score.get(Player.PLAYER2) == 0


def test_add_point_returns_new_total():
    score = Score()
    totals = [score.add_point(Player.PLAYER1) for _ in range(3)]
    assert totals == [1, 2, 3]
    assert score.get(Player.PLAYER1) == 3
    assert score.get(Player.PLAYER2) == 0


def test_clear_resets_all_scores():
    score = Score()
    score.add_point(Player.PLAYER1)
    score.add_point(Player.PLAYER2)
    score.clear()
    assert score.get(Player.PLAYER1) == 0
    assert score.scores == {}


def test_no_winner_below_winning_score():
    score = Score()
    for _ in range(WINNING_SCORE - 1):
        score.add_point(Player.PLAYER2)
    assert check_winner(score) == []


def test_winner_at_exactly_winning_score():
    score = Score()
    for _ in range(11):
        score.add_point(Player.PLAYER2)
    assert check_winner(score) == [PlayerWin(Player.PLAYER2)]


def test_no_winner_past_winning_score():
    score = Score()
    for _ in range(WINNING_SCORE + 1):
        score.add_point(Player.PLAYER1)
    assert check_winner(score) == []


def test_random_player_uses_rng():
    assert random_player(_FixedRng(0.1)) is Player.PLAYER1
    assert random_player(_FixedRng(0.9)) is Player.PLAYER2


def test_random_player_reaches_both():
    rng = random.Random(1234)
    picks = {random_player(rng) for _ in range(200)}
    assert picks == {Player.PLAYER1, Player.PLAYER2}