import pytest

from rong.border import Border, BorderLocation, spawn_borders
from rong.core import WINDOW_HEIGHT, WINDOW_WIDTH
from rong.player import Player


def test_horizontal_borders_are_solid():
    top = Border.horizontal(BorderLocation.TOP)
    bottom = Border.horizontal(BorderLocation.BOTTOM)
    assert top.y == WINDOW_HEIGHT / 2
    assert bottom.y == -WINDOW_HEIGHT / 2
    assert not top.is_sensor
    assert bottom.goal is None


def test_horizontal_spans_window_width():
    left, _, right, _ = Border.horizontal(BorderLocation.TOP).rect()
    assert right - left == pytest.approx(WINDOW_WIDTH)


def test_vertical_borders_are_goals():
    left = Border.vertical(BorderLocation.LEFT)
    right = Border.vertical(BorderLocation.RIGHT)
    assert left.x == -WINDOW_WIDTH / 2
    assert right.x == WINDOW_WIDTH / 2
    assert left.goal is Player.PLAYER2
    assert right.goal is Player.PLAYER1
    assert left.is_sensor and right.is_sensor


def test_vertical_spans_window_height():
    _, bottom, _, top = Border.vertical(BorderLocation.RIGHT).rect()
    assert top - bottom == pytest.approx(WINDOW_HEIGHT)


def test_mismatched_location_sits_at_origin():
    border = Border.horizontal(BorderLocation.LEFT)
    assert (border.x, border.y) == (0.0, 0.0)
    side = Border.vertical(BorderLocation.TOP)
    assert (side.x, side.y) == (0.0, 0.0)
    assert side.goal is Player.PLAYER1


def test_spawn_borders():
    borders = spawn_borders()
    assert len(borders) == 4
    assert [b.goal for b in borders if b.is_sensor] == [Player.PLAYER2, Player.PLAYER1]