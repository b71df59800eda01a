# rong

A two-player Pong game for one keyboard. A player scores a point whenever the
ball gets past the other player's paddle. The first to reach 11 points wins.

## Installing

```
pip install .
```

## Playing

```
rong
```

This opens a 1280×720 window titled "Rong", with a paddle on each side and a
scoreboard at the top. The game runs at 60 frames per second until the window
is closed.

| Action    | Player 1 (left) | Player 2 (right) |
|-----------|-----------------|------------------|
| Move up   | `W`             | `↑`              |
| Move down | `S`             | `↓`              |

- `Space` puts the ball back in the centre and serves it left or right at
  random.
- The ball bounces off the top and bottom walls and off the paddles, gaining a
  little speed with every bounce.
- When the ball reaches the left or right edge, the other player scores and the
  ball is served again towards that edge.
- When a player reaches 11 points, a message names the winner. Press any key to
  clear the scores and start a new match.

## Using the pieces

The game logic runs without a window, so it can be driven directly. Keys are
given by name: `"w"`, `"s"`, `"up"`, `"down"` and `"space"`.

```python
import random

from rong.game import Game

game = Game(rng=random.Random(1))
events = game.update(1 / 60, pressed={"w"}, just_pressed={"space"})
print(events, game.scoreboard.texts())
```

- `rong.game.Game` holds a whole match. `update` advances one frame and returns
  the events it produced (`ResetBall`, `AddPoint`, `PlayerWin` from
  `rong.core`); `dispatch` applies events directly; `restart` clears the score
  and serves a new ball. `win_message` is set once someone has won.
- `rong.player.Score` and `rong.player.check_winner` keep the points;
  `rong.scoreboard.Scoreboard` holds the text shown for them.
- `rong.ball.Ball`, `rong.paddle.Paddle` and `rong.border.Border` model the
  objects on the field; `rong.ball.detect_reset` turns a serve key press and
  goals touched into events.
- `rong.app.main` opens the window; `rong.app.map_keys` and `rong.app.to_screen`
  convert key codes and coordinates for it.

## What it does not do

There is no computer opponent, no network play, no sound and no saved scores:
two people play on one keyboard, and a match's score lasts only while the
window is open.

## Running the tests

```
pip install ".[test]"
pytest
```