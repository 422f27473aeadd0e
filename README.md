# pongpp

A small Pong game built on pygame. You play the right paddle against a CPU
paddle that follows the ball. The first side to reach 10 points wins, and a
win screen then lets you start another match or quit.

## Installing

```
pip install .
```

This installs `pygame` as a dependency.

## Playing

```
pongpp
```

`pongpp --help` shows the usage line; the command takes no other options.

The game opens an 800×800 window titled "Pong++" with a main menu:

- **Start** begins a match.
- **Exit** closes the game.

During a match:

- **Up arrow** moves your paddle up.
- **Down arrow** moves your paddle down.
- **Escape**, or closing the window, quits the game.

A point goes to the CPU when the ball reaches the right edge, and to you when
it reaches the left edge. After each point the ball goes back to the centre
and each of its directions is flipped at random. The ball bounces off the top
and bottom edges and off both paddles.

When either side reaches 10 points the win screen appears. **Start** begins a
fresh match at 0–0; **Exit**, Escape or closing the window ends the game.

## Assets

Images and sounds are loaded from paths relative to the current working
directory, so start `pongpp` from the directory that holds these folders:

- `Graphics/startButton.png`, `Graphics/exitButton.png` — required; the
  menu and win screens cannot be shown without them.
- `Graphics/menuBG.png`, `Graphics/creditsBG.png` — backgrounds; a plain
  black screen is used if they are missing.
- `Audio/bgTheme.mp3`, `Audio/pongTheme.mp3`, `Audio/playerWinsTheme.ogg`,
  `Audio/buttonPressed.ogg`, `Audio/collideSound.ogg` — music and sound
  effects; the game runs silently if they are missing or no audio device is
  available.

## Using the pieces

`pongpp.game` holds the match logic. `Match` steps without a window, so it can
be driven and checked on its own:

```python
import random
from pongpp.game import Match

match = Match(800, 800, random.Random(0))
for _ in range(100):
    match.step(up=False, down=True)
print(match.player_score, match.cpu_score, match.has_winner())
```

`Match.step` returns `True` on a frame where the ball hit a paddle.
The module also provides `Ball`, `Paddle`, `CpuPaddle` and
`check_collision_circle_rect(center, radius, rect)`, which tests a circle
against an `(x, y, width, height)` rectangle.

`pongpp.button.Button(image_path, position, scale)` loads an image, scales it
and reports clicks with `is_pressed(mouse_pos, mouse_pressed)`.
`pongpp.screens.choose_action(start_button, exit_button, mouse_pos,
mouse_pressed)` maps a click to a `MenuAction` (`NONE`, `START` or `EXIT`).

## Running the tests

```
pip install .[test]
pytest
```