# pixelplay

A handful of small arcade games and drawing demos built on pygame.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Games

Every game opens a window and runs until `Esc` is pressed or the window
is closed.

### Snake

```
pixelplay-snake
```

Steer the snake with `W`, `A`, `S` and `D`. Each time the head touches
the red food, the score goes up by one, new food appears at a random
spot, a segment is added to the tail and the snake moves 10% faster.
The score is written to the debug log when it changes.

### Falling blocks

```
pixelplay-tetris
```

Pieces (Z, L, I and O shapes) drop from the top of the window. The first
piece is always an L; later ones are chosen at random. Move the falling
piece sideways with `A`/`D` or the left and right arrow keys; a move is
refused when a settled block lies within one step of any of its blocks.
A piece settles when it reaches the floor or touches a settled block,
and a new piece appears.

### Shooter

```
pixelplay-shooter
```

The player drifts towards the mouse pointer with its rifle always aimed
at it. Hold the left mouse button to fire, at most one bullet every 0.7
seconds; bullets fly towards the point that was aimed at, and the oldest
bullet is removed every 3.5 seconds. One hundred enemies are placed at
random points along the edges of the window.

## Demos

```
pixelplay-demos lines
```

`pixelplay-demos` launches one of the drawing demos, chosen by name:

- `primitives` – a filled rectangle, two crossing lines and scattered points, at double scale, fullscreen
- `lines` – a tree drawn from lines with a flickering star on top
- `points` – a field of points drifting diagonally across the window
- `hello` – a centred, scaled-up text greeting, fullscreen; any key closes it
- `clear` – a fullscreen window that cycles smoothly through colours

The other demos close on `Esc` or when the window is closed.

## What the games do not do

These are small sketches rather than finished games:

- Snake has no walls and no self-collision; the snake cannot die, and the
  score is not drawn on screen.
- Falling blocks has no rotation, no soft or hard drop, no line clearing,
  no scoring and no game over.
- In the shooter the enemies stand still, and bullets do not hit them;
  there is no scoring.

Nothing is saved between runs.

## Using the pieces from Python

The game logic is kept apart from drawing, so it can be driven without
opening a window:

- `pixelplay.geometry` – `Vector2`, `Rect`, `Color` and `check_collision`
  (overlap test; touching edges do not count).
- `pixelplay.snake` – `Snake`, `Direction` and `Food`.
- `pixelplay.tetris` – `Block`, `Tetromino`, `Shape`, `make_tetromino`
  and `random_tetromino`.
- `pixelplay.shooter` – `Player`, `Bullet` and `Enemy`.
- `pixelplay.demos` – `MovingPoints`, `scattered_points`, `star_lines`,
  `cycle_color`, `centered_text_position`, and the `run_*` functions
  behind each demo.

For example:

```python
from pixelplay.geometry import Rect, check_collision
from pixelplay.snake import Direction, Snake

snake = Snake()
snake.set_direction(Direction.DOWN)
snake.move()
print(snake.head)  # Rect(x=100.0, y=150.0, w=50.0, h=50.0)

print(check_collision(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)))  # True
```

`SnakeGame`, `TetrisGame` and `ShooterGame` take an optional
`random.Random` and the current time in seconds, are advanced with
`update` (the shooter's also takes the mouse position and whether the
left button is held), react to key codes with `handle_key` (which
returns `False` for `Esc`), and render onto any pygame surface with
`draw`.