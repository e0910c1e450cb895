"""Small drawing demos: primitives, line art, moving points, centred text and colour cycling."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable

import pygame

from pixelplay.geometry import Color, Vector2

PRIMITIVE_POINT_COUNT = 500
PRIMITIVES_SIZE = (1920, 1080)
PRIMITIVES_SCALE = 2

LINES_SIZE = (1920, 1080)
STAR_RAYS = 360
STAR_SIZE = 50.0
STAR_CENTER = Vector2(450.0, 100.0 - STAR_SIZE / 2.0)

POINTS_WIDTH = 640
POINTS_HEIGHT = 480
POINTS_COUNT = 500
MIN_PIXELS_PER_SECOND = 30.0
MAX_PIXELS_PER_SECOND = 60.0

HELLO_SIZE = (800, 600)
HELLO_MESSAGE = "PapaSmurfie"
HELLO_SCALE = 4.0
DEBUG_CHARACTER_SIZE = 8

CLEAR_SIZE = (800, 600)

_TRUNK_COLOR = Color(143, 96, 1)
_CROWN_COLOR = Color(13, 102, 24)
_SKY_COLOR = Color(202, 241, 252)
_TRUNK_LINES = (
    ((400, 400), (400, 300)),
    ((400, 400), (500, 400)),
    ((500, 400), (500, 300)),
)
_CROWN_LEFT_LINES = (
    ((400, 300), (200, 300)),
    ((200, 300), (300, 200)),
    ((300, 200), (250, 200)),
    ((250, 200), (400, 100)),
)
_CROWN_RIGHT_POLYLINE = (
    (500, 300), (700, 300), (700, 300), (600, 200),
    (600, 200), (650, 200), (650, 200), (500, 100),
)
_MID_LINE = ((400, 300), (500, 300))

FrameDrawer = Callable[[pygame.Surface, float], None]


def _random_speed(rng: random.Random) -> float:
    return MIN_PIXELS_PER_SECOND + rng.random() * (
        MAX_PIXELS_PER_SECOND - MIN_PIXELS_PER_SECOND
    )


class MovingPoints:
    """Points drifting diagonally down-right, respawning on the top or left edge."""

    def __init__(
        self,
        rng: random.Random | None = None,
        width: int = POINTS_WIDTH,
        height: int = POINTS_HEIGHT,
        count: int = POINTS_COUNT,
    ) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.points: list[Vector2] = []
        self.speeds: list[float] = []
        for _ in range(count):
            x = self.rng.random() * width
            y = self.rng.random() * height
            self.points.append(Vector2(x, y))
            self.speeds.append(_random_speed(self.rng))

    def update(self, elapsed: float) -> None:
        """Move every point by ``elapsed`` seconds of travel at its own speed."""
        for index, (point, speed) in enumerate(zip(self.points, self.speeds)):
            distance = elapsed * speed
            moved = Vector2(point.x + distance, point.y + distance)
            if moved.x >= self.width or moved.y >= self.height:
                if self.rng.randrange(2):
                    moved = Vector2(self.rng.random() * self.width, 0.0)
                else:
                    moved = Vector2(0.0, self.rng.random() * self.height)
                self.speeds[index] = _random_speed(self.rng)
            self.points[index] = moved


def scattered_points(
    rng: random.Random | None = None, count: int = PRIMITIVE_POINT_COUNT
) -> list[Vector2]:
    """Random points inside the square from (100, 100) to (700, 700)."""
    rng = rng if rng is not None else random.Random()
    return [
        Vector2(rng.random() * 600.0 + 100.0, rng.random() * 600.0 + 100.0)
        for _ in range(count)
    ]


def star_lines(rng: random.Random | None = None) -> list[tuple[Color, Vector2, Vector2]]:
    """The rays of the star on top of the tree, each with a random colour."""
    rng = rng if rng is not None else random.Random()
    lines = []
    for angle in range(STAR_RAYS):
        color = Color(rng.randrange(256), rng.randrange(256), rng.randrange(256))
        end = Vector2(
            STAR_CENTER.x + math.sin(angle) * STAR_SIZE,
            STAR_CENTER.y + math.cos(angle) * STAR_SIZE,
        )
        lines.append((color, STAR_CENTER, end))
    return lines


def cycle_color(now: float) -> tuple[float, float, float]:
    """RGB components in [0, 1] that cycle smoothly with time ``now`` in seconds."""
    third = math.pi * 2 / 3
    return (
        0.5 + 0.5 * math.sin(now),
        0.5 + 0.5 * math.sin(now + third),
        0.5 + 0.5 * math.sin(now + 2 * third),
    )


def centered_text_position(
    width: float, height: float, scale: float, text: str
) -> tuple[float, float]:
    """Top-left position, in scaled units, that centres ``text`` in the output."""
    if scale <= 0:
        raise ValueError("scale must be positive")
    x = ((width / scale) - DEBUG_CHARACTER_SIZE * len(text)) / 2
    y = ((height / scale) - DEBUG_CHARACTER_SIZE) / 2
    return x, y


def _run_window(
    title: str,
    size: tuple[int, int],
    draw: FrameDrawer,
    *,
    flags: int = 0,
    any_key_quits: bool = False,
) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and (
                    any_key_quits or event.key == pygame.K_ESCAPE
                ):
                    return 0
            draw(screen, pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def _no_arguments(prog: str, description: str, argv: list[str] | None) -> None:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)


def _plot(surface: pygame.Surface, color: Color, points: list[Vector2]) -> None:
    for point in points:
        surface.set_at((int(point.x), int(point.y)), color)


def run_primitives(argv: list[str] | None = None) -> int:
    """Show a filled rectangle, two crossing lines and scattered points."""
    _no_arguments("primitives", "Render basic primitives.", argv)
    points = scattered_points()
    width, height = PRIMITIVES_SIZE
    canvas = pygame.Surface((width // PRIMITIVES_SCALE, height // PRIMITIVES_SCALE))

    def draw(screen: pygame.Surface, now: float) -> None:
        canvas.fill(Color(50, 168, 82))
        pygame.draw.rect(canvas, Color(49, 45, 161), pygame.Rect(100, 100, 400, 400))
        red = Color(199, 24, 56)
        pygame.draw.line(canvas, red, (0, 0), (640, 640))
        pygame.draw.line(canvas, red, (0, 640), (640, 0))
        _plot(canvas, Color(0, 0, 0), points)
        pygame.transform.scale(canvas, screen.get_size(), screen)

    return _run_window(
        "primitives", PRIMITIVES_SIZE, draw, flags=pygame.FULLSCREEN
    )


def run_lines(argv: list[str] | None = None) -> int:
    """Draw a tree out of lines with a flickering star on top."""
    _no_arguments("lines", "Draw a line-art tree.", argv)
    rng = random.Random()

    def draw(screen: pygame.Surface, now: float) -> None:
        screen.fill(_SKY_COLOR)
        for start, end in _TRUNK_LINES:
            pygame.draw.line(screen, _TRUNK_COLOR, start, end)
        for start, end in _CROWN_LEFT_LINES:
            pygame.draw.line(screen, _CROWN_COLOR, start, end)
        pygame.draw.lines(screen, _CROWN_COLOR, False, _CROWN_RIGHT_POLYLINE)
        pygame.draw.line(screen, _CROWN_COLOR, *_MID_LINE)
        for color, start, end in star_lines(rng):
            pygame.draw.line(screen, color, (start.x, start.y), (end.x, end.y))

    return _run_window("lines", LINES_SIZE, draw)


def run_points(argv: list[str] | None = None) -> int:
    """Show white points streaming diagonally across a black window."""
    _no_arguments("points", "Animate moving points.", argv)
    field = MovingPoints()
    last = [pygame.time.get_ticks() / 1000.0]

    def draw(screen: pygame.Surface, now: float) -> None:
        field.update(now - last[0])
        last[0] = now
        screen.fill(Color(0, 0, 0))
        _plot(screen, Color(255, 255, 255), field.points)

    return _run_window("Points", (POINTS_WIDTH, POINTS_HEIGHT), draw)


def run_hello(argv: list[str] | None = None) -> int:
    """Show a centred greeting; any key closes it."""
    _no_arguments("hello", "Show a centred greeting.", argv)
    font_holder: list[pygame.font.Font] = []

    def draw(screen: pygame.Surface, now: float) -> None:
        if not font_holder:
            font_holder.append(pygame.font.Font(None, 11))
        width, height = screen.get_size()
        canvas = pygame.Surface((int(width / HELLO_SCALE), int(height / HELLO_SCALE)))
        canvas.fill(Color(0, 0, 0))
        x, y = centered_text_position(width, height, HELLO_SCALE, HELLO_MESSAGE)
        text = font_holder[0].render(HELLO_MESSAGE, False, Color(255, 255, 255))
        canvas.blit(text, (x, y))
        pygame.transform.scale(canvas, (width, height), screen)

    return _run_window(
        "Hello World", HELLO_SIZE, draw, flags=pygame.FULLSCREEN, any_key_quits=True
    )


def run_clear(argv: list[str] | None = None) -> int:
    """Fill the window with a colour that cycles over time."""
    _no_arguments("clear", "Clear the window to a cycling colour.", argv)

    def draw(screen: pygame.Surface, now: float) -> None:
        screen.fill(tuple(round(component * 255) for component in cycle_color(now)))

    return _run_window("renderer clear", CLEAR_SIZE, draw, flags=pygame.FULLSCREEN)


_DEMOS = {
    "primitives": run_primitives,
    "lines": run_lines,
    "points": run_points,
    "hello": run_hello,
    "clear": run_clear,
}


def main(argv: list[str] | None = None) -> int:
    """Run the demo named on the command line."""
    parser = argparse.ArgumentParser(prog="pixelplay-demo", description="Run a drawing demo.")
    parser.add_argument("demo", choices=sorted(_DEMOS))
    args = parser.parse_args(argv)
    return _DEMOS[args.demo]([])