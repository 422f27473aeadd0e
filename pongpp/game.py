"""Pong match model: ball, paddles, scoring and rendering."""

from __future__ import annotations

import functools
import random
from dataclasses import dataclass, field

import pygame

WHITE = (255, 255, 255)
AQUA = (4, 195, 221)
WINNING_SCORE = 10
SCORE_FONT_SIZE = 80


def check_collision_circle_rect(center, radius, rect) -> bool:
    """Return True when a circle overlaps an (x, y, width, height) rectangle."""
    cx, cy = center[0], center[1]
    rx, ry, rw, rh = rect
    half_w = rw / 2
    half_h = rh / 2
    dx = abs(cx - (rx + half_w))
    dy = abs(cy - (ry + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


@dataclass
class Ball:
    x: float = 400.0
    y: float = 400.0
    speed_x: int = 5
    speed_y: int = 5
    radius: int = 20

    def update(self, width, height, match) -> None:
        """Move the ball, bounce off the top and bottom, and award points."""
        self.x += self.speed_x
        self.y += self.speed_y

        if self.y + self.radius >= height or self.y - self.radius <= 0:
            self.speed_y *= -1

        if self.x + self.radius >= width:
            match.cpu_score += 1
            self.reset(width, height, match.rng)
        elif self.x - self.radius <= 0:
            match.player_score += 1
            self.reset(width, height, match.rng)

    def reset(self, width, height, rng) -> None:
        """Put the ball back in the centre with randomly flipped directions."""
        self.x = width // 2
        self.y = height // 2
        self.speed_x *= rng.choice((-1, 1))
        self.speed_y *= rng.choice((-1, 1))

    @property
    def center(self) -> tuple[float, float]:
        return (self.x, self.y)

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, WHITE, (int(self.x), int(self.y)), self.radius)


@dataclass
class Paddle:
    x: float = 0.0
    y: float = 0.0
    width: float = 25.0
    height: float = 120.0
    speed: int = 5

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def limit_movement(self, screen_height) -> None:
        """Keep the paddle inside the screen vertically."""
        if self.y < 0:
            self.y = 0
        if self.y > screen_height - self.height:
            self.y = screen_height - self.height

    def update(self, up, down, screen_height) -> None:
        """Move by the keys held this frame."""
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed
        self.limit_movement(screen_height)

    def draw(self, surface) -> None:
        pygame.draw.rect(
            surface,
            WHITE,
            (int(self.x), int(self.y), int(self.width), int(self.height)),
        )


class CpuPaddle(Paddle):
    """A paddle that follows the ball with a small dead zone."""

    def update(self, ball_y, screen_height) -> None:  # type: ignore[override]
        target = int(ball_y)
        middle = self.y + self.height / 2
        if target < middle - 10:
            self.y -= self.speed
        elif target > middle + 10:
            self.y += self.speed
        self.limit_movement(screen_height)


@functools.lru_cache(maxsize=None)
def _score_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, SCORE_FONT_SIZE)


@dataclass
class Match:
    width: int
    height: int
    rng: random.Random = field(default_factory=random.Random)
    player_score: int = 0
    cpu_score: int = 0

    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.player_score = 0
        self.cpu_score = 0

        self.ball = Ball(x=400, y=400, speed_x=5, speed_y=5, radius=20)

        self.paddle = Paddle(width=25, height=120, speed=5)
        self.paddle.x = width - self.paddle.width - 10
        self.paddle.y = (height - self.paddle.height) / 2

        self.cpu = CpuPaddle(width=25, height=120, speed=5)
        self.cpu.x = 10
        self.cpu.y = (height - self.paddle.height) / 2

    def step(self, up, down) -> bool:
        """Advance one frame; return True if the ball hit a paddle."""
        self.ball.update(self.width, self.height, self)
        self.paddle.update(up, down, self.height)
        self.cpu.update(self.ball.y, self.height)

        hit = False
        for paddle in (self.paddle, self.cpu):
            if check_collision_circle_rect(self.ball.center, self.ball.radius, paddle.rect):
                self.ball.speed_x *= -1
                hit = True
        return hit

    def has_winner(self) -> bool:
        return WINNING_SCORE in (self.cpu_score, self.player_score)

    def draw(self, surface) -> None:
        surface.fill(AQUA)
        pygame.draw.line(surface, WHITE, (400, 0), (400, 800))
        self.ball.draw(surface)
        self.paddle.draw(surface)
        self.cpu.draw(surface)
        font = _score_font()
        surface.blit(font.render(str(self.cpu_score), True, WHITE), (200, 20))
        surface.blit(font.render(str(self.player_score), True, WHITE), (600, 20))