import random

import pygame
import pytest

from pongpp.game import (
    AQUA,
    WHITE,
    Ball,
    CpuPaddle,
    Match,
    Paddle,
    check_collision_circle_rect,
)


@pytest.fixture
def match():
    return Match(800, 800, random.Random(1))


def test_collision_center_inside():
    assert check_collision_circle_rect((5, 5), 1, (0, 0, 10, 10)) is True


def test_collision_far_away():
    assert check_collision_circle_rect((100, 100), 5, (0, 0, 10, 10)) is False


def test_collision_corner_touching():
    assert check_collision_circle_rect((13, 14), 5, (0, 0, 10, 10)) is True


def test_collision_corner_missing():
    assert check_collision_circle_rect((14, 14), 5, (0, 0, 10, 10)) is False


def test_collision_side_within_radius():
    assert check_collision_circle_rect((14, 5), 5, (0, 0, 10, 10)) is True
    assert check_collision_circle_rect((16, 5), 5, (0, 0, 10, 10)) is False


def test_ball_moves(match):
    ball = Ball(x=300, y=300, speed_x=5, speed_y=5, radius=20)
    ball.update(800, 800, match)
    assert (ball.x, ball.y) == (305, 305)
    assert (ball.speed_x, ball.speed_y) == (5, 5)


def test_ball_bounces_off_bottom(match):
    ball = Ball(x=400, y=776, speed_x=5, speed_y=5, radius=20)
    ball.update(800, 800, match)
    assert ball.speed_y == -5


def test_ball_bounces_off_top(match):
    ball = Ball(x=400, y=24, speed_x=5, speed_y=-5, radius=20)
    ball.update(800, 800, match)
    assert ball.speed_y == 5


def test_right_edge_scores_for_cpu(match):
    match.ball = Ball(x=780, y=400, speed_x=5, speed_y=5, radius=20)
    match.ball.update(800, 800, match)
    assert match.cpu_score == 1
    assert match.player_score == 0
    assert (match.ball.x, match.ball.y) == (400, 400)
    assert abs(match.ball.speed_x) == 5 and abs(match.ball.speed_y) == 5


def test_left_edge_scores_for_player(match):
    match.ball = Ball(x=25, y=400, speed_x=-5, speed_y=5, radius=20)
    match.ball.update(800, 800, match)
    assert match.player_score == 1
    assert match.cpu_score == 0


def test_reset_centres_and_keeps_speed_magnitude():
    ball = Ball(x=10, y=10, speed_x=7, speed_y=-3, radius=20)
    ball.reset(640, 480, random.Random(3))
    assert (ball.x, ball.y) == (640 // 2, 480 // 2)
    assert abs(ball.speed_x) == 7 and abs(ball.speed_y) == 3


def test_reset_flips_both_ways_over_many_trials():
    seen = set()
    rng = random.Random(0)
    for _ in range(50):
        ball = Ball(speed_x=5, speed_y=5)
        ball.reset(800, 800, rng)
        seen.add((ball.speed_x, ball.speed_y))
    assert seen == {(5, 5), (5, -5), (-5, 5), (-5, -5)}


def test_paddle_clamped_at_top():
    paddle = Paddle(y=-10, height=120)
    paddle.limit_movement(800)
    assert paddle.y == 0


def test_paddle_clamped_at_bottom():
    paddle = Paddle(y=750, height=120)
    paddle.limit_movement(800)
    assert paddle.y == 800 - paddle.height


def test_paddle_moves_up_and_down():
    paddle = Paddle(y=300, speed=5)
    paddle.update(True, False, 800)
    assert paddle.y == 300 - paddle.speed
    paddle.update(False, True, 800)
    assert paddle.y == 300


def test_paddle_both_keys_cancel():
    paddle = Paddle(y=300, speed=5)
    paddle.update(True, True, 800)
    assert paddle.y == 300


def test_cpu_follows_ball_up_and_down():
    cpu = CpuPaddle(y=300, height=120, speed=5)
    cpu.update(0, 800)
    assert cpu.y == 300 - cpu.speed
    cpu = CpuPaddle(y=300, height=120, speed=5)
    cpu.update(790, 800)
    assert cpu.y == 300 + cpu.speed


def test_cpu_dead_zone():
    cpu = CpuPaddle(y=300, height=120, speed=5)
    cpu.update(cpu.y + cpu.height / 2 + 10, 800)
    assert cpu.y == 300


def test_cpu_respects_limits():
    cpu = CpuPaddle(y=2, height=120, speed=5)
    cpu.update(0, 800)
    assert cpu.y == 0


def test_match_initial_state(match):
    assert (match.ball.x, match.ball.y) == (400, 400)
    assert match.paddle.x + match.paddle.width + 10 == match.width
    assert match.cpu.x == 10
    assert match.paddle.y == match.cpu.y == (800 - 120) / 2
    assert (match.player_score, match.cpu_score) == (0, 0)
    assert match.has_winner() is False


@pytest.mark.parametrize(
    "player, cpu, expected",
    [(10, 0, True), (0, 10, True), (9, 9, False), (11, 3, False)],
)
def test_has_winner(match, player, cpu, expected):
    match.player_score = player
    match.cpu_score = cpu
    assert match.has_winner() is expected


def test_step_bounces_off_player_paddle(match):
    match.ball.x = match.paddle.x - 10
    match.ball.y = match.paddle.y + match.paddle.height / 2
    match.ball.speed_x = 5
    match.ball.speed_y = 0
    assert match.step(False, False) is True
    assert match.ball.speed_x == -5


def test_step_without_contact(match):
    assert match.step(False, False) is False
    assert match.ball.speed_x == 5


def test_draw_renders_scene(match):
    surface = pygame.Surface((800, 800))
    match.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == AQUA
    assert tuple(surface.get_at((400, 100)))[:3] == WHITE
    assert tuple(surface.get_at((400, 400)))[:3] == WHITE
    paddle_point = (int(match.paddle.x) + 1, int(match.paddle.y) + 1)
    assert tuple(surface.get_at(paddle_point))[:3] == WHITE