import math

import pytest

from aceescape.breakout import (
    BALL_DIAMETER,
    BALL_SPEED,
    BALL_STARTING_POSITION,
    BOTTOM_WALL,
    BRICK_SIZE,
    GAP_BETWEEN_BRICKS,
    GAP_BETWEEN_BRICKS_AND_CEILING,
    GAP_BETWEEN_BRICKS_AND_SIDES,
    GAP_BETWEEN_PADDLE_AND_BRICKS,
    LEFT_WALL,
    PADDLE_LEFT_BOUND,
    PADDLE_RIGHT_BOUND,
    PADDLE_Y,
    RIGHT_WALL,
    TOP_WALL,
    WALL_THICKNESS,
    Breakout,
    Collision,
    WallLocation,
    ball_collision,
    brick_layout,
)
from aceescape.ships import Key

RADIUS = BALL_DIAMETER / 2.0


def test_no_collision_when_apart():
    assert ball_collision((0.0, 0.0), 15.0, (100.0, 0.0), (10.0, 10.0)) is None


@pytest.mark.parametrize(
    "center, side",
    [
        ((-20.0, 0.0), Collision.LEFT),
        ((20.0, 0.0), Collision.RIGHT),
        ((0.0, 20.0), Collision.TOP),
        ((0.0, -20.0), Collision.BOTTOM),
        ((-25.0, 0.0), Collision.LEFT),
        ((-20.0, -20.0), Collision.BOTTOM),
    ],
)
def test_collision_side(center, side):
    assert ball_collision(center, 15.0, (0.0, 0.0), (10.0, 10.0)) is side


def test_wall_positions():
    assert WallLocation.LEFT.position() == (LEFT_WALL, 0.0)
    assert WallLocation.RIGHT.position() == (RIGHT_WALL, 0.0)
    assert WallLocation.TOP.position() == (0.0, TOP_WALL)
    assert WallLocation.BOTTOM.position() == (0.0, BOTTOM_WALL)


def test_walls_close_the_corners():
    left_w, left_h = WallLocation.LEFT.size()
    top_w, top_h = WallLocation.TOP.size()
    assert WallLocation.LEFT.size() == WallLocation.RIGHT.size()
    assert WallLocation.TOP.size() == WallLocation.BOTTOM.size()
    assert left_w == WALL_THICKNESS and top_h == WALL_THICKNESS
    assert left_h / 2.0 == pytest.approx(TOP_WALL + WALL_THICKNESS / 2.0)
    assert top_w / 2.0 == pytest.approx(RIGHT_WALL + WALL_THICKNESS / 2.0)


def test_bricks_fit_inside_arena():
    bricks = brick_layout()
    xs = [x for x, _ in bricks]
    ys = [y for _, y in bricks]
    assert bricks
    assert min(xs) - BRICK_SIZE[0] / 2 >= LEFT_WALL + GAP_BETWEEN_BRICKS_AND_SIDES
    assert max(xs) + BRICK_SIZE[0] / 2 <= RIGHT_WALL - GAP_BETWEEN_BRICKS_AND_SIDES
    assert max(ys) + BRICK_SIZE[1] / 2 <= TOP_WALL - GAP_BETWEEN_BRICKS_AND_CEILING
    assert min(ys) - BRICK_SIZE[1] / 2 == pytest.approx(PADDLE_Y + GAP_BETWEEN_PADDLE_AND_BRICKS)


def test_bricks_form_centred_grid():
    bricks = brick_layout()
    columns = sorted({x for x, _ in bricks})
    rows = sorted({y for _, y in bricks})
    assert len(bricks) == len(columns) * len(rows)
    assert sum(columns) / len(columns) == pytest.approx((LEFT_WALL + RIGHT_WALL) / 2.0)
    for a, b in zip(columns, columns[1:]):
        assert b - a == pytest.approx(BRICK_SIZE[0] + GAP_BETWEEN_BRICKS)
    for a, b in zip(rows, rows[1:]):
        assert b - a == pytest.approx(BRICK_SIZE[1] + GAP_BETWEEN_BRICKS)


def test_new_game_state():
    game = Breakout()
    assert game.score == 0
    assert game.bricks == brick_layout()
    assert math.hypot(*game.velocity) == pytest.approx(BALL_SPEED)
    assert game.ball == (BALL_STARTING_POSITION[0], BALL_STARTING_POSITION[1])


def test_ball_moves_with_velocity():
    game = Breakout()
    vx, vy = game.velocity
    assert game.update(0.01, set()) == 0
    assert game.ball[0] == pytest.approx(BALL_STARTING_POSITION[0] + vx * 0.01)
    assert game.ball[1] == pytest.approx(BALL_STARTING_POSITION[1] + vy * 0.01)


def test_paddle_clamped_to_bounds():
    game = Breakout()
    for _ in range(200):
        game.update(0.0, {Key.LEFT})
        game.paddle_x -= 0.0
    game.update(5.0 / 1.0 * 0.0, {Key.LEFT})
    game.velocity = (0.0, 0.0)
    game.update(2.0, {Key.LEFT})
    assert game.paddle_x == PADDLE_LEFT_BOUND
    game.update(4.0, {Key.RIGHT})
    assert game.paddle_x == PADDLE_RIGHT_BOUND


def test_brick_hit_scores_and_reflects():
    game = Breakout()
    bx, by = game.bricks[0]
    game.ball = (bx, by - BRICK_SIZE[1] / 2 - RADIUS + 1.0)
    game.velocity = (0.0, 100.0)
    before = len(game.bricks)
    assert game.update(0.0, set()) == 1
    assert game.score == 1
    assert len(game.bricks) == before - 1
    assert (bx, by) not in game.bricks
    assert game.velocity == (0.0, -100.0)
    assert game.sounds_played == 1


def test_wall_hit_reflects_without_score():
    game = Breakout()
    game.ball = (RIGHT_WALL - WALL_THICKNESS / 2 - RADIUS + 1.0, 0.0)
    game.velocity = (100.0, 0.0)
    assert game.update(0.0, set()) == 1
    assert game.velocity == (-100.0, 0.0)
    assert game.score == 0


def test_long_run_keeps_ball_in_arena():
    game = Breakout()
    total = len(game.bricks)
    for _ in range(3000):
        game.update(1.0 / 64.0, set())
        assert LEFT_WALL < game.ball[0] < RIGHT_WALL
        assert BOTTOM_WALL < game.ball[1] < TOP_WALL
    assert math.hypot(*game.velocity) == pytest.approx(BALL_SPEED)
    assert game.score == total - len(game.bricks)
    assert game.score > 0