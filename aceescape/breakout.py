"""A small Breakout game: paddle, ball, bricks, walls and a scoreboard."""

from __future__ import annotations

import argparse
import math
from collections.abc import Collection, Iterator, Sequence
from enum import Enum, auto
from pathlib import Path

import pygame

from aceescape.ships import Key

PADDLE_SIZE = (120.0, 20.0)
GAP_BETWEEN_PADDLE_AND_FLOOR = 60.0
PADDLE_SPEED = 500.0
PADDLE_PADDING = 10.0

BALL_STARTING_POSITION = (0.0, -50.0, 1.0)
BALL_DIAMETER = 30.0
BALL_SPEED = 400.0
INITIAL_BALL_DIRECTION = (0.5, -0.5)

WALL_THICKNESS = 10.0
LEFT_WALL = -450.0
RIGHT_WALL = 450.0
BOTTOM_WALL = -300.0
TOP_WALL = 300.0

BRICK_SIZE = (100.0, 30.0)
GAP_BETWEEN_PADDLE_AND_BRICKS = 270.0
GAP_BETWEEN_BRICKS = 5.0
GAP_BETWEEN_BRICKS_AND_CEILING = 20.0
GAP_BETWEEN_BRICKS_AND_SIDES = 20.0

BACKGROUND_COLOR = (0.9, 0.9, 0.9)
PADDLE_COLOR = (0.3, 0.3, 0.7)
BALL_COLOR = (1.0, 0.5, 0.5)
BRICK_COLOR = (0.5, 0.5, 1.0)
WALL_COLOR = (0.8, 0.8, 0.8)
TEXT_COLOR = (0.5, 0.5, 1.0)

SCOREBOARD_FONT_SIZE = 33.0
SCOREBOARD_TEXT_PADDING = 5.0
SCORE_COLOR = (1.0, 0.5, 0.5)

FIXED_HZ = 64.0
COLLISION_SOUND = "breakout_collision.ogg"
ASSET_DIR = Path("assets")

PADDLE_Y = BOTTOM_WALL + GAP_BETWEEN_PADDLE_AND_FLOOR
PADDLE_LEFT_BOUND = LEFT_WALL + WALL_THICKNESS / 2.0 + PADDLE_SIZE[0] / 2.0 + PADDLE_PADDING
PADDLE_RIGHT_BOUND = RIGHT_WALL - WALL_THICKNESS / 2.0 - PADDLE_SIZE[0] / 2.0 - PADDLE_PADDING

Vec2 = tuple[float, float]


class Collision(Enum):
    """Side of a box that the ball hit."""

    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()


class WallLocation(Enum):
    """Which side of the arena a wall sits on."""

    LEFT = auto()
    RIGHT = auto()
    BOTTOM = auto()
    TOP = auto()

    def position(self) -> Vec2:
        """Centre of the wall."""
        return {
            WallLocation.LEFT: (LEFT_WALL, 0.0),
            WallLocation.RIGHT: (RIGHT_WALL, 0.0),
            WallLocation.BOTTOM: (0.0, BOTTOM_WALL),
            WallLocation.TOP: (0.0, TOP_WALL),
        }[self]

    def size(self) -> Vec2:
        """Width and height of the wall."""
        arena_height = TOP_WALL - BOTTOM_WALL
        arena_width = RIGHT_WALL - LEFT_WALL
        if self in (WallLocation.LEFT, WallLocation.RIGHT):
            return (WALL_THICKNESS, arena_height + WALL_THICKNESS)
        return (arena_width + WALL_THICKNESS, WALL_THICKNESS)


def ball_collision(
    center: Sequence[float], radius: float, box_center: Sequence[float], half_size: Sequence[float]
) -> Collision | None:
    """Return the side of the box the ball touches, or None if they do not touch."""
    cx, cy = center[0], center[1]
    closest_x = min(max(cx, box_center[0] - half_size[0]), box_center[0] + half_size[0])
    closest_y = min(max(cy, box_center[1] - half_size[1]), box_center[1] + half_size[1])
    offset_x, offset_y = cx - closest_x, cy - closest_y
    if offset_x * offset_x + offset_y * offset_y > radius * radius:
        return None
    if abs(offset_x) > abs(offset_y):
        return Collision.LEFT if offset_x < 0.0 else Collision.RIGHT
    return Collision.TOP if offset_y > 0.0 else Collision.BOTTOM


def brick_layout() -> list[Vec2]:
    """Centres of all bricks that fit the arena, row by row from the bottom."""
    total_width = (RIGHT_WALL - LEFT_WALL) - 2.0 * GAP_BETWEEN_BRICKS_AND_SIDES
    bottom_edge = PADDLE_Y + GAP_BETWEEN_PADDLE_AND_BRICKS
    total_height = TOP_WALL - bottom_edge - GAP_BETWEEN_BRICKS_AND_CEILING
    if total_width <= 0.0 or total_height <= 0.0:
        raise ValueError("the arena leaves no room for bricks")

    n_columns = math.floor(total_width / (BRICK_SIZE[0] + GAP_BETWEEN_BRICKS))
    n_rows = math.floor(total_height / (BRICK_SIZE[1] + GAP_BETWEEN_BRICKS))
    n_vertical_gaps = n_columns - 1

    center = (LEFT_WALL + RIGHT_WALL) / 2.0
    left_edge = (
        center
        - (n_columns / 2.0 * BRICK_SIZE[0])
        - n_vertical_gaps / 2.0 * GAP_BETWEEN_BRICKS
    )
    offset_x = left_edge + BRICK_SIZE[0] / 2.0
    offset_y = bottom_edge + BRICK_SIZE[1] / 2.0
    return [
        (
            offset_x + column * (BRICK_SIZE[0] + GAP_BETWEEN_BRICKS),
            offset_y + row * (BRICK_SIZE[1] + GAP_BETWEEN_BRICKS),
        )
        for row in range(n_rows)
        for column in range(n_columns)
    ]


class Breakout:
    """Game state of one Breakout session."""

    def __init__(self) -> None:
        self.paddle_x = 0.0
        self.paddle_y = PADDLE_Y
        self.ball: Vec2 = (BALL_STARTING_POSITION[0], BALL_STARTING_POSITION[1])
        dx, dy = INITIAL_BALL_DIRECTION
        length = math.hypot(dx, dy)
        self.velocity: Vec2 = (dx / length * BALL_SPEED, dy / length * BALL_SPEED)
        self.bricks = brick_layout()
        self.score = 0
        self.sounds_played = 0

    def _colliders(self) -> Iterator[tuple[Vec2, Vec2, bool]]:
        for wall in WallLocation:
            width, height = wall.size()
            yield wall.position(), (width / 2.0, height / 2.0), False
        yield (self.paddle_x, self.paddle_y), (PADDLE_SIZE[0] / 2.0, PADDLE_SIZE[1] / 2.0), False
        half_brick = (BRICK_SIZE[0] / 2.0, BRICK_SIZE[1] / 2.0)
        for brick in self.bricks:
            yield brick, half_brick, True

    def update(self, dt: float, keys: Collection[Key]) -> int:
        """Run one fixed step of ``dt`` seconds; return the number of collisions."""
        vx, vy = self.velocity
        self.ball = (self.ball[0] + vx * dt, self.ball[1] + vy * dt)

        direction = 0.0
        if Key.LEFT in keys:
            direction -= 1.0
        if Key.RIGHT in keys:
            direction += 1.0
        new_x = self.paddle_x + direction * PADDLE_SPEED * dt
        self.paddle_x = min(max(new_x, PADDLE_LEFT_BOUND), PADDLE_RIGHT_BOUND)

        collisions = 0
        remaining: list[Vec2] = []
        for center, half_size, is_brick in list(self._colliders()):
            side = ball_collision(self.ball, BALL_DIAMETER / 2.0, center, half_size)
            if side is None:
                if is_brick:
                    remaining.append(center)
                continue
            collisions += 1
            if is_brick:
                self.score += 1
            vx, vy = self.velocity
            if side is Collision.LEFT and vx > 0.0 or side is Collision.RIGHT and vx < 0.0:
                vx = -vx
            if side is Collision.TOP and vy < 0.0 or side is Collision.BOTTOM and vy > 0.0:
                vy = -vy
            self.velocity = (vx, vy)
        self.bricks = remaining

        if collisions:
            self.sounds_played += 1
        return collisions


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play Breakout until it is closed."""
    parser = argparse.ArgumentParser(prog="breakout", description="Play a game of Breakout.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((1280, 720))
        pygame.display.set_caption("Breakout")
        font = pygame.font.Font(None, round(SCOREBOARD_FONT_SIZE))
        clock = pygame.time.Clock()
        sound: pygame.mixer.Sound | None
        try:
            pygame.mixer.init()
            sound = pygame.mixer.Sound(str(ASSET_DIR / COLLISION_SOUND))
        except (pygame.error, FileNotFoundError):
            sound = None

        game = Breakout()
        step = 1.0 / FIXED_HZ
        accumulator = 0.0
        width, height = screen.get_size()

        def rect(center: Vec2, size: Vec2) -> pygame.Rect:
            box = pygame.Rect(0, 0, round(size[0]), round(size[1]))
            box.center = (round(width / 2 + center[0]), round(height / 2 - center[1]))
            return box

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            pressed = pygame.key.get_pressed()
            keys = {key for code, key in ((pygame.K_LEFT, Key.LEFT), (pygame.K_RIGHT, Key.RIGHT)) if pressed[code]}
            accumulator += clock.tick(240) / 1000.0
            while accumulator >= step:
                accumulator -= step
                if game.update(step, keys) and sound is not None:
                    sound.play()

            screen.fill(_rgb(BACKGROUND_COLOR))
            for wall in WallLocation:
                pygame.draw.rect(screen, _rgb(WALL_COLOR), rect(wall.position(), wall.size()))
            for brick in game.bricks:
                pygame.draw.rect(screen, _rgb(BRICK_COLOR), rect(brick, BRICK_SIZE))
            pygame.draw.rect(screen, _rgb(PADDLE_COLOR), rect((game.paddle_x, game.paddle_y), PADDLE_SIZE))
            ball_center = (round(width / 2 + game.ball[0]), round(height / 2 - game.ball[1]))
            pygame.draw.circle(screen, _rgb(BALL_COLOR), ball_center, round(BALL_DIAMETER / 2))

            label = font.render("Score: ", True, _rgb(TEXT_COLOR))
            value = font.render(str(game.score), True, _rgb(SCORE_COLOR))
            pad = round(SCOREBOARD_TEXT_PADDING)
            screen.blit(label, (pad, pad))
            screen.blit(value, (pad + label.get_width(), pad))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())