"""The Ace Escape game: state wiring, per-frame update and the pygame front end."""

from __future__ import annotations

import argparse
import logging
import math
from collections.abc import Collection, Sequence
from pathlib import Path

import pygame

from aceescape.menu import (
    EXIT_ICON,
    RIGHT_ICON,
    TEXT_COLOR,
    TITLE,
    Interaction,
    MainMenu,
    MenuButtonAction,
    MenuState,
    button_color,
)
from aceescape.ships import (
    CORRUPTION_SOUND,
    DECAY_RATE,
    DEIMOS_TEXTURE,
    FIXED_HZ,
    LISTENER_GAP,
    PLAYER_SIZE,
    PLAYER_TEXTURE,
    Deimos,
    Key,
    Player,
    Transform,
    corruption_speed,
    move_deimos,
    move_player,
)
from aceescape.splash import LOGO, LOGO_WIDTH, SplashScreen
from aceescape.states import GameState, StateMachine, World, despawn_screen

log = logging.getLogger(__name__)

WINDOW_TITLE = "Ace Escape"
WINDOW_SIZE = (1280, 720)
BACKGROUND_RGB = (2, 6, 23)
MENU_PANEL_RGB = (220, 20, 60)
FPS_FONT_SIZE = 42
FPS_COLOR = (0.0, 1.0, 0.0)
FPS_REFRESH_SECONDS = 0.1
SPATIAL_SCALE = 1.0 / 100.0
ASSET_DIR = Path("assets")

FIXED_STEP = 1.0 / FIXED_HZ

ON_GAME_SCREEN = "on_game_screen"
PLAYER_TAG = "player"
DEIMOS_TAG = "deimos"
CORRUPTION_SOUND_TAG = "corruption_sound"


class AceEscape:
    """The whole game: screens, states and the ships while a game runs."""

    def __init__(self) -> None:
        self.world = World()
        self.game_state = StateMachine(GameState.SPLASH)
        self.menu_state = StateMachine(MenuState.DISABLED)
        self.splash = SplashScreen(self.game_state)
        self.menu = MainMenu(self.game_state, self.menu_state)
        self.running = True
        self.elapsed = 0.0
        self.player: Player | None = None
        self.player_transform: Transform | None = None
        self.deimos: Deimos | None = None
        self.deimos_transform: Transform | None = None
        self.decay_rate = DECAY_RATE
        self.sound_playing = False
        self.sound_speed: float | None = None
        self._fixed_accumulator = 0.0
        self._held: frozenset[Key] = frozenset()
        self.game_state.on_enter(GameState.GAME, self._setup)
        self.game_state.on_exit(GameState.GAME, self._teardown)

    def _setup(self) -> None:
        log.info("Game setup")
        self.player = Player()
        self.player_transform = Transform()
        self.world.spawn(PLAYER_TAG, ON_GAME_SCREEN)
        self.deimos = Deimos()
        self.deimos_transform = Transform()
        self.world.spawn(DEIMOS_TAG, CORRUPTION_SOUND_TAG, ON_GAME_SCREEN)
        self.decay_rate = DECAY_RATE
        self.sound_playing = True

    def _teardown(self) -> None:
        despawn_screen(self.world, ON_GAME_SCREEN)
        self.player = self.player_transform = None
        self.deimos = self.deimos_transform = None
        self.sound_playing = False
        self.sound_speed = None

    def update(self, dt: float, keys: Collection[Key]) -> bool:
        """Advance one frame of ``dt`` seconds with ``keys`` held; return False to quit."""
        if dt < 0:
            raise ValueError("frame time must not be negative")
        held = frozenset(keys)
        just_pressed = held - self._held
        self._held = held
        self.elapsed += dt

        self.game_state.apply()
        self.menu_state.apply()

        self._fixed_accumulator += dt
        while self._fixed_accumulator >= FIXED_STEP:
            self._fixed_accumulator -= FIXED_STEP
            if self.player is not None and self.player_transform is not None:
                move_player(self.player, self.player_transform, held, FIXED_STEP)

        self.splash.update(dt)

        if self.game_state.in_state(GameState.GAME, GameState.GAME_OVER) and Key.ESCAPE in held:
            self.running = False

        if self.deimos is not None and self.deimos_transform is not None:
            self.sound_speed = corruption_speed(self.elapsed)
            if Key.SPACE in just_pressed:
                self.sound_playing = not self.sound_playing
            if self.player_transform is not None:
                move_deimos(
                    self.deimos,
                    self.deimos_transform,
                    self.player_transform,
                    self.decay_rate,
                    dt,
                )
        return self.running


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def _load_image(
    path: str, width: float | None = None, size: tuple[float, float] | None = None, flip_y: bool = False
) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(ASSET_DIR / path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return None
    if size is not None:
        image = pygame.transform.smoothscale(image, (round(size[0]), round(size[1])))
    elif width is not None:
        ratio = width / image.get_width()
        image = pygame.transform.smoothscale(
            image, (round(width), max(1, round(image.get_height() * ratio)))
        )
    if flip_y:
        image = pygame.transform.flip(image, False, True)
    return image


_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _held_keys() -> set[Key]:
    pressed = pygame.key.get_pressed()
    return {key for code, key in _KEYMAP.items() if pressed[code]}


def _menu_layout(
    menu: MainMenu, size: tuple[int, int]
) -> tuple[pygame.Rect, tuple[int, int], list[tuple[pygame.Rect, str, MenuButtonAction]]]:
    width, height = size
    buttons = menu.buttons()
    title_block = 67 + 100
    button_block = 65 + 40
    total = title_block + button_block * len(buttons)
    top = (height - total) // 2
    panel = pygame.Rect(width // 2 - 170, top, 340, total)
    title_center = (width // 2, top + 50 + 33)
    rects = [
        (pygame.Rect(width // 2 - 150, top + title_block + 20 + i * button_block, 300, 65), label, action)
        for i, (label, action) in enumerate(buttons)
    ]
    return panel, title_center, rects


class _Audio:
    """Loops the corruption sound while the Deimos exists, panned around the player."""

    def __init__(self) -> None:
        self.sound: pygame.mixer.Sound | None = None
        self.channel: pygame.mixer.Channel | None = None
        try:
            pygame.mixer.init()
            self.sound = pygame.mixer.Sound(str(ASSET_DIR / CORRUPTION_SOUND))
        except (pygame.error, FileNotFoundError):
            self.sound = None

    def sync(self, app: AceEscape) -> None:
        if self.sound is None:
            return
        active = app.deimos_transform is not None
        if not active:
            if self.channel is not None:
                self.channel.stop()
                self.channel = None
            return
        if self.channel is None:
            self.channel = self.sound.play(loops=-1)
            if self.channel is None:
                return
        if app.sound_playing:
            self.channel.unpause()
        else:
            self.channel.pause()
        if app.player_transform is not None and app.deimos_transform is not None:
            px, py = app.player_transform.x, app.player_transform.y
            rx, ry = app.player_transform.right()
            half = LISTENER_GAP / 2.0
            gains = []
            for side in (-1.0, 1.0):
                ear_x, ear_y = px + rx * half * side, py + ry * half * side
                distance = math.hypot(app.deimos_transform.x - ear_x, app.deimos_transform.y - ear_y)
                gains.append(1.0 / (1.0 + distance * SPATIAL_SCALE))
            self.channel.set_volume(gains[0], gains[1])


class _FpsOverlay:
    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.text = "FPS: 0.00"
        self.since = 0.0

    def draw(self, screen: pygame.Surface, dt: float, fps: float) -> None:
        self.since += dt
        if self.since >= FPS_REFRESH_SECONDS:
            self.since = 0.0
            self.text = f"FPS: {fps:.2f}"
        screen.blit(self.font.render(self.text, True, _rgb(FPS_COLOR)), (0, 0))


class _Renderer:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.title_font = pygame.font.Font(None, 67)
        self.button_font = pygame.font.Font(None, 33)
        self.logo = _load_image(LOGO, width=LOGO_WIDTH)
        self.icons = {
            MenuButtonAction.PLAY: _load_image(RIGHT_ICON, width=30.0),
            MenuButtonAction.QUIT: _load_image(EXIT_ICON, width=30.0),
        }
        self.player_image = _load_image(PLAYER_TEXTURE, size=PLAYER_SIZE, flip_y=True)
        self.deimos_image = _load_image(DEIMOS_TEXTURE, flip_y=True)

    def button_at(self, app: AceEscape, position: tuple[int, int]) -> MenuButtonAction | None:
        _, _, rects = _menu_layout(app.menu, self.screen.get_size())
        for rect, _, action in rects:
            if rect.collidepoint(position):
                return action
        return None

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        width, height = self.screen.get_size()
        return (width / 2 + x, height / 2 - y)

    def _draw_ship(
        self,
        transform: Transform,
        image: pygame.Surface | None,
        color: tuple[int, int, int],
        size: tuple[float, float],
    ) -> None:
        center = self._to_screen(transform.x, transform.y)
        if image is not None:
            rotated = pygame.transform.rotate(image, math.degrees(transform.angle))
            self.screen.blit(rotated, rotated.get_rect(center=center))
            return
        fx, fy = transform.forward()
        rx, ry = transform.right()
        half_w, half_h = size[0] / 2, size[1] / 2
        points = [
            (center[0] + fx * half_h, center[1] - fy * half_h),
            (center[0] - fx * half_h + rx * half_w, center[1] + fy * half_h - ry * half_w),
            (center[0] - fx * half_h - rx * half_w, center[1] + fy * half_h + ry * half_w),
        ]
        pygame.draw.polygon(self.screen, color, points)

    def draw(self, app: AceEscape, mouse: tuple[int, int], mouse_down: bool) -> None:
        self.screen.fill(BACKGROUND_RGB)
        if app.splash.visible:
            self.screen.fill((0, 0, 0))
            center = self.screen.get_rect().center
            if self.logo is not None:
                self.screen.blit(self.logo, self.logo.get_rect(center=center))
            else:
                text = self.title_font.render(TITLE, True, _rgb(TEXT_COLOR))
                self.screen.blit(text, text.get_rect(center=center))
        if app.menu.visible:
            panel, title_center, rects = _menu_layout(app.menu, self.screen.get_size())
            pygame.draw.rect(self.screen, MENU_PANEL_RGB, panel)
            title = self.title_font.render(TITLE, True, _rgb(TEXT_COLOR))
            self.screen.blit(title, title.get_rect(center=title_center))
            for rect, label, action in rects:
                if rect.collidepoint(mouse):
                    interaction = Interaction.PRESSED if mouse_down else Interaction.HOVERED
                else:
                    interaction = Interaction.NONE
                pygame.draw.rect(self.screen, _rgb(button_color(interaction, False)), rect)
                icon = self.icons.get(action)
                if icon is not None:
                    self.screen.blit(icon, icon.get_rect(midleft=(rect.left + 10, rect.centery)))
                text = self.button_font.render(label, True, _rgb(TEXT_COLOR))
                self.screen.blit(text, text.get_rect(center=rect.center))
        if app.player_transform is not None:
            self._draw_ship(app.player_transform, self.player_image, (200, 200, 220), PLAYER_SIZE)
        if app.deimos_transform is not None:
            self._draw_ship(app.deimos_transform, self.deimos_image, (180, 40, 60), (60.0, 60.0))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="ace-escape", description="Escape the Deimos.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        app = AceEscape()
        renderer = _Renderer(screen)
        audio = _Audio()
        fps = _FpsOverlay(pygame.font.Font(None, FPS_FONT_SIZE))
        while app.running:
            dt = clock.tick() / 1000.0
            clicked: tuple[int, int] | None = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = event.pos
            if not app.running:
                break
            if clicked is not None and app.menu.visible:
                action = renderer.button_at(app, clicked)
                if action is not None and app.menu.press(action):
                    app.running = False
                    break
            if not app.update(dt, _held_keys()):
                break
            audio.sync(app)
            renderer.draw(app, pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0])
            fps.draw(screen, dt, clock.get_fps())
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())