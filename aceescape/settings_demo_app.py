"""Screen layout, mouse handling and the pygame window for the settings demo."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import pygame

from aceescape.menu import Interaction, button_color
from aceescape.settings_demo import (
    EXIT_ICON,
    GAME_TITLE,
    MAIN_BUTTONS,
    MENU_TITLE,
    RIGHT_ICON,
    SETTINGS_BUTTONS,
    SPLASH_ICON,
    TEXT_COLOR,
    VOLUME_LEVELS,
    WRENCH_ICON,
    DemoAction,
    DemoMenuState,
    DemoState,
    DisplayQuality,
    SettingsDemo,
)

WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "Settings Demo"
ASSET_DIR = Path("assets")

CRIMSON_RGB = (220, 20, 60)
BLUE_RGB = (0, 0, 255)
LIME_RGB = (0, 255, 0)
BLACK_RGB = (0, 0, 0)

TITLE_FONT_SIZE = 67
BUTTON_FONT_SIZE = 33
SUMMARY_FONT_SIZE = 50
TITLE_MARGIN = 50
BUTTON_MARGIN = 20
BUTTON_HEIGHT = 65
MAIN_BUTTON_WIDTH = 300
MENU_BUTTON_WIDTH = 200
QUALITY_BUTTON_WIDTH = 150
VOLUME_BUTTON_WIDTH = 30
ICON_WIDTH = 30
ICON_LEFT = 10
SPLASH_ICON_WIDTH = 200

Target = Union[DemoAction, DisplayQuality, int]
Rect = tuple[int, int, int, int]

_ICONS = {
    DemoAction.PLAY: RIGHT_ICON,
    DemoAction.SETTINGS: WRENCH_ICON,
    DemoAction.QUIT: EXIT_ICON,
}


@dataclass(frozen=True)
class Button:
    """A clickable button on the current menu screen."""

    rect: Rect
    label: str
    target: Target
    selected: bool = False

    @property
    def center(self) -> tuple[int, int]:
        left, top, width, height = self.rect
        return (left + width // 2, top + height // 2)

    def contains(self, position: Sequence[int]) -> bool:
        left, top, width, height = self.rect
        x, y = position[0], position[1]
        return left <= x < left + width and top <= y < top + height


@dataclass(frozen=True)
class _Cell:
    width: int
    height: int
    margin: int
    label: str
    target: Target | None = None
    selected: bool = False
    font_size: int = BUTTON_FONT_SIZE


@dataclass(frozen=True)
class _Placed:
    rect: Rect
    cell: _Cell


def _text_width(text: str, font_size: int) -> int:
    return max(1, len(text) * font_size // 2)


def _title(text: str, font_size: int, margin: int) -> _Cell:
    return _Cell(_text_width(text, font_size), font_size, margin, text, font_size=font_size)


def _button(width: int, label: str, target: Target, selected: bool = False) -> _Cell:
    return _Cell(width, BUTTON_HEIGHT, BUTTON_MARGIN, label, target, selected)


class DemoLayout:
    """Places the demo's menu widgets on screen and turns clicks into actions."""

    def __init__(self, demo: SettingsDemo) -> None:
        self.demo = demo
        self.size = WINDOW_SIZE

    def _rows(self) -> list[list[_Cell]]:
        if not self.demo.game_state.in_state(DemoState.MENU):
            return []
        settings = self.demo.settings
        menu = self.demo.menu_state
        if menu.in_state(DemoMenuState.MAIN):
            return [[_title(MENU_TITLE, TITLE_FONT_SIZE, TITLE_MARGIN)]] + [
                [_button(MAIN_BUTTON_WIDTH, label, action)] for action, label in MAIN_BUTTONS
            ]
        if menu.in_state(DemoMenuState.SETTINGS):
            return [[_button(MENU_BUTTON_WIDTH, label, action)] for action, label in SETTINGS_BUTTONS]
        back = [_button(MENU_BUTTON_WIDTH, "Back", DemoAction.BACK_TO_SETTINGS)]
        if menu.in_state(DemoMenuState.SETTINGS_DISPLAY):
            row = [_title("Display Quality", BUTTON_FONT_SIZE, 0)] + [
                _button(QUALITY_BUTTON_WIDTH, str(quality), quality, quality is settings.quality)
                for quality in DisplayQuality
            ]
            return [row, back]
        if menu.in_state(DemoMenuState.SETTINGS_SOUND):
            row = [_title("Volume", BUTTON_FONT_SIZE, 0)] + [
                _button(VOLUME_BUTTON_WIDTH, "", level, level == settings.volume)
                for level in VOLUME_LEVELS
            ]
            return [row, back]
        return []

    def _placed(self) -> list[_Placed]:
        rows = self._rows()
        width, height = self.size
        measured = [
            (
                sum(cell.width + 2 * cell.margin for cell in row),
                max(cell.height + 2 * cell.margin for cell in row),
                row,
            )
            for row in rows
        ]
        top = (height - sum(row_height for _, row_height, _ in measured)) // 2
        placed: list[_Placed] = []
        for row_width, row_height, row in measured:
            x = (width - row_width) // 2
            for cell in row:
                outer = cell.height + 2 * cell.margin
                y = top + (row_height - outer) // 2 + cell.margin
                placed.append(_Placed((x + cell.margin, y, cell.width, cell.height), cell))
                x += cell.width + 2 * cell.margin
            top += row_height
        return placed

    def panel(self) -> Rect | None:
        """Bounding box of everything on the current menu screen, margins included."""
        placed = self._placed()
        if not placed:
            return None
        left = min(p.rect[0] - p.cell.margin for p in placed)
        top = min(p.rect[1] - p.cell.margin for p in placed)
        right = max(p.rect[0] + p.rect[2] + p.cell.margin for p in placed)
        bottom = max(p.rect[1] + p.rect[3] + p.cell.margin for p in placed)
        return (left, top, right - left, bottom - top)

    def buttons(self) -> list[Button]:
        """Buttons on the current menu screen, in reading order."""
        return [
            Button(p.rect, p.cell.label, p.cell.target, p.cell.selected)
            for p in self._placed()
            if p.cell.target is not None
        ]

    def click(self, position: Sequence[int]) -> Button | None:
        """Press the button under ``position``; return it, or None if there is none."""
        for button in self.buttons():
            if button.contains(position):
                target = button.target
                if isinstance(target, DemoAction):
                    self.demo.press(target)
                elif isinstance(target, DisplayQuality):
                    self.demo.choose_quality(target)
                else:
                    self.demo.choose_volume(target)
                return button
        return None


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def _load_image(path: str, width: int) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(ASSET_DIR / path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return None
    ratio = width / image.get_width()
    return pygame.transform.smoothscale(image, (width, max(1, round(image.get_height() * ratio))))


class _Renderer:
    def __init__(self, screen: pygame.Surface, layout: DemoLayout) -> None:
        self.screen = screen
        self.layout = layout
        self.fonts: dict[int, pygame.font.Font] = {}
        self.splash_icon = _load_image(SPLASH_ICON, SPLASH_ICON_WIDTH)
        self.icons = {action: _load_image(path, ICON_WIDTH) for action, path in _ICONS.items()}

    def font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(None, size)
        return self.fonts[size]

    def _text(self, text: str, size: int, color: tuple[int, int, int], center: tuple[int, int]) -> None:
        surface = self.font(size).render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def _splash(self) -> None:
        center = self.screen.get_rect().center
        if self.splash_icon is not None:
            self.screen.blit(self.splash_icon, self.splash_icon.get_rect(center=center))
        else:
            self._text(MENU_TITLE, TITLE_FONT_SIZE, _rgb(TEXT_COLOR), center)

    def _game(self, demo: SettingsDemo) -> None:
        title = self.font(TITLE_FONT_SIZE).render(GAME_TITLE, True, _rgb(TEXT_COLOR))
        summary_font = self.font(SUMMARY_FONT_SIZE)
        spans = [
            summary_font.render(f"quality: {demo.settings.quality}", True, BLUE_RGB),
            summary_font.render(" - ", True, _rgb(TEXT_COLOR)),
            summary_font.render(f"volume: Volume({demo.settings.volume})", True, LIME_RGB),
        ]
        spans_width = sum(span.get_width() for span in spans)
        spans_height = max(span.get_height() for span in spans)
        panel_w = max(title.get_width(), spans_width) + 2 * TITLE_MARGIN
        panel_h = title.get_height() + spans_height + 4 * TITLE_MARGIN
        panel = pygame.Rect(0, 0, panel_w, panel_h)
        panel.center = self.screen.get_rect().center
        pygame.draw.rect(self.screen, BLACK_RGB, panel)
        self.screen.blit(title, title.get_rect(midtop=(panel.centerx, panel.top + TITLE_MARGIN)))
        x = panel.centerx - spans_width // 2
        y = panel.bottom - TITLE_MARGIN - spans_height
        for span in spans:
            self.screen.blit(span, (x, y))
            x += span.get_width()

    def _menu(self, mouse: tuple[int, int], mouse_down: bool) -> None:
        panel = self.layout.panel()
        if panel is None:
            return
        pygame.draw.rect(self.screen, CRIMSON_RGB, pygame.Rect(panel))
        for placed in self.layout._placed():
            cell = placed.cell
            rect = pygame.Rect(placed.rect)
            if cell.target is None:
                self._text(cell.label, cell.font_size, _rgb(TEXT_COLOR), rect.center)
                continue
            if rect.collidepoint(mouse):
                interaction = Interaction.PRESSED if mouse_down else Interaction.HOVERED
            else:
                interaction = Interaction.NONE
            pygame.draw.rect(self.screen, _rgb(button_color(interaction, cell.selected)), rect)
            icon = self.icons.get(cell.target) if isinstance(cell.target, DemoAction) else None
            if icon is not None:
                self.screen.blit(icon, icon.get_rect(midleft=(rect.left + ICON_LEFT, rect.centery)))
            if cell.label:
                self._text(cell.label, cell.font_size, _rgb(TEXT_COLOR), rect.center)

    def draw(self, demo: SettingsDemo, mouse: tuple[int, int], mouse_down: bool) -> None:
        self.screen.fill(BLACK_RGB)
        if demo.game_state.in_state(DemoState.SPLASH):
            self._splash()
        elif demo.game_state.in_state(DemoState.GAME):
            self._game(demo)
        else:
            self._menu(mouse, mouse_down)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window and run until it is closed or Quit is pressed."""
    parser = argparse.ArgumentParser(prog="settings-demo", description="A settings menu demo.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        demo = SettingsDemo()
        layout = DemoLayout(demo)
        layout.size = screen.get_size()
        renderer = _Renderer(screen, layout)
        while demo.running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    demo.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    layout.click(event.pos)
            if not demo.running or not demo.update(dt):
                break
            renderer.draw(demo, pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0])
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())