"""A small settings-menu demo: splash, a nested menu with two settings, and a timed game screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from aceescape.splash import Timer
from aceescape.states import StateMachine, World, despawn_screen

Color = tuple[float, float, float]

TEXT_COLOR: Color = (0.9, 0.9, 0.9)
NORMAL_BUTTON: Color = (0.15, 0.15, 0.15)
HOVERED_BUTTON: Color = (0.25, 0.25, 0.25)
HOVERED_PRESSED_BUTTON: Color = (0.25, 0.65, 0.25)
PRESSED_BUTTON: Color = (0.35, 0.75, 0.35)

SPLASH_SECONDS = 1.0
GAME_SECONDS = 5.0
DEFAULT_VOLUME = 7
VOLUME_LEVELS = range(10)

SPLASH_ICON = "branding/icon.png"
RIGHT_ICON = "textures/Game Icons/right.png"
WRENCH_ICON = "textures/Game Icons/wrench.png"
EXIT_ICON = "textures/Game Icons/exit.png"
MENU_TITLE = "Bevy Game Menu UI"
GAME_TITLE = "Will be back to the menu shortly..."

SPLASH_SCREEN = "splash_screen"
GAME_SCREEN = "game_screen"
MAIN_MENU_SCREEN = "main_menu_screen"
SETTINGS_MENU_SCREEN = "settings_menu_screen"
DISPLAY_SETTINGS_SCREEN = "display_settings_screen"
SOUND_SETTINGS_SCREEN = "sound_settings_screen"


class DisplayQuality(Enum):
    """Display quality setting."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


class DemoState(Enum):
    """Top-level screens of the demo."""

    SPLASH = auto()
    MENU = auto()
    GAME = auto()


class DemoMenuState(Enum):
    """Which menu screen is shown."""

    MAIN = auto()
    SETTINGS = auto()
    SETTINGS_DISPLAY = auto()
    SETTINGS_SOUND = auto()
    DISABLED = auto()


class DemoAction(Enum):
    """Actions that menu buttons trigger."""

    PLAY = auto()
    SETTINGS = auto()
    SETTINGS_DISPLAY = auto()
    SETTINGS_SOUND = auto()
    BACK_TO_MAIN_MENU = auto()
    BACK_TO_SETTINGS = auto()
    QUIT = auto()


MAIN_BUTTONS = (
    (DemoAction.PLAY, "New Game"),
    (DemoAction.SETTINGS, "Settings"),
    (DemoAction.QUIT, "Quit"),
)
SETTINGS_BUTTONS = (
    (DemoAction.SETTINGS_DISPLAY, "Display"),
    (DemoAction.SETTINGS_SOUND, "Sound"),
    (DemoAction.BACK_TO_MAIN_MENU, "Back"),
)

_MENU_TARGETS = {
    DemoAction.SETTINGS: DemoMenuState.SETTINGS,
    DemoAction.SETTINGS_DISPLAY: DemoMenuState.SETTINGS_DISPLAY,
    DemoAction.SETTINGS_SOUND: DemoMenuState.SETTINGS_SOUND,
    DemoAction.BACK_TO_MAIN_MENU: DemoMenuState.MAIN,
    DemoAction.BACK_TO_SETTINGS: DemoMenuState.SETTINGS,
}

_MENU_SCREENS = {
    DemoMenuState.MAIN: MAIN_MENU_SCREEN,
    DemoMenuState.SETTINGS: SETTINGS_MENU_SCREEN,
    DemoMenuState.SETTINGS_DISPLAY: DISPLAY_SETTINGS_SCREEN,
    DemoMenuState.SETTINGS_SOUND: SOUND_SETTINGS_SCREEN,
}


def _check_volume(volume: int) -> None:
    if isinstance(volume, bool) or not isinstance(volume, int):
        raise TypeError("volume must be an integer")
    if volume < 0:
        raise ValueError("volume must not be negative")


@dataclass
class DemoSettings:
    """The two values the settings menu controls."""

    quality: DisplayQuality = DisplayQuality.MEDIUM
    volume: int = DEFAULT_VOLUME

    def __post_init__(self) -> None:
        _check_volume(self.volume)


class SettingsDemo:
    """The demo's states, settings and visible screens."""

    def __init__(self) -> None:
        self.world = World()
        self.settings = DemoSettings()
        self.game_state = StateMachine(DemoState.SPLASH)
        self.menu_state = StateMachine(DemoMenuState.DISABLED)
        self.running = True
        self.splash_timer: Timer | None = None
        self.game_timer: Timer | None = None

        gs = self.game_state
        gs.on_enter(DemoState.SPLASH, self._splash_setup)
        gs.on_exit(DemoState.SPLASH, lambda: despawn_screen(self.world, SPLASH_SCREEN))
        gs.on_enter(DemoState.MENU, lambda: self.menu_state.set(DemoMenuState.MAIN))
        gs.on_enter(DemoState.GAME, self._game_setup)
        gs.on_exit(DemoState.GAME, lambda: despawn_screen(self.world, GAME_SCREEN))

        for state, tag in _MENU_SCREENS.items():
            self.menu_state.on_enter(state, lambda tag=tag: self.world.spawn(tag))
            self.menu_state.on_exit(state, lambda tag=tag: despawn_screen(self.world, tag))

    def _splash_setup(self) -> None:
        self.world.spawn(SPLASH_SCREEN)
        self.splash_timer = Timer(SPLASH_SECONDS)

    def _game_setup(self) -> None:
        self.world.spawn(GAME_SCREEN)
        self.game_timer = Timer(GAME_SECONDS)

    @property
    def screens(self) -> frozenset[str]:
        """Tags of the screens currently shown."""
        return frozenset(tag for entity in self.world for tag in self.world.tags(entity))

    @property
    def summary(self) -> str:
        """The settings line shown on the game screen."""
        return f"quality: {self.settings.quality} - volume: Volume({self.settings.volume})"

    def update(self, dt: float) -> bool:
        """Apply queued transitions and advance timers by ``dt``; return False to quit."""
        if dt < 0:
            raise ValueError("frame time must not be negative")
        self.game_state.apply()
        self.menu_state.apply()
        if self.game_state.in_state(DemoState.SPLASH) and self.splash_timer is not None:
            if self.splash_timer.tick(dt):
                self.game_state.set(DemoState.MENU)
        elif self.game_state.in_state(DemoState.GAME) and self.game_timer is not None:
            if self.game_timer.tick(dt):
                self.game_state.set(DemoState.MENU)
        return self.running

    def press(self, action: DemoAction) -> bool:
        """Press a menu button; return True if the demo should quit."""
        if not self.game_state.in_state(DemoState.MENU):
            return False
        if action is DemoAction.QUIT:
            self.running = False
            return True
        if action is DemoAction.PLAY:
            self.game_state.set(DemoState.GAME)
            self.menu_state.set(DemoMenuState.DISABLED)
            return False
        self.menu_state.set(_MENU_TARGETS[action])
        return False

    def choose_quality(self, quality: DisplayQuality) -> bool:
        """Select a display quality on the display screen; return True if it changed."""
        if not isinstance(quality, DisplayQuality):
            raise TypeError("quality must be a DisplayQuality")
        if not self.menu_state.in_state(DemoMenuState.SETTINGS_DISPLAY):
            return False
        if self.settings.quality is quality:
            return False
        self.settings.quality = quality
        return True

    def choose_volume(self, volume: int) -> bool:
        """Select a volume level on the sound screen; return True if it changed."""
        _check_volume(volume)
        if volume not in VOLUME_LEVELS:
            raise ValueError(f"volume must be between {VOLUME_LEVELS[0]} and {VOLUME_LEVELS[-1]}")
        if not self.menu_state.in_state(DemoMenuState.SETTINGS_SOUND):
            return False
        if self.settings.volume == volume:
            return False
        self.settings.volume = volume
        return True