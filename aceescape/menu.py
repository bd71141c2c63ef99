"""Main menu: buttons, their colours and the actions they trigger."""

from __future__ import annotations

from enum import Enum, auto

from aceescape.states import GameState, StateMachine

Color = tuple[float, float, float]

TEXT_COLOR: Color = (0.9, 0.9, 0.9)
NORMAL_BUTTON: Color = (0.15, 0.15, 0.15)
HOVERED_BUTTON: Color = (0.25, 0.25, 0.25)
HOVERED_PRESSED_BUTTON: Color = (0.25, 0.65, 0.25)
PRESSED_BUTTON: Color = (0.35, 0.75, 0.35)
TITLE = "Ace Escape"
RIGHT_ICON = "textures/icons/right.png"
EXIT_ICON = "textures/icons/exit.png"


class MenuState(Enum):
    MAIN = auto()
    DISABLED = auto()


class MenuButtonAction(Enum):
    PLAY = auto()
    SETTINGS = auto()
    SETTINGS_DISPLAY = auto()
    SETTINGS_SOUND = auto()
    BACK_TO_MAIN_MENU = auto()
    BACK_TO_SETTINGS = auto()
    QUIT = auto()


class Interaction(Enum):
    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


def button_color(interaction: Interaction, selected: bool) -> Color:
    """Background colour of a button for its interaction and selection."""
    if interaction is Interaction.PRESSED or (interaction is Interaction.NONE and selected):
        return PRESSED_BUTTON
    if interaction is Interaction.HOVERED:
        return HOVERED_PRESSED_BUTTON if selected else HOVERED_BUTTON
    return NORMAL_BUTTON


def menu_action(
    action: MenuButtonAction, menu_state: StateMachine, game_state: StateMachine
) -> bool:
    """Carry out a pressed button's action; return True if the game should quit.

    Raises ValueError for actions this menu does not offer.
    """
    if action is MenuButtonAction.PLAY:
        game_state.set(GameState.GAME)
        menu_state.set(MenuState.DISABLED)
        return False
    if action is MenuButtonAction.QUIT:
        return True
    raise ValueError(f"menu action {action.name} is not available in this menu")


class MainMenu:
    """The main menu screen, shown while the game is in the main-menu state."""

    _BUTTONS = (
        ("New Game", MenuButtonAction.PLAY),
        ("Quit", MenuButtonAction.QUIT),
    )

    def __init__(self, game_state: StateMachine, menu_state: StateMachine) -> None:
        self.game_state = game_state
        self.menu_state = menu_state
        self.visible = False
        game_state.on_enter(GameState.MAIN_MENU, lambda: menu_state.set(MenuState.MAIN))
        menu_state.on_enter(MenuState.MAIN, self._show)
        menu_state.on_exit(MenuState.MAIN, self._hide)

    def _show(self) -> None:
        self.visible = True

    def _hide(self) -> None:
        self.visible = False

    def buttons(self) -> list[tuple[str, MenuButtonAction]]:
        """Labels and actions of the buttons currently on screen, top to bottom."""
        return list(self._BUTTONS) if self.visible else []

    def press(self, action: MenuButtonAction) -> bool:
        """Press a button; return True if the game should quit."""
        if not self.game_state.in_state(GameState.MAIN_MENU):
            return False
        return menu_action(action, self.menu_state, self.game_state)