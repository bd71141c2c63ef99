import math

import pytest

from aceescape.app import (
    DEIMOS_TAG,
    ON_GAME_SCREEN,
    PLAYER_TAG,
    AceEscape,
    main,
)
from aceescape.menu import MenuButtonAction
from aceescape.ships import BOUNDS, Key, corruption_speed
from aceescape.splash import SPLASH_SECONDS
from aceescape.states import GameState


def _to_main_menu(app):
    app.update(0.0, set())
    app.update(SPLASH_SECONDS, set())
    app.update(0.0, set())


def _to_game(app):
    _to_main_menu(app)
    app.menu.press(MenuButtonAction.PLAY)
    app.update(0.0, set())


def test_starts_on_splash():
    app = AceEscape()
    app.update(0.0, set())
    assert app.game_state.current is GameState.SPLASH
    assert app.splash.visible


def test_splash_stays_until_time_is_up():
    app = AceEscape()
    app.update(0.0, set())
    app.update(SPLASH_SECONDS / 2, set())
    app.update(0.0, set())
    assert app.game_state.current is GameState.SPLASH


def test_splash_leads_to_main_menu():
    app = AceEscape()
    _to_main_menu(app)
    assert app.game_state.current is GameState.MAIN_MENU
    assert [action for _, action in app.menu.buttons()] == [
        MenuButtonAction.PLAY,
        MenuButtonAction.QUIT,
    ]


def test_no_ships_outside_game():
    app = AceEscape()
    _to_main_menu(app)
    assert app.player_transform is None
    assert app.sound_speed is None
    assert len(app.world) == 0


def test_play_enters_game_and_spawns_ships():
    app = AceEscape()
    _to_game(app)
    assert app.game_state.current is GameState.GAME
    assert len(app.world.with_tag(ON_GAME_SCREEN)) == 2
    assert len(app.world.with_tag(PLAYER_TAG)) == 1
    assert len(app.world.with_tag(DEIMOS_TAG)) == 1
    assert app.menu.buttons() == []
    assert app.sound_playing is True


def test_quit_button_requests_exit():
    app = AceEscape()
    _to_main_menu(app)
    assert app.menu.press(MenuButtonAction.QUIT) is True


def test_escape_quits_during_game():
    app = AceEscape()
    _to_game(app)
    assert app.update(0.0, {Key.ESCAPE}) is False
    assert app.running is False


def test_escape_ignored_in_main_menu():
    app = AceEscape()
    _to_main_menu(app)
    assert app.update(0.0, {Key.ESCAPE}) is True
    assert app.running is True


def test_player_thrusts_forward():
    app = AceEscape()
    _to_game(app)
    for _ in range(30):
        app.update(1.0 / 60.0, {Key.UP})
    assert app.player_transform.y > 0.0
    assert app.player_transform.x == pytest.approx(0.0)


def test_player_stays_inside_bounds():
    app = AceEscape()
    _to_game(app)
    for _ in range(5):
        app.update(1.0, {Key.UP})
    assert app.player_transform.y == pytest.approx(BOUNDS[1] / 2.0)


def test_deimos_turns_and_closes_in():
    app = AceEscape()
    _to_game(app)
    app.player_transform.x = 300.0
    before = math.hypot(
        app.player_transform.x - app.deimos_transform.x,
        app.player_transform.y - app.deimos_transform.y,
    )
    app.update(0.1, set())
    after = math.hypot(
        app.player_transform.x - app.deimos_transform.x,
        app.player_transform.y - app.deimos_transform.y,
    )
    assert after < before
    assert app.deimos_transform.angle < 0.0


def test_deimos_holds_still_when_facing_player():
    app = AceEscape()
    _to_game(app)
    app.player_transform.y = 200.0
    app.update(0.1, set())
    assert app.deimos_transform.y == 0.0
    assert app.deimos_transform.angle == 0.0


def test_space_toggles_once_per_press():
    app = AceEscape()
    _to_game(app)
    app.update(0.0, {Key.SPACE})
    assert app.sound_playing is False
    app.update(0.0, {Key.SPACE})
    assert app.sound_playing is False
    app.update(0.0, set())
    app.update(0.0, {Key.SPACE})
    assert app.sound_playing is True


def test_sound_speed_follows_elapsed_time():
    app = AceEscape()
    _to_game(app)
    app.update(2.5, set())
    assert app.sound_speed == pytest.approx(corruption_speed(app.elapsed))


def test_negative_frame_time_rejected():
    app = AceEscape()
    with pytest.raises(ValueError):
        app.update(-0.1, set())


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0