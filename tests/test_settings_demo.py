import pytest

from aceescape.settings_demo import (
    DEFAULT_VOLUME,
    DISPLAY_SETTINGS_SCREEN,
    GAME_SCREEN,
    GAME_SECONDS,
    MAIN_MENU_SCREEN,
    SETTINGS_MENU_SCREEN,
    SOUND_SETTINGS_SCREEN,
    SPLASH_SCREEN,
    SPLASH_SECONDS,
    DemoAction,
    DemoMenuState,
    DemoSettings,
    DemoState,
    DisplayQuality,
    SettingsDemo,
)


def _in_menu() -> SettingsDemo:
    demo = SettingsDemo()
    demo.update(0.0)
    demo.update(SPLASH_SECONDS)
    demo.update(0.0)
    return demo


def _go(demo: SettingsDemo, action: DemoAction) -> None:
    demo.press(action)
    demo.update(0.0)


def test_starts_on_splash():
    demo = SettingsDemo()
    assert demo.update(0.0) is True
    assert demo.game_state.current is DemoState.SPLASH
    assert demo.screens == {SPLASH_SCREEN}


def test_splash_waits_for_timer():
    demo = SettingsDemo()
    demo.update(0.0)
    demo.update(SPLASH_SECONDS / 2)
    demo.update(0.0)
    assert demo.game_state.current is DemoState.SPLASH


def test_splash_leads_to_main_menu():
    demo = _in_menu()
    assert demo.game_state.current is DemoState.MENU
    assert demo.menu_state.current is DemoMenuState.MAIN
    assert demo.screens == {MAIN_MENU_SCREEN}


def test_default_settings():
    settings = DemoSettings()
    assert settings.quality is DisplayQuality.MEDIUM
    assert settings.volume == DEFAULT_VOLUME


@pytest.mark.parametrize(
    "quality, name",
    [(DisplayQuality.LOW, "Low"), (DisplayQuality.HIGH, "High")],
)
def test_quality_names(quality, name):
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    _go(demo, DemoAction.SETTINGS_DISPLAY)
    assert demo.choose_quality(quality) is True
    assert demo.summary.startswith(f"quality: {name} - ")


def test_settings_navigation():
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    assert demo.screens == {SETTINGS_MENU_SCREEN}
    _go(demo, DemoAction.SETTINGS_DISPLAY)
    assert demo.screens == {DISPLAY_SETTINGS_SCREEN}
    _go(demo, DemoAction.BACK_TO_SETTINGS)
    assert demo.screens == {SETTINGS_MENU_SCREEN}
    _go(demo, DemoAction.SETTINGS_SOUND)
    assert demo.screens == {SOUND_SETTINGS_SCREEN}
    _go(demo, DemoAction.BACK_TO_SETTINGS)
    _go(demo, DemoAction.BACK_TO_MAIN_MENU)
    assert demo.menu_state.current is DemoMenuState.MAIN
    assert demo.screens == {MAIN_MENU_SCREEN}


def test_choose_quality_on_display_screen():
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    _go(demo, DemoAction.SETTINGS_DISPLAY)
    assert demo.choose_quality(DisplayQuality.HIGH) is True
    assert demo.settings.quality is DisplayQuality.HIGH
    assert demo.choose_quality(DisplayQuality.HIGH) is False


def test_choose_quality_elsewhere_is_ignored():
    demo = _in_menu()
    assert demo.choose_quality(DisplayQuality.LOW) is False
    assert demo.settings.quality is DisplayQuality.MEDIUM


def test_choose_volume_on_sound_screen():
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    _go(demo, DemoAction.SETTINGS_SOUND)
    assert demo.choose_volume(3) is True
    assert demo.settings.volume == 3
    assert demo.choose_volume(3) is False


@pytest.mark.parametrize("volume", [-1, 10])
def test_choose_volume_out_of_range(volume):
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    _go(demo, DemoAction.SETTINGS_SOUND)
    with pytest.raises(ValueError):
        demo.choose_volume(volume)
    assert demo.settings.volume == DEFAULT_VOLUME


def test_play_shows_game_then_returns_to_menu():
    demo = _in_menu()
    assert demo.press(DemoAction.PLAY) is False
    demo.update(0.0)
    assert demo.game_state.current is DemoState.GAME
    assert demo.menu_state.current is DemoMenuState.DISABLED
    assert demo.screens == {GAME_SCREEN}
    assert demo.summary == "quality: Medium - volume: Volume(7)"
    demo.update(GAME_SECONDS)
    demo.update(0.0)
    assert demo.game_state.current is DemoState.MENU
    assert demo.screens == {MAIN_MENU_SCREEN}


def test_summary_follows_settings():
    demo = _in_menu()
    _go(demo, DemoAction.SETTINGS)
    _go(demo, DemoAction.SETTINGS_DISPLAY)
    demo.choose_quality(DisplayQuality.LOW)
    assert demo.summary.startswith("quality: Low")


def test_quit():
    demo = _in_menu()
    assert demo.press(DemoAction.QUIT) is True
    assert demo.update(0.0) is False


def test_press_outside_menu_does_nothing():
    demo = SettingsDemo()
    demo.update(0.0)
    assert demo.press(DemoAction.QUIT) is False
    assert demo.running is True
    assert demo.game_state.pending is None


def test_negative_frame_time():
    with pytest.raises(ValueError):
        SettingsDemo().update(-0.1)


def test_negative_volume_setting_rejected():
    with pytest.raises(ValueError):
        DemoSettings(volume=-1)