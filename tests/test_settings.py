import pytest

from hacktivist.settings import Settings, SettingsTarget


def test_default_key_labels():
    settings = Settings()
    assert settings.key_labels["up"] == "Z"
    assert settings.key_labels["sprint"] == "Shift"
    assert settings.shown is False


def test_settings_button_opens_panel():
    settings = Settings()
    assert settings.click(SettingsTarget.SETTINGS_BUTTON) is False
    assert settings.shown is True


def test_arrow_closes_main_panel():
    settings = Settings(shown=True)
    settings.click(SettingsTarget.ARROW)
    assert settings.shown is False


def test_customize_needs_open_panel():
    settings = Settings()
    settings.click(SettingsTarget.CUSTOMIZE)
    assert settings.bindings_shown is False
    settings.click(SettingsTarget.SETTINGS_BUTTON)
    settings.click(SettingsTarget.CUSTOMIZE)
    assert settings.bindings_shown is True


def test_arrow_from_bindings_returns_to_settings():
    settings = Settings(shown=True, bindings_shown=True)
    settings.click(SettingsTarget.ARROW)
    assert settings.bindings_shown is False
    assert settings.shown is True


@pytest.mark.parametrize("target,fullscreen", [
    (SettingsTarget.FULLSCREEN, True),
    (SettingsTarget.WINDOW, False),
])
def test_window_mode_on_main_panel(target, fullscreen):
    settings = Settings(shown=True, fullscreen=not fullscreen)
    assert settings.click(target) is True
    assert settings.fullscreen is fullscreen


def test_window_mode_ignored_when_bindings_shown():
    settings = Settings(shown=True, bindings_shown=True)
    assert settings.click(SettingsTarget.FULLSCREEN) is False
    assert settings.fullscreen is False


def test_window_mode_ignored_when_hidden():
    settings = Settings()
    assert settings.click(SettingsTarget.FULLSCREEN) is False


def test_close_hides_everything():
    settings = Settings(shown=True, bindings_shown=True)
    settings.close()
    assert (settings.shown, settings.bindings_shown) == (False, False)


def test_unknown_target_rejected():
    with pytest.raises(ValueError):
        Settings().click("nowhere")