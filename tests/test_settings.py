from __future__ import annotations

from sietor.settings import EditorSettings


def test_defaults_without_environment() -> None:
    settings = EditorSettings.from_env({})

    assert settings == EditorSettings()
    assert settings.font_size == 24.0
    assert settings.font_path is None


def test_values_are_read_from_environment() -> None:
    settings = EditorSettings.from_env(
        {
            "SIETOR_FONT_SIZE": "18",
            "SIETOR_SCALE_FACTOR": "1.5",
            "SIETOR_FONT_PATH": "/fonts/Hack-Regular.ttf",
            "SIETOR_VIEWPORT_WIDTH": "800",
            "SIETOR_VIEWPORT_HEIGHT": "600",
        }
    )

    assert settings.font_size == 18.0
    assert settings.scale_factor == 1.5
    assert settings.font_path == "/fonts/Hack-Regular.ttf"
    assert (settings.viewport_width, settings.viewport_height) == (800, 600)


def test_malformed_values_fall_back_to_defaults() -> None:
    settings = EditorSettings.from_env(
        {"SIETOR_FONT_SIZE": "big", "SIETOR_VIEWPORT_WIDTH": "1.5"}
    )

    assert settings.font_size == 24.0
    assert settings.viewport_width == 512


def test_load_font_uses_configured_path() -> None:
    font = EditorSettings(font_path="/fonts/Hack-Regular.ttf").load_font()

    assert font.path == "/fonts/Hack-Regular.ttf"
    assert EditorSettings().load_font().path is None
