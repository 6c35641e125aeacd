import pytest

from awgen.cli import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_VERSION,
    PROJECT_NAME_KEY,
    PROJECT_VERSION_KEY,
    load_project,
    main,
    window_title,
)
from awgen.settings import ProjectSettings, SettingsOpenError


def test_title_editor_debug():
    assert window_title("Game", "1.0", True, True) == "Awgen Editor [Game - 1.0] (debug)"


def test_title_editor():
    assert window_title("Game", "1.0", True, False) == "Awgen Editor [Game - 1.0]"


def test_title_player_debug():
    assert window_title("Game", "1.0", False, True) == "Game - 1.0 (debug)"


def test_title_player():
    assert window_title("Game", "1.0", False, False) == "Game - 1.0"


def test_load_project_defaults(tmp_path):
    settings, name, version = load_project(tmp_path, True)
    settings.close()
    assert (name, version) == ("Untitled", "0.0.1")
    assert (DEFAULT_PROJECT_NAME, DEFAULT_PROJECT_VERSION) == (name, version)


def test_load_project_stored_values(tmp_path):
    with ProjectSettings(tmp_path, create=True) as settings:
        settings.set(PROJECT_NAME_KEY, "Castle")
        settings.set(PROJECT_VERSION_KEY, "2.3.4")
    settings, name, version = load_project(tmp_path, False)
    settings.close()
    assert (name, version) == ("Castle", "2.3.4")


def test_load_project_player_needs_settings_file(tmp_path):
    with pytest.raises(SettingsOpenError):
        load_project(tmp_path, False)


def test_main_reports_project(tmp_path, capsys):
    with ProjectSettings(tmp_path, create=True) as settings:
        settings.set(PROJECT_NAME_KEY, "Castle")
    assert main(["--project", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Project name: Castle" in out
    assert "Project version: 0.0.1" in out


def test_main_fails_without_settings(tmp_path, capsys):
    assert main(["-p", str(tmp_path), "--debug"]) == 1
    assert "Failed to open project settings" in capsys.readouterr().err