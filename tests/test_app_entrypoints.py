import os

import pytest

os.environ.setdefault("WAVEVIEWER_SKIP_APP_INIT", "1")
pytest.importorskip("tkinter")

import app
from waveviewer import main as app_main


class _DesktopApp:
    def __init__(self):
        self.launched = 0

    def launch(self):
        self.launched += 1


def test_launch_is_skipped_when_init_disabled(monkeypatch):
    monkeypatch.setattr(app, "SKIP_APP_INIT", True)
    monkeypatch.setattr(app, "DESKTOP_APP", None)
    app.launch()


def test_launch_requires_desktop_app(monkeypatch):
    monkeypatch.setattr(app, "SKIP_APP_INIT", False)
    monkeypatch.setattr(app, "DESKTOP_APP", None)
    with pytest.raises(RuntimeError):
        app.launch()


def test_main_delegates_to_app_launch(monkeypatch):
    desktop = _DesktopApp()
    monkeypatch.setattr(app, "SKIP_APP_INIT", False)
    monkeypatch.setattr(app, "DESKTOP_APP", desktop)

    app_main.main()

    assert desktop.launched == 1


def test_env_flag_parsing(monkeypatch):
    monkeypatch.setenv("FLAG_UNDER_TEST", "Yes")
    assert app._env_flag("FLAG_UNDER_TEST") is True
    monkeypatch.setenv("FLAG_UNDER_TEST", "off")
    assert app._env_flag("FLAG_UNDER_TEST") is False
