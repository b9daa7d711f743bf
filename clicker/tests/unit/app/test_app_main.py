from __future__ import annotations

from typing import List

from clicker.app import main as app_main
from clicker.app.config import WindowConfig


class ViewStub:
    def __init__(self, calls: List[str]) -> None:
        self._calls = calls

    def mainloop(self, n: int = 0) -> None:
        self._calls.append("mainloop")


class ControllerStub:
    def __init__(self) -> None:
        self.calls: List[str] = []

    def initialize(self) -> ViewStub:
        self.calls.append("initialize")
        return ViewStub(self.calls)


def test_run_initializes_then_enters_mainloop() -> None:
    controller = ControllerStub()
    app = app_main.App(controller=controller)

    app.run()

    assert controller.calls == ["initialize", "mainloop"]


def test_app_builds_default_controller_from_config() -> None:
    cfg = WindowConfig(title="Counter")
    app = app_main.App(config=cfg)

    assert app.controller.config is cfg
    assert app.controller.view is None


def test_main_runs_app(monkeypatch) -> None:
    ran: List[bool] = []
    monkeypatch.setattr(app_main.App, "run", lambda self: ran.append(True))

    app_main.main()

    assert ran == [True]


def test_window_config_defaults() -> None:
    cfg = WindowConfig()

    assert cfg.padding == (30, 30, 10, 30)
    assert cfg.tk_padding() == (30, 30, 30, 10)
    assert cfg.mnemonic == "i"
    assert WindowConfig(mnemonic_index=None).mnemonic is None
    assert WindowConfig(mnemonic_index=99).mnemonic is None
