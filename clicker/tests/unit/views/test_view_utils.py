from __future__ import annotations

import logging
import sys
from typing import List

import pytest

from clicker.app.views.view_utils import guarded


def test_guarded_missing_callback_is_noop() -> None:
    guarded(None)()


def test_guarded_drops_tk_event_arguments() -> None:
    calls: List[str] = []
    handler = guarded(lambda: calls.append("hit"))

    handler()
    handler(object())

    assert calls == ["hit", "hit"]


def test_guarded_logs_failures_and_keeps_going(caplog) -> None:
    def boom() -> None:
        raise KeyError("missing")

    logger = logging.getLogger("clicker.tests.view")
    with caplog.at_level(logging.ERROR, logger="clicker.tests.view"):
        guarded(boom, logger=logger)()

    assert any("View callback boom failed" in rec.getMessage() for rec in caplog.records)


def test_guarded_lets_system_exit_through() -> None:
    with pytest.raises(SystemExit) as excinfo:
        guarded(lambda: sys.exit(0))()
    assert excinfo.value.code == 0
