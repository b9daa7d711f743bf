"""Window lifecycle for the click counter desktop app.

This module owns the one-time construction of the main window, routes button
activations into :class:`clicker.viewmodels.counter_vm.ClickCounterVM`, and
ends the process when the window is closed. It is invoked by
``clicker.app.main``.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Callable, Optional, Protocol

from ..viewmodels.counter_vm import ClickCounterVM
from .config import WindowConfig


class ControllerState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    DISPLAYED = "displayed"
    TERMINATED = "terminated"


class CounterWindow(Protocol):
    """Surface of ``MainWindowView`` the controller relies on."""

    def set_label_text(self, text: str) -> None: ...

    def fit_to_content(self) -> None: ...

    def show(self) -> None: ...

    def mainloop(self, n: int = 0) -> None: ...


ViewFactory = Callable[..., CounterWindow]


def _default_view_factory(**kwargs) -> CounterWindow:
    from .views.main_window import MainWindowView

    return MainWindowView(**kwargs)


class WindowController:
    """Build the counter window and react to its two UI events.

    Call chain:
        ``clicker.app.main.App`` creates one instance, calls ``initialize``
        and then runs the Tk main loop. The view calls back into
        ``on_button_activated`` and ``on_window_closing``.
    """

    EXIT_STATUS = 0

    def __init__(
        self,
        *,
        config: Optional[WindowConfig] = None,
        view_factory: Optional[ViewFactory] = None,
        exit_process: Callable[[int], object] = sys.exit,
    ) -> None:
        """Initialize controller without touching Tk.

        Args:
            config: Window constants; defaults to :class:`WindowConfig`.
            view_factory: Callable building the window from keyword arguments
                ``config``, ``on_button_activated`` and ``on_window_closing``.
            exit_process: Called with the exit status when the window closes.
        """
        self._log = logging.getLogger(__name__)
        self.config = config or WindowConfig()
        self._view_factory = view_factory or _default_view_factory
        self._exit_process = exit_process
        self.counter_vm = ClickCounterVM(
            on_label_changed=self._push_label,
            label_prefix=self.config.label_prefix,
        )
        self.view: Optional[CounterWindow] = None
        self.state = ControllerState.UNINITIALIZED

    @property
    def clicks(self) -> int:
        return self.counter_vm.clicks

    @property
    def label_text(self) -> str:
        return self.counter_vm.label_text

    def initialize(self) -> CounterWindow:
        """Construct the widget tree, size it and make it visible.

        Raises:
            RuntimeError: If the window was already built.
        """
        if self.state is not ControllerState.UNINITIALIZED:
            raise RuntimeError(
                f"Window already initialized (state={self.state.value})."
            )
        self.view = self._view_factory(
            config=self.config,
            on_button_activated=self.on_button_activated,
            on_window_closing=self.on_window_closing,
        )
        self.counter_vm.publish()
        self.view.fit_to_content()
        self.view.show()
        self.state = ControllerState.DISPLAYED
        self._log.info("Window '%s' displayed", self.config.title)
        return self.view

    def on_button_activated(self) -> None:
        """Count one click and refresh the label."""
        if self.state is not ControllerState.DISPLAYED:
            raise RuntimeError("Button activated before the window was displayed.")
        text = self.counter_vm.increment()
        self._log.debug("Button activated: %s", text)

    def on_window_closing(self) -> None:
        """Terminate the process immediately with status 0."""
        self.state = ControllerState.TERMINATED
        self._log.info("Window closed after %d clicks; exiting", self.clicks)
        self._exit_process(self.EXIT_STATUS)

    def _push_label(self, text: str) -> None:
        if self.view is not None:
            self.view.set_label_text(text)
