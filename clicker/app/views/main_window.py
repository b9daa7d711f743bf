"""
MainWindowView
---------------
Tkinter top-level window for the click counter. This file contains **only
View code**: it builds the widget tree once and reports UI events through the
callbacks passed to the constructor.

Widget tree:
  * Tk root (title from ``WindowConfig``)
  * padded ttk.Frame filling the content area, single-column grid
  * ttk.Button (row 0) with an Alt mnemonic
  * ttk.Label (row 1) tied to the button for keyboard focus
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..config import WindowConfig
from .theme import apply_cross_platform_theme
from .view_utils import guarded


class MainWindowView(tk.Tk):
    """Top-level application window.

    This class is UI-only. The click count lives in ``ClickCounterVM``; the
    controller pushes label text in via :meth:`set_label_text`.
    """

    # ---- Callback type aliases (callables injected by the controller) ----
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        config: Optional[WindowConfig] = None,
        on_button_activated: OnVoid = None,
        on_window_closing: OnVoid = None,
    ) -> None:
        super().__init__()
        self._log = logging.getLogger(__name__)
        self.config_values = config or WindowConfig()

        # Stay hidden until the controller has sized the window
        self.withdraw()

        self._handle_button = guarded(on_button_activated, logger=self._log)
        self._handle_close = guarded(on_window_closing, logger=self._log)

        self.theme_applied = apply_cross_platform_theme(
            self, self.config_values.preferred_theme
        )
        self.title(self.config_values.title)

        # Content area: the panel takes all of it
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_panel(self)

        self.protocol("WM_DELETE_WINDOW", self._handle_close)
        self._bind_mnemonic()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_panel(self, parent: tk.Misc) -> None:
        cfg = self.config_values
        self.panel = ttk.Frame(parent, padding=cfg.tk_padding())
        self.panel.grid(row=0, column=0, sticky="nsew")

        # One column, rows share height equally
        self.panel.columnconfigure(0, weight=1)
        for row in (0, 1):
            self.panel.rowconfigure(row, weight=1, uniform="cells")

        button_kwargs = {}
        if cfg.mnemonic is not None:
            button_kwargs["underline"] = cfg.mnemonic_index
        self.button = ttk.Button(
            self.panel,
            text=cfg.button_text,
            command=self._handle_button,
            **button_kwargs,
        )
        self.button.grid(row=0, column=0, sticky="nsew")

        self.label_var = tk.StringVar(value="")
        self.label = ttk.Label(self.panel, textvariable=self.label_var)
        self.label.grid(row=1, column=0, sticky="nsew")
        # Label "belongs" to the button: clicking it focuses the button
        self.label.bind("<Button-1>", lambda _e: self.button.focus_set())

        self._log.debug("Widget tree built with padding %s", cfg.padding)

    def _bind_mnemonic(self) -> None:
        key = self.config_values.mnemonic
        if not key:
            return
        for variant in {key.lower(), key.upper()}:
            self.bind(f"<Alt-{variant}>", self._handle_mnemonic)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _handle_mnemonic(self, _event: tk.Event) -> str:
        self.button.invoke()
        return "break"

    # ------------------------------------------------------------------
    # Public API (called by the controller)
    # ------------------------------------------------------------------
    def set_label_text(self, text: str) -> None:
        """Replace the text shown in the counter label."""
        self.label_var.set(text)

    @property
    def label_text(self) -> str:
        return self.label_var.get()

    def fit_to_content(self) -> None:
        """Size the window to the requested size of its children."""
        self.geometry("")
        self.update_idletasks()

    def show(self) -> None:
        """Map the window on screen."""
        self.deiconify()
        self.lift()


if __name__ == "__main__":
    # Manual preview without a controller
    win = MainWindowView()
    win.set_label_text(win.config_values.label_prefix + "0")
    win.fit_to_content()
    win.show()
    win.mainloop()
