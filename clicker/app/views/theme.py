"""Look-and-feel selection for the counter window.

Picks the cross-platform ttk theme when the running Tk offers it and keeps the
platform default otherwise.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

CROSS_PLATFORM_THEME = "clam"


def apply_cross_platform_theme(root: tk.Misc, theme: str = CROSS_PLATFORM_THEME) -> bool:
    """Try to switch ``root`` to ``theme``.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
        theme: Name of the ttk theme to select.

    Returns:
        True when the theme is active afterwards, False when the platform
        default was kept.
    """
    # Silent fallback: a missing or broken theme is discarded, never logged.
    try:
        style = ttk.Style(root)
        if theme not in style.theme_names():
            return False
        style.theme_use(theme)
    except tk.TclError:
        return False
    return True
