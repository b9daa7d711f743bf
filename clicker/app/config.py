"""Static window configuration for the click counter app.

All values mirror the classic toolkit tutorial window; the controller accepts
an alternative instance mainly so tests can shorten or relabel things.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..viewmodels.counter_vm import LABEL_PREFIX

# (top, left, bottom, right), same order as an empty border
Padding = Tuple[int, int, int, int]


@dataclass(frozen=True)
class WindowConfig:
    """Typed constants for the widget tree built by ``MainWindowView``."""

    title: str = "SwingApplication"
    button_text: str = "I'm a Swing button!"
    label_prefix: str = LABEL_PREFIX
    padding: Padding = (30, 30, 10, 30)
    preferred_theme: str = "clam"
    mnemonic_index: Optional[int] = 0

    @property
    def mnemonic(self) -> Optional[str]:
        """Return the mnemonic character of the button text (lower case)."""
        if self.mnemonic_index is None:
            return None
        if not 0 <= self.mnemonic_index < len(self.button_text):
            return None
        return self.button_text[self.mnemonic_index].lower()

    def tk_padding(self) -> Tuple[int, int, int, int]:
        """Return padding in ttk order (left, top, right, bottom)."""
        top, left, bottom, right = self.padding
        return (left, top, right, bottom)


__all__ = ["LABEL_PREFIX", "Padding", "WindowConfig"]
