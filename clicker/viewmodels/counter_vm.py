from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

LABEL_PREFIX = "Number of button clicks: "


@dataclass
class ClickCounterVM:
    """Owns the click count and the label text derived from it, no Tk here."""

    on_label_changed: Optional[Callable[[str], None]] = None
    label_prefix: str = LABEL_PREFIX
    clicks: int = 0

    def __post_init__(self) -> None:
        if self.clicks < 0:
            raise ValueError("ClickCounterVM.clicks must be non-negative.")

    @property
    def label_text(self) -> str:
        return f"{self.label_prefix}{self.clicks}"

    def increment(self) -> str:
        """Count one button activation and push the new label text."""
        self.clicks += 1
        return self.publish()

    def publish(self) -> str:
        text = self.label_text
        if self.on_label_changed:
            self.on_label_changed(text)
        return text
