# clicker/app/main.py
from __future__ import annotations

import logging
from typing import Optional

from .config import WindowConfig
from .controller import WindowController
from ..utils import logging as logging_utils


class App:
    """Bootstrap: configure logging, build the window controller, run Tk."""

    def __init__(
        self,
        *,
        config: Optional[WindowConfig] = None,
        controller: Optional[WindowController] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        choice = logging_utils.configure_root()
        self._log.debug("Effective log level: %s (from %s)", choice.name, choice.source)
        self.controller = controller or WindowController(config=config)

    def run(self) -> None:
        win = self.controller.initialize()
        win.mainloop()


def main() -> None:
    App().run()


if __name__ == "__main__":
    main()
