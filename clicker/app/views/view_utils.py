from __future__ import annotations

import logging
from typing import Callable, Optional

_log = logging.getLogger(__name__)


def guarded(
    fn: Optional[Callable[[], None]],
    *,
    logger: Optional[logging.Logger] = None,
) -> Callable[..., None]:
    """Wrap an injected view callback for use as a Tk command or binding.

    Tk event arguments are dropped. A failing callback is logged and the Tk
    loop keeps running; ``SystemExit`` is not an ``Exception`` and leaves
    ``mainloop`` as usual.
    """
    log = logger or _log

    def _invoke(*_tk_args: object) -> None:
        if fn is None:
            return
        try:
            fn()
        except Exception:
            log.exception("View callback %s failed", getattr(fn, "__name__", fn))

    return _invoke


__all__ = ["guarded"]
