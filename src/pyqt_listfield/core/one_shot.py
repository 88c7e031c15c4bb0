"""One-shot event for deferred readiness propagation."""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class OneShotEvent:
    """
    Event that fires exactly once.

    Handlers connected before the event fires are queued and run in
    connection order when it fires. Handlers connected afterwards run
    immediately.

    Usage:
        self._ready = OneShotEvent("form_ready")
        self._ready.connect(self._apply_initial_styling)
        ...
        self._ready.fire()  # Runs queued handlers, later connects run inline
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._fired = False
        self._handlers: List[Callable[[], None]] = []

    @property
    def is_set(self) -> bool:
        """True once fire() has been called."""
        return self._fired

    @property
    def pending_count(self) -> int:
        return len(self._handlers)

    def connect(self, handler: Callable[[], None]) -> None:
        """Queue handler until fired, or run it now if already fired."""
        if self._fired:
            handler()
            return
        self._handlers.append(handler)

    def fire(self) -> None:
        """Fire the event. Subsequent calls are no-ops."""
        if self._fired:
            logger.debug(f"OneShotEvent '{self.name}' already fired, ignoring")
            return
        self._fired = True
        logger.debug(f"OneShotEvent '{self.name}' fired, running {len(self._handlers)} handler(s)")
        self._flush()

    def _flush(self) -> None:
        # Handlers may connect further handlers while running; those run inline
        handlers, self._handlers = self._handlers, []
        for handler in handlers:
            handler()
