"""
Deferred Release

Components register a release callback for every resource they acquire from
the host, such as a bus subscription, and run them all when they are torn
down.
"""

from __future__ import annotations
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class Disposer:
    """Ordered list of release callbacks.

    Callbacks run in registration order. A component that owns another one
    defers the child's release before deferring its own subscriptions.
    """

    def __init__(self):
        self._callbacks: List[Callable[[], None]] = []

    def __len__(self) -> int:
        """Number of callbacks waiting for release."""
        return len(self._callbacks)

    def defer(self, callback: Callable[[], None]):
        """Register a callback to run on release."""
        self._callbacks.append(callback)

    def release(self):
        """
        Run every pending callback exactly once.

        A callback that raises does not stop the ones after it. The first
        error is raised again once all callbacks have run.
        """
        callbacks, self._callbacks = self._callbacks, []
        errors = []
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logger.exception("Release callback %r failed", callback)
                errors.append(e)
        if callbacks:
            logger.debug("Released %d resources", len(callbacks))
        if errors:
            raise errors[0]
