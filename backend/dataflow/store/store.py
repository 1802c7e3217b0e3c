"""Holds the current snapshot and applies actions one at a time."""
import logging
import threading
from typing import Callable, List, Optional

from ..core import DagError, ValueIsolation, settings, verify_snapshot
from ..models import GraphSnapshot
from .actions import DagAction
from .reducer import dag_reducer

logger = logging.getLogger(__name__)

Listener = Callable[[GraphSnapshot], None]


class DagStore:
    """
    Owner of the "current" snapshot.

    - dispatch() serializes writers with a lock
    - Readers may keep any snapshot returned by get_state() indefinitely
    - Listeners are called with the new snapshot after each successful dispatch,
      in the same order the snapshots were committed
    """

    def __init__(
        self,
        initial: Optional[GraphSnapshot] = None,
        *,
        isolation: Optional[ValueIsolation] = None,
        verify: Optional[bool] = None,
    ):
        self._state = initial if initial is not None else GraphSnapshot.empty()
        self._isolation = isolation
        self._verify = settings.VERIFY_TRANSITIONS if verify is None else verify
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()  # taken before _lock is released
        self._listeners: List[Listener] = []

    def get_state(self) -> GraphSnapshot:
        return self._state

    def dispatch(self, action: DagAction) -> GraphSnapshot:
        """
        Apply an action to the current snapshot.

        Returns:
            The new current snapshot

        Raises:
            DagError: If the action is rejected; the current snapshot is kept
        """
        with self._lock:
            logger.debug("Dispatching %s for node %s", action.type, action.id)
            try:
                new_state = dag_reducer(self._state, action, isolation=self._isolation)
            except DagError as e:
                logger.info("Rejected %s for node %s: %s", action.type, action.id, e)
                raise

            if self._verify:
                verify_snapshot(new_state)

            self._state = new_state
            listeners = list(self._listeners)
            self._notify_lock.acquire()

        try:
            for listener in listeners:
                listener(new_state)
        finally:
            self._notify_lock.release()

        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
