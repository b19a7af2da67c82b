"""Per-session store for in-progress taco orders.

Each customer session owns at most one TacoOrder. Orders are created lazily
on first access and discarded when the session is cleared at checkout.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from .errors import SessionIntegrityError
from .models import Taco, TacoOrder


class OrderSessionStore:
    """Keyed map from session id to that session's TacoOrder.

    Mutations to a single session's order are serialized by a per-session
    lock. A session's lock exists only while some thread holds or waits on
    it. The store-wide lock only guards the dictionaries.
    """

    def __init__(self):
        self._orders: dict[str, TacoOrder] = {}  # session_id -> order
        self._locks: dict[str, threading.RLock] = {}  # session_id -> lock
        self._lock_users: dict[str, int] = {}  # session_id -> holders + waiters
        self._global_lock = threading.RLock()

    def __len__(self) -> int:
        with self._global_lock:
            return len(self._orders)

    @property
    def active_locks(self) -> int:
        """Number of sessions whose lock is currently held or awaited."""
        with self._global_lock:
            return len(self._locks)

    def _check_session_id(self, session_id: str | None) -> str:
        if session_id is None or not str(session_id).strip():
            raise SessionIntegrityError(f"Invalid session id: {session_id!r}")
        return session_id

    @contextmanager
    def _session_lock(self, session_id: str) -> Iterator[None]:
        with self._global_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.RLock()
            self._lock_users[session_id] = self._lock_users.get(session_id, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._global_lock:
                self._lock_users[session_id] -= 1
                if not self._lock_users[session_id]:
                    del self._lock_users[session_id]
                    del self._locks[session_id]

    @contextmanager
    def locked(self, session_id: str) -> Iterator[TacoOrder]:
        """Hold the session's lock and yield its current order."""
        with self._session_lock(self._check_session_id(session_id)):
            yield self.current_order(session_id)

    def has_order(self, session_id: str) -> bool:
        with self._global_lock:
            return session_id in self._orders

    def current_order(self, session_id: str) -> TacoOrder:
        """Return the session's order, creating an empty one if needed."""
        self._check_session_id(session_id)
        with self._global_lock:
            order = self._orders.get(session_id)
            if order is None:
                order = TacoOrder()
                self._orders[session_id] = order
                logger.debug(
                    "New order {} for session {}", order.order_id, session_id
                )
            return order

    def append_taco(self, session_id: str, taco: Taco) -> TacoOrder:
        with self.locked(session_id) as order:
            order.add_taco(taco)
            logger.info(
                "Added taco {!r} to order {} (session {}, {} tacos)",
                taco.name,
                order.order_id,
                session_id,
                len(order.tacos),
            )
            return order

    def clear(self, session_id: str) -> TacoOrder | None:
        """Discard the session's order. Returns it, or None if there was none."""
        self._check_session_id(session_id)
        with self._session_lock(session_id):
            with self._global_lock:
                order = self._orders.pop(session_id, None)
        if order is not None:
            logger.info("Session {} cleared (order {})", session_id, order.order_id)
        return order
