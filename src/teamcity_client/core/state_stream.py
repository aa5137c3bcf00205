# -*- coding: utf-8 -*-
"""Replay-latest broadcast of application states."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from teamcity_client.core.state import AppState

logger = logging.getLogger(__name__)


StateCallback = Callable[[AppState], None]
Unsubscribe = Callable[[], None]


class StateStream:
    """Single-slot cache of the latest state plus a subscriber list.

    New subscribers receive the latest state immediately, then every later
    emission in order. Delivery runs on the emitting thread while holding the
    stream lock, so observers never see two emissions interleaved.

    An owner that emits while holding its own lock passes that lock in, so
    a subscriber may dispatch back into the owner from any callback.
    """

    def __init__(self, initial: AppState, lock: threading.RLock | None = None) -> None:
        self._lock = lock if lock is not None else threading.RLock()
        self._value = initial
        self._subscribers: list[StateCallback] = []

    @property
    def value(self) -> AppState:
        with self._lock:
            return self._value

    def subscribe(self, callback: StateCallback) -> Unsubscribe:
        with self._lock:
            self._subscribers.append(callback)
            self._deliver(callback, self._value)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def emit(self, state: AppState) -> None:
        with self._lock:
            self._value = state
            for callback in list(self._subscribers):
                self._deliver(callback, state)

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @staticmethod
    def _deliver(callback: StateCallback, state: AppState) -> None:
        try:
            callback(state)
        except Exception:
            logger.exception("State subscriber failed on %s", type(state).__name__)
