# -*- coding: utf-8 -*-
"""Qt adapter exposing the model's state stream as a signal."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from teamcity_client.core.actions import Action
from teamcity_client.core.model import TeamCityModel
from teamcity_client.core.state import AppState
from teamcity_client.core.state_stream import Unsubscribe

logger = logging.getLogger(__name__)


class ModelBridge(QObject):
    """
    Re-emits every model state as ``state_changed``.
    States produced on worker threads reach GUI-thread slots through Qt's
    queued signal delivery.
    """

    state_changed = pyqtSignal(object)

    def __init__(self, model: TeamCityModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.model = model
        self._unsubscribe: Unsubscribe | None = None

    def start(self) -> None:
        """Subscribe to the model; the current state is emitted right away."""
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self.model.state.subscribe(self._on_state)

    def stop(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None

    def is_running(self) -> bool:
        return self._unsubscribe is not None

    def perform(self, action: Action) -> None:
        self.model.perform(action)

    def _on_state(self, state: AppState) -> None:
        logger.debug("Forwarding %s to Qt", type(state).__name__)
        self.state_changed.emit(state)
