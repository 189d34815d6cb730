# statekeeper/core/callbacks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, Optional

from statekeeper.core.errors import CallbackError, ValidationError
from statekeeper.core.types import ENTER, EXIT, Callback, StateId

logger = logging.getLogger(__name__)


class CallbackRegistry:
    """
    Holds at most one callback per state for a single phase (enter or exit).
    Registering a second callback for the same state replaces the first.
    """

    def __init__(self, phase: str) -> None:
        """
        :param phase: Either ``"enter"`` or ``"exit"``; reported in errors.
        """
        if phase not in (ENTER, EXIT):
            raise ValueError(f"Unknown callback phase: {phase!r}")
        self._phase = phase
        self._callbacks: Dict[StateId, Callback] = {}

    @property
    def phase(self) -> str:
        """The phase this registry serves."""
        return self._phase

    def register(self, state: StateId, callback: Callback) -> None:
        """
        Store ``callback`` for ``state``, overwriting any previous one.

        :param state: The state the callback belongs to.
        :param callback: A zero-argument callable; raising signals failure.
        :raises ValidationError: If ``callback`` is not callable.
        """
        if not callable(callback):
            raise ValidationError(f"{self._phase} callback for state {state!r} must be callable")
        if state in self._callbacks:
            logger.debug("Replacing %s callback for state %r", self._phase, state)
        self._callbacks[state] = callback

    def get(self, state: StateId) -> Optional[Callback]:
        return self._callbacks.get(state)

    def invoke(self, state: StateId, target: StateId) -> bool:
        """
        Run the callback registered for ``state``, if any.

        :param state: The state whose callback should run.
        :param target: The state the machine is moving to, for error context.
        :return: True if a callback ran, False if none is registered.
        :raises CallbackError: Wrapping whatever the callback raised.
        """
        callback = self._callbacks.get(state)
        if callback is None:
            return False
        try:
            callback()
        except Exception as e:
            raise CallbackError(self._phase, state, target, e) from e
        return True

    def __contains__(self, state: StateId) -> bool:
        return state in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)
