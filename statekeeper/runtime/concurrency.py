# statekeeper/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import List, Optional, Tuple

from statekeeper.core.hooks import HookProtocol
from statekeeper.core.state_machine import StateMachine
from statekeeper.core.types import Callback, StateId


class _LockFactory:
    """
    Internal factory for producing the lock that serializes a machine.
    """

    def create_lock(self) -> threading.RLock:
        """
        Return a new re-entrant lock, so callbacks may read the machine they
        run inside.
        """
        return threading.RLock()


def get_lock() -> threading.RLock:
    """
    Return the default lock a SynchronizedStateMachine serializes on.
    """
    return _LockFactory().create_lock()


@contextmanager
def with_lock(lock):
    """
    Hold ``lock`` for the duration of one machine operation.

    Callers can also take ``machine.lock`` themselves to make a read of
    ``current_state`` and the following ``transition`` one atomic step.

    :param lock: Any object with ``acquire``/``release``, usually ``machine.lock``.
    """
    lock.acquire()
    try:
        yield lock
    finally:
        lock.release()


class SynchronizedStateMachine(StateMachine):
    """
    A StateMachine whose registration, start, transition and query calls all
    run under one lock. Callbacks execute while the lock is held, so a slow
    callback blocks every other thread using the machine.
    """

    def __init__(self, lock=None, hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        :param lock: Lock to serialize on. Must be re-entrant if callbacks
            touch the machine. Defaults to a new ``threading.RLock``.
        :param hooks: Optional list of hook objects.
        """
        super().__init__(hooks=hooks)
        self._lock = lock if lock is not None else get_lock()

    @property
    def lock(self):
        return self._lock

    @property
    def current_state(self) -> Optional[StateId]:
        with with_lock(self._lock):
            return super().current_state

    @property
    def is_started(self) -> bool:
        with with_lock(self._lock):
            return super().is_started

    def add_transition(self, source: StateId, target: StateId) -> None:
        with with_lock(self._lock):
            super().add_transition(source, target)

    def on_enter(self, state: StateId, callback: Callback) -> None:
        with with_lock(self._lock):
            super().on_enter(state, callback)

    def on_exit(self, state: StateId, callback: Callback) -> None:
        with with_lock(self._lock):
            super().on_exit(state, callback)

    def transitions_from(self, state: StateId) -> Tuple[StateId, ...]:
        with with_lock(self._lock):
            return super().transitions_from(state)

    def can_transition(self, target: StateId) -> bool:
        with with_lock(self._lock):
            return super().can_transition(target)

    def start(self, initial_state: StateId) -> None:
        with with_lock(self._lock):
            super().start(initial_state)

    def transition(self, target: StateId) -> None:
        with with_lock(self._lock):
            super().transition(target)
