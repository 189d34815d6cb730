# statekeeper/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from statekeeper.core.callbacks import CallbackRegistry
from statekeeper.core.errors import CallbackError, InvalidTransitionError, UnknownSourceStateError
from statekeeper.core.hooks import HookManager, HookProtocol
from statekeeper.core.transitions import TransitionTable
from statekeeper.core.types import ENTER, EXIT, Callback, StateId

logger = logging.getLogger(__name__)

_UNSTARTED = object()


class StateMachine:
    """
    A finite state machine that validates each transition against a declared
    transition table and runs enter/exit callbacks as states change.

    Lifecycle: construct, register transitions and callbacks, call ``start``
    once, then call ``transition`` as often as needed. There is no teardown;
    the exit callback of the final state never runs.

    The machine is not thread-safe. Use
    :class:`statekeeper.runtime.concurrency.SynchronizedStateMachine` or an
    external lock when it is shared between threads.

    Note on partial failure: if the exit callback of the current state
    succeeds and the enter callback of the target then fails, the exit side
    effects have already happened but ``current_state`` does not advance.
    Hooks receive ``on_error`` in that case so the application can compensate.
    """

    def __init__(self, hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        :param hooks: Optional list of hook objects implementing on_enter,
            on_exit, on_transition and/or on_error.
        """
        self._table = TransitionTable()
        self._enter_callbacks = CallbackRegistry(ENTER)
        self._exit_callbacks = CallbackRegistry(EXIT)
        self._hook_manager = HookManager(hooks)
        self._current_state: object = _UNSTARTED

    @property
    def current_state(self) -> Optional[StateId]:
        """The state the machine is in, or None before ``start`` succeeded."""
        if self._current_state is _UNSTARTED:
            return None
        return self._current_state

    @property
    def is_started(self) -> bool:
        return self._current_state is not _UNSTARTED

    @property
    def hook_manager(self) -> HookManager:
        return self._hook_manager

    def add_transition(self, source: StateId, target: StateId) -> None:
        """
        Allow moving from ``source`` to ``target``. Registering the same pair
        more than once is harmless, and ``source`` may equal ``target``.
        """
        self._table.add(source, target)

    def on_enter(self, state: StateId, callback: Callback) -> None:
        """
        Register the callback run when ``state`` becomes current. Replaces any
        previously registered enter callback for that state.

        :raises ValidationError: If ``callback`` is not callable.
        """
        self._enter_callbacks.register(state, callback)

    def on_exit(self, state: StateId, callback: Callback) -> None:
        """
        Register the callback run when ``state`` stops being current. Replaces
        any previously registered exit callback for that state.

        :raises ValidationError: If ``callback`` is not callable.
        """
        self._exit_callbacks.register(state, callback)

    def transitions_from(self, state: StateId) -> Tuple[StateId, ...]:
        """Return the targets registered for ``state`` in insertion order."""
        return self._table.targets(state)

    def can_transition(self, target: StateId) -> bool:
        """
        Return True if ``transition(target)`` would pass validation from the
        current state. Runs no callbacks.
        """
        return self._current_state is not _UNSTARTED and self._table.allows(self._current_state, target)

    def start(self, initial_state: StateId) -> None:
        """
        Put the machine in ``initial_state``, running its enter callback first.

        Calling ``start`` again re-initializes the machine without running the
        exit callback of the state it was in.

        :param initial_state: The state to begin in.
        :raises CallbackError: If the enter callback fails; the current state
            is left as it was.
        """
        if self._current_state is not _UNSTARTED:
            logger.debug("Restarting machine from %r without exit callback", self._current_state)

        try:
            self._enter_callbacks.invoke(initial_state, initial_state)
        except CallbackError as e:
            logger.debug("Start in %r aborted by enter callback", initial_state)
            self._notify_error(e)
            raise

        self._hook_manager.execute_on_enter(initial_state)
        self._current_state = initial_state
        logger.debug("Machine started in %r", initial_state)

    def transition(self, target: StateId) -> None:
        """
        Move from the current state to ``target``.

        The transition is validated first. Then the exit callback of the
        current state runs, followed by the enter callback of ``target``. The
        new state is committed only if both succeed and every on_exit,
        on_enter and on_transition hook returns normally; a raising hook
        propagates and leaves the current state unchanged. A raising on_error
        hook is logged at DEBUG and the CallbackError is still raised.

        :param target: The state to move to.
        :raises UnknownSourceStateError: If no transitions leave the current
            state (including before ``start``).
        :raises InvalidTransitionError: If ``target`` is not reachable from
            the current state.
        :raises CallbackError: If the exit or enter callback fails.
        """
        source = self._current_state
        self._validate(source, target)

        try:
            self._exit_callbacks.invoke(source, target)
            self._hook_manager.execute_on_exit(source)
            self._enter_callbacks.invoke(target, target)
            self._hook_manager.execute_on_enter(target)
        except CallbackError as e:
            logger.debug("Transition %r -> %r aborted in %s callback of %r", source, target, e.phase, e.state)
            self._notify_error(e)
            raise

        self._hook_manager.execute_on_transition(source, target)
        self._current_state = target
        logger.debug("Transitioned %r -> %r", source, target)

    def _notify_error(self, error: CallbackError) -> None:
        """Run on_error hooks; a failing hook never hides the callback error."""
        try:
            self._hook_manager.execute_on_error(error)
        except Exception:
            logger.debug("on_error hook failed while handling %r", error, exc_info=True)

    def _validate(self, source: object, target: StateId) -> None:
        if source is _UNSTARTED or not self._table.has_source(source):
            raise UnknownSourceStateError(None if source is _UNSTARTED else source, target)
        if not self._table.allows(source, target):
            raise InvalidTransitionError(source, target)
