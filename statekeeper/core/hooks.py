# statekeeper/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from statekeeper.core.types import StateId


@runtime_checkable
class HookProtocol(Protocol):
    """
    Observer notified of state machine activity. Every method is optional;
    the manager skips the ones a hook does not define.

    Hooks run inline after the matching callback succeeded. An exception
    raised by a hook propagates to the caller of ``start`` or ``transition``.
    """

    def on_enter(self, state: StateId) -> None: ...

    def on_exit(self, state: StateId) -> None: ...

    def on_transition(self, source: StateId, target: StateId) -> None: ...

    def on_error(self, error: Exception) -> None: ...


class HookManager:
    """
    Manages the registration and execution of hooks that listen to state machine
    lifecycle events (on_enter, on_exit, on_transition, on_error). Users can attach
    logging, monitoring, or compensating actions without altering core logic.
    """

    def __init__(self, hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[HookProtocol] = list(hooks or [])
        self._invoker = _HookInvoker(self._hooks)

    def register_hook(self, hook: HookProtocol) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the HookProtocol methods.
        """
        self._hooks.append(hook)

    @property
    def hooks(self) -> List[HookProtocol]:
        return list(self._hooks)

    def execute_on_enter(self, state: StateId) -> None:
        """
        Run all hooks' on_enter logic after a state was entered.
        """
        self._invoker.invoke("on_enter", state)

    def execute_on_exit(self, state: StateId) -> None:
        """
        Run all hooks' on_exit logic after a state was exited.
        """
        self._invoker.invoke("on_exit", state)

    def execute_on_transition(self, source: StateId, target: StateId) -> None:
        """
        Run all hooks' on_transition logic once a transition is committed.
        """
        self._invoker.invoke("on_transition", source, target)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when a callback fails.
        """
        self._invoker.invoke("on_error", error)


class _HookInvoker:
    """
    Internal helper that iterates through a list of hooks and invokes their
    lifecycle methods in registration order.
    """

    def __init__(self, hooks: List[HookProtocol]) -> None:
        self._hooks = hooks

    def invoke(self, method: str, *args) -> None:
        for hook in self._hooks:
            fn = getattr(hook, method, None)
            if callable(fn):
                fn(*args)
