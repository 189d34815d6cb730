# statekeeper/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine library.

    :param message: Human readable description.
    :param details: Optional structured data describing the failure.
    """

    def __init__(self, message: str = "", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransitionError(FSMError):
    """
    Raised when a requested transition fails validation. The machine is left
    exactly as it was, so the call can be retried with a corrected target.
    """

    def __init__(self, message: str, source: Any, target: Any, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.source = source
        self.target = target


class UnknownSourceStateError(TransitionError):
    """
    Raised when the current state has no outgoing transitions registered.
    """

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(
            f"Could not transition to {target!r}: no transitions defined from {source!r}",
            source,
            target,
        )


class InvalidTransitionError(TransitionError):
    """
    Raised when the target is not among the registered targets of the current state.
    """

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"Invalid transition from {source!r} to {target!r}", source, target)


class CallbackError(FSMError):
    """
    Raised when an enter or exit callback fails. The original exception is
    kept untouched in ``error`` and chained as ``__cause__``.

    :param phase: ``"enter"`` or ``"exit"``.
    :param state: The state whose callback failed.
    :param target: The state the machine was moving to.
    :param error: The exception raised by the callback.
    """

    def __init__(self, phase: str, state: Any, target: Any, error: BaseException) -> None:
        super().__init__(
            f"{phase} callback for state {state!r} failed while moving to {target!r}: {error}",
            {"phase": phase, "state": state, "target": target},
        )
        self.phase = phase
        self.state = state
        self.target = target
        self.error = error


class ValidationError(FSMError):
    """
    Raised when a registration receives unusable input, such as a callback
    that is not callable.
    """
