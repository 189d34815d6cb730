# statekeeper/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""statekeeper: a small, embeddable finite state machine engine

Responsibilities:
    - Declaring the legal transitions between states
    - Running enter/exit callbacks as states change
    - Validating every transition before any side effect happens

Cross-cutting Concerns:
    Thread Safety:
        - StateMachine is single-threaded; callers serialize access
        - SynchronizedStateMachine serializes every call behind one lock

    Error Handling:
        - Structured error hierarchy rooted at FSMError
        - Validation failures leave the machine untouched
        - Callback failures are wrapped in CallbackError and never swallowed

    Logging:
        - Standard library logging under the "statekeeper" logger
        - DEBUG only; the library never configures handlers
"""

from statekeeper.core import (
    ENTER,
    EXIT,
    CallbackError,
    CallbackRegistry,
    FSMError,
    HookManager,
    HookProtocol,
    InvalidTransitionError,
    StateMachine,
    TransitionError,
    TransitionTable,
    UnknownSourceStateError,
    ValidationError,
)
from statekeeper.runtime import SynchronizedStateMachine

__version__ = "0.1.0"

__all__ = [
    "ENTER",
    "EXIT",
    "CallbackError",
    "CallbackRegistry",
    "FSMError",
    "HookManager",
    "HookProtocol",
    "InvalidTransitionError",
    "StateMachine",
    "SynchronizedStateMachine",
    "TransitionError",
    "TransitionTable",
    "UnknownSourceStateError",
    "ValidationError",
    "__version__",
]
