# statekeeper/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Core package providing the transition engine: the transition table, the
enter/exit callback registries, observer hooks and the state machine that
ties them together.
"""

from statekeeper.core.callbacks import CallbackRegistry
from statekeeper.core.errors import (
    CallbackError,
    FSMError,
    InvalidTransitionError,
    TransitionError,
    UnknownSourceStateError,
    ValidationError,
)
from statekeeper.core.hooks import HookManager, HookProtocol
from statekeeper.core.state_machine import StateMachine
from statekeeper.core.transitions import TransitionTable
from statekeeper.core.types import ENTER, EXIT

__all__ = [
    "CallbackRegistry",
    "CallbackError",
    "FSMError",
    "InvalidTransitionError",
    "TransitionError",
    "UnknownSourceStateError",
    "ValidationError",
    "HookManager",
    "HookProtocol",
    "StateMachine",
    "TransitionTable",
    "ENTER",
    "EXIT",
]
