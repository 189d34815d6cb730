# statekeeper/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Type aliases shared across the state machine modules.

State identifiers are opaque: the engine only hashes and compares them.
Strings work, but a closed ``enum.Enum`` keeps typos from silently creating
states that can never be reached.
"""

from typing import Callable, Hashable

StateId = Hashable
Callback = Callable[[], object]

ENTER = "enter"
EXIT = "exit"
