# statekeeper/runtime/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from statekeeper.runtime.concurrency import SynchronizedStateMachine, get_lock, with_lock

__all__ = ["SynchronizedStateMachine", "get_lock", "with_lock"]
