# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading
from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def machine():
    """A fresh, unstarted state machine with no registrations."""
    from statekeeper.core.state_machine import StateMachine

    return StateMachine()


@pytest.fixture
def call_log():
    """A list that recording callbacks append to, for ordering assertions."""
    return []


@pytest.fixture
def recorder(call_log):
    """Returns a factory producing zero-argument callbacks that record a label."""

    def _make(label):
        def _callback():
            call_log.append(label)

        return _callback

    return _make


@pytest.fixture
def failing_callback():
    """Returns a factory producing callbacks that always raise the given error."""

    def _make(error):
        def _callback():
            raise error

        return _callback

    return _make


@pytest.fixture
def dummy_hook():
    """A hook mock with every lifecycle method."""
    hook = MagicMock()
    hook.on_enter = MagicMock()
    hook.on_exit = MagicMock()
    hook.on_transition = MagicMock()
    hook.on_error = MagicMock()
    return hook


@pytest.fixture
def app_machine():
    """The sharing/liking/discovering/uploading machine used across scenarios."""
    from statekeeper.core.state_machine import StateMachine

    m = StateMachine()
    m.add_transition("sharing", "liking")
    m.add_transition("sharing", "uploading")
    m.add_transition("liking", "discovering")
    m.add_transition("discovering", "sharing")
    return m


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from statekeeper.core.errors import (
        CallbackError,
        FSMError,
        InvalidTransitionError,
        TransitionError,
        UnknownSourceStateError,
        ValidationError,
    )

    return (FSMError, TransitionError, UnknownSourceStateError, InvalidTransitionError, CallbackError, ValidationError)


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive():
            thread.join(timeout=1.0)
