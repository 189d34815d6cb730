# tests/unit/core/test_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from statekeeper.core.hooks import HookManager, HookProtocol, _HookInvoker


def test_hook_manager(dummy_hook):
    hm = HookManager(hooks=[dummy_hook])
    hm.execute_on_enter("a")
    dummy_hook.on_enter.assert_called_once_with("a")
    hm.execute_on_exit("a")
    dummy_hook.on_exit.assert_called_once_with("a")
    hm.execute_on_transition("a", "b")
    dummy_hook.on_transition.assert_called_once_with("a", "b")
    err = Exception("TestError")
    hm.execute_on_error(err)
    dummy_hook.on_error.assert_called_once_with(err)


def test_hook_manager_init():
    hm = HookManager()
    assert hm.hooks == []

    mock_hook = MagicMock(spec=HookProtocol)
    hm = HookManager(hooks=[mock_hook])
    assert hm.hooks == [mock_hook]


def test_hook_manager_register():
    hm = HookManager()
    mock_hook = MagicMock(spec=HookProtocol)
    hm.register_hook(mock_hook)
    hm.execute_on_enter("a")
    assert hm.hooks == [mock_hook]
    mock_hook.on_enter.assert_called_once_with("a")


def test_hook_invoker_order():
    calls = []
    first = MagicMock()
    first.on_enter.side_effect = lambda state: calls.append(("first", state))
    second = MagicMock()
    second.on_enter.side_effect = lambda state: calls.append(("second", state))

    _HookInvoker([first, second]).invoke("on_enter", "a")
    assert calls == [("first", "a"), ("second", "a")]


def test_hook_invoker_missing_methods():
    class EnterOnly:
        def __init__(self):
            self.entered = []

        def on_enter(self, state):
            self.entered.append(state)

    hook = EnterOnly()
    hm = HookManager(hooks=[hook])
    hm.execute_on_exit("a")
    hm.execute_on_transition("a", "b")
    hm.execute_on_error(Exception("ignored"))
    hm.execute_on_enter("b")
    assert hook.entered == ["b"]


def test_hook_errors_propagate():
    hook = MagicMock()
    hook.on_enter.side_effect = RuntimeError("hook failed")
    hm = HookManager(hooks=[hook])
    with pytest.raises(RuntimeError, match="hook failed"):
        hm.execute_on_enter("a")


def test_protocol_runtime_check(dummy_hook):
    assert isinstance(dummy_hook, HookProtocol)
