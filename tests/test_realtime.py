"""Tests for state change events"""
import logging

from storefront.realtime import EVENT_CART_UPDATED, StateEmitter, StateEvent


def _event(action="add"):
    return StateEvent(event=EVENT_CART_UPDATED, action=action, data=None)


def test_listeners_called_in_subscription_order():
    emitter = StateEmitter()
    calls = []
    emitter.subscribe(lambda e: calls.append("first"))
    emitter.subscribe(lambda e: calls.append("second"))

    emitter.emit(_event())

    assert calls == ["first", "second"]


def test_unsubscribe_removes_listener():
    emitter = StateEmitter()
    calls = []
    unsubscribe = emitter.subscribe(calls.append)

    unsubscribe()
    unsubscribe()
    emitter.emit(_event())

    assert calls == []


def test_failing_listener_does_not_block_others(caplog):
    """Test a raising listener is logged and the rest still run."""
    emitter = StateEmitter()
    calls = []

    def broken(event):
        raise RuntimeError("boom")

    emitter.subscribe(broken)
    emitter.subscribe(calls.append)

    with caplog.at_level(logging.WARNING, logger="storefront.realtime"):
        emitter.emit(_event())

    assert len(calls) == 1
    assert "Listener failed on cart.updated" in caplog.text


def test_listener_may_unsubscribe_during_emit():
    emitter = StateEmitter()
    calls = []
    unsubscribe = None

    def once(event):
        calls.append(event.action)
        unsubscribe()

    unsubscribe = emitter.subscribe(once)
    emitter.emit(_event("add"))
    emitter.emit(_event("remove"))

    assert calls == ["add"]
