import threading

import pytest

from coursekit.events import (
    Event,
    EventDispatcher,
    EventHandler,
    HandlerAlreadyRegisteredError,
)


class StubHandler(EventHandler):
    def __init__(self, handler_id):
        self.handler_id = handler_id

    def handle(self, event):
        pass


class RecordingHandler(EventHandler):
    def __init__(self):
        self.calls = []
        self._lock = threading.Lock()

    def handle(self, event):
        with self._lock:
            self.calls.append(event)


class BarrierHandler(EventHandler):
    def __init__(self, barrier):
        self.barrier = barrier
        self.passed = False

    def handle(self, event):
        self.barrier.wait(timeout=5)
        self.passed = True


class FailingHandler(EventHandler):
    def handle(self, event):
        raise RuntimeError("handler failed")


@pytest.fixture
def dispatcher():
    return EventDispatcher()


@pytest.fixture
def event():
    return Event(name="test", payload="test")


@pytest.fixture
def event2():
    return Event(name="test2", payload="test2")


@pytest.fixture
def handlers():
    return StubHandler(1), StubHandler(2), StubHandler(3)


def test_event_keeps_name_and_payload(event):
    assert event.name == "test"
    assert event.payload == "test"


def test_register(dispatcher, event, handlers):
    handler, handler2, _ = handlers
    dispatcher.register(event.name, handler)
    assert len(dispatcher.handlers_for(event.name)) == 1

    dispatcher.register(event.name, handler2)
    registered = dispatcher.handlers_for(event.name)
    assert len(registered) == 2
    assert registered[0] is handler
    assert registered[1] is handler2


def test_register_with_same_handler(dispatcher, event, handlers):
    handler = handlers[0]
    dispatcher.register(event.name, handler)
    assert len(dispatcher.handlers_for(event.name)) == 1

    with pytest.raises(HandlerAlreadyRegisteredError, match="handler already registered"):
        dispatcher.register(event.name, handler)
    assert len(dispatcher.handlers_for(event.name)) == 1


def test_equal_but_distinct_handlers_are_both_registered(dispatcher, event):
    first, second = StubHandler(1), StubHandler(1)
    dispatcher.register(event.name, first)
    dispatcher.register(event.name, second)
    assert len(dispatcher.handlers_for(event.name)) == 2


def test_clear(dispatcher, event, event2, handlers):
    handler, handler2, handler3 = handlers
    dispatcher.register(event.name, handler)
    dispatcher.register(event.name, handler2)
    assert len(dispatcher.handlers_for(event.name)) == 2
    dispatcher.register(event2.name, handler3)
    assert len(dispatcher.handlers_for(event2.name)) == 1

    dispatcher.clear()
    assert dispatcher.handlers_for(event.name) == []
    assert dispatcher.handlers_for(event2.name) == []
    assert not dispatcher.has(event.name, handler)


def test_has(dispatcher, event, handlers):
    handler, handler2, handler3 = handlers
    dispatcher.register(event.name, handler)
    dispatcher.register(event.name, handler2)
    assert len(dispatcher.handlers_for(event.name)) == 2

    assert dispatcher.has(event.name, handler)
    assert dispatcher.has(event.name, handler2)
    assert not dispatcher.has(event.name, handler3)


def test_has_unknown_event(dispatcher, handlers):
    assert dispatcher.has("missing", handlers[0]) is False


def test_remove(dispatcher, event, event2, handlers):
    handler, handler2, handler3 = handlers
    dispatcher.register(event.name, handler)
    dispatcher.register(event.name, handler2)
    assert len(dispatcher.handlers_for(event.name)) == 2
    dispatcher.register(event2.name, handler3)
    assert len(dispatcher.handlers_for(event2.name)) == 1

    dispatcher.remove(event.name, handler)
    remaining = dispatcher.handlers_for(event.name)
    assert len(remaining) == 1
    assert remaining[0] is handler2

    dispatcher.remove(event.name, handler2)
    assert len(dispatcher.handlers_for(event.name)) == 0

    dispatcher.remove(event2.name, handler3)
    assert len(dispatcher.handlers_for(event2.name)) == 0


def test_remove_unregistered_handler_leaves_state(dispatcher, event, handlers):
    handler, _, handler3 = handlers
    dispatcher.register(event.name, handler)
    dispatcher.remove(event.name, handler3)
    dispatcher.remove("missing", handler3)
    assert dispatcher.handlers_for(event.name) == [handler]


def test_dispatch_calls_each_handler_once(dispatcher, event):
    eh = RecordingHandler()
    eh2 = RecordingHandler()
    dispatcher.register(event.name, eh)
    dispatcher.register(event.name, eh2)

    dispatcher.dispatch(event)

    assert eh.calls == [event]
    assert eh2.calls == [event]


def test_dispatch_ignores_other_events(dispatcher, event, event2):
    eh = RecordingHandler()
    dispatcher.register(event2.name, eh)
    dispatcher.dispatch(event)
    assert eh.calls == []


def test_dispatch_runs_handlers_concurrently(dispatcher, event):
    barrier = threading.Barrier(2)
    first, second = BarrierHandler(barrier), BarrierHandler(barrier)
    dispatcher.register(event.name, first)
    dispatcher.register(event.name, second)

    dispatcher.dispatch(event)

    assert first.passed and second.passed


def test_dispatch_reraises_handler_error_after_all_finish(dispatcher, event):
    recorder = RecordingHandler()
    dispatcher.register(event.name, FailingHandler())
    dispatcher.register(event.name, recorder)

    with pytest.raises(RuntimeError, match="handler failed"):
        dispatcher.dispatch(event)
    assert recorder.calls == [event]