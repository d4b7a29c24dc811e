import pytest

from rtype_engine.events import (
    DEFAULT_MAX_EVENT_LOG_LENGTH,
    INTERNAL_EVENT_NAMES,
    EventHandler,
    EventManager,
    EventType,
)


def test_handler_calls_subscribers_in_order():
    handler = EventHandler(EventType.GET_DESTROY)
    handler.subscribe(lambda value: ("first", value))
    handler.subscribe(lambda value: ("second", value))
    assert handler.publish(7) == [("first", 7), ("second", 7)]


def test_add_handler_returns_same_handler():
    manager = EventManager()
    first = manager.add_handler(EventType.QUIT_EVENT)
    assert manager.add_handler(EventType.QUIT_EVENT) is first
    assert manager.get_handler(EventType.QUIT_EVENT) is first


def test_get_missing_handler_raises():
    manager = EventManager()
    with pytest.raises(KeyError):
        manager.get_handler(EventType.POLL_EVENT)


def test_publish_lets_subscriber_fill_mutable_argument():
    manager = EventManager()
    manager.add_handler(EventType.WINDOW_IS_OPEN).subscribe(lambda box: box.append(True))
    box = []
    manager.publish(EventType.WINDOW_IS_OPEN, box)
    assert box == [True]


def test_publish_is_logged_and_log_can_be_cleared():
    manager = EventManager()
    manager.add_handler(EventType.GET_DESTROY)
    manager.publish(EventType.GET_DESTROY, 3)
    manager.get_handler(EventType.GET_DESTROY).publish(4)
    assert manager.event_log == [EventType.GET_DESTROY, EventType.GET_DESTROY]
    manager.clear_log()
    assert manager.event_log == []


def test_publish_without_handler_returns_nothing_but_logs():
    manager = EventManager()
    assert manager.publish(42, "data") == []
    assert manager.event_log == [42]


def test_log_clears_itself_when_full():
    manager = EventManager()
    for _ in range(DEFAULT_MAX_EVENT_LOG_LENGTH):
        manager.publish(EventType.SEND_INPUT)
    assert len(manager.event_log) == DEFAULT_MAX_EVENT_LOG_LENGTH
    manager.publish(EventType.QUIT_EVENT)
    assert manager.event_log == [EventType.QUIT_EVENT]


def test_every_logged_internal_event_has_a_name():
    manager = EventManager()
    for event_type in EventType:
        manager.publish(event_type)
    assert {INTERNAL_EVENT_NAMES[logged] for logged in manager.event_log} == set(INTERNAL_EVENT_NAMES.values())
    manager.clear_log()
    manager.publish(EventType.SET_FPS_LIMIT_EVENT, 60.0)
    assert INTERNAL_EVENT_NAMES[manager.event_log[0]] == "SetFpsLimitEvent"