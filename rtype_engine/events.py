"""Publish/subscribe event dispatch with an event log."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Hashable

DEFAULT_MAX_EVENT_LOG_LENGTH = 1000


class EventType(IntEnum):
    """Events the engine itself publishes or listens to."""

    WINDOW_IS_OPEN = 1
    QUIT_EVENT = 2
    POLL_EVENT = 3
    WINDOW_CLOSE_EVENT = 4
    GET_WORLD_MOUSE_POS = 5
    WINDOW_SET_VIEW = 6
    SET_FPS_LIMIT_EVENT = 7
    GET_DESTROY = 8
    SEND_INPUT = 9


INTERNAL_EVENT_NAMES: dict[EventType, str] = {
    EventType.WINDOW_IS_OPEN: "WindowIsOpen",
    EventType.QUIT_EVENT: "QuitEvent",
    EventType.POLL_EVENT: "PollEvent",
    EventType.WINDOW_CLOSE_EVENT: "WindowCloseEvent",
    EventType.GET_WORLD_MOUSE_POS: "GetWorldMousePos",
    EventType.WINDOW_SET_VIEW: "WindowSetView",
    EventType.SET_FPS_LIMIT_EVENT: "SetFpsLimitEvent",
    EventType.GET_DESTROY: "GetDestroy",
    EventType.SEND_INPUT: "SendInput",
}


class EventHandler:
    """Callbacks attached to one event type."""

    def __init__(
        self,
        event_type: Hashable,
        on_publish: Callable[[Hashable], None] | None = None,
    ) -> None:
        self.event_type = event_type
        self._callbacks: list[Callable[..., Any]] = []
        self._on_publish = on_publish

    def subscribe(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def publish(self, *args: Any) -> list[Any]:
        """Call every subscriber with ``args``; return their results in order."""
        if self._on_publish is not None:
            self._on_publish(self.event_type)
        return [callback(*args) for callback in self._callbacks]

    def __len__(self) -> int:
        return len(self._callbacks)


class EventManager:
    """Owns one handler per event type and records every publication."""

    def __init__(self, max_log_length: int = DEFAULT_MAX_EVENT_LOG_LENGTH) -> None:
        self._handlers: dict[Hashable, EventHandler] = {}
        self.event_log: list[Hashable] = []
        self.max_log_length = max_log_length

    def _record(self, event_type: Hashable) -> None:
        if len(self.event_log) >= self.max_log_length:
            self.event_log.clear()
        self.event_log.append(event_type)

    def add_handler(self, event_type: Hashable) -> EventHandler:
        """Return the handler for ``event_type``, creating it if needed."""
        handler = self._handlers.get(event_type)
        if handler is None:
            handler = EventHandler(event_type, self._record)
            self._handlers[event_type] = handler
        return handler

    def get_handler(self, event_type: Hashable) -> EventHandler:
        try:
            return self._handlers[event_type]
        except KeyError:
            raise KeyError(f"no handler for event {event_type!r}") from None

    def has_handler(self, event_type: Hashable) -> bool:
        return event_type in self._handlers

    def publish(self, event_type: Hashable, *args: Any) -> list[Any]:
        """Publish to the handler of ``event_type``; with no handler only the log changes."""
        handler = self._handlers.get(event_type)
        if handler is None:
            self._record(event_type)
            return []
        return handler.publish(*args)

    def clear_log(self) -> None:
        self.event_log.clear()