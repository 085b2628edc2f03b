"""
Duel Events

Events published by the self-test run, and the bus that dispatches them.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Any


# === Event Dataclasses ===

@dataclass
class CheckPassedEvent:
    """Fired when a self-test check holds."""
    name: str
    expected: Any
    actual: Any


@dataclass
class SelfTestCompletedEvent:
    """Fired after every check of a self-test run has passed."""
    checks: int


# === EventBus ===

class EventBus:
    """Routes self-test events to whoever listens for their type."""

    def __init__(self):
        self._handlers: Dict[type, List[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Drop a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)

    def clear(self) -> None:
        """Forget every handler, e.g. between test runs."""
        self._handlers.clear()


# Shared by the self-test run and its log handler
event_bus = EventBus()
