"""
Duel Reporting
Console output for self-test runs.
"""
from .events import event_bus, CheckPassedEvent, SelfTestCompletedEvent


class LoggerHandler:
    """Simple handler that logs self-test events to console."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        event_bus.subscribe(SelfTestCompletedEvent, self.on_completed)
        if verbose:
            event_bus.subscribe(CheckPassedEvent, self.on_check)

    def on_check(self, event: CheckPassedEvent) -> None:
        print(f"[CHECK] {event.name}: {event.actual} == {event.expected}")

    def on_completed(self, event: SelfTestCompletedEvent) -> None:
        print(f"[DONE] {event.checks} checks passed")

    def detach(self) -> None:
        """Stop listening to the event bus."""
        event_bus.unsubscribe(SelfTestCompletedEvent, self.on_completed)
        event_bus.unsubscribe(CheckPassedEvent, self.on_check)
