"""Synchronous publish/subscribe bus with cancellable subscriptions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

L = TypeVar("L", bound=Callable[..., None])


class Subscription:
    """Handle returned by EventBus.subscribe().

    Calling cancel() removes the listener. Cancelling twice is a no-op.
    """

    def __init__(self, bus: EventBus, listener: Callable[..., None]) -> None:
        self._bus = bus
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        """Whether the listener still receives notifications."""
        return self._active

    def cancel(self) -> None:
        """Stop delivering notifications to the listener."""
        if self._active:
            self._bus._remove(self._listener)
            self._active = False


class EventBus(Generic[L]):
    """Ordered listener list with synchronous delivery.

    Listeners are called in subscription order. The list is replaced,
    never mutated in place, so subscribing or cancelling while a
    publish is iterating does not affect that publish. A listener that
    raises is logged and the remaining listeners still run.

    Example:
        >>> bus: EventBus[Callable[[str], None]] = EventBus("demo")
        >>> sub = bus.subscribe(print)
        >>> bus.publish("hello")
        hello
        >>> sub.cancel()
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: tuple[Callable[..., None], ...] = ()

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: L) -> Subscription:
        """Add a listener; it sees publications from now on.

        Args:
            listener: Callable invoked with the published arguments

        Returns:
            Subscription handle
        """
        self._listeners = (*self._listeners, listener)
        return Subscription(self, listener)

    def publish(self, *args: object) -> None:
        """Deliver arguments to every current listener."""
        for listener in self._listeners:
            try:
                listener(*args)
            except Exception:
                logger.exception(f"Listener {listener!r} on '{self.name}' bus failed")

    def _remove(self, listener: Callable[..., None]) -> None:
        listeners = list(self._listeners)
        for index, existing in enumerate(listeners):
            if existing is listener:
                del listeners[index]
                break
        self._listeners = tuple(listeners)
