from __future__ import annotations

from typing import Generic, TypeVar

from nosticky.live_value.types import Subscriber
from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class SuppressFirstIfStickyObserver(Generic[T]):
    """Wrap a subscriber so a replayed (sticky) value is not forwarded.

    The first notification is dropped when the container already held a value
    at subscription time; every later notification is forwarded unchanged.
    A value set between probing and activation is indistinguishable from the
    replayed one and is dropped as well.

    Instances compare and hash by identity, so a container keeps the wrapper
    and the wrapped callback apart.
    """

    __slots__ = ("_had_value_before_subscribe", "_first_notification_consumed", "_wrapped")

    def __init__(self, had_value_before_subscribe: bool, wrapped: Subscriber[T]) -> None:
        self._had_value_before_subscribe = had_value_before_subscribe
        self._first_notification_consumed = False
        self._wrapped = wrapped

    @property
    def had_value_before_subscribe(self) -> bool:
        return self._had_value_before_subscribe

    @property
    def first_notification_consumed(self) -> bool:
        return self._first_notification_consumed

    @property
    def wrapped(self) -> Subscriber[T]:
        return self._wrapped

    def on_changed(self, value: T) -> None:
        if not self._first_notification_consumed:
            self._first_notification_consumed = True
            if self._had_value_before_subscribe:
                logger.debug("Suppressed sticky value for %r", self._wrapped)
                return
        self._wrapped(value)

    def __call__(self, value: T) -> None:
        self.on_changed(value)

    def __repr__(self) -> str:
        state = "pass-through" if self._first_notification_consumed else "pending-first"
        return (
            f"SuppressFirstIfStickyObserver({self._wrapped!r}, "
            f"had_value={self._had_value_before_subscribe}, {state})"
        )
