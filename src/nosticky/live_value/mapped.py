from __future__ import annotations

from typing import Any, Callable, TypeVar

from nosticky.live_value.container import START_VERSION, LiveValue

S = TypeVar("S")
T = TypeVar("T")


class MappedLiveValue(LiveValue[T]):
    """Derived container holding ``transform`` applied to a source's values.

    The source is only observed while this container has active subscribers.
    Re-observing the source replays its held value; a source version that was
    already mapped is not published again.
    """

    def __init__(self, source: LiveValue[S], transform: Callable[[S], T]) -> None:
        super().__init__()
        self._source = source
        self._transform = transform
        self._mapped_source_version = START_VERSION
        self._source_subscriber: Callable[[Any], None] = self._on_source_value

    def set_value(self, value: T) -> None:
        raise TypeError("MappedLiveValue is derived and cannot be set directly")

    def on_active(self) -> None:
        self._source.observe_forever(self._source_subscriber)

    def on_inactive(self) -> None:
        self._source.remove_observer(self._source_subscriber)

    def _on_source_value(self, value: S) -> None:
        source_version = self._source.version
        if source_version == self._mapped_source_version:
            return
        self._mapped_source_version = source_version
        self._publish(self._transform(value))
