from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from nosticky.lifecycle import ActivationScope

T = TypeVar("T")

Subscriber = Callable[[T], None]


class ObservableContainer(Protocol[T]):
    """A zero-or-one value holder that replays its value synchronously.

    Registering a subscriber while a value is held must invoke that subscriber
    before the registering call returns; registering against an empty
    container must not invoke it.
    """

    def observe(self, scope: ActivationScope, subscriber: Subscriber[T]) -> None: ...

    def observe_forever(self, subscriber: Subscriber[T]) -> None: ...

    def remove_observer(self, subscriber: Subscriber[T]) -> None: ...
