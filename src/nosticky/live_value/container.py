from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from reactivex import operators as ops
from reactivex.disposable import SerialDisposable
from reactivex.subject import BehaviorSubject

from nosticky.lifecycle import ActivationScope, Phase, State
from nosticky.live_value.types import Subscriber
from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

START_VERSION = -1


class _NotSet:
    """Sentinel for a container that has never been given a value."""

    def __repr__(self) -> str:
        return "NOT_SET"


NOT_SET: Any = _NotSet()

Emission = tuple[int, Any]


class _Binding(Generic[T]):
    """A registered subscriber plus its delivery bookkeeping."""

    def __init__(self, container: LiveValue[T], subscriber: Subscriber[T]) -> None:
        self.container = container
        self.subscriber = subscriber
        self.last_version = START_VERSION
        self._subscription: SerialDisposable | None = None

    @property
    def active(self) -> bool:
        return self._subscription is not None

    def is_attached_to(self, scope: ActivationScope) -> bool:
        return False

    def attach(self) -> None:
        self.set_active(True)

    def detach(self) -> None:
        pass

    def set_active(self, active: bool) -> None:
        if active == self.active:
            return
        if active:
            subscription = SerialDisposable()
            self._subscription = subscription
            self.container._change_active_count(1)
            # The subject replays on subscribe; skip it and deliver the latest
            # emission here so subscriber errors surface to the caller.
            subscription.disposable = self.container._emissions.pipe(
                ops.skip(1)
            ).subscribe(on_next=self._deliver)
            self._deliver(self.container._emissions.value)
        else:
            subscription, self._subscription = self._subscription, None
            assert subscription is not None
            subscription.dispose()
            self.container._change_active_count(-1)

    def _deliver(self, emission: Emission) -> None:
        version, value = emission
        if version <= self.last_version or not self.active:
            return
        self.last_version = version
        self.subscriber(value)


class _ScopedBinding(_Binding[T]):
    """A subscriber that is active only while its scope is started."""

    def __init__(
        self,
        container: LiveValue[T],
        scope: ActivationScope,
        subscriber: Subscriber[T],
    ) -> None:
        super().__init__(container, subscriber)
        self.scope = scope
        self._scope_subscription = SerialDisposable()

    def is_attached_to(self, scope: ActivationScope) -> bool:
        return self.scope is scope

    def attach(self) -> None:
        # Subscribed before the first delivery; replay errors must not orphan it.
        self._scope_subscription.disposable = self.scope.lifecycle.observe(
            self._on_phase, catch_up=False
        )
        self._sync_with_scope()

    def detach(self) -> None:
        self._scope_subscription.dispose()

    def _on_phase(self, phase: Phase) -> None:
        self._sync_with_scope()

    def _sync_with_scope(self) -> None:
        state = self.scope.lifecycle.current_state
        if state is State.DESTROYED:
            logger.debug("Scope %r destroyed; removing %r", self.scope, self.subscriber)
            self.container.remove_observer(self.subscriber)
            return
        self.set_active(state.is_at_least(State.STARTED))


class LiveValue(Generic[T]):
    """Hold zero or one value and notify registered subscribers of changes.

    Subscribers registered while a value is held receive it synchronously
    during registration, which is what lets callers probe for a value without
    a dedicated accessor. Scope-bound subscribers only receive values while
    their scope is at least started and are dropped when it is destroyed.
    """

    def __init__(self, initial: T = NOT_SET) -> None:
        self._version = START_VERSION if initial is NOT_SET else START_VERSION + 1
        self._emissions: BehaviorSubject[Emission] = BehaviorSubject(
            (self._version, initial)
        )
        self._bindings: dict[Subscriber[T], _Binding[T]] = {}
        self._active_count = 0

    @property
    def version(self) -> int:
        """Number of the latest value; ``-1`` while nothing was ever set."""

        return self._version

    @property
    def value(self) -> T | None:
        """Return the held value, or ``None`` when nothing was ever set."""

        _, value = self._emissions.value
        return None if value is NOT_SET else value

    def set_value(self, value: T) -> None:
        self._publish(value)

    def _publish(self, value: Any) -> None:
        self._version += 1
        logger.debug("Dispatching version %d to %d active subscribers", self._version, self._active_count)
        self._emissions.on_next((self._version, value))

    def observe(self, scope: ActivationScope, subscriber: Subscriber[T]) -> None:
        if scope.lifecycle.current_state is State.DESTROYED:
            logger.debug("Ignoring %r: scope %r is already destroyed", subscriber, scope)
            return
        existing = self._bindings.get(subscriber)
        if existing is not None:
            if not existing.is_attached_to(scope):
                raise ValueError("Cannot add the same subscriber with different scopes")
            return
        binding = _ScopedBinding(self, scope, subscriber)
        self._bindings[subscriber] = binding
        binding.attach()

    def observe_forever(self, subscriber: Subscriber[T]) -> None:
        existing = self._bindings.get(subscriber)
        if isinstance(existing, _ScopedBinding):
            raise ValueError("Cannot add the same subscriber with different scopes")
        if existing is not None:
            return
        binding = _Binding(self, subscriber)
        self._bindings[subscriber] = binding
        binding.attach()

    def remove_observer(self, subscriber: Subscriber[T]) -> None:
        binding = self._bindings.pop(subscriber, None)
        if binding is None:
            return
        binding.detach()
        binding.set_active(False)

    def remove_observers(self, scope: ActivationScope) -> None:
        for subscriber, binding in list(self._bindings.items()):
            if binding.is_attached_to(scope):
                self.remove_observer(subscriber)

    def has_observers(self) -> bool:
        return bool(self._bindings)

    def has_active_observers(self) -> bool:
        return self._active_count > 0

    def on_active(self) -> None:
        """Called when the number of active subscribers goes from 0 to 1."""

    def on_inactive(self) -> None:
        """Called when the number of active subscribers goes from 1 to 0."""

    def _change_active_count(self, delta: int) -> None:
        previous = self._active_count
        self._active_count += delta
        if previous == 0 and self._active_count > 0:
            self.on_active()
        elif previous > 0 and self._active_count == 0:
            self.on_inactive()

    def map(self, transform: Callable[[T], R]) -> LiveValue[R]:
        from nosticky.live_value.mapped import MappedLiveValue

        return MappedLiveValue(self, transform)

    def __repr__(self) -> str:
        return f"LiveValue(version={self._version}, subscribers={len(self._bindings)})"
