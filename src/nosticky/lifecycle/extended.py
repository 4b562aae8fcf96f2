from __future__ import annotations

from reactivex.abc import DisposableBase

from nosticky.lifecycle.lifecycle import ActivationScope, Lifecycle, Phase, State
from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)


def _widened_state(host_state: State) -> State:
    # Host "started" and "stopped" are absorbed: created already counts as started.
    if host_state is State.CREATED:
        return State.STARTED
    return host_state


class _WidenedLifecycle(Lifecycle):
    """Lifecycle that follows its host only while something observes it."""

    def __init__(self, scope: ExtendedActivationScope) -> None:
        super().__init__(f"{scope.host.lifecycle.name}+active-when-created")
        self._scope = scope

    @property
    def current_state(self) -> State:
        if not self.has_observers():
            self._scope._sync_with_host()
        return self._state

    def on_first_observer(self) -> None:
        self._scope._attach()

    def on_last_observer(self) -> None:
        self._scope._detach()


class ExtendedActivationScope:
    """Derived scope that counts as started while the host is merely created.

    Event-style subscribers bound to this scope become active as soon as the
    host is created instead of waiting for the host to start. The host
    lifecycle is only observed, never changed, and only while the derived
    lifecycle has observers of its own; once the last one is removed the host
    subscription is released. The phases published for host phases are:

    - created -> created, started
    - started, stopped -> nothing
    - resumed -> resumed
    - paused -> paused
    - destroyed -> stopped, destroyed (only destroyed if never created)
    """

    def __init__(self, host: ActivationScope) -> None:
        self._host = host
        self._host_subscription: DisposableBase | None = None
        self._lifecycle = _WidenedLifecycle(self)
        self._sync_with_host()

    @property
    def host(self) -> ActivationScope:
        return self._host

    @property
    def lifecycle(self) -> Lifecycle:
        return self._lifecycle

    def is_attached(self) -> bool:
        return self._host_subscription is not None

    def _sync_with_host(self) -> None:
        if self._lifecycle._state is State.DESTROYED:
            return
        self._lifecycle.move_to(_widened_state(self._host.lifecycle.current_state))

    def _attach(self) -> None:
        self._sync_with_host()
        if self._host_subscription is not None or self._lifecycle._state is State.DESTROYED:
            return
        logger.debug("%s: following host", self._lifecycle.name)
        self._host_subscription = self._host.lifecycle.observe(
            self._on_host_phase, catch_up=False
        )

    def _detach(self) -> None:
        subscription, self._host_subscription = self._host_subscription, None
        if subscription is None:
            return
        logger.debug("%s: releasing host", self._lifecycle.name)
        subscription.dispose()

    def _on_host_phase(self, phase: Phase) -> None:
        self._sync_with_host()
        if self._lifecycle._state is State.DESTROYED:
            self._detach()

    def __repr__(self) -> str:
        return f"ExtendedActivationScope({self._lifecycle!r})"


def active_when_created(scope: ActivationScope) -> ExtendedActivationScope:
    """Widen ``scope`` so it counts as active from the created phase onwards."""

    return ExtendedActivationScope(scope)
