from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Callable, Protocol

from reactivex.abc import DisposableBase
from reactivex.disposable import Disposable
from reactivex.subject import Subject

from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)


class State(IntEnum):
    """Ordered lifecycle states; a scope is "started" once it reaches STARTED."""

    DESTROYED = 0
    INITIALIZED = 1
    CREATED = 2
    STARTED = 3
    RESUMED = 4

    def is_at_least(self, other: State) -> bool:
        return self >= other


class Phase(StrEnum):
    CREATED = "created"
    STARTED = "started"
    RESUMED = "resumed"
    PAUSED = "paused"
    STOPPED = "stopped"
    DESTROYED = "destroyed"

    @property
    def target_state(self) -> State:
        return _PHASE_TARGETS[self]


_PHASE_TARGETS: dict[Phase, State] = {
    Phase.CREATED: State.CREATED,
    Phase.STARTED: State.STARTED,
    Phase.RESUMED: State.RESUMED,
    Phase.PAUSED: State.STARTED,
    Phase.STOPPED: State.CREATED,
    Phase.DESTROYED: State.DESTROYED,
}

_UPWARD_PHASES: tuple[tuple[State, Phase], ...] = (
    (State.CREATED, Phase.CREATED),
    (State.STARTED, Phase.STARTED),
    (State.RESUMED, Phase.RESUMED),
)

_DOWNWARD_PHASES: tuple[tuple[State, Phase], ...] = (
    (State.RESUMED, Phase.PAUSED),
    (State.STARTED, Phase.STOPPED),
    (State.CREATED, Phase.DESTROYED),
    (State.INITIALIZED, Phase.DESTROYED),
)

PhaseCallback = Callable[[Phase], None]


def _catch_up_phases(state: State) -> list[Phase]:
    if state is State.DESTROYED:
        return []
    return [phase for threshold, phase in _UPWARD_PHASES if state.is_at_least(threshold)]


class Lifecycle:
    """Track a scope's current state and publish the phases that move it.

    Observers registered through :meth:`observe` first receive the upward
    phases that lead to the current state, synchronously, and then every live
    phase as it is handled.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or "lifecycle"
        self._state = State.INITIALIZED
        self._phases: Subject[Phase] = Subject()
        self._observer_count = 0

    @property
    def current_state(self) -> State:
        return self._state

    def handle_phase(self, phase: Phase) -> None:
        if self._state is State.DESTROYED:
            raise ValueError(
                f"{self.name} is already destroyed and cannot handle {phase!s}"
            )
        target = phase.target_state
        if target is self._state:
            return
        logger.debug("%s: %s -> %s (%s)", self.name, self._state.name, target.name, phase)
        self._state = target
        self._phases.on_next(phase)
        if target is State.DESTROYED:
            self._phases.on_completed()

    def move_to(self, state: State) -> None:
        """Publish the ordered phases that take this lifecycle to ``state``."""

        if state is State.INITIALIZED and self._state is not State.INITIALIZED:
            raise ValueError(f"{self.name} cannot move back to INITIALIZED")
        while self._state < state:
            phase = next(p for threshold, p in _UPWARD_PHASES if threshold > self._state)
            self.handle_phase(phase)
        while self._state > state:
            phase = next(p for threshold, p in _DOWNWARD_PHASES if threshold == self._state)
            self.handle_phase(phase)

    def observe(self, callback: PhaseCallback, *, catch_up: bool = True) -> DisposableBase:
        """Subscribe ``callback`` to phases; dispose the result to stop.

        With ``catch_up`` the upward phases leading to the current state are
        replayed right after subscribing. Replay stops early if the state
        changes meanwhile, since the live phases already reported that.
        """

        self._change_observer_count(1)
        subscription = self._phases.subscribe(on_next=callback)
        handle = Disposable(lambda: self._release(subscription))
        if not catch_up:
            return handle
        state = self._state
        try:
            for phase in _catch_up_phases(state):
                if self._state is not state:
                    break
                callback(phase)
        except Exception:
            handle.dispose()
            raise
        return handle

    def has_observers(self) -> bool:
        return self._observer_count > 0

    def on_first_observer(self) -> None:
        """Called when the number of observers goes from 0 to 1."""

    def on_last_observer(self) -> None:
        """Called when the number of observers goes from 1 to 0."""

    def _release(self, subscription: DisposableBase) -> None:
        subscription.dispose()
        self._change_observer_count(-1)

    def _change_observer_count(self, delta: int) -> None:
        previous = self._observer_count
        self._observer_count += delta
        if previous == 0 and self._observer_count > 0:
            self.on_first_observer()
        elif previous > 0 and self._observer_count == 0:
            self.on_last_observer()

    def __repr__(self) -> str:
        return f"Lifecycle({self.name}={self._state.name})"


class ActivationScope(Protocol):
    @property
    def lifecycle(self) -> Lifecycle: ...


class LifecycleScope:
    """A standalone activation scope driven directly by its owner."""

    def __init__(self, name: str | None = None) -> None:
        self._lifecycle = Lifecycle(name)

    @property
    def lifecycle(self) -> Lifecycle:
        return self._lifecycle

    def __repr__(self) -> str:
        return f"LifecycleScope({self._lifecycle.name}={self._lifecycle.current_state.name})"
