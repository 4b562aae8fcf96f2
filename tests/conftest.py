from typing import Callable

import pytest
from hypothesis import HealthCheck, settings

from nosticky.lifecycle import LifecycleScope, State
from nosticky.live_value import LiveValue

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class Recorder:
    """Callable subscriber that remembers every value it receives."""

    def __init__(self) -> None:
        self.values: list[object] = []

    def __call__(self, value: object) -> None:
        self.values.append(value)


@pytest.fixture(autouse=True)
def default_no_replay_activation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the widened activation default so scope tests do not depend on the caller's env."""

    monkeypatch.delenv("NOSTICKY_NO_REPLAY_ACTIVATION", raising=False)
    yield


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def recorder_factory() -> Callable[[], Recorder]:
    return Recorder


@pytest.fixture
def scope() -> LifecycleScope:
    return LifecycleScope("test-scope")


@pytest.fixture
def started_scope() -> LifecycleScope:
    started = LifecycleScope("started-scope")
    started.lifecycle.move_to(State.STARTED)
    return started


@pytest.fixture
def empty_container() -> LiveValue[int]:
    return LiveValue()


@pytest.fixture
def filled_container() -> LiveValue[int]:
    return LiveValue(5)
