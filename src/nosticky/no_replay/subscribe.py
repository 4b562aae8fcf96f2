from __future__ import annotations

from typing import Any, TypeVar

from nosticky.lifecycle import ActivationScope, active_when_created
from nosticky.live_value.types import ObservableContainer, Subscriber
from nosticky.no_replay.observer import SuppressFirstIfStickyObserver
from nosticky.no_replay.probe import has_value
from nosticky.utilities.env import Configuration, NoReplayActivation
from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _event_scope(scope: ActivationScope) -> ActivationScope:
    if Configuration.no_replay_activation() is NoReplayActivation.CREATED:
        return active_when_created(scope)
    return scope


def subscribe_no_replay(
    container: ObservableContainer[Any],
    scope: ActivationScope,
    subscriber: Subscriber[T],
) -> SuppressFirstIfStickyObserver[T]:
    """Subscribe for values set after this call, bound to ``scope``.

    The registration is dropped when ``scope`` is destroyed. By default the
    subscriber is active from the scope's created phase rather than its
    started phase, which keeps the window in which a new value could be
    mistaken for the replayed one as small as possible.

    Returns the wrapper actually registered; pass it to
    ``container.remove_observer`` to unsubscribe early.
    """

    wrapper = SuppressFirstIfStickyObserver(has_value(container), subscriber)
    container.observe(_event_scope(scope), wrapper)
    logger.debug("Registered %r on %r", wrapper, container)
    return wrapper


def subscribe_forever_no_replay(
    container: ObservableContainer[Any],
    subscriber: Subscriber[T],
) -> SuppressFirstIfStickyObserver[T]:
    """Subscribe for values set after this call until explicitly removed.

    Returns the wrapper actually registered; pass it to
    ``container.remove_observer`` to unsubscribe.
    """

    wrapper = SuppressFirstIfStickyObserver(has_value(container), subscriber)
    container.observe_forever(wrapper)
    logger.debug("Registered %r on %r", wrapper, container)
    return wrapper
