"""
nosticky - event-style subscriptions over value containers that replay.

A container that hands its current value to every new subscriber is ideal for
state but wrong for events. ``subscribe_no_replay`` and
``subscribe_forever_no_replay`` register a wrapper that drops that replayed
value and forwards everything set afterwards, without touching the container.
"""

from nosticky.lifecycle import (ActivationScope, ExtendedActivationScope,
                                Lifecycle, LifecycleScope, Phase, State,
                                active_when_created)
from nosticky.live_value import (LiveValue, MappedLiveValue,
                                 ObservableContainer, Subscriber)
from nosticky.no_replay import (SuppressFirstIfStickyObserver, has_value,
                                subscribe_forever_no_replay,
                                subscribe_no_replay)

__all__ = [
    # Containers
    "LiveValue",
    "MappedLiveValue",
    "ObservableContainer",
    "Subscriber",
    # Scopes
    "ActivationScope",
    "ExtendedActivationScope",
    "Lifecycle",
    "LifecycleScope",
    "Phase",
    "State",
    "active_when_created",
    # Event subscriptions
    "SuppressFirstIfStickyObserver",
    "has_value",
    "subscribe_forever_no_replay",
    "subscribe_no_replay",
]
