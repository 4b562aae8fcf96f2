from __future__ import annotations

from typing import Any

from nosticky.live_value.types import ObservableContainer
from nosticky.utilities.logging import get_logger

logger = get_logger(__name__)


def has_value(container: ObservableContainer[Any]) -> bool:
    """Return whether ``container`` currently holds a value.

    Relies on the container delivering its held value synchronously to a
    subscriber during registration. The throwaway subscriber is always removed
    again, so the container's subscriber set is left unchanged.
    """

    seen = False

    def probe(_value: Any) -> None:
        nonlocal seen
        seen = True

    try:
        container.observe_forever(probe)
    finally:
        container.remove_observer(probe)
    logger.debug("Probed %r: has_value=%s", container, seen)
    return seen
