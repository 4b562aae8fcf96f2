from nosticky.no_replay.observer import SuppressFirstIfStickyObserver
from nosticky.no_replay.probe import has_value
from nosticky.no_replay.subscribe import (subscribe_forever_no_replay,
                                          subscribe_no_replay)

__all__ = [
    "SuppressFirstIfStickyObserver",
    "has_value",
    "subscribe_forever_no_replay",
    "subscribe_no_replay",
]
