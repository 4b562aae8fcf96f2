from nosticky.live_value.container import NOT_SET, LiveValue
from nosticky.live_value.mapped import MappedLiveValue
from nosticky.live_value.types import ObservableContainer, Subscriber

__all__ = [
    "LiveValue",
    "MappedLiveValue",
    "NOT_SET",
    "ObservableContainer",
    "Subscriber",
]
