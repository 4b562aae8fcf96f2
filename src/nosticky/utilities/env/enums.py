from enum import StrEnum


class NoReplayActivation(StrEnum):
    CREATED = "created"
    STARTED = "started"
