"""Environment configuration helpers."""

from nosticky.utilities.env.config import Configuration as Configuration
from nosticky.utilities.env.enums import \
    NoReplayActivation as NoReplayActivation
