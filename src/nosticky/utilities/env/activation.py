import os

from nosticky.utilities.env.enums import NoReplayActivation


class ActivationConfiguration:
    @classmethod
    def no_replay_activation(cls) -> NoReplayActivation:
        mode = (
            os.environ.get("NOSTICKY_NO_REPLAY_ACTIVATION", "created").strip().lower()
        )
        try:
            return NoReplayActivation(mode)
        except ValueError as exc:
            raise ValueError(
                "NOSTICKY_NO_REPLAY_ACTIVATION must be 'created' or 'started'"
            ) from exc
