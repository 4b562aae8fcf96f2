from nosticky.lifecycle.extended import (ExtendedActivationScope,
                                         active_when_created)
from nosticky.lifecycle.lifecycle import (ActivationScope, Lifecycle,
                                          LifecycleScope, Phase, State)

__all__ = [
    "ActivationScope",
    "ExtendedActivationScope",
    "Lifecycle",
    "LifecycleScope",
    "Phase",
    "State",
    "active_when_created",
]
