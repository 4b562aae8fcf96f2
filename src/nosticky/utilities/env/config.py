from nosticky.utilities.env.activation import ActivationConfiguration
from nosticky.utilities.env.logs import LoggingConfiguration


class Configuration(
    ActivationConfiguration,
    LoggingConfiguration,
):
    """Aggregate environment configuration helpers."""
