"""Flocking exception hierarchy."""


class FlockError(Exception):
    """Base class for all flocking errors."""


class ConfigurationError(FlockError):
    """Raised when an option is missing, null or invalid at initialization.

    Pass (option, reason) to name the offending option, or a single
    free-form message.
    """

    def __init__(self, option: str = None, reason: str = None):
        if option and reason:
            message = f"The option '{option}' {reason}"
            self.option = option
        else:
            message = option if option else "Invalid configuration"
            self.option = None

        super().__init__(message)


class LifecycleError(FlockError):
    """Raised when start/stop is called in the wrong simulation state.

    The controller's state is left unchanged.
    """
