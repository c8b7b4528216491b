"""Exception hierarchy for slackdispatch."""

from __future__ import annotations


class SlackDispatchError(Exception):
    """Base class for every error raised by slackdispatch."""


class RegistryFrozenError(SlackDispatchError):
    """Raised when an augmentation is registered after the registry was built."""

    def __init__(self, extension_name: str) -> None:
        self.extension_name = extension_name
        super().__init__(
            f"Event registry already built; cannot register extension "
            f"{extension_name!r}"
        )


class InvalidEventDefinitionError(SlackDispatchError):
    """Raised when an augmentation returns something that is not an event map."""


class DispatcherAlreadyBoundError(SlackDispatchError):
    """Raised when a dispatcher is asked to bind handlers twice."""


class NotifierError(SlackDispatchError):
    """Raised when a notifier cannot deliver a payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


__all__ = [
    "SlackDispatchError",
    "RegistryFrozenError",
    "InvalidEventDefinitionError",
    "DispatcherAlreadyBoundError",
    "NotifierError",
]
