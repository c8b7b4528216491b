"""Common utilities and schemas for slackdispatch."""

from slackdispatch.common.config import SlackDispatchConfig
from slackdispatch.common.constants import (
    DEFAULT_PRIORITY,
    FIXED_HANDLER_ARITY,
    CommentStatus,
    PostStatus,
)
from slackdispatch.common.errors import (
    DispatcherAlreadyBoundError,
    InvalidEventDefinitionError,
    NotifierError,
    RegistryFrozenError,
    SlackDispatchError,
)
from slackdispatch.common.schemas import Attachment, DestinationSetting

__all__ = [
    "SlackDispatchConfig",
    "DEFAULT_PRIORITY",
    "FIXED_HANDLER_ARITY",
    "CommentStatus",
    "PostStatus",
    "SlackDispatchError",
    "RegistryFrozenError",
    "InvalidEventDefinitionError",
    "DispatcherAlreadyBoundError",
    "NotifierError",
    "Attachment",
    "DestinationSetting",
]
