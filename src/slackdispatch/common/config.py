"""Application configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings

from slackdispatch.common.constants import DEFAULT_PRIORITY, EXCERPT_WORDS


class SlackDispatchConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    default_priority: int = DEFAULT_PRIORITY
    fixed_handler_arity: bool = False

    notified_post_types: list[str] = ["post"]
    notified_comment_post_types: list[str] = ["post"]
    excerpt_words: int = EXCERPT_WORDS

    request_timeout_seconds: float = 5.0

    model_config = {"env_prefix": "SLACKDISPATCH_", "case_sensitive": False}


__all__ = ["SlackDispatchConfig"]
