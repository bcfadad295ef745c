"""Shared configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ResponseConfigError

DEFAULT_KEY = "utter_"
DEFAULT_BUTTON_TYPE = "postback"
DEFAULT_CAROUSEL_TYPE = "generic"


@dataclass(slots=True)
class ResponseConfig:
    """Placeholders used when building and checking response content."""

    default_key: str = DEFAULT_KEY
    button_type: str = DEFAULT_BUTTON_TYPE
    carousel_template_type: str = DEFAULT_CAROUSEL_TYPE

    @classmethod
    def from_env(cls) -> "ResponseConfig":
        def optional(key: str, default: str) -> str:
            value = os.environ.get(key)
            if value is None:
                return default
            if not value.strip():
                raise ResponseConfigError(f"Environment variable is blank: {key}")
            return value.strip()

        return cls(
            default_key=optional("BOT_RESPONSE_DEFAULT_KEY", DEFAULT_KEY),
            button_type=optional("BOT_RESPONSE_BUTTON_TYPE", DEFAULT_BUTTON_TYPE),
            carousel_template_type=optional("BOT_RESPONSE_CAROUSEL_TYPE", DEFAULT_CAROUSEL_TYPE),
        )


DEFAULT_CONFIG = ResponseConfig()


def resolve_config(config: Optional[ResponseConfig]) -> ResponseConfig:
    return config if config is not None else DEFAULT_CONFIG


def load_env_file(path: str | os.PathLike[str] = ".env") -> None:
    """Load a .env file into the environment if it exists."""
    env_path = Path(path)
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


__all__ = ["ResponseConfig", "DEFAULT_CONFIG", "resolve_config", "load_env_file"]
