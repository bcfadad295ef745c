"""Checks deciding whether a response carries meaningful content."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .codec import decode
from .config import ResponseConfig, resolve_config

DEFAULT_METADATA = {
    "linkTarget": "_blank",
    "userInput": "show",
    "forceOpen": False,
    "forceClose": False,
}


def _sized(value: Any) -> bool:
    return isinstance(value, (str, list, tuple, dict)) and len(value) > 0


def has_content(content: Any) -> bool:
    """True when decoded content holds something a user would see."""
    if not isinstance(content, Mapping):
        return False
    text = content.get("text")
    buttons = content.get("buttons")
    if content.get("custom") and _sized(content["custom"]):
        return True
    if isinstance(content.get("image"), str) and content["image"]:
        return True
    if _sized(text) and buttons is not None:
        # text alongside buttons
        return True
    if isinstance(buttons, list) and buttons:
        first = buttons[0]
        if isinstance(first, Mapping) and _sized(first.get("title")):
            return True
    if _sized(text) and buttons is None:
        return True
    return False


def is_empty(response: Mapping[str, Any], *, config: Optional[ResponseConfig] = None) -> bool:
    """True when no language of ``response`` holds meaningful content.

    Any ``metadata`` (even an empty mapping) or a key outside the default
    key prefix makes the response non-empty.
    """
    cfg = resolve_config(config)
    if response.get("metadata") is not None:
        return False
    if not str(response.get("key", "")).startswith(cfg.default_key):
        return False
    for value in response.get("values") or []:
        for item in value.get("sequence") or []:
            if has_content(decode(item.get("content", ""))):
                return False
    return True


def check_metadata_set(metadata: Optional[Mapping[str, Any]]) -> bool:
    """True when ``metadata`` differs from the editor defaults."""
    if metadata is None:
        return False
    return any(metadata.get(key) != expected for key, expected in DEFAULT_METADATA.items())


__all__ = ["has_content", "is_empty", "check_metadata_set", "DEFAULT_METADATA"]
