"""Empty content builders for each payload kind."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from .config import ResponseConfig, resolve_config
from .models import PayloadKind


def default_carousel_slide() -> Dict[str, Any]:
    return {"title": "", "subtitle": "", "image_url": "", "buttons": []}


def _default_button(button_type: str) -> Dict[str, Any]:
    return {"title": "", "type": button_type, "payload": ""}


def default_template(
    kind: Union[PayloadKind, str, None],
    *,
    config: Optional[ResponseConfig] = None,
) -> Optional[Dict[str, Any]]:
    """Build minimal content of ``kind``, or ``None`` when the kind is unknown.

    Every returned payload classifies back to ``kind``.
    """
    cfg = resolve_config(config)
    resolved = PayloadKind.parse(kind)
    if resolved is PayloadKind.TEXT:
        return {"text": ""}
    if resolved is PayloadKind.QUICK_REPLIES:
        return {"text": "", "quick_replies": [_default_button(cfg.button_type)]}
    if resolved is PayloadKind.TEXT_WITH_BUTTONS:
        return {"text": "", "buttons": [_default_button(cfg.button_type)]}
    if resolved is PayloadKind.CUSTOM:
        return {"custom": ""}
    if resolved is PayloadKind.IMAGE:
        return {"image": ""}
    if resolved is PayloadKind.CAROUSEL:
        return {"template_type": cfg.carousel_template_type, "elements": [default_carousel_slide()]}
    return None


__all__ = ["default_template", "default_carousel_slide"]
