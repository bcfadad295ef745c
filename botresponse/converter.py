"""Conversions between the button-bearing payload kinds."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Union

from .codec import strip_internal_tag
from .exceptions import InvalidToggleSource, UnsupportedConversion
from .models import Payload, PayloadKind, QuickRepliesPayload, TextWithButtonsPayload

logger = logging.getLogger(__name__)

Content = Union[Payload, Mapping[str, Any]]


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def set_type_quick_reply(content: Content) -> QuickRepliesPayload:
    """Keep text and metadata, carry buttons over as quick replies."""
    data = strip_internal_tag(content)
    return QuickRepliesPayload(
        text=data.get("text"),
        quick_replies=_first_present(data, "quick_replies", "buttons"),
        metadata=data.get("metadata"),
    )


def set_type_text_with_buttons(content: Content) -> TextWithButtonsPayload:
    """Keep text and metadata, carry quick replies over as buttons."""
    data = strip_internal_tag(content)
    return TextWithButtonsPayload(
        text=data.get("text"),
        buttons=_first_present(data, "buttons", "quick_replies"),
        metadata=data.get("metadata"),
    )


CONVERTERS: Dict[PayloadKind, Callable[[Content], Payload]] = {
    PayloadKind.QUICK_REPLIES: set_type_quick_reply,
    PayloadKind.TEXT_WITH_BUTTONS: set_type_text_with_buttons,
}


def convert(content: Content, target_kind: Union[PayloadKind, str]) -> Payload:
    """Map ``content`` onto ``target_kind``, dropping fields the target does not share."""
    converter = CONVERTERS.get(PayloadKind.parse(target_kind))
    if converter is None:
        raise UnsupportedConversion(target_kind)
    logger.debug("Converting content to %s", target_kind)
    return converter(content)


def toggle_button_persistence(payload: Payload) -> Payload:
    """Swap quick replies and buttons based on the payload's own tag."""
    kind = getattr(payload, "kind", None)
    if kind is PayloadKind.QUICK_REPLIES:
        return set_type_text_with_buttons(payload)
    if kind is PayloadKind.TEXT_WITH_BUTTONS:
        return set_type_quick_reply(payload)
    raise InvalidToggleSource(kind)


__all__ = [
    "convert",
    "set_type_quick_reply",
    "set_type_text_with_buttons",
    "toggle_button_persistence",
    "CONVERTERS",
]
