"""Payload kind classification.

The decision policy is the ordered ``RULES`` table: each entry pairs a
predicate over the decoded payload with the kind it yields, and the first
matching predicate wins. Anything that no rule claims is ``Custom``, which
is both the free-form variant and the fallback for malformed shapes.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from .models import PAYLOAD_TYPES, Payload, PayloadKind

logger = logging.getLogger(__name__)

DISCRIMINATOR_KEYS = ("image", "buttons", "elements", "custom", "attachment", "quick_replies")

Predicate = Callable[[Mapping[str, Any]], bool]


def _absent_or(content: Mapping[str, Any], key: str, expected: type) -> bool:
    return key not in content or isinstance(content[key], expected)


def _slide_well_formed(slide: Any) -> bool:
    return (
        isinstance(slide, Mapping)
        and _absent_or(slide, "buttons", list)
        and _absent_or(slide, "image_url", str)
        and _absent_or(slide, "title", str)
        and _absent_or(slide, "subtitle", str)
    )


def _elements_well_formed(content: Mapping[str, Any]) -> bool:
    if "elements" not in content:
        return True
    elements = content["elements"]
    return (
        isinstance(elements, list)
        and isinstance(content.get("template_type"), str)
        and all(_slide_well_formed(slide) for slide in elements)
    )


def has_shape_violation(content: Mapping[str, Any]) -> bool:
    """True when a known field holds a value no structured variant accepts."""
    checks = (
        _absent_or(content, "image", str),
        _absent_or(content, "buttons", list),
        _absent_or(content, "quick_replies", list),
        _elements_well_formed(content),
    )
    return not all(checks)


def present_discriminators(content: Mapping[str, Any]) -> List[str]:
    return [key for key in DISCRIMINATOR_KEYS if key in content]


def _only(key: Optional[str]) -> Predicate:
    """Predicate: exactly ``key`` among the discriminators, or none when ``key`` is None."""

    def predicate(content: Mapping[str, Any]) -> bool:
        found = present_discriminators(content)
        if key is None:
            return not found
        return found == [key]

    return predicate


_no_discriminators = _only(None)


def _plain_text(content: Mapping[str, Any]) -> bool:
    return "text" in content and _no_discriminators(content)


RULES: Tuple[Tuple[Predicate, PayloadKind], ...] = (
    (has_shape_violation, PayloadKind.CUSTOM),
    (_only("image"), PayloadKind.IMAGE),
    (_only("quick_replies"), PayloadKind.QUICK_REPLIES),
    (_only("buttons"), PayloadKind.TEXT_WITH_BUTTONS),
    (_only("elements"), PayloadKind.CAROUSEL),
    (_plain_text, PayloadKind.TEXT),
)


def classify(content: Any) -> PayloadKind:
    """Return the kind of a decoded payload. Never raises."""
    if isinstance(content, Payload):
        return content.kind
    if not isinstance(content, Mapping):
        logger.debug("Non-mapping content classified as custom: %s", type(content).__name__)
        return PayloadKind.CUSTOM
    for predicate, kind in RULES:
        if predicate(content):
            if predicate is has_shape_violation:
                logger.debug("Shape violation, falling back to custom: keys=%s", list(content))
            return kind
    return PayloadKind.CUSTOM


def tag_payload(content: Any) -> Payload:
    """Classify ``content`` and wrap it in the matching payload variant."""
    if isinstance(content, Payload):
        return content
    kind = classify(content)
    data = content if isinstance(content, Mapping) else {}
    return PAYLOAD_TYPES[kind].from_mapping(data)


__all__ = [
    "DISCRIMINATOR_KEYS",
    "RULES",
    "classify",
    "tag_payload",
    "has_shape_violation",
    "present_discriminators",
]
