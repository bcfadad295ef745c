"""Payload kinds and the tagged payload variants."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type

TYPENAME_FIELD = "__typename"


class PayloadKind(str, Enum):
    """Closed set of payload variants, valued by their stored type names."""

    TEXT = "TextPayload"
    QUICK_REPLIES = "QuickRepliesPayload"
    TEXT_WITH_BUTTONS = "TextWithButtonsPayload"
    CUSTOM = "CustomPayload"
    IMAGE = "ImagePayload"
    CAROUSEL = "CarouselPayload"

    @classmethod
    def parse(cls, value: Any) -> Optional["PayloadKind"]:
        """Return the matching kind, or ``None`` for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


BUTTON_KINDS = (PayloadKind.QUICK_REPLIES, PayloadKind.TEXT_WITH_BUTTONS)


class Payload:
    """Base of the tagged payload union.

    The kind is carried by the class, never by a data field. Structured
    variants keep unknown keys in ``extra`` so nothing decoded is lost.
    """

    __slots__ = ()

    kind: ClassVar[PayloadKind]
    FIELDS: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Payload":
        known = {name: data.get(name) for name in cls.FIELDS}
        extra = {k: v for k, v in data.items() if k not in cls.FIELDS and k != TYPENAME_FIELD}
        return cls(**known, extra=extra)

    def to_payload(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for name in self.FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data


@dataclass(slots=True)
class TextPayload(Payload):
    kind: ClassVar[PayloadKind] = PayloadKind.TEXT
    FIELDS: ClassVar[Tuple[str, ...]] = ("text", "metadata")

    text: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class QuickRepliesPayload(Payload):
    kind: ClassVar[PayloadKind] = PayloadKind.QUICK_REPLIES
    FIELDS: ClassVar[Tuple[str, ...]] = ("text", "quick_replies", "metadata")

    text: Optional[str] = None
    quick_replies: Optional[List[Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class TextWithButtonsPayload(Payload):
    kind: ClassVar[PayloadKind] = PayloadKind.TEXT_WITH_BUTTONS
    FIELDS: ClassVar[Tuple[str, ...]] = ("text", "buttons", "metadata")

    text: Optional[str] = None
    buttons: Optional[List[Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ImagePayload(Payload):
    kind: ClassVar[PayloadKind] = PayloadKind.IMAGE
    FIELDS: ClassVar[Tuple[str, ...]] = ("image", "metadata")

    image: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class CarouselPayload(Payload):
    kind: ClassVar[PayloadKind] = PayloadKind.CAROUSEL
    FIELDS: ClassVar[Tuple[str, ...]] = ("template_type", "elements", "metadata")

    template_type: Optional[str] = None
    elements: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class CustomPayload(Payload):
    """Free-form payload, also the home of anything that matched no other shape."""

    kind: ClassVar[PayloadKind] = PayloadKind.CUSTOM

    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CustomPayload":
        return cls(fields={k: v for k, v in data.items() if k != TYPENAME_FIELD})

    @property
    def metadata(self) -> Optional[Dict[str, Any]]:
        return self.fields.get("metadata")

    def to_payload(self) -> Dict[str, Any]:
        return dict(self.fields)


PAYLOAD_TYPES: Dict[PayloadKind, Type[Payload]] = {
    cls.kind: cls
    for cls in (
        TextPayload,
        QuickRepliesPayload,
        TextWithButtonsPayload,
        ImagePayload,
        CarouselPayload,
        CustomPayload,
    )
}


__all__ = [
    "TYPENAME_FIELD",
    "PayloadKind",
    "BUTTON_KINDS",
    "Payload",
    "TextPayload",
    "QuickRepliesPayload",
    "TextWithButtonsPayload",
    "ImagePayload",
    "CarouselPayload",
    "CustomPayload",
    "PAYLOAD_TYPES",
]
