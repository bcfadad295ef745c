from __future__ import annotations

import pytest

from botresponse.codec import decode, encode, strip_internal_tag
from botresponse.exceptions import ResponseValidationError
from botresponse.models import QuickRepliesPayload


def test_encode_decode_keeps_nested_values() -> None:
    content = {
        "template_type": "generic",
        "elements": [{"title": "Äpfel", "subtitle": "", "image_url": "", "buttons": [{"title": "Go"}]}],
    }
    assert decode(encode(content)) == content


def test_encode_strips_tagged_payload() -> None:
    text = encode(QuickRepliesPayload(text="hi", quick_replies=[]))
    assert decode(text) == {"text": "hi", "quick_replies": []}


def test_strip_internal_tag_on_mapping() -> None:
    assert strip_internal_tag({"text": "hi", "__typename": "TextPayload"}) == {"text": "hi"}


def test_decode_empty_document() -> None:
    assert decode("") is None


def test_decode_invalid_yaml() -> None:
    with pytest.raises(ResponseValidationError):
        decode("text: [unclosed")


def test_decode_requires_string() -> None:
    with pytest.raises(ResponseValidationError):
        decode(None)
