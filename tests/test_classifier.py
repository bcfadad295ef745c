from __future__ import annotations

import pytest

from botresponse.classifier import RULES, classify, has_shape_violation, tag_payload
from botresponse.defaults import default_template
from botresponse.models import CustomPayload, PayloadKind, TextPayload


@pytest.mark.parametrize("kind", list(PayloadKind))
def test_default_template_classifies_back_to_its_kind(kind: PayloadKind) -> None:
    assert classify(default_template(kind)) is kind


def test_classify_is_deterministic() -> None:
    payload = {"text": "hi", "quick_replies": [{"title": "A", "type": "postback", "payload": "/a"}]}
    assert classify(payload) is classify(payload) is PayloadKind.QUICK_REPLIES


@pytest.mark.parametrize(
    "payload",
    [
        {"buttons": "not-a-list"},
        {"quick_replies": {"title": "A"}},
        {"image": 42},
        {"image": None},
        {"elements": [{"title": 123}], "template_type": "generic"},
        {"elements": [{"title": "a"}]},
        {"elements": "slides", "template_type": "generic"},
        {"elements": [["not", "a", "slide"]], "template_type": "generic"},
        {"elements": [{"buttons": "x"}], "template_type": "generic"},
        {"elements": [{"image_url": 1}], "template_type": "generic"},
    ],
)
def test_shape_violations_fall_back_to_custom(payload) -> None:
    assert has_shape_violation(payload)
    assert classify(payload) is PayloadKind.CUSTOM


def test_spec_style_wrong_inner_type_is_custom() -> None:
    assert classify({"elements": [{"title": 123}]}) is PayloadKind.CUSTOM


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"image": "http://x"}, PayloadKind.IMAGE),
        ({"image": "http://x", "text": "caption"}, PayloadKind.IMAGE),
        ({"text": "pick", "quick_replies": []}, PayloadKind.QUICK_REPLIES),
        ({"text": "pick", "buttons": [{"title": "A"}]}, PayloadKind.TEXT_WITH_BUTTONS),
        (
            {"template_type": "generic", "elements": [{"title": "a", "subtitle": "b", "image_url": "c", "buttons": []}]},
            PayloadKind.CAROUSEL,
        ),
        ({"text": "hi"}, PayloadKind.TEXT),
        ({"text": "hi", "metadata": {"linkTarget": "_self"}}, PayloadKind.TEXT),
    ],
)
def test_single_discriminator_rules(payload, expected: PayloadKind) -> None:
    assert classify(payload) is expected


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"image": "x", "buttons": []},
        {"text": "hi", "buttons": [], "quick_replies": []},
        {"custom": {"foo": "bar"}},
        {"text": "hi", "attachment": {"type": "video"}},
        {"metadata": {}},
    ],
)
def test_everything_else_is_custom(payload) -> None:
    assert classify(payload) is PayloadKind.CUSTOM


@pytest.mark.parametrize("content", [None, "just a string", ["a", "b"], 7])
def test_non_mapping_content_is_custom(content) -> None:
    assert classify(content) is PayloadKind.CUSTOM


def test_rules_check_shape_before_discriminators() -> None:
    first_predicate, first_kind = RULES[0]
    assert first_predicate is has_shape_violation
    assert first_kind is PayloadKind.CUSTOM
    assert [kind for _, kind in RULES][-1] is PayloadKind.TEXT


def test_tag_payload_keeps_unknown_fields() -> None:
    tagged = tag_payload({"text": "hi", "language_hint": "en", "__typename": "TextPayload"})

    assert isinstance(tagged, TextPayload)
    assert tagged.kind is PayloadKind.TEXT
    assert tagged.extra == {"language_hint": "en"}
    assert tagged.to_payload() == {"text": "hi", "language_hint": "en"}


def test_tag_payload_custom_stores_whole_mapping() -> None:
    original = {"buttons": "broken", "text": "hi", "custom": {"a": 1}}
    tagged = tag_payload(original)

    assert isinstance(tagged, CustomPayload)
    assert tagged.fields == original
    assert tagged.to_payload() == original


def test_tag_payload_returns_tagged_payload_unchanged() -> None:
    tagged = TextPayload(text="hi")
    assert tag_payload(tagged) is tagged
    assert classify(tagged) is PayloadKind.TEXT
