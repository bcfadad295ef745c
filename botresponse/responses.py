"""Operations applied across every language of a response record.

Records are plain mappings shaped as::

    {"key": "utter_greet", "metadata": {...}, "values": [
        {"lang": "en", "sequence": [{"content": "<yaml>"}, ...]},
    ]}

None of these functions mutate their input; each returns a new record.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .classifier import classify, tag_payload
from .codec import decode, encode, strip_internal_tag
from .config import ResponseConfig, resolve_config
from .converter import CONVERTERS, convert
from .defaults import default_template
from .exceptions import ResponseValidationError, UnsupportedConversion
from .models import PayloadKind

logger = logging.getLogger(__name__)


def default_matching_first(
    sequence: Sequence[Mapping[str, Any]],
    *,
    config: Optional[ResponseConfig] = None,
) -> Optional[Dict[str, Any]]:
    """Empty content of the same kind as the first item of ``sequence``."""
    if not sequence:
        raise ResponseValidationError("sequence must contain at least one item")
    kind = classify(decode(sequence[0].get("content", "")))
    return default_template(kind, config=config)


def add_language(
    response: Mapping[str, Any],
    language: str,
    *,
    config: Optional[ResponseConfig] = None,
) -> Dict[str, Any]:
    """Return a copy of ``response`` with an empty ``language`` value appended."""
    values = list(response.get("values") or [])
    if not values:
        raise ResponseValidationError(f"response {response.get('key')!r} has no values to copy a type from")
    content = default_matching_first(values[0].get("sequence") or [], config=config)
    new_value = {"sequence": [{"content": encode(content)}], "lang": language}
    logger.debug("Adding language %s to response %s", language, response.get("key"))
    return {**response, "values": [*values, new_value]}


def retype_all_languages(response: Mapping[str, Any], target_kind: Union[PayloadKind, str]) -> Dict[str, Any]:
    """Convert every variation of every language to ``target_kind``.

    Only the button-bearing kinds are accepted; other targets raise
    :class:`UnsupportedConversion` before anything is decoded.
    """
    if PayloadKind.parse(target_kind) not in CONVERTERS:
        raise UnsupportedConversion(target_kind)

    def retype(item: Mapping[str, Any]) -> Dict[str, Any]:
        payload = convert(tag_payload(decode(item.get("content", ""))), target_kind)
        return {**item, "content": encode(strip_internal_tag(payload))}

    values = [
        {**value, "sequence": [retype(item) for item in value.get("sequence") or []]}
        for value in response.get("values") or []
    ]
    return {**response, "values": values}


def create_response_from_template(
    kind: Union[PayloadKind, str],
    language: str,
    *,
    key: Optional[str] = None,
    config: Optional[ResponseConfig] = None,
) -> Dict[str, Any]:
    """New single-language response whose only variation is empty content of ``kind``."""
    cfg = resolve_config(config)
    content = default_template(kind, config=cfg)
    if content is None:
        raise ResponseValidationError(f"no default template for kind {kind}")
    return {
        "key": key or cfg.default_key,
        "values": [{"sequence": [{"content": encode(content)}], "lang": language}],
    }


def add_template_language(
    templates: Iterable[Mapping[str, Any]],
    language: str,
    *,
    config: Optional[ResponseConfig] = None,
) -> List[Dict[str, Any]]:
    """Copy flat ``{payload, language}`` templates into ``language`` with empty content."""
    result: List[Dict[str, Any]] = []
    for template in templates:
        kind = classify(decode(template.get("payload", "")))
        result.append({**template, "language": language, "payload": encode(default_template(kind, config=config))})
    return result


__all__ = [
    "add_language",
    "retype_all_languages",
    "default_matching_first",
    "create_response_from_template",
    "add_template_language",
]
