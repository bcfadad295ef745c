"""YAML codec for stored payload content."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from .exceptions import ResponseValidationError
from .models import TYPENAME_FIELD, Payload

try:
    import yaml
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError("PyYAML is required: pip install pyyaml") from exc

logger = logging.getLogger(__name__)


def strip_internal_tag(payload: Union[Payload, Mapping[str, Any]]) -> Dict[str, Any]:
    """Return the plain mapping to persist, without any kind tag."""
    if isinstance(payload, Payload):
        return payload.to_payload()
    return {k: v for k, v in payload.items() if k != TYPENAME_FIELD}


def encode(payload: Union[Payload, Mapping[str, Any], None]) -> str:
    """Serialize a payload into its stored YAML form."""
    if isinstance(payload, Payload):
        payload = payload.to_payload()
    elif isinstance(payload, Mapping) and not isinstance(payload, dict):
        payload = dict(payload)
    return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False, default_flow_style=False)


def decode(content: str) -> Any:
    """Load stored YAML content. An empty document decodes to ``None``."""
    if not isinstance(content, str):
        raise ResponseValidationError(f"Stored content must be a string, got {type(content).__name__}")
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        logger.warning("Failed to decode stored content: %s", exc)
        raise ResponseValidationError(f"YAML parsing failed: {exc}") from exc


__all__ = ["encode", "decode", "strip_internal_tag"]
