"""Bot response payload classification, defaults and conversion."""
import logging

from .classifier import RULES, classify, tag_payload
from .codec import decode, encode, strip_internal_tag
from .config import ResponseConfig, load_env_file
from .converter import convert, set_type_quick_reply, set_type_text_with_buttons, toggle_button_persistence
from .defaults import default_carousel_slide, default_template
from .emptiness import check_metadata_set, has_content, is_empty
from .exceptions import (
    BotResponseError,
    InvalidToggleSource,
    ResponseConfigError,
    ResponseValidationError,
    UnsupportedConversion,
)
from .models import (
    CarouselPayload,
    CustomPayload,
    ImagePayload,
    Payload,
    PayloadKind,
    QuickRepliesPayload,
    TextPayload,
    TextWithButtonsPayload,
)
from .responses import (
    add_language,
    add_template_language,
    create_response_from_template,
    default_matching_first,
    retype_all_languages,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    # classification
    "RULES",
    "classify",
    "tag_payload",
    # codec
    "encode",
    "decode",
    "strip_internal_tag",
    # configuration
    "ResponseConfig",
    "load_env_file",
    # conversion
    "convert",
    "set_type_quick_reply",
    "set_type_text_with_buttons",
    "toggle_button_persistence",
    # defaults
    "default_template",
    "default_carousel_slide",
    # emptiness
    "has_content",
    "is_empty",
    "check_metadata_set",
    # errors
    "BotResponseError",
    "ResponseConfigError",
    "ResponseValidationError",
    "UnsupportedConversion",
    "InvalidToggleSource",
    # payload variants
    "PayloadKind",
    "Payload",
    "TextPayload",
    "QuickRepliesPayload",
    "TextWithButtonsPayload",
    "ImagePayload",
    "CarouselPayload",
    "CustomPayload",
    # response records
    "add_language",
    "retype_all_languages",
    "default_matching_first",
    "create_response_from_template",
    "add_template_language",
]
