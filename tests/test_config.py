from __future__ import annotations

import pytest

from botresponse.config import ResponseConfig, load_env_file
from botresponse.defaults import default_template
from botresponse.exceptions import ResponseConfigError
from botresponse.models import PayloadKind


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in ("BOT_RESPONSE_DEFAULT_KEY", "BOT_RESPONSE_BUTTON_TYPE", "BOT_RESPONSE_CAROUSEL_TYPE"):
        # registered so teardown also undoes load_dotenv writes
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_from_env_defaults(clean_env) -> None:
    config = ResponseConfig.from_env()
    assert config == ResponseConfig()
    assert config.default_key == "utter_"
    assert config.button_type == "postback"
    assert config.carousel_template_type == "generic"


def test_from_env_overrides(clean_env) -> None:
    clean_env.setenv("BOT_RESPONSE_DEFAULT_KEY", " bot_ ")
    clean_env.setenv("BOT_RESPONSE_CAROUSEL_TYPE", "list")

    config = ResponseConfig.from_env()

    assert config.default_key == "bot_"
    assert default_template(PayloadKind.CAROUSEL, config=config)["template_type"] == "list"


def test_from_env_rejects_blank(clean_env) -> None:
    clean_env.setenv("BOT_RESPONSE_BUTTON_TYPE", "  ")
    with pytest.raises(ResponseConfigError):
        ResponseConfig.from_env()


def test_load_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("BOT_RESPONSE_BUTTON_TYPE=web_url\n", encoding="utf-8")

    load_env_file(env_file)

    assert ResponseConfig.from_env().button_type == "web_url"


def test_load_env_file_missing(clean_env, tmp_path) -> None:
    load_env_file(tmp_path / "missing.env")
    assert ResponseConfig.from_env() == ResponseConfig()


def test_default_template_unknown_kind() -> None:
    assert default_template("VideoPayload") is None
    assert default_template(None) is None
