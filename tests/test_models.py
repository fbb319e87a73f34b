import re
from datetime import datetime

import pytest

from ai_chat.models.chat import (
    ChatMessage,
    ChatRole,
    ChatSuccessResponse,
    ResponseFormat,
    format_timestamp,
    parse_format,
)


@pytest.mark.parametrize("raw", ["json", "JSON", "Json", " json "])
def test_parse_format_json_any_case(raw: str) -> None:
    assert parse_format(raw) == ResponseFormat.JSON


@pytest.mark.parametrize("raw", [None, "", "html", "HTML", "xml", "jsonp"])
def test_parse_format_defaults_to_html(raw) -> None:
    assert parse_format(raw) == ResponseFormat.HTML


def test_format_timestamp_uses_12_hour_clock() -> None:
    moment = datetime(2024, 6, 5, 15, 15)
    assert format_timestamp(moment) == "05-06-2024 03:15 PM"


def test_chat_message_default_timestamp() -> None:
    msg = ChatMessage(role=ChatRole.USER, message="hi")
    assert re.match(r"^\d{2}-\d{2}-\d{4} \d{2}:\d{2} (AM|PM)$", msg.timestamp)


def test_success_response_uses_camel_case_fields() -> None:
    user = ChatMessage(role=ChatRole.USER, message="q", timestamp="t")
    ai = ChatMessage(role=ChatRole.AI, message="a", timestamp="t")
    data = ChatSuccessResponse(user_message=user, ai_message=ai).model_dump(
        mode="json", by_alias=True
    )
    assert data == {
        "userMessage": {"role": "USER", "message": "q", "timestamp": "t"},
        "aiMessage": {"role": "AI", "message": "a", "timestamp": "t"},
        "format": "json",
        "success": True,
    }
