from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from dingrobot.messages import MessagePayload
from dingrobot.messages.action_card import format_action_card
from dingrobot.messages.feed_card import format_feed_card
from dingrobot.messages.link import format_link
from dingrobot.messages.markdown import format_markdown
from dingrobot.messages.text import format_text
from dingrobot.schemas.message import Mentions, TextRequest

pytestmark = pytest.mark.unit


def test_text_shorthand_matches_structured():
    shorthand = format_text("hello")
    structured = format_text({"content": "hello"})

    assert shorthand.to_json() == structured.to_json()
    assert json.loads(shorthand.to_json()) == {"msgtype": "text", "text": {"content": "hello"}}


def test_text_with_mentions():
    payload = format_text(
        {"content": "on call", "at": {"atMobiles": ["13800000000"], "isAtAll": False}}
    )

    assert payload.to_dict() == {
        "msgtype": "text",
        "text": {
            "content": "on call",
            "at": {"atMobiles": ["13800000000"], "isAtAll": False},
        },
    }


def test_text_accepts_model_with_snake_case_names():
    req = TextRequest(content="hi", at=Mentions(at_user_ids=["u1"], is_at_all=True))

    assert format_text(req).to_dict()["text"] == {
        "content": "hi",
        "at": {"atUserIds": ["u1"], "isAtAll": True},
    }


def test_markdown_shorthand_matches_structured():
    shorthand = format_markdown("T", "B")
    structured = format_markdown({"title": "T", "text": "B"})

    assert shorthand.to_json() == structured.to_json()
    assert json.loads(shorthand.to_json()) == {
        "msgtype": "markdown",
        "markdown": {"title": "T", "text": "B"},
    }


def test_markdown_shorthand_requires_text():
    with pytest.raises(TypeError):
        format_markdown("title only")


def test_markdown_missing_field_rejected():
    with pytest.raises(ValidationError):
        format_markdown({"title": "T"})


def test_link():
    payload = format_link(
        {
            "title": "Release",
            "text": "v1.2 is out",
            "messageUrl": "https://example.com/release",
            "picUrl": "https://example.com/logo.png",
        }
    )

    assert payload.to_dict() == {
        "msgtype": "link",
        "link": {
            "title": "Release",
            "text": "v1.2 is out",
            "messageUrl": "https://example.com/release",
            "picUrl": "https://example.com/logo.png",
        },
    }


def test_link_without_picture_omits_key():
    payload = format_link({"title": "a", "text": "b", "messageUrl": "https://example.com"})

    assert "picUrl" not in payload.to_dict()["link"]


def test_action_card_single():
    data = {
        "title": "Approve",
        "text": "Deploy api?",
        "singleTitle": "Open",
        "singleURL": "https://example.com/deploy",
    }

    assert format_action_card(data).to_dict() == {"msgtype": "actionCard", "actionCard": data}


def test_action_card_buttons():
    data = {
        "title": "Approve",
        "text": "Deploy api?",
        "btnOrientation": "1",
        "btns": [
            {"title": "Yes", "actionURL": "https://example.com/yes"},
            {"title": "No", "actionURL": "https://example.com/no"},
        ],
    }

    assert format_action_card(data).to_dict() == {"msgtype": "actionCard", "actionCard": data}


def test_action_card_bad_orientation_rejected():
    with pytest.raises(ValidationError):
        format_action_card(
            {"title": "a", "text": "b", "btnOrientation": "2", "btns": []}
        )


def test_action_card_passes_unknown_keys_through():
    data = {
        "title": "a",
        "text": "b",
        "singleTitle": "c",
        "singleURL": "https://example.com",
        "hideAvatar": "0",
    }

    assert format_action_card(data).to_dict()["actionCard"] == data


def test_feed_card():
    links = [
        {"title": "One", "messageURL": "https://example.com/1", "picURL": "https://example.com/1.png"},
        {"title": "Two", "messageURL": "https://example.com/2", "picURL": "https://example.com/2.png"},
    ]

    assert format_feed_card({"links": links}).to_dict() == {
        "msgtype": "feedCard",
        "feedCard": {"links": links},
    }


def test_feed_card_link_missing_picture_rejected():
    with pytest.raises(ValidationError):
        format_feed_card({"links": [{"title": "One", "messageURL": "https://example.com/1"}]})


def test_payload_json_is_compact_utf8():
    body = format_text("构建成功").to_json()

    assert body == '{"msgtype":"text","text":{"content":"构建成功"}}'.encode("utf-8")


def test_payload_from_dict():
    payload = MessagePayload.from_dict({"msgtype": "text", "text": {"content": "x", "at": None}})

    assert payload.to_dict() == {"msgtype": "text", "text": {"content": "x"}}


@pytest.mark.parametrize(
    "data",
    [{}, {"msgtype": "text"}, {"msgtype": "text", "text": "x"}, {"msgtype": 1}],
)
def test_payload_from_dict_rejects_malformed(data: dict):
    with pytest.raises(ValueError):
        MessagePayload.from_dict(data)
