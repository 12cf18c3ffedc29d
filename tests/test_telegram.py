"""Tests for the Telegram notifier with mocked HTTP."""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest
import requests
import responses
from pydantic import ValidationError
from responses import matchers

from flybrief.notify.telegram import (
    TelegramClient,
    TelegramConfig,
    get_chat_ids,
    send_notifications,
)

SEND_URL = "https://api.telegram.org/botbot-token/sendMessage"


@responses.activate
def test_notify_sends_message():
    responses.add(
        responses.GET,
        SEND_URL,
        json={"ok": True, "result": {"message_id": 1}},
        status=200,
        match=[matchers.query_param_matcher({
            "chat_id": "111",
            "text": "Chimgan is flyable tomorrow:",
        })],
    )

    TelegramClient("bot-token").notify("111", "Chimgan is flyable tomorrow:")

    assert len(responses.calls) == 1


@responses.activate
def test_notify_raises_when_not_ok():
    responses.add(
        responses.GET,
        SEND_URL,
        json={"ok": False, "description": "Bad Request: chat not found"},
        status=200,
    )

    with pytest.raises(RuntimeError, match="chat not found"):
        TelegramClient("bot-token").notify("999", "hello")


@responses.activate
def test_notify_raises_on_http_error():
    responses.add(
        responses.GET,
        SEND_URL,
        json={"ok": False, "error_code": 401, "description": "Unauthorized"},
        status=401,
    )

    with pytest.raises(requests.HTTPError):
        TelegramClient("bot-token").notify("111", "hello")


def test_custom_base_url():
    client = TelegramClient("abc", base_url="http://localhost:8081")
    assert client.url == "http://localhost:8081/botabc/sendMessage"


def test_send_notifications_to_every_chat():
    client = MagicMock()
    send_notifications(client, ["111", "222"], "msg")

    assert [c.args for c in client.notify.call_args_list] == [("111", "msg"), ("222", "msg")]


def test_send_notifications_no_chats():
    with pytest.raises(ValueError, match="No Telegram chat ids"):
        send_notifications(MagicMock(), [], "msg")


def test_send_notifications_stops_on_failure():
    """Delivery errors propagate; later chats are not attempted."""
    client = MagicMock()
    client.notify.side_effect = [RuntimeError("rejected"), None]

    with pytest.raises(RuntimeError):
        send_notifications(client, ["111", "222"], "msg")
    assert client.notify.call_count == 1


def test_get_chat_ids():
    with patch.dict(os.environ, {"FLYBRIEF_TELEGRAM_CHAT_IDS": " 111, 222 ,,"}):
        assert get_chat_ids() == ["111", "222"]


def test_get_chat_ids_empty():
    with patch.dict(os.environ, {}, clear=True):
        assert get_chat_ids() == []


def test_config_accepts_numeric_chat_ids():
    config = TelegramConfig.model_validate({"bot_token": "t", "chat_ids": [111, "222"]})
    assert config.chat_ids == ["111", "222"]


@responses.activate
def test_notify_sends_plain_text():
    """Site names with Markdown characters go out untouched, without a parse mode."""
    text = "Mont_Blanc *north* `A` is flyable tomorrow:"
    responses.add(
        responses.GET,
        SEND_URL,
        json={"ok": True, "result": {"message_id": 2}},
        status=200,
        match=[matchers.query_param_matcher({"chat_id": "111", "text": text})],
    )

    TelegramClient("bot-token").notify("111", text)

    assert len(responses.calls) == 1


def test_config_requires_chat_ids():
    with pytest.raises(ValidationError):
        TelegramConfig(bot_token="t", chat_ids=[])
    with pytest.raises(ValidationError):
        TelegramConfig(bot_token="t")
