"""Send the flyability message to Telegram chats via the Bot API."""

from __future__ import annotations

import logging
import os

import requests
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramConfig(BaseModel):
    """Bot credentials and the chats that receive the message."""

    model_config = ConfigDict(coerce_numbers_to_str=True)  # numeric chat ids in YAML

    bot_token: str
    chat_ids: list[str] = Field(min_length=1)


def get_chat_ids() -> list[str]:
    """Read chat ids from FLYBRIEF_TELEGRAM_CHAT_IDS env var (comma-separated)."""
    raw = os.environ.get("FLYBRIEF_TELEGRAM_CHAT_IDS", "")
    return [chat.strip() for chat in raw.split(",") if chat.strip()]


class TelegramClient:
    """Minimal Bot API client: one sendMessage call per chat."""

    def __init__(self, bot_token: str, timeout: int = 30, base_url: str = TELEGRAM_API_URL):
        self.url = f"{base_url}/bot{bot_token}/sendMessage"
        self.timeout = timeout
        self.session = requests.Session()

    def notify(self, chat_id: str, message: str) -> None:
        """Send ``message`` to one chat.

        Raises:
            requests.RequestException: On transport or HTTP status errors.
            RuntimeError: If Telegram answers with ``ok: false``.
        """
        params = {
            "chat_id": chat_id,
            "text": message,
        }
        resp = self.session.get(self.url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        body = resp.json()
        if not body.get("ok"):
            raise RuntimeError(
                f"Telegram rejected message for chat {chat_id}: "
                f"{body.get('description', 'no description')}"
            )


def send_notifications(client: TelegramClient, chat_ids: list[str], message: str) -> None:
    """Send the same message to every chat, in order.

    Raises:
        ValueError: If no chat ids are given.
    """
    if not chat_ids:
        raise ValueError("No Telegram chat ids specified")

    logger.info("Sending flyability message to %d chat(s)", len(chat_ids))
    for chat_id in chat_ids:
        client.notify(chat_id, message)
        logger.debug("Message sent to chat %s", chat_id)
    logger.info("Flyability message sent successfully")
