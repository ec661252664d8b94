"""
Telegram Bot API client.

Responsibilities:
- Long-poll getUpdates for new messages
- Deliver HTML-formatted replies via sendMessage
- Never raise on transport failures: log and report "nothing"
"""

import logging
from typing import Any, Dict, List, Union

import requests

from surveybot.config import Settings

logger = logging.getLogger(__name__)


class TelegramError(Exception):
    """Raised when the bot is constructed without a token."""


class TelegramClient:
    def __init__(self, settings: Settings, session: requests.Session = None):
        if not settings.TELEGRAM_BOT_TOKEN:
            raise TelegramError("TELEGRAM_BOT_TOKEN not set")

        self._base_url = f"{settings.TELEGRAM_API_URL.rstrip('/')}/bot{settings.TELEGRAM_BOT_TOKEN}"
        self.poll_timeout = settings.TELEGRAM_POLL_TIMEOUT
        self.read_timeout = settings.TELEGRAM_READ_TIMEOUT
        self.send_timeout = settings.TELEGRAM_SEND_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, method: str) -> str:
        return f"{self._base_url}/{method}"

    def get_updates(self, offset: int) -> List[Dict[str, Any]]:
        """Fetch updates starting at offset. Returns [] on any failure."""
        try:
            response = self.session.get(
                self._url("getUpdates"),
                params={"offset": offset, "timeout": self.poll_timeout},
                timeout=self.read_timeout,
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Error getting updates: %s", e)
            return []

        if not isinstance(payload, dict) or not payload.get("ok"):
            logger.warning(
                "getUpdates not ok (status=%s): %s",
                response.status_code,
                payload.get("description") if isinstance(payload, dict) else payload,
            )
            return []

        result = payload.get("result") or []
        if not isinstance(result, list):
            logger.warning("getUpdates returned a non-list result: %r", result)
            return []

        return result

    def send_message(self, chat_id: Union[int, str], text: str) -> bool:
        """Send an HTML message. Returns False (after logging) on failure."""
        try:
            response = self.session.post(
                self._url("sendMessage"),
                json={"chat_id": chat_id, "text": text, "parse_mode": "HTML"},
                headers={"Content-Type": "application/json"},
                timeout=self.send_timeout,
            )
        except requests.RequestException as e:
            logger.warning("Telegram error: %s", e)
            return False

        if response.status_code != 200:
            logger.warning(
                "Failed to send message to %s: %s %s",
                chat_id,
                response.status_code,
                response.text,
            )
            return False

        logger.info("Message sent to chat %s", chat_id)
        return True
