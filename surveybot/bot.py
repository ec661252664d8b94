"""
bot.py

Polling entry point: long-polls Telegram for booking messages, extracts the
survey schedule from each one, appends it to the result file and replies to
the sender.

Error handling:
- Transport, parse and persistence errors are logged and reported to the
  sender; one bad update never stops the loop
"""

import logging
import time
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError

from surveybot.config import ConfigurationError, Settings, load_settings
from surveybot.nlu.extractor import FieldExtractor
from surveybot.storage.result_file import ResultFile
from surveybot.telegram.client import TelegramClient
from surveybot.telegram.messages import (
    PARSE_FAILED_MESSAGE,
    PROCESSING_MESSAGE,
    format_error_message,
    format_success_message,
)
from surveybot.telegram.schemas import Update
from surveybot.utils.logger import setup_logging

logger = logging.getLogger(__name__)


class PollingBot:
    """
    Sequential poll loop. The only state kept between iterations is the
    update cursor, which only ever moves forward.
    """

    def __init__(
        self,
        extractor: FieldExtractor,
        telegram: TelegramClient,
        result_file: ResultFile,
        poll_interval: float = 2,
    ):
        self.extractor = extractor
        self.telegram = telegram
        self.result_file = result_file
        self.poll_interval = poll_interval
        self.last_update_id = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "PollingBot":
        if not settings.telegram_enabled:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN not set")
        return cls(
            extractor=FieldExtractor.from_settings(settings),
            telegram=TelegramClient(settings),
            result_file=ResultFile(settings.RESULT_FILE),
            poll_interval=settings.POLL_INTERVAL,
        )

    # Loop ---------------------------------------------------------------------------

    def start(self) -> None:
        logger.info("Telegram bot started, waiting for messages...")
        try:
            while True:
                self.process_updates()
                time.sleep(self.poll_interval)
        except KeyboardInterrupt:
            logger.info("Bot stopped")

    def process_updates(self) -> int:
        """Run one poll iteration. Returns the number of messages processed."""
        processed = 0
        try:
            for raw in self.telegram.get_updates(self.last_update_id):
                if self._handle_update(raw):
                    processed += 1
        except Exception:
            logger.exception("Error processing updates")
        return processed

    def _advance_cursor(self, update_id: Any) -> None:
        if isinstance(update_id, int) and update_id + 1 > self.last_update_id:
            self.last_update_id = update_id + 1

    def _handle_update(self, raw: Dict[str, Any]) -> bool:
        self._advance_cursor(raw.get("update_id") if isinstance(raw, dict) else None)

        try:
            update = Update.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping malformed update: %s", e)
            return False

        message = update.message
        if message is None:
            return False

        text = message.text
        if text is None or not text.strip() or text.startswith("/"):
            return False

        logger.info("New message from %s (%s): %s", message.sender_name, message.chat.id, text)
        self.process_message(message.chat.id, text)
        return True

    # Per message ---------------------------------------------------------------------------

    def process_message(self, chat_id, text: str) -> Optional[bool]:
        """
        Extract, save and reply for one message.

        Returns True on success, False if nothing was extracted, None if an
        unexpected error was reported to the sender instead.
        """
        try:
            self.telegram.send_message(chat_id, PROCESSING_MESSAGE)

            record = self.extractor.extract(text)
            if record is None:
                self.telegram.send_message(chat_id, PARSE_FAILED_MESSAGE)
                logger.info("Failed to parse message from %s", chat_id)
                return False

            self.result_file.append(record, original_message=text)
            self.telegram.send_message(chat_id, format_success_message(record))
            logger.info("Parsed and saved message from %s", chat_id)
            return True

        except Exception as e:
            logger.exception("Error processing message from %s", chat_id)
            self.telegram.send_message(chat_id, format_error_message(e))
            return None


# CLI ---------------------------------------------------------------------------

app = typer.Typer(
    name="surveybot-bot",
    help="Poll Telegram and extract survey schedules from incoming messages.",
    add_completion=False,
)


@app.command()
def main() -> None:
    """Start the polling bot (Ctrl-C to stop)."""
    try:
        settings = load_settings()
        setup_logging(settings)
        bot = PollingBot.from_settings(settings)
    except (ConfigurationError, ValueError) as e:
        typer.echo(f"❌ Fatal error: {e}", err=True)
        raise typer.Exit(code=1)

    bot.start()


if __name__ == "__main__":
    app()
