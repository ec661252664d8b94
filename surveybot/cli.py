"""
One-shot entry point: extract the survey schedule from a single message given
on the command line, save it, print it and optionally announce it on Telegram.

Usage:
    surveybot-parse "Halo, saya Budi 081234567890. Booking untuk hari Senin, 15 Januari jam 14:00"
"""

import logging
from typing import List, Optional

import typer

from surveybot.config import ConfigurationError, Settings, load_settings
from surveybot.nlu.extractor import FieldExtractor
from surveybot.nlu.schemas import FieldRecord
from surveybot.storage.result_file import ResultFile
from surveybot.telegram.client import TelegramClient
from surveybot.telegram.messages import format_notification
from surveybot.utils.logger import setup_logging

logger = logging.getLogger(__name__)

USAGE = """
❌ No message provided!

Usage: surveybot-parse "your message here"

Examples:
  surveybot-parse "Halo, saya Budi 081234567890. Booking untuk hari Senin, 15 Januari jam 14:00"
  surveybot-parse "Pak, ini Andi. Nomor saya 0812-3456-7890, mau booking Jumat 17 Jan pukul 10 pagi"
  surveybot-parse "Saya Romy +6281234567890, booking tanggal 20 Januari hari Rabu jam 3 sore"
"""


class MessageParser:
    """Single-invocation driver around the shared FieldExtractor."""

    def __init__(
        self,
        extractor: FieldExtractor,
        result_file: ResultFile,
        telegram: Optional[TelegramClient] = None,
        chat_id: Optional[str] = None,
    ):
        self.extractor = extractor
        self.result_file = result_file
        self.telegram = telegram
        self.chat_id = chat_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "MessageParser":
        telegram = None
        if not settings.TELEGRAM_BOT_TOKEN:
            logger.warning("TELEGRAM_BOT_TOKEN not set. Telegram notifications disabled.")
        elif not settings.TELEGRAM_CHAT_ID:
            logger.warning("TELEGRAM_CHAT_ID not set. Telegram notifications disabled.")
        else:
            telegram = TelegramClient(settings)

        return cls(
            extractor=FieldExtractor.from_settings(settings),
            result_file=ResultFile(settings.RESULT_FILE),
            telegram=telegram,
            chat_id=settings.TELEGRAM_CHAT_ID,
        )

    @property
    def telegram_enabled(self) -> bool:
        return self.telegram is not None and bool(self.chat_id)

    def parse_and_save(self, message: str) -> Optional[FieldRecord]:
        if not message or not message.strip():
            return None

        typer.echo("Processing message...")
        record = self.extractor.extract(message)

        if record is None:
            typer.echo("Failed to parse message")
            return None

        if self.result_file.append(record):
            typer.echo(f"\n✓ Data saved to {self.result_file.path}")
        display_result(record)

        if self.telegram_enabled:
            if self.telegram.send_message(self.chat_id, format_notification(record)):
                typer.echo("✓ Sent to Telegram")
            else:
                typer.echo("⚠️  Failed to send to Telegram")

        return record


def display_result(record: FieldRecord) -> None:
    typer.echo("\n📋 Extracted Information:")
    typer.echo(f"  📞 Phone: {record.phone_number}")
    typer.echo(f"  📅 Date: {record.date}")
    typer.echo(f"  🕐 Time: {record.time}")
    typer.echo(f"  👤 Name: {record.name}")


# CLI ---------------------------------------------------------------------------

app = typer.Typer(
    name="surveybot-parse",
    help="Extract a survey schedule from one Indonesian booking message.",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
def main(
    message: Optional[List[str]] = typer.Argument(
        None, help="Message text; multiple words are joined with spaces"
    ),
) -> None:
    typer.echo("📱 Message Parser v1.0")
    typer.echo("=" * 50)

    if not message:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1)

    try:
        settings = load_settings()
        setup_logging(settings, mode="parse")
        parser = MessageParser.from_settings(settings)
    except (ConfigurationError, ValueError) as e:
        typer.echo(f"\n❌ Fatal error: {e}", err=True)
        raise typer.Exit(code=1)

    text = " ".join(message)
    typer.echo(f"\n📩 Message: {text}\n")

    parser.parse_and_save(text)
    typer.echo("\n✅ Done!")


if __name__ == "__main__":
    app()
