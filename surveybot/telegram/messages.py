from html import escape

from surveybot.nlu.schemas import FieldRecord

PROCESSING_MESSAGE = "⏳ Processing your message..."

PARSE_FAILED_MESSAGE = (
    "❌ Sorry, I couldn't parse the booking information from your message.\n\n"
    "Please include: name, phone number, date, and time."
)


def _field_lines(record: FieldRecord) -> str:
    return (
        f"📅 <b>Tanggal:</b> {escape(record.date, quote=False)}\n"
        f"🕐 <b>Waktu:</b> {escape(record.time, quote=False)}\n"
        f"👤 <b>Nama:</b> {escape(record.name, quote=False)}\n"
        f"📞 <b>No. HP:</b> {escape(record.phone_number, quote=False)}"
    )


def format_success_message(record: FieldRecord) -> str:
    """Reply sent back to the sender in polling mode."""
    return f"✅ <b>Booking berhasil diparsing!</b>\n\n{_field_lines(record)}"


def format_notification(record: FieldRecord) -> str:
    """Announcement sent to the configured chat in one-shot mode."""
    return f"🔔 <b>JADWAL SURVEY BARU</b>\n\n{_field_lines(record)}"


def format_error_message(error: Exception) -> str:
    return f"❌ Error: {escape(str(error), quote=False)}"
