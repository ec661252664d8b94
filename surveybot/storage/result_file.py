"""
Append-only result log.

Each successful extraction appends one human-readable block:

    ===== Processed at: 2026-01-15 14:00:00 =====
    Original Message: ...            (polling mode only)
    JADWAL SURVEY:
    - Phone Number : 081234567890
    - Date         : Senin, 15 Januari 2026
    - Time         : 14:00
    - Name         : Budi
    ==================================================
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from surveybot.nlu.schemas import FieldRecord

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = "=" * 50
_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")

_FIELD_LABELS = (
    ("phone_number", "- Phone Number : "),
    ("date", "- Date         : "),
    ("time", "- Time         : "),
    ("name", "- Name         : "),
)


def _one_line(value: str) -> str:
    return _LINE_BREAKS.sub(" ", value)


def format_entry(
    record: FieldRecord,
    timestamp: str,
    original_message: Optional[str] = None,
) -> str:
    lines = [f"===== Processed at: {timestamp} ====="]
    if original_message is not None:
        lines.append(f"Original Message: {_one_line(original_message)}")
    lines.append("JADWAL SURVEY:")
    for field, label in _FIELD_LABELS:
        lines.append(f"{label}{_one_line(getattr(record, field))}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n\n"


def parse_entries(text: str) -> List[FieldRecord]:
    """Read back the field values of every block in a result log."""
    records = []
    current = None

    for line in text.splitlines():
        if line == "JADWAL SURVEY:":
            current = {}
            continue
        if current is None:
            continue
        if line == SEPARATOR:
            records.append(FieldRecord(**current))
            current = None
            continue
        for field, label in _FIELD_LABELS:
            if line.startswith(label):
                current[field] = line[len(label):]
                break

    return records


class ResultFile:
    """Appends extraction results to a text file; failures are only logged."""

    def __init__(self, path):
        self.path = Path(path)

    def append(
        self,
        record: FieldRecord,
        original_message: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> bool:
        timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        entry = format_entry(record, timestamp, original_message)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            logger.error("Save error (%s): %s", self.path, e)
            return False

        logger.info("Data saved to %s", self.path)
        return True

    def read(self) -> List[FieldRecord]:
        if not self.path.exists():
            return []
        return parse_entries(self.path.read_text(encoding="utf-8"))
