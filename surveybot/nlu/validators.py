import re
from typing import Any, Mapping, Optional

from surveybot.nlu.schemas import REQUIRED_FIELDS, FieldRecord

PHONE_MAX_LENGTH = 15

_FRAMING_CHARS = re.compile(r'["\\\n\r\t]')
_NON_PHONE_CHARS = re.compile(r"[^0-9+]")
_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")


# ---------------- Input Sanitization ----------------

def sanitize_input(text: str) -> str:
    """Replace characters that would break the quoted prompt, then trim."""
    if not text:
        return ""
    return _FRAMING_CHARS.sub(" ", text).strip()


# ---------------- Phone Validation ----------------

def sanitize_phone(phone: Any) -> str:
    if phone is None:
        return ""

    phone = str(phone)
    if not phone:
        return ""

    return _NON_PHONE_CHARS.sub("", phone)[:PHONE_MAX_LENGTH]


# ---------------- Field Validation ----------------

def _clean_text(value: Any) -> str:
    """Trim, and fold line breaks so each field stays on one line."""
    if value is None:
        return ""
    return _LINE_BREAKS.sub(" ", str(value).strip())


def validate_extracted_data(data: Mapping[str, Any]) -> Optional[FieldRecord]:
    """
    Accept a parsed model reply only if every required key is present.

    Values may be null; they become empty strings. Returns None when a key
    is missing so callers never see a partial record.
    """
    if not all(key in data for key in REQUIRED_FIELDS):
        return None

    return FieldRecord(
        phone_number=sanitize_phone(data["phone_number"]),
        date=_clean_text(data["date"]),
        time=_clean_text(data["time"]),
        name=_clean_text(data["name"]),
    )
