import re

import pytest

from surveybot.nlu.validators import sanitize_input, sanitize_phone, validate_extracted_data

PHONE_PATTERN = re.compile(r"^[+0-9]{0,15}$")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        'Saya "Budi"\n081234567890',
        "\t jam 14:00 \\ Senin \r\n",
        'path\\to\\"file"',
    ],
)
def test_sanitize_input_removes_framing_chars(raw):
    out = sanitize_input(raw)
    assert not any(ch in out for ch in '"\\\n\r\t')
    assert out == out.strip()
    assert sanitize_input(out) == out


def test_sanitize_input_replaces_with_space():
    assert sanitize_input('Budi\n"0812"') == "Budi  0812"


def test_sanitize_phone_strips_separators():
    assert sanitize_phone("0812-3456-7890") == "081234567890"
    assert sanitize_phone("+62 812 3456 7890") == "+6281234567890"


def test_sanitize_phone_truncates_to_15():
    out = sanitize_phone("+62 812-3456-7890 ext999")
    assert out == "+62812345678909"
    assert len(out) == 15


def test_sanitize_phone_empty_and_null():
    assert sanitize_phone(None) == ""
    assert sanitize_phone("") == ""
    assert sanitize_phone("tidak ada") == ""


def test_sanitize_phone_non_string():
    assert sanitize_phone(81234567890) == "81234567890"


@pytest.mark.parametrize("missing", ["phone_number", "date", "time", "name"])
def test_validate_rejects_missing_key(missing):
    data = {"phone_number": "0812", "date": "Senin", "time": "14:00", "name": "Budi"}
    del data[missing]
    assert validate_extracted_data(data) is None


def test_validate_trims_and_sanitizes():
    record = validate_extracted_data(
        {
            "phone_number": " +62 (812) 3456-7890 ",
            "date": "  Senin, 15 Januari 2026 ",
            "time": "14:00\n",
            "name": "\tBudi Santoso ",
        }
    )
    assert record.phone_number == "+6281234567890"
    assert PHONE_PATTERN.match(record.phone_number)
    assert record.date == "Senin, 15 Januari 2026"
    assert record.time == "14:00"
    assert record.name == "Budi Santoso"


def test_validate_null_values_become_empty():
    record = validate_extracted_data({"phone_number": None, "date": None, "time": None, "name": None})
    assert record.model_dump() == {"phone_number": "", "date": "", "time": "", "name": ""}


def test_validate_ignores_extra_keys():
    record = validate_extracted_data(
        {"phone_number": "0812", "date": "", "time": "", "name": "Andi", "email": "x@y.z"}
    )
    assert record.name == "Andi"


def test_validate_folds_line_breaks():
    record = validate_extracted_data(
        {"phone_number": "0812", "date": "Senin,\r\n 15 Januari", "time": "14:00", "name": "Budi\nSantoso"}
    )
    assert record.name == "Budi Santoso"
    assert record.date == "Senin, 15 Januari"


def test_sanitize_phone_keeps_inner_plus():
    assert sanitize_phone("0812+99") == "0812+99"
