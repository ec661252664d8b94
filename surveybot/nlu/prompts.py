SYSTEM_PROMPT = "You are a data extraction assistant. Return only valid JSON."

USER_PROMPT = """Extract the following information from this Indonesian message and return ONLY a valid JSON object:
- phone_number: Indonesian phone number (format: +62xxx or 08xxx)
- date: Date with day name in Indonesian (e.g., "Senin, 15 Januari 2026")
- time: Time in 24-hour format (e.g., "14:00")
- name: Person's name

Message: "{user_message}"

Return format:
{{"phone_number":"","date":"","time":"","name":""}}

Rules:
- Extract phone number in any format (with/without +62, with/without spaces)
- Normalize date to include day name if not present
- Convert time to 24-hour format
- Extract full name
- If any field is not found, use empty string

Return only the JSON, no explanation.
"""


def build_prompt(normalized_message: str) -> str:
    """Render the extraction prompt for an already-sanitized message."""
    return USER_PROMPT.format(user_message=normalized_message)
