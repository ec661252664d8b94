from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("phone_number", "date", "time", "name")


class FieldRecord(BaseModel):
    """Validated booking fields extracted from one message."""

    model_config = ConfigDict(frozen=True)

    phone_number: str = Field(
        default="", description="Digits and '+' only, at most 15 characters"
    )
    date: str = Field(
        default="", description="Date with Indonesian day name, e.g. 'Senin, 15 Januari 2026'"
    )
    time: str = Field(default="", description="24-hour time, e.g. '14:00'")
    name: str = Field(default="", description="Person's full name")
