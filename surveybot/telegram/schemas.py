from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Chat(BaseModel):
    id: Union[int, str]


class Sender(BaseModel):
    first_name: Optional[str] = None


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chat: Chat
    text: Optional[str] = None
    from_user: Optional[Sender] = Field(default=None, alias="from")

    @property
    def sender_name(self) -> str:
        if self.from_user and self.from_user.first_name:
            return self.from_user.first_name
        return "unknown"


class Update(BaseModel):
    """One entry of a getUpdates result; only the fields the bot reads."""

    update_id: int
    message: Optional[Message] = None
