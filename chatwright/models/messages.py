"""Chat message and state types produced by automators."""

from typing import Any, Literal

from pydantic import BaseModel, Field

ChatState = Literal['idle', 'generating', 'error']

# Field-keyed extraction output: a scalar, or a record of nested extraction lists
ExtractedValue = str | None | dict[str, Any]
ExtractedRecord = dict[str, Any]


class ChatMessage(BaseModel):
    """A single message of a conversation.

    Attributes:
        role: Who wrote the message
        content: Message text
        timestamp: Timestamp as shown by the site, if any

    """

    role: Literal['user', 'assistant'] = Field(description='Message author')
    content: str = Field(description='Message text')
    timestamp: str | None = Field(default=None, description='Site-provided timestamp')
