"""Message post-processing for Grok's conversation layout."""

from typing import Any

from chatwright.models import ChatMessage, ExtractedRecord


def join_parts(parts: list[str]) -> str:
    """Join trimmed, non-empty parts with a blank line between them."""
    return '\n\n'.join(part.strip() for part in parts if part.strip())


def to_string_parts(value: Any) -> list[str]:
    """Flatten an extracted value into trimmed non-empty strings.

    Nested lists are flattened; records and other non-strings are dropped.
    """
    if value is None:
        return []
    if isinstance(value, list):
        collected: list[str] = []
        for entry in value:
            collected.extend(to_string_parts(entry))
        return collected
    if isinstance(value, str):
        trimmed = value.strip()
        return [trimmed] if trimmed else []
    return []


class GrokMessageFormatter:
    """Reshapes Grok message blocks into user/assistant messages.

    A Grok block can hold several consecutive user follow-ups; each becomes
    its own message. The assistant side of a block is one continuous reply,
    so its parts are joined into a single message.
    """

    def format(self, records: list[ExtractedRecord]) -> list[ChatMessage]:
        messages: list[ChatMessage] = []

        for record in records:
            if not isinstance(record, dict):
                continue
            user_parts = to_string_parts(record.get('userMessage'))
            ai_value = record.get('aiMessage')
            if ai_value is None:
                ai_value = record.get('assistantMessage')
            ai_parts = to_string_parts(ai_value)

            for part in user_parts:
                messages.append(ChatMessage(role='user', content=part))

            if ai_parts:
                messages.append(ChatMessage(role='assistant', content=join_parts(ai_parts)))

        return messages
