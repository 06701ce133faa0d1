"""Storage of messages between users."""

from __future__ import annotations

import os

from coursehub.binfile import BinaryFile, Reader, encode_string, encode_uint
from coursehub.models import Message

_NO_MESSAGES = "There are no messages yet.\n"


def _decode(reader: Reader) -> Message:
    message_id = reader.uint()
    receiver_id = reader.uint()
    sender_id = reader.uint()
    text = reader.string()
    formatted_time = reader.string()
    return Message(message_id, text, receiver_id, sender_id, formatted_time)


def _encode(message: Message) -> bytes:
    return (
        encode_uint(message.id)
        + encode_uint(message.receiver_id)
        + encode_uint(message.sender_id)
        + encode_string(message.text)
        + encode_string(message.formatted_time)
    )


class MessageStore:
    """Messages kept one after another in a binary file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = BinaryFile(path, _decode)

    def save(self, message: Message) -> None:
        self._file.append(_encode(message))

    def find(self, message_id: int) -> Message | None:
        return next(
            (message for message, _ in self._file.records() if message.id == message_id),
            None,
        )

    def messages_for(self, receiver_id: int) -> list[Message]:
        """Messages sent to a user, oldest first."""
        return [message for message, _ in self._file.records() if message.receiver_id == receiver_id]

    def render_mailbox(self, receiver_id: int) -> str:
        messages = self.messages_for(receiver_id)
        if not messages:
            return _NO_MESSAGES
        return "".join(message.format() for message in messages)

    def delete_for(self, receiver_id: int) -> None:
        """Remove every message sent to a user."""
        self._file.rewrite(
            raw for message, raw in self._file.records() if message.receiver_id != receiver_id
        )

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> MessageStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()