from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "InvalidArgumentError",
    "check_offset",
    "Snapshot",
    "TextBuffer",
]


# ==========================
# Module: buffer
# Purpose: Receiver for text edits. Positional insert/delete with explicit
#          bounds checking, plus memento-style snapshot/restore.
# ==========================


class InvalidArgumentError(ValueError):
    """
    Raised when a position or length falls outside the buffer's bounds.
    """


def check_offset(name: str, value: int) -> None:
    # bool is an int subclass; True/False are not offsets.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}.")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}.")


@dataclass(frozen=True, slots=True)
class Snapshot:
    """
    Immutable copy of a buffer's content at a point in time.

    :param saved_content: Text captured when the snapshot was taken.
    """
    saved_content: str


@dataclass
class TextBuffer:
    """
    Mutable text content under edit.

    Bounds are validated before any mutation, so a failed call leaves
    the content untouched.

    :param content: Initial text; empty by default.
    """
    content: str = ""

    def insert_at(self, text: str, position: int) -> None:
        """
        Inserts `text` at `position`, shifting the rest of the content right.

        :param text: Text to insert; may be empty.
        :param position: Offset in [0, len(content)].
        :raises InvalidArgumentError: If position is out of range.
        """
        check_offset("position", position)
        if position > len(self.content):
            raise InvalidArgumentError(
                f"Insert position {position} is past the end of the buffer (length {len(self.content)})."
            )
        self.content = self.content[:position] + text + self.content[position:]

    def delete_at(self, position: int, length: int) -> None:
        """
        Removes `length` characters starting at `position`.

        Over-length deletes are rejected rather than clamped.

        :param position: Start offset.
        :param length: Number of characters to remove; 0 is a no-op.
        :raises InvalidArgumentError: If the range does not fit inside the content.
        """
        check_offset("position", position)
        check_offset("length", length)
        if position + length > len(self.content):
            raise InvalidArgumentError(
                f"Delete range [{position}, {position + length}) exceeds buffer length {len(self.content)}."
            )
        self.content = self.content[:position] + self.content[position + length:]

    def snapshot(self) -> Snapshot:
        """
        :return: Immutable copy of the current content.
        """
        return Snapshot(self.content)

    def restore(self, snapshot: Snapshot) -> None:
        """
        Replaces the content wholesale with the snapshot's text.

        :param snapshot: Previously taken snapshot.
        """
        self.content = snapshot.saved_content

    def text(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)
