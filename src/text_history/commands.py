from __future__ import annotations

from abc import ABC, abstractmethod

from text_history.buffer import InvalidArgumentError, TextBuffer, check_offset

__all__ = [
    "Command",
    "InsertText",
    "DeleteText",
]


# ==========================
# Module: commands
# Purpose: Reversible edits over a TextBuffer. Each command knows how to
#          apply itself and how to revert exactly what it applied.
# ==========================


class Command(ABC):
    """
    Base interface for reversible buffer edits.

    :param buffer: Target buffer (shared, not owned).
    :param position: Offset the edit starts at.
    :param description: Human-readable description of the command.
    """

    def __init__(self, buffer: TextBuffer, position: int, description: str) -> None:
        check_offset("position", position)
        self._buffer = buffer
        self._position = position
        self._description = description
        self._applied = False

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    @property
    def position(self) -> int:
        return self._position

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @property
    def applied(self) -> bool:
        """
        :return: True between a successful apply() and the matching revert().
        """
        return self._applied

    def apply(self) -> None:
        """
        Performs the edit. The buffer raises before mutating on bad bounds,
        in which case the command stays unapplied.
        """
        self._do_apply()
        self._applied = True

    def revert(self) -> None:
        """
        Performs the exact inverse of apply().
        """
        self._do_revert()
        self._applied = False

    @abstractmethod
    def _do_apply(self) -> None:
        """
        Variant-specific forward edit.
        """

    @abstractmethod
    def _do_revert(self) -> None:
        """
        Variant-specific inverse edit.
        """


class InsertText(Command):
    """
    Inserts text at a fixed position. Revert deletes the inserted slice.

    :param buffer: Target buffer.
    :param text: Text to insert; empty text is a legal no-op.
    :param position: Insert offset.
    """

    def __init__(self, buffer: TextBuffer, text: str, position: int) -> None:
        super().__init__(buffer, position, description=f"Insert {text!r} at {position}")
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def _do_apply(self) -> None:
        self._buffer.insert_at(self._text, self._position)

    def _do_revert(self) -> None:
        self._buffer.delete_at(self._position, len(self._text))


class DeleteText(Command):
    """
    Deletes a range of text. Revert re-inserts what was removed.

    The removed text is captured when the command is constructed, not when
    it is applied. apply() removes len(deleted_text) characters at `position`
    even if the buffer changed in between, and revert() re-inserts the
    captured text.

    :param buffer: Target buffer.
    :param position: Start offset of the range.
    :param length: Number of characters to remove.
    :raises InvalidArgumentError: If the range is outside the buffer at construction time.
    """

    def __init__(self, buffer: TextBuffer, position: int, length: int) -> None:
        super().__init__(buffer, position, description=f"Delete {length} chars at {position}")
        check_offset("length", length)
        current = buffer.text()
        if position + length > len(current):
            raise InvalidArgumentError(
                f"Delete range [{position}, {position + length}) exceeds buffer length {len(current)}."
            )
        self._length = length
        self._deleted_text = current[position:position + length]

    @property
    def length(self) -> int:
        """
        :return: Length requested at construction.
        """
        return self._length

    @property
    def deleted_text(self) -> str:
        return self._deleted_text

    def _do_apply(self) -> None:
        self._buffer.delete_at(self._position, len(self._deleted_text))

    def _do_revert(self) -> None:
        self._buffer.insert_at(self._deleted_text, self._position)
