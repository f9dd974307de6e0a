from __future__ import annotations

import logging
from typing import List

from text_history.buffer import InvalidArgumentError, TextBuffer
from text_history.commands import Command

__all__ = [
    "History",
]

logger = logging.getLogger(__name__)


# ==========================
# Module: history
# Purpose: Invoker that applies commands to one buffer and keeps them on a
#          stack so the most recent one can be undone. No redo.
# ==========================


class History:
    """
    Applies commands and records them for single-step undo.

    One history serves exactly one buffer. Undone commands are discarded.

    :param buffer: The buffer every submitted command must target.
    """

    def __init__(self, buffer: TextBuffer) -> None:
        self._buffer = buffer
        self._applied: List[Command] = []

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    def apply(self, command: Command) -> None:
        """
        Applies a command and pushes it onto the stack.

        :param command: Command targeting this history's buffer.
        :raises InvalidArgumentError: If the command targets another buffer,
            is already applied, or its bounds are invalid. Nothing is recorded.
        """
        if command.buffer is not self._buffer:
            raise InvalidArgumentError(f"{command.description} targets a different buffer.")
        if command.applied:
            raise InvalidArgumentError(f"{command.description} is already applied.")
        command.apply()
        self._applied.append(command)
        logger.debug("Applied: %s (depth %d)", command.description, len(self._applied))

    def undo_last(self) -> bool:
        """
        Reverts the most recently applied command, if any.

        :return: True if a command was undone; False if the history was empty.
        """
        if not self._applied:
            logger.debug("Nothing to undo.")
            return False
        command = self._applied[-1]
        command.revert()
        self._applied.pop()
        logger.debug("Undone: %s (depth %d)", command.description, len(self._applied))
        return True

    def clear(self) -> None:
        """
        Forgets every recorded command without reverting it.
        """
        self._applied.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._applied)

    @property
    def commands(self) -> List[Command]:
        """
        :return: Copy of the applied stack, oldest first.
        """
        return list(self._applied)

    def __len__(self) -> int:
        return len(self._applied)
