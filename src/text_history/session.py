from __future__ import annotations

import logging
from typing import Optional

from text_history.buffer import Snapshot, TextBuffer
from text_history.commands import DeleteText, InsertText
from text_history.history import History

__all__ = [
    "EditingSession",
]

logger = logging.getLogger(__name__)


class EditingSession:
    """
    A buffer together with its history, constructed explicitly by the caller.

    :param buffer: Buffer to edit; a fresh empty one if omitted.
    """

    def __init__(self, buffer: Optional[TextBuffer] = None) -> None:
        self._buffer = buffer if buffer is not None else TextBuffer()
        self._history = History(self._buffer)

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    @property
    def history(self) -> History:
        return self._history

    def insert(self, text: str, position: int) -> InsertText:
        cmd = InsertText(self._buffer, text, position)
        self._history.apply(cmd)
        return cmd

    def delete(self, position: int, length: int) -> DeleteText:
        cmd = DeleteText(self._buffer, position, length)
        self._history.apply(cmd)
        return cmd

    def undo(self) -> bool:
        return self._history.undo_last()

    def text(self) -> str:
        return self._buffer.text()

    def snapshot(self) -> Snapshot:
        return self._buffer.snapshot()

    def restore(self, snapshot: Snapshot) -> None:
        """
        Restores the buffer wholesale and clears the history, whose recorded
        positions no longer refer to the restored content.

        :param snapshot: Snapshot taken from this session's buffer.
        """
        self._buffer.restore(snapshot)
        if len(self._history):
            logger.info("Restored snapshot; discarded %d undo entries.", len(self._history))
        self._history.clear()
