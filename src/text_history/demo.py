from __future__ import annotations

import logging
from typing import List, Optional

from text_history.session import EditingSession

__all__ = [
    "run_demo",
    "main",
]

logger = logging.getLogger(__name__)


# ==========================
# Module: demo
# Purpose: Replays the reference editing scenario on a session and logs the
#          buffer after each step.
# ==========================


def run_demo(session: Optional[EditingSession] = None) -> List[str]:
    """
    Inserts two fragments, deletes the second, then undoes the delete.

    :param session: Session to drive; a fresh one if omitted.
    :return: Buffer text after each of the four steps.
    """
    session = session if session is not None else EditingSession()
    steps: List[str] = []

    session.insert("Hello, ", 0)
    steps.append(session.text())
    session.insert("World!", 7)
    steps.append(session.text())
    logger.info("Resulting text: %r", session.text())

    session.delete(7, len("World!"))
    steps.append(session.text())
    logger.info("Text after delete: %r", session.text())

    session.undo()
    steps.append(session.text())
    logger.info("Text after undo: %r", session.text())
    return steps


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_demo()


if __name__ == '__main__':
    main()
