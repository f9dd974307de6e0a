import logging

from text_history.demo import run_demo
from text_history.session import EditingSession


def test_demo_steps():
    assert run_demo() == ["Hello, ", "Hello, World!", "Hello, ", "Hello, World!"]


def test_demo_uses_given_session_and_logs(caplog):
    session = EditingSession()
    with caplog.at_level(logging.INFO, logger="text_history.demo"):
        run_demo(session)
    assert session.text() == "Hello, World!"
    assert "Text after undo: 'Hello, World!'" in caplog.text
