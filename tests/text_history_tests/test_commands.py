import pytest
from text_history.buffer import TextBuffer, InvalidArgumentError
from text_history.commands import InsertText, DeleteText


def test_insert_and_revert():
    buf = TextBuffer("ab")
    cmd = InsertText(buf, "Hi", 1)
    cmd.apply()
    assert buf.text() == "aHib"
    assert cmd.applied is True
    cmd.revert()
    assert buf.text() == "ab"
    assert cmd.applied is False


def test_insert_empty_text_is_noop_pair():
    buf = TextBuffer("abc")
    cmd = InsertText(buf, "", 2)
    cmd.apply()
    assert buf.text() == "abc"
    cmd.revert()
    assert buf.text() == "abc"


def test_insert_out_of_range_stays_unapplied():
    buf = TextBuffer("abc")
    cmd = InsertText(buf, "x", 10)
    with pytest.raises(InvalidArgumentError):
        cmd.apply()
    assert cmd.applied is False
    assert buf.text() == "abc"


def test_delete_and_revert_restores_text_and_position():
    buf = TextBuffer("Hello, World!")
    cmd = DeleteText(buf, 5, 2)
    assert cmd.deleted_text == ", "
    cmd.apply()
    assert buf.text() == "HelloWorld!"
    cmd.revert()
    assert buf.text() == "Hello, World!"


def test_delete_construction_validates_range():
    buf = TextBuffer("abc")
    with pytest.raises(InvalidArgumentError):
        DeleteText(buf, 2, 5)
    with pytest.raises(InvalidArgumentError):
        DeleteText(buf, -1, 1)


def test_delete_captures_text_at_construction():
    buf = TextBuffer("abcdef")
    cmd = DeleteText(buf, 1, 2)
    # Mutate the buffer behind the command's back before it is applied.
    buf.insert_at("XYZ", 0)
    cmd.apply()
    # Two characters go from position 1 of the live content, not "bc".
    assert buf.text() == "Xabcdef"
    cmd.revert()
    # Revert re-inserts the captured "bc", not what was actually removed.
    assert buf.text() == "Xbcabcdef"
    assert cmd.deleted_text == "bc"


def test_descriptions():
    buf = TextBuffer("abc")
    assert InsertText(buf, "x", 0).description == "Insert 'x' at 0"
    assert DeleteText(buf, 1, 2).description == "Delete 2 chars at 1"
