import pytest

from _fluentzpl.emitter import emit, emit_bytes, emit_token
from _fluentzpl.tokenizer import (
    ByteRun,
    Command,
    FieldData,
    FieldSeparator,
    Mark,
    RawText,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        (Command(Mark.CARET, "FO", "10,20"), "^FO10,20"),
        (Command("~", "TA", "0"), "~TA0"),
        (Command("^", "XZ"), "^XZ"),
        (FieldData("Hello"), "^FDHello"),
        (FieldSeparator(), "^FS"),
        (RawText("\n"), "\n"),
        (ByteRun(b"abc"), "abc"),
    ],
)
def test_emit_token(token, expected):
    assert emit_token(token) == expected


@pytest.mark.parametrize("not_a_token", [None, 1, "^XA", object()])
def test_emit_unknown(not_a_token):
    assert emit_token(not_a_token) == ""
    assert emit([Command("^", "XA"), not_a_token, Command("^", "XZ")]) == "^XA^XZ"


def test_emit_empty():
    assert emit([]) == ""
    assert emit_bytes([]) == b""


def test_mark_given_as_string_is_coerced():
    assert Command("^", "XA").mark is Mark.CARET


def test_emit_byte_run_with_surrogates():
    emitted = emit([ByteRun(b"\xff")])
    assert emitted.encode("utf-8", "surrogateescape") == b"\xff"


def test_emit_bytes_keeps_byte_runs():
    tokens = [Command("^", "FD"), ByteRun(b"\x00\xff"), FieldSeparator()]
    assert emit_bytes(tokens) == b"^FD\x00\xff^FS"


def test_emit_bytes_encoding():
    assert emit_bytes([FieldData("é")], encoding="latin-1") == b"^FD\xe9"
