from dataclasses import dataclass, field
from typing import ClassVar

from _fluentzpl.tokenizer.token_kind import (
    END_OF_FORMAT,
    START_OF_FORMAT,
    Mark,
    TokenKind,
)


@dataclass(frozen=True)
class Command:
    """
    A zpl command and its raw, uninterpreted parameter string, ie.
    Command(Mark.CARET, "FO", "50,100") for "^FO50,100".
    """

    kind: ClassVar[TokenKind] = TokenKind.COMMAND

    mark: Mark
    name: str
    params: str = ""

    def __post_init__(self):
        object.__setattr__(self, "mark", Mark(self.mark))

    def is_command(self, name, mark=Mark.CARET):
        return self.name == name and self.mark == mark

    @property
    def is_start_of_format(self):
        return self.is_command(START_OF_FORMAT)

    @property
    def is_end_of_format(self):
        return self.is_command(END_OF_FORMAT)


@dataclass(frozen=True)
class FieldData:
    """
    The payload of a ^FD block. The ^FD mnemonic itself is implicit.
    """

    kind: ClassVar[TokenKind] = TokenKind.FIELD_DATA

    data: str = ""


@dataclass(frozen=True)
class FieldSeparator:
    """
    The ^FS closing a field data block.
    """

    kind: ClassVar[TokenKind] = TokenKind.FIELD_SEPARATOR


@dataclass(frozen=True)
class ByteRun:
    """
    Bytes that could not be decoded as text, preserved verbatim.
    """

    kind: ClassVar[TokenKind] = TokenKind.BYTE_RUN

    buf: bytes = field(default=b"")

    def __post_init__(self):
        object.__setattr__(self, "buf", bytes(self.buf))


@dataclass(frozen=True)
class RawText:
    """
    Text which is not part of any command, such as
    whitespace or newlines between commands.
    """

    kind: ClassVar[TokenKind] = TokenKind.RAW_TEXT

    text: str = ""


def is_start_of_format(token):
    return getattr(token, "kind", None) == TokenKind.COMMAND and token.is_start_of_format


def is_end_of_format(token):
    return getattr(token, "kind", None) == TokenKind.COMMAND and token.is_end_of_format
