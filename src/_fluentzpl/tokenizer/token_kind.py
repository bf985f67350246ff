from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    COMMAND = auto()
    FIELD_DATA = auto()
    FIELD_SEPARATOR = auto()
    BYTE_RUN = auto()
    RAW_TEXT = auto()


@unique
class Mark(Enum):
    """
    The two prefix characters of zpl commands. CARET introduces format
    commands, TILDE introduces control commands.
    """

    CARET = "^"
    TILDE = "~"

    @classmethod
    def primary(cls):
        return cls.CARET


START_OF_FORMAT = "XA"
END_OF_FORMAT = "XZ"
FIELD_DATA = "FD"
FIELD_SEPARATOR = "FS"
