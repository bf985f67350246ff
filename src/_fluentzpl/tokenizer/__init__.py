"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

Zpl is tokenized in a single left to right scan. The only state is whether
a field data block (^FD ... ^FS) is being read, inside which marks are not
commands. Anything which is not a command or field data block is kept as
RawText, so the tokens always hold the entire contents of the stream and
emitting them gives back the original.

For byte streams, spans which cannot be decoded are kept as ByteRun, so that
binary payloads, such as downloaded graphics, are never altered.
"""

from .token import ByteRun, Command, FieldData, FieldSeparator, RawText
from .token_kind import Mark, TokenKind
from .zpl_tokenizer import ZplTokenizer, tokenize

__all__ = [
    "ByteRun",
    "Command",
    "FieldData",
    "FieldSeparator",
    "Mark",
    "RawText",
    "TokenKind",
    "ZplTokenizer",
    "tokenize",
]
