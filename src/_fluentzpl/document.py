"""
A Document is an immutable sequence of tokens together with the
measurement context fragments are built in. New content is added with
splice, which inserts a fragment of tokens before the last ^XZ and
returns a new Document.
"""

from dataclasses import dataclass, field, replace

from _fluentzpl.emitter import emit, emit_bytes
from _fluentzpl.tokenizer import Command, Mark, tokenize
from _fluentzpl.tokenizer.token import is_end_of_format, is_start_of_format
from _fluentzpl.tokenizer.token_kind import END_OF_FORMAT, START_OF_FORMAT
from _fluentzpl.units import DEFAULT_DPI, DPI_VALUES, Units, to_dots


@dataclass(frozen=True)
class MeasurementContext:
    """
    The resolution and units that measurements given to a label
    are interpreted in.
    """

    dpi: int = DEFAULT_DPI
    units: Units = Units.DOT

    def __post_init__(self):
        if self.dpi not in DPI_VALUES:
            raise ValueError(f"dpi has to be one of {DPI_VALUES}, got {self.dpi}")
        object.__setattr__(self, "units", Units(self.units))

    def to_dots(self, value):
        return to_dots(value, self.dpi, self.units)


def find_insertion_point(tokens):
    """
    :returns: The index of the last ^XZ command in tokens, or len(tokens)
        if there is none.
    """
    tokens = tuple(tokens)
    for index in range(len(tokens) - 1, -1, -1):
        if is_end_of_format(tokens[index]):
            return index
    return len(tokens)


def wrap_if_needed(tokens):
    """
    Enclose the tokens in ^XA ... ^XZ unless the first token is already
    ^XA and the last is ^XZ. Empty token sequences are not wrapped.

    wrap_if_needed(wrap_if_needed(t)) == wrap_if_needed(t)
    """
    tokens = tuple(tokens)
    if not tokens:
        return tokens
    if is_start_of_format(tokens[0]) and is_end_of_format(tokens[-1]):
        return tokens
    return (
        (Command(Mark.CARET, START_OF_FORMAT),)
        + tokens
        + (Command(Mark.CARET, END_OF_FORMAT),)
    )


@dataclass(frozen=True)
class Document:
    tokens: tuple = ()
    context: MeasurementContext = field(default_factory=MeasurementContext)

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def parse(cls, zpl, dpi=DEFAULT_DPI, units=Units.DOT, encoding="utf-8"):
        """
        :param zpl: zpl contents as str or bytes.
        """
        return cls(tokenize(zpl, encoding), MeasurementContext(dpi, units))

    @property
    def insertion_point(self):
        return find_insertion_point(self.tokens)

    def splice(self, fragment):
        """
        :param fragment: Iterable of tokens.
        :returns: New document with the fragment inserted before the last ^XZ
            (or at the end when there is no ^XZ).
        """
        index = self.insertion_point
        return replace(
            self, tokens=self.tokens[:index] + tuple(fragment) + self.tokens[index:]
        )

    def append(self, fragment):
        return replace(self, tokens=self.tokens + tuple(fragment))

    def to_zpl(self, encoding="utf-8"):
        return emit(self.tokens, encoding)

    def to_bytes(self, encoding="utf-8"):
        return emit_bytes(self.tokens, encoding)


def splice(document, fragment):
    """
    See Document.splice.
    """
    return document.splice(fragment)
