from abc import ABC, abstractmethod, abstractproperty
from functools import cached_property

from _fluentzpl.tokenizer.combinators import one_of, repeated
from _fluentzpl.tokenizer.errors import TokenizationError
from _fluentzpl.tokenizer.mnemonics import name_length
from _fluentzpl.tokenizer.token import ByteRun, Command, FieldData, FieldSeparator, RawText
from _fluentzpl.tokenizer.token_kind import FIELD_DATA, FIELD_SEPARATOR, Mark

FIELD_DATA_CHUNK_SIZE = 64


class AbstractZplTokenizer(ABC):
    """
    The zpl tokenizer is an iterable for tokens for a given stream of zpl
    contents. Every tokenizer method either yields tokens and leaves the
    stream after what it consumed, or winds the stream back and raises
    TokenizationError. As raw text is the fallback for anything
    else, iterating the tokenizer never raises.

    This is an abstract class which doesn't implement how characters are
    represented in the stream, see TextZplTokenizer and BinaryZplTokenizer.
    """

    @abstractproperty
    def stream(self):
        pass

    @abstractmethod
    def raw(self, text):
        """
        :param text: An ascii string, eg. "^FS".
        :returns: text as represented in the stream.
        """
        pass

    @abstractmethod
    def decode(self, raw):
        """
        :param raw: Characters read from the stream.
        :returns: raw as a string.
        :raises TokenizationError: if raw cannot be decoded.
        """
        pass

    @abstractmethod
    def mnemonic_lookahead(self, raw):
        """
        :returns: raw characters following a mark as a string which
            can be given to name_length.
        """
        pass

    @cached_property
    def marks(self):
        return {self.raw(mark.value): mark for mark in Mark}

    @cached_property
    def field_separator(self):
        return self.raw(Mark.primary().value + FIELD_SEPARATOR)

    def __iter__(self):
        return self.tokenize_document()

    def tokenize_document(self):
        """
        Tokenize everything from the current position to the end of the stream.
        """
        yield from repeated(self.tokenize_element)()

    @property
    def tokenize_element(self):
        return one_of(
            self.tokenize_raw_text,
            self.tokenize_field_data,
            self.tokenize_command,
            self.tokenize_stray_mark,
        )

    def read_until_mark(self):
        """
        Read characters up to, but not including, the next mark
        character or end of stream.
        """
        start = self.stream.tell()
        end = start
        read_char = self.stream.read(1)
        while read_char and read_char not in self.marks:
            end = self.stream.tell()
            read_char = self.stream.read(1)
        self.stream.seek(start)
        return self.stream.read(end - start)

    def read_mark(self):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char not in self.marks:
            self.stream.seek(start)
            raise TokenizationError(f"Expected mark at {start} got {read_char!r}")
        return self.marks[read_char]

    def read_until_field_separator(self):
        """
        Read characters up to the next ^FS and leave the stream after it.

        The stream is read in chunks of doubling size, so only about
        twice the field data is read before the separator is found.

        :returns: Tuple of the characters before ^FS and whether ^FS
            was found. When it was not, all remaining characters are
            returned.
        """
        start = self.stream.tell()
        separator = self.field_separator
        overlap = len(separator) - 1
        chunks = []
        consumed = 0
        tail = self.raw("")
        chunk_size = FIELD_DATA_CHUNK_SIZE
        while True:
            chunk = self.stream.read(chunk_size)
            if not chunk:
                return self.raw("").join(chunks), False
            chunks.append(chunk)
            window = tail + chunk
            found = window.find(separator)
            if found >= 0:
                end = consumed - len(tail) + found
                self.stream.seek(start + end + len(separator))
                return self.raw("").join(chunks)[:end], True
            consumed += len(chunk)
            tail = window[len(window) - overlap :]
            chunk_size *= 2

    def read_name(self, mark):
        start = self.stream.tell()
        lookahead = self.stream.read(2)
        length = name_length(mark, self.mnemonic_lookahead(lookahead))
        self.stream.seek(start + min(length, len(lookahead)))
        return lookahead[:length]

    def tokenize_raw_text(self):
        """
        Tokenize text preceding the next command, yields
        RawText("\\n  ") for stream containing "\\n  ^XZ".
        """
        start = self.stream.tell()
        run = self.read_until_mark()
        if not run:
            raise TokenizationError(f"Expected text at {start}")
        yield self.text_or_bytes(run)

    def tokenize_command(self):
        """
        Tokenize a command, yields
        Command(Mark.CARET, "FO", "50,100")
        for stream containing "^FO50,100".
        """
        start = self.stream.tell()
        mark = self.read_mark()
        name = self.read_name(mark)
        if not name:
            self.stream.seek(start)
            raise TokenizationError(f"Expected command name at {start}")
        try:
            name = self.decode(name)
        except TokenizationError:
            self.stream.seek(start)
            raise

        params = self.read_until_mark()
        try:
            decoded_params = self.decode(params)
        except TokenizationError:
            yield Command(mark, name)
            yield ByteRun(params)
        else:
            yield Command(mark, name, decoded_params)

    def tokenize_field_data(self):
        """
        Tokenize a field data block, yields
        [FieldData("Hello^XZ"), FieldSeparator()]
        for stream containing "^FDHello^XZ^FS". Marks inside the block are
        not commands. When the stream ends before ^FS only
        FieldData is yielded.
        """
        start = self.stream.tell()
        mark = self.read_mark()
        if mark != Mark.primary() or self.stream.read(2) != self.raw(FIELD_DATA):
            self.stream.seek(start)
            raise TokenizationError(f"Expected field data at {start}")

        data, terminated = self.read_until_field_separator()

        try:
            decoded = self.decode(data)
        except TokenizationError:
            block = self.raw(Mark.primary().value + FIELD_DATA) + data
            if terminated:
                block += self.field_separator
            yield ByteRun(block)
            return

        yield FieldData(decoded)
        if terminated:
            yield FieldSeparator()

    def tokenize_stray_mark(self):
        """
        Tokenize a mark which does not start a command, that is a mark at
        the end of the stream or followed by an undecodable name.
        """
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char not in self.marks:
            self.stream.seek(start)
            raise TokenizationError(f"Expected mark at {start} got {read_char!r}")
        yield self.text_or_bytes(read_char + self.read_until_mark())

    def text_or_bytes(self, run):
        try:
            return RawText(self.decode(run))
        except TokenizationError:
            return ByteRun(run)
