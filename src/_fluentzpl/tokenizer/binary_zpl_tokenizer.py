import codecs

from _fluentzpl.tokenizer.abstract_zpl_tokenizer import AbstractZplTokenizer
from _fluentzpl.tokenizer.errors import TokenizationError
from _fluentzpl.tokenizer.mnemonics import name_length

# Longest encoding of a single character in the supported encodings.
MAX_CHARACTER_WIDTH = 4


class BinaryZplTokenizer(AbstractZplTokenizer):
    def __init__(self, stream, encoding="utf-8"):
        """
        :param stream: A byte stream containing zpl data.
        :param encoding: The encoding of text in the stream, has to
            be ascii compatible as marks are searched for bytewise.
            Spans that do not decode are tokenized as ByteRun.
        """
        self._stream = stream
        self._encoding = None
        self.encoding = encoding

    @property
    def stream(self):
        return self._stream

    @property
    def encoding(self):
        return self._encoding

    @encoding.setter
    def encoding(self, value):
        if codecs.lookup(value).encode("^~")[0] != b"^~":
            raise ValueError(f"encoding has to be ascii compatible, got {value}")
        self._encoding = value

    def raw(self, text):
        return text.encode("ascii")

    def decode(self, raw):
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as err:
            raise TokenizationError(
                f"Could not decode {raw!r} as {self.encoding}"
            ) from err

    def mnemonic_lookahead(self, raw):
        # Mnemonics are ascii, so a bytewise view is enough to
        # determine the length of a name.
        return raw.decode("latin-1")

    def character_ends(self, raw, count):
        """
        :returns: The byte offsets in raw where each of its first count
            decodable characters end.
        """
        decoder = codecs.getincrementaldecoder(self.encoding)()
        ends = []
        decoded = 0
        for offset in range(len(raw)):
            try:
                decoded += len(decoder.decode(raw[offset : offset + 1]))
            except UnicodeDecodeError:
                break
            ends.extend([offset + 1] * (decoded - len(ends)))
            if len(ends) >= count:
                break
        return ends[:count]

    def read_name(self, mark):
        """
        Read a command name counted in characters rather than bytes, so
        that names are the same as when tokenizing the decoded text.
        Falls back to counting bytes when the name does not decode.
        """
        start = self.stream.tell()
        lookahead = self.stream.read(2 * MAX_CHARACTER_WIDTH)
        ends = self.character_ends(lookahead, 2)
        self.stream.seek(start)
        if not ends:
            return super().read_name(mark)
        characters = self.decode(lookahead[: ends[-1]])
        length = min(name_length(mark, characters), len(ends))
        self.stream.seek(start + ends[length - 1])
        return lookahead[: ends[length - 1]]
