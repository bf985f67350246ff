import io

from _fluentzpl.tokenizer.binary_zpl_tokenizer import BinaryZplTokenizer
from _fluentzpl.tokenizer.text_zpl_tokenizer import TextZplTokenizer


def is_binary_stream(stream):
    return isinstance(stream.read(0), bytes)


class ZplTokenizer:
    def __init__(self, stream, encoding="utf-8"):
        """
        :param stream: A text or byte stream containing zpl data.
        :param encoding: Encoding used to decode text in byte streams.
        """
        self.stream = stream
        self.encoding = encoding
        self.body_tokenizer = None

    def initialize_body_tokenizer(self):
        if is_binary_stream(self.stream):
            self.body_tokenizer = BinaryZplTokenizer(
                self.stream, encoding=self.encoding
            )
        else:
            self.body_tokenizer = TextZplTokenizer(self.stream)

    def __iter__(self):
        self.initialize_body_tokenizer()
        yield from iter(self.body_tokenizer)


def tokenize(zpl, encoding="utf-8"):
    """
    Tokenize zpl contents into a list of tokens, ie.

    >>> [t.kind.name for t in tokenize("^XA^FDHi^FS^XZ")]
    ['COMMAND', 'FIELD_DATA', 'FIELD_SEPARATOR', 'COMMAND']

    Never fails: text which is not a command is given as RawText, and
    for byte input, spans that cannot be decoded are given as ByteRun.

    :param zpl: str, bytes, bytearray or memoryview of zpl contents.
    :param encoding: Encoding used to decode byte input.
    """
    if isinstance(zpl, str):
        stream = io.StringIO(zpl, newline="")
    else:
        stream = io.BytesIO(bytes(zpl))
    return list(ZplTokenizer(stream, encoding=encoding))
