from _fluentzpl.tokenizer.abstract_zpl_tokenizer import AbstractZplTokenizer


class TextZplTokenizer(AbstractZplTokenizer):
    def __init__(self, stream):
        """
        :param stream: A text stream containing zpl data.
        """
        self._stream = stream

    @property
    def stream(self):
        return self._stream

    def raw(self, text):
        return text

    def decode(self, raw):
        return raw

    def mnemonic_lookahead(self, raw):
        return raw
