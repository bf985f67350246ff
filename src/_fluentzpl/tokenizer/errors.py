class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the start of the stream (however, it could be that
    any other zpl token not covered by that tokenizer is at the
    start of the stream).

    Only used for backtracking between tokenizers, ZplTokenizer as
    a whole never raises it.
    """

    pass
