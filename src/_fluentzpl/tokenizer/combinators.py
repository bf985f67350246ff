from _fluentzpl.tokenizer.errors import TokenizationError


def one_of(*tokenizers):
    """
    Combinator for tokenizers.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that yields tokens from the
    first tokenizer in tokenizers that succeeds.
    """

    def one_of_tokenizer():
        errors = []
        for tok in tokenizers:
            try:
                # Tokens are collected before yielding so that a tokenizer
                # failing halfway does not leave partial output behind.
                tokens = list(tok())
            except TokenizationError as err:
                errors.append(str(err))
            else:
                yield from tokens
                return

        raise TokenizationError(
            "Tokenization failed, due to one of\n*" + ("\n*".join(errors))
        )

    return one_of_tokenizer


def repeated(tokenizer):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from tokenizer()
        except TokenizationError:
            pass

    return repeated_tokenizer
