"""
The emitter turns a sequence of tokens (see _fluentzpl.tokenizer) back into
zpl. Emitting the tokens of untouched input gives the input back exactly.
"""

from _fluentzpl.tokenizer.token_kind import FIELD_DATA, FIELD_SEPARATOR, Mark, TokenKind


def emit_token(token, encoding="utf-8"):
    """
    :param token: Any token.
    :param encoding: The encoding used to turn a ByteRun into text.
    :returns: The zpl string for the token, or "" for anything which is
        not a token.
    """
    kind = getattr(token, "kind", None)
    if kind == TokenKind.COMMAND:
        return Mark(token.mark).value + token.name + token.params
    if kind == TokenKind.FIELD_DATA:
        return Mark.primary().value + FIELD_DATA + token.data
    if kind == TokenKind.FIELD_SEPARATOR:
        return Mark.primary().value + FIELD_SEPARATOR
    if kind == TokenKind.BYTE_RUN:
        # surrogateescape makes emit(...).encode(encoding, "surrogateescape")
        # give back the original bytes.
        return bytes(token.buf).decode(encoding, "surrogateescape")
    if kind == TokenKind.RAW_TEXT:
        return token.text
    return ""


def emit(tokens, encoding="utf-8"):
    """
    Emit the tokens as a zpl string.

    :param tokens: Iterable of tokens.
    :param encoding: The encoding byte runs are decoded with.
    """
    return "".join(emit_token(token, encoding) for token in tokens)


def emit_bytes(tokens, encoding="utf-8"):
    """
    Emit the tokens as bytes. Byte runs are written as is, all
    other tokens are encoded with the given encoding, so that
    emit_bytes(tokenize(b)) == b.

    :param tokens: Iterable of tokens.
    :param encoding: The encoding of the resulting bytes.
    """
    chunks = []
    for token in tokens:
        if getattr(token, "kind", None) == TokenKind.BYTE_RUN:
            chunks.append(bytes(token.buf))
        else:
            chunks.append(emit_token(token, encoding).encode(encoding, "surrogateescape"))
    return b"".join(chunks)
