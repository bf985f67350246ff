import io
import pathlib
from functools import wraps

from _fluentzpl.emitter import emit, emit_bytes


class ZplWriteError(Exception):
    pass


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def source_tokens(source):
    """
    :param source: A Label, ZplProgram, PrinterConfig, Document or
        iterable of tokens.
    :returns: The tokens of source.
    """
    tokens = getattr(source, "tokens", source)
    if callable(tokens):
        tokens = tokens()
    if isinstance(tokens, (str, bytes)):
        raise ZplWriteError(
            f"Expected a label, program or tokens to write, got {type(source).__name__}"
        )
    try:
        return tuple(tokens)
    except TypeError as err:
        raise ZplWriteError(
            f"Expected a label, program or tokens to write, got {type(source).__name__}"
        ) from err


def is_text_stream(stream):
    return isinstance(stream, io.TextIOBase)


@takes_stream(0, "wb")
def write(filelike, source, encoding="utf-8"):
    """
    Writes the zpl of source to the file.

    :param filelike: A file-like object, (string to path, pathlib.Path or opened stream).
    :param source: Label, ZplProgram, PrinterConfig, Document or iterable of tokens.
    :param encoding: The encoding of the file, text streams are written
        in their own encoding.
    """
    tokens = source_tokens(source)
    if is_text_stream(filelike):
        filelike.write(emit(tokens, encoding))
    else:
        filelike.write(emit_bytes(tokens, encoding))
