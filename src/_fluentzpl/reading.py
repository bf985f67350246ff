import pathlib

from _fluentzpl.label import Label
from _fluentzpl.units import DEFAULT_DPI, Units


def read_contents(filelike):
    """
    :returns: The contents of the file as bytes when opened from a path
        or binary stream, and as str for a text stream.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as file_stream:
            return file_stream.read()
    return filelike.read()


def read(filelike, dpi=DEFAULT_DPI, units=Units.DOT, encoding="utf-8"):
    """
    Reads a zpl file and returns it as a Label,
    ie. label = read("/my/file.zpl")

    Files opened from a path are read in binary mode so that content
    which cannot be decoded is kept, and writing the label back gives
    the same file.

    :param filelike: A file-like object, (string to path, pathlib.Path or opened stream).
    :param dpi: The dpi of the label.
    :param units: The units of measurements given to builder methods
        of the label.
    :param encoding: The encoding of the file.
    """
    return Label.parse(read_contents(filelike), dpi, units, encoding)
