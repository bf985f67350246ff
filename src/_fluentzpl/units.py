import math
from enum import Enum, unique


@unique
class Units(Enum):
    DOT = "dot"
    MILLIMETER = "mm"
    INCH = "in"


DPI_VALUES = (203, 300, 600)
DEFAULT_DPI = 203


def round_half_up(value):
    return int(math.floor(value + 0.5))


def dot(n):
    return n


def mm(n, dpi=DEFAULT_DPI):
    """
    Convert millimeters to dots.
    :param n: The value in millimeters.
    :param dpi: The printer resolution in dots per inch.
    """
    return round_half_up(n * dpi / 25.4)


def inch(n, dpi=DEFAULT_DPI):
    """
    Convert inches to dots.
    :param n: The value in inches.
    :param dpi: The printer resolution in dots per inch.
    """
    return round_half_up(n * dpi)


def to_dots(n, dpi, units):
    """
    Convert a measurement in the given units to dots.
    """
    units = Units(units)
    if units == Units.MILLIMETER:
        return mm(n, dpi)
    if units == Units.INCH:
        return inch(n, dpi)
    return dot(n)


def clamp(value, low, high):
    """
    Round value to an integer and clamp it into [low, high].
    """
    return min(high, max(low, round_half_up(value)))


def at_least(value, low):
    return max(low, round_half_up(value))
