from enum import Enum, unique


@unique
class Orientation(Enum):
    NORMAL = "N"
    ROTATED_90 = "R"
    INVERTED_180 = "I"
    ROTATED_270 = "B"


@unique
class FontFamily(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    ZERO = "0"


@unique
class Justify(Enum):
    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"
    JUSTIFIED = "J"


@unique
class Fill(Enum):
    BLACK = "B"
    WHITE = "W"


@unique
class DiagonalOrientation(Enum):
    RIGHT = "R"
    LEFT = "L"


@unique
class Barcode(Enum):
    CODE128 = "Code128"
    CODE39 = "Code39"
    EAN13 = "EAN13"
    UPCA = "UPCA"
    ITF = "ITF"
    PDF417 = "PDF417"
    QR_CODE = "QRCode"
    DATA_MATRIX = "DataMatrix"


@unique
class Code128Mode(Enum):
    """
    Mode parameter of ^BC.
    """

    NONE = "N"
    UCC_CASE = "U"
    AUTOMATIC = "A"
    UCC_EAN = "D"


@unique
class QRErrorCorrection(Enum):
    HIGHEST = "H"
    HIGH = "Q"
    MEDIUM = "M"
    LOW = "L"


@unique
class RFIDBank(Enum):
    EPC = "EPC"
    TID = "TID"
    USER = "USER"
    HOST_BUFFER = "HOST"


@unique
class PrinterMode(Enum):
    TEAR_OFF = "T"
    PEEL_OFF = "P"
    REWIND = "R"
    APPLICATOR = "A"
    CUTTER = "C"


@unique
class MediaTracking(Enum):
    CONTINUOUS = "N"
    NON_CONTINUOUS = "Y"
    MARK = "Z"


@unique
class Mirror(Enum):
    OFF = "N"
    ON = "Y"


@unique
class PrinterConfiguration(Enum):
    """
    Actions of ^JU.
    """

    SAVE = "S"
    RELOAD_SAVED = "R"
    RELOAD_FACTORY = "F"
    RELOAD_FACTORY_NETWORK = "N"
