import fluentzpl.version
from _fluentzpl.document import (
    Document,
    MeasurementContext,
    find_insertion_point,
    splice,
    wrap_if_needed,
)
from _fluentzpl.emitter import emit, emit_bytes
from _fluentzpl.enums import (
    Barcode,
    Code128Mode,
    DiagonalOrientation,
    Fill,
    FontFamily,
    Justify,
    MediaTracking,
    Mirror,
    Orientation,
    PrinterConfiguration,
    PrinterMode,
    QRErrorCorrection,
    RFIDBank,
)
from _fluentzpl.exceptions import HexIndicatorError, RFIDError, ZplBuildError
from _fluentzpl.image import (
    DitherMode,
    ImageRegistry,
    encode_dg,
    encode_gf,
    mono_from_rgba,
    normalize_grf_name,
)
from _fluentzpl.label import FieldDefaults, Label, TextWrap
from _fluentzpl.printer_config import PrinterConfig, PrinterConfigOptions
from _fluentzpl.program import ZplProgram
from _fluentzpl.reading import read
from _fluentzpl.template import label
from _fluentzpl.tokenizer import (
    ByteRun,
    Command,
    FieldData,
    FieldSeparator,
    Mark,
    RawText,
    TokenKind,
    tokenize,
)
from _fluentzpl.units import Units, dot, inch, mm, to_dots
from _fluentzpl.writing import ZplWriteError, write

__version__ = fluentzpl.version.version

__all__ = [
    "Barcode",
    "ByteRun",
    "Code128Mode",
    "Command",
    "DiagonalOrientation",
    "DitherMode",
    "Document",
    "FieldData",
    "FieldDefaults",
    "FieldSeparator",
    "Fill",
    "FontFamily",
    "HexIndicatorError",
    "ImageRegistry",
    "Justify",
    "Label",
    "Mark",
    "MeasurementContext",
    "MediaTracking",
    "Mirror",
    "Orientation",
    "PrinterConfig",
    "PrinterConfigOptions",
    "PrinterConfiguration",
    "PrinterMode",
    "QRErrorCorrection",
    "RFIDBank",
    "RFIDError",
    "RawText",
    "TextWrap",
    "TokenKind",
    "Units",
    "ZplBuildError",
    "ZplProgram",
    "ZplWriteError",
    "dot",
    "emit",
    "emit_bytes",
    "encode_dg",
    "encode_gf",
    "find_insertion_point",
    "inch",
    "label",
    "mm",
    "mono_from_rgba",
    "normalize_grf_name",
    "read",
    "splice",
    "to_dots",
    "tokenize",
    "wrap_if_needed",
    "write",
]
