"""
The Label is an immutable, fluent builder for a single zpl format.

Every builder method validates its arguments, generates a small zpl
fragment, tokenizes it and splices the tokens in before the last ^XZ of
the label, returning a new Label. Measurements (positions, sizes and
wrap widths) are given in the units of the label's MeasurementContext
while font sizes, line thicknesses and barcode modules are always dots.

>>> label = Label.create(width=400, height=200).text((10, 10), "Hello")
>>> label.to_zpl()
'^XA^PW400^LL200^FO10,10^AAN,28,28^FDHello^FS^XZ'
"""

import warnings
from dataclasses import dataclass, field, replace

from _fluentzpl.document import Document, MeasurementContext
from _fluentzpl.enums import (
    Barcode,
    Code128Mode,
    DiagonalOrientation,
    Fill,
    FontFamily,
    Justify,
    Mirror,
    Orientation,
    QRErrorCorrection,
    RFIDBank,
)
from _fluentzpl.exceptions import HexIndicatorError, ZplBuildError
from _fluentzpl.image import (
    DitherMode,
    build_image_cached_tokens,
    build_image_inline_tokens,
)
from _fluentzpl.rfid import build_rfid_read_tokens, build_rfid_write_tokens
from _fluentzpl.tokenizer import Command, Mark, tokenize
from _fluentzpl.units import DEFAULT_DPI, Units, at_least, clamp

GROUP_SEPARATOR = chr(29)

# GS1 application identifiers with variable length data, which
# must be terminated by a group separator unless they come last.
VARIABLE_LENGTH_AIS = frozenset(
    [
        "10",
        "21",
        "240",
        "241",
        "242",
        "250",
        "251",
        "253",
        "254",
        "400",
        "401",
        "402",
        "403",
        "410",
        "411",
        "412",
        "413",
        "414",
        "415",
        "416",
        "420",
        "421",
        "422",
        "423",
    ]
)

DELIMITERS = "^~,"


@dataclass(frozen=True)
class FieldDefaults:
    """
    The font and barcode settings used for fields which do not give
    their own. Updated by Label.set_default_font and
    Label.set_barcode_defaults, mirroring ^CF and ^BY on the printer.
    """

    font_family: FontFamily = FontFamily.A
    font_height: int = 28
    font_width: int = 28
    barcode_module: int = 2
    barcode_ratio: int = 3
    barcode_height: int = 100


def yes_no(flag):
    return "Y" if flag else "N"


def escape_field_data(data):
    """
    Escape carets inside field data, ie. "a^b" becomes "a^^b".
    """
    return str(data).replace("^", "^^")


def hex_indicator_command(hex_indicator):
    """
    :param hex_indicator: None for no ^FH, "" for ^FH with the printer's
        default indicator (_), or a single character.
    :raises HexIndicatorError: If the character cannot be used as
        indicator.
    """
    if hex_indicator is None:
        return ""
    indicator = str(hex_indicator)
    if not indicator:
        return "^FH"
    if len(indicator) != 1 or ord(indicator) > 127:
        raise HexIndicatorError(
            f"hex indicator must be a single ascii character, got {indicator!r}"
        )
    if "a" <= indicator <= "z":
        raise HexIndicatorError(
            f"hex indicator cannot be a lowercase letter, got {indicator!r}"
        )
    if indicator in DELIMITERS:
        raise HexIndicatorError(
            f"hex indicator cannot be a command or parameter delimiter, got {indicator!r}"
        )
    if ord(indicator) < 32:
        raise HexIndicatorError(
            f"hex indicator must be a printable character, got {indicator!r}"
        )
    return f"^FH{indicator}"


def gs1_data(application_identifiers):
    """
    Compose GS1 element strings, ie. {"01": "09506000134352", "10": "AB"}
    gives "(01)09506000134352(10)AB". A group separator follows every
    variable length element except the last.

    :param application_identifiers: Mapping from AI to its value, in order.
    """
    pairs = list(application_identifiers.items())
    parts = []
    for index, (ai, value) in enumerate(pairs):
        parts.append(f"({ai}){value}")
        if index < len(pairs) - 1 and str(ai) in VARIABLE_LENGTH_AIS:
            parts.append(GROUP_SEPARATOR)
    return "".join(parts)


@dataclass(frozen=True)
class Label:
    document: Document = field(default_factory=Document)
    defaults: FieldDefaults = field(default_factory=FieldDefaults)

    @classmethod
    def create(
        cls,
        width,
        height,
        units=Units.DOT,
        dpi=DEFAULT_DPI,
        origin=None,
        mirror=None,
        orientation=None,
    ):
        """
        Create a label with page setup, ie. "^XA^PW812^LL1218^XZ".

        :param width: The print width in the given units.
        :param height: The label length in the given units.
        :param units: The Units of all measurements given to the label.
        :param dpi: The printer resolution.
        :param origin: Optional (x, y) label home (^LH).
        :param mirror: Optional Mirror setting (^PM).
        :param orientation: Optional Orientation of the format (^PO).
        """
        context = MeasurementContext(dpi, units)
        head = ["^XA"]
        if mirror is not None:
            head.append(f"^PM{Mirror(mirror).value}")
        if orientation is not None:
            head.append(f"^PO{Orientation(orientation).value}")
        if origin is not None:
            x, y = origin
            head.append(f"^LH{context.to_dots(x)},{context.to_dots(y)}")
        head.append(f"^PW{context.to_dots(width)}")
        head.append(f"^LL{context.to_dots(height)}")
        head.append("^XZ")
        return cls(Document(tokenize("".join(head)), context))

    @classmethod
    def parse(cls, zpl, dpi=DEFAULT_DPI, units=Units.DOT, encoding="utf-8"):
        """
        Parse existing zpl into a label which can be built upon.
        Emitting an unmodified parsed label gives the input back.

        :param zpl: zpl contents as str or bytes.
        """
        return cls(Document.parse(zpl, dpi, units, encoding))

    from_zpl = parse

    @property
    def tokens(self):
        return self.document.tokens

    @property
    def context(self):
        return self.document.context

    def splice(self, fragment):
        """
        :returns: New label with the tokens of fragment inserted before
            the last ^XZ.
        """
        return replace(self, document=self.document.splice(fragment))

    def splice_zpl(self, zpl):
        return self.splice(tokenize(zpl))

    def to_dots(self, value):
        return self.context.to_dots(value)

    def field_origin(self, at):
        x, y = at
        return f"^FO{self.to_dots(x)},{self.to_dots(y)}"

    def text(
        self,
        at,
        text,
        font_family=None,
        font_height=None,
        font_width=None,
        rotate=Orientation.NORMAL,
        wrap=None,
        hex_indicator=None,
    ):
        """
        Add a text field.

        :param at: (x, y) position of the field.
        :param text: The text, carets are escaped.
        :param font_family: FontFamily, defaults to the label's default font.
        :param font_height: Font height in dots (at least 1).
        :param font_width: Font width in dots (at least 1).
        :param rotate: Orientation of the text.
        :param wrap: Optional TextWrap (^FB field block).
        :param hex_indicator: See hex_indicator_command.
        """
        family = FontFamily(
            self.defaults.font_family if font_family is None else font_family
        )
        height = at_least(
            self.defaults.font_height if font_height is None else font_height, 1
        )
        width = at_least(self.defaults.font_width if font_width is None else font_width, 1)
        hex_prefix = hex_indicator_command(hex_indicator)

        parts = [
            self.field_origin(at),
            f"^A{family.value}{Orientation(rotate).value},{height},{width}",
        ]
        if wrap is not None:
            parts.append(wrap.field_block(self.context))
        parts.append(f"{hex_prefix}^FD{escape_field_data(text)}^FS")
        return self.splice_zpl("".join(parts))

    def barcode(
        self,
        at,
        symbology,
        data,
        height=None,
        module=None,
        ratio=None,
        rotate=Orientation.NORMAL,
        line=True,
        line_above=None,
        check_digit=False,
        code128_mode=None,
        qr_model=2,
        qr_error_correction=QRErrorCorrection.HIGH,
        qr_mask=7,
        pdf417_security_level=0,
        pdf417_columns=3,
        pdf417_rows=3,
        pdf417_truncate=False,
        data_matrix_quality=200,
        hex_indicator=None,
    ):
        """
        Add a barcode field preceded by ^BY with its module width,
        wide to narrow ratio and height.

        :param at: (x, y) position of the field.
        :param symbology: The Barcode type.
        :param data: The encoded data, carets are escaped.
        :param height: Bar height in dots, defaults to the label's barcode height.
        :param module: Module (narrow bar) width in dots. For QR codes and
            data matrix this is the magnification.
        :param line: Whether to print the human readable interpretation.
        :param line_above: Whether the interpretation goes above the code,
            defaults to True only for Code 128 in UCC case mode.
        :param code128_mode: Optional Code128Mode.
        """
        symbology = Barcode(symbology)
        module = self.defaults.barcode_module if module is None else module
        ratio = self.defaults.barcode_ratio if ratio is None else ratio
        height = self.defaults.barcode_height if height is None else height
        rotate = Orientation(rotate).value
        if code128_mode is not None:
            code128_mode = Code128Mode(code128_mode)
        if line_above is None:
            line_above = (
                symbology == Barcode.CODE128 and code128_mode == Code128Mode.UCC_CASE
            )
        hex_prefix = hex_indicator_command(hex_indicator)

        line = yes_no(line)
        above = yes_no(line_above)
        check = yes_no(check_digit)
        if symbology == Barcode.CODE128:
            mode = f",{code128_mode.value}" if code128_mode is not None else ""
            symbology_command = f"^BC{rotate},{height},{line},{above},{check}{mode}"
        elif symbology == Barcode.CODE39:
            symbology_command = f"^B3{rotate},{height},{line},{above},{check}"
        elif symbology == Barcode.EAN13:
            symbology_command = f"^BE{rotate},{height},{line},{above}"
        elif symbology == Barcode.UPCA:
            symbology_command = f"^B8{rotate},{height},{line},{above},{check}"
        elif symbology == Barcode.ITF:
            symbology_command = f"^BI{rotate},{height},{line},{above}"
        elif symbology == Barcode.PDF417:
            symbology_command = (
                f"^B7{rotate},{height},{clamp(pdf417_security_level, 0, 8)},"
                f"{clamp(pdf417_columns, 1, 30)},{clamp(pdf417_rows, 3, 90)},"
                f"{yes_no(pdf417_truncate)}"
            )
        elif symbology == Barcode.QR_CODE:
            symbology_command = (
                f"^BQ{rotate},{qr_model},{module},"
                f"{QRErrorCorrection(qr_error_correction).value},{qr_mask}"
            )
        else:
            symbology_command = f"^BX{rotate},{module},{clamp(data_matrix_quality, 1, 99999)}"

        return self.splice_zpl(
            f"{self.field_origin(at)}^BY{module},{ratio},{height}{symbology_command}"
            f"{hex_prefix}^FD{escape_field_data(data)}^FS"
        )

    def box(
        self, at, size, border=1, fill=Fill.BLACK, corner_radius=0, reverse=False
    ):
        """
        Draw a box (^GB), or a line when one side is 0.

        :param size: (width, height) of the box.
        :param border: Border thickness in dots (at least 1).
        :param corner_radius: Rounding of the corners, 0 to 8.
        :param reverse: Print the field reversed (^FR).
        """
        width, height = size
        return self.splice_zpl(
            f"{self.field_origin(at)}{'^FR' if reverse else ''}"
            f"^GB{self.to_dots(width)},{self.to_dots(height)},{at_least(border, 1)},"
            f"{Fill(fill).value},{clamp(corner_radius, 0, 8)}^FS"
        )

    def circle(self, at, diameter, thickness=1, fill=Fill.BLACK, reverse=False):
        return self.splice_zpl(
            f"{self.field_origin(at)}{'^FR' if reverse else ''}"
            f"^GC{self.to_dots(diameter)},{at_least(thickness, 1)},{Fill(fill).value}^FS"
        )

    def ellipse(self, at, size, thickness=1, fill=Fill.BLACK, reverse=False):
        width, height = size
        return self.splice_zpl(
            f"{self.field_origin(at)}{'^FR' if reverse else ''}"
            f"^GE{self.to_dots(width)},{self.to_dots(height)},"
            f"{at_least(thickness, 1)},{Fill(fill).value}^FS"
        )

    def diagonal_line(
        self,
        at,
        size,
        thickness=1,
        fill=Fill.BLACK,
        orientation=DiagonalOrientation.RIGHT,
        reverse=False,
    ):
        """
        Draw a diagonal line (^GD) across the box of the given size.

        :param orientation: DiagonalOrientation, RIGHT leans right (/).
        """
        width, height = size
        return self.splice_zpl(
            f"{self.field_origin(at)}{'^FR' if reverse else ''}"
            f"^GD{self.to_dots(width)},{self.to_dots(height)},"
            f"{at_least(thickness, 1)},{Fill(fill).value},"
            f"{DiagonalOrientation(orientation).value}^FS"
        )

    def caption(
        self,
        at,
        text,
        size=24,
        family=FontFamily.A,
        rotate=Orientation.NORMAL,
        wrap_width=None,
    ):
        """
        Text with equal font height and width, optionally wrapped
        within wrap_width.
        """
        size = at_least(size, 1)
        wrap = None
        if wrap_width is not None:
            wrap = TextWrap(wrap_width, lines=10, spacing=0, justify=Justify.LEFT)
        return self.text(
            at,
            text,
            font_family=family,
            font_height=size,
            font_width=size,
            rotate=rotate,
            wrap=wrap,
        )

    def qr(
        self,
        at,
        text,
        magnification=None,
        error_correction=QRErrorCorrection.HIGH,
        mask=7,
        model=2,
        rotate=Orientation.NORMAL,
        module=None,
    ):
        """
        Add a QR code.

        :param magnification: Magnification 1 to 100, defaults to 3.
        :param module: Deprecated name for magnification.
        :param rotate: Deprecated, printers only support normal orientation.
        """
        if module is not None:
            warnings.warn(
                "the module argument of qr is deprecated, use magnification",
                DeprecationWarning,
                stacklevel=2,
            )
        if Orientation(rotate) != Orientation.NORMAL:
            warnings.warn(
                "rotating qr codes is deprecated, printers ignore it",
                DeprecationWarning,
                stacklevel=2,
            )
        if magnification is None:
            magnification = module if module is not None else 3
        return self.barcode(
            at,
            Barcode.QR_CODE,
            text,
            module=magnification,
            rotate=rotate,
            qr_error_correction=error_correction,
            qr_mask=mask,
            qr_model=model,
        )

    def gs1_128(self, at, application_identifiers, height=100, rotate=Orientation.NORMAL):
        """
        Add a GS1-128 barcode rendered as Code 128.

        :param application_identifiers: Mapping from application
            identifier (ie. "01") to value.
        """
        return self.barcode(
            at,
            Barcode.CODE128,
            gs1_data(application_identifiers),
            height=height,
            rotate=rotate,
        )

    def address_block(
        self,
        at,
        lines,
        line_height=24,
        size=24,
        family=FontFamily.A,
        rotate=Orientation.NORMAL,
    ):
        """
        Add lines of text below each other. Empty lines are
        not printed but still take up a line.

        :param line_height: Distance between lines, in the label's units.
        """
        line_height = at_least(line_height, 1)
        size = at_least(size, 1)
        x, y = at
        label = self
        for line in lines:
            if line:
                label = label.caption(
                    (x, y), line, size=size, family=family, rotate=rotate
                )
            y += line_height
        return label

    def image_inline(
        self,
        at,
        rgba,
        width,
        height,
        mode=DitherMode.THRESHOLD,
        threshold=None,
        invert=False,
    ):
        """
        Add an image embedded in the label as ^GF.

        :param rgba: width * height * 4 interleaved RGBA values.
        :param width: Width in pixels (dots).
        :param height: Height in pixels (dots).
        """
        return self.splice(
            build_image_inline_tokens(
                self.context, at, rgba, width, height, mode, threshold, invert
            )
        )

    def image(
        self,
        at,
        rgba,
        width,
        height,
        name,
        mode=DitherMode.THRESHOLD,
        threshold=None,
        invert=False,
        registry=None,
    ):
        """
        Add an image downloaded as a graphic (~DG) and recalled (^XG).

        :param name: Name of the graphic, ie. "R:LOGO.GRF".
        :param registry: Optional ImageRegistry, when the same bitmap
            was already added through it only the recall is added.
        """
        return self.splice(
            build_image_cached_tokens(
                self.context,
                at,
                rgba,
                width,
                height,
                name,
                mode,
                threshold,
                invert,
                registry,
            )
        )

    def rfid(
        self,
        epc,
        bank=RFIDBank.EPC,
        offset=None,
        length=None,
        position=None,
        password=None,
    ):
        """
        Write data to an RFID tag, see build_rfid_write_tokens.
        """
        return self.splice(
            build_rfid_write_tokens(epc, bank, offset, length, position, password)
        )

    def rfid_read(self, bank=RFIDBank.EPC, offset=None, length=None, password=None):
        return self.splice(build_rfid_read_tokens(bank, offset, length, password))

    def epc(self, epc, position=None, password=None):
        return self.rfid(epc, RFIDBank.EPC, position=position, password=password)

    def comment(self, text):
        """
        Add a comment (^FX), ie. "^FX text".
        """
        return self.splice([Command(Mark.CARET, "FX", f" {text}")])

    def with_metadata(self, metadata):
        """
        Add one comment per item of metadata, ie. "^FX order: 1234".
        """
        label = self
        for key, value in metadata.items():
            label = label.comment(f"{key}: {value}")
        return label

    def set_character_set(self, charset, custom_mappings=None):
        """
        Select the character set (^CI), 28 is utf-8.

        :param charset: Character set number 0 to 36.
        :param custom_mappings: Sequence of pairs of character codes
            (source, destination) remapped within the character set.
        :raises ZplBuildError: If custom_mappings does not contain pairs.
        """
        charset = clamp(charset, 0, 36)
        if custom_mappings:
            custom_mappings = list(custom_mappings)
            if len(custom_mappings) % 2 != 0:
                raise ZplBuildError(
                    "custom_mappings must be given as pairs of integers, "
                    f"got {len(custom_mappings)} values"
                )
            values = ",".join(str(clamp(value, 0, 255)) for value in custom_mappings)
            return self.splice_zpl(f"^CI{charset},{values}")
        return self.splice_zpl(f"^CI{charset}")

    def set_default_font(self, family=FontFamily.ZERO, height=28, width=None):
        """
        Set the default font (^CF). Text added afterwards without an
        explicit font uses it.

        :param width: Defaults to height.
        """
        family = FontFamily(family)
        height = at_least(height, 1)
        width = height if width is None else at_least(width, 1)
        label = self.splice_zpl(f"^CF{family.value},{height},{width}")
        return replace(
            label,
            defaults=replace(
                self.defaults, font_family=family, font_height=height, font_width=width
            ),
        )

    def set_barcode_defaults(self, module_width=2, ratio=3, height=None):
        """
        Set the default module width, wide to narrow ratio and
        optionally bar height (^BY). Barcodes added afterwards without
        explicit values use them.
        """
        module_width = at_least(module_width, 1)
        ratio = at_least(ratio, 1)
        height = at_least(height, 1) if height else None
        command = f"^BY{module_width},{ratio}"
        defaults = replace(
            self.defaults, barcode_module=module_width, barcode_ratio=ratio
        )
        if height is not None:
            command += f",{height}"
            defaults = replace(defaults, barcode_height=height)
        return replace(self.splice_zpl(command), defaults=defaults)

    def to_zpl(self, encoding="utf-8"):
        return self.document.to_zpl(encoding)

    def to_bytes(self, encoding="utf-8"):
        return self.document.to_bytes(encoding)

    def __str__(self):
        return self.to_zpl()


@dataclass(frozen=True)
class TextWrap:
    """
    Field block (^FB) settings for wrapping text.

    :param width: Width of the block, in the label's units.
    :param lines: Maximum number of lines.
    :param spacing: Extra space between lines in dots (at least 0).
    :param justify: Justify of the lines.
    :param hanging_indent: Indent of lines after the first in dots (at least 0).
    """

    width: float
    lines: int = 10
    spacing: int = 0
    justify: Justify = Justify.LEFT
    hanging_indent: int = 0

    def field_block(self, context=None):
        if context is None:
            context = MeasurementContext()
        return (
            f"^FB{context.to_dots(self.width)},{self.lines},"
            f"{at_least(self.spacing, 0)},{Justify(self.justify).value},"
            f"{at_least(self.hanging_indent, 0)}"
        )
