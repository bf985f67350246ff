import pytest

from _fluentzpl.enums import (
    Barcode,
    Code128Mode,
    DiagonalOrientation,
    Fill,
    FontFamily,
    Justify,
    Mirror,
    Orientation,
    RFIDBank,
)
from _fluentzpl.exceptions import HexIndicatorError, RFIDError, ZplBuildError
from _fluentzpl.label import FieldDefaults, Label, TextWrap, gs1_data
from _fluentzpl.tokenizer import Command
from _fluentzpl.units import Units


@pytest.fixture
def blank():
    return Label.create(width=400, height=600)


def body(label):
    """
    The zpl between the page setup and the final ^XZ of a label
    created by the blank fixture.
    """
    zpl = label.to_zpl()
    head = "^XA^PW400^LL600"
    assert zpl.startswith(head)
    assert zpl.endswith("^XZ")
    return zpl[len(head) : -len("^XZ")]


def test_create():
    assert Label.create(width=400, height=600).to_zpl() == "^XA^PW400^LL600^XZ"


def test_create_with_page_setup():
    label = Label.create(
        width=400,
        height=600,
        origin=(10, 20),
        mirror=Mirror.ON,
        orientation=Orientation.INVERTED_180,
    )
    assert label.to_zpl() == "^XA^PMY^POI^LH10,20^PW400^LL600^XZ"


def test_create_in_millimeters():
    label = Label.create(width=100, height=150, units=Units.MILLIMETER, dpi=300)
    assert label.to_zpl() == "^XA^PW1181^LL1772^XZ"


def test_positions_are_converted():
    label = Label.create(width=100, height=150, units=Units.MILLIMETER, dpi=300)
    assert "^FO118,177" in label.text((10, 15), "x").to_zpl()


def test_create_with_unsupported_dpi():
    with pytest.raises(ValueError, match="dpi"):
        Label.create(width=1, height=1, dpi=150)


def test_text(blank):
    assert body(blank.text((10, 20), "Hello")) == "^FO10,20^AAN,28,28^FDHello^FS"


def test_text_with_font(blank):
    label = blank.text(
        (10, 10),
        "Hi",
        font_family=FontFamily.ZERO,
        font_height=30,
        font_width=40,
        rotate=Orientation.ROTATED_90,
    )
    assert body(label) == "^FO10,10^A0R,30,40^FDHi^FS"


def test_text_font_size_at_least_one(blank):
    assert "^AAN,1,1" in body(blank.text((0, 0), "x", font_height=0, font_width=0.2))


def test_text_escapes_carets(blank):
    label = blank.text((0, 0), "a^b")
    assert body(label) == "^FO0,0^AAN,28,28^FDa^^b^FS"


def test_text_wrap(blank):
    wrap = TextWrap(200, lines=3, spacing=2, justify=Justify.CENTER, hanging_indent=5)
    label = blank.text((0, 0), "x", wrap=wrap)
    assert body(label) == "^FO0,0^AAN,28,28^FB200,3,2,C,5^FDx^FS"


def test_text_wrap_clamps(blank):
    wrap = TextWrap(100, spacing=-3, hanging_indent=-1)
    assert "^FB100,10,0,L,0" in body(blank.text((0, 0), "x", wrap=wrap))


@pytest.mark.parametrize(
    "hex_indicator, expected", [(None, ""), ("", "^FH"), ("_", "^FH_"), ("#", "^FH#")]
)
def test_hex_indicator(blank, hex_indicator, expected):
    label = blank.text((0, 0), "x", hex_indicator=hex_indicator)
    assert body(label) == f"^FO0,0^AAN,28,28{expected}^FDx^FS"


@pytest.mark.parametrize(
    "hex_indicator, message",
    [
        ("ab", "single ascii"),
        ("é", "single ascii"),
        ("a", "lowercase"),
        ("^", "delimiter"),
        ("~", "delimiter"),
        (",", "delimiter"),
        ("\t", "printable"),
    ],
)
def test_invalid_hex_indicator(blank, hex_indicator, message):
    with pytest.raises(HexIndicatorError, match=message):
        blank.text((0, 0), "x", hex_indicator=hex_indicator)


def test_hex_indicator_error_is_build_error(blank):
    with pytest.raises(ZplBuildError):
        blank.barcode((0, 0), Barcode.CODE128, "x", hex_indicator="a")


@pytest.mark.parametrize(
    "options, expected",
    [
        ({}, "^BY2,3,100^BCN,100,Y,N,N"),
        ({"code128_mode": Code128Mode.UCC_CASE}, "^BY2,3,100^BCN,100,Y,Y,N,U"),
        ({"code128_mode": Code128Mode.AUTOMATIC}, "^BY2,3,100^BCN,100,Y,N,N,A"),
        (
            {"height": 50, "line": False, "check_digit": True},
            "^BY2,3,50^BCN,50,N,N,Y",
        ),
        ({"module": 3, "ratio": 2, "rotate": Orientation.ROTATED_270}, "^BY3,2,100^BCB,100,Y,N,N"),
    ],
)
def test_code128(blank, options, expected):
    label = blank.barcode((10, 20), Barcode.CODE128, "12345", **options)
    assert body(label) == f"^FO10,20{expected}^FD12345^FS"


@pytest.mark.parametrize(
    "symbology, options, expected",
    [
        (Barcode.CODE39, {"height": 50}, "^BY2,3,50^B3N,50,Y,N,N"),
        (Barcode.EAN13, {}, "^BY2,3,100^BEN,100,Y,N"),
        (Barcode.UPCA, {"check_digit": True}, "^BY2,3,100^B8N,100,Y,N,Y"),
        (Barcode.ITF, {"line_above": True}, "^BY2,3,100^BIN,100,Y,Y"),
        (Barcode.PDF417, {}, "^BY2,3,100^B7N,100,0,3,3,N"),
        (
            Barcode.PDF417,
            {
                "pdf417_security_level": 9,
                "pdf417_columns": 0,
                "pdf417_rows": 100,
                "pdf417_truncate": True,
            },
            "^BY2,3,100^B7N,100,8,1,90,Y",
        ),
        (Barcode.QR_CODE, {}, "^BY2,3,100^BQN,2,2,Q,7"),
        (Barcode.DATA_MATRIX, {"data_matrix_quality": 0}, "^BY2,3,100^BXN,2,1"),
        ("Code39", {}, "^BY2,3,100^B3N,100,Y,N,N"),
    ],
)
def test_barcode(blank, symbology, options, expected):
    label = blank.barcode((0, 0), symbology, "123", **options)
    assert body(label) == f"^FO0,0{expected}^FD123^FS"


def test_unknown_barcode(blank):
    with pytest.raises(ValueError):
        blank.barcode((0, 0), "Code93", "123")


def test_box(blank):
    assert body(blank.box((0, 0), (100, 50))) == "^FO0,0^GB100,50,1,B,0^FS"


def test_box_options(blank):
    label = blank.box(
        (0, 0), (100, 50), border=0, fill=Fill.WHITE, corner_radius=10, reverse=True
    )
    assert body(label) == "^FO0,0^FR^GB100,50,1,W,8^FS"


def test_circle(blank):
    assert body(blank.circle((5, 5), 50, thickness=3)) == "^FO5,5^GC50,3,B^FS"


def test_ellipse(blank):
    assert body(blank.ellipse((1, 2), (30, 40))) == "^FO1,2^GE30,40,1,B^FS"


def test_diagonal_line(blank):
    label = blank.diagonal_line(
        (0, 0), (100, 100), thickness=2, orientation=DiagonalOrientation.LEFT
    )
    assert body(label) == "^FO0,0^GD100,100,2,B,L^FS"


def test_shapes_in_millimeters():
    label = Label.create(width=100, height=100, units=Units.MILLIMETER, dpi=203)
    zpl = label.box((1, 1), (10, 10), border=3).to_zpl()
    assert "^FO8,8^GB80,80,3,B,0^FS" in zpl


def test_caption(blank):
    assert body(blank.caption((10, 10), "Cap")) == "^FO10,10^AAN,24,24^FDCap^FS"


def test_caption_wrapped(blank):
    label = blank.caption((10, 10), "Cap", size=30, wrap_width=300)
    assert body(label) == "^FO10,10^AAN,30,30^FB300,10,0,L,0^FDCap^FS"


def test_qr(blank):
    assert body(blank.qr((10, 10), "hello")) == "^FO10,10^BY3,3,100^BQN,2,3,Q,7^FDhello^FS"


def test_qr_options(blank):
    label = blank.qr((0, 0), "x", magnification=5, error_correction="H", mask=3, model=1)
    assert body(label) == "^FO0,0^BY5,3,100^BQN,1,5,H,3^FDx^FS"


def test_qr_module_is_deprecated(blank):
    with pytest.warns(DeprecationWarning, match="magnification"):
        label = blank.qr((0, 0), "x", module=4)
    assert "^BQN,2,4,Q,7" in body(label)


def test_qr_rotate_is_deprecated(blank):
    with pytest.warns(DeprecationWarning, match="rotating"):
        blank.qr((0, 0), "x", rotate=Orientation.ROTATED_90)


def test_gs1_data():
    data = gs1_data({"01": "09506000134352", "10": "ABC", "17": "250101"})
    assert data == "(01)09506000134352(10)ABC\x1d(17)250101"


def test_gs1_data_no_separator_after_last():
    assert gs1_data({"01": "09506000134352", "21": "X"}) == "(01)09506000134352(21)X"


def test_gs1_128(blank):
    label = blank.gs1_128((0, 0), {"01": "09506000134352", "10": "A1", "17": "250101"})
    assert body(label) == (
        "^FO0,0^BY2,3,100^BCN,100,Y,N,N^FD(01)09506000134352(10)A1\x1d(17)250101^FS"
    )


def test_address_block(blank):
    label = blank.address_block((10, 10), ["A", "", "C"])
    assert body(label) == "^FO10,10^AAN,24,24^FDA^FS^FO10,58^AAN,24,24^FDC^FS"


def test_comment(blank):
    assert body(blank.comment("hello")) == "^FX hello"
    assert blank.comment("hello").tokens[-2] == Command("^", "FX", " hello")


def test_with_metadata(blank):
    label = blank.with_metadata({"order": 1234, "user": "x"})
    assert body(label) == "^FX order: 1234^FX user: x"


@pytest.mark.parametrize(
    "args, expected",
    [
        ((28,), "^CI28"),
        ((40,), "^CI36"),
        ((0, [1, 300, 2, 3]), "^CI0,1,255,2,3"),
        ((13, []), "^CI13"),
    ],
)
def test_set_character_set(blank, args, expected):
    assert body(blank.set_character_set(*args)) == expected


def test_set_character_set_requires_pairs(blank):
    with pytest.raises(ZplBuildError, match="pairs"):
        blank.set_character_set(0, [1, 2, 3])


def test_set_default_font(blank):
    label = blank.set_default_font()
    assert body(label) == "^CF0,28,28"
    assert label.defaults.font_family == FontFamily.ZERO


def test_default_font_is_used_by_text(blank):
    label = blank.set_default_font(FontFamily.B, 20).text((0, 0), "x")
    assert body(label) == "^CFB,20,20^FO0,0^ABN,20,20^FDx^FS"


def test_explicit_font_overrides_default(blank):
    label = blank.set_default_font(FontFamily.B, 20).text((0, 0), "x", font_height=10)
    assert "^ABN,10,20" in body(label)


def test_set_barcode_defaults(blank):
    label = blank.set_barcode_defaults(3, 2, 80).barcode((0, 0), Barcode.CODE128, "1")
    assert body(label) == "^BY3,2,80^FO0,0^BY3,2,80^BCN,80,Y,N,N^FD1^FS"


def test_set_barcode_defaults_without_height(blank):
    label = blank.set_barcode_defaults(height=0)
    assert body(label) == "^BY2,3"
    assert label.defaults == FieldDefaults()


def test_rfid(blank):
    assert body(blank.rfid("DEADBEEF")) == "^RFW,H^FDDEADBEEF^FS"


def test_epc(blank):
    label = blank.epc("3014257BF7194E4000001A85", position=5, password="0000abcd")
    assert body(label) == "^RS,5^RZ0000ABCD,A,U^RFW,H^FD3014257BF7194E4000001A85^FS"


def test_rfid_user_bank(blank):
    label = blank.rfid("ABCDEF", bank=RFIDBank.USER, offset=4)
    assert body(label) == "^RFW,U,4,3^FDABCDEF^FS"


def test_rfid_host_buffer_is_read_only(blank):
    with pytest.raises(RFIDError, match="HostBuffer is read-only"):
        blank.rfid("DEADBEEF", bank=RFIDBank.HOST_BUFFER)


def test_rfid_read(blank):
    assert body(blank.rfid_read()) == "^RFR,E,0,8^FD^FS"
    assert body(blank.rfid_read(RFIDBank.HOST_BUFFER)) == "^RFR,H^FD^FS"


def test_parse_and_extend():
    label = Label.parse("^XA\n^FO1,1^FDa^FS\n^XZ\n").comment("x")
    assert label.to_zpl() == "^XA\n^FO1,1^FDa^FS\n^FX x^XZ\n"


def test_parse_keeps_input():
    zpl = "^XA ^FO1,1^A0N,28,28^FDx^FS ~TA000 ^XZ"
    assert Label.parse(zpl).to_zpl() == zpl
    assert Label.from_zpl(zpl).to_zpl() == zpl


def test_parse_bytes():
    zpl = b"^XA^FO0,0^GFA,1,1,1,\xff^FS^XZ"
    assert Label.parse(zpl).to_bytes() == zpl


def test_parse_with_context():
    label = Label.parse("^XA^XZ", dpi=300, units=Units.MILLIMETER)
    assert label.text((10, 15), "x").to_zpl().startswith("^XA^FO118,177")


def test_labels_are_immutable(blank):
    before = blank.to_zpl()
    blank.text((0, 0), "x")
    blank.set_default_font(FontFamily.B)
    assert blank.to_zpl() == before
    assert blank.defaults == FieldDefaults()


def test_context(blank):
    assert blank.context.dpi == 203
    assert blank.context.units == Units.DOT


def test_str(blank):
    assert str(blank) == blank.to_zpl()
