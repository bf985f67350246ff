from _fluentzpl.label import Label
from _fluentzpl.template import label
from _fluentzpl.units import Units


def test_template():
    tracking = "1234567890"
    result = label("^XA^FO50,100^BCN,80,Y,N,N^FD$tracking^FS^XZ", tracking=tracking)
    assert isinstance(result, Label)
    assert result.to_zpl() == "^XA^FO50,100^BCN,80,Y,N,N^FD1234567890^FS^XZ"


def test_whitespace_is_preserved():
    template = """
  ^XA
  ^FO50,50^A0N,28,28^FD${title}^FS
  ^XZ
"""
    expected = """
  ^XA
  ^FO50,50^A0N,28,28^FDShipping Label^FS
  ^XZ
"""
    assert label(template, title="Shipping Label").to_zpl() == expected


def test_numbers_are_substituted():
    assert label("^XA^FO$x,$y^XZ", x=10, y=20.5).to_zpl() == "^XA^FO10,20.5^XZ"


def test_missing_values_are_kept():
    assert label("^XA^FD$missing^FS^XZ").to_zpl() == "^XA^FD$missing^FS^XZ"


def test_escaped_dollar():
    assert label("^XA^FD$$5^FS^XZ").to_zpl() == "^XA^FD$5^FS^XZ"


def test_continue_building():
    result = label("^XA\n^XZ").text((50, 200), "Additional")
    assert result.to_zpl() == "^XA\n^FO50,200^AAN,28,28^FDAdditional^FS^XZ"


def test_default_context():
    assert label("^XA^XZ").context.dpi == 203
    assert label("^XA^XZ").context.units == Units.DOT


def test_with_options():
    result = label.with_options(dpi=300, units=Units.MILLIMETER)("^XA^FD$name^FS^XZ", name="x")
    assert result.context.dpi == 300
    assert result.context.units == Units.MILLIMETER
    assert result.text((10, 15), "y").to_zpl() == "^XA^FDx^FS^FO118,177^AAN,28,28^FDy^FS^XZ"
