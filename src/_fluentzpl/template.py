"""
Labels from zpl templates. Placeholders written as $name or ${name} are
substituted with the given values before the zpl is parsed, ie.

>>> tracking = "1234567890"
>>> label("^XA^FO50,100^BCN,80,Y,N,N^FD$tracking^FS^XZ", tracking=tracking).to_zpl()
'^XA^FO50,100^BCN,80,Y,N,N^FD1234567890^FS^XZ'

Whitespace in the template, including indentation, is kept as is.
Placeholders without a value are left in place. Write $$ for a
literal dollar sign.
"""

from string import Template

from _fluentzpl.label import Label
from _fluentzpl.units import DEFAULT_DPI, Units


def substitute(zpl, values):
    return Template(zpl).safe_substitute({key: str(value) for key, value in values.items()})


def label(zpl, dpi=DEFAULT_DPI, units=Units.DOT, **values):
    """
    Parse a zpl template into a Label.

    :param zpl: The template.
    :param dpi: The dpi of the label.
    :param units: The units measurements of further builder calls are in.
    :param values: Values for the placeholders.
    """
    return Label.parse(substitute(zpl, values), dpi, units)


def with_options(dpi=DEFAULT_DPI, units=Units.DOT):
    """
    :returns: A function like label with dpi and units fixed, ie.

        label.with_options(dpi=300, units=Units.MILLIMETER)(template, name="x")
    """

    def label_with_options(zpl, **values):
        return label(zpl, dpi, units, **values)

    return label_with_options


label.with_options = with_options
