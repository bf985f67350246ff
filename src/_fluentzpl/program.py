"""
A ZplProgram is a sequence of zpl sent to a printer in one go: printer
configuration, any number of labels and commands outside of labels.
Unlike Label, content is always appended at the end.
"""

from dataclasses import dataclass, field, replace

from _fluentzpl.document import Document, MeasurementContext, wrap_if_needed
from _fluentzpl.exceptions import ZplBuildError
from _fluentzpl.label import Label
from _fluentzpl.printer_config import PrinterConfigOptions, build_printer_config_tokens
from _fluentzpl.rfid import build_rfid_read_tokens, build_rfid_write_tokens
from _fluentzpl.tokenizer import Command, Mark, tokenize
from _fluentzpl.units import DEFAULT_DPI, Units


@dataclass(frozen=True)
class ZplProgram:
    document: Document = field(default_factory=Document)

    @classmethod
    def create(cls, dpi=DEFAULT_DPI, units=Units.DOT):
        return cls(Document((), MeasurementContext(dpi, units)))

    @property
    def tokens(self):
        return self.document.tokens

    @property
    def context(self):
        return self.document.context

    def append(self, tokens):
        """
        :returns: New program with tokens at the end, or self when
            tokens is empty.
        """
        tokens = tuple(tokens)
        if not tokens:
            return self
        return replace(self, document=self.document.append(tokens))

    def raw(self, zpl, encoding="utf-8"):
        """
        Append zpl as is.

        :param zpl: str or bytes.
        """
        return self.append(tokenize(zpl, encoding))

    def comment(self, text):
        return self.append([Command(Mark.CARET, "FX", f" {text}")])

    def label(self, label_or_factory, **label_options):
        """
        Append a label.

        :param label_or_factory: A Label, or a callable which is given a
            new Label created with label_options (see Label.create) and
            returns the label to append, ie.

            program.label(lambda l: l.text((10, 10), "Hi"), width=400, height=200)

        :raises ZplBuildError: When a factory is given without label options.
        """
        if isinstance(label_or_factory, Label):
            label = label_or_factory
        else:
            if not label_options:
                raise ZplBuildError(
                    "Label options are required when giving a label factory"
                )
            label_options.setdefault("dpi", self.context.dpi)
            label_options.setdefault("units", self.context.units)
            label = label_or_factory(Label.create(**label_options))
        return self.append(label.tokens)

    def printer_config(self, options=None, **settings):
        """
        Append a printer configuration block enclosed in ^XA ... ^XZ.

        :param options: PrinterConfigOptions, ie. from PrinterConfig.build().
        :param settings: Fields of PrinterConfigOptions, used when options
            is not given.
        """
        if options is None:
            options = PrinterConfigOptions(**settings)
        return self.append(
            wrap_if_needed(build_printer_config_tokens(self.context, options))
        )

    def rfid(self, epc, **rfid_options):
        """
        Append an RFID write outside of a label, see build_rfid_write_tokens.
        """
        return self.append(build_rfid_write_tokens(epc, **rfid_options))

    def rfid_read(self, **rfid_options):
        return self.append(build_rfid_read_tokens(**rfid_options))

    def to_zpl(self, encoding="utf-8"):
        return self.document.to_zpl(encoding)

    def to_bytes(self, encoding="utf-8"):
        return self.document.to_bytes(encoding)

    def __str__(self):
        return self.to_zpl()
