"""
Printer configuration: media handling, speeds, darkness and persistence
of settings. PrinterConfigOptions holds the settings,
build_printer_config_tokens turns them into tokens and PrinterConfig is a
fluent builder for PrinterConfigOptions.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from _fluentzpl.document import MeasurementContext, wrap_if_needed
from _fluentzpl.emitter import emit
from _fluentzpl.enums import (
    MediaTracking,
    Mirror,
    Orientation,
    PrinterConfiguration,
    PrinterMode,
)
from _fluentzpl.tokenizer import tokenize
from _fluentzpl.units import DEFAULT_DPI, Units, clamp

DEFAULT_PRINT_SPEED = 2
DEFAULT_SLEW_SPEED = 6
DEFAULT_BACKFEED_SPEED = 2

SPEED_RANGE = (1, 14)
DARKNESS_RANGE = (-30, 30)
TEAR_OFF_RANGE = (-120, 120)


@dataclass(frozen=True)
class PrinterConfigOptions:
    """
    Settings of a printer configuration block. Settings which are None
    are left as they are on the printer.

    :param print_width: Print width in the units of the context.
    :param tear_off: Tear off position adjustment in the units of the context.
    :param label_home: (x, y) label home in the units of the context.
    :param additional_commands: Commands added verbatim before ^JU.
    :param configuration: Whether to save or reload the configuration (^JU).
    """

    mode: Optional[PrinterMode] = None
    media_tracking: Optional[MediaTracking] = None
    mirror: Optional[Mirror] = None
    orientation: Optional[Orientation] = None
    print_width: Optional[float] = None
    print_speed: Optional[int] = None
    slew_speed: Optional[int] = None
    backfeed_speed: Optional[int] = None
    darkness: Optional[int] = None
    tear_off: Optional[float] = None
    label_home: Optional[Tuple[float, float]] = None
    additional_commands: Tuple[str, ...] = ()
    configuration: Optional[PrinterConfiguration] = None


def speed_parameters(options):
    """
    The parameters of ^PR: speeds up to the last one given, with
    defaults filled in for those before it, ie. "4" when only the
    print speed is given and "2,6,3" when only the backfeed speed is.
    """
    speeds = [options.print_speed, options.slew_speed, options.backfeed_speed]
    defaults = [DEFAULT_PRINT_SPEED, DEFAULT_SLEW_SPEED, DEFAULT_BACKFEED_SPEED]
    while speeds and speeds[-1] is None:
        speeds.pop()
    return ",".join(
        str(clamp(default if speed is None else speed, *SPEED_RANGE))
        for speed, default in zip(speeds, defaults)
    )


def clean_commands(commands):
    """
    Strip commands of surrounding whitespace and drop empty ones.
    """
    return [command.strip() for command in commands if command and command.strip()]


def build_printer_config_tokens(context, options):
    """
    Build tokens for the printer configuration in the order
    ^MM ^MN ^PM ^PO ^PW ^PR ^MD ~TA ^LH, additional commands and ^JU.

    :param context: The MeasurementContext of the measurements in options.
    :param options: The PrinterConfigOptions.
    :returns: List of tokens, empty when no setting is given.
    """
    commands = []
    if options.mode is not None:
        commands.append(f"^MM{PrinterMode(options.mode).value}")
    if options.media_tracking is not None:
        commands.append(f"^MN{MediaTracking(options.media_tracking).value}")
    if options.mirror is not None:
        commands.append(f"^PM{Mirror(options.mirror).value}")
    if options.orientation is not None:
        commands.append(f"^PO{Orientation(options.orientation).value}")
    if options.print_width is not None:
        commands.append(f"^PW{context.to_dots(options.print_width)}")

    speeds = speed_parameters(options)
    if speeds:
        commands.append(f"^PR{speeds}")

    if options.darkness is not None:
        commands.append(f"^MD{clamp(options.darkness, *DARKNESS_RANGE)}")
    if options.tear_off is not None:
        commands.append(
            f"~TA{clamp(context.to_dots(options.tear_off), *TEAR_OFF_RANGE)}"
        )
    if options.label_home is not None:
        x, y = options.label_home
        commands.append(f"^LH{context.to_dots(x)},{context.to_dots(y)}")

    commands.extend(clean_commands(options.additional_commands))

    if options.configuration is not None:
        commands.append(f"^JU{PrinterConfiguration(options.configuration).value}")

    if not commands:
        return []
    return tokenize("".join(commands))


@dataclass(frozen=True)
class PrinterConfig:
    """
    Fluent, immutable builder for printer configuration:

    >>> PrinterConfig.create().print_speed(4).darkness(10).save().to_zpl()
    '^XA^PR4^MD10^JUS^XZ'
    """

    context: MeasurementContext = field(default_factory=MeasurementContext)
    options: PrinterConfigOptions = field(default_factory=PrinterConfigOptions)

    @classmethod
    def create(cls, dpi=DEFAULT_DPI, units=Units.DOT):
        return cls(MeasurementContext(dpi, units))

    def with_options(self, **changes):
        return replace(self, options=replace(self.options, **changes))

    def mode(self, mode):
        return self.with_options(mode=PrinterMode(mode))

    def media_tracking(self, media_tracking):
        return self.with_options(media_tracking=MediaTracking(media_tracking))

    def mirror(self, mirror):
        return self.with_options(mirror=Mirror(mirror))

    def orientation(self, orientation):
        return self.with_options(orientation=Orientation(orientation))

    def print_width(self, print_width):
        return self.with_options(print_width=print_width)

    def print_speed(self, print_speed):
        return self.with_options(print_speed=print_speed)

    def slew_speed(self, slew_speed):
        return self.with_options(slew_speed=slew_speed)

    def backfeed_speed(self, backfeed_speed):
        return self.with_options(backfeed_speed=backfeed_speed)

    def darkness(self, darkness):
        return self.with_options(darkness=darkness)

    def tear_off(self, tear_off):
        return self.with_options(tear_off=tear_off)

    def label_home(self, x, y):
        return self.with_options(label_home=(x, y))

    def label_home_origin(self):
        return self.label_home(0, 0)

    def additional_commands(self, commands):
        """
        Add commands to be sent verbatim. Commands are stripped, empty
        ones are ignored and commands already added are not repeated.

        :returns: self when there is nothing to add.
        """
        cleaned = clean_commands(commands)
        if not cleaned:
            return self
        merged = list(self.options.additional_commands)
        for command in cleaned:
            if command not in merged:
                merged.append(command)
        return self.with_options(additional_commands=tuple(merged))

    def raw(self, command):
        return self.additional_commands([command])

    def configuration(self, configuration):
        return self.with_options(configuration=PrinterConfiguration(configuration))

    def save(self):
        return self.configuration(PrinterConfiguration.SAVE)

    def reload_saved(self):
        return self.configuration(PrinterConfiguration.RELOAD_SAVED)

    def reload_factory(self):
        return self.configuration(PrinterConfiguration.RELOAD_FACTORY)

    def reload_factory_network(self):
        return self.configuration(PrinterConfiguration.RELOAD_FACTORY_NETWORK)

    def build(self):
        """
        :returns: The PrinterConfigOptions, ie. for ZplProgram.printer_config.
        """
        return self.options

    def tokens(self):
        """
        :returns: The configuration tokens enclosed in ^XA ... ^XZ unless
            they already are, or an empty tuple when nothing is configured.
        """
        return wrap_if_needed(build_printer_config_tokens(self.context, self.options))

    def to_zpl(self):
        return emit(self.tokens())
