class ZplBuildError(Exception):
    """
    Raised when a zpl fragment cannot be built from the given
    arguments. Nothing is added to the label when this is raised.
    """

    pass


class RFIDError(ZplBuildError):
    """
    Raised for RFID operations that are not possible, such as
    writing to a read-only memory bank.
    """

    pass


class HexIndicatorError(ZplBuildError):
    """
    Raised when a ^FH hex indicator is not a single printable
    ascii character usable inside field data.
    """

    pass
