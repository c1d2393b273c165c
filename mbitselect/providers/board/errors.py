"""
Detection errors

Callers classify failures by exception type, never by message text.
Only NotDetectedError is recoverable.
"""

from .board_definitions import FirmwareDetails


class MicrobitSelectError(Exception):
    """Base class for every detection failure"""


class NotDetectedError(MicrobitSelectError):
    """No mounted volume looks like a micro:bit"""

    def __init__(self, message: str = "not detected"):
        super().__init__(message)


class InvalidDetailsError(MicrobitSelectError):
    """DETAILS.TXT was read but a version field is missing"""

    def __init__(self, message: str = "invalid details file"):
        super().__init__(message)


class UnknownFirmwareError(MicrobitSelectError):
    """Firmware pair is not in the known firmware table"""

    def __init__(self, details: FirmwareDetails):
        self.details = details
        super().__init__(f"unknown firmware combination: {details}")


class DetectionIOError(MicrobitSelectError):
    """Any other I/O failure while locating or reading the board"""
