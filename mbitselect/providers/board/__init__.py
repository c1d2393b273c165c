"""
Board detection

Finds a mounted micro:bit, reads its firmware details and maps them to
the matching build target.
"""

from .board_definitions import FIRMWARE_VERSIONS, FirmwareDetails, MicrobitVersion
from .details_parser import parse_details_file
from .errors import (
    DetectionIOError,
    InvalidDetailsError,
    MicrobitSelectError,
    NotDetectedError,
    UnknownFirmwareError,
)
from .version_resolver import resolve_connected_microbit_version
from .volume_locator import locate_microbit

__all__ = [
    'FIRMWARE_VERSIONS',
    'FirmwareDetails',
    'MicrobitVersion',
    'parse_details_file',
    'locate_microbit',
    'resolve_connected_microbit_version',

    # Errors
    'MicrobitSelectError',
    'NotDetectedError',
    'InvalidDetailsError',
    'UnknownFirmwareError',
    'DetectionIOError',
]
