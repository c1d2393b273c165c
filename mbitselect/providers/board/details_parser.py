"""
Details Parser - reads the firmware versions from a micro:bit's DETAILS.TXT
"""

import os
import logging

from .board_definitions import FirmwareDetails
from .errors import DetectionIOError, InvalidDetailsError

logger = logging.getLogger(__name__)

DETAILS_FILE = "DETAILS.TXT"
HEADER_BOOTLOADER_VERSION = "Bootloader Version"
HEADER_INTERFACE_VERSION = "Interface Version"
FIELD_SEPARATOR = ": "


def _field_value(line: str) -> str:
    return line.split(FIELD_SEPARATOR)[-1]


def parse_details_file(mount_path: str) -> FirmwareDetails:
    """
    Extract the bootloader and interface versions from <mount_path>/DETAILS.TXT.

    Lines look like ``Bootloader Version: 0234``. When a header appears more
    than once the last occurrence is kept. Field contents are not validated
    here; unknown values are caught by the firmware table lookup.

    Raises:
        DetectionIOError: the file could not be opened or read
        InvalidDetailsError: either version line is missing or empty
    """
    details_path = os.path.join(mount_path, DETAILS_FILE)
    bootloader = ""
    interface = ""

    try:
        # Split on \n only; stray non-UTF-8 bytes on unrelated lines are tolerated
        with open(details_path, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            for raw_line in f:
                line = raw_line.strip("\r\n")

                # Last match wins; kept for parity with earlier releases,
                # though nothing is known to rely on it.
                if line.startswith(HEADER_BOOTLOADER_VERSION):
                    bootloader = _field_value(line)
                if line.startswith(HEADER_INTERFACE_VERSION):
                    interface = _field_value(line)
    except OSError as e:
        raise DetectionIOError(f"reading micro:bit details file {details_path}: {e}") from e

    if not bootloader or not interface:
        logger.debug(f"Incomplete details file {details_path}: bootloader={bootloader!r} interface={interface!r}")
        raise InvalidDetailsError()

    return FirmwareDetails(bootloader=bootloader, interface=interface)
