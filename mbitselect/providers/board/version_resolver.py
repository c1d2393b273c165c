"""
Version Resolver: locate the board, read its firmware details, map them to a revision
"""

import logging
from typing import Optional

from .board_definitions import FIRMWARE_VERSIONS, MicrobitVersion
from .details_parser import parse_details_file
from .errors import DetectionIOError, UnknownFirmwareError
from .volume_locator import locate_microbit

logger = logging.getLogger(__name__)


def resolve_connected_microbit_version(system: Optional[str] = None) -> MicrobitVersion:
    """
    Detect the revision of the first connected micro:bit.

    NotDetectedError and InvalidDetailsError propagate unchanged; generic I/O
    failures are re-raised as DetectionIOError with the failing stage prefixed.

    Raises:
        NotDetectedError: no board mounted
        InvalidDetailsError: DETAILS.TXT is incomplete
        UnknownFirmwareError: firmware pair is not in FIRMWARE_VERSIONS
        DetectionIOError: any other I/O failure
    """
    try:
        path = locate_microbit(system)
    except DetectionIOError as e:
        raise DetectionIOError(f"locating microbit: {e}") from e

    logger.info(f"micro:bit mounted at {path}")

    try:
        details = parse_details_file(path)
    except DetectionIOError as e:
        raise DetectionIOError(f"reading firmware details: {e}") from e

    logger.info(f"Firmware details: {details}")

    version = FIRMWARE_VERSIONS.get(details)
    if version is None:
        raise UnknownFirmwareError(details)

    assert isinstance(version, MicrobitVersion), f"firmware table holds invalid revision {version!r}"
    return version
