"""
Pytest configuration and shared fixtures for mbitselect tests

Provides fake micro:bit volumes and a mocked `mount` pipeline so the
detection code can be exercised without a board plugged in.
"""

import logging
import pytest
from unittest.mock import Mock, patch


# DETAILS.TXT as written by a micro:bit v2 running DAPLink 0255
DETAILS_TXT_V2 = """\
# DAPLink Firmware - see https://daplink.io
Unique ID: 9904360258994e45002b0010000000480000000097969901
HIC ID: 97969901
Auto Reset: 1
Automation allowed: 0
Overflow detection: 0
Daplink Mode: Interface
Interface Version: 0258
Bootloader Version: 0255
Git SHA: 9a1fb0bec9dd8b6f3a8bba0dcf83a5dd2b4b6b83
Local Mods: 0
USB Interfaces: MSD, CDC, HID, WebUSB
Bootloader CRC: 0x828c6069
Interface CRC: 0x5b5cc0f1
Remount count: 0
URL: https://microbit.org/device/?id=9904&v=0258
"""


def make_details(bootloader: str, interface: str, newline: str = "\n") -> str:
    """Minimal DETAILS.TXT body with the two version lines"""
    lines = [
        "# DAPLink Firmware - see https://daplink.io",
        f"Interface Version: {interface}",
        f"Bootloader Version: {bootloader}",
        "Remount count: 0",
    ]
    return newline.join(lines) + newline


@pytest.fixture
def microbit_volume(tmp_path):
    """
    Factory creating a fake mounted micro:bit volume

    Returns a callable taking the DETAILS.TXT body as str or bytes (or
    None to omit the file) and an optional volume name; it returns the mount path as str.
    """

    def _make(details=DETAILS_TXT_V2, name="MICROBIT"):
        volume = tmp_path / name
        volume.mkdir()
        if details is not None:
            if isinstance(details, str):
                details = details.encode("ascii")
            (volume / "DETAILS.TXT").write_bytes(details)
        return str(volume)

    return _make


@pytest.fixture
def mock_mount_pipeline():
    """
    Mock subprocess.run for the Linux `mount | sort | grep | awk` pipeline

    Returns an empty (no board) result by default; set `.return_value.stdout`
    to simulate a mounted board.
    """
    with patch("mbitselect.providers.board.volume_locator.subprocess.run") as mock:
        mock_result = Mock()
        mock_result.returncode = 0
        mock_result.stdout = ""
        mock_result.stderr = None
        mock.return_value = mock_result
        yield mock


@pytest.fixture(autouse=True)
def reset_mbitselect_logger():
    """Drop handlers bound to a previous test's captured stderr"""
    yield
    logger = logging.getLogger("mbitselect")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
