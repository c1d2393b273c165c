"""
Volume Locator

Finds the mount path of the first connected micro:bit. One strategy per
supported operating system, picked at runtime from platform.system().

If several boards are connected only the first one is used, which matches
the selection made by `tinygo flash`.
"""

import os
import logging
import platform
import subprocess
from typing import Callable, Dict, Optional

from .errors import DetectionIOError, NotDetectedError

logger = logging.getLogger(__name__)

# Case-sensitive marker contained in every micro:bit volume name
VOLUME_MARKER = "MICROBIT"

DARWIN_VOLUMES_DIR = "/Volumes"

# List mounted drives, sort them in mount order, keep the first micro:bit
# drive and print its mount point (3rd space-delimited column).
LINUX_MOUNT_PIPELINE = f"mount | sort | grep -m 1 \"{VOLUME_MARKER}\" | awk '{{print $3}}'"


def locate_darwin() -> str:
    """Scan /Volumes in name order for the first micro:bit volume"""
    try:
        mounted = sorted(os.listdir(DARWIN_VOLUMES_DIR))
    except OSError as e:
        raise DetectionIOError(f"failed to list mounted volumes: {e}") from e

    for name in mounted:
        if VOLUME_MARKER in name:
            path = os.path.join(DARWIN_VOLUMES_DIR, name)
            logger.debug(f"Found micro:bit volume {name} in {DARWIN_VOLUMES_DIR}")
            return path

    raise NotDetectedError()


def locate_linux() -> str:
    """Ask `mount` for the first micro:bit mount point"""
    try:
        result = subprocess.run(
            ["sh", "-c", LINUX_MOUNT_PIPELINE],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise DetectionIOError(f"getting mounted devices: {e}") from e

    # grep finding nothing still leaves the pipeline successful with empty output
    lines = result.stdout.splitlines()
    path = lines[0].strip() if lines else ""
    if not path:
        raise NotDetectedError()

    logger.debug(f"Found micro:bit mount point {path}")
    return path


LOCATORS: Dict[str, Callable[[], str]] = {
    "Darwin": locate_darwin,
    "Linux": locate_linux,
}


def locate_microbit(system: Optional[str] = None) -> str:
    """
    Return the mount path of the first connected micro:bit.

    Args:
        system: Platform name as reported by platform.system().
                Defaults to the running platform.

    Raises:
        NotDetectedError: no mounted volume carries the marker
        DetectionIOError: volumes could not be enumerated, or the platform is unsupported
    """
    system = system or platform.system()
    locator = LOCATORS.get(system)
    if locator is None:
        raise DetectionIOError(f"unsupported platform: {system}")

    logger.info(f"Looking for a mounted micro:bit on {system}")
    return locator()
