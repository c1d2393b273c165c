"""
Board definitions: micro:bit revisions, firmware details and the known firmware table
"""

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class MicrobitVersion(Enum):
    """Hardware revision, valued by its build-target identifier"""

    V1 = "microbit"
    V2 = "microbit-v2"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "MicrobitVersion":
        """First known revision, used when no fallback is configured"""
        return cls.V1

    @classmethod
    def is_valid(cls, identifier: str) -> bool:
        """Closed-set membership check for an external identifier"""
        return identifier in cls.identifiers()

    @classmethod
    def identifiers(cls) -> tuple:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class FirmwareDetails:
    """Bootloader/interface version pair reported in DETAILS.TXT"""

    bootloader: str  # e.g., "0234"
    interface: str  # e.g., "0241"

    def __str__(self) -> str:
        return f'(bootloader: "{self.bootloader}"; interface: "{self.interface}")'


# Source: https://tech.microbit.org/software/daplink-interface/#daplink-software
FIRMWARE_VERSIONS: Mapping[FirmwareDetails, MicrobitVersion] = MappingProxyType(
    {
        FirmwareDetails("0234", "0234"): MicrobitVersion.V1,  # 1.3
        FirmwareDetails("0234", "0241"): MicrobitVersion.V1,  # 1.3b
        FirmwareDetails("0243", "0249"): MicrobitVersion.V1,  # 1.5
        FirmwareDetails("0255", "0255"): MicrobitVersion.V2,  # 2.00
        FirmwareDetails("0256", "0256"): MicrobitVersion.V2,  # 2.20
        FirmwareDetails("0257", "0257"): MicrobitVersion.V2,  # 2.21
        # 2.00 board running a newer interface firmware
        FirmwareDetails("0255", "0258"): MicrobitVersion.V2,
    }
)
