"""Major service class bitmask."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from bt_class_of_device.constants import (
    AUDIO_BIT,
    CAPTURING_BIT,
    INFORMATION_BIT,
    LE_AUDIO_BIT,
    LIMITED_DISCOVERABLE_MODE_BIT,
    NETWORKING_BIT,
    OBJECT_TRANSFER_BIT,
    POSITIONING_BIT,
    RENDERING_BIT,
    TELEPHONY_BIT,
)

# Field name -> bit position, in bit order.
SERVICE_CLASS_BITS: dict[str, int] = {
    "limited_discoverable_mode": LIMITED_DISCOVERABLE_MODE_BIT,
    "le_audio": LE_AUDIO_BIT,
    "positioning": POSITIONING_BIT,
    "networking": NETWORKING_BIT,
    "rendering": RENDERING_BIT,
    "capturing": CAPTURING_BIT,
    "object_transfer": OBJECT_TRANSFER_BIT,
    "audio": AUDIO_BIT,
    "telephony": TELEPHONY_BIT,
    "information": INFORMATION_BIT,
}


class MajorServiceClass(BaseModel):
    """Capability flags for bits 13..23 of a class of device.

    Bit layout:
        13: limited discoverable mode
        14: LE audio
        15: reserved, never set
        16..23: positioning, networking, rendering, capturing,
                object transfer, audio, telephony, information
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    limited_discoverable_mode: bool = False
    le_audio: bool = False
    positioning: bool = False
    networking: bool = False
    rendering: bool = False
    capturing: bool = False
    object_transfer: bool = False
    audio: bool = False
    telephony: bool = False
    information: bool = False

    @classmethod
    def empty(cls) -> MajorServiceClass:
        """A service class without any capabilities."""
        return cls()

    def major_service_class(self) -> int:
        value = 0
        for name, bit in SERVICE_CLASS_BITS.items():
            if getattr(self, name):
                value |= 1 << bit
        return value
