"""Device categories, one per major device class family.

Enumerated categories are ``IntEnum`` types whose member values are the
minor device class codes, already positioned in bits 2..7. Record-style
categories are frozen pydantic models that compute their minor code from
their fields.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bt_class_of_device.constants import (
    AUDIO_VIDEO_MAJOR_DEVICE_CLASS,
    COMPUTER_MAJOR_DEVICE_CLASS,
    HEALTH_MAJOR_DEVICE_CLASS,
    IMAGING_CAMERA_BIT,
    IMAGING_DISPLAY_BIT,
    IMAGING_MAJOR_DEVICE_CLASS,
    IMAGING_PRINTER_BIT,
    IMAGING_SCANNER_BIT,
    LAN_NETWORK_ACCESS_POINT_MAJOR_DEVICE_CLASS,
    MISCELLANEOUS_MAJOR_DEVICE_CLASS,
    PERIPHERAL_MAJOR_DEVICE_CLASS,
    PHONE_MAJOR_DEVICE_CLASS,
    TOY_MAJOR_DEVICE_CLASS,
    UNCATEGORIZED_MAJOR_DEVICE_CLASS,
    WEARABLE_MAJOR_DEVICE_CLASS,
)
from bt_class_of_device.types import DeviceClass, UInt32


class _EnumeratedDeviceClass(DeviceClass):
    """Minor device class is the enum member's value."""

    def minor_device_class(self) -> int:
        return int(self)


# ── Miscellaneous ─────────────────────────────────────────────────────


class Miscellaneous(DeviceClass, BaseModel):
    """Miscellaneous device with a caller-supplied minor device class.

    The value is used verbatim. It is not masked to bits 2..7, so a value
    outside that range spills into the neighbouring fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: UInt32 = Field(0, alias="minor_device_class")

    def __init__(self, minor_device_class: int = 0, **data: Any) -> None:
        super().__init__(minor_device_class=minor_device_class, **data)

    @classmethod
    def major_device_class(cls) -> int:
        return MISCELLANEOUS_MAJOR_DEVICE_CLASS

    def minor_device_class(self) -> int:
        return self.value


# ── Computer ──────────────────────────────────────────────────────────


class Computer(_EnumeratedDeviceClass, IntEnum):
    UNCATEGORIZED = 0x00
    DESKTOP_WORKSTATION = 0x04
    SERVER_CLASS_COMPUTER = 0x08
    LAPTOP = 0x0C
    HANDHELD_PC_PDA = 0x10
    PALM_SIZED_PC_PDA = 0x14
    WEARABLE_COMPUTER = 0x18
    TABLET = 0x1C

    @classmethod
    def major_device_class(cls) -> int:
        return COMPUTER_MAJOR_DEVICE_CLASS


# ── Phone ─────────────────────────────────────────────────────────────


class Phone(_EnumeratedDeviceClass, IntEnum):
    UNCATEGORIZED = 0x00
    CELLULAR = 0x04
    CORDLESS = 0x08
    SMARTPHONE = 0x0C
    WIRED_MODEM_OR_VOICE_GATEWAY = 0x10
    COMMON_ISDN_ACCESS = 0x14

    @classmethod
    def major_device_class(cls) -> int:
        return PHONE_MAJOR_DEVICE_CLASS


# ── LAN/Network Access Point ──────────────────────────────────────────


class LanNetworkAccessPoint(_EnumeratedDeviceClass, IntEnum):
    """Load factor of a network access point (bits 5..7)."""

    FULLY_AVAILABLE = 0x00
    UTILIZED_1_TO_17_PERCENT = 0x20
    UTILIZED_17_TO_33_PERCENT = 0x40
    UTILIZED_33_TO_50_PERCENT = 0x60
    UTILIZED_50_TO_67_PERCENT = 0x80
    UTILIZED_67_TO_83_PERCENT = 0xA0
    UTILIZED_83_TO_99_PERCENT = 0xC0
    NO_SERVICE_AVAILABLE = 0xE0

    @classmethod
    def major_device_class(cls) -> int:
        return LAN_NETWORK_ACCESS_POINT_MAJOR_DEVICE_CLASS


# ── Audio/Video ───────────────────────────────────────────────────────


class AudioVideo(_EnumeratedDeviceClass, IntEnum):
    UNCATEGORIZED = 0x00
    WEARABLE_HEADSET_DEVICE = 0x04
    HANDS_FREE_DEVICE = 0x08
    # 0x0C reserved
    MICROPHONE = 0x10
    LOUDSPEAKER = 0x14
    HEADPHONES = 0x18
    PORTABLE_AUDIO = 0x1C
    CAR_AUDIO = 0x20
    SET_TOP_BOX = 0x24
    HIFI_AUDIO_DEVICE = 0x28
    VCR = 0x2C
    VIDEO_CAMERA = 0x30
    CAMCORDER = 0x34
    VIDEO_MONITOR = 0x38
    VIDEO_DISPLAY_AND_LOUDSPEAKER = 0x3C
    VIDEO_CONFERENCING = 0x40
    # 0x44 reserved
    GAMING_TOY = 0x48

    @classmethod
    def major_device_class(cls) -> int:
        return AUDIO_VIDEO_MAJOR_DEVICE_CLASS


# ── Peripheral ────────────────────────────────────────────────────────


class PeripheralUpper(IntEnum):
    """Keyboard/pointing part of a peripheral minor class (bits 6..7)."""

    UNCATEGORIZED = 0x00
    KEYBOARD = 0x40
    POINTING_DEVICE = 0x80
    COMBO_KEYBOARD_POINTING_DEVICE = 0xC0

    def code(self) -> int:
        return int(self)


class PeripheralLower(IntEnum):
    """Device type part of a peripheral minor class (bits 2..5)."""

    UNCATEGORIZED = 0x00
    JOYSTICK = 0x04
    GAMEPAD = 0x08
    REMOTE_CONTROL = 0x0C
    SENSING_DEVICE = 0x10
    DIGITIZER_TABLET = 0x14
    CARD_READER = 0x18
    DIGITAL_PEN = 0x1C
    HANDHELD_SCANNER = 0x20
    HANDHELD_GESTURAL_INPUT_DEVICE = 0x24

    def code(self) -> int:
        return int(self)


class Peripheral(DeviceClass, BaseModel):
    """Peripheral built from an upper and a lower part.

    Any upper part may be combined with any lower part.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    upper: PeripheralUpper = PeripheralUpper.UNCATEGORIZED
    lower: PeripheralLower = PeripheralLower.UNCATEGORIZED

    def __init__(
        self,
        upper: PeripheralUpper = PeripheralUpper.UNCATEGORIZED,
        lower: PeripheralLower = PeripheralLower.UNCATEGORIZED,
        **data: Any,
    ) -> None:
        super().__init__(upper=upper, lower=lower, **data)

    @classmethod
    def major_device_class(cls) -> int:
        return PERIPHERAL_MAJOR_DEVICE_CLASS

    def minor_device_class(self) -> int:
        return self.upper.code() | self.lower.code()


# ── Imaging ───────────────────────────────────────────────────────────


class Imaging(DeviceClass, BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    display: bool = False
    camera: bool = False
    scanner: bool = False
    printer: bool = False

    @classmethod
    def major_device_class(cls) -> int:
        return IMAGING_MAJOR_DEVICE_CLASS

    def minor_device_class(self) -> int:
        value = 0
        if self.display:
            value |= 1 << IMAGING_DISPLAY_BIT
        if self.camera:
            value |= 1 << IMAGING_CAMERA_BIT
        if self.scanner:
            value |= 1 << IMAGING_SCANNER_BIT
        if self.printer:
            value |= 1 << IMAGING_PRINTER_BIT
        return value


# ── Wearable ──────────────────────────────────────────────────────────


class Wearable(_EnumeratedDeviceClass, IntEnum):
    WRISTWATCH = 0x04
    PAGER = 0x08
    JACKET = 0x0C
    HELMET = 0x10
    GLASSES = 0x14
    PIN = 0x18

    @classmethod
    def major_device_class(cls) -> int:
        return WEARABLE_MAJOR_DEVICE_CLASS


# ── Toy ───────────────────────────────────────────────────────────────


class Toy(_EnumeratedDeviceClass, IntEnum):
    ROBOT = 0x04
    VEHICLE = 0x08
    DOLL_ACTION_FIGURE = 0x0C
    CONTROLLER = 0x10
    GAME = 0x14

    @classmethod
    def major_device_class(cls) -> int:
        return TOY_MAJOR_DEVICE_CLASS


# ── Health ────────────────────────────────────────────────────────────


class Health(_EnumeratedDeviceClass, IntEnum):
    UNDEFINED = 0x00
    BLOOD_PRESSURE_MONITOR = 0x04
    THERMOMETER = 0x08
    WEIGHING_SCALE = 0x0C
    GLUCOSE_METER = 0x10
    PULSE_OXIMETER = 0x14
    HEART_PULSE_RATE_MONITOR = 0x18
    HEALTH_DATA_DISPLAY = 0x1C
    STEP_COUNTER = 0x20
    BODY_COMPOSITION_ANALYZER = 0x24
    PEAK_FLOW_MONITOR = 0x28
    MEDICATION_MONITOR = 0x2C
    KNEE_PROSTHESIS = 0x30
    ANKLE_PROSTHESIS = 0x34
    GENERIC_HEALTH_MANAGER = 0x38
    PERSONAL_MOBILITY_DEVICE = 0x3C

    @classmethod
    def major_device_class(cls) -> int:
        return HEALTH_MAJOR_DEVICE_CLASS


# ── Uncategorized ─────────────────────────────────────────────────────


class Uncategorized(DeviceClass, BaseModel):
    """Uncategorized device with a caller-supplied minor device class.

    Like ``Miscellaneous``, the value is used verbatim and not masked.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: UInt32 = Field(0, alias="minor_device_class")

    def __init__(self, minor_device_class: int = 0, **data: Any) -> None:
        super().__init__(minor_device_class=minor_device_class, **data)

    @classmethod
    def major_device_class(cls) -> int:
        return UNCATEGORIZED_MAJOR_DEVICE_CLASS

    def minor_device_class(self) -> int:
        return self.value


ENUMERATED_DEVICE_CLASSES: tuple[type[IntEnum], ...] = (
    Computer,
    Phone,
    LanNetworkAccessPoint,
    AudioVideo,
    Wearable,
    Toy,
    Health,
)
