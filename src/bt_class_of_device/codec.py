"""Top-level functions composing a class of device value."""

from __future__ import annotations

import logging

from bt_class_of_device.service_class import MajorServiceClass
from bt_class_of_device.types import DeviceClass

logger = logging.getLogger(__name__)


def device_class(value: DeviceClass) -> int:
    """Major and minor device class of a device category value."""
    if not isinstance(value, DeviceClass):
        raise TypeError(f"Not a device class: {value!r}")
    return value.device_class()


def make_class_of_device(major_service_class: MajorServiceClass, device_class_value: DeviceClass) -> int:
    """Create a class of device from a service class and a device class.

    Layout:
        Bits 13..23: major service class flags
        Bits  8..12: major device class
        Bits  2..7:  minor device class
    """
    if not isinstance(major_service_class, MajorServiceClass):
        raise TypeError(f"Not a major service class: {major_service_class!r}")
    class_of_device = major_service_class.major_service_class() | device_class(device_class_value)
    logger.debug("class of device for %r: 0x%06X", device_class_value, class_of_device)
    return class_of_device


compose = make_class_of_device
