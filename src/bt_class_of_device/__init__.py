"""Bluetooth Class of Device encoding."""

from bt_class_of_device.codec import compose, device_class, make_class_of_device
from bt_class_of_device.service_class import MajorServiceClass
from bt_class_of_device.types import DeviceClass
from bt_class_of_device.categories import (
    AudioVideo,
    Computer,
    Health,
    Imaging,
    LanNetworkAccessPoint,
    Miscellaneous,
    Peripheral,
    PeripheralLower,
    PeripheralUpper,
    Phone,
    Toy,
    Uncategorized,
    Wearable,
)
from bt_class_of_device.constants import (
    SERVICE_CLASS_MASK,
    MAJOR_DEVICE_CLASS_MASK,
    MINOR_DEVICE_CLASS_MASK,
)

__all__ = [
    "compose",
    "device_class",
    "make_class_of_device",
    "MajorServiceClass",
    "DeviceClass",
    "AudioVideo",
    "Computer",
    "Health",
    "Imaging",
    "LanNetworkAccessPoint",
    "Miscellaneous",
    "Peripheral",
    "PeripheralLower",
    "PeripheralUpper",
    "Phone",
    "Toy",
    "Uncategorized",
    "Wearable",
    "SERVICE_CLASS_MASK",
    "MAJOR_DEVICE_CLASS_MASK",
    "MINOR_DEVICE_CLASS_MASK",
]
