"""Class of Device bit layout constants."""

SERVICE_CLASS_MASK = 0xFFE000  # bits 13..23
MAJOR_DEVICE_CLASS_MASK = 0x001F00  # bits 8..12
MINOR_DEVICE_CLASS_MASK = 0x0000FC  # bits 2..7

# Major service class bit positions (bit 15 is reserved)
LIMITED_DISCOVERABLE_MODE_BIT = 13
LE_AUDIO_BIT = 14
POSITIONING_BIT = 16
NETWORKING_BIT = 17
RENDERING_BIT = 18
CAPTURING_BIT = 19
OBJECT_TRANSFER_BIT = 20
AUDIO_BIT = 21
TELEPHONY_BIT = 22
INFORMATION_BIT = 23

# Major device class codes, already shifted into bits 8..12
MISCELLANEOUS_MAJOR_DEVICE_CLASS = 0x0000
COMPUTER_MAJOR_DEVICE_CLASS = 0x0100
PHONE_MAJOR_DEVICE_CLASS = 0x0200
LAN_NETWORK_ACCESS_POINT_MAJOR_DEVICE_CLASS = 0x0300
AUDIO_VIDEO_MAJOR_DEVICE_CLASS = 0x0500
PERIPHERAL_MAJOR_DEVICE_CLASS = 0x0500
IMAGING_MAJOR_DEVICE_CLASS = 0x0600
WEARABLE_MAJOR_DEVICE_CLASS = 0x0700
TOY_MAJOR_DEVICE_CLASS = 0x0800
HEALTH_MAJOR_DEVICE_CLASS = 0x0900
UNCATEGORIZED_MAJOR_DEVICE_CLASS = 0x1F00

# Imaging minor class bit positions
IMAGING_DISPLAY_BIT = 4
IMAGING_CAMERA_BIT = 5
IMAGING_SCANNER_BIT = 6
IMAGING_PRINTER_BIT = 7
