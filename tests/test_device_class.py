"""Tests for major and minor device classes of every category."""

import itertools
import logging

import pytest
from pydantic import ValidationError

from bt_class_of_device import (
    MAJOR_DEVICE_CLASS_MASK,
    MINOR_DEVICE_CLASS_MASK,
    AudioVideo,
    DeviceClass,
    Computer,
    Health,
    Imaging,
    LanNetworkAccessPoint,
    MajorServiceClass,
    Miscellaneous,
    Peripheral,
    PeripheralLower,
    PeripheralUpper,
    Phone,
    Toy,
    Uncategorized,
    Wearable,
    device_class,
    make_class_of_device,
)
from bt_class_of_device.categories import ENUMERATED_DEVICE_CLASSES

MAJOR_CODES = [
    (Miscellaneous, 0x0000),
    (Computer, 0x0100),
    (Phone, 0x0200),
    (LanNetworkAccessPoint, 0x0300),
    (AudioVideo, 0x0500),
    (Peripheral, 0x0500),
    (Imaging, 0x0600),
    (Wearable, 0x0700),
    (Toy, 0x0800),
    (Health, 0x0900),
    (Uncategorized, 0x1F00),
]


def _instances(category):
    if category in ENUMERATED_DEVICE_CLASSES:
        return list(category)
    if category is Peripheral:
        return [Peripheral(u, l) for u, l in itertools.product(PeripheralUpper, PeripheralLower)]
    if category is Imaging:
        return [Imaging(**dict(zip(("display", "camera", "scanner", "printer"), flags)))
                for flags in itertools.product((False, True), repeat=4)]
    return [category(minor_device_class=v) for v in (0x00, 0x04, 0x3F, 0xFC)]


# ── Major device class ────────────────────────────────────────────────


@pytest.mark.parametrize("category,major", MAJOR_CODES, ids=[c.__name__ for c, _ in MAJOR_CODES])
def test_major_code_is_constant(category, major):
    assert category.major_device_class() == major
    for value in _instances(category):
        assert value.major_device_class() == major
        assert value.device_class() & MAJOR_DEVICE_CLASS_MASK == major


# ── Enumerated minor classes ──────────────────────────────────────────


def test_computer_minor_codes():
    assert [int(c) for c in Computer] == [0x00, 0x04, 0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C]
    assert Computer.LAPTOP.minor_device_class() == 0x0C
    assert Computer.TABLET.device_class() == 0x011C


def test_phone_minor_codes():
    assert [int(p) for p in Phone] == [0x00, 0x04, 0x08, 0x0C, 0x10, 0x14]
    assert Phone.COMMON_ISDN_ACCESS.device_class() == 0x0214


def test_lan_minor_codes():
    assert [int(l) for l in LanNetworkAccessPoint] == [0x00, 0x20, 0x40, 0x60, 0x80, 0xA0, 0xC0, 0xE0]
    assert LanNetworkAccessPoint.NO_SERVICE_AVAILABLE.device_class() == 0x03E0


def test_audio_video_minor_codes_skip_reserved():
    codes = {int(a) for a in AudioVideo}
    assert 0x0C not in codes
    assert 0x44 not in codes
    assert AudioVideo.HANDS_FREE_DEVICE.minor_device_class() == 0x08
    assert AudioVideo.VIDEO_CONFERENCING.minor_device_class() == 0x40
    assert AudioVideo.GAMING_TOY.minor_device_class() == 0x48
    assert len(AudioVideo) == 17


def test_wearable_minor_codes():
    assert [int(w) for w in Wearable] == [0x04, 0x08, 0x0C, 0x10, 0x14, 0x18]
    assert Wearable.PIN.device_class() == 0x0718


def test_toy_minor_codes():
    assert [int(t) for t in Toy] == [0x04, 0x08, 0x0C, 0x10, 0x14]
    assert Toy.GAME.device_class() == 0x0814


def test_health_minor_codes():
    assert [int(h) for h in Health] == list(range(0x00, 0x40, 0x04))
    assert Health.PERSONAL_MOBILITY_DEVICE.device_class() == 0x093C


@pytest.mark.parametrize("category", ENUMERATED_DEVICE_CLASSES, ids=lambda c: c.__name__)
def test_enumerated_minor_codes_are_total_and_distinct(category):
    codes = [member.minor_device_class() for member in category]
    assert len(codes) == len(set(codes))
    for code in codes:
        assert code & ~MINOR_DEVICE_CLASS_MASK == 0


# ── Peripheral ────────────────────────────────────────────────────────


def test_peripheral_part_codes():
    assert [u.code() for u in PeripheralUpper] == [0x00, 0x40, 0x80, 0xC0]
    assert [l.code() for l in PeripheralLower] == [
        0x00, 0x04, 0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C, 0x20, 0x24,
    ]


def test_peripheral_grid_is_or_of_parts_and_distinct():
    seen = set()
    for upper, lower in itertools.product(PeripheralUpper, PeripheralLower):
        minor = Peripheral(upper, lower).minor_device_class()
        assert minor == upper.code() | lower.code()
        seen.add(minor)
    assert len(seen) == 40


def test_peripheral_keyword_and_default_construction():
    assert Peripheral(upper=PeripheralUpper.POINTING_DEVICE) == Peripheral(
        PeripheralUpper.POINTING_DEVICE, PeripheralLower.UNCATEGORIZED
    )
    assert Peripheral().minor_device_class() == 0
    assert Peripheral(PeripheralUpper.COMBO_KEYBOARD_POINTING_DEVICE, PeripheralLower.GAMEPAD).device_class() == 0x05C8


def test_peripheral_rejects_unknown_part():
    with pytest.raises(ValidationError):
        Peripheral(0x44, PeripheralLower.JOYSTICK)


# ── Imaging ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "flag,bit", [("display", 4), ("camera", 5), ("scanner", 6), ("printer", 7)]
)
def test_imaging_single_flag(flag, bit):
    assert Imaging(**{flag: True}).minor_device_class() == 1 << bit


def test_imaging_flags_superpose():
    assert Imaging().minor_device_class() == 0
    both = Imaging(camera=True, printer=True).minor_device_class()
    assert both == Imaging(camera=True).minor_device_class() | Imaging(printer=True).minor_device_class()
    assert Imaging(display=True, camera=True, scanner=True, printer=True).device_class() == 0x06F0


# ── Raw passthrough ───────────────────────────────────────────────────


@pytest.mark.parametrize("category", [Miscellaneous, Uncategorized])
def test_raw_minor_class_is_verbatim(category):
    assert category(0x14).minor_device_class() == 0x14
    assert category(minor_device_class=0x14) == category(0x14)
    assert category().minor_device_class() == 0


def test_raw_minor_class_is_not_masked():
    assert Miscellaneous(0x1FC).device_class() == 0x01FC
    cod = make_class_of_device(MajorServiceClass(), Uncategorized(0x2000))
    assert cod == 0x3F00


def test_raw_minor_class_must_fit_u32():
    with pytest.raises(ValidationError):
        Miscellaneous(-1)
    with pytest.raises(ValidationError):
        Uncategorized(1 << 32)


# ── device_class() ────────────────────────────────────────────────────


def test_device_class_function_matches_method():
    for category, _ in MAJOR_CODES:
        for value in _instances(category):
            assert device_class(value) == value.device_class()
            assert device_class(value) == value.major_device_class() | value.minor_device_class()


def test_device_class_rejects_plain_int():
    with pytest.raises(TypeError, match="Not a device class"):
        device_class(0x010C)


def test_compose_logs_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="bt_class_of_device.codec"):
        make_class_of_device(MajorServiceClass(), Computer.LAPTOP)
    assert "0x00010C" in caplog.text


def test_package_exports_device_class_function():
    import bt_class_of_device

    assert bt_class_of_device.device_class is device_class
    assert callable(device_class)
    assert device_class(Computer.LAPTOP) == 0x010C


# ── Construction ──────────────────────────────────────────────────────


@pytest.mark.parametrize("category", [Miscellaneous, Uncategorized])
def test_raw_minor_class_rejects_field_name(category):
    with pytest.raises(ValidationError):
        category(value=5)


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        Peripheral(PeripheralUpper.KEYBOARD, PeripheralLower.JOYSTICK, side="left")
    with pytest.raises(ValidationError):
        Imaging(fax=True)


def test_device_class_requires_overrides():
    class MajorOnly(DeviceClass):
        @classmethod
        def major_device_class(cls):
            return 0x0100

    with pytest.raises(NotImplementedError, match="MajorOnly"):
        MajorOnly().device_class()
    with pytest.raises(NotImplementedError):
        DeviceClass.major_device_class()
