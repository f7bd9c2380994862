"""Basic example composing Bluetooth class of device values."""

from bt_class_of_device import (
    AudioVideo,
    Computer,
    Imaging,
    MajorServiceClass,
    Peripheral,
    PeripheralLower,
    PeripheralUpper,
    Phone,
    Toy,
    Uncategorized,
    make_class_of_device,
)
from bt_class_of_device.constants import (
    MAJOR_DEVICE_CLASS_MASK,
    MINOR_DEVICE_CLASS_MASK,
    SERVICE_CLASS_MASK,
)


def show(label: str, class_of_device: int) -> None:
    print(
        f"  {label:28s} 0x{class_of_device:06X}"
        f"  service=0x{class_of_device & SERVICE_CLASS_MASK:06X}"
        f"  major=0x{class_of_device & MAJOR_DEVICE_CLASS_MASK:04X}"
        f"  minor=0x{class_of_device & MINOR_DEVICE_CLASS_MASK:02X}"
    )


def main() -> None:
    print("=" * 60)
    print("  Bluetooth Class of Device")
    print("=" * 60)

    none = MajorServiceClass.empty()
    phone_services = MajorServiceClass(audio=True, telephony=True, object_transfer=True)
    speaker_services = MajorServiceClass(audio=True, rendering=True)

    show("Laptop", make_class_of_device(none, Computer.LAPTOP))
    show("Smartphone", make_class_of_device(phone_services, Phone.SMARTPHONE))
    show("Loudspeaker", make_class_of_device(speaker_services, AudioVideo.LOUDSPEAKER))
    show(
        "Keyboard/joystick",
        make_class_of_device(none, Peripheral(PeripheralUpper.KEYBOARD, PeripheralLower.JOYSTICK)),
    )
    show(
        "Printer/scanner",
        make_class_of_device(MajorServiceClass(rendering=True), Imaging(printer=True, scanner=True)),
    )
    show("Robot", make_class_of_device(MajorServiceClass(audio=True, telephony=True), Toy.ROBOT))
    show("Uncategorized", make_class_of_device(none, Uncategorized(minor_device_class=0x3F)))


if __name__ == "__main__":
    main()
