"""Shared annotations and the device class mixin."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# Raw minor class carrier: any unsigned 32-bit value, not masked.
UInt32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]


class DeviceClass:
    """Abstract mixin joining a major and a minor device class.

    Every concrete category must override ``major_device_class()`` as a
    classmethod and ``minor_device_class()`` on the instance; the base
    versions raise ``NotImplementedError``. The mixin is a plain class
    rather than an ``abc.ABC`` because it is mixed into ``IntEnum`` types,
    whose metaclass does not combine with ``ABCMeta``.
    """

    @classmethod
    def major_device_class(cls) -> int:
        raise NotImplementedError(f"{cls.__name__} does not define a major device class")

    def minor_device_class(self) -> int:
        raise NotImplementedError(f"{type(self).__name__} does not define a minor device class")

    def device_class(self) -> int:
        """Major and minor device class joined into one value."""
        return self.major_device_class() | self.minor_device_class()
