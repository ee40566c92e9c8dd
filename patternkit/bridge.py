"""Bridge: devices decoupled from the remotes that drive them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Remote(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def control(self) -> str:
        """Describe what the remote controls."""


class TVRemote(Remote):
    def control(self) -> str:
        return "Controlling the TV from Remote"


class LEDRemote(Remote):
    def control(self) -> str:
        return "Controlling the LED bulbs from Remote"


class Device(ABC):
    """The abstraction side of the bridge, driven by a remote."""

    def __init__(self, remote: Remote) -> None:
        self.remote = remote

    @abstractmethod
    def control_device(self) -> list[str]:
        """Return the lines describing control of this device."""


class TV(Device):
    def control_device(self) -> list[str]:
        return ["Controlling the TV from TV_Remote", self.remote.control()]


class Bulb(Device):
    def control_device(self) -> list[str]:
        return ["Controlling the Bulb from LED_Remote", self.remote.control()]


def main(argv=None) -> int:
    """Control a TV and a bulb through their remotes."""
    for device in (TV(TVRemote()), Bulb(LEDRemote())):
        for line in device.control_device():
            print(line)
    return 0