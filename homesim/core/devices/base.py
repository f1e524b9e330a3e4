import logging
from abc import ABC, abstractmethod

from homesim.core.devices.config import BaseDeviceConfig
from homesim.core.devices.status import DeviceStatus
from homesim.utils.functions import require_non_negative

logger = logging.getLogger(__name__)


class Device(ABC):
    """Abstract base class for all power-consuming devices in a home."""

    def __init__(self, config: BaseDeviceConfig):
        self.config = config
        self._name = config.name
        self._power_rating_watts = float(config.power_rating_watts)
        self._is_on = bool(config.is_on)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_tag(self) -> str:
        return self.config.type

    @property
    def power_rating_watts(self) -> float:
        return self._power_rating_watts

    @property
    def is_on(self) -> bool:
        return self._is_on

    def turn_on(self) -> None:
        if not self._is_on:
            self._is_on = True
            logger.info("%s is turned ON.", self._name)

    def turn_off(self) -> None:
        if self._is_on:
            self._is_on = False
            logger.info("%s is turned OFF.", self._name)

    def energy_over_interval(self, hours: float) -> float:
        """Energy drawn over ``hours`` in kWh; zero while the device is off."""
        hours = require_non_negative(hours, "Interval length in hours")
        if not self._is_on:
            return 0.0
        return self._power_rating_watts * hours / 1000.0

    @abstractmethod
    def describe(self) -> DeviceStatus:
        """Return a read-only snapshot of the current device state."""
        pass

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(name={self._name!r}, "
            f"power={self._power_rating_watts:g}W, on={self._is_on})>"
        )
