import logging
from numbers import Integral

from homesim.core.devices.base import Device
from homesim.core.devices.config import FAN_SPEED_WATTS, ClimateControlConfig
from homesim.core.devices.status import ClimateControlStatus
from homesim.core.errors import InvalidArgumentError
from homesim.core.registry import register_device
from homesim.utils.functions import require_finite

logger = logging.getLogger(__name__)


@register_device(ClimateControlConfig)
class ClimateControl(Device):
    """HVAC unit whose power draw is set by its fan speed."""

    def __init__(self, config: ClimateControlConfig):
        super().__init__(config)
        self._target_temperature_c = float(config.target_temperature_c)
        self._current_temperature_c = float(config.current_temperature_c)
        self._fan_speed = int(config.fan_speed)

    @property
    def target_temperature_c(self) -> float:
        return self._target_temperature_c

    @property
    def current_temperature_c(self) -> float:
        return self._current_temperature_c

    @property
    def fan_speed(self) -> int:
        return self._fan_speed

    def set_fan_speed(self, speed: int) -> None:
        if isinstance(speed, bool) or not isinstance(speed, Integral) or speed not in FAN_SPEED_WATTS:
            raise InvalidArgumentError(f"Fan speed {speed!r} must be one of 0, 1, 2, 3.")
        self._fan_speed = int(speed)
        self._power_rating_watts = FAN_SPEED_WATTS[self._fan_speed]
        logger.info("%s fan speed set to %d.", self.name, speed)

    def set_target_temperature_c(self, temperature: float) -> None:
        self._target_temperature_c = require_finite(temperature, "Target temperature")
        logger.info("%s target temperature set to %g°C.", self.name, temperature)

    def set_current_temperature_c(self, temperature: float) -> None:
        # Driven by the environment every step, so not logged at INFO.
        self._current_temperature_c = require_finite(temperature, "Current temperature")

    def describe(self) -> ClimateControlStatus:
        return ClimateControlStatus(
            name=self.name,
            type=self.type_tag,
            is_on=self.is_on,
            power_rating_watts=self.power_rating_watts,
            target_temperature_c=self._target_temperature_c,
            current_temperature_c=self._current_temperature_c,
            fan_speed=self._fan_speed,
        )
