import logging
from numbers import Integral

from homesim.core.devices.base import Device
from homesim.core.devices.config import LightConfig
from homesim.core.devices.status import LightStatus
from homesim.core.errors import InvalidArgumentError
from homesim.core.registry import register_device

logger = logging.getLogger(__name__)


@register_device(LightConfig)
class Light(Device):
    """
    Dimmable light with an optional occupancy sensor.

    The draw scales linearly with brightness from the base wattage captured at
    construction, so dimming to 20% and back to 100% restores the full rating.
    """

    def __init__(self, config: LightConfig):
        super().__init__(config)
        self._base_watts = float(config.power_rating_watts)
        self._has_occupancy_sensor = config.has_occupancy_sensor
        self._brightness_percent = 100
        self._apply_brightness(config.brightness_percent)

    @property
    def base_watts(self) -> float:
        return self._base_watts

    @property
    def brightness_percent(self) -> int:
        return self._brightness_percent

    @property
    def has_occupancy_sensor(self) -> bool:
        return self._has_occupancy_sensor

    def turn_on(self) -> None:
        was_on = self.is_on
        super().turn_on()
        if not was_on and self._has_occupancy_sensor:
            logger.info("%s turned on due to occupancy.", self.name)

    def dim(self, level: int) -> None:
        """Set brightness to ``level`` percent and rescale the power rating."""
        if isinstance(level, bool) or not isinstance(level, Integral):
            raise InvalidArgumentError(f"Brightness must be an integer, got {level!r}.")
        if not (0 <= level <= 100):
            raise InvalidArgumentError(f"Brightness {level} out of bounds [0, 100].")
        self._apply_brightness(int(level))
        logger.info("%s is dimmed to %d%%.", self.name, level)

    def _apply_brightness(self, level: int) -> None:
        self._brightness_percent = level
        self._power_rating_watts = self._base_watts * level / 100.0

    def describe(self) -> LightStatus:
        return LightStatus(
            name=self.name,
            type=self.type_tag,
            is_on=self.is_on,
            power_rating_watts=self.power_rating_watts,
            brightness_percent=self._brightness_percent,
            has_occupancy_sensor=self._has_occupancy_sensor,
            base_watts=self._base_watts,
        )
