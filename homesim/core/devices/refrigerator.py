import logging

from homesim.core.devices.base import Device
from homesim.core.devices.config import RefrigeratorConfig
from homesim.core.devices.status import RefrigeratorStatus
from homesim.core.registry import register_device
from homesim.utils.functions import require_finite

logger = logging.getLogger(__name__)


@register_device(RefrigeratorConfig)
class Refrigerator(Device):
    def __init__(self, config: RefrigeratorConfig):
        super().__init__(config)
        self._internal_temperature_c = float(config.internal_temperature_c)

    @property
    def internal_temperature_c(self) -> float:
        return self._internal_temperature_c

    def set_internal_temperature_c(self, temperature: float) -> None:
        self._internal_temperature_c = require_finite(temperature, "Internal temperature")
        logger.info("%s internal temperature set to %g°C.", self.name, temperature)

    def describe(self) -> RefrigeratorStatus:
        return RefrigeratorStatus(
            name=self.name,
            type=self.type_tag,
            is_on=self.is_on,
            power_rating_watts=self.power_rating_watts,
            internal_temperature_c=self._internal_temperature_c,
        )
