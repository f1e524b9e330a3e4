"""Config definitions for devices. The ``type`` tags are what dacite and the persistence layer match on."""

from dataclasses import dataclass
from typing import Literal, Union

import numpy as np

from homesim.core.errors import InvalidArgumentError

FAN_SPEED_WATTS = {0: 0.0, 1: 100.0, 2: 300.0, 3: 500.0}
"""Power draw of a climate control unit per fan speed setting."""


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseDeviceConfig:
    name: str
    power_rating_watts: float
    is_on: bool = False
    type: str

    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError("Device name must not be empty.")
        if not np.isfinite(self.power_rating_watts) or self.power_rating_watts < 0:
            raise InvalidArgumentError("Power rating must be a non-negative number.")


@dataclass(frozen=True, slots=True, kw_only=True)
class LightConfig(BaseDeviceConfig):
    """Dimmable light. ``power_rating_watts`` is the draw at full brightness."""

    brightness_percent: int = 100
    has_occupancy_sensor: bool = False

    type: Literal["Light"] = "Light"

    def __post_init__(self):
        super(LightConfig, self).__post_init__()
        if not (0 <= self.brightness_percent <= 100):
            raise InvalidArgumentError("Brightness must be between 0 and 100.")


@dataclass(frozen=True, slots=True, kw_only=True)
class ClimateControlConfig(BaseDeviceConfig):
    """
    HVAC unit. ``power_rating_watts`` is the nominal draw and holds until
    ``set_fan_speed`` applies the fan-speed table.
    """

    power_rating_watts: float = 1000.0
    target_temperature_c: float = 22.0
    current_temperature_c: float = 25.0
    fan_speed: int = 1

    type: Literal["ClimateControl"] = "ClimateControl"

    def __post_init__(self):
        super(ClimateControlConfig, self).__post_init__()
        if isinstance(self.fan_speed, bool) or self.fan_speed not in FAN_SPEED_WATTS:
            raise InvalidArgumentError("Fan speed must be one of 0, 1, 2, 3.")
        if not (np.isfinite(self.target_temperature_c) and np.isfinite(self.current_temperature_c)):
            raise InvalidArgumentError("Temperatures must be finite.")


@dataclass(frozen=True, slots=True, kw_only=True)
class RefrigeratorConfig(BaseDeviceConfig):
    power_rating_watts: float = 150.0
    internal_temperature_c: float = 4.0

    type: Literal["Refrigerator"] = "Refrigerator"

    def __post_init__(self):
        super(RefrigeratorConfig, self).__post_init__()
        if not np.isfinite(self.internal_temperature_c):
            raise InvalidArgumentError("Internal temperature must be finite.")


DeviceConfig = Union[LightConfig, ClimateControlConfig, RefrigeratorConfig]
"""Union type for all device configurations."""
