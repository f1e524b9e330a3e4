from homesim.core.devices.base import Device
from homesim.core.devices.config import (
    ClimateControlConfig,
    DeviceConfig,
    LightConfig,
    RefrigeratorConfig,
)
from homesim.core.devices.light import Light
from homesim.core.devices.climate_control import ClimateControl
from homesim.core.devices.refrigerator import Refrigerator

__all__ = [
    "Device",
    "DeviceConfig",
    "Light",
    "LightConfig",
    "ClimateControl",
    "ClimateControlConfig",
    "Refrigerator",
    "RefrigeratorConfig",
]
