from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import dacite
import yaml

from homesim.core.data.config import EnvironmentDriverConfig, driver_config_from_dict
from homesim.core.devices.config import DeviceConfig
from homesim.core.devices.factory import device_config_from_dict
from homesim.core.sources.config import SourceConfig
from homesim.core.sources.factory import source_config_from_dict
from homesim.sim.runner import ScheduledAction
from homesim.utils.converter import DACITE_CONFIG


@dataclass
class HomeSimulationConfig:
    price_per_kwh: float
    devices: List[DeviceConfig] = field(default_factory=list)
    sources: List[SourceConfig] = field(default_factory=list)
    environment: Optional[EnvironmentDriverConfig] = None
    schedule: List[ScheduledAction] = field(default_factory=list)
    step_hours: float = 1.0
    hours: int = 24


def config_from_dict(data: Mapping[str, Any]) -> HomeSimulationConfig:
    """
    Parse a raw mapping into a HomeSimulationConfig.

    Devices, sources and the environment are parsed against the config class
    named by their ``type`` tag, so validation errors from those configs
    surface unchanged.

    Raises:
        UnknownDeviceTypeError: if a device or source type tag is not registered.
        InvalidArgumentError: if a config value is out of range.
    """
    data = dict(data)
    devices = [device_config_from_dict(entry) for entry in data.pop("devices", None) or []]
    sources = [source_config_from_dict(entry) for entry in data.pop("sources", None) or []]
    environment = data.pop("environment", None)

    config = dacite.from_dict(HomeSimulationConfig, data, config=DACITE_CONFIG)
    config.devices = devices
    config.sources = sources
    if environment is not None:
        config.environment = driver_config_from_dict(environment)
    return config


def load_config(path: Union[str, Path]) -> HomeSimulationConfig:
    """Load a home simulation configuration from a YAML file."""
    with open(path, "r") as file:
        yaml_cfg = yaml.safe_load(file)
    return config_from_dict(yaml_cfg)
