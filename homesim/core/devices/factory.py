from typing import Any, Iterable, Mapping

import dacite

from homesim.core.devices.base import Device
from homesim.core.devices.config import BaseDeviceConfig
from homesim.core.errors import UnknownDeviceTypeError
from homesim.core.registry import registry
from homesim.utils.converter import DACITE_CONFIG


def device_config_cls(tag: str) -> type:
    """Look up the config class registered for a device type tag."""
    if tag not in registry.devices:
        raise UnknownDeviceTypeError(f"Unknown device type: {tag!r}")
    return registry.devices[tag][0]


def device_config_from_dict(data: Mapping[str, Any]) -> BaseDeviceConfig:
    """Parse a raw mapping (e.g. from YAML or a database row) into a device config."""
    config_cls = device_config_cls(data.get("type"))
    return dacite.from_dict(config_cls, dict(data), config=DACITE_CONFIG)


def build_device(config: BaseDeviceConfig) -> Device:
    """Builds a device based on its configuration."""
    if config.type not in registry.devices:
        raise UnknownDeviceTypeError(f"Device config '{config.__class__.__name__}' not found in registry.")
    _, device_cls = registry.devices[config.type]
    return device_cls(config)


def build_devices(configs: Iterable[BaseDeviceConfig]) -> Iterable[Device]:
    """Builds a sequence of devices from their configurations."""
    return (build_device(config) for config in configs)
