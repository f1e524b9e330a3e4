"""Mapping between persisted device records and live devices."""

from dataclasses import dataclass, fields
from typing import Dict, Optional

from homesim.core.devices.base import Device
from homesim.core.devices.factory import build_device, device_config_cls, device_config_from_dict
from homesim.core.devices.status import DeviceStatus, LightStatus
from homesim.utils.converter import to_dict_filtered

LEGACY_TYPE_ALIASES: Dict[str, str] = {
    "SmartLight": "Light",
    "SmartHVAC": "ClimateControl",
    "SmartRefrigerator": "Refrigerator",
}
"""Type tags written by earlier versions of the device store."""

DEFAULT_WATTAGE: Dict[str, float] = {
    "Light": 10.0,
    "ClimateControl": 1000.0,
    "Refrigerator": 150.0,
}
"""Wattage assumed for records that were saved without one."""


@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceRecord:
    """One persisted device. Fields that do not apply to the device type are None."""

    name: str
    type: str
    is_on: bool
    power_rating_watts: Optional[float] = None
    brightness_percent: Optional[int] = None
    has_occupancy_sensor: Optional[bool] = None
    target_temperature_c: Optional[float] = None
    current_temperature_c: Optional[float] = None
    fan_speed: Optional[int] = None
    internal_temperature_c: Optional[float] = None


_RECORD_FIELDS = tuple(f.name for f in fields(DeviceRecord))


def device_from_record(record: DeviceRecord) -> Device:
    """
    Rebuild a device from its persisted record.

    Raises:
        UnknownDeviceTypeError: if the record's type tag is not a known device.
    """
    tag = LEGACY_TYPE_ALIASES.get(record.type, record.type)
    config_fields = {f.name for f in fields(device_config_cls(tag))}

    data = {"name": record.name, "type": tag, "is_on": bool(record.is_on)}
    data["power_rating_watts"] = (
        record.power_rating_watts
        if record.power_rating_watts is not None
        else DEFAULT_WATTAGE.get(tag, 0.0)
    )
    for key in _RECORD_FIELDS:
        value = getattr(record, key)
        if key not in data and key in config_fields and value is not None:
            data[key] = value
    if "has_occupancy_sensor" in data:
        data["has_occupancy_sensor"] = bool(data["has_occupancy_sensor"])
    return build_device(device_config_from_dict(data))


def record_from_status(status: DeviceStatus) -> DeviceRecord:
    """Flatten a device snapshot into a record suitable for saving."""
    values = to_dict_filtered(status, exclude=("type", "base_watts"))
    if isinstance(status, LightStatus):
        # Persist the undimmed rating; brightness is stored separately.
        values["power_rating_watts"] = status.base_watts
    values = {k: v for k, v in values.items() if k in _RECORD_FIELDS}
    return DeviceRecord(type=status.type, **values)
