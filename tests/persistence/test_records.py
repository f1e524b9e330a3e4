"""Tests for mapping device records to live devices and back."""

import pytest
from homesim.core.devices.climate_control import ClimateControl
from homesim.core.devices.config import ClimateControlConfig, LightConfig, RefrigeratorConfig
from homesim.core.devices.light import Light
from homesim.core.devices.refrigerator import Refrigerator
from homesim.core.errors import UnknownDeviceTypeError
from homesim.persistence.records import DeviceRecord, device_from_record, record_from_status


def test_record_from_light_status_keeps_base_rating():
    # Arrange
    light = Light(LightConfig(name="Lamp", power_rating_watts=20.0, has_occupancy_sensor=True))
    light.dim(25)
    light.turn_on()

    # Act
    record = record_from_status(light.describe())

    # Assert
    assert record == DeviceRecord(
        name="Lamp",
        type="Light",
        is_on=True,
        power_rating_watts=20.0,
        brightness_percent=25,
        has_occupancy_sensor=True,
    )


def test_light_record_round_trip():
    # Arrange
    light = Light(LightConfig(name="Lamp", power_rating_watts=20.0))
    light.dim(25)

    # Act
    restored = device_from_record(record_from_status(light.describe()))

    # Assert
    assert isinstance(restored, Light)
    assert restored.base_watts == 20.0
    assert restored.power_rating_watts == pytest.approx(5.0)
    assert restored.describe() == light.describe()


def test_climate_control_record_without_fan_speed_keeps_rating():
    # Arrange
    record = DeviceRecord(
        name="HVAC",
        type="ClimateControl",
        is_on=False,
        power_rating_watts=1200.0,
        target_temperature_c=21.0,
        current_temperature_c=26.0,
    )

    # Act
    device = device_from_record(record)

    # Assert
    assert isinstance(device, ClimateControl)
    assert device.power_rating_watts == 1200.0
    assert device.fan_speed == 1
    assert device.target_temperature_c == 21.0


def test_climate_control_record_round_trip_with_fan_speed():
    # Arrange
    hvac = ClimateControl(ClimateControlConfig(name="HVAC"))
    hvac.set_fan_speed(2)
    hvac.turn_on()

    # Act
    restored = device_from_record(record_from_status(hvac.describe()))

    # Assert
    assert restored.describe() == hvac.describe()
    assert restored.power_rating_watts == 300.0


def test_refrigerator_record_round_trip():
    # Arrange
    fridge = Refrigerator(RefrigeratorConfig(name="Fridge", internal_temperature_c=3.0, is_on=True))

    # Act
    restored = device_from_record(record_from_status(fridge.describe()))

    # Assert
    assert restored.describe() == fridge.describe()


@pytest.mark.parametrize(
    "legacy, expected",
    [("SmartLight", Light), ("SmartHVAC", ClimateControl), ("SmartRefrigerator", Refrigerator)],
)
def test_legacy_type_tags(legacy, expected):
    # Arrange
    record = DeviceRecord(name="Old", type=legacy, is_on=True)

    # Act
    device = device_from_record(record)

    # Assert
    assert isinstance(device, expected)
    assert device.type_tag == expected.__name__
    assert device.is_on is True


def test_missing_wattage_uses_default():
    # Act
    device = device_from_record(DeviceRecord(name="Lamp", type="Light", is_on=False))

    # Assert
    assert device.power_rating_watts == 10.0


def test_fields_of_other_variants_are_ignored():
    # Arrange
    record = DeviceRecord(name="Fridge", type="Refrigerator", is_on=False, brightness_percent=50)

    # Act
    device = device_from_record(record)

    # Assert
    assert isinstance(device, Refrigerator)


def test_unknown_type_tag():
    # Act & Assert
    with pytest.raises(UnknownDeviceTypeError, match="Toaster"):
        device_from_record(DeviceRecord(name="Toaster", type="Toaster", is_on=False))
