from dataclasses import dataclass


def _on_off(is_on: bool) -> str:
    return "ON" if is_on else "OFF"


# ------------------------
# Device snapshots
# ------------------------
@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceStatus:
    """Read-only snapshot of a device, taken by ``Device.describe``."""

    name: str
    type: str
    is_on: bool
    power_rating_watts: float

    def summary(self) -> str:
        return f"{self.name}: Status={_on_off(self.is_on)}, Power={self.power_rating_watts:g}W"


@dataclass(frozen=True, slots=True, kw_only=True)
class LightStatus(DeviceStatus):
    brightness_percent: int
    has_occupancy_sensor: bool
    base_watts: float

    def summary(self) -> str:
        return (
            f"{self.name}: Status={_on_off(self.is_on)}, "
            f"Brightness={self.brightness_percent}, "
            f"Occupancy Sensor={_on_off(self.has_occupancy_sensor)}"
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ClimateControlStatus(DeviceStatus):
    target_temperature_c: float
    current_temperature_c: float
    fan_speed: int

    def summary(self) -> str:
        return (
            f"{self.name}: Status={_on_off(self.is_on)}, "
            f"Target Temperature={self.target_temperature_c:g}°C, "
            f"Fan Speed={self.fan_speed}, "
            f"Current Temperature={self.current_temperature_c:.1f}°C"
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RefrigeratorStatus(DeviceStatus):
    internal_temperature_c: float

    def summary(self) -> str:
        return (
            f"{self.name}: Status={_on_off(self.is_on)}, "
            f"Internal Temperature={self.internal_temperature_c:g}°C"
        )
