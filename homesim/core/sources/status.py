from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceStatus:
    """Read-only snapshot of a renewable source."""

    name: str
    type: str
    efficiency: float
    output_watts: float

    def summary(self) -> str:
        return f"{self.name}: Output={self.output_watts:.1f}W"


@dataclass(frozen=True, slots=True, kw_only=True)
class SolarPanelStatus(SourceStatus):
    surface_area_m2: float
    sunlight_intensity_wm2: float

    def summary(self) -> str:
        return (
            f"{self.name}: Sunlight Intensity={self.sunlight_intensity_wm2:g} W/m^2, "
            f"Output={self.output_watts:.1f}W"
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class WindTurbineStatus(SourceStatus):
    blade_diameter_m: float
    wind_speed_ms: float

    def summary(self) -> str:
        return (
            f"{self.name}: Wind Speed={self.wind_speed_ms:.2f} m/s, "
            f"Output={self.output_watts:.1f}W"
        )
