"""Config definitions for renewable sources. This is necessary to make dacite able to infer the correct types."""

from dataclasses import dataclass
from typing import Literal, Union

from homesim.core.errors import InvalidArgumentError
from homesim.utils.functions import require_fraction, require_non_negative


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseSourceConfig:
    name: str
    efficiency: float
    type: str

    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError("Source name must not be empty.")
        require_fraction(self.efficiency, "Efficiency")


@dataclass(frozen=True, slots=True, kw_only=True)
class SolarPanelConfig(BaseSourceConfig):
    surface_area_m2: float
    sunlight_intensity_wm2: float = 0.0  # W/m², initially dark

    type: Literal["SolarPanel"] = "SolarPanel"

    def __post_init__(self):
        super(SolarPanelConfig, self).__post_init__()
        require_non_negative(self.surface_area_m2, "Surface area")
        require_non_negative(self.sunlight_intensity_wm2, "Sunlight intensity")


@dataclass(frozen=True, slots=True, kw_only=True)
class WindTurbineConfig(BaseSourceConfig):
    blade_diameter_m: float
    wind_speed_ms: float = 0.0

    type: Literal["WindTurbine"] = "WindTurbine"

    def __post_init__(self):
        super(WindTurbineConfig, self).__post_init__()
        require_non_negative(self.blade_diameter_m, "Blade diameter")
        require_non_negative(self.wind_speed_ms, "Wind speed")


SourceConfig = Union[SolarPanelConfig, WindTurbineConfig]
"""Union type for all renewable source configurations."""
