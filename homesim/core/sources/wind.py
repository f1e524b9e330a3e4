import numpy as np

from homesim.core.registry import register_source
from homesim.core.sources.base import RenewableSource
from homesim.core.sources.config import WindTurbineConfig
from homesim.core.sources.status import WindTurbineStatus
from homesim.utils.functions import require_non_negative

AIR_DENSITY = 1.225  # kg/m³, standard air at sea level


@register_source(WindTurbineConfig)
class WindTurbine(RenewableSource):
    """
    Horizontal-axis wind turbine.

    Uses the cubic wind-speed law P = ½ ρ A v³ η, where A is the swept area of
    the rotor and η the overall conversion efficiency.
    """

    def __init__(self, config: WindTurbineConfig):
        super().__init__(config)
        self._blade_diameter_m = float(config.blade_diameter_m)
        self._wind_speed_ms = float(config.wind_speed_ms)

    @property
    def blade_diameter_m(self) -> float:
        return self._blade_diameter_m

    @property
    def wind_speed_ms(self) -> float:
        return self._wind_speed_ms

    @property
    def swept_area_m2(self) -> float:
        return float(np.pi * (self._blade_diameter_m / 2.0) ** 2)

    def set_wind_speed(self, speed: float) -> None:
        self._wind_speed_ms = require_non_negative(speed, "Wind speed")

    def output_watts(self) -> float:
        return 0.5 * AIR_DENSITY * self.swept_area_m2 * self._wind_speed_ms ** 3 * self._efficiency

    def describe(self) -> WindTurbineStatus:
        return WindTurbineStatus(
            name=self.name,
            type=self.type_tag,
            efficiency=self._efficiency,
            output_watts=self.output_watts(),
            blade_diameter_m=self._blade_diameter_m,
            wind_speed_ms=self._wind_speed_ms,
        )
