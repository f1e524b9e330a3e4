from dataclasses import dataclass

from homesim.utils.functions import require_finite, require_non_negative


@dataclass(slots=True)
class EnvironmentInputs:
    """
    Exogenous signals fed into the home before a simulation step.

    These are supplied by an external driver (a daily profile, a measured
    time series, a test) and are never computed by the engine itself.
    """

    sunlight_intensity_wm2: float = 0.0  # W/m², applied to every solar panel
    wind_speed_ms: float = 0.0  # m/s, applied to every wind turbine
    temperature_drift_c: float = 0.0  # °C added to every HVAC's current temperature

    def validate(self) -> None:
        require_non_negative(self.sunlight_intensity_wm2, "Sunlight intensity")
        require_non_negative(self.wind_speed_ms, "Wind speed")
        require_finite(self.temperature_drift_c, "Temperature drift")
