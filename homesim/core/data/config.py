from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

import dacite

from homesim.core.errors import InvalidArgumentError
from homesim.utils.converter import DACITE_CONFIG


@dataclass(frozen=True, kw_only=True, slots=True)
class BaseDriverConfig:
    """Base configuration for environment drivers."""

    type: str


@dataclass(frozen=True, kw_only=True, slots=True)
class DailyProfileDriverConfig(BaseDriverConfig):
    """Synthetic day: triangular sunlight peaking at noon, random wind and temperature drift."""

    peak_sunlight_wm2: float = 1000.0
    max_wind_speed_ms: float = 10.0
    max_temperature_drift_c: float = 0.5
    seed: Optional[int] = None

    type: Literal["daily_profile"] = "daily_profile"

    def __post_init__(self):
        if self.peak_sunlight_wm2 < 0:
            raise InvalidArgumentError("Peak sunlight must be non-negative.")
        if self.max_wind_speed_ms < 0:
            raise InvalidArgumentError("Max wind speed must be non-negative.")
        if self.max_temperature_drift_c < 0:
            raise InvalidArgumentError("Max temperature drift must be non-negative.")


@dataclass(frozen=True, kw_only=True, slots=True)
class FileDriverConfig(BaseDriverConfig):
    """Hourly environment series read from a CSV or Feather file."""

    file_path: str
    hour_column: str = "hour"
    sunlight_column: str = "sunlight_intensity_wm2"
    wind_column: str = "wind_speed_ms"
    drift_column: str = "temperature_drift_c"

    type: Literal["file"] = "file"


EnvironmentDriverConfig = Union[DailyProfileDriverConfig, FileDriverConfig]

DRIVER_CONFIGS = {
    "daily_profile": DailyProfileDriverConfig,
    "file": FileDriverConfig,
}


def driver_config_from_dict(data: Mapping[str, Any]) -> BaseDriverConfig:
    """Parse a raw mapping into the driver config class named by its ``type``."""
    tag = data.get("type")
    if tag not in DRIVER_CONFIGS:
        raise ValueError(f"Unknown environment driver type: {tag!r}")
    return dacite.from_dict(DRIVER_CONFIGS[tag], dict(data), config=DACITE_CONFIG)
