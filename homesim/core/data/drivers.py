"""Environment drivers: external generators of sunlight, wind and temperature drift."""

from abc import ABC, abstractmethod
from typing import Dict

import numpy as np
import pandas as pd

from homesim.core.data.config import (
    BaseDriverConfig,
    DailyProfileDriverConfig,
    FileDriverConfig,
)
from homesim.core.environment import EnvironmentInputs

HOURS_PER_DAY = 24


class EnvironmentDriver(ABC):
    """Abstract base class for environment drivers."""

    @abstractmethod
    def inputs_at(self, hour: int) -> EnvironmentInputs:
        """Return the environment inputs for simulated ``hour``."""
        pass


class DailyProfileDriver(EnvironmentDriver):
    """
    Synthetic daily weather.

    Sunlight follows a triangle peaking at noon and dropping to zero at
    midnight. Wind speed and temperature drift are drawn uniformly from a
    seeded generator, so two drivers with the same seed replay the same day.
    """

    def __init__(self, config: DailyProfileDriverConfig):
        self.config = config
        self._rng = np.random.default_rng(config.seed)

    def sunlight_at(self, hour: int) -> float:
        hour_of_day = hour % HOURS_PER_DAY
        return self.config.peak_sunlight_wm2 * max(0.0, 1.0 - abs(hour_of_day - 12) / 12.0)

    def inputs_at(self, hour: int) -> EnvironmentInputs:
        drift = self.config.max_temperature_drift_c
        return EnvironmentInputs(
            sunlight_intensity_wm2=self.sunlight_at(hour),
            wind_speed_ms=float(self._rng.uniform(0.0, self.config.max_wind_speed_ms)),
            temperature_drift_c=float(self._rng.uniform(-drift, drift)),
        )


class FileEnvironmentDriver(EnvironmentDriver):
    """Driver that replays an hourly series from a CSV or Feather file."""

    def __init__(self, config: FileDriverConfig):
        self.config = config

        if config.file_path.endswith(".feather"):
            df = pd.read_feather(config.file_path)
        else:
            df = pd.read_csv(config.file_path)

        for col in (config.hour_column, config.sunlight_column, config.wind_column):
            if col not in df.columns:
                raise KeyError(f"Column '{col}' not found in file")

        if config.drift_column not in df.columns:
            df[config.drift_column] = 0.0

        df = df.set_index(config.hour_column).sort_index()
        self._df = df

    @property
    def hours(self) -> np.ndarray:
        return self._df.index.to_numpy()

    def __len__(self) -> int:
        return len(self._df)

    def inputs_at(self, hour: int) -> EnvironmentInputs:
        if hour not in self._df.index:
            raise KeyError(f"Hour {hour} not found in data")
        row = self._df.loc[hour]
        return EnvironmentInputs(
            sunlight_intensity_wm2=float(row[self.config.sunlight_column]),
            wind_speed_ms=float(row[self.config.wind_column]),
            temperature_drift_c=float(row[self.config.drift_column]),
        )


class ConstantDriver(EnvironmentDriver):
    """Driver returning the same inputs every hour, mainly for tests and what-if runs."""

    def __init__(self, inputs: EnvironmentInputs):
        self._inputs = inputs

    def inputs_at(self, hour: int) -> EnvironmentInputs:
        return EnvironmentInputs(
            sunlight_intensity_wm2=self._inputs.sunlight_intensity_wm2,
            wind_speed_ms=self._inputs.wind_speed_ms,
            temperature_drift_c=self._inputs.temperature_drift_c,
        )


DRIVERS: Dict[type, type] = {
    DailyProfileDriverConfig: DailyProfileDriver,
    FileDriverConfig: FileEnvironmentDriver,
}


def build_driver(config: BaseDriverConfig) -> EnvironmentDriver:
    """Create an EnvironmentDriver instance from its configuration."""
    if not isinstance(config, BaseDriverConfig):
        raise ValueError("config must be an instance of BaseDriverConfig")
    driver_cls = DRIVERS.get(type(config))
    if driver_cls is None:
        raise ValueError(f"Unsupported driver config type: {type(config)}")
    return driver_cls(config)
