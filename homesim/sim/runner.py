import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Union, get_args

import pandas as pd

from homesim.core.data.drivers import EnvironmentDriver
from homesim.core.environment import EnvironmentInputs
from homesim.core.errors import InvalidArgumentError
from homesim.core.report import SimulationReport
from homesim.sim.engine import SimulationEngine

logger = logging.getLogger(__name__)

ActionName = Literal[
    "turn_on",
    "turn_off",
    "dim",
    "set_fan_speed",
    "set_target_temperature_c",
    "set_internal_temperature_c",
]
_VALUELESS_ACTIONS = ("turn_on", "turn_off")


@dataclass(frozen=True, slots=True, kw_only=True)
class ScheduledAction:
    """A device command issued at the start of a given simulated hour."""

    hour: int
    device: str
    action: ActionName
    value: Optional[Union[int, float]] = None

    def __post_init__(self):
        if self.action not in get_args(ActionName):
            raise InvalidArgumentError(f"Unknown scheduled action '{self.action}'.")
        if self.hour < 0:
            raise InvalidArgumentError("Scheduled hour must be non-negative.")
        if self.action not in _VALUELESS_ACTIONS and self.value is None:
            raise InvalidArgumentError(f"Action '{self.action}' requires a value.")

    def apply(self, engine: SimulationEngine) -> None:
        if self.action in _VALUELESS_ACTIONS:
            getattr(engine, self.action)(self.device)
        else:
            getattr(engine, self.action)(self.device, self.value)


@dataclass(frozen=True, slots=True)
class HourlyResult:
    hour: int
    inputs: EnvironmentInputs
    report: SimulationReport


class ScenarioRunner:
    """
    Drives an engine hour by hour.

    Each hour the runner applies the driver's environment inputs, then the
    scheduled actions for that hour, then steps the engine once.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        driver: EnvironmentDriver,
        schedule: Sequence[ScheduledAction] = (),
        step_hours: float = 1.0,
    ):
        if step_hours < 0:
            raise InvalidArgumentError("step_hours must be non-negative.")
        self.engine = engine
        self.driver = driver
        self.step_hours = step_hours
        self._schedule: Dict[int, List[ScheduledAction]] = {}
        for action in schedule:
            if action.device not in engine.device_names:
                raise KeyError(f"Scheduled action at hour {action.hour} targets unknown device '{action.device}'.")
            self._schedule.setdefault(action.hour, []).append(action)

    def run_hour(self, hour: int) -> HourlyResult:
        inputs = self.driver.inputs_at(hour)
        self.engine.apply_environment(inputs)
        for action in self._schedule.get(hour, []):
            action.apply(self.engine)
        report = self.engine.step(self.step_hours)
        logger.info(
            "Hour %d: sunlight=%.1f W/m^2, wind=%.2f m/s, net=%.3f kWh, cost=$%.2f",
            hour, inputs.sunlight_intensity_wm2, inputs.wind_speed_ms,
            report.net_consumption_kwh, report.cost_usd,
        )
        return HourlyResult(hour=hour, inputs=inputs, report=report)

    def run(self, hours: int = 24, start_hour: int = 0) -> List[HourlyResult]:
        return [self.run_hour(hour) for hour in range(start_hour, start_hour + hours)]


def results_to_frame(results: Iterable[HourlyResult]) -> pd.DataFrame:
    """One row per hour with the environment, the totals and per-device energy."""
    rows = []
    for result in results:
        row = {
            "hour": result.hour,
            "sunlight_intensity_wm2": result.inputs.sunlight_intensity_wm2,
            "wind_speed_ms": result.inputs.wind_speed_ms,
            "temperature_drift_c": result.inputs.temperature_drift_c,
            "total_consumption_kwh": result.report.total_consumption_kwh,
            "total_generated_kwh": result.report.total_generated_kwh,
            "net_consumption_kwh": result.report.net_consumption_kwh,
            "cost_usd": result.report.cost_usd,
        }
        for entry in result.report.devices:
            row[f"{entry.name}_kwh"] = entry.energy_kwh
        rows.append(row)
    return pd.DataFrame(rows).set_index("hour") if rows else pd.DataFrame()


def summarize(results: Iterable[HourlyResult]) -> Dict[str, float]:
    totals = {
        "total_consumption_kwh": 0.0,
        "total_generated_kwh": 0.0,
        "net_consumption_kwh": 0.0,
        "cost_usd": 0.0,
    }
    for result in results:
        for key in totals:
            totals[key] += getattr(result.report, key)
    return totals
