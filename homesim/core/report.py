from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from homesim.core.devices.status import DeviceStatus
from homesim.core.sources.status import SourceStatus
from homesim.utils.converter import to_dict_filtered


# ------------------------
# Per-entity breakdown
# ------------------------
@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceEnergy:
    name: str
    energy_kwh: float
    is_on: bool
    status: DeviceStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceGeneration:
    name: str
    output_watts: float
    energy_kwh: float
    status: SourceStatus


# ------------------------
# Step result
# ------------------------
@dataclass(frozen=True, slots=True, kw_only=True)
class SimulationReport:
    """
    Result of one engine step. Created fresh per step and never mutated.

    Surplus generation is floor-clamped out of ``net_consumption_kwh``; it is
    neither credited against cost nor carried into a later step.
    """

    duration_hours: float
    price_per_kwh: float
    total_consumption_kwh: float = 0.0
    total_generated_kwh: float = 0.0
    net_consumption_kwh: float = 0.0
    cost_usd: float = 0.0
    devices: Tuple[DeviceEnergy, ...] = field(default_factory=tuple)
    sources: Tuple[SourceGeneration, ...] = field(default_factory=tuple)

    @property
    def surplus_kwh(self) -> float:
        """Generation in excess of consumption during this step (informational)."""
        return max(0.0, self.total_generated_kwh - self.total_consumption_kwh)

    def device(self, name: str) -> DeviceEnergy:
        for entry in self.devices:
            if entry.name == name:
                return entry
        raise KeyError(f"Device '{name}' not found in report.")

    def as_dict(self) -> Dict[str, Any]:
        result = to_dict_filtered(self, exclude=(), recursion=True)
        result["surplus_kwh"] = self.surplus_kwh
        return result

    def summary(self) -> str:
        return "\n".join(
            [
                "--- Simulation Results ---",
                f"Total Energy Consumption: {self.total_consumption_kwh:.3f} kWh",
                f"Total Renewable Energy Generated: {self.total_generated_kwh:.3f} kWh",
                f"Net Energy Consumption: {self.net_consumption_kwh:.3f} kWh",
                f"Total Cost: ${self.cost_usd:.2f}",
                "--- End Simulation ---",
            ]
        )
