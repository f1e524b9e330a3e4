import logging
from typing import Dict, List, Tuple

from homesim.core.devices.base import Device
from homesim.core.devices.climate_control import ClimateControl
from homesim.core.devices.light import Light
from homesim.core.devices.refrigerator import Refrigerator
from homesim.core.devices.status import DeviceStatus
from homesim.core.environment import EnvironmentInputs
from homesim.core.errors import DuplicateIdentifierError, InvalidArgumentError
from homesim.core.report import DeviceEnergy, SimulationReport, SourceGeneration
from homesim.core.sources.base import RenewableSource
from homesim.core.sources.solar import SolarPanel
from homesim.core.sources.status import SourceStatus
from homesim.core.sources.wind import WindTurbine
from homesim.utils.functions import require_non_negative

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Aggregates the consumption and generation of a single home.

    The engine owns its devices and sources exclusively. Callers address them
    by name and mutate them only through the engine's methods, so the
    collections are never iterated and modified at the same time.

    The engine is not thread-safe; a host serving several homes must give each
    engine to one session at a time.

    Each call to ``step`` is a single sequential pass:
    1.  Devices: snapshot the state, then compute the energy drawn.
    2.  Sources: convert instantaneous output into energy over the interval.
    3.  Balance: net consumption is floored at zero and priced.
    """

    def __init__(self, price_per_kwh: float):
        self._price_per_kwh = require_non_negative(price_per_kwh, "Price per kWh")
        self._devices: Dict[str, Device] = {}
        self._sources: Dict[str, RenewableSource] = {}

    # ------------------------
    # Ownership
    # ------------------------
    @property
    def price_per_kwh(self) -> float:
        return self._price_per_kwh

    @property
    def device_names(self) -> Tuple[str, ...]:
        return tuple(self._devices)

    @property
    def source_names(self) -> Tuple[str, ...]:
        return tuple(self._sources)

    def add_device(self, device: Device) -> str:
        """Take ownership of ``device`` and return its name as the handle."""
        if device.name in self._devices:
            raise DuplicateIdentifierError(f"Device '{device.name}' already exists.")
        self._devices[device.name] = device
        logger.debug("Added device %r", device)
        return device.name

    def add_renewable_source(self, source: RenewableSource) -> str:
        if source.name in self._sources:
            raise DuplicateIdentifierError(f"Renewable source '{source.name}' already exists.")
        self._sources[source.name] = source
        logger.debug("Added renewable source %r", source)
        return source.name

    def _device(self, name: str, kind: type = Device):
        if name not in self._devices:
            raise KeyError(f"Device '{name}' not found.")
        device = self._devices[name]
        if not isinstance(device, kind):
            raise InvalidArgumentError(
                f"Device '{name}' is a {device.type_tag}, not a {kind.__name__}."
            )
        return device

    def _source(self, name: str, kind: type = RenewableSource):
        if name not in self._sources:
            raise KeyError(f"Renewable source '{name}' not found.")
        source = self._sources[name]
        if not isinstance(source, kind):
            raise InvalidArgumentError(
                f"Renewable source '{name}' is a {source.type_tag}, not a {kind.__name__}."
            )
        return source

    # ------------------------
    # Handle-based mutation
    # ------------------------
    def turn_on(self, name: str) -> None:
        self._device(name).turn_on()

    def turn_off(self, name: str) -> None:
        self._device(name).turn_off()

    def dim(self, name: str, level: int) -> None:
        self._device(name, Light).dim(level)

    def set_fan_speed(self, name: str, speed: int) -> None:
        self._device(name, ClimateControl).set_fan_speed(speed)

    def set_target_temperature_c(self, name: str, temperature: float) -> None:
        self._device(name, ClimateControl).set_target_temperature_c(temperature)

    def set_current_temperature_c(self, name: str, temperature: float) -> None:
        self._device(name, ClimateControl).set_current_temperature_c(temperature)

    def set_internal_temperature_c(self, name: str, temperature: float) -> None:
        self._device(name, Refrigerator).set_internal_temperature_c(temperature)

    def set_sunlight_intensity(self, name: str, intensity: float) -> None:
        self._source(name, SolarPanel).set_sunlight_intensity(intensity)

    def set_wind_speed(self, name: str, speed: float) -> None:
        self._source(name, WindTurbine).set_wind_speed(speed)

    def apply_environment(self, inputs: EnvironmentInputs) -> None:
        """
        Feed environment inputs into every matching source and device.

        All inputs are validated before anything is applied, so a rejected
        call leaves every source and device unchanged.
        """
        inputs.validate()
        for source in self._sources.values():
            if isinstance(source, SolarPanel):
                source.set_sunlight_intensity(inputs.sunlight_intensity_wm2)
            elif isinstance(source, WindTurbine):
                source.set_wind_speed(inputs.wind_speed_ms)
        if inputs.temperature_drift_c:
            for device in self._devices.values():
                if isinstance(device, ClimateControl):
                    device.set_current_temperature_c(
                        device.current_temperature_c + inputs.temperature_drift_c
                    )

    # ------------------------
    # Read access
    # ------------------------
    def describe(self, name: str) -> DeviceStatus:
        return self._device(name).describe()

    def describe_all(self) -> List[DeviceStatus]:
        return [device.describe() for device in self._devices.values()]

    def describe_source(self, name: str) -> SourceStatus:
        return self._source(name).describe()

    def describe_sources(self) -> List[SourceStatus]:
        return [source.describe() for source in self._sources.values()]

    # ------------------------
    # Simulation
    # ------------------------
    def step(self, duration_hours: float) -> SimulationReport:
        """
        Aggregate consumption, generation and cost over ``duration_hours``.

        Returns:
            SimulationReport: a fresh report; the engine keeps no reference to it.
        """
        duration_hours = require_non_negative(duration_hours, "Duration in hours")

        # --- PHASE 1: Devices ---
        total_consumption = 0.0
        device_entries = []
        for device in self._devices.values():
            status = device.describe()
            energy = device.energy_over_interval(duration_hours)
            total_consumption += energy
            device_entries.append(
                DeviceEnergy(name=device.name, energy_kwh=energy, is_on=status.is_on, status=status)
            )

        # --- PHASE 2: Sources ---
        total_generated = 0.0
        source_entries = []
        for source in self._sources.values():
            output = source.output_watts()
            energy = output * duration_hours / 1000.0
            total_generated += energy
            source_entries.append(
                SourceGeneration(name=source.name, output_watts=output, energy_kwh=energy, status=source.describe())
            )

        # --- PHASE 3: Balance ---
        # Surplus is not banked: anything above consumption is dropped.
        net_consumption = max(0.0, total_consumption - total_generated)
        cost = net_consumption * self._price_per_kwh

        logger.debug(
            "Step %.3gh: consumption=%.3f kWh, generation=%.3f kWh, net=%.3f kWh, cost=$%.4f",
            duration_hours, total_consumption, total_generated, net_consumption, cost,
        )

        return SimulationReport(
            duration_hours=duration_hours,
            price_per_kwh=self._price_per_kwh,
            total_consumption_kwh=total_consumption,
            total_generated_kwh=total_generated,
            net_consumption_kwh=net_consumption,
            cost_usd=cost,
            devices=tuple(device_entries),
            sources=tuple(source_entries),
        )

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return (
            f"<SimulationEngine("
            f"devices={list(self._devices)}, "
            f"sources={list(self._sources)}, "
            f"price_per_kwh={self._price_per_kwh})>"
        )
