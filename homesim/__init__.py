from homesim.core.environment import EnvironmentInputs
from homesim.core.report import SimulationReport
from homesim.sim.config import HomeSimulationConfig, load_config
from homesim.sim.engine import SimulationEngine
from homesim.sim.factory import SimulatorFactory

__all__ = [
 "EnvironmentInputs",
 "HomeSimulationConfig",
 "SimulationEngine",
 "SimulationReport",
 "SimulatorFactory",
 "load_config",
]
