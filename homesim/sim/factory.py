import logging
from typing import Optional

from homesim.core.data.drivers import EnvironmentDriver, build_driver
from homesim.core.devices.factory import build_devices
from homesim.core.sources.factory import build_sources
from homesim.sim.config import HomeSimulationConfig
from homesim.sim.engine import SimulationEngine
from homesim.sim.runner import ScenarioRunner

logger = logging.getLogger(__name__)


class SimulatorFactory:
    @staticmethod
    def create_engine(config: HomeSimulationConfig) -> SimulationEngine:
        """Create an engine owning every configured device and source."""
        engine = SimulationEngine(price_per_kwh=config.price_per_kwh)
        for device in build_devices(config.devices):
            engine.add_device(device)
        for source in build_sources(config.sources):
            engine.add_renewable_source(source)
        logger.info("Created %r", engine)
        return engine

    @staticmethod
    def create_driver(config: HomeSimulationConfig) -> Optional[EnvironmentDriver]:
        if config.environment is None:
            return None
        return build_driver(config.environment)

    @staticmethod
    def create_runner(config: HomeSimulationConfig) -> ScenarioRunner:
        """Create a runner for the configured schedule and environment."""
        driver = SimulatorFactory.create_driver(config)
        if driver is None:
            raise ValueError("A scenario runner needs an 'environment' section in the config.")
        return ScenarioRunner(
            engine=SimulatorFactory.create_engine(config),
            driver=driver,
            schedule=config.schedule,
            step_hours=config.step_hours,
        )
