from homesim.core.sources.base import RenewableSource
from homesim.core.sources.config import SolarPanelConfig, SourceConfig, WindTurbineConfig
from homesim.core.sources.solar import SolarPanel
from homesim.core.sources.wind import WindTurbine

__all__ = [
    "RenewableSource",
    "SourceConfig",
    "SolarPanel",
    "SolarPanelConfig",
    "WindTurbine",
    "WindTurbineConfig",
]
