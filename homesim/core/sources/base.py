from abc import ABC, abstractmethod

from homesim.core.sources.config import BaseSourceConfig
from homesim.core.sources.status import SourceStatus


class RenewableSource(ABC):
    """
    Abstract base class for renewable generators.

    ``output_watts`` must be a pure function of the stored parameters: calling
    it repeatedly without an intervening setter call yields the same value.
    """

    def __init__(self, config: BaseSourceConfig):
        self.config = config
        self._name = config.name
        self._efficiency = float(config.efficiency)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_tag(self) -> str:
        return self.config.type

    @property
    def efficiency(self) -> float:
        return self._efficiency

    @abstractmethod
    def output_watts(self) -> float:
        """Instantaneous power output in watts."""
        pass

    def energy_over_interval(self, hours: float) -> float:
        """Energy produced over ``hours`` at the current output, in kWh."""
        return self.output_watts() * hours / 1000.0

    @abstractmethod
    def describe(self) -> SourceStatus:
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self._name!r}, output={self.output_watts():.1f}W)>"
