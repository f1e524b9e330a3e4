from homesim.core.registry import register_source
from homesim.core.sources.base import RenewableSource
from homesim.core.sources.config import SolarPanelConfig
from homesim.core.sources.status import SolarPanelStatus
from homesim.utils.functions import require_non_negative


@register_source(SolarPanelConfig)
class SolarPanel(RenewableSource):
    """Photovoltaic panel: output = area × irradiance × efficiency."""

    def __init__(self, config: SolarPanelConfig):
        super().__init__(config)
        self._surface_area_m2 = float(config.surface_area_m2)
        self._sunlight_intensity_wm2 = float(config.sunlight_intensity_wm2)

    @property
    def surface_area_m2(self) -> float:
        return self._surface_area_m2

    @property
    def sunlight_intensity_wm2(self) -> float:
        return self._sunlight_intensity_wm2

    def set_sunlight_intensity(self, intensity: float) -> None:
        """Set irradiance in W/m². Negative values are rejected, not clamped."""
        self._sunlight_intensity_wm2 = require_non_negative(intensity, "Sunlight intensity")

    def output_watts(self) -> float:
        return self._surface_area_m2 * self._sunlight_intensity_wm2 * self._efficiency

    def describe(self) -> SolarPanelStatus:
        return SolarPanelStatus(
            name=self.name,
            type=self.type_tag,
            efficiency=self._efficiency,
            output_watts=self.output_watts(),
            surface_area_m2=self._surface_area_m2,
            sunlight_intensity_wm2=self._sunlight_intensity_wm2,
        )
