from typing import Any, Iterable, Mapping

import dacite

from homesim.core.errors import UnknownDeviceTypeError
from homesim.core.registry import registry
from homesim.core.sources.base import RenewableSource
from homesim.core.sources.config import BaseSourceConfig
from homesim.utils.converter import DACITE_CONFIG


def source_config_from_dict(data: Mapping[str, Any]) -> BaseSourceConfig:
    """Parse a raw mapping into a renewable source config."""
    tag = data.get("type")
    if tag not in registry.sources:
        raise UnknownDeviceTypeError(f"Unknown renewable source type: {tag!r}")
    config_cls, _ = registry.sources[tag]
    return dacite.from_dict(config_cls, dict(data), config=DACITE_CONFIG)


def build_source(config: BaseSourceConfig) -> RenewableSource:
    """Builds a renewable source based on its configuration."""
    if config.type not in registry.sources:
        raise UnknownDeviceTypeError(f"Source config '{config.__class__.__name__}' not found in registry.")
    _, source_cls = registry.sources[config.type]
    return source_cls(config)


def build_sources(configs: Iterable[BaseSourceConfig]) -> Iterable[RenewableSource]:
    return (build_source(config) for config in configs)
