from dataclasses import dataclass, field, fields


@dataclass
class Registry:
    """A central registry mapping type tags to config and implementation classes."""
    devices: dict = field(default_factory=dict)
    sources: dict = field(default_factory=dict)

registry = Registry()


def type_tag(config_cls) -> str:
    """Return the default value of the ``type`` field of a config dataclass."""
    for f in fields(config_cls):
        if f.name == "type":
            return f.default
    raise ValueError(f"Config '{config_cls.__name__}' has no 'type' field.")


def register_device(config_cls):
    """Decorator to register a device class with its config class."""
    def decorator(cls):
        registry.devices[type_tag(config_cls)] = (config_cls, cls)
        return cls
    return decorator


def register_source(config_cls):
    """Decorator to register a renewable source class with its config class."""
    def decorator(cls):
        registry.sources[type_tag(config_cls)] = (config_cls, cls)
        return cls
    return decorator
