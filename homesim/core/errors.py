"""Error taxonomy shared by the device, source and engine layers."""


class HomeSimError(Exception):
    """Base class for all homesim errors."""


class InvalidArgumentError(HomeSimError, ValueError):
    """An input is out of range. The rejected call leaves state unchanged."""


class DuplicateIdentifierError(HomeSimError, ValueError):
    """A device or source with the same name is already owned by the engine."""


class UnknownDeviceTypeError(HomeSimError, ValueError):
    """A type tag does not match any registered device or source."""
