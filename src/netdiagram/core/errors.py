"""Exception hierarchy for diagram building."""


class NetDiagramError(Exception):
    """Base class for all netdiagram errors."""


class ConfigurationError(NetDiagramError):
    """Field metadata cannot describe a diagram (e.g. fewer than two fields)."""


class InputError(NetDiagramError):
    """An input document (query result, service map, options file) is unreadable or invalid."""


__all__ = ["NetDiagramError", "ConfigurationError", "InputError"]
