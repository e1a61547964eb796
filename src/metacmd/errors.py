"""Custom exception hierarchy for metacmd."""


class MetacmdError(Exception):
    """Base exception for app-specific failures."""


class SinkWriteError(MetacmdError):
    """The output destination rejected a write."""


class RegistryError(ValueError, MetacmdError):
    """Registry construction invariants were violated."""


class ConfigError(ValueError, MetacmdError):
    """Registry file loading/validation errors."""
