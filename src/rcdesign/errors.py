"""Custom exceptions for RC circuit enumeration."""


class CircuitValidationError(ValueError):
    """Raised when a circuit or component value is invalid."""


class InvalidCircuitError(CircuitValidationError):
    """Raised when a circuit cannot be built from the given components."""


class ConfigError(ValueError):
    """Raised when a search configuration is malformed."""
