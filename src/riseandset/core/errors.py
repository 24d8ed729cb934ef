class RiseAndSetError(Exception):
    """Base error."""

class UnknownHorizonError(RiseAndSetError, KeyError):
    """Raised when a horizon / twilight name is not in HORIZON_ANGLES."""

class OptionalDependencyError(RiseAndSetError, RuntimeError):
    """Raised when an optional extra (diagnostics, ephemeris) is not installed."""
