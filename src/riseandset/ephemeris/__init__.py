"""Ephemeris adapters/providers (optional).

Used only to validate the sunrise equation against a numerical ephemeris.
Install with:
  pip install "riseandset[ephemeris]"
"""

from ..core.errors import OptionalDependencyError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise OptionalDependencyError('Ephemeris support requires: pip install "riseandset[ephemeris]"') from e
