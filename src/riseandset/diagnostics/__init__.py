"""Diagnostics package.

- diagnostics: light-weight checks (numpy + matplotlib, no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras + a JPL DE file)
"""

from ..core.errors import OptionalDependencyError


def need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise OptionalDependencyError('Need matplotlib. Install: pip install "riseandset[diagnostics]"') from e


__all__ = ["day_length", "need_matplotlib"]
