"""Ready-made implementations of the factory interfaces, for running the suite against existing libraries."""

from .pyproj_factory import PyprojAuthorityFactory

__all__ = [
    "PyprojAuthorityFactory",
]
