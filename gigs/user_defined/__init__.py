"""Tests of objects built from user-supplied values through the constructive factories (GIGS series 3200)."""
from .base import UserObjectTest
from .crs import UserGeodeticCRSTest, UserVerticalCRSTest
from .datum import UserGeodeticDatumTest, UserVerticalDatumTest
from .ellipsoid import UserEllipsoidTest
from .prime_meridian import UserPrimeMeridianTest

__all__ = [
    "UserObjectTest",
    "UserEllipsoidTest",
    "UserPrimeMeridianTest",
    "UserGeodeticDatumTest",
    "UserGeodeticCRSTest",
    "UserVerticalDatumTest",
    "UserVerticalCRSTest",
]
