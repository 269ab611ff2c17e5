"""Tests of objects the library under test creates from EPSG codes (GIGS series 2200)."""
from .base import PredefinedObjectTest
from .crs import GeodeticCRSTest, ProjectedCRSTest, VerticalCRSTest
from .datum import GeodeticDatumTest, VerticalDatumTest
from .ellipsoid import EllipsoidTest
from .operation import ConversionTest, TransformationTest
from .prime_meridian import PrimeMeridianTest

__all__ = [
    "PredefinedObjectTest",
    "EllipsoidTest",
    "PrimeMeridianTest",
    "GeodeticDatumTest",
    "GeodeticCRSTest",
    "ConversionTest",
    "ProjectedCRSTest",
    "TransformationTest",
    "VerticalDatumTest",
    "VerticalCRSTest",
]
