"""Conversions (GIGS 2206) and transformations (GIGS 2208) created from EPSG codes."""
from typing import Any, Optional, Sequence

from ..asserts import assert_equal, assert_not_none
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..naming import assert_name_equals, get_name
from ..parameters import ExpectedParameter
from ..referencing import CoordinateOperationAuthorityFactory
from ..units import Units
from ..validators import Validators
from .base import PredefinedObjectTest


class _OperationTest(PredefinedObjectTest):
    factory_roles = (ConfigurationKey.COP_AUTHORITY_FACTORY,)

    def __init__(
        self,
        cop_authority_factory: Optional[CoordinateOperationAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.cop_authority_factory = cop_authority_factory
        self.method_name: Optional[str] = None

    def create_object(self, code: str) -> Any:
        factory = require_factory(self.cop_authority_factory, "coordinate operation authority factory")
        return factory.create_coordinate_operation(code)

    def verify_method(self, operation: Any, path: str) -> None:
        method = assert_not_none(operation.method, f"{path}.method")
        assert_name_equals(self.method_name, get_name(method), f"{path}.method.name")


def _transverse_mercator(central_meridian: float) -> Sequence[ExpectedParameter]:
    return (
        ExpectedParameter("Latitude of natural origin", 0.0, Units.DEGREE),
        ExpectedParameter("Longitude of natural origin", central_meridian, Units.DEGREE),
        ExpectedParameter("Scale factor at natural origin", 0.9996, Units.UNITY),
        ExpectedParameter("False easting", 500000.0, Units.METRE),
        ExpectedParameter("False northing", 0.0, Units.METRE),
    )


class ConversionTest(_OperationTest):
    """
    Conversion names are compared in prefix mode, since one case may cover
    a series of zones.

    Attributes:
        method_name: Expected operation method name
        parameters: Expected parameter values, possibly empty
    """

    series = 2206
    type_name = "Conversion"

    def __init__(
        self,
        cop_authority_factory: Optional[CoordinateOperationAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(cop_authority_factory, overrides, validators)
        self.parameters: Sequence[ExpectedParameter] = ()

    def verify(self) -> None:
        conversion = self.verify_object("Conversion")
        self.verify_identification(conversion, "Conversion", full_name=False, exactly_one=False)
        self.verify_method(conversion, "Conversion")
        for parameter in self.parameters:
            parameter.verify(conversion.parameters)

    def verify_code(self, code: int) -> None:
        """Test one more code with the current expectations."""
        self.reset(code)
        self.verify()

    @gigs_case("UTM zone 31N")
    def epsg_16031(self):
        self.name = "UTM zone 31N"
        self.method_name = "Transverse Mercator"
        self.parameters = _transverse_mercator(3.0)
        self.verify_code(16031)

    @gigs_case("UTM zones 29N to 33N")
    def various_utm_north(self):
        self.name = "UTM zone"
        self.method_name = "Transverse Mercator"
        for code in range(16029, 16034):
            self.verify_code(code)

    @gigs_case("3-degree Gauss-Kruger CM 12E")
    def epsg_16364(self):
        self.name = "3-degree Gauss-Kruger CM 12E"
        self.aliases = ("3-deg Gauss-Kruger 12E",)
        self.method_name = "Transverse Mercator"
        self.verify_code(16364)


class TransformationTest(_OperationTest):
    """
    Attributes:
        method_name: Expected operation method name
        version: Expected operation version, checked only if supported
    """

    series = 2208
    type_name = "Transformation"
    flag_keys = PredefinedObjectTest.flag_keys + (ConfigurationKey.IS_OPERATION_VERSION_SUPPORTED,)

    def __init__(
        self,
        cop_authority_factory: Optional[CoordinateOperationAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(cop_authority_factory, overrides, validators)
        self.version: Optional[str] = None

    def verify(self) -> None:
        transformation = self.verify_object("Transformation")
        self.verify_identification(transformation, "Transformation")
        self.verify_method(transformation, "Transformation")
        if self.is_operation_version_supported:
            assert_equal(self.version, transformation.operation_version, "Transformation.operation_version",
                         key=ConfigurationKey.IS_OPERATION_VERSION_SUPPORTED)

    @gigs_case("AGD66 to GDA94 (11)")
    def epsg_1803(self):
        self.code = 1803
        self.name = "AGD66 to GDA94 (11)"
        self.aliases = ("AGD66 to GDA94 [GA v2]",)
        self.version = "ICSM-Aus 0.1m"
        self.method_name = "NTv2"
        self.verify()

    @gigs_case("AGD84 to GDA94 (5)")
    def epsg_1804(self):
        self.code = 1804
        self.name = "AGD84 to GDA94 (5)"
        self.aliases = ("AGD84 to GDA94 [GA v2]",)
        self.version = "Auslig-Aus 0.1m"
        self.method_name = "NTv2"
        self.verify()

    @gigs_case("AGD66 to WGS 84 (17)")
    def epsg_15786(self):
        self.code = 15786
        self.name = "AGD66 to WGS 84 (17)"
        self.version = "OGP-Aus 0.1m"
        self.method_name = "NTv2"
        self.verify()


__all__ = [
    "ConversionTest",
    "TransformationTest",
]
