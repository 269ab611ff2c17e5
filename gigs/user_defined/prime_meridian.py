"""User-defined prime meridians (GIGS 3203)."""
from typing import Any, Optional

from ..asserts import assert_close, assert_equal
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..referencing import DatumFactory
from ..structure import ANGULAR_TOLERANCE, verify_prime_meridian
from ..units import Unit, Units
from ..validators import Validators
from .base import PRESERVING, UserObjectTest


class UserPrimeMeridianTest(UserObjectTest):
    """
    Attributes:
        longitude_in_degrees: Greenwich longitude converted to degrees
        greenwich_longitude: Greenwich longitude in ``angular_unit``
        angular_unit: Unit given to the factory
    """

    series = 3203
    type_name = "PrimeMeridian"
    factory_roles = (ConfigurationKey.DATUM_FACTORY,)

    def __init__(
        self,
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_factory = datum_factory
        self.longitude_in_degrees = float("nan")
        self.greenwich_longitude = float("nan")
        self.angular_unit: Unit = Units.DEGREE

    def create_object(self) -> Any:
        factory = require_factory(self.datum_factory, "datum factory")
        return factory.create_prime_meridian(self.properties, self.greenwich_longitude, self.angular_unit)

    def verify(self) -> None:
        if self.skip_tests:
            return
        prime_meridian = self.verify_object("PrimeMeridian")
        if self.is_factory_preserving_user_values:
            assert_equal(self.angular_unit, prime_meridian.angular_unit, "PrimeMeridian.angular_unit", key=PRESERVING)
            assert_close(self.greenwich_longitude, prime_meridian.greenwich_longitude,
                         Units.DEGREE.convert_to(ANGULAR_TOLERANCE, self.angular_unit),
                         "PrimeMeridian.greenwich_longitude", key=PRESERVING)
        self.verify_identification(prime_meridian, "PrimeMeridian")
        verify_prime_meridian(prime_meridian, self.longitude_in_degrees, Units.DEGREE, "PrimeMeridian")

    @gigs_case("GIGS PM A")
    def gigs_68901(self):
        self.set_code_and_name(68901, "GIGS PM A")
        self.longitude_in_degrees = 0.0
        self.greenwich_longitude = 0.0
        self.angular_unit = Units.DEGREE
        self.verify()

    @gigs_case("GIGS PM H")
    def gigs_68903(self):
        self.set_code_and_name(68903, "GIGS PM H")
        self.longitude_in_degrees = 2.33722917
        self.greenwich_longitude = 2.5969213
        self.angular_unit = Units.GRAD
        self.verify()


__all__ = [
    "UserPrimeMeridianTest",
]
