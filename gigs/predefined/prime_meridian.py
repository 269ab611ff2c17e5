"""Prime meridians created from EPSG codes (GIGS 2203)."""
from typing import Any, Optional

from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..referencing import DatumAuthorityFactory
from ..structure import verify_prime_meridian
from ..units import Units
from ..validators import Validators
from .base import PredefinedObjectTest


class PrimeMeridianTest(PredefinedObjectTest):
    """
    Attributes:
        greenwich_longitude: Expected longitude in decimal degrees; compared in
            whatever angular unit the implementation uses
    """

    series = 2203
    type_name = "PrimeMeridian"
    factory_roles = (ConfigurationKey.DATUM_AUTHORITY_FACTORY,)

    def __init__(
        self,
        datum_authority_factory: Optional[DatumAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_authority_factory = datum_authority_factory
        self.greenwich_longitude: float = float("nan")

    def create_object(self, code: str) -> Any:
        return require_factory(self.datum_authority_factory, "datum authority factory").create_prime_meridian(code)

    def verify(self) -> None:
        pm = self.verify_object("PrimeMeridian")
        self.verify_identification(pm, "PrimeMeridian", exactly_one=False)
        verify_prime_meridian(pm, self.greenwich_longitude, Units.DEGREE, "PrimeMeridian")

    @gigs_case("Greenwich")
    def epsg_8901(self):
        self.code = 8901
        self.name = "Greenwich"
        self.greenwich_longitude = 0.0
        self.verify()

    @gigs_case("Paris")
    def epsg_8903(self):
        self.code = 8903
        self.name = "Paris"
        self.greenwich_longitude = 2.33722917
        self.verify()

    @gigs_case("Oslo")
    def epsg_8913(self):
        self.code = 8913
        self.name = "Oslo"
        self.aliases = ("Kristiania", "Christiana")
        self.greenwich_longitude = 10.722916666666666
        self.verify()


__all__ = [
    "PrimeMeridianTest",
]
