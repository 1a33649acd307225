"""
Registrant request/report schemas.
"""
from pydantic import BaseModel, Field

from regconsole.models.registrant import GeoPoint, Registrant


class RegistrantCreate(BaseModel):
    """New registrant as entered by the operator (prompt order)."""
    name: str = Field(..., min_length=1)
    age: int
    city: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    latitude: float
    longitude: float

    def to_registrant(self) -> Registrant:
        return Registrant(
            name=self.name,
            age=self.age,
            city=self.city,
            email=self.email,
            location=GeoPoint.from_lat_lon(self.latitude, self.longitude),
        )


class DomainCount(BaseModel):
    """Number of registrants sharing an email domain."""
    domain: str
    count: int


class DomainHistogram(BaseModel):
    """Domain counts sorted by count descending, plus the collection total."""
    domains: list[DomainCount] = Field(default_factory=list)
    total_registrants: int = Field(
        0,
        description="count_documents({}), may exceed the summed domain counts",
    )

    def as_dict(self) -> dict[str, int]:
        return {d.domain: d.count for d in self.domains}
