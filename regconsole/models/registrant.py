"""
Registrant model for the registrations collection.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class GeoPoint(BaseModel):
    """GeoJSON Point. Coordinates are stored as [longitude, latitude]."""
    type: Literal["Point"] = "Point"
    coordinates: list[float] = Field(
        ...,
        min_length=2,
        max_length=2,
        description="[longitude, latitude]",
    )

    @classmethod
    def from_lat_lon(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(coordinates=[longitude, latitude])

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class Registrant(BaseModel):
    """
    Registrant document model for MongoDB registrations collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Registrant name")
    age: int = Field(..., description="Age in years")
    city: str = Field(..., description="City of residence")
    email: str = Field(..., description="Lookup key, not enforced unique")
    location: GeoPoint = Field(..., description="Home location")
    notes: Optional[str] = Field(None, description="Free text added after creation")

    class Config:
        populate_by_name = True

    def to_document(self) -> dict[str, Any]:
        """Document to insert. The database assigns _id."""
        return self.model_dump(exclude={"id"}, exclude_none=True)
