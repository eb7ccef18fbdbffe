"""School models for creation, storage and ranked listings."""

from pydantic import BaseModel, Field

from school_locator.models.coordinate import Coordinate, Degrees


class SchoolCreate(BaseModel):
    """A validated school creation payload."""

    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    latitude: Degrees
    longitude: Degrees


class School(SchoolCreate):
    """A stored school with its storage-assigned identifier."""

    id: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class RankedSchool(School):
    """A school annotated with its distance in km from one query point."""

    distance: float = Field(ge=0)
