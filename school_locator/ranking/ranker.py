"""Great-circle distance and nearest-first ordering of schools."""

import math
from collections.abc import Iterable

from school_locator.models.coordinate import Coordinate
from school_locator.models.school import RankedSchool, School

EARTH_RADIUS_KM = 6371


def haversine_km(origin: Coordinate, destination: Coordinate) -> float:
    """Return the haversine great-circle distance between two points.

    Args:
        origin: First coordinate, in degrees.
        destination: Second coordinate, in degrees.

    Returns:
        Distance in kilometres on a sphere of radius EARTH_RADIUS_KM.
    """
    d_lat = math.radians(destination.latitude - origin.latitude)
    d_lon = math.radians(destination.longitude - origin.longitude)
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # a can round to just above 1 for antipodal points
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))


def rank_schools(query: Coordinate, schools: Iterable[School]) -> list[RankedSchool]:
    """Annotate schools with their distance from query, nearest first.

    Schools at exactly the same distance keep their input order (the sort is
    stable); no other tie-break is applied.

    Args:
        query: Validated query coordinate.
        schools: Any number of stored schools, possibly none.

    Returns:
        One RankedSchool per input school, sorted by ascending distance.
    """
    ranked = [
        RankedSchool(
            **school.model_dump(), distance=haversine_km(query, school.coordinate)
        )
        for school in schools
    ]
    return sorted(ranked, key=lambda school: school.distance)
