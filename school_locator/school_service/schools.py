"""School registration and nearest-first listing."""

from collections.abc import Mapping
from typing import Any

from school_locator.logging_config import logger
from school_locator.models.school import RankedSchool, School
from school_locator.ranking.ranker import rank_schools
from school_locator.storage.store import SchoolStore
from school_locator.validation.validator import validate_creation, validate_query


def add_school(payload: Any, store: SchoolStore) -> School:
    """Validate a creation payload and store the school.

    Args:
        payload: Decoded request body.
        store: Storage handle to write to.

    Returns:
        The stored school with its identifier.

    Raises:
        ValidationError: If the payload is invalid; nothing is stored.
        StorageFailure: If the store rejects the write.
    """
    school = validate_creation(payload)
    created = store.create_school(school)
    logger.info("SCHOOL_CREATED", school_id=created.id, name=created.name)
    return created


def list_schools(params: Mapping, store: SchoolStore) -> list[RankedSchool]:
    """Return all stored schools ordered by distance from the query point.

    Args:
        params: Query parameters with latitude and longitude.
        store: Storage handle to read from.

    Returns:
        Every stored school, nearest first, with its distance in km.

    Raises:
        ValidationError: If the query coordinate is invalid.
        StorageFailure: If the store cannot be read.
    """
    query = validate_query(params)
    ranked = rank_schools(query, store.list_schools())
    logger.info(
        "SCHOOLS_RANKED",
        latitude=query.latitude,
        longitude=query.longitude,
        count=len(ranked),
    )
    return ranked
