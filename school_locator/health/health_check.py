"""Health check for the Redis record store."""

from redis.exceptions import RedisError

from school_locator.logging_config import logger
from school_locator.models.health import ServiceStatus
from school_locator.storage.store import SchoolStore


def is_redis_available(store: SchoolStore) -> ServiceStatus:
    """Check Redis connectivity.

    Args:
        store: Store whose Redis client is pinged.

    Returns:
        ServiceStatus.available when Redis responds, else not_available.
    """
    try:
        store.ping()
        logger.info("REDIS CONNECTED")
        return ServiceStatus.available
    except RedisError as exc:
        logger.error("REDIS UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
