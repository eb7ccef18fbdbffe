"""Redis-backed storage for school records."""

import json

from redis import Redis
from redis.exceptions import RedisError

from school_locator.config import Settings
from school_locator.logging_config import logger
from school_locator.models.school import School, SchoolCreate

NEXT_ID_KEY = "school:next_id"
INDEX_KEY = "schools"


class StorageFailure(Exception):
    """Raised when the record store cannot complete an operation."""

    def __init__(self, message: str = "Storage failure"):
        self.message = message
        super().__init__(message)


def school_key(school_id: int) -> str:
    """Return the Redis key holding one school document."""
    return f"school:{school_id}"


def build_redis_client(settings: Settings) -> Redis:
    """Create the process-wide Redis client.

    Args:
        settings: Settings carrying the Redis connection details.

    Returns:
        A Redis client that decodes responses to str.
    """
    return Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        decode_responses=True,
    )


class SchoolStore:
    """Store wrapper for creating and listing School models."""

    def __init__(self, client):
        self.redis_client: Redis = client

    def create_school(self, school: SchoolCreate) -> School:
        """Persist a new school and assign it the next identifier.

        Args:
            school: Validated creation payload.

        Returns:
            The stored School including its identifier.

        Raises:
            StorageFailure: If Redis rejects the write.
        """
        try:
            school_id = int(self.redis_client.incr(NEXT_ID_KEY))
            stored = School(id=school_id, **school.model_dump())
            pipe = self.redis_client.pipeline(transaction=True)
            pipe.set(school_key(school_id), stored.model_dump_json())
            pipe.rpush(INDEX_KEY, school_id)
            pipe.execute()
        except RedisError as exc:
            logger.error("STORAGE_CREATE_FAILED", name=school.name, error=str(exc))
            raise StorageFailure("Failed to create school") from exc
        return stored

    def list_schools(self) -> list[School]:
        """Return every stored school in insertion order.

        Raises:
            StorageFailure: If Redis cannot be read.
        """
        try:
            ids = self.redis_client.lrange(INDEX_KEY, 0, -1)
            documents = (
                self.redis_client.mget([school_key(int(i)) for i in ids]) if ids else []
            )
        except RedisError as exc:
            logger.error("STORAGE_LIST_FAILED", error=str(exc))
            raise StorageFailure("Failed to fetch schools") from exc
        return [School(**json.loads(doc)) for doc in documents if doc]

    def ping(self) -> bool:
        """Check that Redis answers."""
        return bool(self.redis_client.ping())
