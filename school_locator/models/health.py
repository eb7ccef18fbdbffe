"""Models for the /health endpoint."""

from enum import Enum

from pydantic import BaseModel


class ServiceStatus(str, Enum):
    """Whether a backing service answered its health check."""

    available = "available"
    not_available = "not_available"


class Dependencies(BaseModel):
    """Status of the Redis record store."""

    redis: ServiceStatus


class HealthResponse(BaseModel):
    """Health payload: overall status plus record store reachability."""

    status: str
    dependencies: Dependencies
