from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response."""

    version: str
    status: str
    timestamp: str
    database: str
