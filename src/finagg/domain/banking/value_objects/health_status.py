"""Health probe payload."""

from pydantic import BaseModel, ConfigDict


class HealthStatus(BaseModel):
    """Free-form liveness payload; unknown keys are kept as extras."""

    status: str = "unknown"
    timestamp: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_healthy(self) -> bool:
        return self.status.lower() in ("healthy", "ok")
