"""Settings for the ambient pieces around the middleware.

The middleware itself is configured only through ``MetricsMiddlewareOptions``;
these settings drive logging, the Prometheus adapter and the sidecar server.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = Field("INFO", description="Root logging level")
    METRICS_NAMESPACE: str = Field(
        "routestats",
        description="Prefix for the Prometheus metric families",
    )
    METRICS_HOST: str = Field("0.0.0.0", description="Bind address of the metrics sidecar")
    METRICS_PORT: int = Field(9102, description="Port of the metrics sidecar")


settings = Settings()
