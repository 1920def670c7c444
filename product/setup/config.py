"""Product Service Configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Product 서비스 설정."""

    # Service
    service_name: str = "product-api"
    environment: str = "development"
    log_level: str = "INFO"

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "product"
    postgres_password: str = "product"
    postgres_db: str = "product"
    database_url_override: str | None = None

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_url_override: str | None = None

    # Product cache
    cache_enabled: bool = True
    cache_ttl_seconds: int = 3600
    cache_key_prefix: str = "products_"

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = 1.0

    @property
    def database_url(self) -> str:
        """PostgreSQL 연결 URL."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def redis_url(self) -> str:
        """Redis 연결 URL."""
        if self.redis_url_override:
            return self.redis_url_override
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    model_config = {"env_prefix": "", "case_sensitive": False}


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
