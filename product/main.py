"""Product Service Main Entry Point.

분산 트레이싱 통합 (otel_enabled일 때만):
- FastAPI 자동 계측 (HTTP 요청/응답)
- Redis 자동 계측 (캐시)
- SQLAlchemy 자동 계측 (일괄 조회)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product.infrastructure.observability import (
    instrument_fastapi,
    instrument_redis,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from product.presentation.http.controllers import comparison_router, health_router
from product.presentation.http.errors import register_exception_handlers
from product.setup.config import get_settings
from product.setup.database import close_redis, engine
from product.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()

setup_logging(settings.log_level)

# OpenTelemetry 분산 트레이싱 설정
if settings.otel_enabled:
    setup_tracing(
        settings.service_name,
        endpoint=settings.otel_exporter_otlp_endpoint,
        sampling_rate=settings.otel_sampling_rate,
        environment=settings.environment,
    )
    instrument_redis()
    instrument_sqlalchemy(engine)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    logger.info(
        "Starting Product API service",
        extra={
            "environment": settings.environment,
            "cache_enabled": settings.cache_enabled,
            "cache_ttl": settings.cache_ttl_seconds,
        },
    )

    yield

    # Cleanup
    logger.info("Shutting down Product API service")
    shutdown_tracing()
    await close_redis()
    await engine.dispose()


def create_app() -> FastAPI:
    """FastAPI 앱을 생성합니다."""
    app = FastAPI(
        title="Product API",
        description="상품 비교 조회 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(comparison_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
