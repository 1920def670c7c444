"""OpenTelemetry Tracing - Product Service.

설정(otel_enabled)이 꺼져 있으면 모든 함수가 아무 것도 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_enabled = False


def setup_tracing(
    service_name: str,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC 수집기 주소
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)
        environment: 배포 환경

    Returns:
        설정 성공 여부
    """
    global _enabled

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor
    from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

    try:
        resource = Resource.create(
            {
                "service.name": service_name,
                "deployment.environment": environment,
            }
        )
        provider = TracerProvider(
            resource=resource,
            sampler=TraceIdRatioBased(sampling_rate),
        )
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )
        trace.set_tracer_provider(provider)
    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False

    _enabled = True
    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": service_name,
            "endpoint": endpoint,
            "sampling_rate": sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측."""
    if not _enabled:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
    logger.info("FastAPI instrumentation enabled")


def instrument_redis() -> None:
    """Redis 자동 계측 (캐시 추적)."""
    if not _enabled:
        return

    from opentelemetry.instrumentation.redis import RedisInstrumentor

    RedisInstrumentor().instrument()
    logger.info("Redis instrumentation enabled")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """SQLAlchemy 자동 계측 (일괄 조회 쿼리 추적)."""
    if not _enabled:
        return

    from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.info("SQLAlchemy instrumentation enabled")


def shutdown_tracing() -> None:
    """TracerProvider flush 후 종료."""
    global _enabled
    if not _enabled:
        return

    from opentelemetry import trace

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()
    _enabled = False
    logger.info("OpenTelemetry tracing shut down")
