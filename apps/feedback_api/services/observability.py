from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SimpleSpanProcessor


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in {"1", "true", "yes"}


@dataclass(slots=True, frozen=True)
class ObservabilityConfig:
    service_name: str = "feedback-service"
    environment: str = "dev"
    otlp_endpoint: str = ""
    console_spans: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ObservabilityConfig":
        return cls(
            service_name=os.getenv("OTEL_SERVICE_NAME", "feedback-service"),
            environment=os.getenv("ENV", "dev"),
            otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", ""),
            console_spans=_env_flag("OBS_CONSOLE_DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


_INITIALIZED = False


def setup_observability(cfg: ObservabilityConfig | None = None) -> None:
    """Logging + providers OTel del proceso. Idempotente.

    Sin OTEL_EXPORTER_OTLP_ENDPOINT los providers no exportan nada (tests/local).
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    cfg = cfg or ObservabilityConfig.from_env()

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    resource = Resource.create({"service.name": cfg.service_name, "deployment.environment": cfg.environment})

    tracer_provider = TracerProvider(resource=resource)
    readers = []
    if cfg.otlp_endpoint:
        tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=cfg.otlp_endpoint)))
        readers.append(
            PeriodicExportingMetricReader(OTLPMetricExporter(endpoint=cfg.otlp_endpoint), export_interval_millis=10_000)
        )
    if cfg.console_spans:
        tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(tracer_provider)
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=readers))

    _INITIALIZED = True


def get_tracer(name: str = "apps.feedback_api"):
    return trace.get_tracer(name)


def get_meter(name: str = "apps.feedback_api"):
    return metrics.get_meter(name)


def attrs_safe(d: dict[str, Any]) -> dict[str, Any]:
    """Atributos de span: descarta None y convierte lo no escalar a str."""
    return {
        k: v if isinstance(v, (str, int, float, bool)) else str(v)
        for k, v in d.items()
        if v is not None
    }
