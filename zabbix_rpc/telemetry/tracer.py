"""
OpenTelemetry tracing

Configures the tracer provider and opens spans around API calls. Without
setup_tracer() the global no-op provider is used and spans cost nothing.
"""

import logging
from typing import Dict, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

TRACER_NAME = "zabbix_rpc"

def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer
    
    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        
    Returns:
        Tracer for the service
    """
    provider = TracerProvider(
        sampler=ALWAYS_ON,
        resource=Resource.create({"service.name": service_name}),
    )
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)
    
    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")
    
    return trace.get_tracer(service_name)

def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new client span
    
    Args:
        name: Span name
        attributes: Span attributes
        
    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(TRACER_NAME)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.CLIENT,
    )
