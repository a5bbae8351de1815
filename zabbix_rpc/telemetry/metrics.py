"""
OpenTelemetry Metrics Collection

Counters and histograms for API calls. Instruments are created lazily from
the global MeterProvider, which is a no-op until setup_metrics() runs.
"""

import logging
from typing import Dict, Any

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

_counters = {}
_histograms = {}

def setup_metrics(service_name: str, otlp_endpoint: str = "localhost:4317", export_interval_ms: int = 5000):
    """Configure OpenTelemetry metrics collection
    
    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
    """
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=otlp_endpoint),
        export_interval_millis=export_interval_ms
    )
    provider = MeterProvider(
        metric_readers=[reader],
        resource=Resource.create({"service.name": service_name}),
    )
    metrics.set_meter_provider(provider)
    
    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")
    
    return metrics.get_meter(service_name)

def get_counter(name: str, description: str, unit: str = "1"):
    """Get or create counter"""
    if name not in _counters:
        meter = metrics.get_meter(__name__)
        _counters[name] = meter.create_counter(
            name=name,
            description=description,
            unit=unit
        )
    
    return _counters[name]

def get_histogram(name: str, description: str, unit: str = "ms"):
    """Get or create histogram"""
    if name not in _histograms:
        meter = metrics.get_meter(__name__)
        _histograms[name] = meter.create_histogram(
            name=name,
            description=description,
            unit=unit
        )
    
    return _histograms[name]

def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Increment counter value
    
    Args:
        name: Counter name
        amount: Amount to increment
        attributes: Attribute labels
    """
    counter = get_counter(name, f"Counter for {name}")
    counter.add(amount, attributes or {})

def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record latency histogram
    
    Args:
        name: Histogram name
        value_ms: Latency value in milliseconds
        attributes: Attribute labels
    """
    histogram = get_histogram(name, f"Latency histogram for {name}")
    histogram.record(value_ms, attributes or {})
