"""
Configuration settings for the Zabbix API client
"""
import os
from typing import Dict, Any, Optional
from dataclasses import dataclass

_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass
class ClientConfig:
    """Connection and telemetry settings for ZabbixAPI"""
    url: str
    user: Optional[str] = None
    password: Optional[str] = None
    timeout: float = 30.0
    verify_tls: bool = True

    # Tracing configuration
    enable_tracing: bool = False
    service_name: str = "zabbix-rpc"
    otlp_endpoint: str = "localhost:4317"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        url = os.getenv("ZABBIX_URL")
        if not url:
            raise ValueError("ZABBIX_URL environment variable is required")

        timeout = os.getenv("ZABBIX_TIMEOUT")
        try:
            timeout_seconds = float(timeout) if timeout else 30.0
        except ValueError:
            raise ValueError(f"ZABBIX_TIMEOUT must be a number, got {timeout!r}")

        return cls(
            url=url,
            user=os.getenv("ZABBIX_USER"),
            password=os.getenv("ZABBIX_PASSWORD"),
            timeout=timeout_seconds,
            verify_tls=_env_flag("ZABBIX_VERIFY_TLS", True),
            enable_tracing=_env_flag("ZABBIX_ENABLE_TRACING", False),
            service_name=os.getenv("OTEL_SERVICE_NAME", "zabbix-rpc"),
            otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "localhost:4317"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging; the password is masked"""
        return {
            "url": self.url,
            "user": self.user,
            "password": "***" if self.password else None,
            "timeout": self.timeout,
            "verify_tls": self.verify_tls,
            "enable_tracing": self.enable_tracing,
            "service_name": self.service_name,
            "otlp_endpoint": self.otlp_endpoint,
        }
