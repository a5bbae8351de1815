"""
Zabbix JSON-RPC API client

Sends JSON-RPC 2.0 requests to the Zabbix API over HTTP, keeps the auth token
obtained by login, and picks protocol variants by the remote API version:

- ZabbixAPI: call / call_with_error, login, version
- codec: request/response envelopes and typed result helpers
- errors: TransportError, MalformedResponse, ProtocolError, ...
"""

from .client import ZabbixAPI
from .codec import (
    Params,
    RequestEnvelope,
    ResponseEnvelope,
    expect_at_least,
    expect_list,
    expect_one,
    expect_str,
)
from .config import ClientConfig
from .errors import (
    ExpectedMore,
    ExpectedOneResult,
    InvalidRequest,
    MalformedResponse,
    ProtocolError,
    TransportError,
    UnexpectedResultShape,
    VersionParseError,
    ZabbixError,
)
from .session import Version, parse_version

__version__ = "0.1.0"

__all__ = [
    "ZabbixAPI",
    "ClientConfig",
    "Params",
    "RequestEnvelope",
    "ResponseEnvelope",
    "Version",
    "parse_version",
    "expect_str",
    "expect_list",
    "expect_one",
    "expect_at_least",
    "ZabbixError",
    "TransportError",
    "InvalidRequest",
    "MalformedResponse",
    "ProtocolError",
    "UnexpectedResultShape",
    "VersionParseError",
    "ExpectedOneResult",
    "ExpectedMore",
]
