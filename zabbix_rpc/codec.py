"""
JSON-RPC 2.0 envelope codec

Converts between Python values and the request/response bodies exchanged
with the Zabbix API, plus typed extraction helpers for the dynamic
``result`` payload.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from zabbix_rpc.errors import (
    ExpectedMore,
    ExpectedOneResult,
    InvalidRequest,
    MalformedResponse,
    ProtocolError,
    UnexpectedResultShape,
)

JSONRPC_VERSION = "2.0"

# Request and response ids are signed 32-bit integers
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

# Named params object; params and results may also be any other JSON value
Params = Dict[str, Any]


@dataclass(frozen=True)
class RequestEnvelope:
    """Outbound JSON-RPC request"""
    method: str
    params: Any
    id: int
    auth: Optional[str] = None
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Wire form; ``auth`` is left out entirely when there is no token."""
        body = {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": self.params,
        }
        if self.auth:
            body["auth"] = self.auth
        body["id"] = self.id
        return body


@dataclass(frozen=True)
class ResponseEnvelope:
    """Inbound JSON-RPC response"""
    jsonrpc: str
    error: Optional[ProtocolError]
    result: Any
    id: Optional[int]


def encode_request(method: str, params: Any, auth: Optional[str], request_id: int) -> bytes:
    """Serialize a request to compact JSON bytes

    Args:
        method: API method name, e.g. "host.get"
        params: JSON-serializable params
        auth: Auth token, or None to omit the field
        request_id: Request id

    Returns:
        bytes: UTF-8 encoded request body

    Raises:
        InvalidRequest: params are not JSON-serializable
    """
    envelope = RequestEnvelope(method=method, params=params, id=request_id, auth=auth)
    try:
        return json.dumps(envelope.to_dict(), separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise InvalidRequest(f"Cannot encode params for {method}: {e}") from e


def _decode_error(raw: Any) -> Optional[ProtocolError]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedResponse(f"'error' must be an object or null, got {type(raw).__name__}")

    code = raw.get("code", 0)
    message = raw.get("message", "")
    data = raw.get("data", "")
    if isinstance(code, bool) or not isinstance(code, int):
        raise MalformedResponse(f"'error.code' must be an integer, got {code!r}")
    if not isinstance(message, str) or not isinstance(data, str):
        raise MalformedResponse("'error.message' and 'error.data' must be strings")
    return ProtocolError(code, message, data)


def decode_response(body: bytes) -> ResponseEnvelope:
    """Parse a response body into a ResponseEnvelope

    The error/result duality is not checked here; see ZabbixAPI.call_with_error.

    Raises:
        MalformedResponse: body is not JSON or not shaped like an envelope
    """
    try:
        raw = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise MalformedResponse(f"Response must be a JSON object, got {type(raw).__name__}")

    jsonrpc = raw.get("jsonrpc", "")
    if not isinstance(jsonrpc, str):
        raise MalformedResponse(f"'jsonrpc' must be a string, got {jsonrpc!r}")

    response_id = raw.get("id")
    if response_id is not None and (isinstance(response_id, bool) or not isinstance(response_id, int)):
        raise MalformedResponse(f"'id' must be an integer or null, got {response_id!r}")
    if response_id is not None and not INT32_MIN <= response_id <= INT32_MAX:
        raise MalformedResponse(f"'id' is outside the signed 32-bit range: {response_id}")

    return ResponseEnvelope(
        jsonrpc=jsonrpc,
        error=_decode_error(raw.get("error")),
        result=raw.get("result"),
        id=response_id,
    )


def expect_str(value: Any, method: str) -> str:
    if not isinstance(value, str):
        raise UnexpectedResultShape(method, "string", value)
    return value


def expect_list(value: Any, method: str) -> List[Any]:
    if not isinstance(value, list):
        raise UnexpectedResultShape(method, "list", value)
    return value


def expect_one(value: Any, method: str) -> Any:
    """Return the single element of a list result."""
    items = expect_list(value, method)
    if len(items) != 1:
        raise ExpectedOneResult(len(items))
    return items[0]


def expect_at_least(value: Any, count: int, method: str) -> List[Any]:
    """Return a list result holding at least ``count`` elements."""
    items = expect_list(value, method)
    if len(items) < count:
        raise ExpectedMore(count, len(items))
    return items
