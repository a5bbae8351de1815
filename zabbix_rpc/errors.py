"""
Zabbix API client exceptions

Every failure raised by the client derives from ZabbixError, so callers can
tell which layer failed: transport, decoding, the remote API itself, or the
shape of a result.
"""

from typing import Any


class ZabbixError(Exception):
    """Base class for all client exceptions."""


class TransportError(ZabbixError, ConnectionError):
    """Raised when the HTTP exchange itself fails (refused, timeout, TLS)."""


class InvalidRequest(ZabbixError, ValueError):
    """Raised when request params cannot be serialized to JSON."""


class MalformedResponse(ZabbixError, ValueError):
    """Raised when the response body is not a JSON-RPC envelope."""


class ProtocolError(ZabbixError):
    """
    Error object reported by the remote API for a well-formed exchange.
    """

    def __init__(self, code: int, message: str = "", data: str = ""):
        self._code = code
        self._message = message
        self._data = data
        super().__init__(code, message, data)

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def data(self) -> str:
        return self._data

    def __str__(self) -> str:
        return f"{self._code} ({self._message}): {self._data}"

    def __repr__(self) -> str:
        return f"ProtocolError(code={self._code!r}, message={self._message!r}, data={self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtocolError):
            return NotImplemented
        return (self._code, self._message, self._data) == (other._code, other._message, other._data)

    def __hash__(self) -> int:
        return hash((self._code, self._message, self._data))


class UnexpectedResultShape(ZabbixError, TypeError):
    """Raised when a result is not of the type the caller relies on."""

    def __init__(self, method: str, expected: str, value: Any):
        self.method = method
        self.expected = expected
        self.value = value
        super().__init__(
            f"{method}: expected {expected} result, got {type(value).__name__}"
        )

    def __reduce__(self):
        return (type(self), (self.method, self.expected, self.value))


class VersionParseError(ZabbixError, ValueError):
    """Raised when an API version is not three dot-separated integers."""

    def __init__(self, version: str, reason: str = "Unable to determine version"):
        self.version = version
        self.reason = reason
        super().__init__(f"{reason}: {version!r}")

    def __reduce__(self):
        return (type(self), (self.version, self.reason))


class ExpectedOneResult(ZabbixError):
    """Raised when a list result does not hold exactly one element."""

    def __init__(self, got: int):
        self.got = got
        super().__init__(f"Expected exactly one result, got {got}.")

    def __reduce__(self):
        return (type(self), (self.got,))


class ExpectedMore(ZabbixError):
    """Raised when a list result holds fewer elements than required."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected}, got {got}.")

    def __reduce__(self):
        return (type(self), (self.expected, self.got))
