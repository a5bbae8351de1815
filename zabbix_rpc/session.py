"""
Session and version state

Holds the auth token and the remote API version, and decides which protocol
variant to use for a given version.
"""

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from zabbix_rpc.errors import VersionParseError

VERSION_METHOD = "APIInfo.version"
LOGIN_METHOD = "user.login"
LEGACY_LOGIN_METHOD = "user.authenticate"

# First release that accepts user.login
LOGIN_METHOD_SINCE = (2, 4, 0)


@dataclass(frozen=True, order=True)
class Version:
    """Remote API version triple"""
    major: int = 0
    minor: int = 0
    release: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.release)

    def is_at_least(self, major: int, minor: int, release: int) -> bool:
        return self.as_tuple() >= (major, minor, release)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.release}"


def parse_version(value: str) -> Version:
    """Parse "major.minor.release" into a Version

    All three components are converted before the Version is built, so a
    failure never yields a partially filled result.

    Raises:
        VersionParseError: not exactly three integer components
    """
    parts = value.split(".")
    if len(parts) != 3:
        raise VersionParseError(value)
    try:
        major, minor, release = (int(part) for part in parts)
    except ValueError as e:
        raise VersionParseError(value, f"Non-numeric version component ({e})") from e
    return Version(major, minor, release)


def select_login_method(version: Version) -> str:
    """Pick the login method name supported by ``version``."""
    if version.is_at_least(*LOGIN_METHOD_SINCE):
        return LOGIN_METHOD
    return LEGACY_LOGIN_METHOD


class SessionState:
    """
    Mutable per-client state: auth token and discovered API version.

    Writes are serialized, but concurrent logins still race over which token
    ends up stored; treat a client as single-writer.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._auth: Optional[str] = None
        self._version = Version()

    @property
    def auth(self) -> Optional[str]:
        return self._auth

    @auth.setter
    def auth(self, token: Optional[str]) -> None:
        with self._lock:
            self._auth = token

    @property
    def version(self) -> Version:
        return self._version

    @version.setter
    def version(self, version: Version) -> None:
        with self._lock:
            self._version = version

    def is_at_least(self, major: int, minor: int, release: int) -> bool:
        return self._version.is_at_least(major, minor, release)

    def auth_for(self, method: str) -> Optional[str]:
        """Token to attach to a call of ``method``; never sent with the version query."""
        if method == VERSION_METHOD:
            return None
        return self._auth or None
