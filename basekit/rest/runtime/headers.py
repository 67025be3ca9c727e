"""Standard request headers and the client identification collaborator."""

from __future__ import annotations

import platform
from importlib import metadata
from typing import Protocol

JSON_MEDIA_TYPE = "application/json"

ACCEPT = "Accept"
CONTENT_TYPE = "Content-Type"
USER_AGENT = "User-Agent"
APP_INFO = "App-Info"

DEFAULT_DISTRIBUTION = "basekit-rest"


class ClientInfo(Protocol):
    """Supplies the opaque client identification header values."""

    def device_descriptor(self) -> str: ...

    def app_descriptor(self) -> str: ...


class PlatformClientInfo:
    """Client identification derived from the host platform.

    The device descriptor names the OS, release, machine and interpreter;
    the app descriptor is ``<name>/<version>`` of the calling application,
    defaulting to this library's installed distribution.
    """

    def __init__(
        self,
        app_name: str | None = None,
        app_version: str | None = None,
    ) -> None:
        self._app_name = app_name or DEFAULT_DISTRIBUTION
        self._app_version = app_version or _distribution_version(self._app_name)
        self._device = (
            f"{platform.system() or 'unknown'} {platform.release()} ({platform.machine()}); "
            f"{platform.python_implementation()} {platform.python_version()}"
        )

    def device_descriptor(self) -> str:
        return self._device

    def app_descriptor(self) -> str:
        return f"{self._app_name}/{self._app_version}"


def _distribution_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "unknown"


def build_headers(client_info: ClientInfo) -> dict[str, str]:
    """Assemble the header map sent with every request.

    Content negotiation is fixed to JSON; per-call overrides are not
    supported.
    """
    return {
        ACCEPT: JSON_MEDIA_TYPE,
        CONTENT_TYPE: JSON_MEDIA_TYPE,
        USER_AGENT: client_info.device_descriptor(),
        APP_INFO: client_info.app_descriptor(),
    }
