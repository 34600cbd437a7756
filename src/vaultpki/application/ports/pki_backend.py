"""PKI backend port - transport to the secrets-management API."""

from typing import Any, Protocol


class PkiBackend(Protocol):
    """Port for reading and writing paths on the backend. Implementations own HTTP, auth and TLS."""

    async def write(self, path: str, payload: dict[str, Any]) -> None: ...

    async def read(self, path: str) -> dict[str, Any] | None:
        """Return the response body, or None when nothing exists at path."""
        ...

    async def delete(self, path: str) -> None: ...
