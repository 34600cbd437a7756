"""Pytest fixtures for vaultpki tests."""

from __future__ import annotations

from typing import Any

import pytest

from vaultpki.config import Settings
from vaultpki.domain.entities import RoleOptions


# --- Fake backend ---


class FakePkiBackend:
    """In-memory PKI backend keyed by path. Reads wrap stored payloads in a data envelope."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}
        self.writes: list[tuple[str, dict[str, Any]]] = []

    async def write(self, path: str, payload: dict[str, Any]) -> None:
        self.writes.append((path, payload))
        self._store[path] = dict(payload)

    async def read(self, path: str) -> dict[str, Any] | None:
        data = self._store.get(path)
        if data is None:
            return None
        return {"request_id": "fake", "lease_duration": 0, "data": dict(data)}

    async def delete(self, path: str) -> None:
        self._store.pop(path, None)

    def put(self, path: str, data: dict[str, Any]) -> None:
        """Helper to seed a role as the backend would return it."""
        self._store[path] = data


# --- Fixtures ---


@pytest.fixture
def fake_backend() -> FakePkiBackend:
    """Fresh in-memory backend for each test."""
    return FakePkiBackend()


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit values, independent of the environment."""
    return Settings(pki_mount_path="pki", log_level="DEBUG", environment="development")


@pytest.fixture
def web_role_options() -> RoleOptions:
    """Options from the driver's documented example."""
    return (
        RoleOptions()
        .allowed_domains(["myvault.com", "example.com"])
        .allow_subdomains(True)
        .max_ttl("9h")
    )
