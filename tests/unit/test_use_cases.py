"""Unit tests for role use cases."""

from unittest.mock import AsyncMock

import pytest

from vaultpki.application.use_cases.role.create_or_update_role import (
    CreateOrUpdateRoleUseCase,
)
from vaultpki.application.use_cases.role.delete_role import DeleteRoleUseCase
from vaultpki.application.use_cases.role.get_role import GetRoleUseCase
from vaultpki.application.use_cases.role.paths import role_path
from vaultpki.domain.entities import RoleOptions
from vaultpki.domain.exceptions import NotFound, ValidationError


# --- role_path ---


def test_role_path() -> None:
    assert role_path("pki", "web") == "pki/roles/web"


def test_role_path_trims_slashes() -> None:
    assert role_path("/pki_int/", "/web") == "pki_int/roles/web"


def test_role_path_empty_name_raises() -> None:
    with pytest.raises(ValidationError, match="Role name"):
        role_path("pki", "")


def test_role_path_empty_mount_raises() -> None:
    with pytest.raises(ValidationError, match="mount"):
        role_path("/", "web")


@pytest.mark.parametrize("name", ["../sys", "web/../../sys", "a/b", "..", "."])
def test_role_path_rejects_names_outside_roles(name: str) -> None:
    """Names that would address a path outside <mount>/roles/ are rejected."""
    with pytest.raises(ValidationError, match="single path segment"):
        role_path("pki", name)


@pytest.mark.asyncio
async def test_get_role_rejects_traversal_before_backend_call() -> None:
    backend = AsyncMock()
    with pytest.raises(ValidationError):
        await GetRoleUseCase(backend).execute("../sys")
    backend.read.assert_not_awaited()


# --- CreateOrUpdateRoleUseCase ---


@pytest.mark.asyncio
async def test_create_role_writes_encoded_payload(
    fake_backend, web_role_options: RoleOptions
) -> None:
    """CreateOrUpdateRoleUseCase writes only set fields under the role path."""
    use_case = CreateOrUpdateRoleUseCase(fake_backend)

    await use_case.execute("web", web_role_options)

    assert fake_backend.writes == [
        (
            "pki/roles/web",
            {
                "max_ttl": "9h",
                "allowed_domains": "myvault.com,example.com",
                "allow_subdomains": True,
            },
        )
    ]


@pytest.mark.asyncio
async def test_create_role_with_empty_options_writes_empty_payload(fake_backend) -> None:
    use_case = CreateOrUpdateRoleUseCase(fake_backend, mount_path="pki_int")

    await use_case.execute("bare", RoleOptions())

    assert fake_backend.writes == [("pki_int/roles/bare", {})]


@pytest.mark.asyncio
async def test_create_role_propagates_backend_error() -> None:
    """Transport failures surface unchanged."""
    backend = AsyncMock()
    backend.write.side_effect = ConnectionError("backend down")
    use_case = CreateOrUpdateRoleUseCase(backend)

    with pytest.raises(ConnectionError, match="backend down"):
        await use_case.execute("web", RoleOptions().ttl("1h"))


# --- GetRoleUseCase ---


@pytest.mark.asyncio
async def test_get_role_round_trip(fake_backend, web_role_options: RoleOptions) -> None:
    """Role written by CreateOrUpdate reads back equal."""
    await CreateOrUpdateRoleUseCase(fake_backend).execute("web", web_role_options)

    options = await GetRoleUseCase(fake_backend).execute("web")

    assert options == web_role_options


@pytest.mark.asyncio
async def test_get_role_decodes_backend_data(fake_backend) -> None:
    """Backend-returned extras are ignored, empty domains stay empty."""
    fake_backend.put(
        "pki/roles/web",
        {"allowed_domains": "", "key_bits": 2048, "allow_glob_domains": False},
    )

    options = await GetRoleUseCase(fake_backend).execute("web")

    assert options.get_allowed_domains() == []
    assert options.get_key_bits() == 2048
    assert options.set_fields() == ("allowed_domains", "key_bits")


@pytest.mark.asyncio
async def test_get_role_not_found(fake_backend) -> None:
    """GetRoleUseCase raises NotFound when the backend has no role."""
    use_case = GetRoleUseCase(fake_backend)

    with pytest.raises(NotFound, match="missing"):
        await use_case.execute("missing")


# --- DeleteRoleUseCase ---


@pytest.mark.asyncio
async def test_delete_role(fake_backend) -> None:
    fake_backend.put("pki/roles/web", {"ttl": "1h"})

    await DeleteRoleUseCase(fake_backend).execute("web")

    with pytest.raises(NotFound):
        await GetRoleUseCase(fake_backend).execute("web")


@pytest.mark.asyncio
async def test_delete_role_uses_role_path() -> None:
    backend = AsyncMock()
    await DeleteRoleUseCase(backend, mount_path="pki_int").execute("web")
    backend.delete.assert_awaited_once_with("pki_int/roles/web")
