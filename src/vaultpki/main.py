"""Entry point and composition root."""

from dataclasses import dataclass

from vaultpki import __version__
from vaultpki.application.ports import PkiBackend
from vaultpki.application.use_cases.role.create_or_update_role import (
    CreateOrUpdateRoleUseCase,
)
from vaultpki.application.use_cases.role.delete_role import DeleteRoleUseCase
from vaultpki.application.use_cases.role.get_role import GetRoleUseCase
from vaultpki.config import Settings, get_settings
from vaultpki.logging_config import configure_logging


@dataclass
class RoleUseCases:
    """Role use cases wired to one backend."""

    create_or_update: CreateOrUpdateRoleUseCase
    get: GetRoleUseCase
    delete: DeleteRoleUseCase


def create_role_use_cases(
    backend: PkiBackend, settings: Settings | None = None
) -> RoleUseCases:
    """Composition root - build role use cases for the configured PKI mount."""
    settings = settings or get_settings()
    mount_path = settings.pki_mount_path
    return RoleUseCases(
        create_or_update=CreateOrUpdateRoleUseCase(backend, mount_path),
        get=GetRoleUseCase(backend, mount_path),
        delete=DeleteRoleUseCase(backend, mount_path),
    )


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    print(
        f"vaultpki v{__version__} "
        f"({settings.environment}, PKI mount: {settings.pki_mount_path})"
    )
