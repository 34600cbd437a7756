"""Delete role use case."""

import logging

from vaultpki.application.ports import PkiBackend
from vaultpki.application.use_cases.role.paths import role_path

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role from the PKI backend."""

    def __init__(self, backend: PkiBackend, mount_path: str = "pki") -> None:
        self._backend = backend
        self._mount_path = mount_path

    async def execute(self, name: str) -> None:
        path = role_path(self._mount_path, name)
        await self._backend.delete(path)
        logger.info("Deleted role %s", path)
