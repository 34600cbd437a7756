"""Get role use case."""

import logging

from vaultpki.application.dto.role_payload import decode_role_response
from vaultpki.application.ports import PkiBackend
from vaultpki.application.use_cases.role.paths import role_path
from vaultpki.domain.entities import RoleOptions
from vaultpki.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class GetRoleUseCase:
    """Read a role's options from the PKI backend."""

    def __init__(self, backend: PkiBackend, mount_path: str = "pki") -> None:
        self._backend = backend
        self._mount_path = mount_path

    async def execute(self, name: str) -> RoleOptions:
        """Return the role's options. Raises NotFound if the role does not exist."""
        path = role_path(self._mount_path, name)
        body = await self._backend.read(path)
        if body is None:
            logger.warning("Role not found: %s", path)
            raise NotFound("Role", name)
        options = decode_role_response(body)
        logger.info("Read role %s", path)
        return options
