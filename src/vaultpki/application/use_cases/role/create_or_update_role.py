"""Create or update role use case."""

import logging

from vaultpki.application.dto.role_payload import encode_role_options
from vaultpki.application.ports import PkiBackend
from vaultpki.application.use_cases.role.paths import role_path
from vaultpki.domain.entities import RoleOptions

logger = logging.getLogger(__name__)


class CreateOrUpdateRoleUseCase:
    """Write a role's options to the PKI backend."""

    def __init__(self, backend: PkiBackend, mount_path: str = "pki") -> None:
        self._backend = backend
        self._mount_path = mount_path

    async def execute(self, name: str, options: RoleOptions) -> None:
        """Encode options and write them. Unset fields are left to backend defaults."""
        path = role_path(self._mount_path, name)
        payload = encode_role_options(options)
        await self._backend.write(path, payload)
        logger.info("Wrote role %s (%s)", path, ", ".join(payload) or "no options")
