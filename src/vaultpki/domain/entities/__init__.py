"""Domain entities."""

from vaultpki.domain.entities.role_options import RoleOptions

__all__ = [
    "RoleOptions",
]
