"""Key type for generated private keys."""

from enum import StrEnum


class KeyType(StrEnum):
    """Key types documented by the PKI backend. Not enforced by RoleOptions."""

    RSA = "rsa"
    EC = "ec"
