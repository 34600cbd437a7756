"""Domain value objects."""

from vaultpki.domain.value_objects.key_type import KeyType

__all__ = [
    "KeyType",
]
