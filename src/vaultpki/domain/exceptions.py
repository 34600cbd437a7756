"""Domain exceptions."""


class VaultPkiError(Exception):
    """Base exception for vaultpki."""

    pass


class NotFound(VaultPkiError):
    """Requested resource was not found on the backend."""

    pass


class ValidationError(VaultPkiError):
    """Validation failed for input data."""

    pass


class InvalidPayload(VaultPkiError):
    """Backend payload does not have the expected wire shape."""

    pass
