"""Backend paths for PKI roles."""

from vaultpki.domain.exceptions import ValidationError


def role_path(mount_path: str, name: str) -> str:
    """
    Return "<mount>/roles/<name>".

    Raises ValidationError on an empty mount or name, or a name that would
    leave the roles path (inner "/" or a "." / ".." segment).
    """
    mount = mount_path.strip("/")
    if not mount:
        raise ValidationError("PKI mount path must not be empty")
    role = name.strip("/") if name else ""
    if not role:
        raise ValidationError("Role name must not be empty")
    if "/" in role or role in (".", ".."):
        raise ValidationError(f"Role name must be a single path segment: {name!r}")
    return f"{mount}/roles/{role}"
