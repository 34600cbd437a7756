"""Role payload DTO mapping: RoleOptions <-> backend request/response dicts."""

import logging
from collections.abc import Mapping
from typing import Any

from vaultpki.domain.entities import RoleOptions
from vaultpki.domain.exceptions import InvalidPayload

logger = logging.getLogger(__name__)

# Wire keys are the snake_case field names. Fields listed here are sequences
# carried as a single comma-joined string.
_JOINED_FIELDS = frozenset({"allowed_domains"})

DOMAIN_SEPARATOR = ","


def encode_role_options(options: RoleOptions) -> dict[str, Any]:
    """
    Build the request payload for a role write.

    Only set fields are emitted; unset fields are omitted so the backend applies
    its defaults. Domains are joined with commas without escaping.
    """
    payload: dict[str, Any] = {}
    for field in RoleOptions.FIELDS:
        value = getattr(options, f"get_{field}")()
        if value is None:
            continue
        if field in _JOINED_FIELDS:
            value = DOMAIN_SEPARATOR.join(value)
        payload[field] = value
    return payload


def decode_role_options(payload: Mapping[str, Any]) -> RoleOptions:
    """
    Build RoleOptions from a role payload (the "data" object of a read).

    Missing or null keys stay unset. Unrecognized keys are ignored.
    Raises InvalidPayload if payload is not a mapping or domains have the wrong shape.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayload(f"Role payload must be an object, got {type(payload).__name__}")

    options = RoleOptions()
    ignored: list[str] = []
    for key, value in payload.items():
        if key not in RoleOptions.FIELDS:
            ignored.append(key)
            continue
        if value is None:
            continue
        if key in _JOINED_FIELDS:
            value = _split_domains(key, value)
        getattr(options, key)(value)

    if ignored:
        logger.debug("Ignoring unrecognized role keys: %s", ", ".join(sorted(map(str, ignored))))
    return options


def decode_role_response(body: Mapping[str, Any]) -> RoleOptions:
    """Unwrap the backend read envelope ({"data": {...}}) and decode the role."""
    if not isinstance(body, Mapping):
        raise InvalidPayload(f"Role response must be an object, got {type(body).__name__}")
    data = body.get("data")
    if not isinstance(data, Mapping):
        raise InvalidPayload("Role response has no data object")
    return decode_role_options(data)


def _split_domains(key: str, value: Any) -> list[str]:
    # Empty string means the role exists with no domains: empty, not unset.
    if isinstance(value, str):
        return value.split(DOMAIN_SEPARATOR) if value else []
    # Newer backends return the field as a JSON array.
    if isinstance(value, list):
        if not all(isinstance(d, str) for d in value):
            raise InvalidPayload(f"{key} array must contain only strings")
        return list(value)
    raise InvalidPayload(f"{key} must be a string or array, got {type(value).__name__}")
