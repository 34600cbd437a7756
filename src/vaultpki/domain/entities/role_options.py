"""RoleOptions entity - tunable parameters of a PKI role."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

# Declaration order; also the order fields are emitted on the wire.
_FIELDS = (
    "ttl",
    "max_ttl",
    "allow_localhost",
    "allowed_domains",
    "allow_bare_domains",
    "allow_subdomains",
    "allow_any_name",
    "enforce_hostnames",
    "allow_ip_sans",
    "server_flag",
    "client_flag",
    "code_signing_flag",
    "email_protection_flag",
    "key_type",
    "key_bits",
    "use_csr_common_name",
)


@dataclass(slots=True, repr=False)
class RoleOptions:
    """
    Options sent to and returned by role endpoints of the PKI backend.

    Every field is optional; None means unset and the backend applies its own
    default. Setters return the instance, so options are built by chaining:

        options = (
            RoleOptions()
            .allowed_domains(["myvault.com"])
            .allow_subdomains(True)
            .max_ttl("9h")
        )

    Values are stored verbatim. Not safe for concurrent mutation: build on one
    thread, then hand the finished instance over.
    """

    FIELDS = _FIELDS

    # Private storage; construct empty and use the setters.
    _ttl: str | None = field(default=None, init=False)
    _max_ttl: str | None = field(default=None, init=False)
    _allow_localhost: bool | None = field(default=None, init=False)
    _allowed_domains: list[str] | None = field(default=None, init=False)
    _allow_bare_domains: bool | None = field(default=None, init=False)
    _allow_subdomains: bool | None = field(default=None, init=False)
    _allow_any_name: bool | None = field(default=None, init=False)
    _enforce_hostnames: bool | None = field(default=None, init=False)
    _allow_ip_sans: bool | None = field(default=None, init=False)
    _server_flag: bool | None = field(default=None, init=False)
    _client_flag: bool | None = field(default=None, init=False)
    _code_signing_flag: bool | None = field(default=None, init=False)
    _email_protection_flag: bool | None = field(default=None, init=False)
    _key_type: str | None = field(default=None, init=False)
    _key_bits: int | None = field(default=None, init=False)
    _use_csr_common_name: bool | None = field(default=None, init=False)

    # --- Setters ---

    def ttl(self, ttl: str | None) -> RoleOptions:
        """
        Time To Live as a duration string with time suffix (hour is the largest).
        Backend default: system default or max_ttl, whichever is shorter.
        """
        self._ttl = ttl
        return self

    def max_ttl(self, max_ttl: str | None) -> RoleOptions:
        """Maximum Time To Live as a duration string. Backend default: system maximum lease TTL."""
        self._max_ttl = max_ttl
        return self

    def allow_localhost(self, allow_localhost: bool | None) -> RoleOptions:
        """Allow localhost as a requested common name. Backend default: true."""
        self._allow_localhost = allow_localhost
        return self

    def allowed_domains(self, allowed_domains: Iterable[str] | None) -> RoleOptions:
        """
        Domains of the role, used with allow_bare_domains and allow_subdomains.

        The sequence is copied; later changes to the caller's object do not leak
        in. None leaves the field unset, an empty sequence sets it to empty.
        """
        self._allowed_domains = list(allowed_domains) if allowed_domains is not None else None
        return self

    def allow_bare_domains(self, allow_bare_domains: bool | None) -> RoleOptions:
        """Allow certificates for the allowed domains themselves. Backend default: false."""
        self._allow_bare_domains = allow_bare_domains
        return self

    def allow_subdomains(self, allow_subdomains: bool | None) -> RoleOptions:
        """Allow CNs that are subdomains (including wildcards) of allowed domains. Backend default: false."""
        self._allow_subdomains = allow_subdomains
        return self

    def allow_any_name(self, allow_any_name: bool | None) -> RoleOptions:
        """Allow any CN. Backend default: false."""
        self._allow_any_name = allow_any_name
        return self

    def enforce_hostnames(self, enforce_hostnames: bool | None) -> RoleOptions:
        """Only allow valid host names in CNs, DNS SANs and email hosts. Backend default: true."""
        self._enforce_hostnames = enforce_hostnames
        return self

    def allow_ip_sans(self, allow_ip_sans: bool | None) -> RoleOptions:
        """Allow IP Subject Alternative Names. Backend default: true."""
        self._allow_ip_sans = allow_ip_sans
        return self

    def server_flag(self, server_flag: bool | None) -> RoleOptions:
        """Flag certificates for server use. Backend default: true."""
        self._server_flag = server_flag
        return self

    def client_flag(self, client_flag: bool | None) -> RoleOptions:
        """Flag certificates for client use. Backend default: true."""
        self._client_flag = client_flag
        return self

    def code_signing_flag(self, code_signing_flag: bool | None) -> RoleOptions:
        """Flag certificates for code signing. Backend default: false."""
        self._code_signing_flag = code_signing_flag
        return self

    def email_protection_flag(self, email_protection_flag: bool | None) -> RoleOptions:
        """Flag certificates for email protection. Backend default: false."""
        self._email_protection_flag = email_protection_flag
        return self

    def key_type(self, key_type: str | None) -> RoleOptions:
        """Type of generated private keys, "rsa" or "ec" (see KeyType). Backend default: rsa."""
        self._key_type = key_type
        return self

    def key_bits(self, key_bits: int | None) -> RoleOptions:
        """Bit length of generated keys. Backend default: 2048, which must change for ec keys."""
        self._key_bits = key_bits
        return self

    def use_csr_common_name(self, use_csr_common_name: bool | None) -> RoleOptions:
        """On the CSR signing endpoint, take the CN from the CSR. Backend default: false."""
        self._use_csr_common_name = use_csr_common_name
        return self

    # --- Getters ---

    def get_ttl(self) -> str | None:
        return self._ttl

    def get_max_ttl(self) -> str | None:
        return self._max_ttl

    def get_allow_localhost(self) -> bool | None:
        return self._allow_localhost

    def get_allowed_domains(self) -> list[str] | None:
        """Return a copy of the allowed domains, or None when unset."""
        if self._allowed_domains is None:
            return None
        return list(self._allowed_domains)

    def get_allow_bare_domains(self) -> bool | None:
        return self._allow_bare_domains

    def get_allow_subdomains(self) -> bool | None:
        return self._allow_subdomains

    def get_allow_any_name(self) -> bool | None:
        return self._allow_any_name

    def get_enforce_hostnames(self) -> bool | None:
        return self._enforce_hostnames

    def get_allow_ip_sans(self) -> bool | None:
        return self._allow_ip_sans

    def get_server_flag(self) -> bool | None:
        return self._server_flag

    def get_client_flag(self) -> bool | None:
        return self._client_flag

    def get_code_signing_flag(self) -> bool | None:
        return self._code_signing_flag

    def get_email_protection_flag(self) -> bool | None:
        return self._email_protection_flag

    def get_key_type(self) -> str | None:
        return self._key_type

    def get_key_bits(self) -> int | None:
        return self._key_bits

    def get_use_csr_common_name(self) -> bool | None:
        return self._use_csr_common_name

    # --- Introspection ---

    def is_set(self, name: str) -> bool:
        """Return True if field holds a value. Raises KeyError for unknown fields."""
        if name not in _FIELDS:
            raise KeyError(name)
        return getattr(self, f"_{name}") is not None

    def set_fields(self) -> tuple[str, ...]:
        """Names of fields currently set, in declaration order."""
        return tuple(name for name in _FIELDS if getattr(self, f"_{name}") is not None)

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={getattr(self, f'_{name}')!r}" for name in self.set_fields()
        )
        return f"RoleOptions({parts})"
