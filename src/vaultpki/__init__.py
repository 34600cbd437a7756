"""vaultpki - PKI role options for Vault-compatible secrets backends."""

__version__ = "0.1.0"
