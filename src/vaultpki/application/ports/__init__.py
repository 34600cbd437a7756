"""Application ports - interfaces for external adapters."""

from vaultpki.application.ports.pki_backend import PkiBackend

__all__ = [
    "PkiBackend",
]
