"""
Services du domaine (logique pure)
"""

from domain.services.key_derivation import (
    normalize_name,
    derive_key,
    derive_key_from_name,
    canonicalize_key,
    check_key_format,
    suffixed_key
)

__all__ = [
    "normalize_name",
    "derive_key",
    "derive_key_from_name",
    "canonicalize_key",
    "check_key_format",
    "suffixed_key"
]
