"""
Models package for digestkit.

This package contains the algorithm and encoding enumerations and the
Pydantic-based records used by hosts.
"""

from .algorithm_kind import HashAlgorithmKind
from .encoding_kind import EncodingKind
from .digest_record import DigestRecord
from .digest_settings import DigestSettings

__all__ = ["HashAlgorithmKind", "EncodingKind", "DigestRecord", "DigestSettings"]
