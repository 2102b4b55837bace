"""
EncodingKind selects how raw digest bytes are rendered as text.
"""
from enum import Enum


class EncodingKind(int, Enum):
    """
    Text renderings of a digest.

    Each member has two canonical external forms: its ordinal (0, 1, 2) and its
    lowercase name ("utf8", "base64", "hex"). Parsing host values into an
    EncodingKind is done by utils.encoding_selector.parse_encoding.
    """
    UTF8 = 0
    BASE64 = 1
    HEX = 2

    @property
    def label(self) -> str:
        """Canonical lowercase name of the encoding."""
        return self.name.lower()

    @classmethod
    def labels(cls) -> dict:
        """Map of canonical name -> member."""
        return {kind.label: kind for kind in cls}
