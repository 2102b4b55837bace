"""
HashAlgorithmKind enumerates the digest algorithms a HashSession can be built on.
"""
from enum import Enum


class HashAlgorithmKind(str, Enum):
    """Supported digest algorithms, keyed by their canonical lowercase name."""
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"

    @property
    def digest_size(self) -> int:
        """Length in bytes of the raw digest produced by this algorithm."""
        return _DIGEST_SIZES[self]

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithmKind":
        """
        Look up an algorithm by name, ignoring case.

        Args:
            name (str): Algorithm name such as "sha256" or "SHA256".

        Returns:
            HashAlgorithmKind: The matching algorithm.

        Raises:
            ValueError: If the name does not match a supported algorithm.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Algorithm name must be a string, got {type(name).__name__}")
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unsupported hash algorithm: {name!r}. Valid options are: {valid}") from None


_DIGEST_SIZES = {
    HashAlgorithmKind.SHA1: 20,
    HashAlgorithmKind.SHA256: 32,
    HashAlgorithmKind.SHA512: 64,
    HashAlgorithmKind.MD5: 16,
}
