"""
HashAlgorithm: a single digest state behind a uniform update / finalize-and-reset API.

The supported algorithms form a closed set (see models.HashAlgorithmKind). Each
instance owns exactly one live hashlib object and mutates it in place.
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable, Dict, Union

from models.algorithm_kind import HashAlgorithmKind

_FACTORIES: Dict[HashAlgorithmKind, Callable[[], Any]] = {
    HashAlgorithmKind.SHA1: hashlib.sha1,
    HashAlgorithmKind.SHA256: hashlib.sha256,
    HashAlgorithmKind.SHA512: hashlib.sha512,
    HashAlgorithmKind.MD5: hashlib.md5,
}

if set(_FACTORIES) != set(HashAlgorithmKind):
    raise RuntimeError("Every HashAlgorithmKind needs a digest factory")


class HashAlgorithm:
    """
    One running digest of a fixed kind.

    - update() appends bytes to the live state
    - digest_reset() returns the raw digest and starts a fresh message
    """

    __slots__ = ("_kind", "_state")

    def __init__(self, kind: Union[HashAlgorithmKind, str]) -> None:
        self._kind = HashAlgorithmKind.from_name(kind)
        self._state = _FACTORIES[self._kind]()

    @classmethod
    def sha1(cls) -> "HashAlgorithm":
        return cls(HashAlgorithmKind.SHA1)

    @classmethod
    def sha256(cls) -> "HashAlgorithm":
        return cls(HashAlgorithmKind.SHA256)

    @classmethod
    def sha512(cls) -> "HashAlgorithm":
        return cls(HashAlgorithmKind.SHA512)

    @classmethod
    def md5(cls) -> "HashAlgorithm":
        return cls(HashAlgorithmKind.MD5)

    @property
    def kind(self) -> HashAlgorithmKind:
        return self._kind

    @property
    def digest_size(self) -> int:
        return self._kind.digest_size

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def digest_reset(self) -> bytes:
        """Finalize the accumulated input and reset for a new message."""
        raw = self._state.digest()
        self.reset()
        return raw

    def reset(self) -> None:
        self._state = _FACTORIES[self._kind]()

    def __repr__(self) -> str:
        return f"HashAlgorithm({self._kind.value!r})"
