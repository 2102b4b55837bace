"""
HashSession: an incremental hashing session that can be shared between handles.

A session wraps one HashAlgorithm behind a lock. Handles produced by
duplicate() point at the same state, so updates through one handle are seen
by digests taken through another. digest() finalizes and resets the state.
"""

from __future__ import annotations

import base64
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from models.algorithm_kind import HashAlgorithmKind
from models.encoding_kind import EncodingKind
from services.hash_algorithm import HashAlgorithm
from services.hashing_errors import InvalidEncodingError, LockFailureError, NonUtf8DigestError

logger = logging.getLogger(__name__)

Content = Union[bytes, bytearray, memoryview, str]


def _as_bytes(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    raise TypeError(
        f"Session content must be bytes, bytearray, memoryview or str, got {type(content).__name__}"
    )


def render_digest(raw: bytes, encoding: EncodingKind, algorithm: str = "digest") -> str:
    """
    Render raw digest bytes as text.

    Args:
        raw (bytes): Raw digest output.
        encoding (EncodingKind): Rendering to apply.
        algorithm (str): Algorithm name, used in error messages.

    Returns:
        str: The rendered digest.

    Raises:
        NonUtf8DigestError: If UTF8 is requested and the bytes are not valid UTF-8.
    """
    if encoding is EncodingKind.UTF8:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise NonUtf8DigestError(algorithm, raw) from e
    if encoding is EncodingKind.BASE64:
        return base64.b64encode(raw).decode("ascii")
    return raw.hex()


class _SharedState:
    """Lock-guarded algorithm state shared by every handle of one session."""

    __slots__ = ("algorithm", "lock", "lock_timeout", "poisoned")

    def __init__(self, algorithm: HashAlgorithm, lock_timeout: Optional[float]) -> None:
        self.algorithm = algorithm
        self.lock = threading.Lock()
        self.lock_timeout = lock_timeout
        self.poisoned = False


class HashSession:
    """
    Handle onto a lock-guarded HashAlgorithm.

    Use the per-algorithm constructors (sha1, sha256, sha512, md5) or new().
    Passing initial data is the same as calling update() right after
    construction.
    """

    __slots__ = ("_shared",)

    def __init__(self, algorithm: HashAlgorithm, lock_timeout: Optional[float] = None) -> None:
        if lock_timeout is not None and lock_timeout <= 0:
            raise ValueError(f"lock_timeout must be positive or None, got {lock_timeout}")
        self._shared = _SharedState(algorithm, lock_timeout)

    # ────────────────────────────────────────────────
    # Constructors
    # ────────────────────────────────────────────────

    @classmethod
    def new(
        cls,
        algorithm: Union[HashAlgorithmKind, str],
        data: Optional[Content] = None,
        lock_timeout: Optional[float] = None,
    ) -> "HashSession":
        """
        Create a session for the given algorithm, optionally seeded with data.

        Args:
            algorithm (HashAlgorithmKind | str): Algorithm or its name (case-insensitive).
            data (bytes | str, optional): Initial chunk to hash.
            lock_timeout (float, optional): Seconds to wait for the session lock.

        Returns:
            HashSession: The new session.
        """
        session = cls(HashAlgorithm(algorithm), lock_timeout=lock_timeout)
        logger.debug(f"Created {session.algorithm.value} session (seeded={data is not None})")
        if data is not None:
            session.update(data)
        return session

    @classmethod
    def sha1(cls, data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> "HashSession":
        return cls.new(HashAlgorithmKind.SHA1, data, lock_timeout)

    @classmethod
    def sha256(cls, data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> "HashSession":
        return cls.new(HashAlgorithmKind.SHA256, data, lock_timeout)

    @classmethod
    def sha512(cls, data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> "HashSession":
        return cls.new(HashAlgorithmKind.SHA512, data, lock_timeout)

    @classmethod
    def md5(cls, data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> "HashSession":
        return cls.new(HashAlgorithmKind.MD5, data, lock_timeout)

    # ────────────────────────────────────────────────
    # Properties and aliasing
    # ────────────────────────────────────────────────

    @property
    def algorithm(self) -> HashAlgorithmKind:
        # The kind never changes, so it can be read without the lock.
        return self._shared.algorithm.kind

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    @property
    def lock_timeout(self) -> Optional[float]:
        return self._shared.lock_timeout

    def duplicate(self) -> "HashSession":
        """Return another handle onto the same underlying state."""
        alias = object.__new__(HashSession)
        alias._shared = self._shared
        return alias

    __copy__ = duplicate

    def shares_state_with(self, other: "HashSession") -> bool:
        return isinstance(other, HashSession) and other._shared is self._shared

    def __repr__(self) -> str:
        return f"HashSession({self.algorithm.value!r})"

    # ────────────────────────────────────────────────
    # Operations
    # ────────────────────────────────────────────────

    @contextmanager
    def _locked(self) -> Iterator[HashAlgorithm]:
        shared = self._shared
        timeout = -1 if shared.lock_timeout is None else shared.lock_timeout
        if not shared.lock.acquire(timeout=timeout):
            raise LockFailureError(
                f"Timed out after {shared.lock_timeout}s waiting for the {self.algorithm.value} session lock"
            )
        try:
            if shared.poisoned:
                # Input accumulated before the failure cannot be trusted.
                shared.poisoned = False
                shared.algorithm.reset()
                raise LockFailureError(
                    f"{self.algorithm.value} session was interrupted while locked; "
                    "accumulated input was discarded"
                )
            try:
                yield shared.algorithm
            except BaseException:
                shared.poisoned = True
                raise
        finally:
            shared.lock.release()

    def update(self, content: Content) -> "HashSession":
        """
        Append content to the running digest.

        Args:
            content (bytes | bytearray | memoryview | str): Data to hash; str is UTF-8 encoded.

        Returns:
            HashSession: This handle, for chaining.

        Raises:
            TypeError: If content is not bytes-like or str.
            LockFailureError: If the session lock cannot be acquired.
        """
        data = _as_bytes(content)
        with self._locked() as algorithm:
            algorithm.update(data)
        return self

    def digest(self, encoding: EncodingKind) -> str:
        """
        Finalize the accumulated input, reset the session and render the digest.

        Args:
            encoding (EncodingKind): How to render the raw digest bytes.

        Returns:
            str: The rendered digest.

        Raises:
            InvalidEncodingError: If encoding is not an EncodingKind. The session is left untouched.
            NonUtf8DigestError: If UTF8 rendering fails. The session has already been reset.
            LockFailureError: If the session lock cannot be acquired.
        """
        if not isinstance(encoding, EncodingKind):
            raise InvalidEncodingError(
                encoding,
                f"Expected an EncodingKind, got {encoding!r}; "
                "convert host values with utils.encoding_selector.parse_encoding",
            )
        with self._locked() as algorithm:
            raw = algorithm.digest_reset()
        logger.debug(f"Produced {self.algorithm.value} digest ({len(raw)} bytes) as {encoding.label}")
        return render_digest(raw, encoding, self.algorithm.value)


def sha1(data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> HashSession:
    return HashSession.sha1(data, lock_timeout)


def sha256(data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> HashSession:
    return HashSession.sha256(data, lock_timeout)


def sha512(data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> HashSession:
    return HashSession.sha512(data, lock_timeout)


def md5(data: Optional[Content] = None, lock_timeout: Optional[float] = None) -> HashSession:
    return HashSession.md5(data, lock_timeout)


def new(
    algorithm: Union[HashAlgorithmKind, str],
    data: Optional[Content] = None,
    lock_timeout: Optional[float] = None,
) -> HashSession:
    return HashSession.new(algorithm, data, lock_timeout)
