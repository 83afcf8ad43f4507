"""
Deterministic digests for resource fingerprints.

Tags for projects, iterations and glossaries are the hex digest of a
canonical string built from version counters. The algorithm is chosen once,
when a :class:`TagHasher` is constructed, so an unsupported algorithm is a
startup fault rather than an error on the request path.

Manifesto:
    Tags must be stable across processes and releases:
    - **Deterministic:** Same canonical string → same tag, always
    - **Collision-resistant:** Different strings → different tags
    - **Fixed algorithm:** Chosen at wiring time, validated immediately

    MD5 is the default because previously issued tags were MD5 hex digests;
    callers must not depend on the algorithm, only on stability.

Examples:
    >>> hasher = TagHasher()
    >>> len(hasher.hexdigest("3:1:2"))
    32

    >>> TagHasher("sha256").hexdigest("3:1:2") == generate_hash("3:1:2", "sha256")
    True

    >>> TagHasher("not-an-algorithm")
    Traceback (most recent call last):
    ...
    tagspine.core.errors.InvalidConfigError: Unsupported hash algorithm: 'not-an-algorithm'
"""

from __future__ import annotations

import hashlib

from tagspine.core.errors import InvalidConfigError

DEFAULT_ALGORITHM = "md5"


def is_supported_algorithm(algorithm: str) -> bool:
    """True if *algorithm* names a fixed-length digest hashlib can build."""
    try:
        digest = hashlib.new(algorithm)
    except (ValueError, TypeError):
        return False
    # shake_* digests need an explicit length
    return digest.digest_size > 0


class TagHasher:
    """Hashes canonical strings with one fixed algorithm.

    Thread-safe: every call builds its own hashlib object.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        algorithm = algorithm.lower()
        if not is_supported_algorithm(algorithm):
            raise InvalidConfigError(
                "hash_algorithm",
                algorithm,
                f"Unsupported hash algorithm: {algorithm!r}",
            )
        self.algorithm = algorithm

    def hexdigest(self, text: str) -> str:
        """Return the hex digest of *text* encoded as UTF-8."""
        digest = hashlib.new(self.algorithm)
        digest.update(text.encode("utf-8"))
        return digest.hexdigest()

    def __repr__(self) -> str:
        return f"TagHasher({self.algorithm!r})"


def generate_hash(text: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hash *text* with *algorithm*; convenience wrapper over :class:`TagHasher`."""
    return TagHasher(algorithm).hexdigest(text)


__all__ = [
    "DEFAULT_ALGORITHM",
    "TagHasher",
    "generate_hash",
    "is_supported_algorithm",
]
