"""
Hash Pipeline Service - All supported digests over one byte sequence
"""

from __future__ import annotations

import hashlib
import logging

from models.hash import Digest, HashAlgorithm
from services.errors import DigestFailure

logger = logging.getLogger(__name__)

# Ordered; hashlib constructor name per algorithm
ALGORITHMS: dict[HashAlgorithm, str] = {
    HashAlgorithm.MD5: "md5",
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA384: "sha384",
    HashAlgorithm.SHA512: "sha512",
}


def to_bytes(data: str | bytes) -> bytes:
    """Text is hashed as UTF-8"""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def compute_digest(algorithm: HashAlgorithm, data: bytes) -> Digest:
    """Compute a single digest"""
    return Digest(algorithm=algorithm, value=hashlib.new(ALGORITHMS[algorithm], data).hexdigest())


def compute_digests(data: str | bytes) -> dict[HashAlgorithm, Digest]:
    """Compute every digest over the same bytes.

    Either all digests are returned or DigestFailure is raised; a partial
    result is never published.
    """
    payload = to_bytes(data)
    digests: dict[HashAlgorithm, Digest] = {}

    for algorithm in ALGORITHMS:
        try:
            digests[algorithm] = compute_digest(algorithm, payload)
        except ValueError as e:
            # e.g. md5 disabled on a FIPS build
            logger.warning("Digest %s unavailable: %s", algorithm.value, e)
            raise DigestFailure(f"{algorithm.value} digest failed: {e}") from e

    logger.debug("Computed %d digests over %d bytes", len(digests), len(payload))
    return digests
