"""
Digest functions for the Rule Cracker.

Candidates are hashed with any fixed-length algorithm that hashlib provides
on this system.
"""

import hashlib

from rule_cracker.utils.exceptions import UnknownAlgorithmError


def normalize_algorithm(name: str) -> str:
    """Turn names like 'SHA-256' or 'SHA3-512' into hashlib names"""
    normalized = name.strip().lower()
    if normalized in hashlib.algorithms_available:
        return normalized
    # SHA-256 -> sha256, SHA3-256 -> sha3_256
    for candidate in (normalized.replace("-", ""), normalized.replace("-", "_")):
        if candidate in hashlib.algorithms_available:
            return candidate
    raise UnknownAlgorithmError(f"Unknown algorithm '{name}'")


class DigestFunction:
    """Hashes candidates and returns lowercase hexadecimal digests"""

    def __init__(self, algorithm: str = "sha256"):
        """Initialize with an algorithm name

        Args:
            algorithm: Algorithm name, e.g. 'sha256', 'SHA-256' or 'md5'

        Raises:
            UnknownAlgorithmError: If the algorithm is unknown or has no fixed
                digest length (shake_128, shake_256)
        """
        self.algorithm = normalize_algorithm(algorithm)
        if self.algorithm.startswith("shake"):
            raise UnknownAlgorithmError(
                f"Algorithm '{algorithm}' has no fixed digest length"
            )
        try:
            hashlib.new(self.algorithm)
        except ValueError as e:
            raise UnknownAlgorithmError(f"Algorithm '{algorithm}' is not usable: {e}")

    def hexdigest(self, candidate: str) -> str:
        """Hash a candidate's UTF-8 bytes"""
        # surrogateescape restores undecodable bytes read from word files
        data = candidate.encode("utf-8", "surrogateescape")
        return hashlib.new(self.algorithm, data).hexdigest()

    def __repr__(self) -> str:
        return f"DigestFunction({self.algorithm!r})"
