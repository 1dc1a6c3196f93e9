from __future__ import annotations

import hashlib
from typing import Final

__all__: list[str] = ["DEFAULT_HASH_ALGORITHM", "FingerprintError", "StringUtils"]

DEFAULT_HASH_ALGORITHM: Final[str] = "sha1"
# control characters and space (U+0000..U+0020); NBSP and other Unicode spaces are kept
TRIM_CHARACTERS: Final[str] = "".join(map(chr, range(0x21)))


class FingerprintError(Exception):
    """The phrase fingerprint cannot be computed (hash algorithm unavailable)."""


class StringUtils:
    """Stateless string helpers used to key and persist dictionary entries."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Return the value as a string, or an empty string if None."""
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def normalize_phrase(phrase: str) -> str:
        """Normalize a source phrase for keying.

        The phrase is lowercased and leading and trailing characters up to U+0020 are removed.
        Unicode spaces such as NBSP are part of the phrase.

        Args:
            phrase (str): Source phrase.

        Returns:
            str: Normalized phrase.
        """
        return StringUtils.ensure_str(phrase).lower().strip(TRIM_CHARACTERS)

    @staticmethod
    def generate_hash_key(phrase: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
        """Generate the fingerprint of a source phrase.

        The phrase is normalized first, so phrases differing only in case or surrounding
        whitespace share a fingerprint.

        Args:
            phrase (str): Source phrase.
            algorithm (str): hashlib algorithm name. Defaults to SHA-1.

        Returns:
            str: Lowercase hex digest of the UTF-8 encoded normalized phrase.

        Raises:
            FingerprintError: If the hash algorithm is not available.
        """
        try:
            digest = hashlib.new(algorithm)
        except (ValueError, TypeError) as err:
            msg: str = f"Hash algorithm '{algorithm}' is not available: {err}"
            raise FingerprintError(msg) from err

        digest.update(StringUtils.normalize_phrase(phrase).encode("utf-8"))
        try:
            return digest.hexdigest()
        except TypeError as err:
            # variable-length digests (shake_*) need an explicit length
            msg = f"Hash algorithm '{algorithm}' cannot produce a fixed-length fingerprint"
            raise FingerprintError(msg) from err

    @staticmethod
    def first_non_empty(*values: str | None) -> str:
        """Return the first value that is neither None nor empty, else an empty string."""
        for value in values:
            if value:
                return value
        return ""
