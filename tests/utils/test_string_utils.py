"""Unit tests for utils.string_utils module."""

from __future__ import annotations

import hashlib

import pytest

from utils.string_utils import FingerprintError, StringUtils


def test_generate_hash_key_is_sha1_hex_of_normalized_phrase() -> None:
    expected: str = hashlib.sha1(b"hello world").hexdigest()  # noqa: S324

    assert StringUtils.generate_hash_key("  Hello World \n") == expected


@pytest.mark.parametrize("variant", ["File", "file", "FILE", " file", "file\t", "\n File  "])
def test_case_and_whitespace_variants_share_fingerprint(variant: str) -> None:
    assert StringUtils.generate_hash_key(variant) == StringUtils.generate_hash_key("file")


def test_inner_whitespace_is_significant() -> None:
    assert StringUtils.generate_hash_key("a b") != StringUtils.generate_hash_key("a  b")


def test_generate_hash_key_encodes_utf8() -> None:
    expected: str = hashlib.sha1("überschrift".encode()).hexdigest()  # noqa: S324

    assert StringUtils.generate_hash_key("Überschrift") == expected


def test_generate_hash_key_with_other_algorithm() -> None:
    assert StringUtils.generate_hash_key("x", "sha256") == hashlib.sha256(b"x").hexdigest()


@pytest.mark.parametrize("algorithm", ["no-such-hash", "shake_128"])
def test_generate_hash_key_unusable_algorithm_raises(algorithm: str) -> None:
    with pytest.raises(FingerprintError):
        StringUtils.generate_hash_key("x", algorithm)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (("target", "source", ""), "target"),
        (("", "source", ""), "source"),
        ((None, "", ""), ""),
        ((), ""),
    ],
)
def test_first_non_empty(values: tuple[str | None, ...], expected: str) -> None:
    assert StringUtils.first_non_empty(*values) == expected


def test_ensure_str() -> None:
    assert StringUtils.ensure_str(None) == ""
    assert StringUtils.ensure_str("a ") == "a "


@pytest.mark.parametrize("variant", ["\x00file", "file\x07", "\x1bfile\x01 "])
def test_leading_and_trailing_control_characters_are_trimmed(variant: str) -> None:
    assert StringUtils.normalize_phrase(variant) == "file"


def test_unicode_spaces_are_not_trimmed() -> None:
    assert StringUtils.normalize_phrase("\u00a0File\u2003") == "\u00a0file\u2003"
    assert StringUtils.generate_hash_key("\u00a0file") != StringUtils.generate_hash_key("file")
