"""Unit tests for core.dictionary.interface module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.dictionary import (
    DictionaryBackend,
    JsonDictionaryBackend,
    PropertiesDictionaryBackend,
    UnsupportedDictionaryFormatError,
    XliffDictionaryBackend,
)
from models.dictionary_models import DictionaryFormat, TranslationRecord

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("json", JsonDictionaryBackend),
        ("JSON", JsonDictionaryBackend),
        (DictionaryFormat.PROPERTIES, PropertiesDictionaryBackend),
        (" properties ", PropertiesDictionaryBackend),
        ("xliff12", XliffDictionaryBackend),
    ],
)
def test_for_format_returns_registered_backend(name: str, expected: type[DictionaryBackend]) -> None:
    backend: DictionaryBackend = DictionaryBackend.for_format(name, source_language="en", target_language="de")

    assert isinstance(backend, expected)
    assert backend.source_language == "en"
    assert backend.target_language == "de"


def test_for_format_rejects_unknown_name() -> None:
    with pytest.raises(UnsupportedDictionaryFormatError, match="Unknown dictionary format"):
        DictionaryBackend.for_format("yaml")


def test_for_format_rejects_unregistered_format(monkeypatch: pytest.MonkeyPatch) -> None:
    registry = dict(DictionaryBackend.registered)
    del registry[DictionaryFormat.PROPERTIES]
    monkeypatch.setattr(DictionaryBackend, "registered", registry)

    with pytest.raises(UnsupportedDictionaryFormatError, match="No dictionary backend"):
        DictionaryBackend.for_format(DictionaryFormat.PROPERTIES)


def test_duplicate_registration_raises() -> None:
    with pytest.raises(ValueError, match="already registered"):

        class _DuplicateJson(JsonDictionaryBackend):
            pass


def test_xliff_backend_rejects_load_and_save(tmp_path: Path) -> None:
    backend = XliffDictionaryBackend()
    path: Path = tmp_path / "master.xlf"

    with pytest.raises(UnsupportedDictionaryFormatError):
        backend.load(path)
    with pytest.raises(UnsupportedDictionaryFormatError):
        backend.save(path, {"k": TranslationRecord(calculated_key="k")})
    assert not path.exists()
