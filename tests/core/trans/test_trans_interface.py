"""Unit tests for core.trans.interface module."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from core.bootstrap import build_translator
from core.trans.dictionary_translator import DictionaryTranslator
from core.trans.interface import TransInterface
from models.config_models import Config


class _EchoTranslator(TransInterface):
    """Minimal translator used to exercise the registry."""

    @staticmethod
    def fetch_translator_name() -> str:
        return ""

    def reconfigure(self, config: Config, source_language: str) -> None:
        self.source_language = source_language

    def open(self) -> None:
        pass

    def translate(self, source_phrase: str | None) -> str | None:
        return source_phrase

    def close(self) -> None:
        pass


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> dict[str, type[TransInterface]]:
    registry: dict[str, type[TransInterface]] = dict(TransInterface.registered)
    monkeypatch.setattr(TransInterface, "registered", registry)
    return registry


def test_dictionary_translator_is_registered() -> None:
    assert TransInterface.registered["dictionary"] is DictionaryTranslator


def test_unnamed_translator_is_not_registered() -> None:
    assert _EchoTranslator not in TransInterface.registered.values()


def test_create_instantiates_registered_translator(isolated_registry: dict[str, type[TransInterface]]) -> None:
    isolated_registry["echo"] = _EchoTranslator

    translator: TransInterface = TransInterface.create("echo")

    assert isinstance(translator, _EchoTranslator)
    assert translator.translate("Hello") == "Hello"


def test_create_unknown_name_logs_and_raises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("ERROR"), pytest.raises(KeyError):
        TransInterface.create("missing")

    assert "Translator not found: 'missing'" in caplog.text


def test_duplicate_name_raises(isolated_registry: dict[str, type[TransInterface]]) -> None:
    with pytest.raises(ValueError, match="already registered"):

        class _SecondDictionary(_EchoTranslator):
            @staticmethod
            def fetch_translator_name() -> str:
                return "dictionary"

    assert isolated_registry["dictionary"] is DictionaryTranslator


def test_build_translator_reconfigures_created_translator(monkeypatch: pytest.MonkeyPatch) -> None:
    translator = MagicMock(spec=TransInterface)
    create = MagicMock(return_value=translator)
    monkeypatch.setattr(TransInterface, "create", create)
    config = Config()

    result: TransInterface = build_translator(config, "en", name="echo")

    assert result is translator
    create.assert_called_once_with("echo")
    translator.reconfigure.assert_called_once_with(config, "en")
