"""Translation-memory translator backed by a master dictionary file.

The translator never produces translations itself. It answers phrases from the dictionary and
records unknown phrases with an empty translation, so the dictionary written at ``close()``
doubles as the list of phrases still waiting to be translated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.dictionary import backends  # noqa: F401  # registers the dictionary backends
from core.dictionary.interface import DictionaryBackend, DictionaryNotConfiguredError
from core.trans.interface import TransInterface
from models.dictionary_models import UNKNOWN_PLACEHOLDER, DictionaryStatistics, TranslationRecord
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from core.dictionary.interface import RecordMap
    from models.config_models import Config

__all__: list[str] = ["DictionaryTranslator"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class DictionaryTranslator(TransInterface):
    """Translator that looks phrases up in a master dictionary.

    Entries are keyed by the fingerprint of the lowercased, trimmed source phrase. The dictionary
    is loaded by ``open()`` and written back by ``close()`` through the backend selected by
    ``config.DICTIONARY.FORMAT``. Instances are not thread-safe; callers serialize access.
    """

    def __init__(self) -> None:
        self._config: Config | None = None
        self._source_language: str | None = None
        self._backend: DictionaryBackend | None = None
        self._dictionary: RecordMap = {}

    @staticmethod
    def fetch_translator_name() -> str:
        return "dictionary"

    @property
    def source_language(self) -> str | None:
        return self._source_language

    @property
    def dictionary_path(self) -> Path:
        """Absolute path of the configured dictionary file.

        Raises:
            DictionaryNotConfiguredError: If the translator is not configured or no path is set.
        """
        config: Config = self._require_config()
        if not config.DICTIONARY.PATH:
            msg = "No dictionary path is configured (DICTIONARY.PATH)"
            raise DictionaryNotConfiguredError(msg)
        return FileUtils.resolve_path(config.DICTIONARY.PATH)

    def reconfigure(self, config: Config, source_language: str) -> None:
        """Switch to a new configuration and source language.

        The in-memory dictionary is replaced with an empty one; lookups not yet saved by
        ``close()`` are discarded.

        Args:
            config (Config): Translator configuration.
            source_language (str): Language code of the phrases passed to ``translate()``.

        Raises:
            UnsupportedDictionaryFormatError: If the configured format is unknown.
        """
        if self._dictionary:
            logger.warning("Discarding %d unsaved dictionary entries on reconfigure", len(self._dictionary))
        self._dictionary = {}
        self._config = None
        self._source_language = None
        self._backend = None

        backend: DictionaryBackend = DictionaryBackend.for_format(
            config.DICTIONARY.FORMAT,
            source_language=source_language,
            target_language=config.TRANSLATION.TARGET_LANGUAGE,
        )
        self._config = config
        self._source_language = source_language
        self._backend = backend
        logger.info(
            "Dictionary translator configured: source='%s', target='%s', format='%s'",
            source_language,
            config.TRANSLATION.TARGET_LANGUAGE,
            backend.fetch_format(),
        )

    def open(self) -> None:
        """Load the dictionary file, replacing the in-memory entries.

        A missing file leaves the dictionary empty.
        """
        backend: DictionaryBackend = self._require_backend()
        path: Path = self.dictionary_path
        self._dictionary = {}
        self._dictionary.update(backend.load(path))
        logger.info("Opened dictionary '%s' with %d entries", path, len(self._dictionary))

    def close(self) -> None:
        """Write the dictionary file and clear the in-memory entries.

        If writing fails the error propagates and the entries are kept so the caller can retry.
        """
        backend: DictionaryBackend = self._require_backend()
        path: Path = self.dictionary_path
        backend.save(path, self._dictionary)

        stats: DictionaryStatistics = self.get_statistics()
        logger.info(
            "Closed dictionary '%s': %d entries, %d translated, %d missing",
            path,
            stats.total_entries,
            stats.translated_entries,
            stats.missing_entries,
        )
        self._dictionary = {}

    def translate(self, source_phrase: str | None) -> str | None:
        """Look up a phrase, registering it when it is unknown.

        Args:
            source_phrase (str | None): Phrase in the source language.

        Returns:
            str | None: ``None`` for ``None``; ``""`` for ``""``; the recorded translation (which
            may be empty) for a known phrase. For an unknown phrase the phrase is recorded and
            ``None`` is returned when ``DICTIONARY.OMIT_MISSING_KEYS`` is set, otherwise
            ``"__UNKNOWN__"``.

        Raises:
            FingerprintError: If the configured hash algorithm is unavailable.
        """
        if source_phrase is None:
            return None
        if source_phrase == "":
            return ""

        config: Config = self._require_config()
        key: str = self._fingerprint(source_phrase)
        record: TranslationRecord | None = self._dictionary.get(key)
        if record is not None:
            return record.target_phrase

        self._dictionary[key] = TranslationRecord(calculated_key=key, source_phrase=source_phrase)
        logger.debug("Registered missing phrase '%s' as %s", source_phrase, key)

        if config.DICTIONARY.OMIT_MISSING_KEYS:
            return None
        return UNKNOWN_PLACEHOLDER

    def record_translation(self, source_phrase: str, target_phrase: str) -> TranslationRecord:
        """Store an externally supplied translation for a phrase.

        Creates the entry when the phrase is unknown, otherwise overwrites its translation.

        Raises:
            ValueError: If the source phrase is empty.
        """
        if not source_phrase:
            msg = "Cannot record a translation for an empty source phrase"
            raise ValueError(msg)

        key: str = self._fingerprint(source_phrase)
        record: TranslationRecord | None = self._dictionary.get(key)
        if record is None:
            record = TranslationRecord(calculated_key=key, source_phrase=source_phrase)
            self._dictionary[key] = record
        elif not record.source_phrase:
            record.source_phrase = source_phrase
        record.target_phrase = StringUtils.ensure_str(target_phrase)
        return record

    def missing_phrases(self) -> list[str]:
        """List entries that still have no translation, by source phrase (or key if it is unknown)."""
        return [
            record.source_phrase or record.calculated_key
            for record in self._dictionary.values()
            if not record.is_translated
        ]

    def get_statistics(self) -> DictionaryStatistics:
        translated: int = sum(1 for record in self._dictionary.values() if record.is_translated)
        return DictionaryStatistics(
            total_entries=len(self._dictionary),
            translated_entries=translated,
            missing_entries=len(self._dictionary) - translated,
        )

    def __len__(self) -> int:
        return len(self._dictionary)

    def __contains__(self, source_phrase: object) -> bool:
        if self._config is None or not isinstance(source_phrase, str) or not source_phrase:
            return False
        return self._fingerprint(source_phrase) in self._dictionary

    def _fingerprint(self, source_phrase: str) -> str:
        config: Config = self._require_config()
        return StringUtils.generate_hash_key(source_phrase, config.DICTIONARY.HASH_ALGORITHM)

    def _require_config(self) -> Config:
        if self._config is None:
            msg = "DictionaryTranslator is not configured. Call reconfigure() first."
            raise DictionaryNotConfiguredError(msg)
        return self._config

    def _require_backend(self) -> DictionaryBackend:
        self._require_config()
        if self._backend is None:
            msg = "No dictionary backend is selected. Call reconfigure() first."
            raise DictionaryNotConfiguredError(msg)
        return self._backend
