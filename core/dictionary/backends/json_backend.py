from __future__ import annotations

import json
from typing import TYPE_CHECKING

from core.dictionary.interface import DictionaryBackend, DictionaryFileFormatError
from models.dictionary_models import DictionaryDocument, DictionaryFormat
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from core.dictionary.interface import RecordMap

__all__: list[str] = ["JsonDictionaryBackend"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

JSON_INDENT: int = 2


class JsonDictionaryBackend(DictionaryBackend):
    """Structured-document backend.

    The file holds the source and target language codes and the list of records::

        {
          "sourceLanguage": "en",
          "targetLanguage": "de",
          "objects": [
            {"calculatedKey": "...", "sourcePhrase": "Hello", "targetPhrase": "Hallo"}
          ]
        }
    """

    @staticmethod
    def fetch_format() -> DictionaryFormat:
        return DictionaryFormat.JSON

    def load(self, path: Path) -> RecordMap:
        if not FileUtils.is_readable_file(path):
            logger.info("Dictionary file '%s' does not exist, starting empty", path)
            return {}

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as err:
            msg: str = f"Failed to parse dictionary file '{path}': {err}"
            raise DictionaryFileFormatError(msg) from err

        if not isinstance(data, dict):
            msg = f"Dictionary file '{path}' does not contain a JSON object"
            raise DictionaryFileFormatError(msg)

        try:
            document: DictionaryDocument = DictionaryDocument.from_dict(data, infer_missing=True)
        except (AttributeError, KeyError, TypeError, ValueError) as err:
            msg = f"Invalid dictionary document in '{path}': {err}"
            raise DictionaryFileFormatError(msg) from err

        records: RecordMap = {}
        for record in document.objects or []:
            if not record.calculated_key:
                logger.warning("Skipping record without calculatedKey in '%s': %s", path, record)
                continue
            if record.target_phrase is None:
                record.target_phrase = ""
            if record.source_phrase is None:
                record.source_phrase = ""
            records[record.calculated_key] = record

        if document.source_language and self.source_language and document.source_language != self.source_language:
            logger.warning(
                "Dictionary '%s' was written for source language '%s', expected '%s'",
                path,
                document.source_language,
                self.source_language,
            )
        logger.debug("Loaded %d records from '%s'", len(records), path)
        return records

    def save(self, path: Path, records: RecordMap) -> None:
        document = DictionaryDocument(
            source_language=self.source_language,
            target_language=self.target_language,
            objects=list(records.values()),
        )
        text: str = json.dumps(document.to_dict(), ensure_ascii=False, indent=JSON_INDENT) + "\n"
        FileUtils.atomic_write_text(path, text)
        logger.debug("Saved %d records to '%s'", len(records), path)
