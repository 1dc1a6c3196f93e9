from __future__ import annotations

from typing import TYPE_CHECKING

from core.dictionary.interface import DictionaryBackend, UnsupportedDictionaryFormatError
from models.dictionary_models import DictionaryFormat
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from core.dictionary.interface import RecordMap

__all__: list[str] = ["XliffDictionaryBackend"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class XliffDictionaryBackend(DictionaryBackend):
    """XLIFF 1.2 backend.

    The format can be selected in the configuration but reading and writing it is not
    implemented; both operations raise so that a dictionary is never silently lost.
    """

    @staticmethod
    def fetch_format() -> DictionaryFormat:
        return DictionaryFormat.XLIFF12

    def load(self, path: Path) -> RecordMap:
        logger.error("Cannot load '%s': XLIFF 1.2 dictionaries are not supported", path)
        msg: str = f"Unsupported dictionary format '{self.fetch_format()}': cannot load '{path}'"
        raise UnsupportedDictionaryFormatError(msg)

    def save(self, path: Path, records: RecordMap) -> None:
        logger.error("Cannot save %d records to '%s': XLIFF 1.2 dictionaries are not supported", len(records), path)
        msg: str = f"Unsupported dictionary format '{self.fetch_format()}': cannot save '{path}'"
        raise UnsupportedDictionaryFormatError(msg)
