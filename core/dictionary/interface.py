"""Abstract base class for master dictionary storage backends and related exceptions.

A backend knows how to read a dictionary file into a mapping of fingerprint to TranslationRecord
and how to write such a mapping back. Concrete backends register themselves under the
DictionaryFormat they implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from models.dictionary_models import DictionaryFormat
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from models.dictionary_models import TranslationRecord

__all__: list[str] = [
    "DictionaryBackend",
    "DictionaryBackendError",
    "DictionaryFileFormatError",
    "DictionaryNotConfiguredError",
    "DictionaryTranslatorError",
    "RecordMap",
    "UnsupportedDictionaryFormatError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

RecordMap: TypeAlias = "dict[str, TranslationRecord]"


class DictionaryTranslatorError(Exception):
    """An error occurred in the dictionary translator."""


class DictionaryNotConfiguredError(DictionaryTranslatorError):
    """The translator was used before reconfigure() was called."""


class DictionaryBackendError(DictionaryTranslatorError):
    """An error occurred while reading or writing a dictionary file."""


class UnsupportedDictionaryFormatError(DictionaryBackendError):
    """The selected dictionary format has no working implementation."""


class DictionaryFileFormatError(DictionaryBackendError):
    """The dictionary file is not formatted correctly."""


class DictionaryBackend(ABC):
    """Abstract base class for dictionary storage backends.

    Subclasses are registered automatically in ``registered`` under the format returned by
    ``fetch_format()``. The language codes are written by backends whose file format has room
    for them and ignored by the others.

    Attributes:
        registered (ClassVar[dict[DictionaryFormat, type[DictionaryBackend]]]): Registered backend
            classes keyed by the format they implement.
    """

    registered: ClassVar[dict[DictionaryFormat, type[DictionaryBackend]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        dictionary_format: DictionaryFormat = cls.fetch_format()
        if dictionary_format in cls.registered:
            msg: str = f"A dictionary backend for '{dictionary_format}' is already registered."
            raise ValueError(msg)
        cls.registered[dictionary_format] = cls

    def __init__(self, source_language: str | None = None, target_language: str | None = None) -> None:
        self.source_language: str | None = source_language
        self.target_language: str | None = target_language

    @classmethod
    def for_format(
        cls,
        dictionary_format: DictionaryFormat | str,
        *,
        source_language: str | None = None,
        target_language: str | None = None,
    ) -> DictionaryBackend:
        """Create the backend registered for a dictionary format.

        Args:
            dictionary_format (DictionaryFormat | str): Format enum member or its name.
            source_language (str | None): Source language code of the dictionary.
            target_language (str | None): Target language code of the dictionary.

        Returns:
            DictionaryBackend: A backend instance.

        Raises:
            UnsupportedDictionaryFormatError: If the format is unknown or has no registered backend.
        """
        try:
            fmt: DictionaryFormat = DictionaryFormat.from_name(dictionary_format)
        except ValueError as err:
            raise UnsupportedDictionaryFormatError(str(err)) from err

        backend_cls: type[DictionaryBackend] | None = cls.registered.get(fmt)
        if backend_cls is None:
            msg: str = f"No dictionary backend registered for format '{fmt}'"
            raise UnsupportedDictionaryFormatError(msg)
        logger.debug("Selected dictionary backend '%s' for format '%s'", backend_cls.__name__, fmt)
        return backend_cls(source_language=source_language, target_language=target_language)

    @staticmethod
    @abstractmethod
    def fetch_format() -> DictionaryFormat:
        """Get the dictionary format this backend implements."""

    @abstractmethod
    def load(self, path: Path) -> RecordMap:
        """Read a dictionary file.

        Args:
            path (Path): Dictionary file. A missing file yields an empty mapping.

        Returns:
            RecordMap: Records keyed by their calculated key.

        Raises:
            DictionaryFileFormatError: If the file cannot be parsed.
            OSError: If the file cannot be read.
        """

    @abstractmethod
    def save(self, path: Path, records: RecordMap) -> None:
        """Write all records to a dictionary file, replacing its content.

        Args:
            path (Path): Dictionary file.
            records (RecordMap): Records keyed by their calculated key.

        Raises:
            OSError: If the file cannot be written.
        """
