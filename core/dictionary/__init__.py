"""Master dictionary storage.

Provides the backend interface and the concrete file formats a master dictionary can be kept in.
"""

from core.dictionary.backends import (
    JsonDictionaryBackend,
    PropertiesCodec,
    PropertiesDictionaryBackend,
    XliffDictionaryBackend,
)
from core.dictionary.interface import (
    DictionaryBackend,
    DictionaryBackendError,
    DictionaryFileFormatError,
    DictionaryNotConfiguredError,
    DictionaryTranslatorError,
    UnsupportedDictionaryFormatError,
)

__all__: list[str] = [
    "DictionaryBackend",
    "DictionaryBackendError",
    "DictionaryFileFormatError",
    "DictionaryNotConfiguredError",
    "DictionaryTranslatorError",
    "JsonDictionaryBackend",
    "PropertiesCodec",
    "PropertiesDictionaryBackend",
    "UnsupportedDictionaryFormatError",
    "XliffDictionaryBackend",
]
