"""Dictionary storage backend implementations.

Importing this package registers every backend with DictionaryBackend.

Modules:
- JsonDictionaryBackend: structured document with language codes and records.
- PropertiesDictionaryBackend: flat ``fingerprint=translation`` file.
- XliffDictionaryBackend: declared XLIFF 1.2 format, rejects every operation.
"""

from core.dictionary.backends.json_backend import JsonDictionaryBackend
from core.dictionary.backends.properties_backend import PropertiesCodec, PropertiesDictionaryBackend
from core.dictionary.backends.xliff_backend import XliffDictionaryBackend

__all__: list[str] = [
    "JsonDictionaryBackend",
    "PropertiesCodec",
    "PropertiesDictionaryBackend",
    "XliffDictionaryBackend",
]
