"""Core components of the dictionary translator.

This package contains the translator interface, the dictionary-backed translator and the
storage backends for master dictionary files.
"""

from core.dictionary import DictionaryBackend, DictionaryTranslatorError, UnsupportedDictionaryFormatError
from core.trans import DictionaryTranslator, TransInterface

__all__: list[str] = [
    "DictionaryBackend",
    "DictionaryTranslator",
    "DictionaryTranslatorError",
    "TransInterface",
    "UnsupportedDictionaryFormatError",
]
