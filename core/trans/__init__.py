"""Phrase translators.

This package provides the translator interface used by the translation pipeline and the
dictionary-backed translation-memory implementation.
"""

from core.trans.dictionary_translator import DictionaryTranslator
from core.trans.interface import TransInterface

__all__: list[str] = ["DictionaryTranslator", "TransInterface"]
