"""This module defines the abstract base class for phrase translators.

A translation pipeline drives a translator once per source-language pass:
``reconfigure`` -> ``open`` -> any number of ``translate`` calls -> ``close``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["TransInterface"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TransInterface(ABC):
    """Abstract base class for phrase translators.

    Subclasses are registered automatically under the name returned by ``fetch_translator_name()``
    so that a pipeline can select its translator from configuration.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered translator classes keyed
            by name.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        name: str = cls.fetch_translator_name()
        if not isinstance(name, str) or name == "":
            return  # unnamed translators are allowed but not registered
        if name in cls.registered:
            msg: str = f"A translator with the name '{name}' is already registered."
            raise ValueError(msg)
        cls.registered[name] = cls

    @classmethod
    def create(cls, name: str) -> TransInterface:
        """Instantiate a registered translator by name.

        Raises:
            KeyError: If no translator is registered under that name.
        """
        try:
            translator_cls: type[TransInterface] = cls.registered[name]
        except KeyError:
            logger.error("Translator not found: '%s'", name)
            raise
        return translator_cls()

    @staticmethod
    @abstractmethod
    def fetch_translator_name() -> str:
        """Get the name the translator is registered under."""

    @abstractmethod
    def reconfigure(self, config: Config, source_language: str) -> None:
        """Apply configuration for a new source-language pass, discarding previous state."""

    @abstractmethod
    def open(self) -> None:
        """Acquire the resources needed for translating."""

    @abstractmethod
    def translate(self, source_phrase: str | None) -> str | None:
        """Translate one phrase.

        Returns:
            str | None: The translation, or None when the phrase should be left out.
        """

    @abstractmethod
    def close(self) -> None:
        """Persist state and release resources."""
