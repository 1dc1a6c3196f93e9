"""Wiring between the configuration and the translator for pipeline callers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.dictionary_translator import DictionaryTranslator  # noqa: F401
from core.trans.interface import TransInterface
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["build_translator", "setup_logging"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def setup_logging(config: Config) -> LoggerUtils:
    """Attach log handlers according to GENERAL.LOG_FILE and GENERAL.DEBUG."""
    log_file: str = config.GENERAL.LOG_FILE.strip()
    logger_utils = LoggerUtils(FileUtils.resolve_path(log_file) if log_file else "")
    logger_utils.set_level("DEBUG" if config.GENERAL.DEBUG else "INFO")
    return logger_utils


def build_translator(config: Config, source_language: str, name: str = "dictionary") -> TransInterface:
    """Create a registered translator and configure it for one source-language pass."""
    translator: TransInterface = TransInterface.create(name)
    translator.reconfigure(config, source_language)
    logger.debug("Translator '%s' ready for source language '%s'", name, source_language)
    return translator
