"""Utility modules for the dictionary translator.

This package provides helpers for logging, path handling and phrase fingerprinting.
"""

from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import FingerprintError, StringUtils

__all__: list[str] = ["FileUtils", "FingerprintError", "LoggerUtils", "StringUtils"]
