"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import configparser
import hashlib
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from models.config_models import Config
from models.dictionary_models import DictionaryFormat
from utils.file_utils import FileUtils, UnsupportedFileFormatError
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DICTIONARY_SUFFIXES: dict[DictionaryFormat, list[str]] = {
    DictionaryFormat.JSON: [".json"],
    DictionaryFormat.PROPERTIES: [".properties"],
    DictionaryFormat.XLIFF12: [".xlf", ".xliff"],
}


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    Reads the INI file section by section into the Config dataclass tree, applies keyword
    overrides and validates the result.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        dictionary (str | None): Optional override for DICTIONARY.PATH.
        format (str | None): Optional override for DICTIONARY.FORMAT.
        omit_missing_keys (bool | None): Optional override for DICTIONARY.OMIT_MISSING_KEYS.
        debug (bool): Force GENERAL.DEBUG on.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        **args,
    ) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()
        # option names map onto upper-case dataclass fields
        parser.optionxform = str.upper  # type: ignore[assignment]

        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self.config.GENERAL.SCRIPT_NAME = script_name
        self._convert_settings(parser)
        if args.get("dictionary") is not None:
            self.config.DICTIONARY.PATH = args["dictionary"]
        if args.get("format") is not None:
            self.config.DICTIONARY.FORMAT = args["format"]
        if args.get("omit_missing_keys") is not None:
            self.config.DICTIONARY.OMIT_MISSING_KEYS = bool(args["omit_missing_keys"])
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every known section of the INI file onto the Config object.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            self._convert_section_field(parser, formatter, section)

        known_sections: set[str] = {section.name for section in fields(self.config)}
        for section_name in parser.sections():
            if section_name not in known_sections:
                logger.warning("Ignoring unknown configuration section: '%s'", section_name)

    def _convert_section_field(
        self, parser: ConfigParser, formatter: _ConfigFormatter, section: DataclassField[Any]
    ) -> None:
        """Convert all fields in a configuration section.

        Raises:
            ConfigFormatError: If a value fails to format correctly.
        """
        for key in fields(getattr(self.config, section.name)):
            if not parser.has_option(section.name, key.name):
                logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                continue

            formatted_value = formatter.apply_format(section, key)
            setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the dictionary and translation settings.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        self._validate_dictionary_format()
        self._validate_hash_algorithm()
        self._validate_target_language()
        self._inspect_dictionary_path()

    def _validate_dictionary_format(self) -> None:
        """Normalize DICTIONARY.FORMAT to a DictionaryFormat value.

        Raises:
            ConfigTypeError: If the value is not a string.
            ConfigValueError: If the value does not name a known format.
        """
        value: Any = self.config.DICTIONARY.FORMAT
        if not isinstance(value, str):
            msg: str = f"Unsupported type used for 'DICTIONARY.FORMAT': {type(value)}"
            raise ConfigTypeError(msg)
        try:
            dictionary_format: DictionaryFormat = DictionaryFormat.from_name(value)
        except ValueError as err:
            allowed: str = ", ".join(member.value for member in DictionaryFormat)
            msg = f"Invalid value for DICTIONARY.FORMAT: '{value}'. Allowed values are: {allowed}"
            raise ConfigValueError(msg) from err

        if dictionary_format is DictionaryFormat.XLIFF12:
            logger.warning("DICTIONARY.FORMAT '%s' is not supported; opening the dictionary will fail.", value)
        self.config.DICTIONARY.FORMAT = dictionary_format.value

    def _validate_hash_algorithm(self) -> None:
        """Check that DICTIONARY.HASH_ALGORITHM names a usable hashlib algorithm.

        Raises:
            ConfigValueError: If the algorithm is not available.
        """
        algorithm: str = StringUtils.ensure_str(self.config.DICTIONARY.HASH_ALGORITHM).strip().lower()
        if algorithm not in hashlib.algorithms_available:
            msg: str = f"Invalid value for DICTIONARY.HASH_ALGORITHM: '{algorithm}' is not available"
            raise ConfigValueError(msg)
        if algorithm.startswith("shake_"):
            msg = f"Invalid value for DICTIONARY.HASH_ALGORITHM: '{algorithm}' has no fixed digest length"
            raise ConfigValueError(msg)
        self.config.DICTIONARY.HASH_ALGORITHM = algorithm

    def _validate_target_language(self) -> None:
        """Check TRANSLATION.TARGET_LANGUAGE; logs a warning if it is not lowercase.

        Raises:
            ConfigValueError: If the target language is empty.
        """
        value: str = StringUtils.ensure_str(self.config.TRANSLATION.TARGET_LANGUAGE).strip()
        if not value:
            msg = "'TRANSLATION.TARGET_LANGUAGE' must not be empty."
            raise ConfigValueError(msg)
        if not value.islower():
            logger.warning("The value for 'TRANSLATION.TARGET_LANGUAGE' should be all lowercase.")
        self.config.TRANSLATION.TARGET_LANGUAGE = value

    def _inspect_dictionary_path(self) -> None:
        """Warn about a missing dictionary path or a suffix that does not match the format."""
        path: str = StringUtils.ensure_str(self.config.DICTIONARY.PATH).strip()
        if not path:
            logger.warning("'DICTIONARY.PATH' is not set; the dictionary cannot be opened.")
            return

        dictionary_format = DictionaryFormat(self.config.DICTIONARY.FORMAT)
        try:
            FileUtils.validate_suffix(Path(path), DICTIONARY_SUFFIXES[dictionary_format])
        except UnsupportedFileFormatError as err:
            logger.warning("'DICTIONARY.PATH' does not look like a %s file: %s", dictionary_format.name, err)


class _ConfigFormatter:
    """Converts INI string values to the bool or str type of the matching Config field."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert an INI value to the type of the current value of the Config field.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If the Config field has a type other than bool or str.
        """
        formatters: dict[type[Any], Callable[[DataclassField[Any], DataclassField[Any]], Any]] = {
            bool: self.parse_as_boolean,
            str: self.parse_as_string,
        }

        field_type: type[Any] = type(getattr(getattr(self.config, section.name), key.name))
        formatter: Callable[[DataclassField[Any], DataclassField[Any]], Any] | None = formatters.get(field_type)
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigTypeError(msg) from err

        msg = f"Unsupported type '{field_type.__name__}' for {section.name}.{key.name}"
        raise ConfigTypeError(msg)

    def parse_as_string(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        """Return the INI string with one pair of surrounding quotes removed."""
        value: str = self.parser.get(section.name, key.name).strip()
        for char in ("'", '"'):
            if len(value) >= 2 and value.startswith(char) and value.endswith(char):
                return value[1:-1]
        return value

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)


if __name__ == "__main__":
    import pprint

    test = ConfigLoader(config_filename="translator.ini", script_name="TEST")
    pp = pprint.PrettyPrinter(indent=1, width=100)
    pp.pprint(test.config)
