from __future__ import annotations

from configparser import ConfigParser
from dataclasses import fields
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
    _ConfigFormatter,
)
from models.config_models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "translator.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_config_loader_reads_all_sections(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = True
        LOG_FILE = "translator.log"

        [DICTIONARY]
        PATH = "dictionaries/master.properties"
        FORMAT = PROPERTIES
        OMIT_MISSING_KEYS = yes
        HASH_ALGORITHM = SHA256

        [TRANSLATION]
        TARGET_LANGUAGE = de
        """,
    )

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.GENERAL.DEBUG is True
    assert loader.config.GENERAL.LOG_FILE == "translator.log"
    assert loader.config.GENERAL.SCRIPT_NAME == "test"
    assert loader.config.DICTIONARY.PATH == "dictionaries/master.properties"
    assert loader.config.DICTIONARY.FORMAT == "properties"
    assert loader.config.DICTIONARY.OMIT_MISSING_KEYS is True
    assert loader.config.DICTIONARY.HASH_ALGORITHM == "sha256"
    assert loader.config.TRANSLATION.TARGET_LANGUAGE == "de"


def test_config_loader_defaults_and_lowercase_option_names(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        path = master.json

        [TRANSLATION]
        target_language = fr
        """,
    )

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.DICTIONARY.PATH == "master.json"
    assert loader.config.DICTIONARY.FORMAT == "json"
    assert loader.config.DICTIONARY.OMIT_MISSING_KEYS is False
    assert loader.config.DICTIONARY.HASH_ALGORITHM == "sha1"
    assert loader.config.TRANSLATION.TARGET_LANGUAGE == "fr"


def test_config_loader_applies_overrides(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        PATH = master.json

        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    loader = ConfigLoader(
        config_filename=str(ini_path),
        script_name="test",
        dictionary="other.properties",
        format="properties",
        omit_missing_keys=True,
        debug=True,
    )

    assert loader.config.DICTIONARY.PATH == "other.properties"
    assert loader.config.DICTIONARY.FORMAT == "properties"
    assert loader.config.DICTIONARY.OMIT_MISSING_KEYS is True
    assert loader.config.GENERAL.DEBUG is True


def test_unknown_format_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        FORMAT = yaml

        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    with pytest.raises(ConfigValueError, match="DICTIONARY.FORMAT"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_format_override_of_wrong_type_raises_config_type_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    with pytest.raises(ConfigTypeError):
        ConfigLoader(config_filename=str(ini_path), script_name="test", format=1)


def test_unavailable_hash_algorithm_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        HASH_ALGORITHM = crc0

        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    with pytest.raises(ConfigValueError, match="HASH_ALGORITHM"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_missing_target_language_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        PATH = master.json
        """,
    )

    with pytest.raises(ConfigValueError, match="TARGET_LANGUAGE"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_boolean_value_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        OMIT_MISSING_KEYS = maybe

        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_malformed_ini_raises_config_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        PATH = master.json
        """,
    )

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_xliff_format_is_accepted_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [DICTIONARY]
        PATH = master.json
        FORMAT = xliff12

        [TRANSLATION]
        TARGET_LANGUAGE = fr
        """,
    )

    with caplog.at_level("WARNING"):
        loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.DICTIONARY.FORMAT == "xliff12"
    assert "not supported" in caplog.text
    assert "does not look like a XLIFF12 file" in caplog.text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [('"quoted.json"', "quoted.json"), ("'single.json'", "single.json"), ('"', '"'), ("plain.json", "plain.json")],
)
def test_string_values_lose_one_pair_of_quotes(raw: str, expected: str) -> None:
    parser = ConfigParser()
    parser.read_string(f"[DICTIONARY]\nPATH = {raw}\n")
    config = Config()
    section = next(f for f in fields(config) if f.name == "DICTIONARY")
    key = next(f for f in fields(config.DICTIONARY) if f.name == "PATH")

    assert _ConfigFormatter(config, parser).apply_format(section, key) == expected


def test_field_of_unsupported_type_raises_config_type_error() -> None:
    parser = ConfigParser()
    parser.read_string("[DICTIONARY]\nPATH = 3\n")
    config = Config()
    config.DICTIONARY.PATH = 0  # type: ignore[assignment]
    section = next(f for f in fields(config) if f.name == "DICTIONARY")
    key = next(f for f in fields(config.DICTIONARY) if f.name == "PATH")

    with pytest.raises(ConfigTypeError, match="Unsupported type 'int'"):
        _ConfigFormatter(config, parser).apply_format(section, key)
