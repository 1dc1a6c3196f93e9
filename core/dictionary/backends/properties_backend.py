"""Flat key-value dictionary backend.

Stores the dictionary as a Java-style ``.properties`` file: one ``fingerprint=translation`` pair
per line. The format has no room for the source phrase, so records loaded from it carry an empty
source phrase, and records without a translation are written with their source phrase as value
so that translators see what needs translating.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING, Final

from core.dictionary.interface import DictionaryBackend, DictionaryFileFormatError
from models.dictionary_models import DictionaryFormat, TranslationRecord
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterator, Mapping
    from pathlib import Path

    from core.dictionary.interface import RecordMap

__all__: list[str] = ["PropertiesCodec", "PropertiesDictionaryBackend"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

_LINE_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_WHITESPACE: Final[str] = " \t\f"
_KEY_TERMINATORS: Final[str] = "=:" + _WHITESPACE
_ESCAPE_READ: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPE_WRITE: Final[dict[str, str]] = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}


class PropertiesCodec:
    """Reads and writes the ``.properties`` text format.

    Reading follows the ``java.util.Properties`` rules: ``#`` and ``!`` comment lines, keys
    terminated by ``=``, ``:`` or whitespace, backslash line continuations and ``\\uXXXX``
    escapes. Writing escapes the characters that would otherwise change the meaning of a line
    and leaves non-ASCII text as is.
    """

    @staticmethod
    def loads(text: str) -> dict[str, str]:
        """Parse ``.properties`` text.

        Raises:
            ValueError: If the text contains a malformed ``\\uXXXX`` escape.
        """
        properties: dict[str, str] = {}
        for line in PropertiesCodec._logical_lines(text):
            key, value = PropertiesCodec._split_line(line)
            properties[PropertiesCodec._unescape(key)] = PropertiesCodec._unescape(value)
        return properties

    @staticmethod
    def dumps(properties: Mapping[str, str], comment: str | None = None, timestamp: datetime | None = None) -> str:
        """Serialize key-value pairs, sorted by key, after a comment header and a timestamp line."""
        lines: list[str] = []
        if comment is not None:
            lines.extend(f"#{part}" for part in _LINE_BREAK_PATTERN.split(comment))
        stamp: datetime = timestamp or datetime.now().astimezone()
        lines.append("#" + stamp.strftime("%a %b %d %H:%M:%S %Z %Y").replace("  ", " "))
        for key in sorted(properties):
            escaped_key: str = PropertiesCodec._escape(key, escape_all_spaces=True)
            escaped_value: str = PropertiesCodec._escape(properties[key], escape_all_spaces=False)
            lines.append(f"{escaped_key}={escaped_value}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _logical_lines(text: str) -> Iterator[str]:
        pending: str | None = None
        for natural_line in _LINE_BREAK_PATTERN.split(text):
            line: str = natural_line.lstrip(_WHITESPACE)
            if pending is None and (not line or line[0] in "#!"):
                continue
            trailing: int = len(line) - len(line.rstrip("\\"))
            if trailing % 2 == 1:
                pending = (pending or "") + line[:-1]
                continue
            yield (pending or "") + line
            pending = None
        if pending is not None:
            yield pending

    @staticmethod
    def _split_line(line: str) -> tuple[str, str]:
        index: int = 0
        while index < len(line):
            char: str = line[index]
            if char == "\\":
                index += 2
                continue
            if char in _KEY_TERMINATORS:
                break
            index += 1

        key: str = line[:index]
        rest: str = line[index:].lstrip(_WHITESPACE)
        if rest[:1] in ("=", ":"):
            rest = rest[1:].lstrip(_WHITESPACE)
        return key, rest

    @staticmethod
    def _unescape(value: str) -> str:
        chars: list[str] = []
        index: int = 0
        length: int = len(value)
        while index < length:
            char: str = value[index]
            index += 1
            if char != "\\":
                chars.append(char)
                continue
            if index >= length:
                break
            char = value[index]
            index += 1
            if char == "u":
                digits: str = value[index : index + 4]
                if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                    msg: str = f"Malformed \\uxxxx encoding: '\\u{digits}'"
                    raise ValueError(msg)
                chars.append(chr(int(digits, 16)))
                index += 4
                continue
            chars.append(_ESCAPE_READ.get(char, char))
        # \uXXXX pairs may encode a surrogate pair
        return "".join(chars).encode("utf-16-le", "surrogatepass").decode("utf-16-le")

    @staticmethod
    def _escape(value: str, *, escape_all_spaces: bool) -> str:
        chars: list[str] = []
        for position, char in enumerate(value):
            if char == " ":
                chars.append("\\ " if escape_all_spaces or position == 0 else " ")
            else:
                chars.append(_ESCAPE_WRITE.get(char, char))
        return "".join(chars)


class PropertiesDictionaryBackend(DictionaryBackend):
    """Flat key-value backend (``fingerprint=translation`` per line)."""

    @staticmethod
    def fetch_format() -> DictionaryFormat:
        return DictionaryFormat.PROPERTIES

    def load(self, path: Path) -> RecordMap:
        if not FileUtils.is_readable_file(path):
            logger.info("Dictionary file '%s' does not exist, starting empty", path)
            return {}

        with path.open("r", encoding="utf-8") as f:
            text: str = f.read()

        try:
            properties: dict[str, str] = PropertiesCodec.loads(text)
        except ValueError as err:
            msg: str = f"Failed to parse dictionary file '{path}': {err}"
            raise DictionaryFileFormatError(msg) from err

        records: RecordMap = {
            key: TranslationRecord(calculated_key=key, source_phrase="", target_phrase=value)
            for key, value in properties.items()
        }
        logger.debug("Loaded %d records from '%s'", len(records), path)
        return records

    def save(self, path: Path, records: RecordMap) -> None:
        properties: dict[str, str] = {
            record.calculated_key: StringUtils.first_non_empty(record.target_phrase, record.source_phrase, "")
            for record in records.values()
        }
        FileUtils.atomic_write_text(path, PropertiesCodec.dumps(properties, comment=""), newline="\n")
        logger.debug("Saved %d records to '%s'", len(properties), path)
