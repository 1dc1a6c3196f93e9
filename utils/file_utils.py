from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

__all__: list[str] = [
    "FileUtils",
    "FileUtilsError",
    "InvalidFileTypeError",
    "UnsupportedFileFormatError",
]


class FileUtils:
    """Path helpers shared by the dictionary backends and the configuration loader."""

    @staticmethod
    def resolve_path(path: str | Path, *, strict: bool = False) -> Path:
        """Convert a user-supplied path to an absolute path.

        Expands environment variables (e.g., $HOME, %APPDATA%) and ``~``, and resolves relative
        paths against the current working directory.

        Args:
            path (str | Path): The input path (e.g., "~/dictionaries/$LANG/master.json").
            strict (bool): Raise if the path does not exist. Defaults to False.

        Returns:
            Path: The absolute path.
        """
        expanded: str = os.path.expandvars(str(path))
        user_expanded: Path = Path(expanded).expanduser()

        if user_expanded.is_absolute():
            return user_expanded.resolve(strict=strict)
        return (Path.cwd() / user_expanded).resolve(strict=strict)

    @staticmethod
    def is_readable_file(file_path: Path) -> bool:
        """Tell whether a dictionary file exists and can be loaded.

        A missing file is not an error, the caller starts from an empty dictionary.

        Raises:
            InvalidFileTypeError: If the path exists but is a directory.
        """
        if not file_path.exists():
            return False
        if file_path.is_dir():
            msg = f"Invalid file type (directory): {file_path}"
            raise InvalidFileTypeError(msg)
        return True

    @staticmethod
    def ensure_parent_dir(file_path: Path) -> None:
        """Create the parent directories of ``file_path`` when they are missing.

        OSError from the filesystem propagates unchanged.
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def atomic_write_text(file_path: Path, text: str, *, newline: str | None = None) -> None:
        """Replace the contents of a UTF-8 text file in one step.

        The text is written to a temporary file in the same directory, which is then renamed over
        ``file_path``. If anything fails the temporary file is removed and the existing file is left
        as it was. Parent directories are created when missing.

        Raises:
            OSError: If the directory or the file cannot be written.
            UnicodeEncodeError: If the text cannot be encoded as UTF-8.
        """
        FileUtils.ensure_parent_dir(file_path)
        fd, temp_name = tempfile.mkstemp(dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp")
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline=newline) as f:
                f.write(text)
            if file_path.exists():
                shutil.copymode(file_path, temp_path)
            os.replace(temp_path, file_path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    @staticmethod
    def validate_suffix(file_path: Path, suffix: list[str] | str) -> None:
        """Check that a file has one of the allowed suffixes.

        Args:
            file_path (Path): The file path to check. It does not need to exist.
            suffix (list[str] | str): Allowed suffix(es) (e.g., [".json"] or ".properties").

        Raises:
            UnsupportedFileFormatError: If the suffix is not in the allowed list.
        """
        if isinstance(suffix, str):
            suffix = [suffix]

        if file_path.suffix.lower() not in [s.lower() for s in suffix]:
            msg = f"Unsupported file format: '{file_path.suffix}'. Supported formats are: {', '.join(suffix)}"
            raise UnsupportedFileFormatError(msg)


class FileUtilsError(Exception):
    """Base exception for FileUtils errors."""


class InvalidFileTypeError(FileUtilsError):
    """The path does not point to a regular file."""


class UnsupportedFileFormatError(FileUtilsError):
    """The file suffix does not match the expected format."""
