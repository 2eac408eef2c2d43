"""File name data model."""

import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from rename_mod_time.errors import InvalidFileNameError, ModificationTimeUnavailableError
from rename_mod_time.width import wide_char_offset


DIRECTORY_SEPARATORS = frozenset(sep for sep in ("/", os.sep, os.altsep) if sep)


class FileEntry(BaseModel):
    """A file in the working directory, split into base name and extension."""

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(description="File name with the extension removed")
    extension: str = Field(default="", description="Text after the last dot, empty if there is none")

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_name(cls, name: str) -> "FileEntry":
        """Create a FileEntry from a bare file name.

        Dotfiles (`.bashrc`) and names without a dot are kept whole with an empty
        extension. A trailing dot (`notes.`) is also kept as part of the base name
        so the display name always reproduces the input.

        Raises:
            InvalidFileNameError: If the name is empty or contains a directory separator.
        """
        if not name:
            raise InvalidFileNameError("File name must not be empty.")
        if any(sep in name for sep in DIRECTORY_SEPARATORS):
            raise InvalidFileNameError(
                f"'{name}' contains a directory separator. "
                "Only files in the current directory are supported; please remove all slashes."
            )

        if name.startswith("."):
            return cls(base_name=name)

        base_name, dot, extension = name.rpartition(".")
        if not dot or not extension:
            return cls(base_name=name)

        return cls(base_name=base_name, extension=extension)

    @property
    def display_name(self) -> str:
        """Full file name, base name plus dot and extension when present."""
        if not self.extension:
            return self.base_name
        return f"{self.base_name}.{self.extension}"

    @property
    def full_length(self) -> int:
        """Character count of the display name."""
        return len(self.base_name) + (1 + len(self.extension) if self.extension else 0)

    @property
    def extension_length(self) -> int:
        return len(self.extension)

    def wide_char_offset(self) -> int:
        """Extra terminal cells taken by wide characters in the base name."""
        return wide_char_offset(self.base_name)

    def modification_time(self, directory: Path = Path(".")) -> datetime:
        """Read the file's modification time as an aware local datetime.

        Raises:
            ModificationTimeUnavailableError: If the file cannot be stat'ed.
        """
        path = directory / self.display_name
        try:
            mtime = path.stat().st_mtime
        except OSError as e:
            raise ModificationTimeUnavailableError(self.display_name, e.strerror or str(e)) from e

        return datetime.fromtimestamp(mtime).astimezone()

    def renamed(self, time_format: str, directory: Path = Path(".")) -> "FileEntry":
        """Derive the entry this file is renamed to.

        The new base name is the file's modification time formatted with
        `time_format`; the extension is kept.
        """
        timestamp = self.modification_time(directory).strftime(time_format)
        return FileEntry(base_name=timestamp, extension=self.extension)
