"""Errors raised while planning or executing a rename batch."""

from rename_mod_time.models.rename import RenameOp


class RenameModTimeError(Exception):
    """Base class for all fatal rename errors."""


class InvalidFileNameError(RenameModTimeError, ValueError):
    """The input name is not a bare file name in the working directory."""


class InvalidTimeFormatError(RenameModTimeError, ValueError):
    """The time format pattern cannot be rendered by strftime."""


class ModificationTimeUnavailableError(RenameModTimeError):
    """The modification time of a file could not be read."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        message = f"Cannot read modification time of '{name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RenameFailedError(RenameModTimeError):
    """A rename in the batch failed.

    Renames performed before the failing one are not rolled back; they are
    listed in `completed`.
    """

    def __init__(self, failed: RenameOp, completed: list[RenameOp], reason: str = "") -> None:
        self.failed = failed
        self.completed = completed
        message = f"Failed to rename '{failed.source}' to '{failed.target}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
