"""Rename a batch of files after their own modification time."""

import re
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from rich.console import Console

from rename_mod_time.errors import InvalidTimeFormatError, RenameFailedError
from rename_mod_time.models.file_entry import FileEntry
from rename_mod_time.models.rename import RenameOp, RenameOutcome, RenameReport


# Console for rich output
console = Console()
err_console = Console(stderr=True)

DEFAULT_TIME_FORMAT = "%y-%m-%d_%H-%M-%S"

CONFIRMATION_PROMPT = "Accept the above renaming? [Y/n] "

# Minimum column width, so the "old" / "new" header labels always fit
MIN_COLUMN_WIDTH = 3

YES_PATTERN = re.compile(r"^[yY]?$")
NO_PATTERN = re.compile(r"^[nN]$")


def classify_answer(answer: str) -> bool | None:
    """Classify a confirmation answer.

    Returns:
        True to accept (including an empty answer), False to decline, None if
        the answer is not recognized.
    """
    answer = answer.strip()
    if YES_PATTERN.match(answer):
        return True
    if NO_PATTERN.match(answer):
        return False
    return None


def _ask_console(prompt: str) -> str:
    return console.input(prompt, markup=False, emoji=False)


class RenameBatch:
    """An ordered batch of files to rename after their modification time."""

    def __init__(
        self,
        entries: Sequence[FileEntry],
        time_format: str = DEFAULT_TIME_FORMAT,
        directory: Path = Path("."),
        sample_time: datetime | None = None,
    ) -> None:
        """Initialize the batch and compute the display column widths.

        Args:
            entries: Files to rename, in the order they are renamed.
            time_format: strftime pattern applied to each modification time.
            directory: Directory the file names are relative to.
            sample_time: Time used to estimate the width of a formatted
                timestamp. Defaults to now.

        Raises:
            ValueError: If the batch is empty.
            InvalidTimeFormatError: If strftime rejects the time format.
        """
        if not entries:
            raise ValueError("At least one file is required.")

        self.entries: list[FileEntry] = list(entries)
        self.time_format = time_format
        self.directory = directory

        # Width in terminal cells, so rows padded by `width - offset` line up
        self.input_column_width = max(
            MIN_COLUMN_WIDTH,
            max(entry.full_length + entry.wide_char_offset() for entry in self.entries),
        )

        # Estimated from a single sample; patterns with variable-width fields
        # may produce longer names, see `targets_exceeding_output_width`.
        if sample_time is None:
            sample_time = datetime.now().astimezone()
        try:
            sample = sample_time.strftime(time_format)
        except ValueError as e:
            raise InvalidTimeFormatError(f"Invalid time format '{time_format}': {e}") from e
        max_extension_length = max(entry.extension_length for entry in self.entries)
        self.output_column_width = max(MIN_COLUMN_WIDTH, len(sample) + 1 + max_extension_length)

    @classmethod
    def from_names(cls, names: Sequence[str], time_format: str = DEFAULT_TIME_FORMAT, **kwargs) -> "RenameBatch":
        """Build a batch from bare file names.

        Raises:
            InvalidFileNameError: If any name contains a directory separator.
        """
        return cls([FileEntry.from_name(name) for name in names], time_format, **kwargs)

    def renamed_entries(self) -> list[FileEntry]:
        """Compute the target entry of every file, in batch order.

        Raises:
            ModificationTimeUnavailableError: If any modification time cannot be read.
        """
        return [entry.renamed(self.time_format, self.directory) for entry in self.entries]

    def render_header(self) -> str:
        return f"{'old':^{self.input_column_width}} {'new':^{self.output_column_width}}"

    def render_rows(self, renamed: Sequence[FileEntry]) -> list[str]:
        """Render one `old new` row per file.

        The old name is padded to the input column width minus its wide character
        offset, so wide glyphs do not push the new name out of its column.
        """
        rows = []
        for old, new in zip(self.entries, renamed, strict=True):
            width = self.input_column_width - old.wide_char_offset()
            rows.append(f"{old.display_name:<{width}} {new.display_name}")
        return rows

    def print_table(self, renamed: Sequence[FileEntry]) -> None:
        for line in [self.render_header(), *self.render_rows(renamed)]:
            console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def targets_exceeding_output_width(self, renamed: Sequence[FileEntry]) -> list[FileEntry]:
        """Return the targets longer than the estimated output column width."""
        return [entry for entry in renamed if entry.full_length > self.output_column_width]

    def wait_for_confirmation(
        self,
        ask: Callable[[str], str] | None = None,
        max_attempts: int | None = None,
    ) -> bool:
        """Prompt until the user accepts or declines the renaming.

        Args:
            ask: Function that shows a prompt and returns one line of input.
                Defaults to reading from the console.
            max_attempts: Give up and decline after this many unrecognized
                answers. None means keep asking.

        Returns:
            True if the user accepted, False if declined. End of input declines.
        """
        ask = ask or _ask_console
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            try:
                answer = ask(CONFIRMATION_PROMPT)
            except EOFError:
                return False

            decision = classify_answer(answer)
            if decision is not None:
                return decision

        return False

    def apply_renames(self, renamed: Sequence[FileEntry]) -> list[RenameOp]:
        """Rename every file to its target, in batch order.

        Renaming stops at the first failure; files renamed before it stay renamed.

        Args:
            renamed: Target entries, parallel to `self.entries`.

        Returns:
            The rename operations performed.

        Raises:
            RenameFailedError: If a target already exists or the rename fails.
        """
        completed: list[RenameOp] = []

        for old, new in zip(self.entries, renamed, strict=True):
            op = RenameOp(source=old.display_name, target=new.display_name)
            source = self.directory / op.source
            target = self.directory / op.target

            if op.source != op.target and target.exists():
                raise RenameFailedError(op, completed, "target file already exists")
            try:
                source.rename(target)
            except OSError as e:
                raise RenameFailedError(op, completed, e.strerror or str(e)) from e

            completed.append(op)

        return completed

    def run(self, confirm: bool = True, ask: Callable[[str], str] | None = None) -> RenameReport:
        """Show the renaming table, ask for confirmation and rename the files.

        Args:
            confirm: If False, rename without asking.
            ask: Prompt function passed to `wait_for_confirmation`.

        Returns:
            RenameReport describing what was done.
        """
        renamed = self.renamed_entries()

        self.print_table(renamed)

        overflowing = self.targets_exceeding_output_width(renamed)
        if overflowing:
            err_console.print(
                f"[yellow]Warning:[/yellow] {len(overflowing)} new name(s) are wider than the "
                f"estimated column width of {self.output_column_width}."
            )

        if confirm and not self.wait_for_confirmation(ask):
            console.print("Nothing done.", markup=False, highlight=False)
            return RenameReport(outcome=RenameOutcome.DECLINED)

        operations = self.apply_renames(renamed)
        return RenameReport(outcome=RenameOutcome.RENAMED, operations=operations)
