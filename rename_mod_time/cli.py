"""CLI entrypoints."""

import click
from rich.console import Console
from rich.markup import escape

from rename_mod_time.errors import RenameFailedError, RenameModTimeError
from rename_mod_time.models.rename import RenameOutcome
from rename_mod_time.processors.rename_batch import DEFAULT_TIME_FORMAT, RenameBatch


__version__ = "0.1.0"

PROGRAM_NAME = "rename_mod_time"

FORMAT_HELP_MESSAGE = (
    "Format of the date and time used as the new file name, following strftime: "
    "https://docs.python.org/3/library/datetime.html#strftime-and-strptime-format-codes"
)


console = Console()


@click.command(
    PROGRAM_NAME,
    context_settings=dict(show_default=True, help_option_names=["-h", "--help"]),
    no_args_is_help=True,
)
@click.version_option(__version__, prog_name=PROGRAM_NAME)
@click.argument("input_paths", type=click.Path(exists=True), nargs=-1, required=True)
@click.option(
    "-f",
    "--format",
    "time_format",
    type=str,
    default=DEFAULT_TIME_FORMAT,
    envvar="RENAME_MOD_TIME_FORMAT",
    show_envvar=True,
    help=FORMAT_HELP_MESSAGE,
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Rename without asking for confirmation.",
)
def cli(input_paths: tuple[str, ...], time_format: str, yes: bool) -> None:
    """Rename files with their own modification date and time in a specific format.

    The file extension is kept. Only files in the current directory are supported.

    Examples:

        rename_mod_time IMG_0001.jpg IMG_0002.jpg

        rename_mod_time -f "%Y%m%d" report.txt notes.md
    """
    try:
        batch = RenameBatch.from_names(list(input_paths), time_format)
        report = batch.run(confirm=not yes)
    except RenameFailedError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        if e.completed:
            console.print(f"[yellow]{len(e.completed)} file(s) were renamed before the failure.[/yellow]")
        raise SystemExit(1) from e
    except RenameModTimeError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    if report.outcome is RenameOutcome.RENAMED:
        console.print(f"[bold green]Renamed {len(report)} file(s).[/bold green]")


if __name__ == "__main__":
    cli()
