"""Command line interface for pwsieve."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pwsieve import __version__
from pwsieve.config import DEFAULT_MIN_EDIT_DISTANCE, DEFAULT_MIN_LENGTH, DEFAULT_MIN_UNIQUE_CHARS, ValidatorOptions
from pwsieve.dictionary.loader import read_dictionary_files, system_dictionary_path
from pwsieve.errors import (
    BreachLookupError,
    DictionaryError,
    HashedDictionaryError,
    MangledDictionaryError,
    WeakPasswordError,
)
from pwsieve.hashing import BUILTIN_ALGORITHMS, resolve_algorithms
from pwsieve.validator import Validator

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_WEAK = 2
EXIT_LOOKUP = 3

console = Console()


def _package_version() -> str:
    try:
        return version("pwsieve")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return click.prompt("Password", hide_input=True)


def _describe(error: WeakPasswordError) -> str:
    message = f"[red]{error}[/red]"
    if isinstance(error, HashedDictionaryError):
        return f"{message} (word={escape(repr(error.word))}, algorithm={error.algorithm})"
    if isinstance(error, MangledDictionaryError):
        return f"{message} (word={escape(repr(error.word))}, distance={error.distance})"
    if isinstance(error, DictionaryError):
        return f"{message} (word={escape(repr(error.word))})"
    return message


def _handle_action(action: Callable[[], None]) -> int:
    try:
        action()
    except WeakPasswordError as exc:
        console.print(_describe(exc))
        return EXIT_WEAK
    except BreachLookupError as exc:
        console.print(f"[red]Could not query the breach database:[/red] {exc}")
        return EXIT_LOOKUP
    except ValueError as exc:
        console.print(f"[red]Invalid option:[/red] {exc}")
        return EXIT_USAGE
    return EXIT_SUCCESS


def _validator_options(
    dict_paths: tuple[Path, ...],
    system_dict: bool,
    hash_names: tuple[str, ...],
    min_length: int,
    min_unique: int,
    min_dist: int,
    breach: bool,
) -> ValidatorOptions:
    words: list[str] = []
    for path in dict_paths:
        words.extend(read_dictionary_files(path))
    return ValidatorOptions(
        min_length=min_length,
        min_unique_chars=min_unique,
        min_edit_distance=min_dist,
        hash_algorithms=resolve_algorithms(hash_names),
        check_breach_db=breach,
        dictionary_words=tuple(words),
        dictionary_path=system_dictionary_path() if system_dict else None,
    )


def validator_options(fn: Callable) -> Callable:
    """Attach the options shared by ``check`` and ``rate``."""

    decorators = [
        click.option("--password", "password_opt", help="Password to test (will prompt if omitted)."),
        click.option(
            "--dict",
            "dict_paths",
            multiple=True,
            type=click.Path(path_type=Path),
            help="Word list file or directory (repeatable).",
        ),
        click.option(
            "--system-dict/--no-system-dict",
            default=True,
            show_default=True,
            help=f"Also use the word lists in {system_dictionary_path()}.",
        ),
        click.option(
            "--hash",
            "hash_names",
            multiple=True,
            type=click.Choice(sorted(BUILTIN_ALGORITHMS), case_sensitive=False),
            help="Reject digests of dictionary words under this algorithm (repeatable).",
        ),
        click.option("--min-length", default=DEFAULT_MIN_LENGTH, show_default=True, type=int),
        click.option("--min-unique", default=DEFAULT_MIN_UNIQUE_CHARS, show_default=True, type=int),
        click.option(
            "--min-dist",
            default=DEFAULT_MIN_EDIT_DISTANCE,
            show_default=True,
            type=int,
            help="Maximum edit distance for mangled words; negative disables fuzzy matching.",
        ),
        click.option(
            "--breach/--no-breach",
            default=False,
            help="Query the Pwned Passwords range API (sends a 5-character hash prefix).",
        ),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="pwsieve")
def cli() -> None:
    """Find common flaws in passwords."""


@cli.command(
    help="Check a password and exit non-zero if it is weak.",
    epilog="Examples:\n  pwsieve check --password 'correct horse'\n  pwsieve check --dict words.txt --hash md5 --no-system-dict",
)
@validator_options
@click.pass_context
def check(
    ctx: click.Context,
    password_opt: str | None,
    dict_paths: tuple[Path, ...],
    system_dict: bool,
    hash_names: tuple[str, ...],
    min_length: int,
    min_unique: int,
    min_dist: int,
    breach: bool,
) -> None:
    password = _prompt_password(password_opt)

    def _run() -> None:
        options = _validator_options(dict_paths, system_dict, hash_names, min_length, min_unique, min_dist, breach)
        Validator(options).validate(password)
        console.print("[green]Password accepted.[/green]")

    ctx.exit(_handle_action(_run))


@cli.command(
    help="Score a password from 0 to 100.",
    epilog="Example:\n  pwsieve rate --password 'Tr0ub4dor&3!' --no-system-dict",
)
@validator_options
@click.pass_context
def rate(
    ctx: click.Context,
    password_opt: str | None,
    dict_paths: tuple[Path, ...],
    system_dict: bool,
    hash_names: tuple[str, ...],
    min_length: int,
    min_unique: int,
    min_dist: int,
    breach: bool,
) -> None:
    password = _prompt_password(password_opt)

    def _run() -> None:
        options = _validator_options(dict_paths, system_dict, hash_names, min_length, min_unique, min_dist, breach)
        strength = Validator(options).rate(password)

        table = Table(show_header=False, box=None)
        table.add_row("Score", f"{strength.score}/100")
        table.add_row("Level", strength.level)
        table.add_row("Entropy", f"~{strength.entropy_bits:.1f} bits")
        console.print("[bold]Password rating[/bold]")
        console.print(table)
        if strength.error is not None:
            raise strength.error
        for line in strength.feedback:
            console.print(f"  - {line}")

    ctx.exit(_handle_action(_run))


@cli.command(name="version", help="Show the installed version.")
def version_cmd() -> None:
    console.print(f"pwsieve {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="pwsieve", standalone_mode=False) or EXIT_SUCCESS
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
