import sys
from typing import NoReturn

from rich.console import Console

from rn_toolbox.cli.errors import ExitCode
from rn_toolbox.utils.color import red

# file=None keeps rich resolving sys.stdout/sys.stderr at write time
console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def _join(args) -> str:
    return " ".join(str(a) for a in args)


def log(*args, markup: bool = True) -> None:
    console.print(_join(args), markup=markup)


def warn(*args, markup: bool = True) -> None:
    err_console.print(_join(args), markup=markup)


def log_error(*args, markup: bool = True) -> None:
    err_console.print(_join(args), markup=markup)


def log_verbose(is_verbose: bool, *args) -> None:
    if is_verbose:
        log(*args)


def error(message: str, exit_code: ExitCode = ExitCode.GENERAL_ERROR) -> NoReturn:
    """Prints the message in red and terminates the process. Only for use outside commands."""
    err_console.print(red(message))
    sys.exit(int(exit_code))
