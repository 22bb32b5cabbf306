import logging
import platform
import sys
from importlib.metadata import PackageNotFoundError, version as distribution_version
from typing import Dict, List, Sequence, Type

from rich.markup import escape

from rn_toolbox import CLI_BIN, __version__
from rn_toolbox.cli.errors import CommandError, ExitCode
from rn_toolbox.cli.help import generate_global_help
from rn_toolbox.cli.output import log, log_error
from rn_toolbox.cli.types import CommandConfig
from rn_toolbox.commands.base import BaseCommand
from rn_toolbox.commands.dotenv import Dotenv
from rn_toolbox.commands.icons import Icons
from rn_toolbox.commands.splash import Splash

logger = logging.getLogger(__name__)

# Command registry - maps command names to command classes
COMMANDS: Dict[str, Type[BaseCommand]] = {
    "dotenv": Dotenv,
    "icons": Icons,
    "splash": Splash,
}


def get_command_configs() -> List[CommandConfig]:
    return [command_cls().config for command_cls in COMMANDS.values()]


def get_version() -> str:
    """Version of the installed distribution, or the package version when running from source."""
    try:
        return distribution_version(CLI_BIN)
    except PackageNotFoundError:
        return __version__


def get_version_line(version: str) -> str:
    return f"{CLI_BIN}/{version} python-{platform.python_version()} {sys.platform}-{platform.machine().lower()}"


async def run_cli(argv: Sequence[str]) -> int:
    """
    Dispatches one invocation and returns the process exit code.
    Only CommandError is translated; anything else propagates to the caller.
    """
    argv = list(argv)
    version = get_version()

    if "--version" in argv or "-V" in argv:
        log(get_version_line(version), markup=False)
        return ExitCode.SUCCESS

    # No command given (or a flag in its place): global help
    if not argv or argv[0].startswith("-"):
        log(generate_global_help(get_command_configs(), version), markup=False)
        return ExitCode.SUCCESS

    command_name, command_args = argv[0], argv[1:]
    command_cls = COMMANDS.get(command_name)

    if command_cls is None:
        log_error(f"Unknown command: {escape(command_name)}")
        log_error(f"Available commands: {', '.join(COMMANDS)}")
        log_error(f"Run '{CLI_BIN} --help' for usage information.")
        return ExitCode.INVALID_ARGUMENT

    logger.debug(f"Dispatching '{command_name}' with {command_args}")
    command = command_cls()
    try:
        await command.run(command_args)
    except CommandError as e:
        logger.debug(f"Command '{command_name}' failed with {e.exit_code.name}: {e.message}")
        log_error(e.message)
        return e.exit_code

    return ExitCode.SUCCESS
