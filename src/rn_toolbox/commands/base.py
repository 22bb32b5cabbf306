import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, NoReturn, Optional

from rich.markup import escape

from rn_toolbox.cli import output
from rn_toolbox.cli.errors import CommandError, ExitCode
from rn_toolbox.cli.help import generate_command_help
from rn_toolbox.cli.parser import parse_args
from rn_toolbox.cli.types import CommandConfig, FlagConfig, ParsedArgs
from rn_toolbox.models import ContentJson
from rn_toolbox.utils.app import extract_app_name
from rn_toolbox.utils.color import cyan, green, red, yellow
from rn_toolbox.utils.files import check_asset_file

logger = logging.getLogger(__name__)

HELP_FLAG = FlagConfig(description="Show help for command", short="h")
VERBOSE_FLAG = FlagConfig(description="Print more detailed log messages", short="v")
APP_NAME_FLAG = FlagConfig(
    description="the appName used to build output assets path. Default is retrieved from 'app.json' file.",
    type="string",
    short="a",
    default=extract_app_name,
)


class BaseCommand(ABC):
    """
    Common lifecycle for every command: parse the arguments, print help if
    requested, otherwise run execute() with the parsed invocation.
    """

    def __init__(self):
        self._is_verbose = False

    @property
    @abstractmethod
    def config(self) -> CommandConfig:
        """The declarative schema for this command."""
        pass

    @abstractmethod
    async def execute(self, parsed: ParsedArgs) -> None:
        """Perform the command's work."""
        pass

    async def run(self, argv) -> None:
        parsed = await parse_args(argv, self.config)

        if parsed.help:
            self.log(generate_command_help(self.config), markup=False)
            return

        self._is_verbose = parsed.verbose
        logger.debug(f"Running '{self.config.name}' with args={dict(parsed.args)} flags={dict(parsed.flags)}")
        await self.execute(parsed)

    def error(self, message: str, exit_code: ExitCode = ExitCode.GENERAL_ERROR) -> NoReturn:
        raise CommandError(message, exit_code)

    def log(self, *args, markup: bool = True) -> None:
        output.log(*args, markup=markup)

    def log_verbose(self, *args) -> None:
        output.log_verbose(self._is_verbose, *args)

    def warn(self, *args) -> None:
        output.warn(yellow("Warning:"), *args)

    def _require_source_file(self, file_path: str) -> None:
        if not check_asset_file(file_path):
            self.error(f"Source file {cyan(file_path)} not found! {red('ABORTING')}", ExitCode.FILE_NOT_FOUND)

    def _require_app_name(self, app_name: Optional[str]) -> str:
        if not isinstance(app_name, str) or not app_name.strip():
            self.error(
                f"Failed to retrieve {cyan('appName')} value. "
                f"Please specify it with the {green('appName')} flag or check that {cyan('app.json')} file exists. "
                f"{red('ABORTING')}",
                ExitCode.CONFIG_ERROR,
            )
        return app_name

    def _raise_on_failures(self, errors: List[str]) -> None:
        """Reports every collected asset failure, then fails the command once."""
        if not errors:
            return
        self.warn(f"{len(errors)} asset(s) failed to generate:")
        for err in errors:
            self.warn(f"  - {escape(err)}")
        self.error(f"Failed to generate {len(errors)} asset(s).", ExitCode.GENERATION_ERROR)

    async def _write_manifest(self, manifest_path: Path, manifest: ContentJson) -> None:
        self.log_verbose(f"Writing manifest '{escape(str(manifest_path))}'")
        await asyncio.to_thread(manifest_path.write_text, json.dumps(manifest.to_dict(), indent=2), "utf-8")
