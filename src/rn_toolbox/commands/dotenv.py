import asyncio
import logging
import shutil
from pathlib import Path

from rich.markup import escape

from rn_toolbox.cli.errors import ExitCode
from rn_toolbox.cli.types import ArgConfig, CommandConfig, ParsedArgs
from rn_toolbox.commands.base import HELP_FLAG, VERBOSE_FLAG, BaseCommand
from rn_toolbox.utils.color import cyan

logger = logging.getLogger(__name__)

OUTPUT_ENV_FILE = "./.env"


class Dotenv(BaseCommand):
    _config = CommandConfig(
        name="dotenv",
        description=(
            "manage .env files for react-native-dotenv\n"
            "Manage .env files for react-native-dotenv for a specific environment (development, production, etc...)\n"
        ),
        args=(
            ArgConfig(
                name="environmentName",
                description="name of the environment to load .dotenv file for",
                required=True,
            ),
        ),
        flags={
            "help": HELP_FLAG,
            "verbose": VERBOSE_FLAG,
        },
        examples=(
            "$ {bin} {command} development",
            "$ {bin} {command} production --verbose",
        ),
    )

    @property
    def config(self) -> CommandConfig:
        return self._config

    async def execute(self, parsed: ParsedArgs) -> None:
        environment_name = parsed.args["environmentName"]
        source_env_file = f"./.env.{environment_name}"

        self._require_source_file(source_env_file)

        self.log(f"Generating .env from {cyan(source_env_file)} file...")
        self.log_verbose(f"Source environment file: {cyan(source_env_file)}")

        self.log_verbose("Removing existing .env file")
        await asyncio.to_thread(self._remove_existing, OUTPUT_ENV_FILE)

        try:
            await asyncio.to_thread(shutil.copyfile, source_env_file, OUTPUT_ENV_FILE)
        except OSError as e:
            logger.debug(f"Failed to copy {source_env_file} to {OUTPUT_ENV_FILE}", exc_info=True)
            self.error(f"Failed to generate .env file: {escape(str(e))}", ExitCode.GENERATION_ERROR)

        self.log("Generated new .env file.")

    @staticmethod
    def _remove_existing(path: str) -> None:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            # The copy below reports anything that actually blocks writing
            logger.debug(f"Could not remove {path}: {e}")
