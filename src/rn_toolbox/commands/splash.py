import asyncio
from pathlib import Path
from typing import Optional

from rich.markup import escape

from rn_toolbox.cli.types import ArgConfig, CommandConfig, ParsedArgs
from rn_toolbox.commands.base import APP_NAME_FLAG, HELP_FLAG, VERBOSE_FLAG, BaseCommand
from rn_toolbox.constants import (
    ANDROID_MAIN_DIR,
    IOS_ASSETS_DIR,
    MANIFEST_FILENAME,
    SPLASHSCREEN_SIZES_ANDROID,
    SPLASHSCREEN_SIZES_IOS,
)
from rn_toolbox.models import ContentJson, ContentJsonImage
from rn_toolbox.utils import images
from rn_toolbox.utils.batch import GenerationBatch
from rn_toolbox.utils.files import mkdirp

ANDROID_SPLASH_FILENAME = "splashscreen.png"


def get_ios_splash_name(density: Optional[str]) -> str:
    return f"splashscreen@{density}.png" if density else "splashscreen.png"


def build_ios_splash_manifest() -> ContentJson:
    return ContentJson(images=[
        ContentJsonImage(
            filename=get_ios_splash_name(size_def.density),
            idiom="universal",
            scale=size_def.density or "1x",
        )
        for size_def in SPLASHSCREEN_SIZES_IOS
    ])


class Splash(BaseCommand):
    _config = CommandConfig(
        name="splash",
        description=(
            "Generate app splashscreen for react-native-splash-screen\n"
            "Generate app splashscreen using FILE as base to be used with "
            "crazycodeboy/react-native-splash-screen module.\n"
            "The base splashscreen file should be at least 1242x2208px.\n"
        ),
        args=(
            ArgConfig(
                name="file",
                description="input splashscreen file",
                required=False,
                default="./assets/splashscreen.png",
            ),
        ),
        flags={
            "appName": APP_NAME_FLAG,
            "help": HELP_FLAG,
            "verbose": VERBOSE_FLAG,
        },
        examples=(
            "$ {bin} {command}",
            "$ {bin} {command} ./assets/launch.png -a MyApp",
        ),
    )

    @property
    def config(self) -> CommandConfig:
        return self._config

    async def execute(self, parsed: ParsedArgs) -> None:
        source_file = parsed.args["file"]
        self._require_source_file(source_file)
        app_name = self._require_app_name(parsed.flags.get("appName"))

        self.log(f"Generating splashscreens for '{escape(app_name)}' app...")

        batch = GenerationBatch(
            on_start=lambda path: self.log_verbose(f"Generating splashscreen '{escape(path)}'..."),
            on_done=lambda path: self.log_verbose(f"Splashscreen '{escape(path)}' generated."),
        )

        await asyncio.gather(
            self._generate_ios_splashscreens(batch, source_file, app_name),
            self._generate_android_splashscreens(batch, source_file),
        )

        self._raise_on_failures(batch.errors)

        self.log(f"Generated splashscreens for '{escape(app_name)}' app.")

    async def _generate_ios_splashscreens(self, batch: GenerationBatch, source_file: str, app_name: str) -> None:
        output_dir = Path(IOS_ASSETS_DIR.format(app_name=app_name)) / "Splashscreen.imageset"
        try:
            await mkdirp(output_dir)
        except OSError as e:
            batch.fail(output_dir, e)
            return

        operations = []
        for size_def in SPLASHSCREEN_SIZES_IOS:
            output_path = output_dir / get_ios_splash_name(size_def.density)
            operations.append(batch.run(
                output_path, images.resize_cover, source_file, output_path, size_def.width, size_def.height,
            ))
        await batch.gather(operations)

        manifest_path = output_dir / MANIFEST_FILENAME
        try:
            await self._write_manifest(manifest_path, build_ios_splash_manifest())
        except OSError as e:
            batch.fail(manifest_path, e)

    async def _generate_android_splashscreens(self, batch: GenerationBatch, source_file: str) -> None:
        res_dir = Path(ANDROID_MAIN_DIR) / "res"

        operations = []
        for size_def in SPLASHSCREEN_SIZES_ANDROID:
            density_dir = res_dir / f"drawable-{size_def.density}"
            try:
                await mkdirp(density_dir)
            except OSError as e:
                batch.fail(density_dir, e)
                continue

            output_path = density_dir / ANDROID_SPLASH_FILENAME
            operations.append(batch.run(
                output_path, images.resize_cover, source_file, output_path, size_def.width, size_def.height,
            ))
        await batch.gather(operations)
