import asyncio
from pathlib import Path
from typing import List

from rich.markup import escape

from rn_toolbox.cli.types import ArgConfig, CommandConfig, ParsedArgs
from rn_toolbox.commands.base import APP_NAME_FLAG, HELP_FLAG, VERBOSE_FLAG, BaseCommand
from rn_toolbox.constants import (
    ANDROID_MAIN_DIR,
    ANDROID_WEB_ICON_SIZE,
    ICON_SIZES_ANDROID,
    ICON_SIZES_IOS,
    IOS_ASSETS_DIR,
    MANIFEST_FILENAME,
)
from rn_toolbox.models import ContentJson, ContentJsonImage, MaskType
from rn_toolbox.utils import images
from rn_toolbox.utils.batch import GenerationBatch
from rn_toolbox.utils.files import mkdirp


def get_ios_icon_name(base_name: str, scale: int) -> str:
    return f"{base_name}@{scale}x.png" if scale > 1 else f"{base_name}.png"


def build_ios_icons_manifest() -> ContentJson:
    manifest = ContentJson()
    for size_def in ICON_SIZES_IOS:
        for scale in size_def.scales:
            manifest.images.append(ContentJsonImage(
                filename=get_ios_icon_name(size_def.name, scale),
                idiom=size_def.idiom or "iphone",
                scale=f"{scale}x",
                size=f"{size_def.base_size}x{size_def.base_size}",
            ))
    return manifest


class Icons(BaseCommand):
    _config = CommandConfig(
        name="icons",
        description=(
            "Generate app icons\n"
            "Generate app icons using FILE as base.\n"
            "The base icon file should be at least 1024x1024px.\n"
        ),
        args=(
            ArgConfig(
                name="file",
                description="input icon file",
                required=False,
                default="./assets/icon.png",
            ),
        ),
        flags={
            "appName": APP_NAME_FLAG,
            "help": HELP_FLAG,
            "verbose": VERBOSE_FLAG,
        },
        examples=(
            "$ {bin} {command}",
            "$ {bin} {command} ./assets/my-icon.png --appName MyApp",
        ),
    )

    @property
    def config(self) -> CommandConfig:
        return self._config

    async def execute(self, parsed: ParsedArgs) -> None:
        source_file = parsed.args["file"]
        self._require_source_file(source_file)
        app_name = self._require_app_name(parsed.flags.get("appName"))

        self.log(f"Generating icons for '{escape(app_name)}' app...")

        batch = GenerationBatch(
            on_start=lambda path: self.log_verbose(f"Generating icon '{escape(path)}'..."),
            on_done=lambda path: self.log_verbose(f"Icon '{escape(path)}' generated."),
        )

        await asyncio.gather(
            self._generate_ios_icons(batch, source_file, app_name),
            self._generate_android_icons(batch, source_file),
        )

        self._raise_on_failures(batch.errors)

        self.log(f"Generated icons for '{escape(app_name)}' app.")

    async def _generate_ios_icons(self, batch: GenerationBatch, source_file: str, app_name: str) -> None:
        output_dir = Path(IOS_ASSETS_DIR.format(app_name=app_name)) / "AppIcon.appiconset"
        try:
            await mkdirp(output_dir)
        except OSError as e:
            batch.fail(output_dir, e)
            return

        operations = []
        for size_def in ICON_SIZES_IOS:
            for scale in size_def.scales:
                output_path = output_dir / get_ios_icon_name(size_def.name, scale)
                image_size = size_def.base_size * scale
                operations.append(batch.run(
                    output_path, images.resize_cover, source_file, output_path, image_size, image_size,
                ))
        await batch.gather(operations)

        manifest_path = output_dir / MANIFEST_FILENAME
        try:
            await self._write_manifest(manifest_path, build_ios_icons_manifest())
        except OSError as e:
            batch.fail(manifest_path, e)

    async def _generate_android_icons(self, batch: GenerationBatch, source_file: str) -> None:
        base_dir = Path(ANDROID_MAIN_DIR)
        try:
            await mkdirp(base_dir)
        except OSError as e:
            batch.fail(base_dir, e)
            return

        web_icon_path = base_dir / "web_hi_res_512.png"
        operations: List = [batch.run(
            web_icon_path, images.resize_masked,
            source_file, web_icon_path, ANDROID_WEB_ICON_SIZE, MaskType.ROUNDED_CORNERS,
        )]

        for size_def in ICON_SIZES_ANDROID:
            density_dir = base_dir / "res" / f"mipmap-{size_def.density}"
            try:
                await mkdirp(density_dir)
            except OSError as e:
                batch.fail(density_dir, e)
                continue

            launcher_path = density_dir / "ic_launcher.png"
            operations.append(batch.run(
                launcher_path, images.resize_masked,
                source_file, launcher_path, size_def.size, MaskType.ROUNDED_CORNERS,
            ))

            round_path = density_dir / "ic_launcher_round.png"
            operations.append(batch.run(
                round_path, images.resize_masked,
                source_file, round_path, size_def.size, MaskType.CIRCLE,
            ))

        await batch.gather(operations)
