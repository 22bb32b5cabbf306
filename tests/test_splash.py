import json
from pathlib import Path

from PIL import Image

from conftest import run_command, write_png
from rn_toolbox.cli.errors import ExitCode
from rn_toolbox.commands.splash import Splash, build_ios_splash_manifest, get_ios_splash_name

IOS_DIR = Path("ios", "test", "Images.xcassets", "Splashscreen.imageset")
ANDROID_RES = Path("android", "app", "src", "main", "res")


def test_fails_without_app_name(project_dir, splash_file, capsys):
    result = run_command(Splash, [], capsys)
    assert result.error.exit_code == ExitCode.CONFIG_ERROR
    assert "appName" in result.error.message


def test_fails_when_source_missing(project_dir, capsys):
    result = run_command(Splash, ["-a", "test"], capsys)
    assert result.error.exit_code == ExitCode.FILE_NOT_FOUND
    assert "./assets/splashscreen.png" in result.error.message


def test_generates_expected_files(project_dir, splash_file, capsys):
    result = run_command(Splash, ["--appName", "test"], capsys)

    assert result.error is None
    assert "Generating splashscreens for 'test' app..." in result.stdout
    assert "Generated splashscreens for 'test' app." in result.stdout

    assert sorted(p.name for p in IOS_DIR.glob("*.png")) == [
        "splashscreen.png", "splashscreen@2x.png", "splashscreen@3x.png",
    ]
    contents = json.loads((IOS_DIR / "Contents.json").read_text(encoding="utf-8"))
    assert len(contents["images"]) == 3

    drawables = sorted(p.name for p in ANDROID_RES.glob("drawable-*"))
    assert drawables == [
        "drawable-hdpi", "drawable-ldpi", "drawable-mdpi",
        "drawable-xhdpi", "drawable-xxhdpi", "drawable-xxxhdpi",
    ]
    for name in drawables:
        assert (ANDROID_RES / name / "splashscreen.png").is_file()


def test_output_dimensions(project_dir, splash_file, capsys):
    run_command(Splash, ["-a", "test"], capsys)

    with Image.open(IOS_DIR / "splashscreen@2x.png") as img:
        assert img.size == (750, 1334)
    with Image.open(ANDROID_RES / "drawable-ldpi" / "splashscreen.png") as img:
        assert img.size == (200, 320)


def test_small_source_is_upscaled(project_dir, capsys):
    source = write_png(project_dir / "small.png", 100, 100)

    result = run_command(Splash, [str(source), "-a", "test"], capsys)

    assert result.error is None
    with Image.open(IOS_DIR / "splashscreen@3x.png") as img:
        assert img.size == (1242, 2208)


def test_verbose_output(project_dir, splash_file, capsys):
    result = run_command(Splash, ["-a", "test", "--verbose"], capsys)
    assert "Generating splashscreen '" in result.stdout
    assert "generated." in result.stdout


def test_corrupt_image_reports_failures(project_dir, corrupt_image, capsys):
    result = run_command(Splash, ["-a", "test", str(corrupt_image)], capsys)

    assert result.error.exit_code == ExitCode.GENERATION_ERROR
    assert "9 asset(s) failed to generate" in result.stderr
    assert "Generated splashscreens" not in result.stdout
    assert (IOS_DIR / "Contents.json").is_file()


def test_manifest_shape():
    manifest = build_ios_splash_manifest().to_dict()
    assert manifest["images"][0] == {"filename": "splashscreen.png", "idiom": "universal", "scale": "1x"}
    assert manifest["images"][2] == {"filename": "splashscreen@3x.png", "idiom": "universal", "scale": "3x"}
    assert manifest["info"]["author"] == "react-native-toolbox"


def test_ios_splash_name():
    assert get_ios_splash_name(None) == "splashscreen.png"
    assert get_ios_splash_name("2x") == "splashscreen@2x.png"


def test_unwritable_output_directory_is_generation_error(project_dir, splash_file, capsys):
    # A plain file where the Android directory tree should go
    (project_dir / "android").write_text("", encoding="utf-8")

    result = run_command(Splash, ["-a", "test"], capsys)

    assert result.error.exit_code == ExitCode.GENERATION_ERROR
    assert "6 asset(s) failed to generate" in result.stderr
    assert "drawable-ldpi" in result.stderr
    assert (IOS_DIR / "splashscreen@3x.png").is_file()
    assert (IOS_DIR / "Contents.json").is_file()


def test_regeneration_is_idempotent(project_dir, splash_file, capsys):
    def snapshot():
        return sorted(str(p.relative_to(project_dir)) for p in project_dir.rglob("*") if p.is_file())

    run_command(Splash, ["-a", "test"], capsys)
    first = snapshot()
    result = run_command(Splash, ["-a", "test"], capsys)

    assert result.error is None
    assert snapshot() == first
