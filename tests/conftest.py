"""
Pytest configuration and shared fixtures.
"""
import asyncio
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest
from PIL import Image

# Ensure src is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

# Plain output regardless of the terminal the suite is started from
os.environ.pop("FORCE_COLOR", None)
os.environ["NO_COLOR"] = "1"
os.environ.pop("RN_TOOLBOX_DEBUG", None)
os.environ.pop("RN_TOOLBOX_APP_CONFIG", None)


@dataclass
class CommandResult:
    stdout: str
    stderr: str
    error: Optional[Exception] = None


def run_command(command_cls, args, capsys) -> CommandResult:
    """
    Run a command's lifecycle and capture its output.
    CommandError is returned in the result; any other exception propagates.
    """
    from rn_toolbox.cli.errors import CommandError

    error = None
    try:
        asyncio.run(command_cls().run(args))
    except CommandError as e:
        error = e
    captured = capsys.readouterr()
    return CommandResult(stdout=captured.out, stderr=captured.err, error=error)


def write_png(path: Path, width: int, height: int, color=(30, 120, 200, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (width, height), color).save(path, format="PNG")
    return path


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty React Native project root used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def icon_file(project_dir):
    return write_png(project_dir / "assets" / "icon.png", 1024, 1024)


@pytest.fixture
def splash_file(project_dir):
    return write_png(project_dir / "assets" / "splashscreen.png", 1242, 2208)


@pytest.fixture
def corrupt_image(project_dir):
    path = project_dir / "assets" / "corrupt.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("not a valid image", encoding="utf-8")
    return path
