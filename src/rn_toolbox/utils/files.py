import asyncio
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def check_asset_file(file_path: PathLike) -> bool:
    """Returns True if a file exists at the given path."""
    return Path(file_path).is_file()


async def mkdirp(path: PathLike) -> None:
    """Creates a directory and any missing parents."""
    await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
