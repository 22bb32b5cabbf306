"""
Pillow-backed image operations used by the icons and splash commands.
All functions are synchronous and write their result directly to disk;
callers run them off the event loop.
"""
import math
from pathlib import Path
from typing import Union

from PIL import Image, ImageChops, ImageDraw, ImageOps

from rn_toolbox.models import MaskType

PathLike = Union[str, Path]


def _load(input_path: PathLike) -> Image.Image:
    with Image.open(input_path) as img:
        img.load()
        if img.mode not in ("RGB", "RGBA"):
            return img.convert("RGBA")
        return img.copy()


def _cover(img: Image.Image, width: int, height: int) -> Image.Image:
    # Scale to fill the box and centre-crop the overflow
    return ImageOps.fit(img, (width, height), method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def resize_cover(input_path: PathLike, output_path: PathLike, width: int, height: int) -> None:
    """Resizes the source to exactly width x height, cropping instead of distorting."""
    out = _cover(_load(input_path), width, height)
    out.save(output_path, format="PNG")


def build_mask(mask_type: MaskType, size: int) -> Image.Image:
    """Returns an 'L' mode mask: 255 inside the shape, 0 outside."""
    mask = Image.new("L", (size, size), 0)
    draw = ImageDraw.Draw(mask)
    if mask_type is MaskType.ROUNDED_CORNERS:
        radius = math.floor(size * 0.1)
        draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=radius, fill=255)
    else:
        radius = math.floor(size / 2)
        draw.ellipse((0, 0, 2 * radius - 1, 2 * radius - 1), fill=255)
    return mask


def resize_masked(input_path: PathLike, output_path: PathLike, size: int, mask_type: MaskType) -> None:
    """Resizes the source to a size x size square and clips it to the mask shape."""
    icon = _cover(_load(input_path), size, size).convert("RGBA")
    mask = build_mask(mask_type, size)
    icon.putalpha(ImageChops.multiply(icon.getchannel("A"), mask))
    icon.save(output_path, format="PNG")
