from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

MANIFEST_AUTHOR = "react-native-toolbox"


@dataclass(frozen=True)
class IconSizeIOS:
    base_size: int
    name: str
    scales: Tuple[int, ...]
    idiom: Optional[str] = None


@dataclass(frozen=True)
class IconSizeAndroid:
    density: str
    size: int


@dataclass(frozen=True)
class SplashscreenSize:
    width: int
    height: int
    density: Optional[str] = None


class MaskType(Enum):
    ROUNDED_CORNERS = "roundedCorners"
    CIRCLE = "circle"


@dataclass
class ContentJsonImage:
    filename: str
    idiom: str
    scale: str
    size: Optional[str] = None


@dataclass
class ContentJsonInfo:
    author: str = MANIFEST_AUTHOR
    version: int = 1


@dataclass
class ContentJson:
    """Xcode asset catalogue manifest (Contents.json)."""
    images: List[ContentJsonImage] = field(default_factory=list)
    info: ContentJsonInfo = field(default_factory=ContentJsonInfo)

    def to_dict(self) -> dict:
        images = []
        for image in self.images:
            data = asdict(image)
            if data["size"] is None:
                del data["size"]
            images.append(data)
        return {"images": images, "info": asdict(self.info)}
