import json
import logging
from pathlib import Path
from typing import Optional

from rn_toolbox.utils.config import ToolboxConfig

logger = logging.getLogger(__name__)


def extract_app_name(config_path: Optional[str] = None) -> Optional[str]:
    """
    Reads the app name from the 'name' field of app.json.
    Returns None when the file is missing or unparsable, or the name is not a non-blank string.
    """
    path = Path(config_path or ToolboxConfig.get_app_config_path())
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug(f"App config not found: {path}")
        return None
    except (OSError, ValueError) as e:
        logger.debug(f"Failed to read app config {path}: {e}")
        return None

    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name.strip():
        logger.debug(f"No usable 'name' in {path}")
        return None
    return name
