import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_APP_CONFIG_PATH = "./app.json"


class ToolboxConfig:
    """
    Centralized configuration management for rn-toolbox.
    Handles precedence of settings:
    1. Environment variable (RN_TOOLBOX_<NAME>)
    2. Built-in default
    """

    ENV_PREFIX = "RN_TOOLBOX_"

    @classmethod
    def get_value(cls, value_name: str, default: Any = None) -> Any:
        """
        Retrieves a setting from the environment.
        Returns 'default' if the variable is unset or empty.
        """
        env_name = f"{cls.ENV_PREFIX}{value_name.upper()}"
        val = os.environ.get(env_name)
        if val:
            logger.debug(f"Config '{value_name}' found in environment ({env_name}): {val}")
            return val
        return default

    @classmethod
    def is_debug_mode(cls) -> bool:
        """Checks if debug logging is enabled via environment or a dev build version."""
        val = cls.get_value("DEBUG", "")
        if str(val).lower() in ("1", "true", "yes"):
            return True

        from rn_toolbox import __version__
        v_low = __version__.lower()
        if "dev" in v_low:
            return True

        return False

    @classmethod
    def get_app_config_path(cls) -> str:
        """Returns the path of the JSON file the default app name is read from."""
        return cls.get_value("APP_CONFIG", DEFAULT_APP_CONFIG_PATH)
