"""Default paths for settings, logs and Flash shared-object saves"""

import os
from pathlib import Path


class AppPaths:
    """Default paths for configuration and save discovery.

    All paths use environment variable expansion for portability.
    """

    # Flash Player (standalone, Internet Explorer, Firefox) shared objects
    FLASH_SHARED_OBJECTS = Path(os.path.expandvars(
        r"%APPDATA%\Macromedia\Flash Player\#SharedObjects"
    ))

    # Chrome's Pepper Flash keeps its own shared objects root
    CHROME_SHARED_OBJECTS = Path(os.path.expandvars(
        r"%LOCALAPPDATA%\Google\Chrome\User Data\Default\Pepper Data\Shockwave Flash\WritableRoot\#SharedObjects"
    ))

    # Shared-object host directories used by the offline and online game
    LOCAL_HOST = "localhost"
    ONLINE_HOST = "www.fenoxo.com"

    # Configuration file location
    CONFIG_DIR = Path(os.path.expandvars(r"%APPDATA%\CoCManager"))
    CONFIG_FILE = CONFIG_DIR / "configuration.xml"
    LOG_FILE = CONFIG_DIR / "coc_manager.log"

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables in path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str))

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR
