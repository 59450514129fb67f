"""eureka-config: Flat-file configuration storage for eureka.

This library stores each configuration value as its own file inside a
per-user configuration directory:
- Repository path (~/.eureka/repo_path)
- Editor path (~/.eureka/editor_path)

Applications may inject the base directory to define their configuration
policy. The library provides the mechanism for creating the directory and
reading, writing and removing values.

Public API:
    ConfigStore: Main class for configuration operations
    ConfigKey: Enum for REPO/EDITOR values
    ConfigError, ConfigFileError, ConfigNotFoundError, ConfigEncodingError,
    HomeDirectoryError: Exception types

Example:
    ```python
    from eureka_config import ConfigKey, ConfigStore

    config = ConfigStore()
    if not config.directory_exists():
        config.create_directory()

    config.write(ConfigKey.REPO, "/home/user/notes")
    repo = config.read(ConfigKey.REPO)
    ```
"""

from .exceptions import ConfigEncodingError
from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigNotFoundError
from .exceptions import HomeDirectoryError
from .models import ConfigKey
from .store import ConfigStore

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "ConfigKey",
    "ConfigError",
    "ConfigFileError",
    "ConfigNotFoundError",
    "ConfigEncodingError",
    "HomeDirectoryError",
]
