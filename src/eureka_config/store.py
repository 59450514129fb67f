"""Configuration store for single-value flat files."""

import logging
from pathlib import Path

from .exceptions import ConfigEncodingError
from .exceptions import ConfigFileError
from .exceptions import ConfigNotFoundError
from .models import ConfigKey
from .utils import config_dir_path
from .utils import config_file_path
from .utils import strip_trailing_newline

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads, writes and removes configuration values under ``<home>/.eureka``.

    Each ConfigKey is stored as its own file holding a single value.
    Applications may inject the base directory; otherwise the user's home
    directory is resolved on every call.

    Args:
        home: Base directory containing the configuration directory
            (default: the user's home directory)
    """

    def __init__(self, home: Path | None = None):
        """Initialize configuration store.

        Args:
            home: Injected base directory, or None to resolve the home
                directory at call time
        """
        self.home = Path(home) if home is not None else None

    # ===== Directory Lifecycle =====

    @property
    def directory(self) -> Path:
        """Configuration directory path."""
        return config_dir_path(self.home)

    def create_directory(self) -> None:
        """Create the configuration directory and any missing parents.

        Creating an existing directory is not an error.

        Raises:
            ConfigFileError: If the directory cannot be created
        """
        directory = self.directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigFileError(f"Couldn't create directory {directory}: {e}") from e
        logger.info(f"Ensured configuration directory {directory}")

    def directory_exists(self) -> bool:
        """Check whether the configuration directory currently exists."""
        return self.path_exists(self.directory)

    # ===== Value Access =====

    def read(self, key: ConfigKey) -> str:
        """Read a configuration value.

        A single trailing newline is stripped; an empty file reads as "".

        Args:
            key: Configuration value to read

        Returns:
            Stored value

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigEncodingError: If the file is not valid UTF-8
            ConfigFileError: If the file cannot be opened or read
        """
        path = self.key_to_path(key)

        try:
            with open(path, encoding="utf-8", newline="") as f:
                contents = f.read()
        except FileNotFoundError as e:
            raise ConfigNotFoundError(f"Path does not exist: {path}") from e
        except UnicodeDecodeError as e:
            raise ConfigEncodingError(f"Unable to decode file at: {path}: {e}") from e
        except OSError as e:
            raise ConfigFileError(f"Unable to read file at: {path}: {e}") from e

        logger.debug(f"Read {key.file_name} from {path}")
        return strip_trailing_newline(contents)

    def write(self, key: ConfigKey, value: str) -> None:
        """Write a configuration value, replacing any existing content.

        The value is written verbatim; no trailing newline is added. The
        configuration directory must already exist.

        Args:
            key: Configuration value to write
            value: Text to store

        Raises:
            ConfigEncodingError: If the value cannot be encoded as UTF-8;
                the existing file is left untouched
            ConfigFileError: If the file cannot be created or written
        """
        path = self.key_to_path(key)

        # Encode before opening, opening truncates the existing value.
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ConfigEncodingError(f"Unable to encode value for {path}: {e}") from e

        try:
            f = open(path, "wb")
        except OSError as e:
            raise ConfigFileError(f"Couldn't create {path}: {e}") from e

        # Buffered errors such as ENOSPC surface on close.
        try:
            with f:
                f.write(data)
        except OSError as e:
            raise ConfigFileError(f"Couldn't write to {path}: {e}") from e

        logger.info(f"Wrote {key.file_name} to {path}")

    # ===== File Management =====

    def path_exists(self, path: str | Path) -> bool:
        """Check whether any filesystem entry exists at path.

        Args:
            path: Absolute path to check

        Returns:
            True for an existing file, directory or resolvable symlink;
            False when the path cannot be inspected at all
        """
        try:
            return Path(path).exists()
        except OSError:
            return False

    def remove(self, key: ConfigKey) -> None:
        """Remove a configuration value's file.

        Args:
            key: Configuration value to remove

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigFileError: If the file cannot be deleted
        """
        path = self.key_to_path(key)

        if not self.path_exists(path):
            raise ConfigNotFoundError(f"Path does not exist: {path}")

        try:
            path.unlink()
        except OSError as e:
            raise ConfigFileError(f"Couldn't remove {path}: {e}") from e
        logger.info(f"Removed {key.file_name} from {path.parent}")

    def key_to_path(self, key: ConfigKey) -> Path:
        """Get the file path for a configuration key.

        Args:
            key: ConfigKey enum value

        Returns:
            ``<home>/.eureka/<file_name>``
        """
        return config_file_path(key.file_name, self.home)
