"""Path helpers for eureka-config."""

from pathlib import Path

from .exceptions import HomeDirectoryError

CONFIG_DIR_NAME = ".eureka"


def resolve_home() -> Path:
    """Resolve the invoking user's home directory.

    Looked up on every call; nothing is cached.

    Returns:
        Home directory path

    Raises:
        HomeDirectoryError: If the platform cannot determine a home directory
    """
    try:
        return Path.home()
    except RuntimeError as e:
        raise HomeDirectoryError("Could not resolve your $HOME directory") from e


def config_dir_path(home: Path | None = None) -> Path:
    """Return the configuration directory, ``<home>/.eureka``.

    Args:
        home: Base directory (default: resolved home directory)
    """
    base = home if home is not None else resolve_home()
    return base / CONFIG_DIR_NAME


def config_file_path(file_name: str, home: Path | None = None) -> Path:
    """Return ``<home>/.eureka/<file_name>``.

    Args:
        file_name: Name of the file inside the configuration directory
        home: Base directory (default: resolved home directory)

    Examples:
        >>> config_file_path("repo_path", Path("/home/u")).as_posix()
        '/home/u/.eureka/repo_path'
    """
    return config_dir_path(home) / file_name


def strip_trailing_newline(contents: str) -> str:
    """Strip a single trailing newline, leaving all other whitespace intact.

    Examples:
        >>> strip_trailing_newline("/usr/bin/vim\\n")
        '/usr/bin/vim'

        >>> strip_trailing_newline("a\\n\\n")
        'a\\n'

        >>> strip_trailing_newline("")
        ''
    """
    if contents.endswith("\n"):
        return contents[:-1]
    return contents
