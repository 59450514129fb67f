"""Data models for eureka-config."""

from enum import Enum


class ConfigKey(Enum):
    """Configuration value enumeration.

    Each member names one stored value; its enum value is the file name
    used beneath the configuration directory.
    """

    REPO = "repo_path"
    EDITOR = "editor_path"

    @property
    def file_name(self) -> str:
        return self.value
