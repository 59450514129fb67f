"""Exceptions for eureka-config."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error creating, reading, writing or removing a configuration file."""

    pass


class ConfigNotFoundError(ConfigFileError):
    """Requested configuration file does not exist."""

    pass


class ConfigEncodingError(ConfigError):
    """Configuration file content is not valid UTF-8 text."""

    pass


class HomeDirectoryError(ConfigError):
    """The user's home directory could not be determined."""

    pass
