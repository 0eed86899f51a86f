"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the target environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a provider implementation cannot be selected."""

    pass
