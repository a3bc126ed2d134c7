"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the current environment."""

    pass


# Placeholder secret shipped in AuthSettings
DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_deployable(settings) -> None:
    """Refuse settings that must never reach a deployed environment.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If a staging or production deployment still uses
            development defaults
    """
    if settings.environment not in ("staging", "production"):
        return
    if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set outside development")
