class SanitizeError(Exception):
    """Base exception for the Sanitize I project."""


class SaveRootError(SanitizeError):
    """Raised when the saves root cannot be determined or listed."""


class NothingToCleanError(SanitizeError):
    """Raised when there is no candidate left to choose from. Not a failure."""


class NoPlayersFoundError(NothingToCleanError):
    """Raised when the saves root holds no selectable player directory."""


class NoSavesFoundError(NothingToCleanError):
    """Raised when a player has no save slot with a readable Game.json."""


class SaveNotFoundError(SanitizeError):
    """Raised when a prompt value matches neither an organisation nor a directory."""
