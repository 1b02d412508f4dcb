"""
Exception types raised while generating badges.
"""


class BadgeError(Exception):
    """Base class for all badge generation errors."""


class ConfigError(BadgeError, ValueError):
    """The badge configuration document is unreadable or malformed."""


class MissingAssetError(BadgeError, FileNotFoundError):
    """The icon asset for a badge does not exist."""

    def __init__(self, icon_id: str, path) -> None:
        super().__init__(f"{path} not found")
        self.icon_id = icon_id
        self.path = path


class UnsupportedFormatError(BadgeError, ValueError):
    """The icon file is not a PNG image."""


class InvalidDimensionsError(BadgeError, ValueError):
    """The icon reports a zero or negative width or height."""
