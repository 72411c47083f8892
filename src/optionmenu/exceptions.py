class OptionMenuError(Exception):
    """Base exception for the optionmenu package."""


class NoSelectableElementsError(OptionMenuError):
    """Raised when a menu has no element that can receive the cursor."""

    def __init__(self, message: str = "There are no selectable UI elements in the list.") -> None:
        super().__init__(message)


class ConfigError(OptionMenuError):
    """Raised when a menu configuration file cannot be interpreted."""
