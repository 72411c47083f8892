"""
optionmenu package root.

An interactive terminal menu engine: a list of elements rendered with a
cursor, navigated with six logical actions and able to edit their own
values or end the menu with a result.
"""

__version__ = "0.1.0"

from .config import CursorIcon, MenuConfig, ScrollIcon, ScrollSettings, load_menu_config
from .console import Console
from .elements import BaseUI, Choice, Label
from .exceptions import ConfigError, NoSelectableElementsError, OptionMenuError
from .input import GetKeyMode, Key, KeyAction, Keybinds, read_action
from .options_ui import MenuState, OptionsUI
from .scrolling import compute_window, scroll_indicators

__all__ = [
    "__version__",
    "BaseUI",
    "Choice",
    "ConfigError",
    "Console",
    "CursorIcon",
    "GetKeyMode",
    "Key",
    "KeyAction",
    "Keybinds",
    "Label",
    "MenuConfig",
    "MenuState",
    "NoSelectableElementsError",
    "OptionMenuError",
    "OptionsUI",
    "ScrollIcon",
    "ScrollSettings",
    "compute_window",
    "load_menu_config",
    "read_action",
    "scroll_indicators",
]
