"""
Input abstraction layer for optionmenu.

Exposes:
- Key: The six logical menu actions, in keybind table order.
- GetKeyMode: Filtering modes for the key reader.
- KeyAction: One keybind table entry.
- Keybinds: The ordered six-entry keybind table.
- read_action: Blocking read of the next bound action.
"""
from .actions import GetKeyMode, Key, KeyAction
from .keybinds import Keybinds
from .reader import read_action

__all__ = [
    "GetKeyMode",
    "Key",
    "KeyAction",
    "Keybinds",
    "read_action",
]
