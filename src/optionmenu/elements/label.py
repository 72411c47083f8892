from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..events import ElementKeyPressedArgs
from .base import BaseUI

if TYPE_CHECKING:  # pragma: no cover
    from ..input.actions import KeyAction
    from ..input.keybinds import Keybinds


class Label(BaseUI):
    """Plain, non-selectable text.

    Text structure: [text]
    """

    def __init__(self, text: str) -> None:
        super().__init__(-1, text, "", False, "", False)

    def is_selectable(self) -> bool:
        return False

    def make_text(self, icon: str, icon_right: str, context: Any = None) -> str:
        return self.pre_text + "\n"

    def handle_action(self, key: "KeyAction", keybinds: "Keybinds", context: Any = None) -> Any:
        return False

    def _handle_action(self, args: ElementKeyPressedArgs, context: Any = None) -> Any:
        return False
