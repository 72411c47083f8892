from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from ..events import BeforeElementTextCreatedArgs, ElementKeyPressedArgs, Hook

if TYPE_CHECKING:  # pragma: no cover
    from ..input.actions import KeyAction
    from ..input.keybinds import Keybinds

logger = logging.getLogger(__name__)


class BaseUI(ABC):
    """One line (or block) of menu content.

    Text structure:
        [icon][pre_text][special][pre_value][value][post_value][icon_right]

    The value block is only written when ``display_value`` is set. The
    controller decides focus with the three predicates below and never looks
    at the concrete element type.

    ``handle_action`` results:
        - False or None: nothing changed.
        - True: the menu should be redrawn.
        - anything else: the menu stops and returns it.
    """

    def __init__(
        self,
        value: int = 0,
        pre_text: str = "",
        pre_value: str = "",
        display_value: bool = False,
        post_value: str = "",
        multiline: bool = False,
    ) -> None:
        self.value = value
        self.pre_text = pre_text
        self.pre_value = pre_value
        self.display_value = display_value
        self.post_value = post_value
        self.multiline = multiline
        self.before_text_created: Hook[BeforeElementTextCreatedArgs] = Hook("before_text_created")
        self.key_pressed: Hook[ElementKeyPressedArgs] = Hook("key_pressed")

    # ---------- Predicates ----------
    def is_selectable(self) -> bool:
        return True

    def is_clickable(self) -> bool:
        return False

    def is_only_clickable(self) -> bool:
        return False

    # ---------- Text ----------
    def make_special(self, icons: str, context: Any = None) -> str:
        """The element specific part of the text, between the pre text and the value."""
        return ""

    def make_value(self, context: Any = None) -> str:
        return str(self.value)

    def make_text(self, icon: str, icon_right: str, context: Any = None) -> str:
        """Return the text of this element, ending with a newline."""
        args = self.before_text_created.emit(self, BeforeElementTextCreatedArgs(self._index_in(context)))
        if args.override_text is not None:
            return args.override_text

        special = self.make_special(icon_right + "\n" + icon, context)
        txt = icon + self.pre_text + special
        if self.display_value:
            txt += self.pre_value + self.make_value(context) + self.post_value
        return txt + icon_right + "\n"

    # ---------- Input ----------
    def handle_action(self, key: "KeyAction", keybinds: "Keybinds", context: Any = None) -> Any:
        """Handle a left/right/enter press while this element has the cursor."""
        args = ElementKeyPressedArgs(key, keybinds)
        self.key_pressed.emit(self, args)
        return self._handle_action(args, context)

    @abstractmethod
    def _handle_action(self, args: ElementKeyPressedArgs, context: Any = None) -> Any:
        """Element specific input handling.

        Implementations should honour ``args.update_screen`` when it is set.
        """
        raise NotImplementedError

    # ---------- Utility ----------
    def _index_in(self, context: Any) -> int:
        elements = getattr(context, "elements", None)
        if elements is None:
            return -1
        for index, element in enumerate(elements):
            if element is self:
                return index
        return -1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, pre_text={self.pre_text!r})"


__all__ = ["BaseUI"]
