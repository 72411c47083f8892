from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from .input.actions import KeyAction
    from .input.keybinds import Keybinds

logger = logging.getLogger(__name__)

A = TypeVar("A")


class Hook(Generic[A]):
    """An extension point holding an ordered list of callbacks.

    Handlers are called synchronously, in subscription order, with
    ``(sender, args)``. They communicate back by setting fields on ``args``,
    which the emitter inspects once every handler has run.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: List[Callable[[Any, A], Any]] = []

    def subscribe(self, handler: Callable[[Any, A], Any]) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)
            logger.debug("Subscribed handler %s to hook '%s'", handler, self.name)

    def unsubscribe(self, handler: Callable[[Any, A], Any]) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)
            logger.debug("Unsubscribed handler %s from hook '%s'", handler, self.name)

    def clear(self) -> None:
        self._handlers.clear()

    def emit(self, sender: Any, args: A) -> A:
        """Call every handler with ``(sender, args)`` and return ``args``."""
        for handler in list(self._handlers):
            handler(sender, args)
        return args

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)

    def __repr__(self) -> str:
        return f"Hook({self.name!r}, handlers={len(self._handlers)})"


# ---------- Menu level ----------
@dataclass
class BeforeOptionsDisplayedArgs:
    """If ``override_text`` is set, it is printed instead of the whole frame."""

    override_text: Optional[str] = None


@dataclass
class AfterOptionsDisplayedArgs:
    end_index: int


@dataclass
class BeforeOptionsTextCreatedArgs:
    """If ``override_text`` is set, the element's text is not created and this is written instead."""

    current_index: int
    override_text: Optional[str] = None


@dataclass
class AfterOptionsTextCreatedArgs:
    """If ``override_text`` is set, it is written instead of ``text``."""

    text: str
    current_index: int
    override_text: Optional[str] = None


@dataclass
class AfterOptionsTextDisplayedArgs:
    text: str
    current_index: int


@dataclass
class OptionsKeyPressedArgs:
    """Arguments of the menu level key press hook.

    Attributes:
        pressed_key: The keybind entry that was pressed.
        keybinds: The table in use.
        update_screen: If not None, forces whether the menu is redrawn.
        cancel_key_handling: If True, the key is not handled any further.
    """

    pressed_key: "KeyAction"
    keybinds: "Keybinds"
    update_screen: Optional[bool] = None
    cancel_key_handling: bool = False


# ---------- Element level ----------
@dataclass
class BeforeElementTextCreatedArgs:
    current_index: int
    override_text: Optional[str] = None


@dataclass
class ElementKeyPressedArgs:
    """Passed to an element's key handler; ``update_screen`` overrides its redraw result."""

    pressed_key: "KeyAction"
    keybinds: "Keybinds"
    update_screen: Optional[bool] = None


__all__ = [
    "Hook",
    "BeforeOptionsDisplayedArgs",
    "AfterOptionsDisplayedArgs",
    "BeforeOptionsTextCreatedArgs",
    "AfterOptionsTextCreatedArgs",
    "AfterOptionsTextDisplayedArgs",
    "OptionsKeyPressedArgs",
    "BeforeElementTextCreatedArgs",
    "ElementKeyPressedArgs",
]
