from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, List, Optional, Sequence

from .config import DEFAULT_CLEAR_LINES, CursorIcon, MenuConfig, ScrollSettings
from .console import Console
from .elements.base import BaseUI
from .events import (
    AfterOptionsDisplayedArgs,
    AfterOptionsTextCreatedArgs,
    AfterOptionsTextDisplayedArgs,
    BeforeOptionsDisplayedArgs,
    BeforeOptionsTextCreatedArgs,
    Hook,
    OptionsKeyPressedArgs,
)
from .exceptions import NoSelectableElementsError
from .input.actions import GetKeyMode, Key, KeyAction
from .input.keybinds import Keybinds
from .input.reader import read_action
from .scrolling import compute_window, scroll_indicators

logger = logging.getLogger(__name__)


class MenuState(Enum):
    """Where the controller currently is in its render/read/dispatch cycle."""

    IDLE = auto()
    RENDERING = auto()
    AWAITING_INPUT = auto()
    DISPATCHING = auto()
    TERMINATED = auto()


def _is_selectable(element: Optional[BaseUI]) -> bool:
    return element is not None and element.is_selectable()


class OptionsUI:
    """Interactive list of elements driven by the six menu actions.

    :meth:`display` prints the title and the visible elements, then lets the
    user move the cursor between selectable elements with up/down and adjust
    or click the focused one with left/right/enter. ``None`` entries are
    written as blank lines and are never focused.

    Hooks (see :mod:`optionmenu.events`) are subscribed on the instance:
    ``before_options_displayed``, ``after_options_displayed``,
    ``before_text_created``, ``after_text_created``, ``after_text_displayed``
    and ``key_pressed``.

    Raises:
        NoSelectableElementsError: if no element can receive the cursor.
    """

    def __init__(
        self,
        elements: Sequence[Optional[BaseUI]],
        title: Optional[str] = None,
        cursor_icon: Optional[CursorIcon] = None,
        can_escape: bool = True,
        pass_in_object: bool = True,
        scroll_settings: Optional[ScrollSettings] = None,
        clear_screen_text: Optional[str] = None,
        console: Optional[Console] = None,
    ) -> None:
        # Kept by reference: hooks may edit the caller's list between frames.
        self.elements: List[Optional[BaseUI]] = elements if isinstance(elements, list) else list(elements)
        self._validate()
        self.title = title
        self.cursor_icon = cursor_icon or CursorIcon()
        self.can_escape = can_escape
        self.pass_in_object = pass_in_object
        self.scroll_settings = (scroll_settings or ScrollSettings()).normalize()
        self.clear_screen_text = "\n" * DEFAULT_CLEAR_LINES if clear_screen_text is None else clear_screen_text
        self.console = console or Console()

        self.selected: int = 0
        self.start_index: int = 0
        self.state: MenuState = MenuState.IDLE

        self.before_options_displayed: Hook[BeforeOptionsDisplayedArgs] = Hook("before_options_displayed")
        self.after_options_displayed: Hook[AfterOptionsDisplayedArgs] = Hook("after_options_displayed")
        self.before_text_created: Hook[BeforeOptionsTextCreatedArgs] = Hook("before_text_created")
        self.after_text_created: Hook[AfterOptionsTextCreatedArgs] = Hook("after_text_created")
        self.after_text_displayed: Hook[AfterOptionsTextDisplayedArgs] = Hook("after_text_displayed")
        self.key_pressed: Hook[OptionsKeyPressedArgs] = Hook("key_pressed")

    @classmethod
    def from_config(
        cls,
        elements: Sequence[Optional[BaseUI]],
        config: MenuConfig,
        console: Optional[Console] = None,
    ) -> "OptionsUI":
        return cls(
            elements,
            title=config.title,
            cursor_icon=config.cursor_icon,
            can_escape=config.can_escape,
            pass_in_object=config.pass_in_object,
            scroll_settings=config.scroll_settings,
            clear_screen_text=config.clear_screen_text,
            console=console,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _validate(self) -> None:
        if not any(_is_selectable(element) for element in self.elements):
            raise NoSelectableElementsError()

    def _focused(self) -> Optional[BaseUI]:
        if 0 <= self.selected < len(self.elements):
            return self.elements[self.selected]
        return None

    def _context(self) -> Optional["OptionsUI"]:
        return self if self.pass_in_object else None

    def _first_selectable(self) -> int:
        for index, element in enumerate(self.elements):
            if _is_selectable(element):
                return index
        raise NoSelectableElementsError()

    def _window(self) -> tuple[int, int]:
        settings = self.scroll_settings
        return compute_window(
            len(self.elements),
            self.selected,
            self.start_index,
            None if settings.unbounded else settings.max_elements,
            settings.scroll_up_margin,
            settings.scroll_down_margin,
        )

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def display_options(self) -> None:
        """Write one frame: clear block, title, visible elements and indicators."""
        self.state = MenuState.RENDERING
        before_args = self.before_options_displayed.emit(self, BeforeOptionsDisplayedArgs())
        if before_args.override_text is not None:
            logger.debug("Frame replaced by before_options_displayed hook")
            self.console.write_line(before_args.override_text)
            return

        total = len(self.elements)
        self.start_index, end_index = self._window()
        top, bottom = scroll_indicators(self.start_index, end_index, total, self.scroll_settings.scroll_icon)

        txt_beginning = self.clear_screen_text
        if self.title is not None:
            txt_beginning += f"{self.title}\n\n"
        self.console.write(txt_beginning + top)

        context = self._context()
        for index in range(self.start_index, end_index):
            element = self.elements[index]
            before_args = self.before_text_created.emit(self, BeforeOptionsTextCreatedArgs(index))
            if before_args.override_text is not None:
                self.console.write(before_args.override_text)
                continue

            if element is None:
                element_text = "\n"
            else:
                icon, icon_right = self.cursor_icon.pair(index == self.selected)
                element_text = element.make_text(icon, icon_right, context)

            after_args = self.after_text_created.emit(self, AfterOptionsTextCreatedArgs(element_text, index))
            self.console.write(element_text if after_args.override_text is None else after_args.override_text)
            self.after_text_displayed.emit(self, AfterOptionsTextDisplayedArgs(element_text, index))

        self.console.write_line(bottom)
        self.after_options_displayed.emit(self, AfterOptionsDisplayedArgs(end_index))

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------
    def _read_key(self, keybinds: Keybinds, enter_needed: bool) -> KeyAction:
        self.state = MenuState.AWAITING_INPUT
        element = self._focused()
        if element is not None and element.is_clickable() and element.is_only_clickable():
            return read_action(GetKeyMode.IGNORE_HORIZONTAL, keybinds, self.console)

        pressed = read_action(GetKeyMode.NO_IGNORE, keybinds, self.console)
        if pressed == keybinds[Key.ENTER] and not enter_needed:
            logger.debug("Nothing is clickable, treating enter as escape")
            return keybinds[Key.ESCAPE]
        return pressed

    def move_selection(self, step: int) -> bool:
        """Move the cursor by ``step`` with wraparound, skipping elements that
        cannot be selected. Returns whether the selection changed."""
        self._validate()
        previous = self.selected
        count = len(self.elements)
        index = self.selected
        while True:
            index = (index + step) % count
            if _is_selectable(self.elements[index]):
                break
        self.selected = index
        logger.debug("Selection moved: %d -> %d", previous, index)
        return previous != index

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------
    def display(self, keybinds: Optional[Keybinds | Sequence[KeyAction]] = None) -> Any:
        """Run the menu until it is escaped or an element returns a result.

        Args:
            keybinds: The keybind table, in the order escape, up, down, left,
                right, enter. Tables with fewer than six entries are replaced by
                the default one.

        Returns:
            None if the menu was escaped, otherwise whatever the focused
            element's handler returned to end the menu.

        Raises:
            NoSelectableElementsError: if no element can receive the cursor,
                checked before every frame.
        """
        self._validate()
        keybinds = Keybinds.resolve(keybinds)
        self.scroll_settings.normalize()
        enter_needed = any(element is not None and element.is_clickable() for element in self.elements)

        self.selected = self._first_selectable()
        self.start_index = 0
        self.start_index, _ = self._window()
        logger.debug(
            "Menu started: %d elements, selected=%d, start_index=%d",
            len(self.elements),
            self.selected,
            self.start_index,
        )

        context = self._context()
        while True:
            self._validate()
            self.display_options()

            redraw = False
            while not redraw:
                pressed = self._read_key(keybinds, enter_needed)
                self.state = MenuState.DISPATCHING

                key_args = self.key_pressed.emit(self, OptionsKeyPressedArgs(pressed, keybinds))
                if key_args.update_screen is not None:
                    redraw = key_args.update_screen
                if key_args.cancel_key_handling:
                    logger.debug("Key handling cancelled by hook: %s", pressed.action.name)
                    continue

                if pressed in (keybinds[Key.UP], keybinds[Key.DOWN]):
                    if self.move_selection(1 if pressed == keybinds[Key.DOWN] else -1):
                        redraw = True
                elif pressed == keybinds[Key.ESCAPE]:
                    if self.can_escape:
                        logger.debug("Menu escaped")
                        self.state = MenuState.TERMINATED
                        return None
                else:
                    element = self._focused()
                    if not _is_selectable(element):
                        continue
                    returned = element.handle_action(pressed, keybinds, context)
                    if isinstance(returned, bool):
                        redraw = returned
                    elif returned is not None:
                        logger.debug("Menu ended by element %d with %r", self.selected, returned)
                        self.state = MenuState.TERMINATED
                        return returned


__all__ = ["OptionsUI", "MenuState"]
