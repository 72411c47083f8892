from __future__ import annotations

import logging
from typing import Any, Sequence

from ..events import ElementKeyPressedArgs
from ..input.actions import Key
from .base import BaseUI

logger = logging.getLogger(__name__)


class Choice(BaseUI):
    """A multiple choice selector cycled with the left and right keys.

    Text structure: [pre_text][choice name][pre_value][value][post_value]
    where the value is rendered as ``"<value + 1>/<number of choices>"``.
    """

    def __init__(
        self,
        choices: Sequence[str],
        value: int = 0,
        pre_text: str = "",
        pre_value: str = "",
        display_value: bool = False,
        post_value: str = "",
        multiline: bool = False,
    ) -> None:
        choices = list(choices)
        if not choices:
            raise ValueError("Choice requires at least one choice")
        super().__init__(
            max(0, min(value, len(choices) - 1)),
            pre_text,
            pre_value,
            display_value,
            post_value,
            multiline,
        )
        self.choices = choices

    def make_special(self, icons: str, context: Any = None) -> str:
        if self.multiline:
            return self.choices[self.value].replace("\n", icons)
        return self.choices[self.value]

    def make_value(self, context: Any = None) -> str:
        return f"{self.value + 1}/{len(self.choices)}"

    def _handle_action(self, args: ElementKeyPressedArgs, context: Any = None) -> Any:
        changed = False
        if args.pressed_key in (args.keybinds[Key.LEFT], args.keybinds[Key.RIGHT]):
            step = 1 if args.pressed_key == args.keybinds[Key.RIGHT] else -1
            self.value = (self.value + step) % len(self.choices)
            changed = True
            logger.debug("Choice %r moved to %d (%s)", self.pre_text, self.value, self.choices[self.value])
        if args.update_screen is not None:
            return args.update_screen
        return changed
