import sys
from pathlib import Path

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

import pytest  # noqa: E402

from optionmenu.elements import BaseUI  # noqa: E402
from optionmenu.input import Key, Keybinds  # noqa: E402

# Letter keybinds used by the controller tests: escape, up, down, left, right, enter.
ESC, UP, DOWN, LEFT, RIGHT, ENTER = "q", "w", "s", "a", "d", "e"


def letter_keybinds() -> Keybinds:
    return Keybinds.from_names([[ESC], [UP], [DOWN], [LEFT], [RIGHT], [ENTER]])


class FakeConsole:
    """Scripted stand-in for optionmenu.console.Console."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.output = []

    def write(self, text: str) -> None:
        self.output.append(text)

    def write_line(self, text: str = "") -> None:
        self.output.append(text + "\n")

    def read_key(self) -> str:
        if not self.keys:
            raise AssertionError("menu asked for more keys than the test scripted")
        return self.keys.pop(0)

    @property
    def text(self) -> str:
        return "".join(self.output)


class Button(BaseUI):
    """Clickable-only element returning ``result`` on enter."""

    def __init__(self, text: str, result) -> None:
        super().__init__(0, text)
        self.result = result
        self.contexts = []

    def is_clickable(self) -> bool:
        return True

    def is_only_clickable(self) -> bool:
        return True

    def _handle_action(self, args, context=None):
        self.contexts.append(context)
        if args.pressed_key == args.keybinds[Key.ENTER]:
            return self.result
        return False


@pytest.fixture
def keybinds():
    return letter_keybinds()
