from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional, Tuple


class Key(IntEnum):
    """Logical menu actions.

    The integer value of each member is its fixed position in a keybind
    table: escape, up, down, left, right, enter.
    """

    ESCAPE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    ENTER = 5


HORIZONTAL_KEYS = (Key.LEFT, Key.RIGHT)


class GetKeyMode(Enum):
    """How the key reader filters the logical actions it will return."""

    NO_IGNORE = "no_ignore"
    IGNORE_HORIZONTAL = "ignore_horizontal"


def normalize_key(key: Optional[str | int]) -> Optional[str]:
    """Normalize a raw key into its canonical comparison form.

    Single printable characters are compared case-insensitively; control and
    escape sequences (as returned by readchar) are kept as they are. Ints are
    treated as character codes.
    """
    if key is None:
        return None
    if isinstance(key, int):
        key = chr(key)
    if not isinstance(key, str) or key == "":
        return None
    if len(key) == 1 and key.isprintable():
        return key.upper()
    return key


@dataclass(frozen=True)
class KeyAction:
    """One entry of a keybind table.

    Attributes:
        action: The logical action this entry stands for.
        keys: Raw keys (already normalized) that trigger the action.
    """

    action: Key
    keys: Tuple[str, ...] = ()

    @classmethod
    def of(cls, action: Key, keys: Iterable[str | int]) -> "KeyAction":
        normalized = []
        for key in keys:
            nk = normalize_key(key)
            if nk is not None and nk not in normalized:
                normalized.append(nk)
        return cls(action=action, keys=tuple(normalized))

    def matches(self, key: Optional[str | int]) -> bool:
        nk = normalize_key(key)
        return nk is not None and nk in self.keys


__all__ = ["Key", "HORIZONTAL_KEYS", "GetKeyMode", "KeyAction", "normalize_key"]
