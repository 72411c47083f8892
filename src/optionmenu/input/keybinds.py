from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional, Sequence

from readchar import key as rkey

from ..exceptions import ConfigError
from .actions import Key, KeyAction, normalize_key

logger = logging.getLogger(__name__)


# Symbolic names accepted in configuration files, resolved to the raw strings
# readchar produces for them.
KEY_NAMES: Dict[str, str] = {
    "UP": rkey.UP,
    "DOWN": rkey.DOWN,
    "LEFT": rkey.LEFT,
    "RIGHT": rkey.RIGHT,
    "ENTER": rkey.ENTER,
    "RETURN": "\r",
    "NEWLINE": "\n",
    "ESC": rkey.ESC,
    "ESCAPE": rkey.ESC,
    "SPACE": " ",
    "TAB": "\t",
}


def resolve_key_name(name: str | int) -> str:
    """Translate a symbolic key name (or a single character) into a raw key."""
    if isinstance(name, int):
        return chr(name)
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"Invalid key name: {name!r}")
    stripped = name.strip()
    if len(stripped) == 1:
        return stripped
    raw = KEY_NAMES.get(stripped.upper())
    if raw is None:
        raise ConfigError(f"Unknown key name: {name!r}")
    return raw


def _is_escape_pair(raw: str) -> bool:
    # "\x1bO" and "\x1b[" start arrow/function key sequences, not a lone Escape.
    return len(raw) == 2 and raw[0] == rkey.ESC and raw[1] not in "O["


class Keybinds:
    """Ordered table of the six menu actions.

    Positions are fixed (see :class:`Key`): escape, up, down, left, right,
    enter. Each entry may list several raw keys; translation picks the first
    entry, in table order, that contains the pressed key.
    """

    SIZE = len(Key)

    def __init__(self, entries: Sequence[KeyAction]) -> None:
        if len(entries) < self.SIZE:
            raise ValueError(f"Keybinds requires {self.SIZE} entries, got {len(entries)}")
        self._entries = tuple(entries[: self.SIZE])

    # ---------- Construction ----------
    @classmethod
    def default(cls) -> "Keybinds":
        """Arrow keys for movement, Enter to confirm and Escape to leave."""
        return cls(
            [
                KeyAction.of(Key.ESCAPE, [rkey.ESC]),
                KeyAction.of(Key.UP, [rkey.UP]),
                KeyAction.of(Key.DOWN, [rkey.DOWN]),
                KeyAction.of(Key.LEFT, [rkey.LEFT]),
                KeyAction.of(Key.RIGHT, [rkey.RIGHT]),
                KeyAction.of(Key.ENTER, [rkey.ENTER, "\r", "\n"]),
            ]
        )

    @classmethod
    def from_names(cls, names: Sequence[Iterable[str | int]]) -> "Keybinds":
        """Build a table from lists of symbolic key names, one list per action."""
        entries = []
        for action, keys in zip(Key, names):
            if isinstance(keys, (str, int)):
                keys = [keys]
            entries.append(KeyAction.of(action, [resolve_key_name(k) for k in keys]))
        return cls.resolve(entries)

    @classmethod
    def resolve(cls, keybinds: Keybinds | Sequence[KeyAction] | None) -> "Keybinds":
        """Return a usable table, substituting the default one wholesale when
        fewer than six entries are supplied."""
        if isinstance(keybinds, Keybinds):
            return keybinds
        if keybinds is None:
            return cls.default()
        if len(keybinds) < cls.SIZE:
            logger.warning(
                "Keybind table has %d entries, %d required; using defaults", len(keybinds), cls.SIZE
            )
            return cls.default()
        return cls(keybinds)

    # ---------- Lookup ----------
    def __getitem__(self, action: Key | int) -> KeyAction:
        return self._entries[int(action)]

    def __iter__(self) -> Iterator[KeyAction]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def translate(self, raw_key: Optional[str | int]) -> Optional[KeyAction]:
        """Translate a raw key into its keybind entry, or None if unbound.

        On POSIX terminals readchar never reports a lone Escape: it reads one
        more character and returns the pair (``"\\x1b\\x1b"`` for a double
        press, ``"\\x1b" + c`` when another key follows). Such pairs, unless
        bound themselves, resolve to whichever entry binds the bare Escape key.
        """
        nk = normalize_key(raw_key)
        if nk is None:
            return None
        for entry in self._entries:
            if nk in entry.keys:
                return entry
        if _is_escape_pair(nk):
            for entry in self._entries:
                if rkey.ESC in entry.keys:
                    logger.debug("Escape pair %r treated as escape", nk)
                    return entry
        return None

    def __repr__(self) -> str:
        return f"Keybinds({list(self._entries)!r})"


__all__ = ["Keybinds", "KEY_NAMES", "resolve_key_name"]
