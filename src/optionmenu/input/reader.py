from __future__ import annotations

import logging

from .actions import HORIZONTAL_KEYS, GetKeyMode, KeyAction
from .keybinds import Keybinds

logger = logging.getLogger(__name__)


def read_action(mode: GetKeyMode, keybinds: Keybinds, console) -> KeyAction:
    """Block until a bound key is pressed and return its keybind entry.

    Unbound keys are ignored. In ``IGNORE_HORIZONTAL`` mode the left and right
    entries are ignored as well. There is no timeout.
    """
    ignored = ()
    if mode is GetKeyMode.IGNORE_HORIZONTAL:
        ignored = tuple(keybinds[k] for k in HORIZONTAL_KEYS)
    while True:
        raw = console.read_key()
        entry = keybinds.translate(raw)
        if entry is None:
            logger.debug("Ignoring unbound key %r", raw)
            continue
        if entry in ignored:
            logger.debug("Ignoring horizontal key %r in %s mode", raw, mode.name)
            continue
        return entry
