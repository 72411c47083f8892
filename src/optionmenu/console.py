from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

import readchar


class Console:
    """Thin terminal collaborator used by :class:`~optionmenu.options_ui.OptionsUI`.

    All menu output goes through :meth:`write` / :meth:`write_line` and all
    input through :meth:`read_key`, so tests can swap in a scripted console.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        key_reader: Optional[Callable[[], str]] = None,
    ) -> None:
        self._stream = stream
        self._key_reader = key_reader or readchar.readkey

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_key(self) -> str:
        """Block until a key is pressed and return its raw representation."""
        return self._key_reader()


__all__ = ["Console"]
