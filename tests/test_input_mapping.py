import logging

import pytest
from readchar import key as rkey

from optionmenu.exceptions import ConfigError
from optionmenu.input import GetKeyMode, Key, KeyAction, Keybinds, read_action

from conftest import FakeConsole


def test_default_table_order_and_arrows():
    keybinds = Keybinds.default()
    assert [entry.action for entry in keybinds] == list(Key)

    assert keybinds.translate(rkey.UP) == keybinds[Key.UP]
    assert keybinds.translate(rkey.DOWN) == keybinds[Key.DOWN]
    assert keybinds.translate(rkey.LEFT) == keybinds[Key.LEFT]
    assert keybinds.translate(rkey.RIGHT) == keybinds[Key.RIGHT]
    assert keybinds.translate(rkey.ESC) == keybinds[Key.ESCAPE]
    assert keybinds.translate(rkey.ENTER) == keybinds[Key.ENTER]
    assert keybinds.translate("\r") == keybinds[Key.ENTER]
    assert keybinds.translate("\n") == keybinds[Key.ENTER]


def test_unbound_key_translates_to_none():
    keybinds = Keybinds.default()
    assert keybinds.translate("x") is None
    assert keybinds.translate("") is None
    assert keybinds.translate(None) is None


def test_letters_are_case_insensitive(keybinds):
    assert keybinds.translate("w") == keybinds[Key.UP]
    assert keybinds.translate("W") == keybinds[Key.UP]


def test_from_names_resolves_symbolic_names():
    keybinds = Keybinds.from_names([["esc", "q"], ["UP", "k"], ["DOWN", "j"], ["LEFT"], ["RIGHT"], ["ENTER", "space"]])
    assert keybinds.translate("q") == keybinds[Key.ESCAPE]
    assert keybinds.translate(rkey.ESC) == keybinds[Key.ESCAPE]
    assert keybinds.translate("K") == keybinds[Key.UP]
    assert keybinds.translate(" ") == keybinds[Key.ENTER]


def test_from_names_rejects_unknown_names():
    with pytest.raises(ConfigError):
        Keybinds.from_names([["NOPE"], ["UP"], ["DOWN"], ["LEFT"], ["RIGHT"], ["ENTER"]])


def test_short_table_is_replaced_by_defaults(caplog):
    with caplog.at_level(logging.WARNING):
        keybinds = Keybinds.resolve([KeyAction.of(Key.ESCAPE, ["q"])])
    assert list(keybinds) == list(Keybinds.default())
    assert "using defaults" in caplog.text

    assert list(Keybinds.resolve(None)) == list(Keybinds.default())


def test_escape_pairs_from_readchar_resolve_to_escape():
    keybinds = Keybinds.default()
    assert keybinds.translate("\x1b\x1b") == keybinds[Key.ESCAPE]
    assert keybinds.translate("\x1bx") == keybinds[Key.ESCAPE]
    # Prefixes of arrow and function key sequences are not an escape press.
    assert keybinds.translate("\x1b[") is None
    assert keybinds.translate("\x1bO") is None
    assert keybinds.translate("\x1b[15~") is None


def test_escape_pairs_are_ignored_without_an_escape_binding(keybinds):
    assert keybinds.translate("\x1b\x1b") is None


def test_read_action_skips_unbound_keys(keybinds):
    console = FakeConsole(["x", "y", "d"])
    assert read_action(GetKeyMode.NO_IGNORE, keybinds, console) == keybinds[Key.RIGHT]
    assert console.keys == []


def test_read_action_ignores_horizontal_keys_when_asked(keybinds):
    console = FakeConsole(["a", "d", "e"])
    assert read_action(GetKeyMode.IGNORE_HORIZONTAL, keybinds, console) == keybinds[Key.ENTER]

    console = FakeConsole(["a"])
    assert read_action(GetKeyMode.NO_IGNORE, keybinds, console) == keybinds[Key.LEFT]
