import inspect

import pytest

from optionmenu.elements import BaseUI, Choice, Label
from optionmenu.input import Key

from conftest import Button


def press(element, keybinds, key, context=None):
    return element.handle_action(keybinds[key], keybinds, context)


def test_choice_right_wraps_to_first(keybinds):
    choice = Choice(["a", "b", "c"], value=2)
    assert press(choice, keybinds, Key.RIGHT) is True
    assert choice.value == 0


def test_choice_left_wraps_to_last(keybinds):
    choice = Choice(["a", "b", "c"], value=0)
    assert press(choice, keybinds, Key.LEFT) is True
    assert choice.value == 2


def test_choice_full_cycle_and_left_right_identity(keybinds):
    choice = Choice(["a", "b", "c", "d"], value=1)
    for _ in range(len(choice.choices)):
        press(choice, keybinds, Key.RIGHT)
    assert choice.value == 1

    press(choice, keybinds, Key.LEFT)
    press(choice, keybinds, Key.RIGHT)
    assert choice.value == 1
    press(choice, keybinds, Key.RIGHT)
    press(choice, keybinds, Key.LEFT)
    assert choice.value == 1


def test_choice_ignores_other_actions(keybinds):
    choice = Choice(["a", "b"], value=1)
    assert press(choice, keybinds, Key.ENTER) is False
    assert press(choice, keybinds, Key.UP) is False
    assert choice.value == 1


def test_choice_value_is_clamped_at_construction():
    assert Choice(["a", "b"], value=5).value == 1
    assert Choice(["a", "b"], value=-3).value == 0


def test_choice_requires_choices():
    with pytest.raises(ValueError):
        Choice([])


def test_choice_text_structure():
    choice = Choice(["Easy", "Normal"], value=1, pre_text="Difficulty: ",
                    pre_value=" (", display_value=True, post_value=")")
    assert choice.make_text("> ", " <") == "> Difficulty: Normal (2/2) <\n"

    plain = Choice(["Off", "On"], pre_text="Sound: ")
    assert plain.make_text("  ", "") == "  Sound: Off\n"


def test_multiline_choice_repeats_cursor_on_every_line():
    choice = Choice(["first\nsecond"], multiline=True)
    assert choice.make_text("> ", " <") == "> first <\n> second <\n"

    single = Choice(["first\nsecond"])
    assert single.make_text("> ", " <") == "> first\nsecond <\n"


def test_element_key_hook_overrides_redraw_result(keybinds):
    choice = Choice(["a", "b"])

    def no_redraw(sender, args):
        args.update_screen = False

    choice.key_pressed.subscribe(no_redraw)
    assert press(choice, keybinds, Key.RIGHT) is False
    assert choice.value == 1


def test_element_text_hook_overrides_text():
    choice = Choice(["a", "b"])
    seen = []

    def override(sender, args):
        seen.append(args.current_index)
        args.override_text = "custom\n"

    choice.before_text_created.subscribe(override)
    assert choice.make_text("> ", "") == "custom\n"
    assert seen == [-1]


def test_label_is_plain_text_and_never_selectable(keybinds):
    label = Label("Hello")
    assert label.value == -1
    assert label.is_selectable() is False
    assert label.is_clickable() is False
    assert label.make_text("> ", " <") == "Hello\n"
    assert press(label, keybinds, Key.RIGHT) is False
    assert press(label, keybinds, Key.ENTER) is False


def test_label_handle_action_keeps_the_base_signature():
    assert inspect.signature(Label.handle_action) == inspect.signature(BaseUI.handle_action)


def test_default_predicates():
    choice = Choice(["a"])
    assert choice.is_selectable() is True
    assert choice.is_clickable() is False
    assert choice.is_only_clickable() is False

    button = Button("Go", "go")
    assert button.is_clickable() and button.is_only_clickable()
