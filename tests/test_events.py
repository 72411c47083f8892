from optionmenu.events import AfterOptionsTextCreatedArgs, Hook


def test_handlers_run_in_subscription_order_and_share_args():
    hook = Hook("after_text_created")
    calls = []

    def first(sender, args):
        calls.append(("first", sender))
        args.override_text = "first"

    def second(sender, args):
        calls.append(("second", args.override_text))
        args.override_text = "second"

    hook.subscribe(first)
    hook.subscribe(second)
    args = hook.emit("menu", AfterOptionsTextCreatedArgs("text", 0))

    assert calls == [("first", "menu"), ("second", "first")]
    assert args.override_text == "second"


def test_subscribe_is_idempotent_and_unsubscribe_removes():
    hook = Hook("key_pressed")
    calls = []

    def handler(sender, args):
        calls.append(args)

    hook.subscribe(handler)
    hook.subscribe(handler)
    assert len(hook) == 1

    hook.emit(None, 1)
    hook.unsubscribe(handler)
    hook.emit(None, 2)
    assert calls == [1]
    assert not hook


def test_clear_removes_all_handlers():
    hook = Hook("x")
    hook.subscribe(lambda s, a: None)
    hook.subscribe(lambda s, a: None)
    hook.clear()
    assert len(hook) == 0
