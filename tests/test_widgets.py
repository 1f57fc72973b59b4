from novellooker.events import Key, KeyEvent
from novellooker.widgets import (
    SingleLineEvent,
    SingleLineInput,
    ToastKind,
    error_line,
    toast_line,
)


def ch(c):
    return KeyEvent(Key.CHAR, c)


def key(code):
    return KeyEvent(code)


def type_text(inp, text):
    for c in text:
        assert inp.handle_event(ch(c)) == SingleLineEvent("edit")


def test_single_line_input_enter_submits_text():
    inp = SingleLineInput("test: ")
    inp.handle_event(ch("h"))
    inp.handle_event(ch("i"))
    ev = inp.handle_event(key(Key.ENTER))
    assert ev == SingleLineEvent("submit", "hi")


def test_single_line_input_esc_cancels():
    inp = SingleLineInput("test: ")
    ev = inp.handle_event(key(Key.ESC))
    assert ev.kind == "cancel"


def test_single_line_input_no_newline_on_multiple_enter():
    inp = SingleLineInput("test: ")
    inp.handle_event(ch("a"))
    inp.handle_event(key(Key.ENTER))
    inp.handle_event(ch("b"))
    ev = inp.handle_event(key(Key.ENTER))
    assert ev.kind == "submit"
    assert "\n" not in ev.text
    assert ev.text == "ab"


def test_empty_submit():
    inp = SingleLineInput("p")
    assert inp.handle_event(key(Key.ENTER)) == SingleLineEvent("submit", "")


def test_backspace_removes_last_char():
    inp = SingleLineInput("p")
    type_text(inp, "abc")
    assert inp.handle_event(key(Key.BACKSPACE)).kind == "edit"
    assert inp.text() == "ab"


def test_backspace_on_empty_is_harmless():
    inp = SingleLineInput("p")
    inp.handle_event(key(Key.BACKSPACE))
    assert inp.text() == ""


def test_cursor_movement_inserts_in_middle():
    inp = SingleLineInput("p")
    type_text(inp, "ac")
    inp.handle_event(key(Key.LEFT))
    inp.handle_event(ch("b"))
    assert inp.text() == "abc"
    inp.handle_event(key(Key.HOME))
    inp.handle_event(key(Key.DELETE))
    assert inp.text() == "bc"
    inp.handle_event(key(Key.END))
    inp.handle_event(ch("d"))
    assert inp.text() == "bcd"


def test_text_does_not_consume():
    inp = SingleLineInput("p")
    type_text(inp, "超維術士")
    assert inp.text() == "超維術士"
    assert inp.text() == "超維術士"


def test_render_has_prompt_and_text():
    inp = SingleLineInput(" 關鍵字（Enter 搜尋、Esc 取消）")
    type_text(inp, "xy")
    view = inp.render()
    assert view["title"] == " 關鍵字（Enter 搜尋、Esc 取消）"
    assert view["text"] == "xy"
    assert view["cursor"] == 2


def test_toast_colours():
    info = toast_line("hello", ToastKind.INFO)
    err = toast_line("oops", ToastKind.ERROR)
    assert info == {"text": "hello", "fg": "blue", "bg": None}
    assert err == {"text": "oops", "fg": "white", "bg": "red"}


def test_error_line_is_red():
    assert error_line("bad") == {"text": "bad", "fg": "red", "bg": None}