"""Reusable widgets: toast lines, error lines and a single-line text input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .events import Key, KeyEvent


class ToastKind(Enum):
    """Toast level; decides the colours of a toast line."""

    INFO = "info"
    ERROR = "error"


def toast_line(msg: str, kind: ToastKind) -> dict:
    """Describe a one-line transient message: info is blue, error is white on red."""
    if kind is ToastKind.INFO:
        return {"text": msg, "fg": "blue", "bg": None}
    return {"text": msg, "fg": "white", "bg": "red"}


def error_line(text: str) -> dict:
    """Describe a one-line inline error message in red."""
    return {"text": text, "fg": "red", "bg": None}


@dataclass(frozen=True)
class SingleLineEvent:
    """Outcome of a key fed to :class:`SingleLineInput`.

    ``kind`` is ``"submit"`` (with ``text``), ``"cancel"`` or ``"edit"``.
    """

    kind: str
    text: str = ""


class SingleLineInput:
    """Editable single line of text with a prompt; Enter submits, Esc cancels."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        self._chars: list[str] = []
        self._cursor = 0

    def handle_event(self, key: KeyEvent) -> SingleLineEvent:
        """Feed one key and report whether it submitted, cancelled or edited."""
        code = key.code
        if code is Key.ENTER:
            return SingleLineEvent("submit", self.text())
        if code is Key.ESC:
            return SingleLineEvent("cancel")
        if code is Key.CHAR:
            self._chars.insert(self._cursor, key.char)
            self._cursor += 1
        elif code is Key.BACKSPACE:
            if self._cursor > 0:
                self._cursor -= 1
                del self._chars[self._cursor]
        elif code is Key.DELETE:
            if self._cursor < len(self._chars):
                del self._chars[self._cursor]
        elif code is Key.LEFT:
            self._cursor = max(0, self._cursor - 1)
        elif code is Key.RIGHT:
            self._cursor = min(len(self._chars), self._cursor + 1)
        elif code is Key.HOME:
            self._cursor = 0
        elif code is Key.END:
            self._cursor = len(self._chars)
        return SingleLineEvent("edit")

    def text(self) -> str:
        """The current text."""
        return "".join(self._chars)

    def render(self) -> dict:
        """Describe the bordered input box titled with the prompt."""
        return {"title": self.prompt, "text": self.text(), "cursor": self._cursor}