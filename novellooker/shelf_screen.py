"""Shelf screen: list the novels on the shelf and act on the highlighted one."""

from __future__ import annotations

import time
from typing import Iterable, List, Optional

from .events import Key, KeyEvent, MenuTarget, Transition
from .shelf_actions import (
    ChapterLookup,
    ConfirmDelete,
    OpenPicker,
    OpenReader,
    ProgressLookup,
    ShelfNovel,
    Stay,
    ToastBackToShelf,
    classify_s_press,
)

TOAST_TTL = 3.0
EMPTY_SHELF_TEXT = "（書架空、回主菜單按 q）"
SHELF_TITLE = " 書架 "
SHELF_HINT = " j/k 移動  Enter 閱讀  s 換源  d 刪除  Esc/q 回主菜單 "


def _is_char(event: KeyEvent, char: str) -> bool:
    return event.code is Key.CHAR and event.char == char


def _no_progress(novel_id: int) -> Optional[int]:
    return None


def _no_chapters(novel_id: int) -> Iterable:
    return ()


class ShelfScreen:
    """The list of shelved novels with a highlighted row and an optional toast."""

    def __init__(
        self,
        highlight_book_url: Optional[str] = None,
        toast: Optional[str] = None,
        toast_expires_at: Optional[float] = None,
    ) -> None:
        self.novels: List[ShelfNovel] = []
        self.selected: Optional[int] = None
        self.initial_highlight_book_url = highlight_book_url
        self.toast = toast
        self.toast_expires_at = toast_expires_at
        self.needs_refresh = True

    @classmethod
    def with_highlight(
        cls, highlight_book_url: Optional[str], toast: Optional[str]
    ) -> "ShelfScreen":
        """Preselect ``highlight_book_url`` on refresh; a toast expires after TOAST_TTL."""
        expires = time.monotonic() + TOAST_TTL if toast is not None else None
        return cls(highlight_book_url, toast, expires)

    @classmethod
    def with_highlight_until(
        cls,
        highlight_book_url: Optional[str],
        toast: Optional[str],
        expires_at: float,
    ) -> "ShelfScreen":
        """Like :meth:`with_highlight`, with an explicit monotonic expiry time."""
        return cls(highlight_book_url, toast, expires_at)

    def toast_active(self) -> Optional[str]:
        """The toast to show, or None when there is none or it has expired."""
        if self.toast is None:
            return None
        if self.toast_expires_at is not None and time.monotonic() >= self.toast_expires_at:
            return None
        return self.toast

    def refresh(self, novels: Iterable[ShelfNovel]) -> None:
        """Load the shelf contents; the initial highlight is applied only once."""
        self.novels = list(novels)
        url = self.initial_highlight_book_url
        self.initial_highlight_book_url = None
        position = 0
        if url is not None:
            position = next(
                (i for i, novel in enumerate(self.novels) if novel.book_url == url), 0
            )
        if self.novels:
            self.selected = position
        self.needs_refresh = False

    def _selected_novel(self) -> Optional[ShelfNovel]:
        if self.selected is None or not 0 <= self.selected < len(self.novels):
            return None
        return self.novels[self.selected]

    async def handle_event(
        self,
        event,
        get_progress: Optional[ProgressLookup] = None,
        list_chapters: Optional[ChapterLookup] = None,
    ) -> Transition:
        """Handle one event; the lookups resolve the reading position for 's'."""
        if not isinstance(event, KeyEvent):
            return Transition.stay()
        self.toast = None
        self.toast_expires_at = None

        if _is_char(event, "j") or event.code is Key.DOWN:
            current = self.selected or 0
            self.selected = min(current + 1, max(len(self.novels) - 1, 0))
            return Transition.stay()
        if _is_char(event, "k") or event.code is Key.UP:
            current = self.selected or 0
            self.selected = max(current - 1, 0)
            return Transition.stay()
        if event.code is Key.ENTER:
            novel = self._selected_novel()
            if novel is None or novel.id is None:
                return Transition.stay()
            return Transition.to(OpenReader(novel.id))
        if _is_char(event, "s"):
            action = classify_s_press(
                self.selected,
                self.novels,
                get_progress or _no_progress,
                list_chapters or _no_chapters,
            )
            if isinstance(action, Stay):
                return Transition.stay()
            if isinstance(action, ToastBackToShelf):
                return Transition.to(
                    ShelfScreen.with_highlight_until(
                        None, action.toast, time.monotonic() + TOAST_TTL
                    )
                )
            if isinstance(action, OpenPicker):
                return Transition.to(action)
            raise TypeError(f"unknown shelf action: {action!r}")
        if _is_char(event, "d"):
            novel = self._selected_novel()
            if novel is None or novel.id is None:
                return Transition.stay()
            return Transition.to(ConfirmDelete(novel.id, novel.name, novel.book_url))
        if event.code is Key.ESC or _is_char(event, "q"):
            return Transition.to(MenuTarget())
        return Transition.stay()

    def render(self) -> dict:
        """Describe what the screen shows."""
        toast = self.toast_active()
        view = {
            "toast": {"text": toast, "fg": "cyan"} if toast is not None else None,
            "hint": SHELF_HINT,
        }
        if not self.novels:
            view["empty"] = EMPTY_SHELF_TEXT
            view["items"] = []
            view["selected"] = None
            return view
        view["title"] = SHELF_TITLE
        view["items"] = [
            f"#{novel.id if novel.id is not None else 0} {novel.name} / "
            f"{novel.author if novel.author is not None else '-'} [{novel.source_url}]"
            for novel in self.novels
        ]
        view["selected"] = self.selected
        return view