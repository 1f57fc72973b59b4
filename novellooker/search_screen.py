"""Search screen: keyword input, cross-source results, and picking a hit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Sequence

from .events import Key, KeyEvent, MenuTarget, Transition
from .search_funnel import Hit, Row, SearchHit, StatusLine
from .widgets import SingleLineInput, error_line

INPUT_PROMPT = " 關鍵字（Enter 搜尋、Esc 取消）"
INPUT_HINT = " Enter 開始搜尋  Esc 回主菜單 "
RESULTS_HINT = " j/k 移動  Enter 加入書架  Esc 回主菜單 "

RowSearch = Callable[[str], Awaitable[Sequence[Row]]]


@dataclass(frozen=True)
class AddHit:
    """Destination: put this hit on the shelf, or point at it if already there."""

    hit: SearchHit
    source_name: str


def _is_char(event: KeyEvent, char: str) -> bool:
    return event.code is Key.CHAR and event.char == char


class SearchScreen:
    """Keyword input that turns into a list of hits and status lines."""

    def __init__(self) -> None:
        self.input = SingleLineInput(INPUT_PROMPT)
        self.rows: Optional[List[Row]] = None
        self.selected: Optional[int] = None
        self.progress: Optional[str] = None

    @property
    def in_results(self) -> bool:
        """Whether the screen shows results rather than the input box."""
        return self.rows is not None

    def append_status(self, message: str) -> None:
        """Add a status line to the results; ignored while still in input mode."""
        if self.rows is not None:
            self.rows.append(StatusLine(message))

    async def handle_event(self, event, search: Optional[RowSearch] = None) -> Transition:
        """Handle one event; ``search`` maps a keyword to result rows on submit."""
        if not isinstance(event, KeyEvent):
            return Transition.stay()
        self.progress = None
        if self.rows is None:
            return await self._handle_input(event, search)
        return self._handle_results(event)

    async def _handle_input(self, event: KeyEvent, search: Optional[RowSearch]) -> Transition:
        outcome = self.input.handle_event(event)
        if outcome.kind == "cancel":
            return Transition.to(MenuTarget())
        if outcome.kind != "submit":
            return Transition.stay()
        keyword = outcome.text.strip()
        if not keyword:
            return Transition.stay()
        if search is None:
            raise ValueError("a search function is needed to submit a keyword")
        rows = list(await search(keyword))
        first_hit = next((i for i, row in enumerate(rows) if isinstance(row, Hit)), 0)
        self.selected = first_hit if rows else None
        self.rows = rows
        return Transition.stay()

    def _handle_results(self, event: KeyEvent) -> Transition:
        rows = self.rows if self.rows is not None else []
        if _is_char(event, "j") or event.code is Key.DOWN:
            current = self.selected or 0
            self.selected = min(current + 1, max(len(rows) - 1, 0))
            return Transition.stay()
        if _is_char(event, "k") or event.code is Key.UP:
            current = self.selected or 0
            self.selected = max(current - 1, 0)
            return Transition.stay()
        if event.code is Key.ENTER:
            if self.selected is None or self.selected >= len(rows):
                return Transition.stay()
            row = rows[self.selected]
            if isinstance(row, Hit):
                return Transition.to(AddHit(hit=row.hit, source_name=row.source_name))
            return Transition.stay()
        if event.code is Key.ESC:
            return Transition.to(MenuTarget())
        return Transition.stay()

    def render(self) -> dict:
        """Describe what the screen shows."""
        if self.rows is None:
            if self.progress is not None:
                top = {"title": " 搜尋中 ", "text": self.progress, "fg": "yellow"}
            else:
                top = self.input.render()
            return {"mode": "input", "top": top, "hint": INPUT_HINT}

        items = []
        for row in self.rows:
            if isinstance(row, Hit):
                author = row.hit.author if row.hit.author is not None else "-"
                items.append(
                    {"text": f"{row.hit.name} / {author} [{row.source_name}]", "fg": None, "bg": None}
                )
            else:
                items.append(error_line(row.text))
        return {
            "mode": "results",
            "title": " 搜尋結果 ",
            "items": items,
            "selected": self.selected,
            "hint": RESULTS_HINT,
        }