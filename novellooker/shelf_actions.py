"""Shelf data and the decision made when 's' (switch source) is pressed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

CHAPTER_NOT_FOUND_TOAST = "找不到舊章節，無法換源"

ProgressLookup = Callable[[int], Optional[int]]
ChapterLookup = Callable[[int], Iterable["ChapterMeta"]]


@dataclass(frozen=True)
class ShelfNovel:
    """A novel on the shelf."""

    source_url: str
    book_url: str
    name: str
    id: Optional[int] = None
    author: Optional[str] = None
    intro: Optional[str] = None
    cover_url: Optional[str] = None
    toc_url: Optional[str] = None


@dataclass(frozen=True)
class ChapterMeta:
    """One entry of a novel's table of contents."""

    index: int
    name: str
    url: str


@dataclass(frozen=True)
class Stay:
    """Nothing to do: no selection, or the selected novel has no id."""


@dataclass(frozen=True)
class OpenPicker:
    """Open the source picker anchored on the chapter being read."""

    novel_id: int
    book_name: str
    author: str
    old_chapter_idx: int
    old_chapter_name: str


@dataclass(frozen=True)
class ToastBackToShelf:
    """Stay on the shelf and show this message."""

    toast: str


@dataclass(frozen=True)
class OpenReader:
    """Destination: read the novel with this id."""

    novel_id: int


@dataclass(frozen=True)
class ConfirmDelete:
    """Destination: ask before removing this novel from the shelf."""

    novel_id: int
    name: str
    book_url: str


ShelfSAction = Union[Stay, OpenPicker, ToastBackToShelf]


def classify_s_press(
    selected: Optional[int],
    novels: Sequence[ShelfNovel],
    get_progress: ProgressLookup,
    list_chapters: ChapterLookup,
) -> ShelfSAction:
    """Decide what pressing 's' on the shelf does.

    ``get_progress(novel_id)`` gives the chapter index being read, or None;
    a missing or failing lookup counts as chapter 0. ``list_chapters(novel_id)``
    gives the table of contents; if the chapter being read is not in it, or
    the lookup fails, the result is a toast back to the shelf.
    """
    if selected is None or not 0 <= selected < len(novels):
        return Stay()
    novel = novels[selected]
    if novel.id is None:
        return Stay()
    novel_id = novel.id

    try:
        progress = get_progress(novel_id)
    except Exception:  # an unreadable progress row means "start of book"
        progress = None
    chapter_idx = progress if progress is not None else 0

    try:
        chapters = list(list_chapters(novel_id))
    except Exception:  # treated like a missing chapter
        chapters = []
    chapter_name = next((c.name for c in chapters if c.index == chapter_idx), None)

    if chapter_name is None:
        return ToastBackToShelf(CHAPTER_NOT_FOUND_TOAST)
    return OpenPicker(
        novel_id=novel_id,
        book_name=novel.name,
        author=novel.author or "",
        old_chapter_idx=chapter_idx,
        old_chapter_name=chapter_name,
    )