"""Cross-source search funnel: query each source in turn under a time budget."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional, Tuple, Union


@dataclass(frozen=True)
class SearchHit:
    """One book found by a source's search."""

    source_url: str
    name: str
    author: Optional[str]
    book_url: str
    kind: Optional[str] = None
    intro: Optional[str] = None


@dataclass(frozen=True)
class SearchSource:
    """A book source that can be searched."""

    name: str
    url: str
    enabled: bool = True


@dataclass(frozen=True)
class Hit:
    """A result row: a hit from the named source."""

    hit: SearchHit
    source_name: str


@dataclass(frozen=True)
class StatusLine:
    """A result row: a status message (error, timeout, not queried)."""

    text: str


@dataclass(frozen=True)
class Hits:
    """The source answered; zero or more hits."""

    hits: Tuple[SearchHit, ...] = ()


@dataclass(frozen=True)
class ScrapeError:
    """The source's search failed with this message."""

    message: str


@dataclass(frozen=True)
class Timeout:
    """The source did not answer within its budget."""


@dataclass(frozen=True)
class NotQueried:
    """The overall deadline passed before this source's turn."""


Outcome = Union[Hits, ScrapeError, Timeout, NotQueried]
Row = Union[Hit, StatusLine]
SearchFn = Callable[[SearchSource, str], Awaitable[List[SearchHit]]]

NO_SOURCES_MESSAGE = "（尚無 enabled 書源、請先 source import）"


def assemble_rows(per_source: Iterable[Tuple[str, Outcome]]) -> List[Row]:
    """Flatten (source name, outcome) pairs into display rows, in order."""
    rows: List[Row] = []
    for name, outcome in per_source:
        if isinstance(outcome, Hits):
            rows.extend(Hit(hit=hit, source_name=name) for hit in outcome.hits)
        elif isinstance(outcome, ScrapeError):
            rows.append(StatusLine(f"源 {name}：錯誤 {outcome.message}"))
        elif isinstance(outcome, Timeout):
            rows.append(StatusLine(f"源 {name}：逾時"))
        elif isinstance(outcome, NotQueried):
            rows.append(StatusLine(f"源 {name} 未查（時間預算用盡）"))
        else:
            raise TypeError(f"unknown search outcome: {outcome!r}")
    return rows


async def run_search(
    sources: Iterable[SearchSource],
    keyword: str,
    search: SearchFn,
    deadline: float = 15.0,
    minimum_budget: float = 2.0,
) -> List[Row]:
    """Query enabled sources one by one and return the display rows.

    The whole funnel has ``deadline`` seconds; each source gets the remaining
    time shared among the sources left, but never less than ``minimum_budget``.
    A failing or slow source does not stop the others.
    """
    enabled = [s for s in sources if s.enabled]
    if not enabled:
        return [StatusLine(NO_SOURCES_MESSAGE)]

    end = time.monotonic() + deadline
    total = len(enabled)
    per_source: List[Tuple[str, Outcome]] = []

    for position, source in enumerate(enabled):
        now = time.monotonic()
        if now >= end:
            per_source.append((source.name, NotQueried()))
            continue
        remaining = end - now
        budget = max(remaining / max(total - position, 1), minimum_budget)
        try:
            hits = await asyncio.wait_for(search(source, keyword), timeout=budget)
        except asyncio.TimeoutError:
            outcome: Outcome = Timeout()
        except Exception as exc:  # any scrape failure is reported, not raised
            outcome = ScrapeError(str(exc))
        else:
            outcome = Hits(tuple(hits))
        per_source.append((source.name, outcome))

    return assemble_rows(per_source)