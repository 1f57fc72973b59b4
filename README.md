# novellooker

The screen logic behind a terminal novel reader, kept apart from any drawing
toolkit and any storage. Screens take events and give back a `Transition`;
their `render()` methods return plain dictionaries that describe what to show.

## Modules

### `novellooker.events`

- `Key` – the key codes screens react to (`CHAR`, `ENTER`, `ESC`, `UP`,
  `DOWN`, `LEFT`, `RIGHT`, `HOME`, `END`, `BACKSPACE`, `DELETE`, `TAB`).
- `KeyEvent(code, char=None)` – a key press. A `Key.CHAR` event needs exactly
  one character; any other code takes none. Breaking this raises `ValueError`.
- `MouseEvent(column, row, button="left")` – screens ignore mouse events.
- `Transition` – `Transition.stay()` or `Transition.to(target)`; `is_stay()`
  tells them apart. `Transition.to(None)` raises `ValueError`.
- `MenuTarget(toast=None)` – a target meaning "back to the main menu".

### `novellooker.widgets`

- `SingleLineInput(prompt)` – a one-line text input. `handle_event(key)`
  returns a `SingleLineEvent` whose `kind` is `"submit"` (with the current
  `text`) on Enter, `"cancel"` on Esc, and `"edit"` for anything else.
  Characters are inserted at the cursor; Backspace, Delete, Left, Right,
  Home and End edit and move it. Enter never inserts a newline.
  `text()` gives the current text; `render()` gives the prompt, text and cursor.
- `toast_line(msg, kind)` – a `ToastKind.INFO` line is blue, a
  `ToastKind.ERROR` line is white on red.
- `error_line(text)` – a red one-line message.

### `novellooker.search_funnel`

- `SearchHit`, `SearchSource(name, url, enabled=True)`.
- `assemble_rows(per_source)` turns `(source name, outcome)` pairs into display
  rows, in order. `Hits` gives one `Hit` per hit (none for an empty result);
  `ScrapeError(message)` gives the status line `源 X：錯誤 <message>`;
  `Timeout()` gives `源 X：逾時`; `NotQueried()` gives `源 X 未查（時間預算用盡）`.
- `run_search(sources, keyword, search, deadline=15.0, minimum_budget=2.0)`
  is a coroutine that asks each enabled source in turn through
  `await search(source, keyword)`. Each source gets the remaining time shared
  among the sources left, but never less than `minimum_budget` seconds. A source
  that raises or runs out of time adds a status line and the search goes on;
  once the deadline has passed, every source not yet asked is marked not queried.
  With no enabled sources it returns a single status line asking for sources
  to be imported.

### `novellooker.search_screen`

`SearchScreen` starts with a keyword prompt. `await handle_event(event, search)`
submits a non-blank keyword to `search(keyword)`, which returns the rows (for
example a wrapper around `run_search`), and switches to the results list with
the first hit selected. In the results, `j`/Down and `k`/Up move, Enter on a
hit returns `Transition.to(AddHit(hit, source_name))`, and Esc (in either mode)
returns `Transition.to(MenuTarget())`. `append_status(message)` adds a status
line to the results.

### `novellooker.shelf_actions`

- `ShelfNovel`, `ChapterMeta(index, name, url)`.
- `classify_s_press(selected, novels, get_progress, list_chapters)` decides what
  the source-switch key does for the selected novel: `Stay()` when nothing usable
  is selected, `OpenPicker(...)` carrying the chapter being read (chapter 0 when
  there is no progress), or `ToastBackToShelf("找不到舊章節，無法換源")` when that
  chapter is not in the table of contents.
- `OpenReader(novel_id)` and `ConfirmDelete(novel_id, name, book_url)` are the
  targets the shelf screen hands back.

### `novellooker.shelf_screen`

`ShelfScreen` holds the shelf list, the highlighted row and an optional toast.
`refresh(novels)` loads the list and applies the initial highlight once.
`ShelfScreen.with_highlight(book_url, toast)` gives the toast a 3-second life;
`with_highlight_until(book_url, toast, expires_at)` takes a `time.monotonic()`
expiry. `toast_active()` returns the toast unless it has expired; any key clears
it. `await handle_event(event, get_progress, list_chapters)` moves with
`j`/`k`/arrows, returns `OpenReader` on Enter, `ConfirmDelete` on `d`,
`MenuTarget` on Esc or `q`, and on `s` either an `OpenPicker` or a new
`ShelfScreen` showing the toast.

`novellooker.urls.resolve(base, href)` resolves a link against an absolute page
URL and raises `ValueError` on a bad base or link.

## What the package does not do

There is no command to run, and nothing draws to a terminal: the `render()`
results have to be drawn by the caller. The package has no storage, no book
source scraping, and no main menu, reader, source picker or delete-confirmation
screens. Searching, progress and chapter lookups are functions the caller passes
in, and targets such as `AddHit`, `OpenReader`, `OpenPicker`, `ConfirmDelete`
and `MenuTarget` are for the caller to act on.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from novellooker.search_funnel import Hits, NotQueried, SearchHit, assemble_rows

hit = SearchHit(source_url="http://a", name="Book", author="Author",
                book_url="https://example.com/book")
rows = assemble_rows([("Source A", Hits((hit,))), ("Source B", NotQueried())])
```

`rows` now holds one `Hit` for Source A and one `StatusLine` saying that
Source B was not queried.