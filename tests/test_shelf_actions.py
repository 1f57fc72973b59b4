import pytest

from novellooker.shelf_actions import (
    ChapterMeta,
    ConfirmDelete,
    OpenPicker,
    OpenReader,
    ShelfNovel,
    Stay,
    ToastBackToShelf,
    classify_s_press,
)


def _novel(name="天龍八部", author="金庸", novel_id=7):
    return ShelfNovel(
        id=novel_id,
        source_url="https://src.example/",
        book_url="https://book.example/build01",
        name=name,
        author=author,
    )


def _chapters(*names):
    return [ChapterMeta(index=i, name=n, url=f"u/{i}") for i, n in enumerate(names)]


def _progress(value):
    return lambda novel_id: value


def _toc(chapters):
    return lambda novel_id: chapters


def test_build_opens_picker_with_anchor():
    chapters = _chapters("第一章", "第二章", "出關", "第四章")
    action = classify_s_press(0, [_novel()], _progress(2), _toc(chapters))
    assert action == OpenPicker(
        novel_id=7,
        book_name="天龍八部",
        author="金庸",
        old_chapter_idx=2,
        old_chapter_name="出關",
    )


def test_empty_shelf_stays():
    action = classify_s_press(None, [], _progress(0), _toc([]))
    assert action == Stay()


def test_chapter_not_found_toasts():
    chapters = _chapters("第一章", "第二章", "第三章")
    action = classify_s_press(0, [_novel("壞資料書", "無名")], _progress(99), _toc(chapters))
    assert isinstance(action, ToastBackToShelf)
    assert "找不到舊章節" in action.toast


def test_no_progress_uses_first_chapter():
    chapters = _chapters("第一章", "第二章")
    action = classify_s_press(0, [_novel()], _progress(None), _toc(chapters))
    assert isinstance(action, OpenPicker)
    assert action.old_chapter_idx == 0
    assert action.old_chapter_name == "第一章"


def test_failing_progress_lookup_counts_as_zero():
    def broken(novel_id):
        raise RuntimeError("db gone")

    action = classify_s_press(0, [_novel()], broken, _toc(_chapters("開篇")))
    assert isinstance(action, OpenPicker)
    assert action.old_chapter_name == "開篇"


def test_failing_chapter_lookup_toasts():
    def broken(novel_id):
        raise RuntimeError("db gone")

    action = classify_s_press(0, [_novel()], _progress(0), broken)
    assert isinstance(action, ToastBackToShelf)
    assert "找不到舊章節" in action.toast


def test_no_chapters_toasts():
    action = classify_s_press(0, [_novel()], _progress(None), _toc([]))
    assert isinstance(action, ToastBackToShelf)
    assert "找不到舊章節" in action.toast


def test_novel_without_id_stays():
    action = classify_s_press(0, [_novel(novel_id=None)], _progress(0), _toc(_chapters("a")))
    assert action == Stay()


@pytest.mark.parametrize("selected", [1, 5, -1])
def test_selection_out_of_range_stays(selected):
    action = classify_s_press(selected, [_novel()], _progress(0), _toc(_chapters("a")))
    assert action == Stay()


def test_missing_author_becomes_empty_string():
    action = classify_s_press(0, [_novel(author=None)], _progress(0), _toc(_chapters("a")))
    assert isinstance(action, OpenPicker)
    assert action.author == ""


def test_lookups_receive_selected_novel_id():
    seen = []

    def progress(novel_id):
        seen.append(("progress", novel_id))
        return 0

    def toc(novel_id):
        seen.append(("toc", novel_id))
        return _chapters("x")

    novels = [_novel(novel_id=1), _novel(name="第二本", novel_id=2)]
    action = classify_s_press(1, novels, progress, toc)
    assert seen == [("progress", 2), ("toc", 2)]
    assert action.book_name == "第二本"


def test_destination_records_hold_values():
    assert OpenReader(3).novel_id == 3
    delete = ConfirmDelete(novel_id=4, name="書", book_url="https://book.example/4")
    assert (delete.novel_id, delete.name, delete.book_url) == (4, "書", "https://book.example/4")