from pathlib import Path

import pytest

from xtag.entry_book import EntryBook, EntryData, EntryDataList, Page
from xtag.types import Entry, EntryList, EntryType, Panic, ScanTag, TagType

ROOT = Path("/data")


def make_entry_list(file_count):
    entries = [
        Entry(
            type=EntryType.FILE,
            path=ROOT / f"f{i:02d}",
            tags=[ScanTag("red", TagType.PRIMARY)] if i % 2 == 0 else [],
        )
        for i in range(file_count)
    ]
    entries.append(Entry(type=EntryType.DIRECTORY, path=ROOT, tags=[]))
    return EntryList(path=ROOT, entries=entries)


def make_book(file_count=24, page_limit=EntryBook.MAX_PAGE_LIMIT):
    return EntryBook(EntryDataList.from_entry_list(make_entry_list(file_count)), page_limit)


def test_from_entry_list_sorts_and_fills_paths():
    entry_list = make_entry_list(3)
    original = list(entry_list.entries)
    data = EntryDataList.from_entry_list(entry_list)
    assert entry_list.entries == original
    assert data.path == ROOT.as_posix()
    assert data.entries[0].entry.type == EntryType.DIRECTORY
    assert data.entries[0].relative_path == "."
    assert [d.relative_path for d in data.entries[1:]] == ["f00", "f01", "f02"]
    assert [d.filename for d in data.entries[1:]] == ["f00", "f01", "f02"]


def test_empty_list_panics():
    with pytest.raises(Panic):
        EntryBook(EntryDataList(path="/data", entries=[]))
    with pytest.raises(Panic):
        EntryBook(None)


def test_page_limit_is_clamped():
    assert make_book(page_limit=1).page_limit == EntryBook.MIN_PAGE_LIMIT
    assert make_book(page_limit=5000).page_limit == EntryBook.MAX_PAGE_LIMIT
    assert make_book(page_limit=20).page_limit == 20


def test_initial_selection_is_first_entry():
    book = make_book()
    assert book.selected is book.entry_data_list.entries[0]
    assert book.root == ROOT.as_posix()


def test_pages_cover_all_entries():
    book = make_book(24, 10)
    seen = []
    for number in range(book.page_count):
        assert book.set_page_number(number)
        page = book.current_page
        assert page.offset_from_start == number * book.page_limit
        seen.extend(page.entries)
    assert seen == book.filtered
    assert book.page_count == 3


def test_set_page_number_out_of_range():
    book = make_book(24, 10)
    assert not book.set_page_number(-1)
    assert not book.set_page_number(book.page_count)
    assert book.page_number == 0


def test_current_page_past_end_is_empty():
    book = make_book(24, 10)
    book.page_number = book.page_count
    assert book.current_page == Page()


def test_select_entry():
    book = make_book()
    target = book.entry_data_list.entries[3]
    assert book.select_entry(target)
    assert book.selected is target

    stranger = EntryData(entry=Entry(type=EntryType.FILE, path=ROOT / "missing"))
    assert not book.select_entry(stranger)
    assert book.selected is target


def test_refresh_keeps_selection_by_path():
    book = make_book(5)
    book.select_entry(book.entry_data_list.entries[2])
    selected_path = book.selected.entry.path

    book.refresh(EntryDataList.from_entry_list(make_entry_list(8)))
    assert book.selected.entry.path == selected_path
    assert len(book.filtered) == len(book.entry_data_list.entries)


def test_refresh_falls_back_to_first_entry():
    book = make_book(8)
    book.select_entry(book.entry_data_list.entries[-1])
    book.refresh(EntryDataList.from_entry_list(make_entry_list(2)))
    assert book.selected is book.entry_data_list.entries[0]


def test_refresh_keeps_page_limit_and_clears_filter():
    book = make_book(24, 20)
    book.filter_by_query("red")
    book.refresh(EntryDataList.from_entry_list(make_entry_list(24)))
    assert book.page_limit == 20
    assert book.filtered == book.entry_data_list.entries


def test_refresh_with_new_page_limit():
    book = make_book(24, 20)
    book.refresh(EntryDataList.from_entry_list(make_entry_list(24)), 50)
    assert book.page_limit == 50


def test_filter_by_tag_and_clear():
    book = make_book(6)
    book.filter_by_query("t=red")
    filtered = book.filtered
    assert filtered
    assert all(any(tag.value == "red" for tag in d.entry.tags) for d in filtered)
    assert len(filtered) < len(book.entry_data_list.entries)

    book.clear_filter()
    assert book.filtered == book.entry_data_list.entries


def test_filter_by_filename():
    book = make_book(6)
    book.filter_by_query("f=f01")
    assert [d.filename for d in book.filtered] == ["f01"]


def test_filter_without_matches_shows_everything():
    book = make_book(6)
    book.filter_by_query("nothing-matches-this")
    assert book.filtered == book.entry_data_list.entries
    assert book.page_number == 0