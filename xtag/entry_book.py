"""Paged, filterable view over the entries of a directory scan."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from xtag.query import parse as parse_query
from xtag.types import Entry, EntryList, Panic


@dataclass(eq=False)
class EntryData:
    """A scanned entry with its path relative to the scan root and its filename."""

    entry: Entry = field(default_factory=Entry)
    relative_path: str = ""
    filename: str = ""


@dataclass
class EntryDataList:
    path: str = ""
    entries: list[EntryData] = field(default_factory=list)

    @classmethod
    def from_entry_list(cls, entry_list: EntryList) -> EntryDataList:
        """Build a sorted list of entry data; the given list is left untouched."""
        ordered = EntryList(path=entry_list.path, entries=list(entry_list.entries))
        ordered.sort_entries()
        root = Path(entry_list.path)
        entries = [
            EntryData(
                entry=entry,
                relative_path=Path(os.path.relpath(entry.path, root)).as_posix(),
                filename=Path(entry.path).name,
            )
            for entry in ordered.entries
        ]
        return cls(path=root.as_posix(), entries=entries)


@dataclass(frozen=True)
class Page:
    entries: tuple[EntryData, ...] = ()
    offset_from_start: int = 0


@dataclass(frozen=True)
class _EntryView:
    entry_data: EntryData
    index: int


class EntryBook:
    """Splits a list of entries into pages, tracks a selection and applies query filters."""

    MIN_PAGE_LIMIT = 10
    MAX_PAGE_LIMIT = 1000

    def __init__(self, entry_list: EntryDataList | None, page_limit: int = MAX_PAGE_LIMIT) -> None:
        if entry_list is None or not entry_list.entries:
            raise Panic("FileList: EntryDataList is empty")
        self.entry_data_list: EntryDataList = entry_list
        self.page_limit = self.MAX_PAGE_LIMIT
        self.page_number = 0
        self.page_count = 0
        self._path_map: dict[Path, _EntryView] = {}
        self._all: list[EntryData] = []
        self._filtered: list[EntryData] = []
        self._selected: _EntryView | None = None
        self.refresh(entry_list)
        self.repaginate(page_limit)

    @property
    def root(self) -> str:
        return self.entry_data_list.path

    @property
    def selected(self) -> EntryData:
        assert self._selected is not None
        return self._selected.entry_data

    @property
    def filtered(self) -> list[EntryData]:
        """Entries matching the current filter, or all entries when none match or no filter is set."""
        return list(self._filtered or self._all)

    @property
    def current_page(self) -> Page:
        if self.page_number >= self.page_count:
            return Page()
        entries = self._filtered or self._all
        offset = self.page_number * self.page_limit
        return Page(
            entries=tuple(entries[offset : offset + self.page_limit]),
            offset_from_start=offset,
        )

    def refresh(self, entry_list: EntryDataList, new_page_limit: int = -1) -> None:
        """Replace the entries, keeping the selection by path where possible."""
        if entry_list is None or not entry_list.entries:
            raise Panic("FileList: EntryDataList is empty")
        was_selected = self._selected.entry_data.entry.path if self._selected else None

        self._selected = None
        self._path_map.clear()
        self._all = []
        self._filtered = []
        self.entry_data_list = entry_list

        for index, entry_data in enumerate(entry_list.entries):
            self._all.append(entry_data)
            self._path_map[Path(entry_data.entry.path)] = _EntryView(entry_data, index)

        if was_selected is not None:
            self._selected = self._find_entry(was_selected)
        if self._selected is None:
            self._selected = _EntryView(self._all[0], 0)

        if new_page_limit <= 0:
            new_page_limit = self.page_limit
        self.repaginate(new_page_limit)

    def repaginate(self, page_limit: int) -> None:
        self.page_limit = min(max(page_limit, self.MIN_PAGE_LIMIT), self.MAX_PAGE_LIMIT)
        count = len(self._filtered or self._all)
        self.page_count, remainder = divmod(count, self.page_limit)
        if remainder:
            self.page_count += 1
        self.page_number = self._page_number_for(self.selected)

    def select_entry(self, entry_data: EntryData) -> bool:
        target = self._find_entry(entry_data.entry.path)
        if target is None:
            return False
        self._selected = target
        return True

    def set_page_number(self, page_number: int) -> bool:
        if page_number < 0 or page_number >= self.page_count:
            return False
        self.page_number = page_number
        return True

    def filter_by_query(self, query: str) -> None:
        self._filtered = []
        if query:
            expression = parse_query(query)
            self._filtered = [
                data
                for data in self.entry_data_list.entries
                if expression.is_match(data.filename, data.entry.tags)
            ]
        self.page_number = self._page_number_for(self.selected)

    def clear_filter(self) -> None:
        self.filter_by_query("")

    def _find_entry(self, path: str | os.PathLike[str]) -> _EntryView | None:
        return self._path_map.get(Path(path))

    def _page_number_for(self, entry_data: EntryData) -> int:
        entries = self._filtered or self._all
        position = next((i for i, data in enumerate(entries) if data is entry_data), None)
        if position is None:
            return 0
        return (position + 1) // self.page_limit