"""Human readable rendering of tags, entries and scan results."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from xtag.types import Entry, EntryList, EntryType, ScanTag, TagType


def _relative(path: Path, root: str | os.PathLike[str]) -> str:
    return Path(os.path.relpath(path, root)).as_posix()


def _with_dir_slash(text: str, entry: Entry) -> str:
    if entry.type == EntryType.DIRECTORY and not text.endswith("/"):
        return text + "/"
    return text


@dataclass
class Formatter:
    inherited_prefix: str = "*"
    delimiter: str = ", "
    truncator: str = "..."

    def join_item(self, out: str, item: str) -> str:
        """Return ``out`` with ``item`` appended after a delimiter; empty items are skipped."""
        if not item:
            return out
        return f"{out}{self.delimiter}{item}" if out else item

    def format_tag(self, tag: ScanTag) -> str:
        if tag.type == TagType.PRIMARY or not self.inherited_prefix:
            return tag.value
        return f"{self.inherited_prefix}{tag.value}"

    def join(self, tags: Iterable[ScanTag]) -> str:
        out = ""
        for tag in tags:
            out = self.join_item(out, self.format_tag(tag))
        return out

    def format_entry(self, entry: Entry, root: str | os.PathLike[str] | None = None) -> str:
        """Render an entry as its path followed by its tags in brackets."""
        if root is None or not os.fspath(root):
            path = Path(entry.path).as_posix()
        else:
            path = _relative(entry.path, root)
        text = _with_dir_slash(path, entry)
        tags = self.join(entry.tags)
        return f"{text} [{tags}]" if tags else text

    def format_table(self, entry_list: EntryList) -> str:
        """Render a numbered table of entries relative to the scanned root."""
        if not entry_list.entries:
            return ""
        headers = ("#", "relative path", "tags")
        rows = [
            (
                str(number),
                _with_dir_slash(_relative(entry.path, entry_list.path), entry),
                self.join(entry.tags),
            )
            for number, entry in enumerate(entry_list.entries, start=1)
        ]
        widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

        def render(cells: Sequence[str]) -> str:
            number, *rest = cells
            parts = [number.rjust(widths[0])]
            parts.extend(cell.ljust(width) for cell, width in zip(rest, widths[1:]))
            return " | ".join(parts).rstrip()

        separator = "-+-".join("-" * width for width in widths)
        return "\n".join([render(headers), separator, *(render(row) for row in rows)])