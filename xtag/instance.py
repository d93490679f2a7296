"""Tagging of filesystem entries through a named extended attribute."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from xtag import xattr
from xtag.types import (
    Entry,
    EntryList,
    EntryType,
    ErrorType,
    ScanTag,
    TagType,
    XtagError,
    repoint_through,
)

TAG_DELIMITER = ","
DEFAULT_ATTRIBUTE_NAME = "user.xdg.tags"


def serialize_tags(tags: Iterable[str]) -> str:
    """Join tags into their stored form, skipping empty ones."""
    return TAG_DELIMITER.join(tag for tag in tags if tag)


def deserialize_tags(serialized: str, storage: dict[str, str]) -> list[str]:
    """Split a stored tag string, interning every tag through ``storage``."""
    if not serialized:
        return []
    return [repoint_through(storage, tag) for tag in serialized.split(TAG_DELIMITER)]


@dataclass
class ScanFilter:
    """Which entries a directory scan reports."""

    tags: Sequence[str] = field(default_factory=list)
    tag_type: TagType = TagType.PRIMARY | TagType.INHERITED
    include_files: bool = True


@dataclass
class ScanInfo:
    filter: ScanFilter = field(default_factory=ScanFilter)
    depth: int = 5


def _should_include(scan_tags: Sequence[ScanTag], scan_filter: ScanFilter) -> bool:
    if not scan_filter.tags:
        return bool(scan_filter.tag_type & TagType.UNTAGGED) or bool(scan_tags)
    return any(tag.value in scan_filter.tags for tag in scan_tags)


def _to_entry_type(path: Path) -> EntryType:
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.is_file():
        return EntryType.FILE
    return EntryType.NONE


class Instance:
    """Reads, writes and scans tags stored under one attribute name."""

    def __init__(self, custom_attribute_name: str = "") -> None:
        self.custom_attribute_name = custom_attribute_name
        self._tag_storage: dict[str, str] = {}

    @property
    def attribute_name(self) -> str:
        return self.custom_attribute_name or DEFAULT_ATTRIBUTE_NAME

    @property
    def tag_storage(self) -> dict[str, str]:
        return self._tag_storage

    def clear_tag_storage(self) -> None:
        self._tag_storage.clear()

    def get_tags(self, path: str | os.PathLike[str]) -> Entry:
        """Return the entry at ``path`` with its own tags."""
        serialized = self._get_serialized(path)
        resolved = Path(path).resolve(strict=True)
        tags = [
            ScanTag(tag, TagType.PRIMARY)
            for tag in deserialize_tags(serialized, self._tag_storage)
        ]
        return Entry(type=_to_entry_type(resolved), path=resolved, tags=tags)

    def replace_tags(self, path: str | os.PathLike[str], tags: Sequence[str]) -> None:
        """Overwrite the tags on ``path``; an empty list erases them."""
        if not tags:
            self.erase_tags(path)
            return
        xattr.set(os.fspath(path), self.attribute_name, serialize_tags(tags))

    def append_tags(self, path: str | os.PathLike[str], tags: Sequence[str]) -> None:
        """Add tags after those already on ``path``."""
        existing = self._get_serialized(path)
        xattr.set(os.fspath(path), self.attribute_name, serialize_tags([existing, *tags]))

    def erase_tags(self, path: str | os.PathLike[str]) -> None:
        xattr.remove(os.fspath(path), self.attribute_name)

    def scan_directory(
        self, directory: str | os.PathLike[str], info: ScanInfo | None = None
    ) -> EntryList:
        """Walk ``directory`` and collect entries with own and inherited tags."""
        info = info if info is not None else ScanInfo()
        root = Path(directory)
        if not root.is_dir():
            raise XtagError(ErrorType.INVALID_ARGUMENT, f"not a directory: '{root.as_posix()}'")
        result = EntryList(path=root.resolve())
        self._scan_dir(result, result.path, [], 0, info)
        return result

    def _get_serialized(self, path: str | os.PathLike[str]) -> str:
        try:
            return xattr.get(os.fspath(path), self.attribute_name)
        except XtagError as err:
            if err.error_type is ErrorType.NO_DATA:
                return ""
            raise

    def _combined_tags(self, path: Path, inherited: Sequence[ScanTag]) -> list[ScanTag]:
        try:
            tags = list(self.get_tags(path).tags)
        except XtagError:
            tags = []
        tags.extend(ScanTag(tag.value, TagType.INHERITED) for tag in inherited)
        return tags

    def _scan_dir(
        self,
        out: EntryList,
        path: Path,
        parent_tags: Sequence[ScanTag],
        depth: int,
        info: ScanInfo,
    ) -> None:
        if depth > info.depth:
            return
        tags = self._combined_tags(path, parent_tags)
        if _should_include(tags, info.filter):
            out.entries.append(Entry(type=EntryType.DIRECTORY, path=path, tags=tags))
        with os.scandir(path) as iterator:
            children = list(iterator)
        for child in children:
            if child.is_dir():
                self._scan_dir(out, Path(child.path), tags, depth + 1, info)
            elif child.is_file():
                self._scan_file(out, Path(child.path), tags, info)

    def _scan_file(
        self, out: EntryList, path: Path, inherited: Sequence[ScanTag], info: ScanInfo
    ) -> None:
        if not info.filter.include_files:
            return
        resolved = path.resolve()
        tags = self._combined_tags(resolved, inherited)
        if _should_include(tags, info.filter):
            out.entries.append(Entry(type=EntryType.FILE, path=resolved, tags=tags))