from pathlib import Path

from xtag.types import (
    Entry,
    EntryList,
    EntryType,
    ErrorType,
    ExitCode,
    Panic,
    ScanTag,
    TagType,
    XtagError,
    format_error,
    repoint_through,
    to_exit_code,
)


def test_format_error_uses_type_name():
    assert format_error(ErrorType.IO_ERROR, "boom") == "[IoError] boom"
    assert format_error(ErrorType.NO_DATA, "x").startswith("[NoData] ")


def test_xtag_error_carries_type_and_formatted_message():
    err = XtagError(ErrorType.INVALID_ARGUMENT, "bad path")
    assert err.error_type is ErrorType.INVALID_ARGUMENT
    assert err.message == "[InvalidArgument] bad path"
    assert str(err) == err.message
    assert err.exit_code == ExitCode.INVALID_ARGUMENT


def test_exit_codes_follow_error_types():
    assert to_exit_code(ErrorType.UNKNOWN) == ExitCode.FAILURE
    assert to_exit_code(ErrorType.IO_ERROR) == 107
    assert to_exit_code(ErrorType.INVALID_ARGUMENT) == 101
    names = {t.name for t in ErrorType if t is not ErrorType.UNKNOWN}
    assert all(to_exit_code(t).name == t.name for t in ErrorType if t.name in names)


def test_panic_is_runtime_error():
    err = Panic("empty")
    assert isinstance(err, RuntimeError)
    assert str(err) == "empty"


def test_tag_type_flags_combine():
    combined = TagType(1) | TagType(2)
    assert combined & TagType.PRIMARY == TagType.PRIMARY
    assert combined & TagType.INHERITED == TagType.INHERITED
    assert combined & TagType.UNTAGGED == TagType.NONE


def test_scan_tag_equality_and_default_type():
    assert ScanTag("foo") == ScanTag("foo", TagType.NONE)
    assert ScanTag("foo", TagType.PRIMARY) != ScanTag("foo", TagType.INHERITED)


def test_sort_entries_puts_directories_first_then_by_path():
    entries = [
        Entry(EntryType.FILE, Path("/r/a.txt")),
        Entry(EntryType.DIRECTORY, Path("/r/z")),
        Entry(EntryType.FILE, Path("/r/b/c.txt")),
        Entry(EntryType.DIRECTORY, Path("/r")),
        Entry(EntryType.DIRECTORY, Path("/r/b")),
    ]
    listing = EntryList(Path("/r"), list(entries))
    listing.sort_entries()
    types = [e.type for e in listing.entries]
    dirs = [e.path for e in listing.entries if e.type == EntryType.DIRECTORY]
    files = [e.path for e in listing.entries if e.type == EntryType.FILE]
    assert types == [EntryType.DIRECTORY] * 3 + [EntryType.FILE] * 2
    assert dirs == sorted(dirs)
    assert files == sorted(files)
    assert len(listing.entries) == len(entries)


def test_repoint_through_returns_stored_instance():
    storage: dict[str, str] = {}
    first = "".join(["f", "oo"])
    second = "".join(["fo", "o"])
    assert repoint_through(storage, first) is first
    assert repoint_through(storage, second) is first
    assert list(storage) == ["foo"]