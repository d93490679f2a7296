# xtag

Attach tags to files and directories, list them, and scan a directory tree for
tagged entries. Tags are stored as one comma-separated string in a single named
attribute. The default name is `user.xdg.tags`.

Where Python offers `os.getxattr` (Linux), the tags live in an extended
attribute. On other platforms they are written to an alternate data stream
named `<path>:<attribute name>`, which is how NTFS on Windows stores them.

The package needs only the standard library.

## Installation

```
pip install .
```

## Command line

```
xtag [--version] [-a NAME] <command> ...
```

The `-a/--attr-name` option replaces `user.xdg.tags` with a custom attribute name.

| Command                                    | Effect                                                  |
|--------------------------------------------|---------------------------------------------------------|
| `xtag list [PATH]`                         | print the tags of PATH (default `.`)                    |
| `xtag replace PATH [TAGS...]`              | replace the tags of PATH; with no tags they are erased  |
| `xtag append PATH [TAGS...]`               | add tags after the existing ones                        |
| `xtag erase [PATH]`                        | remove the tag attribute of PATH (default `.`)          |
| `xtag scan [-f] [-d DEPTH] PATH [TAGS...]` | list the tagged entries under PATH as a numbered table  |

By default `scan` walks down to depth 10. It lists files only when you pass
`-f/--include-files`. With TAGS, it shows only entries that carry at least one
of those tags, whether the entry holds the tag itself or inherits it. Without
TAGS, it shows only entries that have some tag. The table gives each entry's
path relative to PATH, and directories end in `/`. Tags inherited from a parent
directory get a `*` prefix.

When an operation fails, the command prints a line of the form
`[ErrorType] message` and exits with a code for that kind of error:

| Code | Error             |
|------|-------------------|
| 1    | unknown           |
| 101  | invalid argument  |
| 102  | access denied     |
| 103  | path too long     |
| 104  | not supported     |
| 105  | no data           |
| 106  | too big           |
| 107  | I/O error         |

## Library

```python
from xtag.instance import Instance, ScanInfo
from xtag.formatter import Formatter

inst = Instance()                      # or Instance("user.my.tags")
inst.replace_tags("photos", ["holiday", "2023"])
inst.append_tags("photos", ["beach"])
print(Formatter().join(inst.get_tags("photos").tags))   # holiday, 2023, beach

result = inst.scan_directory(".", ScanInfo(depth=3))
result.sort_entries()                  # directories first, then by path
print(Formatter().format_table(result))

inst.erase_tags("photos")
```

Each module has its own job:

- `xtag.types`: `Entry`, `EntryList`, `ScanTag`, `TagType`, `EntryType`,
  `ErrorType`, `ExitCode`, and the exceptions `XtagError` and `Panic`.
- `xtag.xattr`: `get`, `set` and `remove` read and write one named attribute
  on a path.
- `xtag.instance`: `Instance`, `ScanInfo` and `ScanFilter`, plus
  `serialize_tags` and `deserialize_tags`.
- `xtag.formatter`: `Formatter`, which renders tags, single entries
  (`format_entry`) and scan tables (`format_table`).
- `xtag.query`: the query language described below.
- `xtag.entry_book`: `EntryDataList` and `EntryBook`, which give a paged,
  filterable view over a scan result with a selected entry.

Failures raise `xtag.types.XtagError`. Its `error_type` holds the
`ErrorType`, its `message` holds the formatted text, and its `exit_code`
holds the matching `ExitCode`.

### Queries

`xtag.query.parse` builds an `Expression` from predicates separated by spaces.
Each predicate has the form `[-][filename=|tag=]<pattern>`:

- `f=` and `t=` are accepted as short forms.
- A pattern may be put in double quotes.
- A predicate with no scope tests both the filename and the tags.
- Matching looks for the pattern as a substring and ignores ASCII case.
- A leading `-` inverts the predicate.

An entry matches only if every predicate matches.

```python
from xtag.query import parse
from xtag.types import ScanTag, TagType

expr = parse('t=holiday -f="draft"')
expr.is_match("beach.jpg", [ScanTag("holiday", TagType.PRIMARY)])   # True
```

## What it does not do

The package has no graphical interface. `EntryBook` provides the paging,
selection and query filtering for browsing a scan, but nothing draws it on
screen.