# filesift

filesift walks a directory tree and lists the files whose names contain any of
a set of keywords. It then copies the files you pick into an output directory
and reports, for each one, whether the copy succeeded.

## Installing

```
pip install .
```

## Command line

```
filesift ROOT [-k KEYWORD ...] [-o OUTPUT] [-s POSITION ...] [--invert]
```

- `ROOT` is searched recursively. Subdirectories that cannot be read are
  passed over.
- With no `-k`, every file is listed. With one or more `-k KEYWORD`, only
  files whose name contains a keyword are listed.
- A file name is split at its dots. The file gets one row for each dot in its
  name, and a name with no dot is not listed. Each row shows, tab separated:
  its position, the part before the dot, the part after it, the size in whole
  kilobytes with a `k` suffix, and the full path.
- With `-o OUTPUT`, the chosen rows are copied into `OUTPUT` as
  `<name>.<type>`, overwriting any file of that name. Each copy is reported as
  `copied` or `failed`, with its source and destination.
- `-s POSITION` chooses a row to copy and may be repeated. Without `-s`, every
  row is chosen. `--invert` copies the rows that were not chosen instead.

The exit status is 0 when every copy succeeded or nothing was copied, 1 when
some copy failed, and 2 for an empty `ROOT` or `OUTPUT` or a position that is
not listed.

Run `filesift --help` for the option summary.

## Keyword matching

Names and keywords are compared as GBK code units. A byte of 0x80 or above
starts a two-byte unit, so a keyword never matches half of a Chinese
character. An empty keyword matches every name.

## Library use

```python
from filesift.session import Session

session = Session()
session.add_keyword("report")
session.query("/data/inbox")
session.select_all()
for result in session.copy_checked("/data/outbox"):
    print(result.status, result.source, result.destination)
```

`Session` holds four things:

- `keywords`: `add_keyword` puts the first keyword first and every later one
  in second place. `remove_keywords(indices)` removes keywords by position and
  raises `IndexError` for a position that does not exist.
- `entries`: the rows found by `query(root)`. A new query replaces them and
  clears the checks. It raises `ValueError` for an empty root.
- Checks: `select_all`, `invert_selection`, `clear_selection`,
  `set_checked(index, checked)` (raises `IndexError` for a bad position) and
  `checked_entries()`.
- `copy_log`: every `CopyResult` so far, newest first. `copy_checked`
  returns only the results of its own run, in the order the files were
  processed. It raises `ValueError` for an empty output directory.

A `CopyResult` has `source`, `destination`, `success`, and a `status` that is
`"copied"` or `"failed"`.

The lower-level pieces can be used on their own:

- `filesift.matching.include(text, keyword)` and
  `filesift.matching.to_code_units(text)`.
- `filesift.scanner.scan_directory(root, keywords)` returns a list of
  `FileEntry` rows. Each row has `name`, `extension`, `size` and `path`, plus
  `size_label()` and `output_name()`.
- `filesift.scanner.split_name(filename)` returns every `(stem, extension)`
  split of a name at a dot, last dot first.

## What it does not do

filesift has no window or folder picker. Folders are given on the command line
or as arguments. It only copies files and never moves or deletes them. Nothing
is kept between runs.