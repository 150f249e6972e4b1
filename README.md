# rxrenamer

Rename files and directories in bulk with a regular expression, or
transliterate their names to plain ASCII.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Usage

By default nothing is changed on disk: `rxrenamer` prints each planned
rename as `source -> target` (a dry run). Add `--force` (`-f`) to rename
for real.

```
rxrenamer [OPTIONS] EXPRESSION REPLACEMENT PATH [PATH ...]
```

Only the file name (the last part of each path) is matched and rewritten;
the parent directory stays the same.

Replace the first match of `old` with `new` in the names of the given files:

```
rxrenamer old new ./old_notes.txt ./old_todo.txt
```

`EXPRESSION` is a Python regular expression. In `REPLACEMENT`, `$1`,
`$name` and `${name}` insert a numbered or named group, and `$$` inserts a
literal `$`:

```
rxrenamer -f -r '(\w+)\.jpeg' '$1.jpg' photos/
```

Renames are put in a safe order before they run: deeper paths first, and
within a level, renames into names that are free before renames into names
that are themselves about to be renamed away. The run stops with an error
if two paths would end up with the same name, if a target already exists
and is not going to be moved out of the way, or if no safe order exists.

### Options

- `-n`, `--dry-run`: only show what would be done (the default)
- `-f`, `--force`: make the changes on disk
- `-b`, `--backup`: with `--force`, copy each file to `"<name> .rx"`
  (or `"<name> .rx.1"`, `.2`, … if that exists) before renaming it
- `-s`, `--silent`: do not print operations or errors
- `--color always|auto|never`: colour mode (default `auto`: colour only
  when standard output is a terminal). In colour the new part of each
  target name is highlighted.
- `--dump` / `--no-dump`: write, or do not write, the operations to
  `rx-<date>_<time>.json` in the current directory. A dump is written by
  default with `--force`, and only on request in a dry run.
- `-i`, `--interactive`: review the renames in an editor before they run
- `-l`, `--replace-limit LIMIT`: how many matches to replace in each name;
  `0` replaces all (default `1`)
- `-r`, `--recursive`: walk into directories; the given paths themselves
  are included, and entries are visited in name order
- `-d`, `--max-depth LEVEL`: limit the depth of a recursive walk
  (needs `-r`)
- `-x`, `--hidden`: include names starting with `.` in a recursive walk
  (needs `-r`)
- `-D`, `--include-dirs`: accepted, see below
- `-V`, `--version`: print the version

### Replaying and undoing

A forced run leaves a dump file behind. Replay it, or undo it (the
operations are reversed and run in reverse order):

```
rxrenamer from-file rx-2024-01-01_120000.json -f
rxrenamer from-file --undo rx-2024-01-01_120000.json -f
```

`from-file` takes the common options (`-n`, `-f`, `-b`, `-s`, `--color`,
`--dump`, `--no-dump`, `-i`) and `-u`/`--undo`.

### ASCII names

Replace non-ASCII characters in file names with their ASCII forms:

```
rxrenamer to-ascii -f -r music/
```

`to-ascii` takes the common options and the path options (`-r`, `-d`,
`-x`, `-D`).

### Interactive mode

With `--interactive` the planned renames are written to a temporary JSON
file as a list of `{"old_name", "new_name", "status"}` entries and opened
in `vim` (`notepad` on Windows). Set `"status": true` on each entry you
want applied, then save and close the editor. The accepted entries are
renamed on disk straight away, whether or not `--force` was given;
`--backup` does not apply here.

### Exit status

`0` on success, `1` on a bad expression or any failure while planning or
renaming. After a successful run `File(s) renamed successfully!` is
printed, also in a dry run and with `--silent`.

## Library use

The pieces can be used directly:

- `rxrenamer.config.Config.from_args(argv)` builds a configuration.
- `rxrenamer.renamer.Renamer(config).process()` returns the ordered list
  of `rxrenamer.dumpfile.Operation(source, target)`, and
  `Renamer.batch_rename(operations)` performs them.
- `rxrenamer.solver.solve_rename_order(rename_map)` orders a
  target-to-source mapping; `revert_operations(operations)` inverts a list.
- `rxrenamer.dumpfile.dump_to_file` / `read_from_file` write and read dump
  files.
- `rxrenamer.text_diff.calculate_text_diff(old, new)` gives the
  character-level difference between two names as runs of removed,
  unchanged and new text.
- Failures are raised as `rxrenamer.errors.RenameError`, whose `kind` is an
  `ErrorKind`.

## What it does not do

- `-D`/`--include-dirs` is accepted but has no effect: matching
  directories are renamed just like files, with or without it.
- There is no choice of editor for interactive mode beyond the platform
  default.