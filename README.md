# etranspile

etranspile is the front end of a small transpiler. It reads an entry source
file and scans the block of tag lines at its top. A tag line is a line that
starts with `#`. It follows `#Use` includes relative to the project directory
and records the program's entry function.

## Installation

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install .[test]
pytest
```

## Command line

```
etranspile path/to/main.src
```

The given file becomes the project's entry file. The directory part of its path
becomes the project directory, which later includes are resolved against.

Scanning stops at the first empty line or at the end of the file. Each tag line
is echoed as `<file> <line>.<tag text>`. For each file it reads, the command
prints `1` if the file could be opened and `0` if it could not. Problems are
reported as `error: <file> Line: <n>`, followed by the message. The command
always exits with status 0.

## Tags

| Tag | Effect |
| --- | --- |
| `#Use <file>` | Reads `<file>` from the project directory in the same way. It is an error without exactly one file name. |
| `#Entry <function>` | Sets the entry function. It is an error outside the entry file, when the entry function is already set, or without exactly one name. |
| `#NoCompile`, `#Lang`, `#SharedLib` | Accepted and recorded. They have no further effect yet. |

Any other non-empty tag is also accepted and recorded. A bare `#` is rejected.
The line numbers of accepted tags are kept in the file's `FileData.tag_lines`.

## Library use

```python
from etranspile.project import Project
from etranspile.reader import read_file
from etranspile.tools import trim_text

project = Project(entry_file="demo/main.src")
reader = read_file("demo/main.src", project)
print(reader.file_exists, reader.data.tag_lines, project.entry_function)
project.print_readers()

trim_text("a/b\\c", "/\\")   # ['a', 'b', 'c']
```

- `etranspile.project.Project` holds the project directory, the entry file, the
  entry function, the readers of the files that exist, and a record of processed
  files (`add_processed_file`, `was_processed`).
- `etranspile.reader.Reader` opens one file and scans its tags.
  `read_file` creates a reader and adds it to the project if the file exists.
- `etranspile.tools` provides `trim_text`, `contains`, and `Log`. `Log` writes
  messages and file-located errors, warnings, suggestions and info. Each kind
  can be hidden with its `hide_*` flag.
- `etranspile.model` holds the data model. `Item`, `Variable`, `Function`,
  `ClassConstructor` and `ClassItem` describe declared items. `FileData` holds
  the state of each file.

## What it does not do

Only the tag block at the top of each file is read. The rest of the file is not
tokenized or parsed, so the item lists in `FileData` stay empty. No output
program is generated.

`etranspile.writer.write_to_file(text, output_location)` currently writes a
fixed sample document to `output_location` and ignores `text`.