# minitools

This package holds four small command-line tools:

- `hello-world` prints a greeting.
- `unit-converter` converts temperature, length and weight values.
- `file-organizer` sorts files into folders by extension or by modification date.
- `todo` keeps a simple task list on disk.

Each command returns exit status 0 when it succeeds. When something goes wrong, it prints `Error: ...` to standard error and returns 1.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## hello-world

```
hello-world          # Hello, world!
hello-world Alice    # Hello, Alice!
```

From Python, `minitools.hello.greet(name)` returns the greeting string.

## unit-converter

Each category has its own subcommand. Every subcommand needs `--from`, `--to` and `--value`:

```
unit-converter temperature --from c --to f --value 100   # 100 c = 212 f
unit-converter length --from cm --to mm --value 2.5      # 2.5 cm = 25 mm
unit-converter weight --from kg --to g --value 3         # 3 kg = 3000 g
```

These are the supported units:

| Category    | Units           |
|-------------|-----------------|
| temperature | `c`, `f`, `k`   |
| length      | `mm`, `cm`, `m` |
| weight      | `mg`, `g`, `kg` |

If you convert a unit to itself, the value comes back unchanged. Any other pair that is not in the table is an error, for example `Invalid length unit`. Numbers are printed plainly, with no exponent and no trailing `.0`.

To answer prompts instead, run:

```
unit-converter interactive
```

The command shows the categories as a numbered list. It then asks for the from-unit, the to-unit and the value.

From Python:

```python
from minitools.units.converters import convert_temperature, ConversionError

convert_temperature("c", "k", 0.0)   # 273.15
```

`convert_length`, `convert_temperature` and `convert_weight` raise `ConversionError` (a `ValueError`) for a pair they do not know. `minitools.units.interactive.run(ask, out)` runs the prompts with any `ask(prompt, choices=None)` callable and returns the result.

## file-organizer

This command walks a directory tree and moves every regular file into a folder under `sorted/`, relative to the current working directory:

```
file-organizer --path ./downloads --by extension   # sorted/<extension>/
file-organizer --path ./downloads --by date        # sorted/<year>/<month name>/
file-organizer --path ./downloads --dry-run        # only print what would move
```

`--path` (`-p`) defaults to `.` and `--by` (`-b`) defaults to `extension`. A file without an extension, or a dot-file such as `.bashrc`, goes to `sorted/unknown/`. The date is the file's local modification time, for example `sorted/2024/March/`. Symbolic links are not followed, and directories that cannot be read are skipped.

From Python, `minitools.organizer.organizer.organize_files(path, mode, dry_run)` returns the `(source, destination directory)` pairs in walk order. `minitools.organizer.sorter.get_dest_dir(path, mode)` gives the destination for a single file.

### What it does not do

- The organizer does not check for name clashes. A file moved into a folder that already holds a file of the same name is handled as the platform's rename handles it: on POSIX systems the existing file is replaced.
- With `--path .`, files already under `sorted/` are walked again.

## todo

```
todo add "Buy milk"
todo list
todo complete 1
todo remove 1
```

Tasks are kept in `data/tasks.json`, under the current working directory. Task IDs come from a counter in `data/id_counter.txt`, so an ID is never reused.

You get an error if you complete an unknown task, or one that is already done. `remove` reports success even when no task has the given ID.

From Python, `minitools.todo.storage.TaskStorage(data_dir)` stores tasks in any directory. `minitools.todo.commands` provides `add_task`, `list_tasks`, `remove_task` and `complete_task`. `complete_task` raises `TaskNotFoundError`.

The list has no way to edit a task's title or to reopen a completed task.