# linekit

Small command-line tools for working with text, line by line:

- `linekit-tail` prints the end of files, or everything from a given position onward.
- `linekit-uniq` collapses runs of adjacent identical lines.
- `linekit-wc` counts lines, words, bytes and characters.
- `linekit-template` renders a minimal line-based HTML template language read from standard input.

Requires Python 3.10 or newer. It uses nothing outside the standard library.

## Installation

```
pip install .
```

## tail

```
linekit-tail [-n LINES | -c BYTES] [-q] FILE...
```

- `-n 3` or `-n -3` prints the last three lines. The default is 10.
- `-n +3` prints from the third line onward. `-n +0` prints the whole file.
- `-c` / `--bytes` works the same way with bytes. It cannot be combined with `-n` / `--lines`.
- When there are several files, each one gets a `==> name <==` header unless `-q` / `--quiet` is given.
- A file that cannot be opened is reported on standard error and skipped.
- A count that is not an integer stops the program with exit status 1. The message is `illegal line count -- VALUE` or `illegal byte count -- VALUE`.

The same logic is available from Python in `linekit.tail`:

- `parse_num` turns a count into `TakeNum` or `PlusZero`.
- `get_start_index` works out where printing starts.
- `tail_lines` and `tail_bytes` yield the selected text from an open binary file.

## uniq

```
linekit-uniq [-c] [IN_FILE] [OUT_FILE]
```

The command reads `IN_FILE`. When `IN_FILE` is omitted or is `-`, it reads standard input. It writes to `OUT_FILE`, or to standard output when that is not given.

Adjacent lines that differ only by trailing whitespace count as equal. With `-c` / `--count`, each line is prefixed by how many times it occurred, right-aligned in four columns.

If the input file cannot be opened, the program reports it and exits with status 1. From Python, `linekit.uniq.uniq_lines(lines, count)` yields the collapsed lines from any iterable of strings.

## wc

```
linekit-wc [-l] [-w] [-c | -m] [FILE...]
```

- With no flags it prints lines, words and bytes.
- `-m` / `--chars` counts characters. It cannot be combined with `-c` / `--bytes`.
- Each count is right-aligned in eight columns and followed by the file name.
- A `total` line follows when more than one file is given.
- With no file, or with `-`, standard input is read and no name is printed.
- A file that cannot be opened is reported on standard error and skipped.

From Python:

- `linekit.wc.count` returns a `FileInfo` for any iterable of lines, binary or text.
- `FileInfo` values can be added together.
- `format_result` renders one output line.

## template

```
linekit-template < page.tmpl
```

Every input line is rendered on its own. The context is built in: `name` is `Bob` and `city` is `Boston`.

- Plain text is copied as is.
- `Hi {{name}}` substitutes each variable with its value from the context.
- `{% if name = Bob %} <h1> hello {{name}} </h1> {% endif %}` renders its body when the condition holds. When it does not hold, the output is an empty line.
- `{% for person in name %} <li> {{person}} </li> {% endfor %}` renders its body once per value in the list. Each copy ends with a newline, and the first variable in the body takes the value.
- A condition naming something missing from the context renders as a single space.
- A line that looks like a tag but is neither an if nor a for prints `Unrecognized input`.
- A malformed if or for tag, or a variable missing from the context, is reported on standard error. The program then stops with exit status 1.

From Python, `linekit.template_cli.render_line(line, context)` renders a single line against any context that maps names to lists of strings. The parser and renderer are in `linekit.template_parser` and `linekit.template_generator`.

## What it does not do

- `linekit-tail` has no follow mode. It prints what the files hold when it runs and exits.
- `linekit-uniq` has no options to skip fields or characters, or to ignore case.
- `linekit-template` cannot read a template from a file argument or a context from a file. It renders standard input against its built-in context only. Each tag must open and close on a single line.

## Running the tests

```
pip install ".[test]"
pytest
```