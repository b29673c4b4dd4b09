# aoc2024

Solutions to the Advent of Code 2024 puzzles for days 1 to 22, without day 21.
Each day parses its puzzle input and answers both parts.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `aoc2024` command:

```
aoc2024 [DAY ...] [--inputs DIRECTORY]
```

With no day numbers every available day is run, in order. `--inputs` names
the directory that holds the inputs (default `inputs`). For each day it
expects two files in a two-digit subdirectory:

```
inputs/
  01/
    test   # the worked example from the puzzle text
    real   # your own puzzle input
  02/
    ...
```

For each part the command first solves the `test` file and compares the
answer with the example's known answer. If it matches it prints
`Day N part P test passed`, then solves the `real` file and prints the answer
with the time it took in milliseconds. A missing file, a wrong example answer
or an error while solving an example stops the run with exit status 1;
otherwise the exit status is 0. Asking for a day that has no solution is a
usage error.

The example files are parsed with the example settings: day 14 uses an 11×7
floor instead of 101×103, and day 18 a 7×7 grid with 12 fallen bytes instead
of 71×71 with 1024. Day 14 part two also prints the robots' picture.

Run `aoc2024 --help` for a summary of the options.

## Library use

Each day is a module, `aoc2024.day01` to `aoc2024.day22` (there is no
`day21`), with the same three functions:

- `parse(text, test=False)` turns the raw input text into the puzzle data.
  `test` says whether the text is the puzzle's worked example.
- `part1(puzzle)` returns the answer to part one as a string.
- `part2(puzzle)` returns the answer to part two as a string.

```python
from pathlib import Path

from aoc2024 import day01

puzzle = day01.parse(Path("input.txt").read_text())
print(day01.part1(puzzle))
print(day01.part2(puzzle))
```

Solvers raise `ValueError` when the input cannot be parsed or has no answer,
for example an unreachable exit on day 16 or day 18.

Other entry points:

- `aoc2024.cli.solve(day, path, test=False)` returns both answers of one day
  for the input file at `path`.
- `aoc2024.benchmark.benchmark(func)` calls `func` with no arguments and
  returns a `BenchmarkResult` with `result` and `time_ms`.
- `aoc2024.inputs.read_input(path)` returns an `InputFile` with the file's
  `content`, its `lines` and `line_count`; `split_lines(text)` splits text on
  newlines, dropping whatever follows the last one.
- `aoc2024.grid` holds `Vertex`, a frozen 2-D point or direction supporting
  `+`, unary `-`, `delta_to`, `sign`, `diff`, `rotate_right` and
  `rotate_left`, together with the helpers `sign` and `char_to_int`.

## What it does not do

- Day 21 (Keypad Conundrum) has no solution, and days 23 to 25 are not
  covered.
- Inputs are not downloaded; the files must be placed in the inputs directory
  by hand.