# advent

Solutions to a selection of Advent of Code puzzles from 2018 to 2022, and a
small command that downloads a day's input and prints the answers to both
parts. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a day

```
advent 2020 10
```

The command takes a year and a day. It reads the puzzle input from
`inputs/inputNN` in the current directory, where `NN` is the day padded to
two digits. If that file does not exist, it is downloaded with the cookies
stored in `cookies.json`, a JSON object mapping cookie names to string
values:

```json
{"session": "placeholder"}
```

and saved to `inputs/inputNN`. The answers are then printed:

```
Day 10
Part 1: ...
Part 2: ...
```

If the arguments are missing or cannot be parsed, the day has no solution in
the package, or the input cannot be read or downloaded, a message is written
to standard error and the command exits with status 1. A download answered
with HTTP 400 is reported as not being logged in; a response that begins
with "Please don't" is reported as the input not being available yet.

The cached file name does not include the year, so `inputs/input02` is used
for day 2 of every year. Run different years from different directories, or
remove the file before switching years.

## Using the solutions as a library

Every day lives in its own module, `advent.yYYYY_dayDD`, which offers
`part1(text)` and `part2(text)`. Both take the puzzle input as a string and
return the answer as a string. The helpers behind each part are public too:

```python
from advent import y2022_day06

y2022_day06.packet_start_index("mjqjpqmgbljsphdztnvjfqwrcgsmlb")   # 7
y2022_day06.message_start_index("mjqjpqmgbljsphdztnvjfqwrcgsmlb")  # 19
```

```python
from advent import y2020_day18
from advent.y2020_day18 import Precedence

expr = y2020_day18.parse_expression("1 + 2 * 3 + 4 * 5 + 6", Precedence.ADD_MULT)
expr.evaluate()  # 231
```

`advent.cli.get_day_functions(year, day)` returns a `DayFunctions` holding
the day's `part1` and `part2`, and raises `LookupError` for a day the
package has no solution for. `advent.inputs` offers `input_path(day)`,
`load_cookies(path)` and `fetch_day_input(year, day)`; failures there raise
`advent.inputs.InputError`.

Malformed puzzle input raises `ValueError`.

## Days covered

- 2018: days 1, 2, 3
- 2019: days 2, 5, 6
- 2020: days 10, 15, 17, 18, 19, 24, 25
- 2021: day 22
- 2022: days 1 to 6

## Limitations

- Only the days listed above can be run; any other year and day is rejected.
- 2020 day 25 has no second part: `part2` returns an empty string.
- 2020 day 19 part 2 replaces the looping rules 8 and 11 with expansions of
  at most two repetitions, so messages needing more repetitions are not
  counted.
- 2020 day 15 part 2 plays thirty million turns and takes a while in pure
  Python.