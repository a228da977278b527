# problemset

Small, self-contained solutions to a set of classic programming-contest
exercises. Each exercise is a plain Python function you can call directly.
A command-line front end reads an exercise's input in the usual judge
format and prints the expected output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

The functions are grouped by theme:

- `problemset.arithmetic`: exercises on a handful of numbers:
  `batting_average`, `carrots_earned`, `absolute_difference`, `missing_r2`,
  `remaining_megabytes`, `total_qaly`, `temperature_point`, `moscow_dream`,
  `quadrant`, `judge_moose`, `chicken_message`, `best_buy` and
  `is_halloween`.
- `problemset.sequences`: exercises over a list of values: `fizzbuzz`,
  `time_loop`, `parity_report`, `digits_steps`, `find_king`, `launch_day`,
  `describe_range`, `denied_groups`, `vote_result` and `poker_strength`.
- `problemset.games`: `mia_score`, `mia_winner` and `left_beehind`.
- `problemset.text`: `hello`, `farewell`, `hiss` and `help_phd`.

```python
from problemset.arithmetic import absolute_difference, missing_r2
from problemset.sequences import fizzbuzz

absolute_difference(10, 12)   # 2
missing_r2(11, 15)            # 19
fizzbuzz(2, 3, 7)             # ['1', 'Fizz', 'Buzz', 'Fizz', '5', 'FizzBuzz', '7']
```

Functions raise `ValueError` where an answer cannot be given, for example
`batting_average` with no non-negative values, `quadrant` for a point on an
axis, or `launch_day`, `describe_range` and `vote_result` with no values.
`temperature_point` returns the strings `"ALL GOOD"` or `"IMPOSSIBLE"`
when the two scales agree everywhere or nowhere.

`problemset.cli.solve(problem, text)` takes an exercise name and the full
input text in judge format and returns the output text, one answer per
line, which makes it easy to check a solution against sample files. It
raises `ValueError` for an unknown exercise name or malformed input.

## Using the command line

The `problemset` command takes the name of an exercise and reads its input
from standard input:

```
problemset different < sample.in
problemset fizzbuzz < sample.in
```

The same front end can be started with `python -m problemset.cli`.

Supported exercises: `batterup`, `carrots`, `different`, `digits`,
`fizzbuzz`, `hangingout`, `hello`, `helpaphd`, `hissingmicrophone`,
`isithalloween`, `judgingmoose`, `leftbeehind`, `licensetolaunch`, `mia`,
`moscowdream`, `oddgnome`, `oddities`, `onechicken`, `pokerhand`,
`provincesandgold`, `qaly`, `quadrant`, `r2`, `statistics`, `tarifa`,
`temperature`, `thelastproblem`, `timeloop` and `vote`.

If the input cannot be read, the command prints `problemset: <reason>` to
standard error and exits with status 1. For `quadrant`, a point lying on an
axis produces no output.