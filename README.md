# fittrack

fittrack reads short text records of physical activity and turns them into
reports, with the report text in Russian. It works out distance, mean speed
and calories burned from the step count, the duration and the user's weight
(kg) and height (m).

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Record formats

A daily activity record is a step count and a duration, separated by a comma:

```
678,0h50m
```

A training record also names the kind of activity. The two kinds are
`Ходьба` (walking) and `Бег` (running):

```
3456,Ходьба,3h00m
```

The step count is a base-10 integer with an optional sign and no spaces. It
must be positive. A duration is one or more components, each a decimal number
followed by a unit: `ns`, `us` (or `µs`), `ms`, `s`, `m` or `h`. Examples are
`1h30m`, `45m`, `1.5h` and `30.5m`. A duration must be positive. The activity
name may have spaces around it; they are removed.

## Library use

```python
from fittrack.daysteps import day_action_info
from fittrack.spentcalories import training_info

print(day_action_info("6000,1h00m", 75.0, 1.75))
print(training_info("6000,Бег,1h00m", 75.0, 1.75))
```

`day_action_info` returns the step count, the distance and the calories burned
while walking. Its distance uses a fixed step length of 0.65 m. When the
record is not valid, it logs the problem through the `fittrack.daysteps`
logger and returns an empty string.

`training_info` returns the kind of activity, the duration in hours, the
distance, the mean speed and the calories burned. Its distance uses a step
length of 0.45 times the height. When the record is not valid or the activity
is unknown, it raises a subclass of `fittrack.common.TrackerError`. That class
is itself a `ValueError`. The subclasses are:

- `SliceLengthError`: wrong number of fields
- `ParseIntError`: bad step count
- `ParseDurationError`: bad duration
- `EmptyStringError`: empty activity
- `ParamLimitExceededError`: a value out of range, or an unknown activity

The lower-level helpers can also be used directly:

- `fittrack.daysteps`: `parse_package`, which returns `(steps, timedelta)`.
- `fittrack.spentcalories`: `parse_training`, which returns a frozen
  `Training` dataclass, and also `distance`, `mean_speed`,
  `running_spent_calories` and `walking_spent_calories`. Walking calories are
  half the running calories.
- `fittrack.common`: `parse_int` and `parse_duration`, together with the
  constants the calculations use.

## Command line

```
fittrack
```

This prints reports for a built-in sample day of activity records, for a
person weighing 84.6 kg who is 1.87 m tall. Invalid sample records print as
empty lines, and their errors are logged to standard error.

The command then works through a built-in sample training log. That log
contains a record that is not valid. When the command reaches it, it logs
`не получилось получить информацию о тренировке` with the error and exits
with status 1. It never prints the training log. The command takes no
options apart from `--help`.

## What it does not do

The command only runs its built-in samples. It does not read records from
files, arguments or standard input. fittrack does not store a history of
activity anywhere.

## Running the tests

```
pytest
```