"""Command that prints a sample day of activity and a training log."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable

from fittrack.common import TrackerError
from fittrack.daysteps import day_action_info
from fittrack.spentcalories import training_info

logger = logging.getLogger(__name__)

WEIGHT = 84.6
HEIGHT = 1.87

_WALKING = "Ходьба"
_RUNNING = "Бег"
_GARBAGE = "something is wrong"


def _record(*fields: object) -> str:
    """Join fields into one comma-separated input record."""
    return ",".join(str(field) for field in fields)


DAY_ACTIONS: tuple[str, ...] = tuple(
    _record(steps, duration)
    for steps, duration in (
        (678, "0h50m"),
        (792, "1h14m"),
        (1078, "1h30m"),
        (7830, "2h40m"),
    )
) + (
    _record("", 3456),
    _record("12:40:00", " 3456"),
    _GARBAGE,
)

TRAININGS: tuple[str, ...] = (
    _record(3456, _WALKING, "3h00m"),
    _GARBAGE,
    _record(678, _RUNNING, "0h5m"),
    _record(1078, _RUNNING, "0h10m"),
    _record("", f"3456 {_WALKING}"),
    _record(7892, _WALKING, "3h10m"),
    _record(15392, _RUNNING, "0h45m"),
)


def _print_all(entries: Iterable[str]) -> None:
    for entry in entries:
        print(entry)


def main(argv: list[str] | None = None) -> int:
    """Print the daily activity and the training log; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="fittrack",
        description="Print a sample day of activity and a training log.",
    )
    parser.parse_args(argv)

    print("Активность в течение дня")
    _print_all([day_action_info(item, WEIGHT, HEIGHT) for item in DAY_ACTIONS])

    try:
        trainings = [training_info(item, WEIGHT, HEIGHT) for item in TRAININGS]
    except TrackerError as exc:
        logger.error("не получилось получить информацию о тренировке: %s", exc)
        return 1

    print("Журнал тренировок")
    _print_all(trainings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())