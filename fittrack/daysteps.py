"""Daily step records: parsing and a short activity summary."""

from __future__ import annotations

import logging
from datetime import timedelta

from fittrack.common import (
    M_IN_KM,
    STEP_LENGTH,
    ParamLimitExceededError,
    SliceLengthError,
    TrackerError,
    parse_duration,
    parse_int,
)
from fittrack.spentcalories import walking_spent_calories

logger = logging.getLogger(__name__)


def parse_package(data: str) -> tuple[int, timedelta]:
    """Parse a record such as "678,0h50m" into a step count and a duration."""
    fields = data.split(",")
    if len(fields) != 2:
        raise SliceLengthError(
            f"record {data!r} split into {len(fields)} fields, expected 2"
        )
    raw_steps, raw_duration = fields

    steps = parse_int(raw_steps)
    if steps <= 0:
        raise ParamLimitExceededError(
            f"steps number = {steps}, expected a positive steps number"
        )

    duration = parse_duration(raw_duration)
    if duration <= timedelta(0):
        raise ParamLimitExceededError(
            f"duration = {raw_duration!r}, expected a positive duration"
        )

    return steps, duration


def day_action_info(data: str, weight: float, height: float) -> str:
    """Summarise steps, distance and calories for a daily record.

    Invalid input is logged and yields an empty string.
    """
    try:
        steps, duration = parse_package(data)
        calories = walking_spent_calories(steps, weight, height, duration)
    except TrackerError as exc:
        logger.error("%s", exc)
        return ""

    distance_km = steps * STEP_LENGTH / M_IN_KM
    return (
        f"Количество шагов: {steps}.\n"
        f"Дистанция составила {distance_km:.2f} км.\n"
        f"Вы сожгли {calories:.2f} ккал.\n"
    )