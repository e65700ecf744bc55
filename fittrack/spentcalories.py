"""Training records: parsing, distance, speed and calories burned."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fittrack.common import (
    M_IN_KM,
    MIN_IN_H,
    STEP_LENGTH_COEFFICIENT,
    WALKING_CALORIES_COEFFICIENT,
    EmptyStringError,
    ParamLimitExceededError,
    SliceLengthError,
    parse_duration,
    parse_int,
)

WALKING = "Ходьба"
RUNNING = "Бег"


@dataclass(frozen=True)
class Training:
    """One parsed training record."""

    steps: int
    activity: str
    duration: timedelta


def _hours(duration: timedelta) -> float:
    return duration.total_seconds() / 3600


def _minutes(duration: timedelta) -> float:
    return duration.total_seconds() / 60


def parse_training(data: str) -> Training:
    """Parse a record such as "3456,Ходьба,3h00m"."""
    fields = data.split(",")
    if len(fields) != 3:
        raise SliceLengthError(
            f"record {data!r} split into {len(fields)} fields, expected 3"
        )
    raw_steps, raw_activity, raw_duration = fields

    steps = parse_int(raw_steps)
    if steps <= 0:
        raise ParamLimitExceededError(
            f"steps number = {steps}, expected a positive steps number"
        )

    activity = raw_activity.strip()
    if not activity:
        raise EmptyStringError("activity must be set")

    duration = parse_duration(raw_duration)
    if duration <= timedelta(0):
        raise ParamLimitExceededError(
            f"duration = {raw_duration!r}, expected a positive duration"
        )

    return Training(steps, activity, duration)


def distance(steps: int, height: float) -> float:
    """Distance in kilometres covered in ``steps`` by a person of ``height`` metres."""
    step_length = STEP_LENGTH_COEFFICIENT * height
    return step_length * steps / M_IN_KM


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Mean speed in km/h; zero when there are no steps or no positive duration."""
    if steps <= 0:
        return 0.0
    hours = _hours(duration)
    if hours <= 0:
        return 0.0
    return distance(steps, height) / hours


def running_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burned while running."""
    if steps <= 0:
        raise ParamLimitExceededError(
            f"steps number = {steps}, expected a positive steps number"
        )
    if weight <= 0:
        raise ParamLimitExceededError(
            f"weight = {weight:.2f}, expected a positive weight"
        )
    if height <= 0:
        raise ParamLimitExceededError(
            f"height = {height:.2f}, expected a positive height"
        )
    if duration <= timedelta(0):
        raise ParamLimitExceededError(
            f"duration = {duration}, expected a positive duration"
        )
    speed = mean_speed(steps, height, duration)
    return weight * speed * _minutes(duration) / MIN_IN_H


def walking_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burned while walking."""
    calories = running_spent_calories(steps, weight, height, duration)
    return calories * WALKING_CALORIES_COEFFICIENT


_CALCULATORS = {
    WALKING: walking_spent_calories,
    RUNNING: running_spent_calories,
}


def training_info(data: str, weight: float, height: float) -> str:
    """Build a report for a training record given the user's weight and height."""
    training = parse_training(data)
    calculate = _CALCULATORS.get(training.activity)
    if calculate is None:
        raise ParamLimitExceededError(
            f"неизвестный тип тренировки: activity = {training.activity!r}, "
            f"expected activity = ['{WALKING}', '{RUNNING}']"
        )
    calories = calculate(training.steps, weight, height, training.duration)
    dist = distance(training.steps, height)
    speed = mean_speed(training.steps, height, training.duration)

    return (
        f"Тип тренировки: {training.activity}\n"
        f"Длительность: {_hours(training.duration):.2f} ч.\n"
        f"Дистанция: {dist:.2f} км.\n"
        f"Скорость: {speed:.2f} км/ч\n"
        f"Сожгли калорий: {calories:.2f}\n"
    )