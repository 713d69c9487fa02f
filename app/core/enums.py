"""Shared enums for the domain layer and API."""

from enum import Enum, IntEnum


class MuscleRole(str, Enum):
    """How a muscle participates in an exercise, most specific first."""

    TARGET = "target"
    SYNERGIST = "synergist"
    DYNAMIC_STABILIZER = "dynamic_stabilizer"
    STABILIZER = "stabilizer"
    ANTAGONIST_STABILIZER = "antagonist_stabilizer"


class FormType(IntEnum):
    """How a set of an exercise is logged (code from the exercise export)."""

    REPS = 1  # Reps only
    WEIGHT_REPS = 2  # Weight & Reps
    TIMED = 3  # Duration in seconds


class ChartMode(str, Enum):
    """Bucketing for set history charts."""

    DAY = "day"  # 24 hourly buckets
    WEEK = "week"  # 7 daily buckets
