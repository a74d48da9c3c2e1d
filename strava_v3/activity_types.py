"""Strava activity and workout type enums."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Mapping

__all__ = [
    "ActivityType",
    "WorkoutType",
    "normalize_activity_type",
    "resolve_activity_type",
    "resolve_workout_type",
]


class ActivityType(str, Enum):
    RIDE = "Ride"
    RUN = "Run"
    SWIM = "Swim"
    HIKE = "Hike"
    WALK = "Walk"
    ALPINE_SKI = "AlpineSki"
    BACKCOUNTRY_SKI = "BackcountrySki"
    CANOEING = "Canoeing"
    CROSSFIT = "Crossfit"
    EBIKE_RIDE = "EBikeRide"
    ELLIPTICAL = "Elliptical"
    ICE_SKATE = "IceSkate"
    INLINE_SKATE = "InlineSkate"
    KAYAKING = "Kayaking"
    KITESURF = "Kitesurf"
    NORDIC_SKI = "NordicSki"
    ROCK_CLIMBING = "RockClimbing"
    ROLLER_SKI = "RollerSki"
    ROWING = "Rowing"
    SNOWBOARD = "Snowboard"
    SNOWSHOE = "Snowshoe"
    STAIR_STEPPER = "StairStepper"
    STAND_UP_PADDLING = "StandUpPaddling"
    SURFING = "Surfing"
    WEIGHT_TRAINING = "WeightTraining"
    WINDSURF = "Windsurf"
    WORKOUT = "Workout"
    YOGA = "Yoga"
    UNKNOWN = "Unknown"


class WorkoutType(IntEnum):
    DEFAULT_RUN = 0
    RACE_RUN = 1
    LONG_RUN = 2
    WORKOUT_RUN = 3
    DEFAULT_RIDE = 10
    RACE_RIDE = 11
    WORKOUT_RIDE = 12


_ACTIVITY_TYPES_BY_NAME = {
    member.value.lower(): member for member in ActivityType
}


def normalize_activity_type(value: Any) -> str | None:
    """Return a lowercase activity type string or ``None`` when missing.

    The Strava API can return either ``type`` or ``sport_type`` values, often
    with inconsistent casing.
    """

    if value is None:
        return None
    normalized = str(value).strip().lower()
    return normalized or None


def resolve_activity_type(payload: Mapping[str, Any]) -> ActivityType:
    """Map an activity (or segment) payload onto :class:`ActivityType`.

    ``sport_type`` is checked first, then the legacy ``type`` key, then
    ``activity_type`` (used by segment payloads); the first value naming a
    known type wins. Anything else is ``UNKNOWN``.
    """

    for key in ("sport_type", "type", "activity_type"):
        normalized = normalize_activity_type(payload.get(key))
        if normalized and normalized in _ACTIVITY_TYPES_BY_NAME:
            return _ACTIVITY_TYPES_BY_NAME[normalized]
    return ActivityType.UNKNOWN


def resolve_workout_type(value: Any) -> WorkoutType | None:
    """Return the :class:`WorkoutType` for ``value`` or ``None`` if unset/unknown."""

    if value is None:
        return None
    try:
        return WorkoutType(int(value))
    except (TypeError, ValueError):
        return None
