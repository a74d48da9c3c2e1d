"""Dataclasses mirroring the Strava v3 JSON resources.

Each DTO is built from a decoded response body with ``from_dict``. Only
``id`` is required where Strava always sends one; every other field falls
back to ``None`` (or an empty list) because the populated subset depends on
the representation returned (see :class:`ResourceState`). Nested objects are
parsed independently and may be in a lower resource state than a direct
fetch of the same object would return.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Mapping, Optional

from .activity_types import (
    ActivityType,
    WorkoutType,
    resolve_activity_type,
    resolve_workout_type,
)

JSONObj = Mapping[str, Any]


class ResourceState(IntEnum):
    """The level of detail for a resource; DETAILED carries the most data."""

    UNKNOWN = 0
    META = 1
    SUMMARY = 2
    DETAILED = 3

    @classmethod
    def _missing_(cls, value: object) -> "ResourceState":
        return cls.UNKNOWN


def _resource_state(data: JSONObj) -> ResourceState:
    return ResourceState(data.get("resource_state"))


def _nested(data: JSONObj, key: str, parser):
    value = data.get(key)
    if value is None:
        return None
    return parser(value)


def _nested_list(data: JSONObj, key: str, parser) -> list:
    return [parser(item) for item in data.get(key) or []]


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float

    @classmethod
    def from_json(cls, value: Any) -> Optional["LatLng"]:
        """Strava sends ``[lat, lng]``, or ``[]`` when the activity has no GPS."""

        if not value:
            return None
        lat, lng = value
        return cls(lat=float(lat), lng=float(lng))


@dataclass(frozen=True)
class PolylineMap:
    id: Optional[str] = None
    polyline: Optional[str] = None
    summary_polyline: Optional[str] = None
    resource_state: ResourceState = ResourceState.UNKNOWN

    @classmethod
    def from_dict(cls, data: JSONObj) -> "PolylineMap":
        return cls(
            id=data.get("id"),
            polyline=data.get("polyline"),
            summary_polyline=data.get("summary_polyline"),
            resource_state=_resource_state(data),
        )


@dataclass(frozen=True)
class Split:
    """One kilometre (metric) or mile (standard) split of an activity."""

    distance: Optional[float] = None
    elapsed_time: Optional[int] = None
    elevation_difference: Optional[float] = None
    moving_time: Optional[int] = None
    split: Optional[int] = None
    average_speed: Optional[float] = None
    pace_zone: Optional[int] = None

    @classmethod
    def from_dict(cls, data: JSONObj) -> "Split":
        return cls(
            distance=data.get("distance"),
            elapsed_time=data.get("elapsed_time"),
            elevation_difference=data.get("elevation_difference"),
            moving_time=data.get("moving_time"),
            split=data.get("split"),
            average_speed=data.get("average_speed"),
            pace_zone=data.get("pace_zone"),
        )


@dataclass(frozen=True)
class Athlete:
    id: int
    resource_state: ResourceState = ResourceState.UNKNOWN
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    sex: Optional[str] = None
    premium: Optional[bool] = None
    summit: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    profile_medium: Optional[str] = None
    profile: Optional[str] = None
    weight: Optional[float] = None

    @classmethod
    def from_dict(cls, data: JSONObj) -> "Athlete":
        return cls(
            id=data["id"],
            resource_state=_resource_state(data),
            username=data.get("username"),
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
            city=data.get("city"),
            state=data.get("state"),
            country=data.get("country"),
            sex=data.get("sex"),
            premium=data.get("premium"),
            summit=data.get("summit"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            profile_medium=data.get("profile_medium"),
            profile=data.get("profile"),
            weight=data.get("weight"),
        )


@dataclass(frozen=True)
class Segment:
    id: int
    resource_state: ResourceState = ResourceState.UNKNOWN
    name: Optional[str] = None
    activity_type: ActivityType = ActivityType.UNKNOWN
    distance: Optional[float] = None
    average_grade: Optional[float] = None
    maximum_grade: Optional[float] = None
    elevation_high: Optional[float] = None
    elevation_low: Optional[float] = None
    start_latlng: Optional[LatLng] = None
    end_latlng: Optional[LatLng] = None
    climb_category: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    private: Optional[bool] = None
    hazardous: Optional[bool] = None
    starred: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: JSONObj) -> "Segment":
        return cls(
            id=data["id"],
            resource_state=_resource_state(data),
            name=data.get("name"),
            activity_type=resolve_activity_type(data),
            distance=data.get("distance"),
            average_grade=data.get("average_grade"),
            maximum_grade=data.get("maximum_grade"),
            elevation_high=data.get("elevation_high"),
            elevation_low=data.get("elevation_low"),
            start_latlng=LatLng.from_json(data.get("start_latlng")),
            end_latlng=LatLng.from_json(data.get("end_latlng")),
            climb_category=data.get("climb_category"),
            city=data.get("city"),
            state=data.get("state"),
            country=data.get("country"),
            private=data.get("private"),
            hazardous=data.get("hazardous"),
            starred=data.get("starred"),
        )


@dataclass(frozen=True)
class SegmentEffort:
    """An athlete's attempt at a segment (the portion of an activity covering it).

    Summary and detail representations are currently identical.
    """

    id: int
    resource_state: ResourceState = ResourceState.UNKNOWN
    name: Optional[str] = None
    activity_id: Optional[int] = None
    athlete: Optional[Athlete] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    start_date: Optional[str] = None
    start_date_local: Optional[str] = None
    distance: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    device_watts: Optional[bool] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    segment: Optional[Segment] = None
    kom_rank: Optional[int] = None
    pr_rank: Optional[int] = None

    @classmethod
    def from_dict(cls, data: JSONObj) -> "SegmentEffort":
        activity = data.get("activity") or {}
        return cls(
            id=data["id"],
            resource_state=_resource_state(data),
            name=data.get("name"),
            activity_id=activity.get("id"),
            athlete=_nested(data, "athlete", Athlete.from_dict),
            elapsed_time=data.get("elapsed_time"),
            moving_time=data.get("moving_time"),
            start_date=data.get("start_date"),
            start_date_local=data.get("start_date_local"),
            distance=data.get("distance"),
            start_index=data.get("start_index"),
            end_index=data.get("end_index"),
            average_cadence=data.get("average_cadence"),
            average_watts=data.get("average_watts"),
            device_watts=data.get("device_watts"),
            average_heartrate=data.get("average_heartrate"),
            max_heartrate=data.get("max_heartrate"),
            segment=_nested(data, "segment", Segment.from_dict),
            kom_rank=data.get("kom_rank"),
            pr_rank=data.get("pr_rank"),
        )


@dataclass(frozen=True)
class Activity:
    # Meta representation
    id: int
    resource_state: ResourceState = ResourceState.UNKNOWN

    # Summary representation
    external_id: Optional[str] = None
    upload_id: Optional[int] = None
    athlete: Optional[Athlete] = None
    name: Optional[str] = None
    distance: Optional[float] = None
    moving_time: Optional[int] = None
    elapsed_time: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    activity_type: ActivityType = ActivityType.UNKNOWN
    start_date: Optional[str] = None
    start_date_local: Optional[str] = None
    timezone: Optional[str] = None
    start_latlng: Optional[LatLng] = None
    end_latlng: Optional[LatLng] = None
    achievement_count: Optional[int] = None
    kudos_count: Optional[int] = None
    comment_count: Optional[int] = None
    athlete_count: Optional[int] = None
    photo_count: Optional[int] = None
    map: Optional[PolylineMap] = None
    trainer: Optional[bool] = None
    commute: Optional[bool] = None
    manual: Optional[bool] = None
    private: Optional[bool] = None
    flagged: Optional[bool] = None
    workout_type: Optional[WorkoutType] = None
    gear_id: Optional[str] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_temp: Optional[float] = None
    average_watts: Optional[float] = None
    weighted_average_watts: Optional[int] = None
    kilojoules: Optional[float] = None
    device_watts: Optional[bool] = None
    max_heartrate: Optional[float] = None
    truncated: Optional[int] = None
    has_kudoed: Optional[bool] = None

    # Detailed representation
    calories: Optional[float] = None
    description: Optional[str] = None
    segment_efforts: List[SegmentEffort] = field(default_factory=list)
    splits_metric: List[Split] = field(default_factory=list)
    splits_standard: List[Split] = field(default_factory=list)
    best_efforts: List[SegmentEffort] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: JSONObj) -> "Activity":
        return cls(
            id=data["id"],
            resource_state=_resource_state(data),
            external_id=data.get("external_id"),
            upload_id=data.get("upload_id"),
            athlete=_nested(data, "athlete", Athlete.from_dict),
            name=data.get("name"),
            distance=data.get("distance"),
            moving_time=data.get("moving_time"),
            elapsed_time=data.get("elapsed_time"),
            total_elevation_gain=data.get("total_elevation_gain"),
            activity_type=resolve_activity_type(data),
            start_date=data.get("start_date"),
            start_date_local=data.get("start_date_local"),
            timezone=data.get("timezone"),
            start_latlng=LatLng.from_json(data.get("start_latlng")),
            end_latlng=LatLng.from_json(data.get("end_latlng")),
            achievement_count=data.get("achievement_count"),
            kudos_count=data.get("kudos_count"),
            comment_count=data.get("comment_count"),
            athlete_count=data.get("athlete_count"),
            photo_count=data.get("photo_count"),
            map=_nested(data, "map", PolylineMap.from_dict),
            trainer=data.get("trainer"),
            commute=data.get("commute"),
            manual=data.get("manual"),
            private=data.get("private"),
            flagged=data.get("flagged"),
            workout_type=resolve_workout_type(data.get("workout_type")),
            gear_id=data.get("gear_id"),
            average_speed=data.get("average_speed"),
            max_speed=data.get("max_speed"),
            average_cadence=data.get("average_cadence"),
            average_temp=data.get("average_temp"),
            average_watts=data.get("average_watts"),
            weighted_average_watts=data.get("weighted_average_watts"),
            kilojoules=data.get("kilojoules"),
            device_watts=data.get("device_watts"),
            max_heartrate=data.get("max_heartrate"),
            truncated=data.get("truncated"),
            has_kudoed=data.get("has_kudoed"),
            calories=data.get("calories"),
            description=data.get("description"),
            segment_efforts=_nested_list(data, "segment_efforts", SegmentEffort.from_dict),
            splits_metric=_nested_list(data, "splits_metric", Split.from_dict),
            splits_standard=_nested_list(data, "splits_standard", Split.from_dict),
            best_efforts=_nested_list(data, "best_efforts", SegmentEffort.from_dict),
        )


class DataType(str, Enum):
    """File formats accepted by the uploads endpoint."""

    FIT = "fit"
    FIT_GZ = "fit_gz"
    TCX = "tcx"
    TCX_GZ = "tcx_gz"
    GPX = "gpx"
    GPX_GZ = "gpx_gz"


@dataclass(frozen=True)
class CreateUpload:
    """Metadata submitted alongside an activity file."""

    data_type: DataType
    external_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    trainer: Optional[bool] = None
    commute: Optional[bool] = None


@dataclass(frozen=True)
class Upload:
    """Processing status of an uploaded activity file."""

    id: Optional[int] = None
    id_str: Optional[str] = None
    external_id: Optional[str] = None
    activity_id: Optional[int] = None
    error: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: JSONObj) -> "Upload":
        return cls(
            id=data.get("id"),
            id_str=data.get("id_str"),
            external_id=data.get("external_id"),
            activity_id=data.get("activity_id"),
            error=data.get("error"),
            status=data.get("status"),
        )


__all__ = [
    "Activity",
    "Athlete",
    "CreateUpload",
    "DataType",
    "LatLng",
    "PolylineMap",
    "ResourceState",
    "Segment",
    "SegmentEffort",
    "Split",
    "Upload",
]
