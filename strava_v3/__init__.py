"""Async typed client for the Strava v3 REST API."""

from .activity_types import ActivityType, WorkoutType
from .auth import AccessToken, RefreshToken
from .errors import (
    MissingCredentialError,
    StravaAPIError,
    StravaBadRequestError,
    StravaIOError,
    StravaTransportError,
    StravaUnauthorizedError,
)
from .models import (
    Activity,
    Athlete,
    CreateUpload,
    DataType,
    LatLng,
    PolylineMap,
    ResourceState,
    Segment,
    SegmentEffort,
    Split,
    Upload,
)
from .strava_client import (
    Paginated,
    build_upload_form,
    build_url,
    create_upload,
    create_upload_from_file,
    get_activity,
    get_authenticated_athlete,
    get_segment,
    get_segment_effort,
    get_upload,
    list_athlete_activities,
    list_segment_efforts,
)

__all__ = [
    "AccessToken",
    "Activity",
    "ActivityType",
    "Athlete",
    "CreateUpload",
    "DataType",
    "LatLng",
    "MissingCredentialError",
    "Paginated",
    "PolylineMap",
    "RefreshToken",
    "ResourceState",
    "Segment",
    "SegmentEffort",
    "Split",
    "StravaAPIError",
    "StravaBadRequestError",
    "StravaIOError",
    "StravaTransportError",
    "StravaUnauthorizedError",
    "Upload",
    "WorkoutType",
    "build_upload_form",
    "build_url",
    "create_upload",
    "create_upload_from_file",
    "get_activity",
    "get_authenticated_athlete",
    "get_segment",
    "get_segment_effort",
    "get_upload",
    "list_athlete_activities",
    "list_segment_efforts",
]
