"""Strava client components (URL builder, transport, pagination, accessors)."""

from .activities import get_activity, list_athlete_activities  # noqa: F401
from .athletes import get_authenticated_athlete  # noqa: F401
from .base import build_url  # noqa: F401
from .http import get, post_multipart, refresh_tokens  # noqa: F401
from .pagination import Paginated  # noqa: F401
from .segment_efforts import get_segment_effort, list_segment_efforts  # noqa: F401
from .segments import get_segment  # noqa: F401
from .session import client_scope, create_default_client  # noqa: F401
from .uploads import (  # noqa: F401
    build_upload_form,
    create_upload,
    create_upload_from_file,
    get_upload,
)
