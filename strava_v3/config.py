"""Central configuration for the Strava v3 client.

All values are constants imported by the rest of the package. Secrets are
never stored here; only the names of the environment variables that hold
them. A local `.env` file is loaded on import so those variables can live
next to the calling application.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv

# Load .env from the working directory of the calling application or any
# parent folder. Existing environment variables win over values in the file.
load_dotenv(find_dotenv(usecwd=True))


# ---------------------------------------------------------------------------
# Strava endpoints
# ---------------------------------------------------------------------------
STRAVA_HOST = "www.strava.com"
STRAVA_BASE_URL = f"https://{STRAVA_HOST}/api/v3"

# Path (relative to STRAVA_BASE_URL) of the OAuth refresh exchange.
OAUTH_TOKEN_PATH = "oauth/token"


# ---------------------------------------------------------------------------
# Credentials (environment variable names)
# ---------------------------------------------------------------------------
STRAVA_ACCESS_TOKEN_ENV = "STRAVA_ACCESS_TOKEN"
STRAVA_REFRESH_TOKEN_ENV = "STRAVA_REFRESH_TOKEN"
STRAVA_CLIENT_ID_ENV = "STRAVA_CLIENT_ID"
STRAVA_CLIENT_SECRET_ENV = "STRAVA_CLIENT_SECRET"


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
# Page size Strava applies when a list endpoint gets no per_page parameter.
DEFAULT_PAGE_SIZE = 30

DEFAULT_HEADERS = {
    "Accept-Encoding": "gzip, deflate",
    "Accept": "application/json",
}

# The client never imposes a deadline of its own; callers wrap calls in
# asyncio.timeout() (or similar) when they need bounded latency.
REQUEST_TIMEOUT: float | None = None

# File name sent with the multipart upload payload.
UPLOAD_FILE_FIELD = "file"
UPLOAD_FILE_NAME = "file"
