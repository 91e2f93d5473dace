"""Constants for the fetch layer."""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 299

# Sentinel statuses for responses that carry no HTTP status
STATUS_NO_HTTP_STATUS = -1
STATUS_NO_NETWORK = -3

# Per-attempt timeout (seconds)
DEFAULT_TIMEOUT_SECONDS = 60.0

# Attempts per fetch call, first 2xx wins
DEFAULT_MAX_ATTEMPTS = 3

# Worker threads for callback-style fetches
DEFAULT_MAX_WORKERS = 8

# Address used by the connectivity probe; nothing is sent to it
CONNECTIVITY_PROBE_HOST = "8.8.8.8"
CONNECTIVITY_PROBE_PORT = 53

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})
