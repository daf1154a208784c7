# src/webanalyse/constants.py
"""Centralized constants for the page analyser.

User-configurable values (host, port, timeouts, worker count) are read in
config.py; the values here are their defaults plus fixed strings.
"""

# =============================================================================
# Network
# =============================================================================

# Timeout for fetching the page under analysis (seconds)
FETCH_TIMEOUT_SECONDS = 20.0

# Timeout for a single reachability probe of an external link (seconds)
PROBE_TIMEOUT_SECONDS = 10.0

# Responses at or above this status mark a link as inaccessible
INACCESSIBLE_STATUS_THRESHOLD = 400

DEFAULT_USER_AGENT = "WebAnalyse-Bot/1.0 (+contact: admin@domain.com)"

# =============================================================================
# Link classification
# =============================================================================

WEB_SCHEMES = frozenset(("http", "https"))

MAILTO_PREFIX = "mailto:"

# =============================================================================
# Page structure
# =============================================================================

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

PASSWORD_INPUT_SELECTOR = "input[type=password]"

# =============================================================================
# Web server
# =============================================================================

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080

# Seconds in-flight requests get to complete on shutdown
GRACEFUL_SHUTDOWN_SECONDS = 5

# =============================================================================
# User-facing messages
# =============================================================================

EMPTY_URL_MESSAGE = (
    "Hey, are you sure you want to analyse a website which doesn't have a url ? "
    "Please enter one"
)
GENERIC_ERROR_MESSAGE = (
    "We have some issue in accessing the website. Please try again later"
)
NOT_OK_RESPONSE_MESSAGE = "Website did not respond properly, errorcode is: {status_code}"
FETCH_ERROR_MESSAGE = "Could not access the website: {url}, error is: {error}"
