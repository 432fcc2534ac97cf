"""Network and URL constants.

These constants define the port range, URL schemes and default endpoint
paths used when resolving the management metadata of a service instance.
"""

# Pre-bind placeholder handed out by the networking stack for "pick a random
# port". It is never a real listening port: metadata that references it would
# be stale by the time a consumer reads it.
PORT_UNASSIGNED = 0

MIN_PORT = 0
MAX_PORT = 65535

HTTP_SCHEME = "http"
HTTPS_SCHEME = "https"
ALLOWED_SCHEMES = frozenset({HTTP_SCHEME, HTTPS_SCHEME})

PATH_SEPARATOR = "/"
ROOT_PATH = PATH_SEPARATOR

DEFAULT_SERVER_PORT = 8080
DEFAULT_HEALTH_CHECK_URL_PATH = "/actuator/health"
DEFAULT_STATUS_PAGE_URL_PATH = "/actuator/info"

# Key under which the effective management port is published alongside the instance
MANAGEMENT_PORT_METADATA_KEY = "management.port"

__all__ = [
    "PORT_UNASSIGNED",
    "MIN_PORT",
    "MAX_PORT",
    "HTTP_SCHEME",
    "HTTPS_SCHEME",
    "ALLOWED_SCHEMES",
    "PATH_SEPARATOR",
    "ROOT_PATH",
    "DEFAULT_SERVER_PORT",
    "DEFAULT_HEALTH_CHECK_URL_PATH",
    "DEFAULT_STATUS_PAGE_URL_PATH",
    "MANAGEMENT_PORT_METADATA_KEY",
]
