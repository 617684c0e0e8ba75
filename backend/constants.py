"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8000
    API_PREFIX = "/api"


class PaginationDefaults:
    """Defaults and limits applied to every paginated list request"""

    PAGE_NUMBER = 1
    PAGE_SIZE = 10
    MAX_PAGE_SIZE = 50  # Larger requested page sizes are clamped to this


class SortConfig:
    """Sort key conventions shared by all list endpoints"""

    DESCENDING_SUFFIX = "desc"  # "salarydesc" sorts by salary, highest first


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
