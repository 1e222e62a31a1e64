"""Error taxonomy surfaced to API callers."""


class PostboardError(Exception):
    """Base class for errors rendered as JSON by the application."""

    status_code = 500
    error = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class ValidationError(PostboardError):
    """Missing or empty required input."""

    status_code = 400
    error = "bad_request"


class Unauthorized(PostboardError):
    """Missing or invalid session on a protected mutation."""

    status_code = 401
    error = "unauthorized"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFound(PostboardError):
    """Lookup by id missed."""

    status_code = 404
    error = "not_found"
