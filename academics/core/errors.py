"""
Domain errors shared by the engine, the store and the routers.

Each error carries the HTTP status and the client-visible message the
boundary answers with; see ``academics.core.error_handlers``.
"""


class AcademicsError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AcademicsError):
    """Malformed or missing input, raised before any store access."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: str | None = None, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(AcademicsError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AcademicsError):
    status_code = 409
    default_message = "Conflict"


class DependencyError(AcademicsError):
    """Store or reference-data failure. Details stay in the logs."""

    status_code = 500


class CorruptGradeDataError(DependencyError):
    """A stored grade entry breaks a domain invariant at read time."""
