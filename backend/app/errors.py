"""
Error taxonomy raised by the project services.

The HTTP layer maps each kind to a status code; services never translate them.
"""


class ProjectError(Exception):
    """Base class for failures surfaced by project operations."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ProjectError):
    """A project or embedded item does not exist in the expected scope."""

    status_code = 404


class ForbiddenError(ProjectError):
    """The principal does not own the project."""

    status_code = 403


class ConflictError(ProjectError):
    """A project name collides with another project of the same owner,
    or a conditional save lost a race."""

    status_code = 409
