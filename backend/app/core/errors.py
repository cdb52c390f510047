"""Service-level errors.

Services raise these; ``backend.app.main`` turns them into the JSON envelope
``{"success": false, "message": ...}`` with the matching status code.
"""

from __future__ import annotations


class ServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(ServiceError):
    status_code = 400


class Unauthorized(ServiceError):
    status_code = 401


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    status_code = 409
