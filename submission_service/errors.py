"""Error kinds raised by repositories and services.

Routes flatten them into ``success`` / ``err_msg`` / ``err_kind``; below the
HTTP boundary they propagate as typed exceptions.
"""
from __future__ import annotations


class ServiceError(Exception):
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceError):
    kind = "not_found"


class DuplicateKeyError(ServiceError):
    kind = "duplicate_key"


class ValidationError(ServiceError):
    kind = "validation"


class ConflictError(ServiceError):
    kind = "conflict"


class StorageError(ServiceError):
    kind = "storage"
