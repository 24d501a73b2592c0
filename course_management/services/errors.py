"""Domain errors raised by the service layer."""
from __future__ import annotations

from typing import Any


class CourseManagementError(Exception):
    """Base class for domain errors surfaced to API clients."""


class ResourceNotFoundError(CourseManagementError):
    """A requested or referenced entity does not exist."""

    def __init__(
        self,
        resource: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        if field is None:
            message = resource
        else:
            message = f"{resource} not found with {field}: {value}"
        super().__init__(message)
        self.resource = resource
        self.field = field
        self.value = value


class ResourceAlreadyExistsError(CourseManagementError):
    """A write would violate a uniqueness rule."""

    def __init__(
        self,
        resource: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        if field is None:
            message = resource
        else:
            message = f"{resource} already exists with {field}: {value}"
        super().__init__(message)
        self.resource = resource
        self.field = field
        self.value = value


__all__ = ["CourseManagementError", "ResourceAlreadyExistsError", "ResourceNotFoundError"]
