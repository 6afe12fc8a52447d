"""Custom exceptions for the change flow scheduler."""

from typing import Optional, Any, Dict
from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base exception for scheduler and service layer errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(ServiceError):
    """Raised when input validation fails."""
    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class NotFoundError(ServiceError):
    """Raised when a requested entity is not found."""
    def __init__(self, resource: str, resource_id: Any):
        message = f"{resource} with ID {resource_id} not found"
        super().__init__(message, code="NOT_FOUND")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(ServiceError):
    """Raised when an entity is in a conflicting state."""
    def __init__(self, message: str, resource: Optional[str] = None):
        super().__init__(message, code="CONFLICT")
        self.resource = resource


class ResourceExhausted(ServiceError):
    """Raised when a resource limit is reached."""
    def __init__(self, resource: str, limit: Optional[int] = None):
        message = f"{resource} limit reached"
        if limit:
            message += f" (limit: {limit})"
        super().__init__(message, code="RESOURCE_EXHAUSTED")
        self.resource = resource
        self.limit = limit


class InvalidSkillSet(ValidationError):
    """Raised when a worker or job is defined without any resolvable skill."""
    def __init__(self, entity: str, name: Optional[str] = None):
        message = f"{entity} requires at least one skill"
        if name:
            message = f"{entity} '{name}' requires at least one skill"
        super().__init__(message, field="skills")
        self.code = "INVALID_SKILL_SET"
        self.entity = entity
        self.name = name


class AlreadyBusy(ConflictError):
    """Raised when assigning a worker that already holds a task.

    Never expected under single-writer sequencing; seeing it means the
    scheduler broke the exclusivity invariant.
    """
    def __init__(self, worker_id: int, job_id: Optional[int] = None):
        super().__init__(f"Worker {worker_id} is already busy with job {job_id}", resource="worker")
        self.code = "ALREADY_BUSY"
        self.worker_id = worker_id
        self.job_id = job_id


class SlotPoolExhausted(ResourceExhausted):
    """Raised when a job completes after every destination slot was handed out."""
    def __init__(self, capacity: int, job_id: Optional[int] = None):
        super().__init__("Completion slot", limit=capacity)
        self.code = "SLOT_POOL_EXHAUSTED"
        self.capacity = capacity
        self.job_id = job_id
        if job_id is not None:
            self.details = {"job_id": job_id}


def service_error_handler(error: ServiceError) -> HTTPException:
    """Convert service errors to HTTP exceptions."""
    status_map = {
        ValidationError: status.HTTP_400_BAD_REQUEST,
        InvalidSkillSet: status.HTTP_400_BAD_REQUEST,
        NotFoundError: status.HTTP_404_NOT_FOUND,
        ConflictError: status.HTTP_409_CONFLICT,
        AlreadyBusy: status.HTTP_409_CONFLICT,
        ResourceExhausted: status.HTTP_429_TOO_MANY_REQUESTS,
        SlotPoolExhausted: status.HTTP_409_CONFLICT,
    }

    status_code = status_map.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail=error.to_dict()
    )
