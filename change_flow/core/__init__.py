"""Core configuration, errors and dependency wiring."""

from .config import Config, get_config
from .exceptions import (
    ServiceError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ResourceExhausted,
    InvalidSkillSet,
    AlreadyBusy,
    SlotPoolExhausted
)

__all__ = [
    "Config",
    "get_config",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ResourceExhausted",
    "InvalidSkillSet",
    "AlreadyBusy",
    "SlotPoolExhausted"
]
