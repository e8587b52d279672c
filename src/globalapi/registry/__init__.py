"""Versioned process-wide registry of API globals."""

from .global_registry import (
    Capability,
    DuplicateRegistration,
    GlobalRegistry,
    RegistrationError,
    VersionMismatch,
    get_global,
    register_global,
    unregister_global,
)
from .once import Once

__all__ = [
    "Capability",
    "DuplicateRegistration",
    "GlobalRegistry",
    "Once",
    "RegistrationError",
    "VersionMismatch",
    "get_global",
    "register_global",
    "unregister_global",
]
